"""Front-end facing pieces of the assistant.

Module structure:
- widget.py: Widget state machine and submission flow
- formatting.py: Inline markup parsing and Rich rendering
"""

from .formatting import Segment, parse_markup, render_markup, strip_markup
from .widget import STATUS_OFFLINE, STATUS_REMOTE, ChatWidget, WidgetState

__all__ = [
    "ChatWidget",
    "STATUS_OFFLINE",
    "STATUS_REMOTE",
    "Segment",
    "WidgetState",
    "parse_markup",
    "render_markup",
    "strip_markup",
]
