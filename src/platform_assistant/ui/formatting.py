"""Inline markup used in assistant answers.

Answers mark emphasis with ``**double asterisks**`` and line breaks with
newlines. This module hides how that markup becomes terminal output.
"""

import re
from dataclasses import dataclass

from rich.text import Text

_MARKUP_PATTERN = re.compile(r"(\*\*.*?\*\*|\n)")


@dataclass(frozen=True)
class Segment:
    """A run of answer text."""

    text: str
    emphasis: bool = False
    line_break: bool = False


def parse_markup(content: str) -> list[Segment]:
    """Split answer text into plain, emphasized and line-break segments."""
    segments: list[Segment] = []
    for part in _MARKUP_PATTERN.split(content):
        if not part:
            continue
        if part == "\n":
            segments.append(Segment(text="\n", line_break=True))
        elif len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            segments.append(Segment(text=part[2:-2], emphasis=True))
        else:
            segments.append(Segment(text=part))
    return segments


def strip_markup(content: str) -> str:
    """Answer text without emphasis markers."""
    return "".join(segment.text for segment in parse_markup(content))


def render_markup(content: str, emphasis_style: str = "bold") -> Text:
    """Render answer text for a Rich console."""
    text = Text(overflow="fold")
    for segment in parse_markup(content):
        text.append(segment.text, style=emphasis_style if segment.emphasis else None)
    return text
