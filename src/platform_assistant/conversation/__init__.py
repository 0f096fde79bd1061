"""Conversation module.

Holds the message models and the turn log that feeds the remote responder.
"""

from .context import ConversationContext
from .models import ChatMessage, ConversationTurn, Role

__all__ = [
    "ChatMessage",
    "ConversationContext",
    "ConversationTurn",
    "Role",
]
