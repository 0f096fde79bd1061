"""
Platform Assistant: a help assistant for the Code Migration Platform.

Answers questions with an Azure OpenAI deployment when one is configured
and falls back to a keyword rule table whenever the remote path is off or
fails. Each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .config import AssistantSettings
from .conversation import ChatMessage, ConversationContext, ConversationTurn, Role
from .errors import (
    AssistantError,
    ConfigurationError,
    RemoteCallError,
    SubmissionRejectedError,
    WidgetStateError,
)
from .intents import IntentMatcher, Rule
from .llm import AzureOpenAIResponder, RemoteRequestConfig, RemoteResponder, create_remote_responder
from .resolver import Resolution, ResolutionSource, ResponseResolver
from .ui import ChatWidget, WidgetState

__all__ = [
    "AssistantError",
    "AssistantSettings",
    "AzureOpenAIResponder",
    "ChatMessage",
    "ChatWidget",
    "ConfigurationError",
    "ConversationContext",
    "ConversationTurn",
    "IntentMatcher",
    "RemoteCallError",
    "RemoteRequestConfig",
    "RemoteResponder",
    "Resolution",
    "ResolutionSource",
    "ResponseResolver",
    "Role",
    "Rule",
    "SubmissionRejectedError",
    "WidgetState",
    "WidgetStateError",
    "create_remote_responder",
]
