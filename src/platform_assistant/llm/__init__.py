from .base import RemoteResponder
from .factory import create_remote_responder
from .models import LLMResponse, RemoteRequestConfig
from .providers import AzureOpenAIResponder

__all__ = [
    "AzureOpenAIResponder",
    "LLMResponse",
    "RemoteRequestConfig",
    "RemoteResponder",
    "create_remote_responder",
]
