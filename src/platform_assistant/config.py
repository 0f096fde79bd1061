"""Assistant configuration.

Centralizes constants and the settings consumed by the remote responder.
Components receive settings explicitly; only ``AssistantSettings.from_env``
looks at environment variables.
"""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Conversation window sent to the remote responder (turns, any role)
HISTORY_WINDOW = 6

# Remote chat-completion defaults
DEFAULT_API_VERSION = "2024-02-15-preview"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 800

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


class LogLevel:
    """Log level constants matching the standard logging hierarchy.

    DEBUG < INFO < WARNING < ERROR
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns WARNING if invalid."""
        return cls._from_string.get(level_str.strip().lower(), cls.WARNING)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


class AssistantSettings(BaseModel):
    """Settings for the help assistant.

    The remote path is only available when endpoint, API key and deployment
    name are all present. Missing credentials never stop the assistant; it
    answers from the rule table instead.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str | None = Field(default=None, description="Azure OpenAI resource endpoint")
    api_key: str | None = Field(default=None, repr=False, description="Azure OpenAI API key")
    deployment_name: str | None = Field(default=None, description="Chat model deployment name")
    api_version: str = Field(default=DEFAULT_API_VERSION, description="Azure OpenAI API version")
    use_remote: bool = Field(default=True, description="Prefer AI answers when configured")
    history_window: int = Field(default=HISTORY_WINDOW, ge=1, description="Turns sent as context")
    log_level: str = Field(default="warning", description="debug, info, warning or error")

    @property
    def is_configured(self) -> bool:
        """Whether every credential needed for the remote path is present."""
        return bool(self.endpoint and self.api_key and self.deployment_name)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "AssistantSettings":
        """Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Environment variables:
            AZURE_OPENAI_ENDPOINT: Resource endpoint
            AZURE_OPENAI_API_KEY: API key
            AZURE_OPENAI_DEPLOYMENT_NAME: Chat deployment
            AZURE_OPENAI_API_VERSION: API version (default: 2024-02-15-preview)
            ASSISTANT_USE_AI: Use the remote path when configured (default: true)
            ASSISTANT_LOG_LEVEL: Log level (default: warning)
        """
        source = os.environ if env is None else env
        return cls(
            endpoint=_clean(source.get("AZURE_OPENAI_ENDPOINT")),
            api_key=_clean(source.get("AZURE_OPENAI_API_KEY")),
            deployment_name=_clean(source.get("AZURE_OPENAI_DEPLOYMENT_NAME")),
            api_version=_clean(source.get("AZURE_OPENAI_API_VERSION")) or DEFAULT_API_VERSION,
            use_remote=_bool(source.get("ASSISTANT_USE_AI"), True),
            log_level=_clean(source.get("ASSISTANT_LOG_LEVEL")) or "warning",
        )
