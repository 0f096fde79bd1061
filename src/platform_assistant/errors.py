"""Exceptions raised by the help assistant."""


class AssistantError(Exception):
    """Base exception for assistant errors."""


class ConfigurationError(AssistantError):
    """A required credential or setting is missing."""


class RemoteCallError(AssistantError):
    """The remote chat-completion call failed or returned no content."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SubmissionRejectedError(AssistantError):
    """A submission arrived while input is disabled."""


class WidgetStateError(AssistantError):
    """The requested widget transition is not valid in the current state."""
