"""Chat widget state and submission flow.

Hides the open/minimize state machine and the rule that only one answer
may be pending at a time. Rendering is left to the front end.
"""

import logging
from enum import Enum

from ..config import HISTORY_WINDOW
from ..conversation import ChatMessage, ConversationContext, Role
from ..errors import SubmissionRejectedError, WidgetStateError
from ..resolver import Resolution, ResponseResolver

logger = logging.getLogger(__name__)

STATUS_REMOTE = "AI-powered assistance"
STATUS_OFFLINE = "How can I help you today?"


class WidgetState(str, Enum):
    """Visibility of the chat widget."""

    CLOSED = "closed"
    EXPANDED = "expanded"
    MINIMIZED = "minimized"


class ChatWidget:
    """One conversation with the help assistant.

    Owns the transcript shown to the user, the conversation context fed to
    the remote responder and the ``awaiting_response`` guard.

    Example:
        widget = ChatWidget(ResponseResolver(responder=responder), is_configured=True)
        widget.open()
        reply = await widget.submit("How do I convert COBOL to Python?")
    """

    def __init__(
        self,
        resolver: ResponseResolver,
        context: ConversationContext | None = None,
        *,
        is_configured: bool = False,
        use_remote: bool = True,
        greeting: str | None = None,
        history_window: int = HISTORY_WINDOW
    ) -> None:
        if greeting is None:
            from ..prompts import get_greeting
            greeting = get_greeting()

        self._resolver = resolver
        self._context = context if context is not None else ConversationContext()
        self._is_configured = is_configured
        self._use_remote = use_remote
        self._history_window = history_window
        self._state = WidgetState.CLOSED
        self._awaiting_response = False
        self._last_resolution: Resolution | None = None
        self._messages: list[ChatMessage] = [
            ChatMessage(role=Role.ASSISTANT, content=greeting)
        ]

    # -------------------------
    # State machine
    # -------------------------
    @property
    def state(self) -> WidgetState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is not WidgetState.CLOSED

    @property
    def is_minimized(self) -> bool:
        return self._state is WidgetState.MINIMIZED

    def open(self) -> None:
        """Open the widget expanded. Does nothing if already open."""
        if self._state is WidgetState.CLOSED:
            self._state = WidgetState.EXPANDED

    def close(self) -> None:
        self._state = WidgetState.CLOSED

    def toggle_minimize(self) -> WidgetState:
        """Switch between expanded and minimized.

        Raises:
            WidgetStateError: If the widget is closed
        """
        if self._state is WidgetState.CLOSED:
            raise WidgetStateError("Cannot minimize a closed widget")
        if self._state is WidgetState.EXPANDED:
            self._state = WidgetState.MINIMIZED
        else:
            self._state = WidgetState.EXPANDED
        return self._state

    # -------------------------
    # Remote toggle
    # -------------------------
    @property
    def is_configured(self) -> bool:
        return self._is_configured

    @property
    def use_remote(self) -> bool:
        return self._use_remote

    def toggle_remote(self) -> bool:
        """Flip the AI preference and return the new value."""
        self._use_remote = not self._use_remote
        return self._use_remote

    @property
    def remote_active(self) -> bool:
        """Whether submissions will try the remote responder."""
        return self._is_configured and self._use_remote

    @property
    def status_line(self) -> str:
        return STATUS_REMOTE if self.remote_active else STATUS_OFFLINE

    # -------------------------
    # Conversation
    # -------------------------
    @property
    def awaiting_response(self) -> bool:
        return self._awaiting_response

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Transcript shown to the user, greeting first."""
        return tuple(self._messages)

    @property
    def context(self) -> ConversationContext:
        return self._context

    @property
    def resolver(self) -> ResponseResolver:
        return self._resolver

    @property
    def last_resolution(self) -> Resolution | None:
        return self._last_resolution

    def can_submit(self, text: str) -> bool:
        """Whether the input would currently accept this text."""
        return (
            self._state is WidgetState.EXPANDED
            and not self._awaiting_response
            and bool(text.strip())
        )

    async def submit(self, text: str) -> ChatMessage | None:
        """Send a user message and wait for the answer.

        Args:
            text: Raw user input

        Returns:
            The assistant message, or None if the input was blank

        Raises:
            SubmissionRejectedError: If an answer is pending or the input is hidden
        """
        if not text.strip():
            return None
        if self._awaiting_response:
            raise SubmissionRejectedError("An answer is already pending")
        if self._state is not WidgetState.EXPANDED:
            raise SubmissionRejectedError(f"Input is not available while {self._state.value}")

        self._awaiting_response = True
        try:
            self._messages.append(ChatMessage(role=Role.USER, content=text))
            history = self._context.recent_window(self._history_window)

            resolution = await self._resolver.resolve_tagged(
                text,
                history,
                use_remote=self._use_remote,
                is_configured=self._is_configured,
            )
            if resolution.is_fallback and self.remote_active:
                logger.info("Answered from rules after remote failure: %s", resolution.error)

            self._context.record(Role.USER, text)
            self._context.record(Role.ASSISTANT, resolution.content)
            reply = ChatMessage(role=Role.ASSISTANT, content=resolution.content)
            self._messages.append(reply)
            self._last_resolution = resolution
            return reply
        finally:
            self._awaiting_response = False
