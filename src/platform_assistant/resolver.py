"""Response resolution: remote answer first, rule-based answer always.

The resolver is the only place that decides between the remote responder
and the intent matcher. Whatever happens on the remote path, callers get
an answer back.
"""

import logging
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .conversation import ConversationTurn
from .intents import IntentMatcher
from .llm import RemoteResponder

logger = logging.getLogger(__name__)


class ResolutionSource(str, Enum):
    """Which path produced an answer."""

    REMOTE = "remote"
    FALLBACK = "fallback"


class Resolution(BaseModel):
    """An answer tagged with the path that produced it.

    Attributes:
        source: Remote responder or rule-based fallback
        content: Answer text
        error: Message of the recovered remote error, if the fallback was forced by one
    """

    model_config = ConfigDict(frozen=True)

    source: ResolutionSource
    content: str
    error: str | None = Field(default=None, description="Recovered remote error")

    @property
    def is_fallback(self) -> bool:
        return self.source is ResolutionSource.FALLBACK

    def __str__(self) -> str:
        return self.content


class ResponseResolver:
    """Resolve user messages with automatic fallback.

    Hidden design decisions:
    - When the remote path is attempted at all
    - Which errors are recoverable (all of them)
    - How a failed remote attempt is reported (a warning log entry)
    """

    def __init__(
        self,
        matcher: IntentMatcher | None = None,
        responder: RemoteResponder | None = None
    ):
        """Initialize the resolver.

        Args:
            matcher: Rule-based matcher (defaults to the built-in rule table)
            responder: Remote responder, or None when unavailable
        """
        self._matcher = matcher or IntentMatcher()
        self._responder = responder

    @property
    def matcher(self) -> IntentMatcher:
        return self._matcher

    @property
    def responder(self) -> RemoteResponder | None:
        return self._responder

    def fallback(self, user_text: str, error: str | None = None) -> Resolution:
        """Answer from the rule table."""
        return Resolution(
            source=ResolutionSource.FALLBACK,
            content=self._matcher.classify(user_text),
            error=error,
        )

    async def resolve_tagged(
        self,
        user_text: str,
        history: Sequence[ConversationTurn],
        use_remote: bool,
        is_configured: bool
    ) -> Resolution:
        """Resolve a user message, reporting which path answered.

        Args:
            user_text: The new user message
            history: Recent turns, oldest first
            use_remote: Whether the user wants AI answers
            is_configured: Whether remote credentials are present

        Returns:
            Remote resolution on success, fallback resolution otherwise
        """
        if not (use_remote and is_configured):
            return self.fallback(user_text)

        if self._responder is None:
            logger.info("Remote path requested but no responder is available")
            return self.fallback(user_text)

        try:
            content = await self._responder.respond(user_text, history)
        except Exception as e:
            logger.warning("Remote answer failed, using rule-based answer: %s", e)
            return self.fallback(user_text, error=str(e) or type(e).__name__)

        if not content:
            logger.warning("Remote answer was empty, using rule-based answer")
            return self.fallback(user_text, error="empty content")

        return Resolution(source=ResolutionSource.REMOTE, content=content)

    async def resolve(
        self,
        user_text: str,
        history: Sequence[ConversationTurn],
        use_remote: bool,
        is_configured: bool
    ) -> str:
        """Resolve a user message to answer text. Never raises."""
        resolution = await self.resolve_tagged(user_text, history, use_remote, is_configured)
        return resolution.content
