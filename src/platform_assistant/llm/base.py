from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..conversation import ConversationTurn


class RemoteResponder(ABC):
    """Abstract base class for remote answer providers.

    This module hides the design decision of which chat-completion service
    answers the user. Implementations handle:
    - API client setup and authentication
    - Request assembly (system prompt, history window, user message)
    - Translating transport failures into ``RemoteCallError``

    Supports async context manager protocol for proper resource cleanup:
        async with responder:
            answer = await responder.respond("How do I start?", [])
    """

    @abstractmethod
    async def respond(self, user_text: str, history: Sequence[ConversationTurn]) -> str:
        """Answer a user message in the context of recent turns.

        Args:
            user_text: The new user message
            history: Earlier turns, oldest first

        Returns:
            Non-empty answer text

        Raises:
            ConfigurationError: If a setting needed for the call is missing
            RemoteCallError: On transport failure, non-success status or empty reply
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "RemoteResponder":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
