"""Bounded view over the conversation log."""

from collections.abc import Iterable, Iterator

from ..config import HISTORY_WINDOW
from .models import ConversationTurn, Role


class ConversationContext:
    """Append-only log of conversation turns.

    The full log lives for the whole session; only the window returned by
    ``recent_window`` is ever sent to the remote responder.
    """

    def __init__(self, turns: Iterable[ConversationTurn] | None = None) -> None:
        self._turns: list[ConversationTurn] = list(turns or [])

    def append(self, turn: ConversationTurn) -> None:
        """Add a turn at the end of the log."""
        self._turns.append(turn)

    def record(self, role: Role, content: str) -> ConversationTurn:
        """Create a turn from role and content and append it."""
        turn = ConversationTurn(role=role, content=content)
        self.append(turn)
        return turn

    def recent_window(self, n: int = HISTORY_WINDOW) -> list[ConversationTurn]:
        """Get the last ``n`` turns in original order.

        Args:
            n: Maximum number of turns to return

        Returns:
            New list with at most ``n`` turns, oldest first

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Window size must be non-negative, got {n}")
        if n == 0:
            return []
        return self._turns[-n:]

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        """All turns, oldest first."""
        return tuple(self._turns)

    def clear(self) -> None:
        self._turns = []

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(tuple(self._turns))
