"""Deterministic intent matcher used as the guaranteed fallback."""

from collections.abc import Sequence

from .rules import DEFAULT, RULES, Rule


class IntentMatcher:
    """First-match keyword classifier over an ordered rule table.

    Hidden design decisions:
    - Text normalization (case folding)
    - Rule evaluation order
    - The catch-all answer used when nothing else matches
    """

    def __init__(
        self,
        rules: Sequence[Rule] | None = None,
        default: Rule = DEFAULT
    ):
        """Initialize the matcher.

        Args:
            rules: Rules in priority order (defaults to the built-in table)
            default: Catch-all rule appended after ``rules``
        """
        self._rules: tuple[Rule, ...] = tuple(RULES if rules is None else rules) + (default,)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """All rules in evaluation order, catch-all last."""
        return self._rules

    def match(self, user_text: str) -> Rule:
        """Return the first rule whose predicate holds for the text."""
        text = user_text.casefold()
        for rule in self._rules[:-1]:
            if rule.matches(text):
                return rule
        return self._rules[-1]

    def classify(self, user_text: str) -> str:
        """Return the canned answer for the text. Never fails."""
        return self.match(user_text).response
