"""Rule-based intent matching.

Answers questions about the platform without any network access.
"""

from .matcher import IntentMatcher
from .rules import DEFAULT, RULES, Rule, all_of, always, any_of, contains

__all__ = [
    "DEFAULT",
    "IntentMatcher",
    "RULES",
    "Rule",
    "all_of",
    "always",
    "any_of",
    "contains",
]
