"""
Named text rules.

Every regex heuristic in the analyzer is a ``PatternRule`` kept in an ordered
tuple, so precedence is visible in one place and each rule can be tested on
its own. Matching goes through ``re.Pattern.search``, which keeps no state
between calls.
"""
from __future__ import annotations

import re
from typing import Iterable, NamedTuple, Optional


class PatternRule(NamedTuple):
    """A regex with a stable name."""

    name: str
    pattern: re.Pattern

    def search(self, text: str) -> Optional[re.Match]:
        return self.pattern.search(text)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def first_match(
    rules: Iterable[PatternRule], text: str
) -> Optional[tuple[PatternRule, re.Match]]:
    """
    Return the first rule (in table order) that matches anywhere in text.

    Args:
        rules: Ordered rule table
        text: Text to search

    Returns:
        (rule, match) for the winning rule, or None
    """
    for rule in rules:
        match = rule.search(text)
        if match:
            return rule, match
    return None


def matching_names(rules: Iterable[PatternRule], text: str) -> list[str]:
    """Names of every rule that matches text, in table order."""
    return [rule.name for rule in rules if rule.matches(text)]
