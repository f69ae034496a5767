"""
Divide-and-conquer detector.

Whole-snippet presence test for textual evidence that a range is halved.
"""
from __future__ import annotations

import re

from .rules import PatternRule, matching_names


HALVING_RULES: tuple[PatternRule, ...] = (
    PatternRule("divide-by-two", re.compile(r"/\s*=?\s*2(?!\d)")),
    PatternRule("floor-divide-by-two", re.compile(r"//\s*=?\s*2(?!\d)")),
    PatternRule("shift-right-by-one", re.compile(r">{2,3}\s*=?\s*1(?!\d)")),
    PatternRule("floor-of-midpoint", re.compile(r"floor\s*\(.*?/\s*2(?!\d)")),
    PatternRule(
        "midpoint-of-bounds",
        re.compile(r"\([^()]+\+[^()]+\)\s*(?://?\s*2|>{2,3}\s*1)(?!\d)"),
    ),
)

MERGE_HINT = re.compile(r"merge|split|divide", re.IGNORECASE)


def halving_evidence(snippet: str) -> list[str]:
    """Names of the halving rules that fire on snippet."""
    return matching_names(HALVING_RULES, snippet)


def has_divide_by_two(snippet: str) -> bool:
    return any(rule.matches(snippet) for rule in HALVING_RULES)


def has_merge_hint(snippet: str) -> bool:
    """Whether snippet mentions merging, splitting or dividing."""
    return MERGE_HINT.search(snippet) is not None
