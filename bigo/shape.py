"""
Language-shape detection: indentation-delimited or brace-delimited blocks.
"""
from __future__ import annotations

import re

from .rules import PatternRule, matching_names


# A line counts only if it carries no opening brace.
INDENTATION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        "def-header",
        re.compile(r"^[ \t]*def\s+\w+\s*\([^{\n]*$", re.MULTILINE),
    ),
    PatternRule(
        "for-in-colon",
        re.compile(r"^[ \t]*for\s+\w+(?:\s*,\s*\w+)*\s+in\s+[^{\n]*:", re.MULTILINE),
    ),
)


def indentation_evidence(snippet: str) -> list[str]:
    """Names of the indentation rules that fire on snippet."""
    return matching_names(INDENTATION_RULES, snippet)


def is_indentation_based(snippet: str) -> bool:
    """
    Decide whether snippet uses Python-like indentation blocks.

    Empty or ambiguous text is treated as brace-based.
    """
    return bool(indentation_evidence(snippet))
