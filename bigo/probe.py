"""
Call-graph probe: find the snippet's own function and count its self-calls.
"""
from __future__ import annotations

import re
from typing import Optional

from .rules import PatternRule, first_match


# Tried in order; the first rule matching anywhere wins. Group 1 is the name.
DECLARATION_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        "qualified",
        re.compile(r"(?:function|def|public|private|protected|static)\s+[\w<>\[\]]+\s+(\w+)\s*\("),
    ),
    PatternRule(
        "const-function",
        re.compile(r"(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?(?:function\b|\([^)]*\)\s*=>|\w+\s*=>)"),
    ),
    PatternRule(
        "assigned-function",
        re.compile(r"(\w+)\s*=\s*function\s*\("),
    ),
    PatternRule(
        "bare",
        re.compile(r"\b(?:function|def)\s+(\w+)\s*\("),
    ),
    PatternRule(
        "typed",
        re.compile(
            r"^[ \t]*(?:(?:static|inline|unsigned|const)\s+)*"
            r"(?:void|int|long|short|double|float|bool|boolean|char|string|auto|size_t)\s*[*&]?\s+"
            r"(\w+)\s*\([^;{]*\)\s*(?:const\s*)?\{?\s*$",
            re.MULTILINE,
        ),
    ),
)


def find_declaration(snippet: str) -> Optional[tuple[str, str, str]]:
    """
    Locate the snippet's primary function declaration.

    Returns:
        (rule name, function name, matched declaration text), or None
    """
    hit = first_match(DECLARATION_RULES, snippet)
    if hit is None:
        return None
    rule, match = hit
    return rule.name, match.group(1), match.group(0)


def find_function_name(snippet: str) -> Optional[str]:
    """Best-guess name of the snippet's primary function."""
    declaration = find_declaration(snippet)
    return declaration[1] if declaration else None


def call_pattern(name: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(name)}\s*\(")


def count_recursive_calls(snippet: str, name: Optional[str], declaration: str = "") -> int:
    """
    Count self-calls of ``name`` in snippet.

    Every ``name(`` occurrence counts, minus one for the declaration when the
    declaration itself is written as ``name(``. Arrow-function and other
    assignment forms have no such occurrence, so nothing is subtracted.

    Args:
        snippet: Snippet text
        name: Function name from the probe, or None
        declaration: Text of the matched declaration

    Returns:
        Number of recursive call sites (the branching factor), never negative
    """
    if not name:
        return 0
    pattern = call_pattern(name)
    total = len(pattern.findall(snippet))
    if not declaration or pattern.search(declaration):
        total -= 1
    return max(0, total)


def probe(snippet: str) -> tuple[Optional[str], int]:
    """
    Find the primary function and its recursive call sites.

    A snippet with no recognizable declaration is treated as non-recursive.
    """
    declaration = find_declaration(snippet)
    if declaration is None:
        return None, 0
    _, name, text = declaration
    return name, count_recursive_calls(snippet, name, text)
