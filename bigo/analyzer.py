"""
Offline Big-O analyzer.

Runs the known-example lookup, then the heuristic pipeline: shape detection,
structural scan, call-graph probe, halving detection and the decision table.
Pure and synchronous; safe to call from many threads at once.
"""
from __future__ import annotations

import logging

from .classifier import classify_signals, select_rule
from .errors import EmptySnippetError
from .examples import lookup_known
from .models import ComplexityAnalysis, ComplexityVerdict
from .signals import scan

logger = logging.getLogger("bigo.analyzer")


ACCURACY_DISCLAIMER = (
    "This is an automated analysis based on pattern detection and may not be "
    "accurate for complex algorithms. The analyzer supports multiple languages "
    "(JavaScript, Python, Java, C++, etc.) by detecting common patterns like loops, "
    "recursion, and divide-and-conquer. For more accurate results, especially with "
    "complex or optimized code, use AI analysis mode or perform manual review."
)


def _require_code(snippet: str) -> None:
    if not snippet or not snippet.strip():
        raise EmptySnippetError()


def analyze(snippet: str) -> ComplexityAnalysis:
    """
    Analyze a snippet and report how the verdict was reached.

    Args:
        snippet: Source code in any language

    Returns:
        ComplexityAnalysis with the verdict, its source and, for heuristic
        verdicts, the scan signals and the accuracy disclaimer

    Raises:
        EmptySnippetError: If the snippet is empty or whitespace only
    """
    _require_code(snippet)

    known = lookup_known(snippet)
    if known is not None:
        logger.debug("Matched bundled example %r", known.name)
        return ComplexityAnalysis(
            verdict=known.verdict,
            source="known-example",
            matched_example=known.name,
        )

    signals = scan(snippet)
    rule = select_rule(signals)
    logger.debug("Rule %s fired for signals %s", rule.name, signals.model_dump())

    return ComplexityAnalysis(
        verdict=rule.verdict(signals),
        source="heuristic",
        signals=signals,
        disclaimer=ACCURACY_DISCLAIMER,
    )


def classify(snippet: str) -> ComplexityVerdict:
    """
    Classify a snippet's time complexity.

    Raises:
        EmptySnippetError: If the snippet is empty or whitespace only
    """
    _require_code(snippet)

    known = lookup_known(snippet)
    if known is not None:
        return known.verdict
    return classify_signals(scan(snippet))
