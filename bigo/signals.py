"""
Structural scan: turn a snippet into ``ScanSignals``.
"""
from __future__ import annotations

from .halving import has_divide_by_two, has_merge_hint
from .models import ScanSignals
from .probe import probe
from .shape import is_indentation_based
from .tracking import tracker_for


def scan(snippet: str) -> ScanSignals:
    """
    Compute the structural signals of a snippet.

    Single pass per detector, no execution, never raises.

    Args:
        snippet: Source code in any language

    Returns:
        ScanSignals for the snippet
    """
    indentation_based = is_indentation_based(snippet)
    tracker = tracker_for(indentation_based).feed(snippet)
    function_name, call_sites = probe(snippet)

    return ScanSignals(
        loop_count=tracker.loop_count,
        max_nesting=tracker.max_depth_seen,
        is_indentation_based=indentation_based,
        function_name=function_name,
        recursive_call_sites=call_sites,
        has_divide_by_two=has_divide_by_two(snippet),
        has_merge_hint=has_merge_hint(snippet),
    )
