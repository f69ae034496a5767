"""
Decision table mapping scan signals to a Big-O verdict.

Rules are evaluated top to bottom and the first that applies wins:
recursion shape without loops, then the divide-and-conquer text hints, then
plain loop shape. When loops and recursion coexist, loop shape decides.
"""
from __future__ import annotations

from typing import Callable, NamedTuple, Optional

from .models import ComplexityVerdict, ScanSignals


class ClassificationRule(NamedTuple):
    """Named predicate plus the verdict it produces."""

    name: str
    applies: Callable[[ScanSignals], bool]
    verdict: Callable[[ScanSignals], ComplexityVerdict]


def _calls(count: int) -> str:
    return f"{count} recursive call" if count == 1 else f"{count} recursive calls"


def _recursion_without_loops(signals: ScanSignals) -> bool:
    return signals.is_recursive and signals.loop_count == 0


def _loop_shape_note(signals: ScanSignals) -> tuple[str, ...]:
    if signals.is_recursive:
        return (
            f"Recursive function '{signals.function_name}' also found; "
            "loop structure takes precedence over recursion",
        )
    return ()


# Recursion, no loops

def _branching_recursion(signals: ScanSignals) -> ComplexityVerdict:
    calls = signals.recursive_call_sites
    return ComplexityVerdict(
        notation="O(2ⁿ)",
        explanation="Exponential recursion - each call makes multiple recursive calls.",
        steps=(
            f"Found recursive function with {_calls(calls)}",
            f"Each call branches into {calls} subproblems",
            "Total nodes in recursion tree: 2ⁿ",
        ),
    )


def _halving_recursion(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(log n)",
        explanation="Recursive function with divide-and-conquer pattern.",
        steps=(
            f"Found recursive function with {_calls(signals.recursive_call_sites)}",
            "Problem size reduces by half each call",
            "Total depth: log₂(n)",
        ),
    )


def _linear_recursion(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(n)",
        explanation="Linear recursion - single recursive call per step.",
        steps=(
            f"Found recursive function with {_calls(signals.recursive_call_sites)}",
            "Makes one recursive call per step",
            "Recursion depth grows proportionally to n",
        ),
    )


# Text hints layered over a single loop

def _merge_divide_applies(signals: ScanSignals) -> bool:
    return (
        signals.max_nesting == 1
        and signals.has_merge_hint
        and (signals.has_divide_by_two or signals.is_recursive)
    )


def _merge_divide(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(n log n)",
        explanation="Divide-and-conquer pattern with a linear merge step.",
        steps=(
            "Found merge/split/divide pattern with a single loop",
            "Input is split in half repeatedly (log n levels)",
            "The loop processes n elements at each level",
            "Total: n × log n",
        ),
    )


def _halving_loop_applies(signals: ScanSignals) -> bool:
    return (
        signals.loop_count == 1
        and signals.max_nesting == 1
        and signals.has_divide_by_two
        and not signals.is_recursive
    )


def _halving_loop(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(log n)",
        explanation="Single loop with divide-by-two pattern.",
        steps=(
            "Found 1 loop",
            "Loop reduces problem size by half each iteration",
            "Total iterations: log₂(n)",
        ),
    )


# Loop shape

def _no_loops(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(1)",
        explanation="No loops detected, so the running time does not scale with input size.",
        steps=(
            "No loops or recursive calls detected",
            "Operations execute in fixed time",
        ),
    )


def _single_loop(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(n)",
        explanation="Single level of looping over the input.",
        steps=(
            f"Found {signals.loop_count} loop(s) with no nesting",
            "At most one loop runs over up to n elements",
        )
        + _loop_shape_note(signals),
    )


def _nested_loops(signals: ScanSignals) -> ComplexityVerdict:
    return ComplexityVerdict(
        notation="O(n²)",
        explanation="Two nested loops over the input.",
        steps=(
            "Found 2 levels of loop nesting",
            "The outer loop runs up to n times and the inner loop runs up to n times for each outer iteration",
            "Total iterations: n × n = n²",
        )
        + _loop_shape_note(signals),
    )


def _deep_nesting(signals: ScanSignals) -> ComplexityVerdict:
    steps = (
        f"Found {signals.max_nesting} levels of loop nesting",
        "Each loop iterates up to n times",
        "Total iterations: n × n × n = n³",
    )
    if signals.max_nesting > 3:
        steps += ("Nesting deeper than three levels is approximated as cubic time",)
    return ComplexityVerdict(
        notation="O(n³)",
        explanation="Three or more nested loops; approximated as cubic time.",
        steps=steps + _loop_shape_note(signals),
    )


RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "branching-recursion",
        lambda s: _recursion_without_loops(s) and s.recursive_call_sites >= 2,
        _branching_recursion,
    ),
    ClassificationRule(
        "halving-recursion",
        lambda s: _recursion_without_loops(s) and s.has_divide_by_two,
        _halving_recursion,
    ),
    ClassificationRule("linear-recursion", _recursion_without_loops, _linear_recursion),
    ClassificationRule("merge-divide", _merge_divide_applies, _merge_divide),
    ClassificationRule("halving-loop", _halving_loop_applies, _halving_loop),
    ClassificationRule("no-loops", lambda s: s.loop_count == 0, _no_loops),
    ClassificationRule("single-loop", lambda s: s.max_nesting <= 1, _single_loop),
    ClassificationRule("nested-loops", lambda s: s.max_nesting == 2, _nested_loops),
    ClassificationRule("deep-nesting", lambda s: True, _deep_nesting),
)


def select_rule(signals: ScanSignals, rules: Optional[tuple[ClassificationRule, ...]] = None) -> ClassificationRule:
    """Return the first rule in the table that applies to signals."""
    for rule in RULES if rules is None else rules:
        if rule.applies(signals):
            return rule
    raise LookupError("No classification rule applies")


def classify_signals(signals: ScanSignals) -> ComplexityVerdict:
    """
    Map scan signals to a verdict.

    Args:
        signals: Output of the structural scan

    Returns:
        ComplexityVerdict from the first matching rule
    """
    return select_rule(signals).verdict(signals)
