"""
Data models for offline complexity analysis.

Pydantic models shared by the analyzer, the HTTP layer and the LLM provider.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Notation = Literal[
    "O(1)",
    "O(log n)",
    "O(n)",
    "O(n log n)",
    "O(n²)",
    "O(n³)",
    "O(2ⁿ)",
]

NOTATIONS: tuple[str, ...] = (
    "O(1)",
    "O(log n)",
    "O(n)",
    "O(n log n)",
    "O(n²)",
    "O(n³)",
    "O(2ⁿ)",
)


class ScanSignals(BaseModel):
    """
    Structural summary of a snippet.

    Produced by the scanner, call-graph probe and halving detector.
    Identical text always yields identical signals.
    """

    model_config = ConfigDict(frozen=True)

    loop_count: int = Field(default=0, ge=0, description="Loop headers found")
    max_nesting: int = Field(default=0, ge=0, description="Deepest simultaneous loop nesting")
    is_indentation_based: bool = Field(default=False, description="Python-like block structure")
    function_name: Optional[str] = Field(default=None, description="Primary function name, if any")
    recursive_call_sites: int = Field(default=0, ge=0, description="Self-calls beyond the declaration")
    has_divide_by_two: bool = Field(default=False, description="Halving pattern present")
    has_merge_hint: bool = Field(default=False, description="Mentions merge/split/divide")

    @property
    def is_recursive(self) -> bool:
        return self.recursive_call_sites >= 1


class ComplexityVerdict(BaseModel):
    """Big-O verdict with a one-sentence explanation and justification steps."""

    model_config = ConfigDict(frozen=True)

    notation: Notation = Field(..., description="Big-O time complexity")
    explanation: str = Field(..., description="One-sentence explanation")
    steps: tuple[str, ...] = Field(default=(), description="Ordered justification steps")


class KnownExample(BaseModel):
    """Bundled teaching example, optionally with a pre-authored verdict."""

    model_config = ConfigDict(frozen=True)

    name: str
    language: str
    description: str
    code: str
    verdict: Optional[ComplexityVerdict] = None


class ComplexityAnalysis(BaseModel):
    """Verdict plus how it was reached."""

    verdict: ComplexityVerdict
    source: Literal["known-example", "heuristic"] = Field(
        ..., description="Whether the verdict came from the example table or the heuristic"
    )
    signals: Optional[ScanSignals] = Field(default=None, description="Scan signals (heuristic only)")
    matched_example: Optional[str] = Field(default=None, description="Name of the matched example")
    disclaimer: Optional[str] = Field(default=None, description="Accuracy warning for heuristic verdicts")


class AIVerdict(BaseModel):
    """
    Verdict returned by the language-model analysis path.

    Same shape as ComplexityVerdict, but the notation is free text because the
    model may answer outside the offline enumeration (e.g. O(n!)).
    """

    notation: str = Field(..., min_length=1, description="Big-O notation")
    explanation: str = Field(default="", description="Brief explanation")
    steps: list[str] = Field(default_factory=list, description="Analysis steps")
