"""Offline Big-O complexity analysis."""

__version__ = "1.0.0"

from .analyzer import ACCURACY_DISCLAIMER, analyze, classify
from .errors import EmptySnippetError
from .examples import EXAMPLES, list_examples, lookup_known
from .models import ComplexityAnalysis, ComplexityVerdict, KnownExample, ScanSignals
from .signals import scan

__all__ = [
    "ACCURACY_DISCLAIMER",
    "ComplexityAnalysis",
    "ComplexityVerdict",
    "EXAMPLES",
    "EmptySnippetError",
    "KnownExample",
    "ScanSignals",
    "analyze",
    "classify",
    "list_examples",
    "lookup_known",
    "scan",
]
