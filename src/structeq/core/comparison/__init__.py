"""Comparison functionality: results, comparator functions, and decorator."""

from structeq.core.comparison.core import compare, equals, equatable, is_equatable
from structeq.core.comparison.models import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonWarning,
)

__all__ = [
    # Models
    "ComparisonOutcome",
    "ComparisonResult",
    "ComparisonWarning",
    # Core
    "compare",
    "equals",
    "equatable",
    "is_equatable",
]
