"""Comparison models: outcomes, results, and the diagnostic warning category."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ComparisonWarning(UserWarning):
    """Advisory diagnostic for invalid use of structural equality."""


class ComparisonOutcome(Enum):
    """Why a structural comparison ended the way it did."""

    EQUAL = auto()
    FIELD_MISMATCH = auto()  # A leaf equality function returned False
    FIELD_COUNT_MISMATCH = auto()  # Reflection produced different field counts
    FIELD_NAME_MISMATCH = auto()  # Reflection produced different names at one position
    TYPE_MISMATCH = auto()  # Operands (or one field pair) resolve to different types
    NOT_STRUCTURED = auto()  # Operand has no reflectable named fields
    UNREGISTERED_LEAF = auto()  # A field value is not a comparable leaf type

    @property
    def is_diagnostic(self) -> bool:
        """True for outcomes that indicate misuse rather than inequality."""
        return self in _DIAGNOSTIC_OUTCOMES


_DIAGNOSTIC_OUTCOMES = frozenset(
    {ComparisonOutcome.NOT_STRUCTURED, ComparisonOutcome.UNREGISTERED_LEAF}
)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a structural comparison.

    Attributes:
        equal: Final equality verdict.
        outcome: Reason for the verdict.
        field: Name of the field that decided the outcome, if any.
        value_type: Offending runtime type for diagnostic outcomes and type
            mismatches, if any.
        message: Human readable description of the outcome.
        fields_compared: Number of field pairs inspected by leaf comparison.
    """

    equal: bool
    outcome: ComparisonOutcome
    field: str | None = None
    value_type: type | None = None
    message: str = ""
    fields_compared: int = 0

    @property
    def is_diagnostic(self) -> bool:
        """True when the comparison was invalid rather than merely unequal."""
        return self.outcome.is_diagnostic

    def __bool__(self) -> bool:
        return self.equal
