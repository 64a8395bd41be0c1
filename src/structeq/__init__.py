"""structeq: automatic field-by-field equality via runtime reflection.

Usage:
    from dataclasses import dataclass

    from structeq import equatable, equals

    @equatable(leaf=True)
    @dataclass
    class Point:
        x: int
        y: int

    @equatable
    @dataclass
    class Segment:
        start: Point
        end: Point

    Segment(Point(0, 0), Point(1, 1)) == Segment(Point(0, 0), Point(1, 1))  # True
    equals(Point(0, 0), Point(0, 1))  # False
"""

__version__ = "0.1.0"

# Configuration
from structeq.config import (
    ComparatorSettings,
    DiagnosticMode,
    get_settings,
)

# Core primitives
from structeq.core import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonWarning,
    FieldDescriptor,
    LeafEquatable,
    LeafRegistry,
    Reflectable,
    Structure,
    StructureKind,
    compare,
    equals,
    equatable,
    get_registry,
    is_equatable,
    is_structured,
    reflect,
    register_leaf,
    unregister_leaf,
)

__all__ = [
    # Version
    "__version__",
    # Comparison
    "equals",
    "compare",
    "equatable",
    "is_equatable",
    "ComparisonResult",
    "ComparisonOutcome",
    "ComparisonWarning",
    # Leaf types
    "register_leaf",
    "unregister_leaf",
    "get_registry",
    "LeafRegistry",
    "LeafEquatable",
    # Reflection
    "reflect",
    "is_structured",
    "FieldDescriptor",
    "Structure",
    "StructureKind",
    "Reflectable",
    # Configuration
    "ComparatorSettings",
    "DiagnosticMode",
    "get_settings",
]
