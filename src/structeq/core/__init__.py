"""Core functionalities: leaf registry, reflection, and structural comparison.

Architecture Note:
    reflection/ and leaf/ are independent building blocks. comparison/ composes
    them: reflection reads the fields, the leaf registry decides how each field
    value is compared. The only process state is the global leaf registry.
"""

from structeq.core.comparison import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonWarning,
    compare,
    equals,
    equatable,
    is_equatable,
)
from structeq.core.leaf import (
    DEFAULT_LEAF_TYPES,
    LeafEq,
    LeafEquatable,
    LeafRegistry,
    LeafTypeMeta,
    get_registry,
    register_leaf,
    unregister_leaf,
)
from structeq.core.reflection import (
    FieldDescriptor,
    Reflectable,
    Structure,
    StructureKind,
    is_structured,
    reflect,
    structure_kind,
)

__all__ = [
    # Leaf
    "DEFAULT_LEAF_TYPES",
    "LeafEq",
    "LeafEquatable",
    "LeafRegistry",
    "LeafTypeMeta",
    "get_registry",
    "register_leaf",
    "unregister_leaf",
    # Reflection
    "FieldDescriptor",
    "Reflectable",
    "Structure",
    "StructureKind",
    "is_structured",
    "reflect",
    "structure_kind",
    # Comparison
    "ComparisonOutcome",
    "ComparisonResult",
    "ComparisonWarning",
    "compare",
    "equals",
    "equatable",
    "is_equatable",
]
