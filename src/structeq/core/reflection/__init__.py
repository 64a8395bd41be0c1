"""Reflection functionality: field descriptors and structure readers."""

from structeq.core.reflection.core import (
    is_structured,
    is_structured_class,
    reflect,
    structure_kind,
)
from structeq.core.reflection.models import (
    FieldDescriptor,
    Reflectable,
    Structure,
    StructureKind,
)

__all__ = [
    # Models
    "FieldDescriptor",
    "Reflectable",
    "Structure",
    "StructureKind",
    # Core
    "reflect",
    "is_structured",
    "is_structured_class",
    "structure_kind",
]
