"""Reflection models: field descriptors, structure shapes, and the reflection hook."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class StructureKind(Enum):
    """Shape of a structured value as recognised by reflection."""

    DATACLASS = auto()
    PYDANTIC = auto()
    NAMED_TUPLE = auto()
    CUSTOM = auto()  # Supplies its own fields via __equatable_fields__
    OBJECT = auto()  # Plain class instance (__dict__ / __slots__)


@runtime_checkable
class Reflectable(Protocol):
    """Types that enumerate their own comparable fields.

    Yielded pairs are used verbatim, in order. A pair whose name is None or
    empty is anonymous and is not compared.
    """

    def __equatable_fields__(self) -> Iterable[tuple[str | None, Any]]: ...


@dataclass(slots=True, frozen=True)
class FieldDescriptor:
    """A (name, value) pair read from a structured instance."""

    name: str | None
    value: Any

    @property
    def is_anonymous(self) -> bool:
        """True when the field has no usable name."""
        return not self.name


@dataclass(slots=True, frozen=True)
class Structure:
    """Ordered fields of one structured instance."""

    kind: StructureKind
    fields: tuple[FieldDescriptor, ...]

    def named_fields(self) -> tuple[FieldDescriptor, ...]:
        """Return fields with anonymous descriptors filtered out."""
        return tuple(f for f in self.fields if not f.is_anonymous)
