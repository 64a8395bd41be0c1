"""Leaf models: protocols and metadata.

A leaf is a value compared as a whole, with a native equality function,
rather than being reflected into fields.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

LeafEq = Callable[[Any, Any], bool]


@runtime_checkable
class LeafEquatable(Protocol):
    """Values that know how to compare themselves as leaves.

    Types implementing this protocol are comparable leaves without being
    registered. Registered entries take precedence.
    """

    def __leaf_eq__(self, other: Any) -> bool: ...


@dataclass(slots=True, frozen=True)
class LeafTypeMeta:
    """Metadata for a resolved comparable leaf type."""

    leaf_type: type
    eq: LeafEq
    type_name: str
