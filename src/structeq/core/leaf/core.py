"""Leaf registry, decorator, and defaults.

Usage:
    from decimal import Decimal

    register_leaf(Decimal)  # native == is used

    @register_leaf(eq=lambda a, b: a.casefold() == b.casefold())
    class CaselessName(str):
        pass
"""

from __future__ import annotations

import datetime
import enum
import operator
import uuid
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import Any, overload

from structeq.core.leaf.models import LeafEq, LeafEquatable, LeafTypeMeta

DEFAULT_LEAF_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    type(None),
    datetime.date,
    datetime.datetime,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    enum.Enum,
)


def _leaf_protocol_eq(a: Any, b: Any) -> bool:
    return bool(a.__leaf_eq__(b))


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class LeafRegistry:
    """Process-local registry mapping leaf types to equality functions.

    Lookup walks the MRO of a value's type, so registering a base class
    (``enum.Enum``) makes every subclass comparable through the same entry.
    """

    def __init__(self, defaults: bool = True) -> None:
        """Initialize registry, optionally seeded with the builtin leaf types.

        Args:
            defaults: If True, register ``DEFAULT_LEAF_TYPES`` with ``operator.eq``.
        """
        self._by_type: dict[type, LeafTypeMeta] = {}
        if defaults:
            for cls in DEFAULT_LEAF_TYPES:
                self.register(cls)

    def register(self, cls: type, eq: LeafEq | None = None) -> LeafTypeMeta:
        """Register a type as a comparable leaf and return its metadata.

        Registering an already registered type replaces its equality function.

        Args:
            cls: Type to register.
            eq: Equality function ``(a, b) -> bool``. Defaults to ``operator.eq``.

        Returns:
            Metadata for the registered leaf type.

        Raises:
            TypeError: If cls is not a class or eq is not callable.
        """
        if not isinstance(cls, type):
            raise TypeError(f"Leaf type must be a class, got {cls!r}")
        if eq is not None and not callable(eq):
            raise TypeError(f"Equality function for {cls.__name__} must be callable, got {eq!r}")

        meta = LeafTypeMeta(
            leaf_type=cls,
            eq=eq if eq is not None else operator.eq,
            type_name=_type_name(cls),
        )
        self._by_type[cls] = meta
        return meta

    def unregister(self, cls: type) -> bool:
        """Remove a leaf type.

        Args:
            cls: Type to remove.

        Returns:
            True if the type was registered, False otherwise.
        """
        return self._by_type.pop(cls, None) is not None

    def get_meta(self, cls: type) -> LeafTypeMeta | None:
        """Get metadata for an exactly registered type (no MRO walk)."""
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered directly as a leaf."""
        return cls in self._by_type

    def registered_types(self) -> tuple[type, ...]:
        """Return registered leaf types in registration order."""
        return tuple(self._by_type)

    def resolve(self, value: Any) -> LeafTypeMeta | None:
        """Find the leaf entry that governs a value.

        Tries, in order:
        1. The nearest registered class in ``type(value).__mro__``
        2. The LeafEquatable protocol, keyed on the value's own type

        Args:
            value: Runtime value of a field.

        Returns:
            Leaf metadata if the value is comparable, None otherwise.
        """
        cls = type(value)
        for base in cls.__mro__:
            meta = self._by_type.get(base)
            if meta is not None:
                return meta
        if isinstance(value, LeafEquatable):
            return LeafTypeMeta(leaf_type=cls, eq=_leaf_protocol_eq, type_name=_type_name(cls))
        return None


# Module-level registry instance
_registry = LeafRegistry()


def get_registry() -> LeafRegistry:
    """Access the global leaf registry.

    Returns:
        The process-local LeafRegistry instance.
    """
    return _registry


@overload
def register_leaf(cls: type, *, eq: LeafEq | None = None) -> type: ...


@overload
def register_leaf(cls: None = None, *, eq: LeafEq | None = None) -> Callable[[type], type]: ...


def register_leaf(
    cls: type | None = None, *, eq: LeafEq | None = None
) -> type | Callable[[type], type]:
    """Register a type as a comparable leaf in the global registry.

    Supports three forms:
        register_leaf(Decimal)        # plain call
        @register_leaf                # bare decorator
        @register_leaf(eq=my_eq)      # factory with args

    Args:
        cls: The class to register, or None if called with arguments.
        eq: Optional equality function. Defaults to ``operator.eq``.

    Returns:
        The class unchanged, or a decorator.
    """

    def decorator(c: type) -> type:
        _registry.register(c, eq=eq)
        return c

    if cls is None:
        return decorator
    return decorator(cls)


def unregister_leaf(cls: type) -> bool:
    """Remove a type from the global leaf registry."""
    return _registry.unregister(cls)
