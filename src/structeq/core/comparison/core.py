"""Structural equality: comparator functions and the equatable decorator.

Usage:
    @equatable
    @dataclass
    class Point:
        x: int
        y: int

    Point(1, 2) == Point(1, 2)  # True, compared field by field

    # Nested structured fields must be opted in as leaves:
    @equatable(leaf=True)
    @dataclass
    class Span:
        start: Point
        end: Point
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Any, TypeVar, cast, overload

from structeq.config import ComparatorSettings, DiagnosticMode, get_settings
from structeq.core.comparison.models import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonWarning,
)
from structeq.core.leaf import LeafRegistry, LeafTypeMeta, get_registry
from structeq.core.reflection import (
    FieldDescriptor,
    Structure,
    StructureKind,
    is_structured_class,
    reflect,
    structure_kind,
)

T = TypeVar("T")


def _type_label(value: Any) -> str:
    return type(value).__qualname__


def compare(
    lhs: Any,
    rhs: Any,
    *,
    registry: LeafRegistry | None = None,
    settings: ComparatorSettings | None = None,
) -> ComparisonResult:
    """Compare two structured instances field by field.

    Fields are read in declaration order. Every field value on both sides must
    resolve to a comparable leaf type before any value is compared; the first
    unequal pair then ends the comparison.

    Never emits diagnostics. Use ``equals`` for the warning-emitting boolean form.

    Args:
        lhs: First instance.
        rhs: Second instance (expected to be the same type as lhs).
        registry: Leaf registry to resolve field types with. Defaults to the
            global registry.
        settings: Comparator settings. Defaults to ``get_settings()``.

    Returns:
        ComparisonResult describing the verdict and its reason.
    """
    registry = registry if registry is not None else get_registry()
    settings = settings if settings is not None else get_settings()

    for operand in (lhs, rhs):
        if structure_kind(operand) is None:
            return ComparisonResult(
                equal=False,
                outcome=ComparisonOutcome.NOT_STRUCTURED,
                value_type=type(operand),
                message=f"Invalid use: {_type_label(operand)} is not a structured type.",
            )

    if type(lhs) is not type(rhs):
        return ComparisonResult(
            equal=False,
            outcome=ComparisonOutcome.TYPE_MISMATCH,
            value_type=type(rhs),
            message=f"Cannot compare {_type_label(lhs)} with {_type_label(rhs)}.",
        )

    lhs_structure = cast(Structure, reflect(lhs))
    lhs_fields = lhs_structure.named_fields()
    rhs_fields = cast(Structure, reflect(rhs)).named_fields()
    if lhs_structure.kind is StructureKind.OBJECT:
        rhs_fields = _align_by_name(lhs_fields, rhs_fields)

    if len(lhs_fields) != len(rhs_fields):
        return ComparisonResult(
            equal=False,
            outcome=ComparisonOutcome.FIELD_COUNT_MISMATCH,
            message=(
                f"{_type_label(lhs)} instances expose {len(lhs_fields)} "
                f"and {len(rhs_fields)} fields."
            ),
        )

    if settings.check_field_names:
        for lf, rf in zip(lhs_fields, rhs_fields, strict=True):
            if lf.name != rf.name:
                return ComparisonResult(
                    equal=False,
                    outcome=ComparisonOutcome.FIELD_NAME_MISMATCH,
                    field=lf.name,
                    message=f"Field {lf.name!r} is paired with field {rf.name!r}.",
                )

    lhs_leaves = _resolve_leaves(lhs_fields, registry)
    if isinstance(lhs_leaves, ComparisonResult):
        return lhs_leaves
    rhs_leaves = _resolve_leaves(rhs_fields, registry)
    if isinstance(rhs_leaves, ComparisonResult):
        return rhs_leaves

    pairs = zip(lhs_fields, rhs_fields, lhs_leaves, rhs_leaves, strict=True)
    for index, (lf, rf, lmeta, rmeta) in enumerate(pairs, start=1):
        if lmeta.leaf_type is not rmeta.leaf_type:
            return ComparisonResult(
                equal=False,
                outcome=ComparisonOutcome.TYPE_MISMATCH,
                field=lf.name,
                value_type=type(rf.value),
                message=(
                    f"Field {lf.name!r} holds {_type_label(lf.value)} "
                    f"and {_type_label(rf.value)}."
                ),
                fields_compared=index,
            )
        if not lmeta.eq(lf.value, rf.value):
            return ComparisonResult(
                equal=False,
                outcome=ComparisonOutcome.FIELD_MISMATCH,
                field=lf.name,
                message=f"Field {lf.name!r} differs.",
                fields_compared=index,
            )

    return ComparisonResult(
        equal=True,
        outcome=ComparisonOutcome.EQUAL,
        fields_compared=len(lhs_fields),
    )


def _align_by_name(
    lhs_fields: tuple[FieldDescriptor, ...], rhs_fields: tuple[FieldDescriptor, ...]
) -> tuple[FieldDescriptor, ...]:
    """Reorder rhs fields to lhs order when both sides carry the same names.

    Plain objects list ``__dict__`` entries in assignment order, which is not
    fixed per class.
    """
    by_name = {f.name: f for f in rhs_fields}
    if len(by_name) != len(rhs_fields) or by_name.keys() != {f.name for f in lhs_fields}:
        return rhs_fields
    return tuple(by_name[f.name] for f in lhs_fields)


def _resolve_leaves(
    fields: tuple[FieldDescriptor, ...], registry: LeafRegistry
) -> list[LeafTypeMeta] | ComparisonResult:
    """Resolve every field to its leaf entry, or report the first unregistered one."""
    leaves: list[LeafTypeMeta] = []
    for f in fields:
        meta = registry.resolve(f.value)
        if meta is None:
            return ComparisonResult(
                equal=False,
                outcome=ComparisonOutcome.UNREGISTERED_LEAF,
                field=f.name,
                value_type=type(f.value),
                message=(
                    f"Invalid use: field {f.name!r} has type {_type_label(f.value)}, "
                    f"which is not a registered comparable leaf type."
                ),
            )
        leaves.append(meta)
    return leaves


def _report(result: ComparisonResult, settings: ComparatorSettings, stacklevel: int) -> None:
    if result.is_diagnostic and settings.diagnostics == DiagnosticMode.WARN:
        warnings.warn(result.message, ComparisonWarning, stacklevel=stacklevel + 1)


def equals(
    lhs: Any,
    rhs: Any,
    *,
    registry: LeafRegistry | None = None,
    settings: ComparatorSettings | None = None,
) -> bool:
    """Return True if two structured instances are equal field by field.

    Invalid use (non-structured operands, field values of unregistered types)
    yields False and, unless disabled in settings, a ComparisonWarning.

    Args:
        lhs: First instance.
        rhs: Second instance.
        registry: Leaf registry override.
        settings: Settings override.

    Returns:
        Equality verdict. Never raises for invalid use.
    """
    settings = settings if settings is not None else get_settings()
    result = compare(lhs, rhs, registry=registry, settings=settings)
    _report(result, settings, stacklevel=2)
    return result.equal


def _make_eq(cls: type) -> Callable[[Any, Any], Any]:
    def __eq__(self: Any, other: Any) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        settings = get_settings()
        result = compare(self, other, settings=settings)
        _report(result, settings, stacklevel=2)
        return result.equal

    __eq__.__qualname__ = f"{cls.__qualname__}.__eq__"
    return __eq__


@overload
def equatable(cls: type[T]) -> type[T]: ...


@overload
def equatable(cls: None = None, *, leaf: bool = False) -> Callable[[type[T]], type[T]]: ...


def equatable(
    cls: type[T] | None = None, *, leaf: bool = False
) -> type[T] | Callable[[type[T]], type[T]]:
    """Give a class structural ``==`` driven by reflection.

    Supports three forms:
        @equatable                 # bare decorator
        @equatable()               # parenthesized, no args
        @equatable(leaf=True)      # also register as a comparable leaf type

    Args:
        cls: The class to decorate, or None if called with arguments.
        leaf: If True, register the class as a leaf so it can be used as a
            field inside other structured types.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If the target is not a class, or derives from a builtin
            (other than a NamedTuple) or Enum type.

    Note:
        Apply @equatable AFTER @dataclass:

        >>> @equatable
        ... @dataclass
        ... class MyStruct:
        ...     my_int: int = 0
    """

    def decorator(c: type[T]) -> type[T]:
        if not isinstance(c, type):
            raise TypeError(f"@equatable must decorate a class, got {c!r}")
        if not is_structured_class(c):
            raise TypeError(
                f"{c.__name__} derives from a builtin or Enum type and cannot be made equatable"
            )

        c.__eq__ = _make_eq(c)  # type: ignore[method-assign,assignment]
        if c.__dict__.get("__hash__") is None:
            c.__hash__ = None  # type: ignore[assignment]
        c.__equatable__ = True  # type: ignore[attr-defined]
        if leaf:
            get_registry().register(c)
        return c

    if cls is None:
        # Called with args: @equatable() or @equatable(leaf=True)
        return decorator
    else:
        # Called bare: @equatable
        return decorator(cls)


def is_equatable(obj: Any) -> bool:
    """Check whether a class (or an instance's class) was decorated with @equatable."""
    cls = obj if isinstance(obj, type) else type(obj)
    return getattr(cls, "__equatable__", False) is True
