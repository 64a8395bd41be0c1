"""Runtime reflection over structured instances.

Usage:
    @dataclass
    class Point:
        x: int
        y: int

    structure = reflect(Point(1, 2))
    [(f.name, f.value) for f in structure.fields]  # [("x", 1), ("y", 2)]

    reflect(42)  # None: not a structured value
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
from collections.abc import Iterable, Iterator
from typing import Any

from structeq.core.reflection.models import (
    FieldDescriptor,
    Reflectable,
    Structure,
    StructureKind,
)


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _is_named_tuple(obj: Any) -> bool:
    return isinstance(obj, tuple) and _is_named_tuple_class(type(obj))


def _is_named_tuple_class(cls: type) -> bool:
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def _builtin_base(cls: type) -> type | None:
    """Return the nearest builtin class in cls's MRO, ignoring object."""
    for base in cls.__mro__:
        if base is not object and base.__module__ == "builtins":
            return base
    return None


def _declares_slots(cls: type) -> bool:
    return any("__slots__" in klass.__dict__ for klass in cls.__mro__ if klass is not object)


def _slot_names(cls: type) -> Iterator[tuple[type, str]]:
    """Yield (owner, slot name) for every slot declared across the MRO, base first."""
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield klass, name


def _mangle(owner: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


def _present(obj: Any, names: Iterable[str]) -> list[FieldDescriptor]:
    fields: list[FieldDescriptor] = []
    for name in names:
        try:
            value = getattr(obj, name)
        except AttributeError:
            # Declared but never assigned
            continue
        fields.append(FieldDescriptor(name, value))
    return fields


def _dataclass_fields(obj: Any) -> tuple[FieldDescriptor, ...]:
    return tuple(_present(obj, (f.name for f in dataclasses.fields(obj) if f.compare)))


def _pydantic_fields(obj: Any) -> tuple[FieldDescriptor, ...]:
    declared = [FieldDescriptor(name, getattr(obj, name)) for name in type(obj).model_fields]
    extra = getattr(obj, "model_extra", None) or {}
    return tuple(declared + [FieldDescriptor(name, value) for name, value in extra.items()])


def _named_tuple_fields(obj: Any) -> tuple[FieldDescriptor, ...]:
    return tuple(FieldDescriptor(name, getattr(obj, name)) for name in type(obj)._fields)


def _custom_fields(obj: Reflectable) -> tuple[FieldDescriptor, ...]:
    return tuple(FieldDescriptor(name, value) for name, value in obj.__equatable_fields__())


def _object_fields(obj: Any) -> tuple[FieldDescriptor, ...]:
    slot_attrs = dict.fromkeys(_mangle(owner, name) for owner, name in _slot_names(type(obj)))
    fields = _present(obj, slot_attrs)
    for name, value in getattr(obj, "__dict__", {}).items():
        if name not in slot_attrs:
            fields.append(FieldDescriptor(name, value))
    return tuple(fields)


def is_structured_class(cls: type) -> bool:
    """Check whether instances of a class can be structured values.

    Classes deriving from a builtin (other than NamedTuples) and Enum classes
    are rejected: their instances carry their value outside named fields.
    """
    if _is_named_tuple_class(cls):
        return True
    return _builtin_base(cls) is None and not issubclass(cls, enum.Enum)


def structure_kind(obj: Any) -> StructureKind | None:
    """Classify a value's shape without reading its fields.

    Args:
        obj: Any value.

    Returns:
        The StructureKind, or None if the value is not structured.
    """
    if isinstance(obj, type) or inspect.isroutine(obj) or inspect.ismodule(obj):
        return None
    if isinstance(obj, Reflectable):
        return StructureKind.CUSTOM
    if dataclasses.is_dataclass(obj):
        return StructureKind.DATACLASS
    if _is_pydantic(type(obj)):
        return StructureKind.PYDANTIC
    if _is_named_tuple(obj):
        return StructureKind.NAMED_TUPLE
    if not is_structured_class(type(obj)):
        return None
    if hasattr(obj, "__dict__") or _declares_slots(type(obj)):
        return StructureKind.OBJECT
    return None


_READERS = {
    StructureKind.CUSTOM: _custom_fields,
    StructureKind.DATACLASS: _dataclass_fields,
    StructureKind.PYDANTIC: _pydantic_fields,
    StructureKind.NAMED_TUPLE: _named_tuple_fields,
    StructureKind.OBJECT: _object_fields,
}


def reflect(obj: Any) -> Structure | None:
    """Read the ordered fields of a structured value.

    Declared fields that were never assigned (``field(init=False)``, unset
    slots) are left out.

    Plain objects have no declared field order: slots come first, then
    ``__dict__`` entries in assignment order, which can differ between two
    instances of the same class. ``compare`` pairs OBJECT fields by name.

    Args:
        obj: Instance to reflect over.

    Returns:
        Structure with fields in declaration order, or None if obj is not a
        dataclass, Pydantic model, NamedTuple, Reflectable, or plain class
        instance.
    """
    kind = structure_kind(obj)
    if kind is None:
        return None
    return Structure(kind=kind, fields=_READERS[kind](obj))


def is_structured(obj: Any) -> bool:
    """Check whether reflection can read fields from a value."""
    return structure_kind(obj) is not None
