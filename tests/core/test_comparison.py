"""Tests for structural comparison and the equatable decorator."""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

import pytest
from pydantic import BaseModel

from structeq import (
    ComparatorSettings,
    ComparisonOutcome,
    ComparisonWarning,
    LeafRegistry,
    compare,
    equals,
    equatable,
    is_equatable,
    register_leaf,
)


@dataclass
class Pair:
    my_int: int = 0
    my_string: str = ""


@dataclass
class WithCallback:
    name: str
    callback: Any


@dataclass
class Flags:
    a: int
    b: int
    c: int


class Meters(int):
    pass


class Name(str):
    pass


# Scenarios


def test_equal_defaults():
    assert equals(Pair(0, ""), Pair(0, ""))


def test_first_field_differs():
    result = compare(Pair(1, ""), Pair(0, ""))

    assert result.equal is False
    assert result.outcome is ComparisonOutcome.FIELD_MISMATCH
    assert result.field == "my_int"
    assert result.fields_compared == 1


def test_string_compare_is_case_sensitive():
    result = compare(Pair(10, "foo"), Pair(10, "Foo"))

    assert not result.equal
    assert result.field == "my_string"


def test_closure_field_is_invalid_for_any_instances():
    def fn() -> None:
        pass

    with pytest.warns(ComparisonWarning, match="not a registered comparable leaf type"):
        assert equals(WithCallback("x", fn), WithCallback("x", fn)) is False


def test_unregistered_leaf_result_details():
    result = compare(WithCallback("x", print), WithCallback("x", print))

    assert result.outcome is ComparisonOutcome.UNREGISTERED_LEAF
    assert result.is_diagnostic
    assert result.field == "callback"
    assert result.value_type is type(print)
    assert result.fields_compared == 0


def test_unregistered_leaf_reported_even_when_earlier_field_differs():
    """All fields are checked for leaf types before any value is compared."""
    result = compare(WithCallback("a", lambda: 1), WithCallback("b", lambda: 1))

    assert result.outcome is ComparisonOutcome.UNREGISTERED_LEAF


def test_unregistered_leaf_on_rhs_only():
    result = compare(WithCallback("a", 1), WithCallback("a", object()))

    assert result.outcome is ComparisonOutcome.UNREGISTERED_LEAF
    assert result.value_type is object


# Properties


@pytest.mark.parametrize(
    "instance",
    [Pair(), Pair(5, "five"), Flags(1, 2, 3)],
)
def test_reflexivity(instance):
    assert equals(instance, instance)


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (Pair(1, "x"), Pair(1, "x")),
        (Pair(1, "x"), Pair(2, "x")),
        (Pair(1, "x"), Pair(1, "y")),
        (Pair(True, "x"), Pair(1, "x")),
    ],
)
def test_symmetry(a, b):
    assert equals(a, b) == equals(b, a)


def test_bool_and_int_fields_do_not_compare_equal():
    result = compare(Pair(True, ""), Pair(1, ""))

    assert result.outcome is ComparisonOutcome.TYPE_MISMATCH
    assert result.field == "my_int"
    assert not result.is_diagnostic


def test_outcome_independent_of_which_field_mismatches_first():
    """Only the number of inspected fields changes, never the verdict."""
    calls: list[tuple[int, int]] = []
    registry = LeafRegistry(defaults=False)
    registry.register(int, eq=lambda a, b: calls.append((a, b)) or a == b)

    first = compare(Flags(0, 2, 3), Flags(9, 2, 3), registry=registry)
    first_calls = len(calls)
    calls.clear()
    last = compare(Flags(1, 2, 0), Flags(1, 2, 9), registry=registry)
    last_calls = len(calls)

    assert first.equal == last.equal is False
    assert first_calls == first.fields_compared == 1
    assert last_calls == last.fields_compared == 3


def test_short_circuit_stops_at_first_mismatch():
    calls: list[str] = []
    registry = LeafRegistry(defaults=False)
    registry.register(int, eq=lambda a, b: calls.append("int") or a == b)
    registry.register(str, eq=lambda a, b: calls.append("str") or a == b)

    assert not compare(Pair(1, "a"), Pair(2, "a"), registry=registry).equal
    assert calls == ["int"]


def test_comparison_does_not_mutate_operands():
    a, b = Pair(1, "x"), Pair(1, "x")

    compare(a, b)

    assert (a.my_int, a.my_string) == (1, "x")
    assert (b.my_int, b.my_string) == (1, "x")


# Field count and names


class Dynamic:
    def __init__(self, **attrs: Any) -> None:
        self.__dict__.update(attrs)


def test_field_count_mismatch():
    result = compare(Dynamic(a=1), Dynamic(a=1, b=2))

    assert result.outcome is ComparisonOutcome.FIELD_COUNT_MISMATCH
    assert not result.equal
    assert not result.is_diagnostic


def test_field_name_mismatch():
    result = compare(Dynamic(a=1), Dynamic(b=1))

    assert result.outcome is ComparisonOutcome.FIELD_NAME_MISMATCH
    assert result.field == "a"


def test_field_name_check_can_be_disabled():
    settings = ComparatorSettings(check_field_names=False)

    assert compare(Dynamic(a=1), Dynamic(b=1), settings=settings).equal


def test_anonymous_fields_are_not_compared():
    class Hooked:
        def __init__(self, key: int, noise: int) -> None:
            self.key = key
            self.noise = noise

        def __equatable_fields__(self):
            return [("key", self.key), (None, self.noise)]

    assert equals(Hooked(1, 100), Hooked(1, 200))
    assert not equals(Hooked(1, 100), Hooked(2, 100))


def test_malformed_reflection_count_mismatch():
    class Ragged:
        def __init__(self, *values: int) -> None:
            self.values = values

        def __equatable_fields__(self):
            return [(f"v{i}", v) for i, v in enumerate(self.values)]

    assert compare(Ragged(1, 2), Ragged(1, 2, 3)).outcome is ComparisonOutcome.FIELD_COUNT_MISMATCH


# Shapes


def test_not_structured_operands():
    with pytest.warns(ComparisonWarning, match="is not a structured type"):
        assert equals(1, 1) is False

    result = compare([1], [1])

    assert result.outcome is ComparisonOutcome.NOT_STRUCTURED
    assert result.value_type is list


def test_not_structured_rhs():
    result = compare(Pair(), "Pair()")

    assert result.outcome is ComparisonOutcome.NOT_STRUCTURED
    assert result.value_type is str


def test_different_structured_types():
    result = compare(Pair(), Flags(0, 0, 0))

    assert result.outcome is ComparisonOutcome.TYPE_MISMATCH
    assert not result.is_diagnostic


def test_pydantic_models():
    class Account(BaseModel):
        owner: str
        balance: int

    assert equals(Account(owner="a", balance=1), Account(owner="a", balance=1))
    assert not equals(Account(owner="a", balance=1), Account(owner="a", balance=2))


def test_named_tuples():
    class Coord(NamedTuple):
        lat: float
        lon: float

    assert equals(Coord(1.0, 2.0), Coord(1.0, 2.0))
    assert not equals(Coord(1.0, 2.0), Coord(1.0, 2.5))


def test_plain_class_instances():
    class Reference:
        def __init__(self, label: str) -> None:
            self.label = label

    assert equals(Reference("a"), Reference("a"))
    assert not equals(Reference("a"), Reference("b"))


def test_empty_structures_are_equal():
    class Empty:
        pass

    assert equals(Empty(), Empty())


def test_empty_slotted_structures_are_equal():
    class Bare:
        __slots__ = ()

    assert compare(Bare(), Bare()).outcome is ComparisonOutcome.EQUAL


@pytest.mark.parametrize(
    ("lhs", "rhs"),
    [
        (Meters(1), Meters(2)),
        (Meters(1), Meters(1)),
        (Name("a"), Name("b")),
    ],
)
def test_builtin_subclass_operands_are_not_structured(lhs, rhs):
    with pytest.warns(ComparisonWarning, match="is not a structured type"):
        assert equals(lhs, rhs) is False

    assert compare(lhs, rhs).outcome is ComparisonOutcome.NOT_STRUCTURED


def test_enum_operands_are_not_structured():
    class Suit(Enum):
        HEARTS = 1

    result = compare(Suit.HEARTS, Suit.HEARTS)

    assert result.outcome is ComparisonOutcome.NOT_STRUCTURED
    assert result.value_type is Suit


def test_unassigned_init_false_field_does_not_raise():
    @dataclass
    class Lazy:
        x: int
        y: int = field(init=False)

    assert equals(Lazy(1), Lazy(1))
    assert not equals(Lazy(1), Lazy(2))

    assigned = Lazy(1)
    assigned.y = 5
    result = compare(Lazy(1), assigned)

    assert result.outcome is ComparisonOutcome.FIELD_COUNT_MISMATCH


class Branchy:
    def __init__(self, x: int, y: int, y_first: bool) -> None:
        if y_first:
            self.y = y
            self.x = x
        else:
            self.x = x
            self.y = y


def test_plain_object_fields_pair_by_name():
    assert equals(Branchy(1, 2, y_first=True), Branchy(1, 2, y_first=False))

    result = compare(Branchy(1, 2, y_first=True), Branchy(1, 3, y_first=False))

    assert result.outcome is ComparisonOutcome.FIELD_MISMATCH
    assert result.field == "y"


def test_plain_object_pairing_by_name_without_name_check():
    settings = ComparatorSettings(check_field_names=False)

    assert not compare(
        Branchy(1, 2, y_first=True), Branchy(2, 1, y_first=False), settings=settings
    ).equal


# Diagnostics


def test_diagnostics_can_be_silenced():
    settings = ComparatorSettings(diagnostics="ignore")

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert equals(1, 2, settings=settings) is False


def test_plain_inequality_emits_no_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert equals(Pair(1), Pair(2)) is False


def test_compare_never_warns():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert compare(1, 2).is_diagnostic


def test_result_is_truthy_when_equal():
    assert compare(Pair(), Pair())
    assert not compare(Pair(1), Pair())


def test_leaf_eq_exceptions_propagate():
    def broken(a: Any, b: Any) -> bool:
        raise ValueError("boom")

    registry = LeafRegistry(defaults=False)
    registry.register(int, eq=broken)
    registry.register(str)

    with pytest.raises(ValueError, match="boom"):
        compare(Pair(), Pair(), registry=registry)


# Decorator


def test_equatable_installs_structural_eq():
    @equatable
    class Node:
        def __init__(self, value: int) -> None:
            self.value = value

    assert Node(1) == Node(1)
    assert Node(1) != Node(2)
    assert is_equatable(Node)
    assert is_equatable(Node(1))


def test_equatable_parenthesized_form(record_cls):
    @equatable()
    @dataclass
    class Thing:
        n: int

    assert Thing(1) == Thing(1)
    assert record_cls(1, "a") == record_cls(1, "a")


def test_equatable_other_type_returns_not_implemented(record_cls):
    record = record_cls()

    assert record.__eq__(Pair()) is NotImplemented
    assert record != Pair()
    assert record != 0


def test_equatable_eq_warns_at_call_site():
    @equatable
    @dataclass
    class Holder:
        items: list

    with pytest.warns(ComparisonWarning) as record:
        assert not Holder([1]) == Holder([1])

    assert record[0].filename == __file__


def test_equatable_clears_hash_for_mutable_classes():
    @equatable
    class Mutable:
        def __init__(self) -> None:
            self.x = 1

    with pytest.raises(TypeError):
        hash(Mutable())


def test_equatable_keeps_hash_of_frozen_dataclass():
    @equatable
    @dataclass(frozen=True)
    class Frozen:
        x: int

    assert hash(Frozen(1)) == hash(Frozen(1))


def test_equatable_rejects_non_classes():
    with pytest.raises(TypeError, match="must decorate a class"):
        equatable(lambda: None)  # type: ignore[arg-type]


def test_equatable_rejects_builtins():
    with pytest.raises(TypeError, match="int derives from a builtin"):
        equatable(int)


@pytest.mark.parametrize("base", [int, str, float, bytes])
def test_equatable_rejects_builtin_subclasses(base):
    class Wrapped(base):
        pass

    with pytest.raises(TypeError, match="Wrapped derives from a builtin"):
        equatable(Wrapped)


def test_equatable_rejects_enums():
    class Suit(Enum):
        HEARTS = 1

    with pytest.raises(TypeError, match="Suit derives from a builtin or Enum"):
        equatable(Suit)


def test_equatable_accepts_named_tuples():
    @equatable
    class Span(NamedTuple):
        start: int
        end: int

    assert Span(1, 2) == Span(1, 2)
    assert Span(1, 2) != Span(1, 3)


def test_is_equatable_false_for_plain_types():
    assert not is_equatable(Pair)
    assert not is_equatable(3)


# Nesting


def test_nested_structure_requires_leaf_registration():
    @equatable
    @dataclass
    class Inner:
        n: int

    @equatable
    @dataclass
    class Outer:
        inner: Inner

    with pytest.warns(ComparisonWarning, match="Inner"):
        assert not Outer(Inner(1)) == Outer(Inner(1))


def test_nested_leaf_uses_inner_equality_not_identity():
    @equatable(leaf=True)
    @dataclass
    class Inner:
        n: int
        tags: str = ""

    @equatable
    @dataclass
    class Outer:
        label: str
        inner: Inner = field(default_factory=lambda: Inner(0))

    a = Outer("o", Inner(1, "t"))
    b = Outer("o", Inner(1, "t"))

    assert a.inner is not b.inner
    assert a == b
    b.inner.tags = "u"
    assert a != b


def test_register_leaf_on_existing_equatable():
    @equatable
    @dataclass
    class Money:
        cents: int

    register_leaf(Money)

    @equatable
    @dataclass
    class Invoice:
        total: Money

    assert Invoice(Money(5)) == Invoice(Money(5))
    assert Invoice(Money(5)) != Invoice(Money(6))
