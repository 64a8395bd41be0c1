from dataclasses import dataclass

from structeq import compare, equatable, equals


@equatable(leaf=True)
@dataclass
class MyStruct:
    """Value type.

    Registered as a leaf so it can be used as a field of other equatable types.
    """

    my_int: int = 0
    my_string: str = ""


@equatable
class MyClass:
    """Reference type holding a MyStruct."""

    def __init__(self, my_int: int, my_string: str, my_struct: MyStruct) -> None:
        self.my_int = my_int
        self.my_string = my_string
        self.my_struct = my_struct


class Color:
    """Not registered: instances cannot appear in an equatable type."""


def main() -> None:
    aa = MyStruct()
    bb = MyStruct()
    print(aa == bb)  # True
    aa.my_int = 1
    print(aa == bb)  # False

    a = MyClass(10, "foo", MyStruct(aa.my_int, aa.my_string))
    b = MyClass(10, "foo", MyStruct(aa.my_int, aa.my_string))
    print(a == b)  # True
    a.my_int = 2
    print(a == b)  # False
    b.my_int = 2
    b.my_string = "Foo"
    a.my_string = "Foo"
    print(a == b)  # True
    a.my_struct.my_int = 2
    print(a == b)  # False

    result = compare(a, b)
    print(result.outcome.name, result.field)  # FIELD_MISMATCH my_struct

    painted = MyClass(1, "x", Color())  # type: ignore[arg-type]
    print(equals(painted, painted))  # False, with a ComparisonWarning


if __name__ == "__main__":
    main()
