"""
Immutable JSON value tree.

Every parsed document is represented as one of six frozen cases: Null, Bool,
Number, String, Array and Object. Nodes are never mutated in place; the
``with_*``/``without_*`` helpers return new nodes and leave the receiver
untouched.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from typing import ClassVar


class Value:
    """
    Common interface of the six JSON value cases.

    Accessors never raise for ill-typed access: asking a string for a field
    or a number for its size yields ``None``/``0`` instead.
    """

    __slots__ = ()

    type_name: ClassVar[str] = ""

    def is_null(self) -> bool:
        return False

    def is_bool(self) -> bool:
        return False

    def is_number(self) -> bool:
        return False

    def is_string(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def get(self, key: str) -> "Value | None":
        """Returns the field named ``key``, or None for non-objects."""
        return None

    def at(self, index: int) -> "Value | None":
        """Returns the element at ``index``, or None for non-arrays."""
        return None

    def size(self) -> int:
        """Returns the field or element count; scalars have size 0."""
        return 0


@dataclass(frozen=True, slots=True)
class Null(Value):
    type_name: ClassVar[str] = "null"

    def is_null(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Bool(Value):
    type_name: ClassVar[str] = "boolean"

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(
                f"Bool requires a bool, not {type(self.value).__name__}"
            )

    def is_bool(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Number(Value):
    """
    Double-precision number.

    Integers are stored as floats; only finite values can be represented.
    """

    type_name: ClassVar[str] = "number"

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(
            self.value, int | float
        ):
            raise TypeError(
                f"Number requires an int or float, not "
                f"{type(self.value).__name__}"
            )
        number = float(self.value)
        if not math.isfinite(number):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        object.__setattr__(self, "value", number)

    def is_number(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class String(Value):
    type_name: ClassVar[str] = "string"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"String requires a str, not {type(self.value).__name__}"
            )

    def is_string(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Array(Value):
    """Ordered sequence of values."""

    type_name: ClassVar[str] = "array"

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def is_array(self) -> bool:
        return True

    def at(self, index: int) -> Value | None:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def size(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def with_item(self, index: int, value: Value) -> "Array":
        """
        Returns a copy with ``index`` replaced by ``value``.

        An index equal to the current size appends.
        """
        if index == len(self.items):
            return Array(self.items + (value,))
        if not 0 <= index < len(self.items):
            raise IndexError(f"array index {index} out of range")
        return Array(self.items[:index] + (value,) + self.items[index + 1 :])

    def without_item(self, index: int) -> "Array":
        if not 0 <= index < len(self.items):
            raise IndexError(f"array index {index} out of range")
        return Array(self.items[:index] + self.items[index + 1 :])


@dataclass(frozen=True, slots=True)
class Object(Value):
    """
    Insertion-ordered mapping of unique string keys to values.

    Lookup by key goes through a private key -> position index built once at
    construction. Equality ignores key order.
    """

    type_name: ClassVar[str] = "object"

    fields: tuple[tuple[str, Value], ...] = ()
    _index: dict[str, int] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        index: dict[str, int] = {}
        for position, (key, _) in enumerate(self.fields):
            if key in index:
                raise ValueError(f"duplicate object key: {key!r}")
            index[key] = position
        object.__setattr__(self, "_index", index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        if len(self.fields) != len(other.fields):
            return False
        for key, value in self.fields:
            other_value = other.get(key)
            if other_value is None or other_value != value:
                return False
        return True

    def __hash__(self) -> int:
        return hash(frozenset(self._index))

    def is_object(self) -> bool:
        return True

    def get(self, key: str) -> Value | None:
        position = self._index.get(key)
        if position is None:
            return None
        return self.fields[position][1]

    def size(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> list[str]:
        return [key for key, _ in self.fields]

    def values(self) -> list[Value]:
        return [value for _, value in self.fields]

    def items(self) -> tuple[tuple[str, Value], ...]:
        return self.fields

    def with_field(self, key: str, value: Value) -> "Object":
        """Returns a copy with ``key`` set, replacing in place or appending."""
        position = self._index.get(key)
        if position is None:
            return Object(self.fields + ((key, value),))
        fields = list(self.fields)
        fields[position] = (key, value)
        return Object(tuple(fields))

    def without_field(self, key: str) -> "Object":
        if key not in self._index:
            return self
        return Object(tuple(pair for pair in self.fields if pair[0] != key))


NULL: Null = Null()
TRUE: Bool = Bool(True)
FALSE: Bool = Bool(False)


def values_equal(left: Value, right: Value) -> bool:
    """
    Deep structural equality.

    Object key order is irrelevant, Bool never equals Number, and -0.0
    equals 0.0.
    """
    return left == right
