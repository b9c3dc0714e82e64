"""
Conversion between native Python objects and Value trees, plus fluent
builders for assembling objects and arrays by hand.
"""

import math
from typing import Any

from ._value import FALSE
from ._value import NULL
from ._value import TRUE
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value


def from_python(obj: Any) -> Value:  # noqa: PLR0911
    """
    Converts native Python data to a Value.

    Values pass through unchanged. Non-finite floats raise ValueError;
    unsupported types and non-string keys raise TypeError.
    """
    if isinstance(obj, Value):
        return obj
    elif obj is None:
        return NULL
    elif obj is True:
        return TRUE
    elif obj is False:
        return FALSE
    elif isinstance(obj, int | float):
        if isinstance(obj, float) and not math.isfinite(obj):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        try:
            return Number(float(obj))
        except OverflowError as e:
            raise ValueError(f"integer {obj} is too large for a number") from e
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, list | tuple):
        return Array(tuple(from_python(item) for item in obj))
    elif isinstance(obj, dict):
        fields = []
        for key, value in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be strings, not {type(key).__name__}"
                raise TypeError(msg)
            fields.append((key, from_python(value)))
        return Object(tuple(fields))
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


def to_python(value: Value) -> Any:
    """Converts a Value to plain Python data; numbers stay floats."""
    if isinstance(value, Null):
        return None
    elif isinstance(value, Bool | Number | String):
        return value.value
    elif isinstance(value, Array):
        return [to_python(item) for item in value.items]
    elif isinstance(value, Object):
        return {key: to_python(item) for key, item in value.fields}
    raise TypeError(f"Object of type {type(value).__name__} is not a Value")


class ObjectBuilder:
    """
    Fluent builder for Object values.

    Setting a field twice replaces the earlier value in its original
    position.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Value] = {}

    def field(self, name: str, value: Any) -> "ObjectBuilder":
        if not isinstance(name, str):
            raise TypeError(f"keys must be strings, not {type(name).__name__}")
        self._fields[name] = from_python(value)
        return self

    def fields(self, mapping: dict[str, Any]) -> "ObjectBuilder":
        for name, value in mapping.items():
            self.field(name, value)
        return self

    def build(self) -> Object:
        return Object(tuple(self._fields.items()))


class ArrayBuilder:
    """Fluent builder for Array values."""

    def __init__(self) -> None:
        self._items: list[Value] = []

    def item(self, value: Any) -> "ArrayBuilder":
        self._items.append(from_python(value))
        return self

    def items(self, values: list[Any] | tuple[Any, ...]) -> "ArrayBuilder":
        for value in values:
            self.item(value)
        return self

    def build(self) -> Array:
        return Array(tuple(self._items))
