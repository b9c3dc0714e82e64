"""
Serialization of Value trees back to JSON text.

Output is deterministic: object fields are written in insertion order unless
``sort_keys`` is set, and numbers use one canonical rendering.
"""

from dataclasses import dataclass
from typing import IO
from typing import Any

from ._profile import PhaseTimer
from ._value import Array
from ._value import Bool
from ._value import Null
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

ASCII_LIMIT = 127
CONTROL_LIMIT = 0x20
# Largest magnitude below which every integral double is exactly an integer
EXACT_INTEGER_LIMIT = 2**53

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    ``indent`` of None produces compact output with no insignificant
    whitespace.
    """

    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: str | int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if isinstance(self.indent, bool) or not isinstance(
            self.indent, str | int | None
        ):
            raise TypeError("indent must be a string, an integer or None")
        if isinstance(self.indent, int) and self.indent < 0:
            raise ValueError("indent must be non-negative")


def _encode_string(s: str, ensure_ascii: bool) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        escaped = _SHORT_ESCAPES.get(char)
        code = ord(char)
        if escaped is not None:
            result.append(escaped)
        elif code < CONTROL_LIMIT:
            result.append(f"\\u{code:04x}")
        elif ensure_ascii and code > ASCII_LIMIT:
            if code > 0xFFFF:
                code -= 0x10000
                high = 0xD800 | (code >> 10)
                low = 0xDC00 | (code & 0x3FF)
                result.append(f"\\u{high:04x}\\u{low:04x}")
            else:
                result.append(f"\\u{code:04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def format_number(n: float) -> str:
    """
    Render a number the way the serializer writes it.

    Integral values inside the exact-integer range drop the fraction, so
    ``3.0`` becomes ``3``; everything else uses the shortest repr.
    """
    n = float(n)
    if n.is_integer() and abs(n) < EXACT_INTEGER_LIMIT:
        return str(int(n))
    return repr(n)


def _get_indent_string(indent: str | int | None, level: int) -> str:
    """Generate indentation string for given level."""
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _encode_array(arr: Array, config: EncodeConfig, level: int) -> str:
    """Encode array with optional formatting."""
    if not arr.items:
        return "[]"

    encoded_items = [
        _encode_value(item, config, level + 1) for item in arr.items
    ]
    if config.indent is None:
        return "[" + ",".join(encoded_items) + "]"

    indent_str = _get_indent_string(config.indent, level)
    inner_indent = _get_indent_string(config.indent, level + 1)
    lines = [f"{inner_indent}{item}" for item in encoded_items]
    return "[\n" + ",\n".join(lines) + f"\n{indent_str}]"


def _encode_object(obj: Object, config: EncodeConfig, level: int) -> str:
    """Encode object fields in insertion order, or sorted by key."""
    if not obj.fields:
        return "{}"

    fields = obj.fields
    if config.sort_keys:
        fields = tuple(sorted(fields, key=lambda pair: pair[0]))

    encoded = [
        (
            _encode_string(key, config.ensure_ascii),
            _encode_value(value, config, level + 1),
        )
        for key, value in fields
    ]
    if config.indent is None:
        return "{" + ",".join(f"{k}:{v}" for k, v in encoded) + "}"

    indent_str = _get_indent_string(config.indent, level)
    inner_indent = _get_indent_string(config.indent, level + 1)
    lines = [f"{inner_indent}{k}: {v}" for k, v in encoded]
    return "{\n" + ",\n".join(lines) + f"\n{indent_str}}}"


def _encode_value(value: Value, config: EncodeConfig, level: int) -> str:
    if isinstance(value, Null):
        return "null"
    elif isinstance(value, Bool):
        return "true" if value.value else "false"
    elif isinstance(value, Number):
        return format_number(value.value)
    elif isinstance(value, String):
        return _encode_string(value.value, config.ensure_ascii)
    elif isinstance(value, Array):
        return _encode_array(value, config, level)
    elif isinstance(value, Object):
        return _encode_object(value, config, level)
    else:
        msg = f"Object of type {type(value).__name__} is not a JSON value"
        raise TypeError(msg)


def _stringify(value: Value, config: EncodeConfig) -> str:
    with PhaseTimer("stringify") as timer:
        text = _encode_value(value, config, 0)
        timer.chars = len(text)
    return text


def stringify(value: Value, **kwargs: Any) -> str:
    """
    Serializes a Value to compact JSON text.

    Keyword arguments are EncodeConfig fields.
    """
    return _stringify(value, EncodeConfig(**kwargs))


def stringify_pretty(
    value: Value, indent: str | int = 2, **kwargs: Any
) -> str:
    """Serializes a Value with one field or element per line."""
    return _stringify(value, EncodeConfig(indent=indent, **kwargs))


def dump(value: Value, fp: IO[str], **kwargs: Any) -> None:
    """Serializes a Value to a text file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(_stringify(value, EncodeConfig(**kwargs)))
