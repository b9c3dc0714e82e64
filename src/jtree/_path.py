"""
Path-based access into Value trees.

Paths use the same notation as validation errors: an optional ``$`` root,
``.name`` for object fields and ``[index]`` for array elements, e.g.
``$.items[0].price``. A leading field name may omit the dot
(``items[0].price``). Writes return a new tree; the input is never modified.
"""

import re
from typing import Any
from typing import TypeAlias

from ._builder import from_python
from ._value import Array
from ._value import Object
from ._value import Value

Segment: TypeAlias = str | int

_SEGMENT_RE = re.compile(r"\.([^.\[\]]+)|\[(\d+)\]")


class PathError(ValueError):
    """Malformed path, or a write that conflicts with the tree's shape."""


def split_path(path: str) -> list[Segment]:
    """Splits a path into field names and array indices."""
    if not isinstance(path, str):
        raise TypeError(f"path must be str, not {type(path).__name__}")

    rest = path[1:] if path.startswith("$") else path
    if rest and rest[0] not in ".[":
        rest = "." + rest

    segments: list[Segment] = []
    pos = 0
    while pos < len(rest):
        match = _SEGMENT_RE.match(rest, pos)
        if match is None:
            raise PathError(f"invalid path {path!r} near {rest[pos:]!r}")
        name, index = match.groups()
        segments.append(name if name is not None else int(index))
        pos = match.end()
    return segments


def _child(value: Value, segment: Segment) -> Value | None:
    if isinstance(segment, int):
        return value.at(segment)
    return value.get(segment)


def get_path(value: Value, path: str) -> Value | None:
    """Returns the value at ``path``, or None when any step is missing."""
    current: Value | None = value
    for segment in split_path(path):
        if current is None:
            return None
        current = _child(current, segment)
    return current


def _set(current: Value | None, segments: list[Segment], new: Value) -> Value:
    if not segments:
        return new

    head, rest = segments[0], segments[1:]
    if isinstance(head, str):
        if current is None:
            current = Object(())
        if not isinstance(current, Object):
            raise PathError(
                f"cannot set field {head!r} on a {current.type_name}"
            )
        return current.with_field(head, _set(current.get(head), rest, new))

    if not isinstance(current, Array):
        kind = "missing value" if current is None else current.type_name
        raise PathError(f"cannot set index {head} on a {kind}")
    if head > current.size():
        raise PathError(
            f"index {head} out of range for array of size {current.size()}"
        )
    return current.with_item(head, _set(current.at(head), rest, new))


def set_path(value: Value, path: str, new: Any) -> Value:
    """
    Returns a copy of ``value`` with ``new`` stored at ``path``.

    Missing object fields along the way are created as empty objects. Array
    indices must exist, or equal the array size to append.
    """
    return _set(value, split_path(path), from_python(new))


def _remove(current: Value, segments: list[Segment]) -> Value:
    head, rest = segments[0], segments[1:]
    child = _child(current, head)
    if child is None:
        return current

    if isinstance(current, Object) and isinstance(head, str):
        if not rest:
            return current.without_field(head)
        replacement = _remove(child, rest)
        if replacement is child:
            return current
        return current.with_field(head, replacement)

    if isinstance(current, Array) and isinstance(head, int):
        if not rest:
            return current.without_item(head)
        replacement = _remove(child, rest)
        if replacement is child:
            return current
        return current.with_item(head, replacement)

    return current


def remove_path(value: Value, path: str) -> Value:
    """
    Returns a copy of ``value`` without the value at ``path``.

    A path that does not resolve leaves the value unchanged.
    """
    segments = split_path(path)
    if not segments:
        raise PathError("cannot remove the root value")
    return _remove(value, segments)
