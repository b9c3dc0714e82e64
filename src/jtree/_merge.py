"""Shallow and deep merging of Object values."""

from ._value import Object
from ._value import Value


def merge(base: Value, override: Value) -> Value:
    """
    Overlays the fields of ``override`` onto ``base``.

    Fields already in ``base`` keep their position and take the overriding
    value; new fields are appended in ``override`` order. When either side
    is not an object the result is ``override``.
    """
    if not (isinstance(base, Object) and isinstance(override, Object)):
        return override

    fields = dict(base.fields)
    fields.update(override.fields)
    return Object(tuple(fields.items()))


def deep_merge(base: Value, override: Value) -> Value:
    """Like merge(), recursing into fields that are objects on both sides."""
    if not (isinstance(base, Object) and isinstance(override, Object)):
        return override

    fields = dict(base.fields)
    for key, value in override.fields:
        current = fields.get(key)
        fields[key] = value if current is None else deep_merge(current, value)
    return Object(tuple(fields.items()))
