"""
Declarative schema model.

Schemas are frozen and hold no validation state, so one instance can be
shared across any number of validate calls. Build them with the ``schema_*``
constructors rather than instantiating Schema directly.
"""

from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from typing import Final

from ._builder import from_python
from ._value import Value

TYPE_NAMES: Final = frozenset(
    {"null", "boolean", "number", "integer", "string", "array", "object"}
)


@dataclass(frozen=True)
class SchemaProperty:
    """A named field schema inside an object schema."""

    name: str
    schema: "Schema"


@dataclass(frozen=True)
class Schema:
    """
    Structural constraints over a Value.

    Every constraint is optional; a Schema with no constraints accepts any
    value. ``ref`` defers to another schema resolved at validation time,
    which is how recursive structures are described.
    """

    type_constraint: str | None = None
    required: tuple[str, ...] = ()
    properties: tuple[SchemaProperty, ...] = ()
    minimum: float | None = None
    maximum: float | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    items: "Schema | None" = None
    enum_values: tuple[Value, ...] | None = None
    ref: Callable[[], "Schema"] | None = None

    def __post_init__(self) -> None:
        if (
            self.type_constraint is not None
            and self.type_constraint not in TYPE_NAMES
        ):
            raise ValueError(
                f"unknown type constraint {self.type_constraint!r}; "
                f"expected one of {', '.join(sorted(TYPE_NAMES))}"
            )


def schema_any() -> Schema:
    return Schema()


def schema_type(name: str) -> Schema:
    """Schema that only constrains the value's type."""
    return Schema(type_constraint=name)


def schema_string(
    min_length: int | None = None, max_length: int | None = None
) -> Schema:
    return Schema(
        type_constraint="string", min_length=min_length, max_length=max_length
    )


def schema_number(
    minimum: float | None = None, maximum: float | None = None
) -> Schema:
    return Schema(type_constraint="number", minimum=minimum, maximum=maximum)


def schema_integer(
    minimum: float | None = None, maximum: float | None = None
) -> Schema:
    """Number schema that also rejects values with a fractional part."""
    return Schema(type_constraint="integer", minimum=minimum, maximum=maximum)


def schema_array(
    items: Schema | None = None,
    min_items: int | None = None,
    max_items: int | None = None,
) -> Schema:
    return Schema(
        type_constraint="array",
        items=items,
        min_items=min_items,
        max_items=max_items,
    )


def schema_property(name: str, schema: Schema) -> SchemaProperty:
    return SchemaProperty(name, schema)


def schema_object(
    properties: Iterable[SchemaProperty] = (),
    required: Iterable[str] = (),
) -> Schema:
    """
    Object schema.

    Properties are validated in the order given here; required names are
    reported missing in the order given here.
    """
    declared = tuple(properties)
    names = [prop.name for prop in declared]
    if len(set(names)) != len(names):
        raise ValueError("property names must be unique")
    return Schema(
        type_constraint="object",
        properties=declared,
        required=tuple(dict.fromkeys(required)),
    )


def schema_enum(values: Iterable[Any]) -> Schema:
    """
    Schema accepting only values structurally equal to one of ``values``.

    Native Python values are converted with from_python.
    """
    return Schema(enum_values=tuple(from_python(value) for value in values))


def schema_ref(resolver: Callable[[], Schema]) -> Schema:
    """
    Schema resolved lazily through ``resolver`` at validation time.

    Lets a schema refer to itself, e.g. a tree node whose children are tree
    nodes.
    """
    if not callable(resolver):
        raise TypeError("resolver must be callable")
    return Schema(ref=resolver)
