"""
Schema validation.

The validator walks a Value and a Schema side by side and collects every
violation it finds instead of stopping at the first. Errors carry a
``$``-rooted path: ``.name`` for object fields, ``[i]`` for array elements.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from ._encoder import format_number
from ._profile import PhaseTimer
from ._schema import Schema
from ._value import Array
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

logger = logging.getLogger(__name__)

ROOT_PATH: Final = "$"
MAX_REF_CHAIN: Final = 1000


@dataclass(frozen=True)
class SchemaError:
    """Base class of every validation diagnostic."""

    path: str

    @property
    def message(self) -> str:
        return "schema violation"


@dataclass(frozen=True)
class TypeMismatch(SchemaError):
    expected: str
    actual: str

    @property
    def message(self) -> str:
        return f"expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class MissingRequired(SchemaError):
    field: str

    @property
    def message(self) -> str:
        return f"missing required field {self.field!r}"


@dataclass(frozen=True)
class MinimumViolation(SchemaError):
    value: float
    minimum: float

    @property
    def message(self) -> str:
        return (
            f"{format_number(self.value)} is less than the minimum "
            f"{format_number(self.minimum)}"
        )


@dataclass(frozen=True)
class MaximumViolation(SchemaError):
    value: float
    maximum: float

    @property
    def message(self) -> str:
        return (
            f"{format_number(self.value)} is greater than the maximum "
            f"{format_number(self.maximum)}"
        )


@dataclass(frozen=True)
class MinLengthViolation(SchemaError):
    actual: int
    min_length: int

    @property
    def message(self) -> str:
        return (
            f"string length {self.actual} is less than the minimum length "
            f"{self.min_length}"
        )


@dataclass(frozen=True)
class MaxLengthViolation(SchemaError):
    actual: int
    max_length: int

    @property
    def message(self) -> str:
        return (
            f"string length {self.actual} is greater than the maximum "
            f"length {self.max_length}"
        )


@dataclass(frozen=True)
class MinItemsViolation(SchemaError):
    actual: int
    min_items: int

    @property
    def message(self) -> str:
        return (
            f"array has {self.actual} items, fewer than the minimum "
            f"{self.min_items}"
        )


@dataclass(frozen=True)
class MaxItemsViolation(SchemaError):
    actual: int
    max_items: int

    @property
    def message(self) -> str:
        return (
            f"array has {self.actual} items, more than the maximum "
            f"{self.max_items}"
        )


@dataclass(frozen=True)
class EnumViolation(SchemaError):
    @property
    def message(self) -> str:
        return "value is not one of the allowed values"


@dataclass(frozen=True)
class IntegerRequired(SchemaError):
    value: float

    @property
    def message(self) -> str:
        return f"expected an integer, got {format_number(self.value)}"


class SchemaValidationError(ValueError):
    """
    Raised by validate() when a value violates its schema.

    ``errors`` holds every violation found, in walk order.
    """

    def __init__(self, errors: list[SchemaError]) -> None:
        if not errors:
            msg = "SchemaValidationError requires at least one error"
            raise ValueError(msg)
        self.errors = errors
        noun = "error" if len(errors) == 1 else "errors"
        super().__init__(
            f"{len(errors)} schema validation {noun}; first: "
            f"{errors[0].path}: {errors[0].message}"
        )


def _resolve(schema: Schema) -> Schema:
    """
    Follows ref schemas to a concrete one.

    Cycles are detected on the resolver callables, so a resolver that builds
    a fresh ref on every call still terminates. A ref cycle, or a chain of
    more than MAX_REF_CHAIN refs, constrains nothing.
    """
    followed: set[Callable[[], Schema]] = set()
    while schema.ref is not None:
        if schema.ref in followed or len(followed) >= MAX_REF_CHAIN:
            return Schema()
        followed.add(schema.ref)
        schema = schema.ref()
    return schema


def _check_type(
    value: Value, expected: str, path: str, errors: list[SchemaError]
) -> bool:
    """
    Applies the type constraint.

    Returns False when the value's kind does not match, in which case the
    shape checks for this node are skipped.
    """
    actual = value.type_name
    if expected == "integer":
        if not isinstance(value, Number):
            errors.append(TypeMismatch(path, expected, actual))
            return False
        if not value.value.is_integer():
            errors.append(IntegerRequired(path, value.value))
        return True
    if actual != expected:
        errors.append(TypeMismatch(path, expected, actual))
        return False
    return True


def _validate_object(
    value: Object, schema: Schema, path: str, errors: list[SchemaError]
) -> None:
    for name in schema.required:
        if name not in value:
            errors.append(MissingRequired(path, name))
    for prop in schema.properties:
        field_value = value.get(prop.name)
        if field_value is not None:
            _validate_node(
                field_value, prop.schema, f"{path}.{prop.name}", errors
            )


def _validate_number(
    value: Number, schema: Schema, path: str, errors: list[SchemaError]
) -> None:
    if schema.minimum is not None and value.value < schema.minimum:
        errors.append(MinimumViolation(path, value.value, schema.minimum))
    if schema.maximum is not None and value.value > schema.maximum:
        errors.append(MaximumViolation(path, value.value, schema.maximum))


def _validate_string(
    value: String, schema: Schema, path: str, errors: list[SchemaError]
) -> None:
    length = len(value.value)
    if schema.min_length is not None and length < schema.min_length:
        errors.append(MinLengthViolation(path, length, schema.min_length))
    if schema.max_length is not None and length > schema.max_length:
        errors.append(MaxLengthViolation(path, length, schema.max_length))


def _validate_array(
    value: Array, schema: Schema, path: str, errors: list[SchemaError]
) -> None:
    count = value.size()
    if schema.min_items is not None and count < schema.min_items:
        errors.append(MinItemsViolation(path, count, schema.min_items))
    if schema.max_items is not None and count > schema.max_items:
        errors.append(MaxItemsViolation(path, count, schema.max_items))
    if schema.items is not None:
        for index, item in enumerate(value.items):
            _validate_node(item, schema.items, f"{path}[{index}]", errors)


def _validate_node(
    value: Value, schema: Schema, path: str, errors: list[SchemaError]
) -> None:
    schema = _resolve(schema)

    # Shape checks only apply to a value of the expected kind; enum always does.
    if schema.type_constraint is None or _check_type(
        value, schema.type_constraint, path, errors
    ):
        if isinstance(value, Object):
            _validate_object(value, schema, path, errors)
        elif isinstance(value, Number):
            _validate_number(value, schema, path, errors)
        elif isinstance(value, String):
            _validate_string(value, schema, path, errors)
        elif isinstance(value, Array):
            _validate_array(value, schema, path, errors)

    if schema.enum_values is not None and value not in schema.enum_values:
        errors.append(EnumViolation(path))


def collect_errors(value: Value, schema: Schema) -> list[SchemaError]:
    """
    Validates ``value`` against ``schema`` and returns every violation.

    An empty list means the value is valid. Ordering: the type check, then
    missing required fields, then declared properties in declaration order,
    then array elements in index order, then the enum check.
    """
    if not isinstance(value, Value):
        raise TypeError(f"expected a Value, not {type(value).__name__}")
    if not isinstance(schema, Schema):
        raise TypeError(f"expected a Schema, not {type(schema).__name__}")

    errors: list[SchemaError] = []
    with PhaseTimer("validate") as timer:
        _validate_node(value, schema, ROOT_PATH, errors)
        timer.failed = bool(errors)
    if errors:
        logger.debug("Validation found %d schema error(s)", len(errors))
    return errors


def validate(value: Value, schema: Schema) -> None:
    """
    Validates ``value`` against ``schema``.

    Raises SchemaValidationError carrying the complete error list when the
    value is invalid; the walk always finishes before raising.
    """
    errors = collect_errors(value, schema)
    if errors:
        raise SchemaValidationError(errors)


def is_valid(value: Value, schema: Schema) -> bool:
    return not collect_errors(value, schema)
