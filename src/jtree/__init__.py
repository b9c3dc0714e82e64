"""
JSON parsing engine and schema validator.

Parses JSON text into an immutable Value tree with precise, typed
diagnostics and configurable resource limits, and validates Value trees
against declarative schemas, reporting every violation with its path.
"""

from ._builder import ArrayBuilder
from ._builder import ObjectBuilder
from ._builder import from_python
from ._builder import to_python
from ._encoder import EncodeConfig
from ._encoder import dump
from ._encoder import format_number
from ._encoder import stringify
from ._encoder import stringify_pretty
from ._errors import ControlChar
from ._errors import DuplicateKey
from ._errors import InvalidEscape
from ._errors import InvalidNumber
from ._errors import JsonError
from ._errors import MaxDepthExceeded
from ._errors import StringTooLong
from ._errors import TooManyArrayItems
from ._errors import TooManyObjectFields
from ._errors import TrailingContent
from ._errors import UnexpectedEof
from ._errors import UnexpectedToken
from ._errors import UnterminatedString
from ._format import error_byte_offset
from ._format import error_column
from ._format import error_line
from ._format import format_error
from ._format import format_error_with_context
from ._format import format_schema_error
from ._format import format_schema_errors
from ._limits import ParseConfig
from ._limits import ParseLimits
from ._limits import default_limits
from ._limits import default_max_depth
from ._limits import unlimited_limits
from ._limits import with_max_depth
from ._merge import deep_merge
from ._merge import merge
from ._parser import load
from ._parser import parse
from ._parser import parse_strict
from ._parser import parse_strict_with_limits
from ._parser import parse_strict_with_max_depth
from ._parser import parse_with_limits
from ._parser import parse_with_max_depth
from ._path import PathError
from ._path import get_path
from ._path import remove_path
from ._path import set_path
from ._profile import PhaseStats
from ._profile import clear_phase_stats
from ._profile import get_phase_stats
from ._schema import Schema
from ._schema import SchemaProperty
from ._schema import schema_any
from ._schema import schema_array
from ._schema import schema_enum
from ._schema import schema_integer
from ._schema import schema_number
from ._schema import schema_object
from ._schema import schema_property
from ._schema import schema_ref
from ._schema import schema_string
from ._schema import schema_type
from ._validator import EnumViolation
from ._validator import IntegerRequired
from ._validator import MaximumViolation
from ._validator import MaxItemsViolation
from ._validator import MaxLengthViolation
from ._validator import MinimumViolation
from ._validator import MinItemsViolation
from ._validator import MinLengthViolation
from ._validator import MissingRequired
from ._validator import SchemaError
from ._validator import SchemaValidationError
from ._validator import TypeMismatch
from ._validator import collect_errors
from ._validator import is_valid
from ._validator import validate
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
from ._value import values_equal

__version__ = "0.1.0"

__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "Array",
    "ArrayBuilder",
    "Bool",
    "ControlChar",
    "DuplicateKey",
    "EncodeConfig",
    "EnumViolation",
    "IntegerRequired",
    "InvalidEscape",
    "InvalidNumber",
    "JsonError",
    "MaxDepthExceeded",
    "MaxItemsViolation",
    "MaxLengthViolation",
    "MaximumViolation",
    "MinItemsViolation",
    "MinLengthViolation",
    "MinimumViolation",
    "MissingRequired",
    "Null",
    "Number",
    "Object",
    "ObjectBuilder",
    "ParseConfig",
    "ParseLimits",
    "PathError",
    "PhaseStats",
    "Schema",
    "SchemaError",
    "SchemaProperty",
    "SchemaValidationError",
    "String",
    "StringTooLong",
    "TooManyArrayItems",
    "TooManyObjectFields",
    "TrailingContent",
    "TypeMismatch",
    "UnexpectedEof",
    "UnexpectedToken",
    "UnterminatedString",
    "Value",
    "__version__",
    "clear_phase_stats",
    "collect_errors",
    "deep_merge",
    "default_limits",
    "default_max_depth",
    "dump",
    "error_byte_offset",
    "error_column",
    "error_line",
    "format_error",
    "format_error_with_context",
    "format_number",
    "format_schema_error",
    "format_schema_errors",
    "from_python",
    "get_phase_stats",
    "get_path",
    "is_valid",
    "load",
    "merge",
    "parse",
    "parse_strict",
    "parse_strict_with_limits",
    "parse_strict_with_max_depth",
    "parse_with_limits",
    "parse_with_max_depth",
    "remove_path",
    "schema_any",
    "schema_array",
    "schema_enum",
    "schema_integer",
    "schema_number",
    "schema_object",
    "schema_property",
    "schema_ref",
    "schema_string",
    "schema_type",
    "set_path",
    "stringify",
    "stringify_pretty",
    "to_python",
    "unlimited_limits",
    "validate",
    "values_equal",
    "with_max_depth",
]
