"""Human-readable rendering of parse and validation diagnostics."""

from collections.abc import Iterable

from ._errors import JsonError
from ._line_index import LineIndex
from ._validator import SchemaError


def format_error(error: JsonError) -> str:
    """One-line message ending with the line and column of the failure."""
    return str(error)


def error_line(error: JsonError) -> int:
    return error.line


def error_column(error: JsonError) -> int:
    return error.col


def error_byte_offset(source: str, error: JsonError) -> int:
    """Offset of the failure in the UTF-8 encoding of ``source``."""
    return LineIndex(source).byte_offset(error.pos)


def format_error_with_context(source: str, error: JsonError) -> str:
    """
    Renders the message, the offending source line, and a caret under the
    column where the failure was detected.

    Tabs before the column are copied into the caret line so the caret lines
    up regardless of tab width.
    """
    line_text = LineIndex(source).line_text(error.line)
    prefix = line_text[: error.col - 1]
    padding = "".join("\t" if char == "\t" else " " for char in prefix)
    padding += " " * (error.col - 1 - len(prefix))
    return f"{format_error(error)}\n{line_text}\n{padding}^"


def format_schema_error(error: SchemaError) -> str:
    return f"{error.path}: {error.message}"


def format_schema_errors(errors: Iterable[SchemaError]) -> str:
    """One formatted error per line, in the order given."""
    return "\n".join(format_schema_error(error) for error in errors)
