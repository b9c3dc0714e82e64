"""
Parse diagnostics.

Every failure the parser can report is a subclass of JsonError carrying the
1-based line and column where it was detected, the 0-based character offset,
and the fields specific to its kind. Grammar errors and policy errors alike
stop the parse at the first occurrence.
"""

from typing import ClassVar
from typing import TypeAlias

Position: TypeAlias = int


class JsonError(ValueError):
    """
    Handles JSON parsing failures with precise location information.

    The message is rendered once at construction and has the shape
    ``<kind-specific text> at line L, column C``.
    """

    kind: ClassVar[str] = "error"

    def __init__(
        self, msg: str, *, line: int, col: int, pos: Position = 0
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if line < 1 or col < 1:
            raise ValueError("line and col are 1-based")

        self.msg = msg
        self.line = line
        self.col = col
        self.pos = pos

        super().__init__(f"{msg} at line {line}, column {col}")


class UnexpectedEof(JsonError):
    kind = "unexpected_eof"

    def __init__(
        self, expected: str, context: str, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.expected = expected
        self.context = context
        super().__init__(
            f"Unexpected end of input in {context}: expected {expected}",
            line=line,
            col=col,
            pos=pos,
        )


class UnexpectedToken(JsonError):
    kind = "unexpected_token"

    def __init__(
        self, expected: str, found: str, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Unexpected {found!r}: expected {expected}",
            line=line,
            col=col,
            pos=pos,
        )


class UnterminatedString(JsonError):
    kind = "unterminated_string"

    def __init__(self, *, line: int, col: int, pos: int = 0) -> None:
        super().__init__("Unterminated string", line=line, col=col, pos=pos)


class InvalidEscape(JsonError):
    kind = "invalid_escape"

    def __init__(
        self, sequence: str, reason: str, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.sequence = sequence
        self.reason = reason
        super().__init__(
            f"Invalid escape sequence {sequence!r}: {reason}",
            line=line,
            col=col,
            pos=pos,
        )


class ControlChar(JsonError):
    """Raw control character (U+0000 to U+001F) inside a string."""

    kind = "control_char"

    def __init__(self, code: int, *, line: int, col: int, pos: int = 0) -> None:
        self.code = code
        super().__init__(
            f"Invalid control character U+{code:04X} in string",
            line=line,
            col=col,
            pos=pos,
        )


class InvalidNumber(JsonError):
    kind = "invalid_number"

    def __init__(
        self, value: str, reason: str, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid number {value!r}: {reason}", line=line, col=col, pos=pos
        )


class TrailingContent(JsonError):
    kind = "trailing_content"

    def __init__(
        self, found: str, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.found = found
        super().__init__(
            f"Unexpected trailing content {found!r} after value",
            line=line,
            col=col,
            pos=pos,
        )


class MaxDepthExceeded(JsonError):
    kind = "max_depth_exceeded"

    def __init__(
        self,
        depth: int,
        max_depth: int,
        *,
        line: int,
        col: int,
        pos: int = 0,
        stack_exhausted: bool = False,
    ) -> None:
        self.depth = depth
        self.max_depth = max_depth
        self.stack_exhausted = stack_exhausted
        if stack_exhausted:
            msg = (
                f"Nesting depth {depth} exhausted the interpreter stack "
                f"below the configured maximum depth {max_depth}"
            )
        else:
            msg = f"Nesting depth {depth} exceeds maximum depth {max_depth}"
        super().__init__(msg, line=line, col=col, pos=pos)


class DuplicateKey(JsonError):
    kind = "duplicate_key"

    def __init__(self, key: str, *, line: int, col: int, pos: int = 0) -> None:
        self.key = key
        super().__init__(
            f"Duplicate object key {key!r}", line=line, col=col, pos=pos
        )


class StringTooLong(JsonError):
    kind = "string_too_long"

    def __init__(
        self, length: int, max_length: int, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"String length {length} exceeds maximum length {max_length}",
            line=line,
            col=col,
            pos=pos,
        )


class TooManyArrayItems(JsonError):
    kind = "too_many_array_items"

    def __init__(
        self, count: int, max_items: int, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.count = count
        self.max_items = max_items
        super().__init__(
            f"Array item count {count} exceeds maximum {max_items}",
            line=line,
            col=col,
            pos=pos,
        )


class TooManyObjectFields(JsonError):
    kind = "too_many_object_fields"

    def __init__(
        self, count: int, max_fields: int, *, line: int, col: int, pos: int = 0
    ) -> None:
        self.count = count
        self.max_fields = max_fields
        super().__init__(
            f"Object field count {count} exceeds maximum {max_fields}",
            line=line,
            col=col,
            pos=pos,
        )
