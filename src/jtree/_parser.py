"""
Recursive-descent JSON parser.

Single pass over the source with one character of lookahead after
whitespace. ParserState owns the cursor (offset, line, column) and the
nesting depth; JsonParser owns the grammar. Both live for exactly one parse
call, so concurrent calls never share state.
"""

import logging
import math
from typing import IO
from typing import Final

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
from ._limits import ParseConfig
from ._limits import ParseLimits
from ._limits import default_limits
from ._limits import with_max_depth
from ._profile import PhaseTimer
from ._value import FALSE
from ._value import NULL
from ._value import TRUE
from ._value import Array
from ._value import Number
from ._value import Object
from ._value import String
from ._value import Value

logger = logging.getLogger(__name__)

WHITESPACE: Final = frozenset(" \t\n\r")
DIGITS: Final = frozenset("0123456789")
HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

REPLACEMENT_CHAR: Final = "\ufffd"
HIGH_SURROGATES: Final = range(0xD800, 0xDC00)
LOW_SURROGATES: Final = range(0xDC00, 0xE000)
CONTROL_LIMIT: Final = 0x20


class ParserState:
    """
    Cursor over the source text.

    Tracks the character offset, the 1-based line and column of the next
    character, and the current container nesting depth.
    """

    def __init__(self, text: str, limits: ParseLimits) -> None:
        self.text = text
        self.length = len(text)
        self.limits = limits
        self.pos = 0
        self.line = 1
        self.col = 1
        self.depth = 0

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self) -> str:
        """Returns the current character, or "" at end of input."""
        return self.text[self.pos] if self.pos < self.length else ""

    def advance(self) -> str:
        """Consumes the current character, updating line and column."""
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return char

    def skip_whitespace(self) -> None:
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.advance()

    def location(self) -> dict[str, int]:
        return {"line": self.line, "col": self.col, "pos": self.pos}


class JsonParser:
    """
    Grammar over a ParserState.

    Every error is raised at the point of detection with the cursor's
    location; nothing is recovered or accumulated.
    """

    def __init__(self, state: ParserState, *, strict: bool = False) -> None:
        self.state = state
        self.strict = strict

    def parse_document(self) -> Value:
        """Parses exactly one value surrounded by optional whitespace."""
        state = self.state
        state.skip_whitespace()
        value = self.parse_value("document")
        state.skip_whitespace()
        if not state.at_end():
            raise TrailingContent(state.peek(), **state.location())
        return value

    def parse_value(self, context: str) -> Value:
        """Dispatches on the lookahead character; whitespace already skipped."""
        state = self.state
        char = state.peek()

        if not char:
            raise UnexpectedEof("value", context, **state.location())
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char == '"':
            return String(self.parse_string())
        if char == "-" or char in DIGITS:
            return self.parse_number()
        if char == "t":
            self._expect_literal("true")
            return TRUE
        if char == "f":
            self._expect_literal("false")
            return FALSE
        if char == "n":
            self._expect_literal("null")
            return NULL
        raise UnexpectedToken("value", char, **state.location())

    def _expect_literal(self, word: str) -> None:
        state = self.state
        for expected in word:
            char = state.peek()
            if not char:
                raise UnexpectedEof(f"'{word}'", "literal", **state.location())
            if char != expected:
                raise UnexpectedToken(f"'{word}'", char, **state.location())
            state.advance()

    def _enter_container(self) -> None:
        # Checked before consuming the bracket so no recursion happens past
        # the ceiling.
        state = self.state
        state.depth += 1
        if state.depth > state.limits.max_depth:
            raise MaxDepthExceeded(
                state.depth, state.limits.max_depth, **state.location()
            )

    def _leave_container(self) -> None:
        self.state.depth -= 1

    def parse_array(self) -> Array:
        """Parses an array; the cursor is on '['."""
        state = self.state
        self._enter_container()
        state.advance()
        state.skip_whitespace()

        items: list[Value] = []
        if state.peek() == "]":
            state.advance()
            self._leave_container()
            return Array(())

        max_items = state.limits.max_array_items
        while True:
            if max_items is not None and len(items) + 1 > max_items:
                raise TooManyArrayItems(
                    len(items) + 1, max_items, **state.location()
                )
            items.append(self.parse_value("array"))
            state.skip_whitespace()

            char = state.peek()
            if char == ",":
                state.advance()
                state.skip_whitespace()
            elif char == "]":
                state.advance()
                break
            elif not char:
                raise UnexpectedEof(
                    "',' or ']'", "array", **state.location()
                )
            else:
                raise UnexpectedToken(
                    "',' or ']'", char, **state.location()
                )

        self._leave_container()
        return Array(tuple(items))

    def parse_object(self) -> Object:
        """
        Parses an object; the cursor is on '{'.

        Lenient mode keeps the first value of a repeated key and still parses
        (and discards) the later ones. Strict mode raises DuplicateKey right
        after the repeated key is read.
        """
        state = self.state
        self._enter_container()
        state.advance()
        state.skip_whitespace()

        pairs: list[tuple[str, Value]] = []
        seen: set[str] = set()
        if state.peek() == "}":
            state.advance()
            self._leave_container()
            return Object(())

        max_fields = state.limits.max_object_fields
        while True:
            char = state.peek()
            if char != '"':
                if not char:
                    raise UnexpectedEof(
                        "string key", "object", **state.location()
                    )
                raise UnexpectedToken(
                    "string key", char, **state.location()
                )

            key_location = state.location()
            key = self.parse_string()
            duplicate = key in seen
            if duplicate and self.strict:
                raise DuplicateKey(key, **state.location())
            if (
                not duplicate
                and max_fields is not None
                and len(pairs) + 1 > max_fields
            ):
                raise TooManyObjectFields(
                    len(pairs) + 1, max_fields, **key_location
                )

            state.skip_whitespace()
            char = state.peek()
            if char != ":":
                if not char:
                    raise UnexpectedEof(
                        "':'", "object", **state.location()
                    )
                raise UnexpectedToken("':'", char, **state.location())
            state.advance()
            state.skip_whitespace()

            value = self.parse_value("object")
            if not duplicate:
                seen.add(key)
                pairs.append((key, value))
            state.skip_whitespace()

            char = state.peek()
            if char == ",":
                state.advance()
                state.skip_whitespace()
            elif char == "}":
                state.advance()
                break
            elif not char:
                raise UnexpectedEof(
                    "',' or '}'", "object", **state.location()
                )
            else:
                raise UnexpectedToken(
                    "',' or '}'", char, **state.location()
                )

        self._leave_container()
        return Object(tuple(pairs))

    def parse_string(self) -> str:
        """
        Parses a string literal; the cursor is on the opening quote.

        Length is counted in decoded code points and checked against
        max_string_length after every character.
        """
        state = self.state
        state.advance()

        chunks: list[str] = []
        max_length = state.limits.max_string_length
        while True:
            char = state.peek()
            if not char:
                raise UnterminatedString(**state.location())
            if char == '"':
                state.advance()
                break

            char_location = state.location()
            if char == "\\":
                decoded = self._parse_escape()
            elif ord(char) < CONTROL_LIMIT:
                raise ControlChar(ord(char), **char_location)
            else:
                state.advance()
                decoded = char

            chunks.append(decoded)
            if max_length is not None and len(chunks) > max_length:
                raise StringTooLong(
                    len(chunks), max_length, **char_location
                )

        return "".join(chunks)

    def _parse_escape(self) -> str:
        """Decodes one escape; the cursor is on the backslash."""
        state = self.state
        state.advance()

        char = state.peek()
        if not char:
            raise InvalidEscape(
                "\\", "end of input after backslash", **state.location()
            )
        simple = ESCAPES.get(char)
        if simple is not None:
            state.advance()
            return simple
        if char != "u":
            raise InvalidEscape(
                "\\" + char, "unknown escape character", **state.location()
            )
        state.advance()

        code = self._read_hex_quad()
        if code in HIGH_SURROGATES:
            low = self._peek_low_surrogate()
            if low is None:
                return REPLACEMENT_CHAR
            for _ in range(6):
                state.advance()
            return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
        if code in LOW_SURROGATES:
            return REPLACEMENT_CHAR
        return chr(code)

    def _read_hex_quad(self) -> int:
        state = self.state
        digits = ""
        for _ in range(4):
            char = state.peek()
            if not char:
                raise InvalidEscape(
                    "\\u" + digits,
                    "incomplete unicode escape",
                    **state.location(),
                )
            if char not in HEX_DIGITS:
                raise InvalidEscape(
                    "\\u" + digits + char,
                    "invalid hex digit in unicode escape",
                    **state.location(),
                )
            digits += state.advance()
        return int(digits, 16)

    def _peek_low_surrogate(self) -> int | None:
        """
        Returns the low surrogate encoded by an immediately following \\uXXXX.

        Nothing is consumed; a malformed or non-low escape is left for the
        string loop to handle on its own.
        """
        state = self.state
        start = state.pos
        candidate = state.text[start + 2 : start + 6]
        if (
            state.text[start : start + 2] != "\\u"
            or len(candidate) != 4
            or not all(c in HEX_DIGITS for c in candidate)
        ):
            return None
        code = int(candidate, 16)
        if code not in LOW_SURROGATES:
            return None
        return code

    def parse_number(self) -> Number:
        """
        Parses a number; the cursor is on '-' or a digit.

        Grammar: -? (0 | [1-9][0-9]*) (.[0-9]+)? ([eE][+-]?[0-9]+)?
        Magnitudes that overflow to infinity are rejected; underflow to zero
        is accepted.
        """
        state = self.state
        text = state.text
        start = state.pos

        if state.peek() == "-":
            state.advance()
            self._require_digit(start, "expected digit after minus sign")

        if state.peek() == "0":
            state.advance()
            if state.peek() in DIGITS:
                location = state.location()
                end = state.pos
                while end < state.length and text[end] in DIGITS:
                    end += 1
                raise InvalidNumber(
                    text[start:end],
                    "leading zeros are not allowed",
                    **location,
                )
        else:
            self._consume_digits()

        if state.peek() == ".":
            state.advance()
            self._require_digit(start, "expected digit after decimal point")
            self._consume_digits()

        if state.peek() in ("e", "E"):
            state.advance()
            if state.peek() in ("+", "-"):
                state.advance()
            self._require_digit(start, "expected digit in exponent")
            self._consume_digits()

        literal = text[start : state.pos]
        number = float(literal)
        if math.isinf(number):
            raise InvalidNumber(
                literal, "number out of range", **state.location()
            )
        return Number(number)

    def _require_digit(self, start: int, reason: str) -> None:
        state = self.state
        char = state.peek()
        if not char:
            raise UnexpectedEof("digit", "number", **state.location())
        if char not in DIGITS:
            raise InvalidNumber(
                state.text[start : state.pos], reason, **state.location()
            )

    def _consume_digits(self) -> None:
        state = self.state
        while state.peek() in DIGITS:
            state.advance()


def _parse(text: str, config: ParseConfig) -> Value:
    """
    Main parser entry point shared by every public parse variant.

    A RecursionError can only happen when max_depth is set beyond what the
    interpreter stack allows; it is reported as a MaxDepthExceeded with
    ``stack_exhausted`` set, at the depth reached.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON text must be str, not {type(text).__name__}"
        )

    with PhaseTimer("parse") as timer:
        state = ParserState(text, config.limits)
        parser = JsonParser(state, strict=config.strict)
        try:
            return parser.parse_document()
        except RecursionError as exc:
            raise MaxDepthExceeded(
                state.depth,
                config.limits.max_depth,
                stack_exhausted=True,
                **state.location(),
            ) from exc
        except JsonError as exc:
            logger.debug(
                "Parse failed (%s) at line %d, column %d",
                exc.kind,
                exc.line,
                exc.col,
            )
            raise
        finally:
            timer.chars = state.pos


def parse(text: str) -> Value:
    """
    Parses JSON text leniently with the default limits.

    The first occurrence of a duplicated object key wins.
    """
    return _parse(text, ParseConfig())


def parse_strict(text: str) -> Value:
    """Parses JSON text, raising DuplicateKey on repeated object keys."""
    return _parse(text, ParseConfig(strict=True))


def parse_with_max_depth(text: str, max_depth: int) -> Value:
    return _parse(
        text, ParseConfig(limits=with_max_depth(default_limits(), max_depth))
    )


def parse_strict_with_max_depth(text: str, max_depth: int) -> Value:
    return _parse(
        text,
        ParseConfig(
            strict=True, limits=with_max_depth(default_limits(), max_depth)
        ),
    )


def parse_with_limits(text: str, limits: ParseLimits) -> Value:
    return _parse(text, ParseConfig(limits=limits))


def parse_strict_with_limits(text: str, limits: ParseLimits) -> Value:
    return _parse(text, ParseConfig(strict=True, limits=limits))


def load(
    fp: IO[str], *, strict: bool = False, limits: ParseLimits | None = None
) -> Value:
    """Parses JSON from a text file-like object."""
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    if limits is None:
        config = ParseConfig(strict=strict)
    else:
        config = ParseConfig(strict=strict, limits=limits)
    return _parse(fp.read(), config)
