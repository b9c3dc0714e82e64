"""
JSON specification failure tests ensuring standards compliance.

Validates that invalid JSON strings raise the matching JsonError subclass
with precise line, column and offset information.
"""

import pytest

import jtree

from .conftest import JsonTestCase


def test_json_checker_failures(json_fail_cases: list[JsonTestCase]) -> None:
    """
    Validates the JSON_checker failure documents.

    Every rejected document raises its expected error kind with a usable
    location; the two accepted documents parse.
    """
    for case in json_fail_cases:
        if not case.should_fail:
            assert isinstance(jtree.parse(case.input_data), jtree.Value)
            continue

        assert case.expected_error is not None
        with pytest.raises(case.expected_error) as exc_info:
            jtree.parse(case.input_data)

        assert exc_info.value.pos >= 0, case.description
        assert exc_info.value.line >= 1, case.description
        assert exc_info.value.col >= 1, case.description


@pytest.mark.parametrize(
    "input_data,expected_error,expected_pos",
    [
        ("", jtree.UnexpectedEof, 0),
        ("[", jtree.UnexpectedEof, 1),
        ("[42", jtree.UnexpectedEof, 3),
        ("[42,", jtree.UnexpectedEof, 4),
        ('["', jtree.UnterminatedString, 2),
        ('["spam', jtree.UnterminatedString, 6),
        ('["spam"', jtree.UnexpectedEof, 7),
        ('["spam",', jtree.UnexpectedEof, 8),
        ("{", jtree.UnexpectedEof, 1),
        ('{"', jtree.UnterminatedString, 2),
        ('{"spam', jtree.UnterminatedString, 6),
        ('{"spam"', jtree.UnexpectedEof, 7),
        ('{"spam":', jtree.UnexpectedEof, 8),
        ('{"spam":42', jtree.UnexpectedEof, 10),
        ('{"spam":42,', jtree.UnexpectedEof, 11),
        ('"', jtree.UnterminatedString, 1),
        ('"spam', jtree.UnterminatedString, 5),
        ("tru", jtree.UnexpectedEof, 3),
        ("-", jtree.UnexpectedEof, 1),
        ("1.", jtree.UnexpectedEof, 2),
        ("1e", jtree.UnexpectedEof, 2),
        ('"\\', jtree.InvalidEscape, 2),
        ('"\\u12', jtree.InvalidEscape, 5),
    ],
)
def test_truncated_input_error_positions(
    input_data: str, expected_error: type[jtree.JsonError], expected_pos: int
) -> None:
    """
    Validates precise error positioning for truncated JSON inputs.
    """
    with pytest.raises(expected_error) as exc_info:
        jtree.parse(input_data)

    err = exc_info.value
    assert err.pos == expected_pos
    assert err.line == 1
    assert err.col == expected_pos + 1


@pytest.mark.parametrize(
    "input_data,context",
    [
        ("", "document"),
        ("[", "array"),
        ("[1", "array"),
        ('{"a":', "object"),
        ('{"a" ', "object"),
        ("nul", "literal"),
        ("-", "number"),
    ],
)
def test_unexpected_eof_context(input_data: str, context: str) -> None:
    """
    Validates that end-of-input errors name the construct being read.
    """
    with pytest.raises(jtree.UnexpectedEof) as exc_info:
        jtree.parse(input_data)

    assert exc_info.value.context == context
    assert f"in {context}" in exc_info.value.msg


@pytest.mark.parametrize(
    "input_data,found,expected_pos",
    [
        ("[,", ",", 1),
        ('{"spam":[}', "}", 9),
        ("[42:", ":", 3),
        ('[42 "spam"', '"', 4),
        ("[42,]", "]", 4),
        ('{"spam":[42}', "}", 11),
        ("{:", ":", 1),
        ("{,", ",", 1),
        ("{42", "4", 1),
        ("[{]", "]", 2),
        ('{"spam",', ",", 7),
        ('{"spam"}', "}", 7),
        ('[{"spam"]', "]", 8),
        ('{"spam":}', "}", 8),
        ('[{"spam":]', "]", 9),
        ('{"spam":42 "ham"', '"', 11),
        ('[{"spam":42]', "]", 11),
        ('{"spam":42,}', "}", 11),
        ('{"spam":42 , }', "}", 13),
        ("[123  , ]", "]", 8),
        ("NaN", "N", 0),
        ("Infinity", "I", 0),
        ("trUe", "U", 2),
    ],
)
def test_unexpected_token_positions(
    input_data: str, found: str, expected_pos: int
) -> None:
    """
    Validates the offending character and its position for unexpected data.
    """
    with pytest.raises(jtree.UnexpectedToken) as exc_info:
        jtree.parse(input_data)

    err = exc_info.value
    assert err.found == found
    assert err.pos == expected_pos
    assert err.line == 1
    assert err.col == expected_pos + 1


@pytest.mark.parametrize(
    "input_data,found,expected_pos",
    [
        ("[]]", "]", 2),
        ("{}}", "}", 2),
        ("[],[]", ",", 2),
        ("{},{}", ",", 2),
        ('42,"spam"', ",", 2),
        ('"spam",42', ",", 6),
        ("[1, 2, 3]5", "5", 9),
        ("null  x", "x", 6),
    ],
)
def test_trailing_content_positions(
    input_data: str, found: str, expected_pos: int
) -> None:
    """
    Validates precise error positioning for extra data after valid JSON.
    """
    with pytest.raises(jtree.TrailingContent) as exc_info:
        jtree.parse(input_data)

    err = exc_info.value
    assert err.found == found
    assert err.pos == expected_pos
    assert err.col == expected_pos + 1


@pytest.mark.parametrize(
    "input_data,expected_line,expected_col,expected_pos",
    [
        ("!", 1, 1, 0),
        (" !", 1, 2, 1),
        ("\n!", 2, 1, 1),
        ("\n  \n\n     !", 4, 6, 10),
        ("[1,\r\n 2,\r\n !]", 3, 2, 11),
    ],
)
def test_line_column_calculation(
    input_data: str, expected_line: int, expected_col: int, expected_pos: int
) -> None:
    """
    Validates accurate line and column number calculation for multi-line JSON.
    """
    with pytest.raises(jtree.UnexpectedToken) as exc_info:
        jtree.parse(input_data)

    err = exc_info.value
    assert err.found == "!"
    assert err.pos == expected_pos
    assert err.line == expected_line
    assert err.col == expected_col

    expected_str = f"at line {expected_line}, column {expected_col}"
    assert str(err).endswith(expected_str)


def test_error_location_in_nested_document() -> None:
    """
    Validates the location of an error several lines into a document.
    """
    source = '{\n  "a": [1, 2],\n  "b": tru\n}'

    with pytest.raises(jtree.UnexpectedToken) as exc_info:
        jtree.parse(source)

    err = exc_info.value
    assert err.found == "\n"
    assert (err.line, err.col) == (3, 11)


def test_errors_are_value_errors() -> None:
    """
    Validates every parse error can be caught as ValueError.
    """
    with pytest.raises(ValueError):
        jtree.parse("[1,]")
    assert issubclass(jtree.MaxDepthExceeded, jtree.JsonError)
    assert issubclass(jtree.JsonError, ValueError)


def test_too_deep_document_depends_on_limit() -> None:
    """
    Validates that the 20-level fail18 document is a depth-policy case.

    It parses under the default ceiling and fails once max_depth drops
    below its nesting.
    """
    doc = '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]'

    value = jtree.parse(doc)
    for _ in range(19):
        value = value.at(0)
    assert value == jtree.from_python(["Too deep"])

    assert jtree.parse_with_max_depth(doc, 20) == jtree.parse(doc)
    with pytest.raises(jtree.MaxDepthExceeded) as exc_info:
        jtree.parse_with_max_depth(doc, 19)
    assert exc_info.value.depth == 20
    assert exc_info.value.pos == 19
