"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test data fixtures: the JSON_checker pass/fail corpus,
basic values, and the schemas used across the validation tests.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jtree


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    ``expected_error`` names the JsonError subclass a failing case raises.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_error: type[jtree.JsonError] | None = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides the json.org JSON_checker failure documents.

    fail1 (a bare string) and fail18 (20 levels of nesting) are accepted:
    any value may be a document, and the default depth ceiling is 128.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        ('"A JSON payload should be an object or array, not a string."', None),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', jtree.UnexpectedEof),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', jtree.TrailingContent),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', jtree.TrailingContent),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            jtree.TrailingContent,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail13.json
        ('{"Numbers cannot have leading zeroes": 013}', jtree.InvalidNumber),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail15.json
        ('["Illegal backslash escape: \\x15"]', jtree.InvalidEscape),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail17.json
        ('["Illegal backslash escape: \\017"]', jtree.InvalidEscape),
        # https://json.org/JSON_checker/test/fail18.json
        ('[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]', None),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", jtree.UnexpectedToken),
        # https://json.org/JSON_checker/test/fail25.json
        ('["\ttab\tcharacter\tin\tstring\t"]', jtree.ControlChar),
        # https://json.org/JSON_checker/test/fail26.json
        ('["tab\\   character\\   in\\  string\\  "]', jtree.InvalidEscape),
        # https://json.org/JSON_checker/test/fail27.json
        ('["line\nbreak"]', jtree.ControlChar),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', jtree.InvalidEscape),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", jtree.InvalidNumber),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", jtree.InvalidNumber),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", jtree.InvalidNumber),
        # https://json.org/JSON_checker/test/fail32.json
        ('{"Comma instead if closing brace": true,', jtree.UnexpectedEof),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', jtree.UnexpectedToken),
        # https://code.google.com/archive/p/simplejson/issues/3
        ('["A\u001fZ control characters in string"]', jtree.ControlChar),
    ]

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=error is not None,
            expected_error=error,
        )
        for idx, (doc, error) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully per JSON specification.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data=(
                '{"JSON Test Pattern pass3": {"The outermost value": '
                '"must be an object or array.", "In this test": '
                '"It is an object."}}'
            ),
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures;
    ``expected_output`` is the native form returned by to_python().
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


@pytest.fixture
def user_schema() -> jtree.Schema:
    """Object schema for a user record with nested constraints."""
    return jtree.schema_object(
        properties=[
            jtree.schema_property("name", jtree.schema_string(min_length=1)),
            jtree.schema_property(
                "age", jtree.schema_integer(minimum=0, maximum=150)
            ),
            jtree.schema_property(
                "email", jtree.schema_string(min_length=3, max_length=254)
            ),
            jtree.schema_property(
                "tags",
                jtree.schema_array(
                    items=jtree.schema_string(), max_items=3
                ),
            ),
        ],
        required=["name", "age"],
    )


@pytest.fixture
def order_schema() -> jtree.Schema:
    """Order whose line items each carry a name and a non-negative price."""
    line_item = jtree.schema_object(
        properties=[
            jtree.schema_property("name", jtree.schema_string(min_length=1)),
            jtree.schema_property("price", jtree.schema_number(minimum=0)),
            jtree.schema_property("qty", jtree.schema_integer(minimum=1)),
        ],
        required=["name", "price"],
    )
    return jtree.schema_object(
        properties=[
            jtree.schema_property(
                "status", jtree.schema_enum(["open", "paid", "shipped"])
            ),
            jtree.schema_property(
                "items", jtree.schema_array(items=line_item, min_items=1)
            ),
        ],
        required=["items"],
    )
