import json

import pytest

from podrum.jsonparser import JsonParser, parse
from podrum.jsonscalars import JsonError


def test_parse_object_with_mixed_members():
    text = '{"a": 1, "b": [true, false, null], "c": "x", "d": -2.5}'
    assert parse(text) == {"a": 1, "b": [True, False, None], "c": "x", "d": -2.5}


def test_parse_empty_containers():
    assert parse("{}") == {}
    assert parse("[]") == []


def test_parse_nested_structures():
    text = '[{"k": [1, [2, {"z": "w"}]]}, []]'
    assert parse(text) == [{"k": [1, [2, {"z": "w"}]]}, []]


def test_round_trip_through_json_dumps():
    data = {
        "name": "stone",
        "runtime_id": 1,
        "component_based": False,
        "tags": ["a", "b"],
        "nested": {"x": -3, "y": 0.5, "n": None},
    }
    assert parse(json.dumps(data)) == data
    assert parse(json.dumps(data, indent=2)) == data


def test_root_that_is_not_a_container_is_empty():
    assert parse("   \n\t") is None
    assert parse("") is None
    assert parse('"text"') is None


def test_trailing_comma_is_accepted():
    assert parse("[1,]") == [1]
    assert parse('{"a": 1,}') == {"a": 1}


def test_first_of_repeated_keys_wins():
    assert parse('{"a": 1, "a": 2}') == {"a": 1}


def test_unicode_escape_in_member():
    assert parse('["\\u00e9"]') == ["\u00e9"]


@pytest.mark.parametrize(
    "text, message",
    [
        ("[1 2]", "Unexpected character"),
        ("{1: 2}", "Expected string"),
        ("[1", "Unexpected EOF"),
        ("[x]", "Invalid member"),
        ("[,]", "Invalid member"),
        ('{"a"}', "Expected value"),
        ('{"a":}', "Expected value"),
        ('{"a" "b"}', "Unexpected character"),
    ],
)
def test_malformed_documents_raise(text, message):
    with pytest.raises(JsonError, match=message):
        parse(text)


def test_parse_array_not_at_bracket_leaves_position():
    parser = JsonParser('{"a": 1}')
    assert parser.parse_array() is None
    assert parser.pos == 0


def test_parse_object_not_at_brace_leaves_position():
    parser = JsonParser("[1]")
    assert parser.parse_object() is None
    assert parser.pos == 0


def test_parse_array_advances_past_closing_bracket():
    text = "[1, 2] tail"
    parser = JsonParser(text)
    assert parser.parse_array() == [1, 2]
    assert text[parser.pos:] == " tail"


def test_parse_value_scalars():
    assert JsonParser("true").parse_value() is True
    assert JsonParser('"hi"').parse_value() == "hi"
    assert JsonParser("null").parse_value() is None


def test_parse_value_number_needs_terminator():
    with pytest.raises(JsonError, match="Unexpected EOF"):
        JsonParser("12").parse_value()
    assert JsonParser("12,").parse_value() == 12


def test_parse_value_rejects_unknown_start():
    with pytest.raises(JsonError, match="Invalid member"):
        JsonParser("x").parse_value()


def test_parse_value_at_end_raises():
    with pytest.raises(JsonError, match="Unexpected EOF"):
        JsonParser("").parse_value()