"""Unit tests for OrderedSection."""
from __future__ import annotations

import json

import pytest

from tgplay.ordered import OrderedSection, ParseError


def test_from_json_keeps_source_order():
    """Keys come back in the order they were written, not sorted."""
    section = OrderedSection.from_json('{"zeta": "1", "alpha": "2", "mid": "3"}')

    assert section.keys == ["zeta", "alpha", "mid"]
    assert section.values == {"zeta": "1", "alpha": "2", "mid": "3"}
    assert list(section) == ["zeta", "alpha", "mid"]
    assert len(section) == 3


def test_keys_and_values_agree():
    section = OrderedSection.from_json('{"b": "x", "a": "y"}')
    assert set(section.keys) == set(section.values)


def test_round_trip_preserves_order_and_values():
    """Serializing then parsing again gives the same section."""
    section = OrderedSection([("work", "~/work"), ("div1", "Projects"), ("api", "~/src/api")])

    again = OrderedSection.from_json(section.to_json())

    assert again == section
    assert again.keys == ["work", "div1", "api"]


def test_to_json_writes_keys_in_order():
    section = OrderedSection([("z", "1"), ("a", "2")])
    text = section.to_json()
    assert text.index('"z"') < text.index('"a"')
    assert json.loads(text) == {"z": "1", "a": "2"}


def test_empty_object():
    section = OrderedSection.from_json("{}")
    assert section.keys == []
    assert len(section) == 0
    assert section.to_json() == "{}"


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"a": "1",',
        "[]",
        '"just a string"',
        '{"a": 1}',
        '{"a": {"nested": "x"}}',
        '{"a": "1", "a": "2"}',
    ],
)
def test_malformed_input_raises_parse_error(text):
    with pytest.raises(ParseError):
        OrderedSection.from_json(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        OrderedSection.from_json("[1, 2]")


def test_from_object_accepts_plain_dict():
    section = OrderedSection.from_object({"one": "1", "two": "2"})
    assert section.items() == [("one", "1"), ("two", "2")]


def test_mapping_helpers():
    section = OrderedSection([("home", "~")])
    assert "home" in section
    assert "missing" not in section
    assert section.get("home") == "~"
    assert section.get("missing") is None
    assert section.get("missing", "x") == "x"


def test_unicode_values_survive_round_trip():
    section = OrderedSection([("notes ✏️", "café ☕")])
    assert OrderedSection.from_json(section.to_json()) == section
