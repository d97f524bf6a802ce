# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

import json

import pytest

from coreason_authz.exceptions import InvalidJsonError
from coreason_authz.utils.json_fields import (
    dumps,
    get_array,
    get_string,
    get_string_array,
    loads,
    map_array,
    merge_known_fields,
    split_known_fields,
)


def test_split_known_and_other_fields() -> None:
    """Known properties are promoted, the rest is kept as one JSON object text."""
    obj = {"type": "X", "locations": ["a"], "custom": "Y"}

    known, other = split_known_fields(obj, ["type", "locations"])

    assert known == {"type": "X", "locations": ["a"]}
    assert other == '{"custom":"Y"}'


def test_split_without_residual_returns_none_not_empty_object() -> None:
    known, other = split_known_fields({"type": "X"}, ["type", "locations"])
    assert known == {"type": "X"}
    assert other is None


def test_split_empty_object() -> None:
    known, other = split_known_fields({}, ["type"])
    assert known == {}
    assert other is None


def test_split_none_input() -> None:
    """Absent data is not an error."""
    assert split_known_fields(None, ["type"]) == ({}, None)


def test_split_known_null_is_treated_as_absent() -> None:
    known, other = split_known_fields({"type": None, "extra": None}, ["type"])
    assert known == {}
    # Unknown nulls are preserved verbatim
    assert other == '{"extra":null}'


def test_split_preserves_nested_values_verbatim() -> None:
    obj = {"type": "t", "prop2": {"sub0": "d", "sub1": ["e", "f"]}, "num": 1.5, "flag": False}

    _, other = split_known_fields(obj, ["type"])

    assert other is not None
    assert json.loads(other) == {"prop2": {"sub0": "d", "sub1": ["e", "f"]}, "num": 1.5, "flag": False}


def test_split_preserves_non_ascii() -> None:
    _, other = split_known_fields({"name": "日本語"}, [])
    assert other == '{"name":"日本語"}'


def test_split_rejects_non_object() -> None:
    with pytest.raises(InvalidJsonError):
        split_known_fields([1, 2], ["type"])  # type: ignore[arg-type]


def test_split_logs_preserved_field_count(log_messages: list[dict]) -> None:
    split_known_fields({"a": 1, "b": 2, "type": "t"}, ["type"])

    debug = [r for r in log_messages if r["level"] == "DEBUG"]
    assert any("2 unrecognized field(s)" in r["message"] for r in debug)


def test_merge_is_inverse_of_split() -> None:
    obj = {"type": "X", "locations": ["a"], "custom": "Y", "nested": {"k": [1, None]}}

    known, other = split_known_fields(obj, ["type", "locations", "identifier"])

    assert merge_known_fields(known, other) == obj


def test_merge_omits_none_known_values() -> None:
    merged = merge_known_fields({"type": "X", "identifier": None}, None)
    assert merged == {"type": "X"}


def test_merge_known_value_wins_over_residual() -> None:
    merged = merge_known_fields({"type": "known"}, '{"type":"residual","other":1}')
    assert merged == {"type": "known", "other": 1}


def test_merge_rejects_non_object_residual() -> None:
    with pytest.raises(InvalidJsonError):
        merge_known_fields({}, "[1,2]")


def test_merge_rejects_malformed_residual() -> None:
    with pytest.raises(InvalidJsonError, match="Malformed JSON"):
        merge_known_fields({}, "{not json")


def test_map_array_none_is_none() -> None:
    assert map_array(None, str) is None


def test_map_array_empty_is_empty() -> None:
    assert map_array([], str) == []


def test_map_array_keeps_none_elements_and_positions() -> None:
    calls: list[int] = []

    def double(x: int) -> int:
        calls.append(x)
        return x * 2

    assert map_array([1, None, 3], double) == [2, None, 6]
    # The transform is never called for None
    assert calls == [1, 3]


def test_map_array_rejects_non_array() -> None:
    with pytest.raises(InvalidJsonError, match="Expected a JSON array"):
        map_array({"a": 1}, str)  # type: ignore[arg-type]


def test_get_string_converts_primitives() -> None:
    obj = {"s": "x", "i": 12, "f": 1.5, "t": True, "n": None}
    assert get_string(obj, "s") == "x"
    assert get_string(obj, "i") == "12"
    assert get_string(obj, "f") == "1.5"
    assert get_string(obj, "t") == "true"
    assert get_string(obj, "n") is None
    assert get_string(obj, "missing") is None


def test_get_string_rejects_structures() -> None:
    with pytest.raises(InvalidJsonError, match="'type'"):
        get_string({"type": {"a": 1}}, "type")
    with pytest.raises(InvalidJsonError):
        get_string({"type": ["a"]}, "type")


def test_get_array_rejects_non_array() -> None:
    with pytest.raises(InvalidJsonError, match="'locations' is not a JSON array"):
        get_array({"locations": False}, "locations")


def test_get_string_array_keeps_null_elements() -> None:
    assert get_string_array({"a": ["x", None, 3]}, "a") == ["x", None, "3"]
    assert get_string_array({}, "a") is None


def test_loads_and_dumps() -> None:
    assert loads('{"a": [1, 2]}') == {"a": [1, 2]}
    assert dumps({"a": [1, 2]}) == '{"a":[1,2]}'
    with pytest.raises(InvalidJsonError):
        loads("")
