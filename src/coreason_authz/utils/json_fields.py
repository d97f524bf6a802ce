# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

"""
Helpers for mapping extensible JSON objects onto typed records.

An extensible record promotes a fixed set of "known" properties to typed attributes and keeps
every other property, unparsed, as one opaque JSON string so that it can be re-emitted verbatim.
Key order of re-emitted objects is not guaranteed; equality is as a set of key/value pairs.
"""

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from coreason_authz.exceptions import InvalidJsonError
from coreason_authz.utils.logger import logger

T = TypeVar("T")

JsonObject = dict[str, Any]


def loads(text: str) -> Any:
    """
    Decodes JSON text.

    Raises:
        InvalidJsonError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(f"Malformed JSON: {e}") from e


def dumps(value: Any) -> str:
    """Encodes a JSON value compactly, preserving non-ASCII characters."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def require_object(value: Any, what: str = "value") -> JsonObject:
    """
    Returns the value if it is a JSON object.

    Raises:
        InvalidJsonError: If the value is not a JSON object.
    """
    if not isinstance(value, dict):
        raise InvalidJsonError(f"Expected a JSON object for {what}, got {type(value).__name__}.")
    return value


def get_value(obj: Mapping[str, Any], name: str) -> Any:
    """Returns the property value, treating a JSON null the same as a missing property."""
    return obj.get(name)


def _as_string(value: Any, name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    raise InvalidJsonError(f"'{name}' is not a JSON primitive.")


def get_string(obj: Mapping[str, Any], name: str) -> str | None:
    """
    Returns the property as a string.

    Numbers and booleans are converted to their JSON text. Absent or null yields None.

    Raises:
        InvalidJsonError: If the property is an object or an array.
    """
    return _as_string(get_value(obj, name), name)


def get_array(obj: Mapping[str, Any], name: str) -> list[Any] | None:
    """
    Returns the property as a list, or None when absent or null.

    Raises:
        InvalidJsonError: If the property is present but not an array.
    """
    value = get_value(obj, name)
    if value is None:
        return None
    if not isinstance(value, list):
        raise InvalidJsonError(f"'{name}' is not a JSON array.")
    return value


def get_string_array(obj: Mapping[str, Any], name: str) -> list[str | None] | None:
    """
    Returns the property as a list of strings. Null elements are kept as None.
    """
    array = get_array(obj, name)
    if array is None:
        return None
    return [_as_string(item, name) for item in array]


def split_known_fields(obj: Mapping[str, Any] | None, known_names: Iterable[str]) -> tuple[JsonObject, str | None]:
    """
    Partitions a JSON object into known properties and an opaque residual.

    Args:
        obj: The decoded JSON object, or None.
        known_names: Names of the properties that are promoted to typed attributes.

    Returns:
        A tuple of (known, other_fields). ``known`` holds the known properties whose value is not
        null. ``other_fields`` is the JSON text of every remaining property, or None if there is
        none (never "{}").

    Raises:
        InvalidJsonError: If obj is not a JSON object.
    """
    if obj is None:
        return {}, None

    obj = require_object(obj, "extensible record")
    names = set(known_names)

    known: JsonObject = {}
    residual: JsonObject = {}
    for key, value in obj.items():
        if key in names:
            if value is not None:
                known[key] = value
        else:
            residual[key] = value

    if not residual:
        return known, None

    logger.debug(f"Preserving {len(residual)} unrecognized field(s) as opaque JSON")
    return known, dumps(residual)


def merge_known_fields(known: Mapping[str, Any], other_fields: str | None) -> JsonObject:
    """
    Re-attaches the opaque residual to the known properties.

    Known properties whose value is None are omitted. A known property overrides a residual
    property of the same name.

    Raises:
        InvalidJsonError: If other_fields is not the JSON text of an object.
    """
    merged: JsonObject = {}
    if other_fields is not None:
        merged.update(require_object(loads(other_fields), "other fields"))

    for key, value in known.items():
        if value is not None:
            merged[key] = value

    return merged


def map_array(values: list[Any] | None, transform: Callable[[Any], T]) -> list[T | None] | None:
    """
    Applies a transform to each element of a JSON array, keeping positions aligned.

    Args:
        values: The array, or None.
        transform: Element-wise transform. Never called for None elements.

    Returns:
        None if values is None (no array provided), otherwise a list of the same length.

    Raises:
        InvalidJsonError: If values is neither None nor a list.
    """
    if values is None:
        return None
    if not isinstance(values, list):
        raise InvalidJsonError(f"Expected a JSON array, got {type(values).__name__}.")

    return [None if value is None else transform(value) for value in values]
