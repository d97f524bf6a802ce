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
String helpers used by the ``summarize()`` methods of the API responses.
"""

from collections.abc import Iterable, Sequence
from typing import Any


def _text(value: Any) -> str:
    return "null" if value is None else str(value)


def join(strings: Sequence[Any] | None, delimiter: str | None = " ") -> str | None:
    """
    Joins values with a delimiter. None elements are rendered as "null".

    Returns:
        None if strings is None, "" for an empty sequence.
    """
    if strings is None:
        return None
    return (delimiter or "").join(_text(s) for s in strings)


def stringify_properties(properties: Iterable[Any] | None) -> str | None:
    """
    Renders key/value entries (Property, Pair) as "[key1=value1,key2=value2]". None entries are skipped.
    """
    if properties is None:
        return None
    pairs = [f"{_text(p.key)}={_text(p.value)}" for p in properties if p is not None]
    return "[" + ",".join(pairs) + "]"


def stringify_scope_names(scopes: Sequence[Any] | None) -> str | None:
    """Renders the names of the scopes, space-delimited."""
    if scopes is None:
        return None
    return join([None if scope is None else scope.name for scope in scopes])


def stringify_prompts(prompts: Sequence[Any] | None) -> str | None:
    """Renders prompts as their lower-case protocol values, space-delimited."""
    if prompts is None:
        return None
    return join([None if prompt is None else prompt.parameter for prompt in prompts])


def format_value(value: Any) -> str:
    """
    Formats a single summary value.

    Lists are rendered by element kind: key/value entries as "[k=v,...]", scopes by name,
    enums carrying a protocol parameter by that parameter, anything else space-delimited.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        sample = next((v for v in value if v is not None), None)
        if hasattr(sample, "key") and hasattr(sample, "value"):
            return str(stringify_properties(value))
        if hasattr(sample, "name") and hasattr(sample, "default_entry"):
            return str(stringify_scope_names(value))
        if hasattr(sample, "parameter"):
            return str(stringify_prompts(value))
        return str(join(value))
    return str(value)


def summarize(fields: Iterable[tuple[str, Any]]) -> str:
    """
    Builds a one-line "key=value, key=value" summary, preserving the given order.
    """
    return ", ".join(f"{key}={format_value(value)}" for key, value in fields)
