# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

import pytest

from coreason_authz.exceptions import CoreasonAuthzError, InvalidArgumentError
from coreason_authz.validation import CLIENT_SECRET_MAX_LENGTH, check_client_secret


@pytest.mark.parametrize(
    "secret",
    [
        "a",
        "Z",
        "0",
        "-",
        "_",
        "abcXYZ019-_",
        "x" * CLIENT_SECRET_MAX_LENGTH,
    ],
)
def test_valid_client_secrets(secret: str) -> None:
    assert check_client_secret(secret) == secret


def test_null_client_secret() -> None:
    with pytest.raises(InvalidArgumentError, match="clientSecret is null."):
        check_client_secret(None)


def test_empty_client_secret() -> None:
    with pytest.raises(InvalidArgumentError, match="clientSecret is empty."):
        check_client_secret("")


def test_too_long_client_secret() -> None:
    """87 characters is one too many."""
    with pytest.raises(InvalidArgumentError, match="clientSecret is too long."):
        check_client_secret("x" * (CLIENT_SECRET_MAX_LENGTH + 1))


@pytest.mark.parametrize(
    "secret",
    [
        "has space",
        "plus+",
        "slash/",
        "equals=",
        "dot.",
        "ünicode",
        "trailing-newline\n",
        "\nleading-newline",
    ],
)
def test_illegal_characters(secret: str) -> None:
    with pytest.raises(InvalidArgumentError, match="clientSecret contains an illegal character."):
        check_client_secret(secret)


def test_non_string_client_secret() -> None:
    with pytest.raises(InvalidArgumentError, match="clientSecret is not a string."):
        check_client_secret(12345)  # type: ignore[arg-type]


def test_error_is_value_error() -> None:
    """The error can be caught as the package base error and as ValueError."""
    with pytest.raises(CoreasonAuthzError):
        check_client_secret("")
    with pytest.raises(ValueError):
        check_client_secret("")


def test_rejection_is_logged_without_the_secret(log_messages: list[dict]) -> None:
    secret = "s3cr3t value"

    with pytest.raises(InvalidArgumentError):
        check_client_secret(secret)

    warnings = [r["message"] for r in log_messages if r["level"] == "WARNING"]
    assert warnings
    assert all(secret not in message for message in warnings)
