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
Models of /client/secret/update and /client/secret/refresh.
"""

from typing import Any

from pydantic import field_validator

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.validation import check_client_secret


class ClientSecretUpdateRequest(ApiModel):
    """
    Request to /client/secret/update.

    The new secret is checked on construction and on assignment; an invalid value raises
    ``pydantic.ValidationError`` wrapping an ``InvalidArgumentError``.

    Attributes:
        client_secret (str): The new client secret. A-Z, a-z, 0-9, '-' and '_', at most 86 characters.
    """

    client_secret: str

    @field_validator("client_secret", mode="before")
    @classmethod
    def validate_client_secret(cls, v: Any) -> str:
        return check_client_secret(v)


class ClientSecretUpdateResponse(ApiResponse):
    """Response from /client/secret/update and /client/secret/refresh."""

    SUMMARY_FIELDS = ("new_client_secret",)

    new_client_secret: str | None = None
    old_client_secret: str | None = None
