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
Models of the UserInfo endpoint APIs (/auth/userinfo, /auth/userinfo/issue).
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Property


class UserInfoRequest(ApiModel):
    """
    Request to /auth/userinfo.

    Attributes:
        token (str): The access token presented to the UserInfo endpoint.
        client_certificate (str | None): PEM client certificate, for certificate-bound tokens.
        dpop (str | None): DPoP proof JWT, for DPoP-bound tokens.
        htm (str | None): HTTP method of the UserInfo request.
        htu (str | None): URL of the UserInfo endpoint.
    """

    token: str
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None


class UserInfoResponse(ApiResponse):
    """
    Response from /auth/userinfo.

    On OK, the caller collects the values of ``claims`` for ``subject`` and calls /auth/userinfo/issue.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    SUMMARY_FIELDS = (
        "action",
        "client_id",
        "subject",
        "scopes",
        "claims",
        "token",
        "response_content",
        "properties",
        "client_id_alias",
        "client_id_alias_used",
    )

    action: Action | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    claims: list[str] | None = None
    token: str | None = None
    response_content: str | None = None
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    user_info_claims: str | None = None


class UserInfoIssueRequest(ApiModel):
    """
    Request to /auth/userinfo/issue.

    ``claims`` is the JSON text of the claim values, e.g. ``{"name":"Jane","email":"jane@example.com"}``.
    """

    token: str
    claims: str | None = None
    sub: str | None = None
    claims_for_tx: str | None = None
    verified_claims_for_tx: list[str] | None = None


class UserInfoIssueResponse(ApiResponse):
    """Response from /auth/userinfo/issue. JSON and JWT carry the UserInfo response body."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        JSON = "JSON"
        JWT = "JWT"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None
    signature: str | None = None
    signature_input: str | None = None
    content_digest: str | None = None
