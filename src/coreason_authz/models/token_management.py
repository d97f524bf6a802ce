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
Models of the token management APIs (/auth/token/create, /auth/token/update, /auth/token/revoke).

These let a service create, modify and revoke access tokens outside of the OAuth flows.
"""

from enum import StrEnum

from coreason_authz.models.authz_details import AuthzDetails
from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Property
from coreason_authz.types import GrantType


class TokenCreateRequest(ApiModel):
    """
    Request to /auth/token/create.

    Attributes:
        grant_type (GrantType | None): The grant type the token is issued as. AUTHORIZATION_CODE,
            IMPLICIT, PASSWORD, CLIENT_CREDENTIALS and REFRESH_TOKEN are accepted by the server.
        client_id (int): The client the token is issued to.
        subject (str | None): The resource owner; required unless grant_type is CLIENT_CREDENTIALS.
        access_token_duration (int): Lifetime in seconds; 0 means the service default.
        access_token_persistent (bool): If True the token never expires.
    """

    grant_type: GrantType | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    access_token_duration: int = 0
    refresh_token_duration: int = 0
    properties: list[Property] | None = None
    client_id_alias_used: bool = False
    access_token: str | None = None
    refresh_token: str | None = None
    access_token_persistent: bool = False
    certificate_thumbprint: str | None = None
    dpop_key_thumbprint: str | None = None
    authorization_details: AuthzDetails | None = None
    resources: list[str] | None = None


class TokenCreateResponse(ApiResponse):
    """Response from /auth/token/create."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        OK = "OK"

    SUMMARY_FIELDS = (
        "action",
        "grant_type",
        "client_id",
        "subject",
        "scopes",
        "access_token",
        "token_type",
        "expires_in",
        "expires_at",
        "refresh_token",
        "properties",
    )

    action: Action | None = None
    grant_type: GrantType | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int = 0
    expires_at: int = 0
    refresh_token: str | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None


class TokenUpdateRequest(ApiModel):
    """
    Request to /auth/token/update.

    Members left unset are not modified. ``scopes`` set to an empty list removes every scope.
    """

    access_token: str
    access_token_expires_at: int = 0
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    update_access_token_expires_at_on_scope_update: bool = False


class TokenUpdateResponse(ApiResponse):
    """Response from /auth/token/update."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        OK = "OK"

    SUMMARY_FIELDS = (
        "action",
        "access_token",
        "token_type",
        "access_token_expires_at",
        "scopes",
        "properties",
    )

    action: Action | None = None
    access_token: str | None = None
    token_type: str | None = None
    access_token_expires_at: int = 0
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    authorization_details: AuthzDetails | None = None


class TokenRevokeRequest(ApiModel):
    """
    Request to /auth/token/revoke.

    Either one token identifier, or a client identifier and/or subject selecting every matching
    token, should be given.
    """

    access_token_identifier: str | None = None
    refresh_token_identifier: str | None = None
    client_identifier: str | None = None
    subject: str | None = None


class TokenRevokeResponse(ApiResponse):
    """Response from /auth/token/revoke: the number of revoked tokens."""

    SUMMARY_FIELDS = ("count",)

    count: int = 0
