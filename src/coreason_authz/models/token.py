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
Models of the token endpoint APIs (/auth/token, /auth/token/issue, /auth/token/fail).
"""

from enum import StrEnum

from coreason_authz.models.authz_details import AuthzDetails
from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Pair, Property, Scope
from coreason_authz.types import ClientAuthMethod, GrantType, TokenType


class TokenInfo(ApiModel):
    """
    Information about a token presented in a token exchange request (subject or actor token).
    """

    client_id: int = 0
    subject: str | None = None
    scopes: list[Scope] | None = None
    expires_at: int = 0
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None


class TokenRequest(ApiModel):
    """
    Request to /auth/token.

    Attributes:
        parameters (str): The token request parameters in application/x-www-form-urlencoded format.
        client_id (str | None): Client ID from the Authorization header (client_secret_basic).
        client_secret (str | None): Client secret from the Authorization header.
        client_certificate (str | None): PEM client certificate for mutual TLS.
        dpop (str | None): The DPoP proof JWT from the DPoP header.
        htm (str | None): HTTP method of the token request, used to verify the DPoP proof.
        htu (str | None): URL of the token endpoint, used to verify the DPoP proof.
    """

    parameters: str
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    properties: list[Property] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    jwt_at_claims: str | None = None
    access_token: str | None = None
    access_token_duration: int = 0
    dpop_nonce_required: bool = False


class TokenResponse(ApiResponse):
    """
    Response from /auth/token.

    PASSWORD means the resource owner credentials must be checked by the caller, TOKEN_EXCHANGE and
    JWT_BEARER mean the grant must be validated further before /auth/token/issue or /auth/token/fail.
    """

    class Action(StrEnum):
        INVALID_CLIENT = "INVALID_CLIENT"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        PASSWORD = "PASSWORD"
        OK = "OK"
        TOKEN_EXCHANGE = "TOKEN_EXCHANGE"
        JWT_BEARER = "JWT_BEARER"

    # Never includes the password.
    SUMMARY_FIELDS = (
        "action",
        "response_content",
        "username",
        "ticket",
        "access_token",
        "access_token_expires_at",
        "access_token_duration",
        "refresh_token",
        "refresh_token_expires_at",
        "refresh_token_duration",
        "id_token",
        "grant_type",
        "client_id",
        "client_id_alias",
        "client_id_alias_used",
        "subject",
        "scopes",
        "properties",
        "jwt_access_token",
        "client_auth_method",
    )

    action: Action | None = None
    response_content: str | None = None
    username: str | None = None
    password: str | None = None
    ticket: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    refresh_token: str | None = None
    refresh_token_expires_at: int = 0
    refresh_token_duration: int = 0
    id_token: str | None = None
    grant_type: GrantType | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    audiences: list[str] | None = None
    requested_token_type: TokenType | None = None
    subject_token: str | None = None
    subject_token_type: TokenType | None = None
    subject_token_info: TokenInfo | None = None
    actor_token: str | None = None
    actor_token_type: TokenType | None = None
    actor_token_info: TokenInfo | None = None
    assertion: str | None = None


class TokenFailRequest(ApiModel):
    """Request to /auth/token/fail."""

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        INVALID_RESOURCE_OWNER_CREDENTIALS = "INVALID_RESOURCE_OWNER_CREDENTIALS"
        INVALID_TARGET = "INVALID_TARGET"

    ticket: str
    reason: Reason


class TokenFailResponse(ApiResponse):
    """Response from /auth/token/fail."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None


class TokenIssueRequest(ApiModel):
    """
    Request to /auth/token/issue, sent after the resource owner credentials have been verified.
    """

    ticket: str
    subject: str
    properties: list[Property] | None = None
    jwt_at_claims: str | None = None


class TokenIssueResponse(ApiResponse):
    """Response from /auth/token/issue."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        OK = "OK"

    SUMMARY_FIELDS = (
        "action",
        "response_content",
        "access_token",
        "access_token_expires_at",
        "access_token_duration",
        "refresh_token",
        "refresh_token_expires_at",
        "refresh_token_duration",
        "client_id",
        "client_id_alias",
        "client_id_alias_used",
        "subject",
        "scopes",
        "properties",
        "jwt_access_token",
    )

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    refresh_token: str | None = None
    refresh_token_expires_at: int = 0
    refresh_token_duration: int = 0
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    subject: str | None = None
    scopes: list[str] | None = None
    properties: list[Property] | None = None
    jwt_access_token: str | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
