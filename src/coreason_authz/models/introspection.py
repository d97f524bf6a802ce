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
Models of the introspection APIs.

``/auth/introspection`` is used by resource servers that share the authorization server's
database of tokens; ``/auth/introspection/standard`` backs an RFC 7662 introspection endpoint.
"""

from enum import StrEnum

from coreason_authz.models.authz_details import AuthzDetails
from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Pair, Property, Scope
from coreason_authz.models.grant import Grant
from coreason_authz.types import GrantType


class IntrospectionRequest(ApiModel):
    """
    Request to /auth/introspection.

    Attributes:
        token (str): The access token presented by the client.
        scopes (list[str] | None): Scopes the protected resource requires.
        subject (str | None): The subject the token must have been issued for.
        client_certificate (str | None): PEM client certificate, for certificate-bound tokens.
        dpop (str | None): DPoP proof JWT, for DPoP-bound tokens.
        htm (str | None): HTTP method of the resource request.
        htu (str | None): URL of the protected resource.
        resources (list[str] | None): Resource indicators the token must cover.
    """

    token: str
    scopes: list[str] | None = None
    subject: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    resources: list[str] | None = None


class IntrospectionResponse(ApiResponse):
    """
    Response from /auth/introspection.

    OK means the token exists, is usable and covers the requested scopes and subject; the other
    actions carry a ``response_content`` suitable for a WWW-Authenticate header.
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
        "existent",
        "usable",
        "sufficient",
        "refreshable",
        "expires_at",
        "scopes",
        "properties",
        "client_id_alias",
        "client_id_alias_used",
    )

    action: Action | None = None
    client_id: int = 0
    subject: str | None = None
    scopes: list[str] | None = None
    scope_details: list[Scope] | None = None
    existent: bool = False
    usable: bool = False
    sufficient: bool = False
    refreshable: bool = False
    response_content: str | None = None
    expires_at: int = 0
    properties: list[Property] | None = None
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_entity_id: str | None = None
    client_entity_id_used: bool = False
    certificate_thumbprint: str | None = None
    resources: list[str] | None = None
    access_token_resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    grant_id: str | None = None
    grant: Grant | None = None
    consented_claims: list[str] | None = None
    service_attributes: list[Pair] | None = None
    client_attributes: list[Pair] | None = None
    for_external_attachment: bool = False
    acr: str | None = None
    auth_time: int = 0
    grant_type: GrantType | None = None
    for_credential_issuance: bool = False
    credentials: str | None = None
    c_nonce: str | None = None
    c_nonce_expires_at: int = 0


class StandardIntrospectionRequest(ApiModel):
    """Request to /auth/introspection/standard, carrying the RFC 7662 request parameters."""

    parameters: str


class StandardIntrospectionResponse(ApiResponse):
    """Response from /auth/introspection/standard."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"
        JWT = "JWT"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None
