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
Models of the Grant Management for OAuth 2.0 API (/gm) and of /client/granted_scopes/get.
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.types import GMAction


class GMRequest(ApiModel):
    """
    Request to /gm.

    Attributes:
        gm_action (GMAction | None): QUERY for a GET request, REVOKE for a DELETE request.
        grant_id (str | None): The grant ID taken from the path of the grant management endpoint.
        access_token (str | None): The access token presented by the client.
    """

    gm_action: GMAction | None = None
    grant_id: str | None = None
    access_token: str | None = None
    client_certificate: str | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None
    dpop_nonce_required: bool = False


class GMResponse(ApiResponse):
    """
    Response from /gm.

    The action maps directly onto the HTTP status of the grant management endpoint:
    OK (200), NO_CONTENT (204), UNAUTHORIZED (401), FORBIDDEN (403), NOT_FOUND (404),
    CALLER_ERROR and AUTHLETE_ERROR (500).
    """

    class Action(StrEnum):
        OK = "OK"
        NO_CONTENT = "NO_CONTENT"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        NOT_FOUND = "NOT_FOUND"
        CALLER_ERROR = "CALLER_ERROR"
        AUTHLETE_ERROR = "AUTHLETE_ERROR"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None
    dpop_nonce: str | None = None


class GrantedScopesGetResponse(ApiResponse):
    """Scopes a user has granted to a client, as returned by /client/granted_scopes/get."""

    SUMMARY_FIELDS = (
        "service_api_key",
        "client_id",
        "subject",
        "latest_granted_scopes",
        "merged_granted_scopes",
        "modified_at",
    )

    service_api_key: int = 0
    client_id: int = 0
    subject: str | None = None
    latest_granted_scopes: list[str] | None = None
    merged_granted_scopes: list[str] | None = None
    modified_at: int = 0
