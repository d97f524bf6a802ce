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
Models of /pushed_auth_req, which backs an RFC 9126 pushed authorization request endpoint.
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.types import ClientAuthMethod


class PushedAuthReqRequest(ApiModel):
    parameters: str
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    dpop: str | None = None
    htm: str | None = None
    htu: str | None = None


class PushedAuthReqResponse(ApiResponse):
    """
    Response from /pushed_auth_req.

    On CREATED, ``request_uri`` is the reference the client passes to the authorization endpoint.
    """

    class Action(StrEnum):
        CREATED = "CREATED"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        FORBIDDEN = "FORBIDDEN"
        PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    SUMMARY_FIELDS = ("action", "response_content", "client_auth_method", "request_uri")

    action: Action | None = None
    response_content: str | None = None
    client_auth_method: ClientAuthMethod | None = None
    request_uri: str | None = None
    dpop_nonce: str | None = None
