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
Models of /auth/revocation, which backs an RFC 7009 revocation endpoint.
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse


class RevocationRequest(ApiModel):
    parameters: str
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None


class RevocationResponse(ApiResponse):
    class Action(StrEnum):
        INVALID_CLIENT = "INVALID_CLIENT"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        OK = "OK"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None
