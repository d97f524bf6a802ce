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
Models of the Device Authorization Grant APIs (RFC 8628).

/device/authorization backs the device authorization endpoint, /device/verification looks up a
user code entered at the verification URI and /device/complete reports the user's decision.
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Property, Scope


class DeviceAuthorizationRequest(ApiModel):
    parameters: str
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None
    oauth_client_attestation: str | None = None
    oauth_client_attestation_pop: str | None = None


class DeviceAuthorizationResponse(ApiResponse):
    """
    Response from /device/authorization.

    Attributes:
        device_code (str | None): Code the device polls the token endpoint with.
        user_code (str | None): Code the user enters at the verification URI.
        expires_in (int): Lifetime of the codes in seconds.
        interval (int): Minimum polling interval in seconds.
    """

    class Action(StrEnum):
        OK = "OK"
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    SUMMARY_FIELDS = (
        "action",
        "client_id",
        "client_id_alias",
        "client_id_alias_used",
        "client_name",
        "scopes",
        "device_code",
        "user_code",
        "verification_uri",
        "verification_uri_complete",
        "expires_in",
        "interval",
        "warnings",
    )

    action: Action | None = None
    response_content: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None
    device_code: str | None = None
    user_code: str | None = None
    verification_uri: str | None = None
    verification_uri_complete: str | None = None
    expires_in: int = 0
    interval: int = 0
    warnings: list[str] | None = None


class DeviceVerificationRequest(ApiModel):
    user_code: str


class DeviceVerificationResponse(ApiResponse):
    """Response from /device/verification. VALID means the user code can be authorized."""

    class Action(StrEnum):
        VALID = "VALID"
        EXPIRED = "EXPIRED"
        NOT_EXIST = "NOT_EXIST"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    SUMMARY_FIELDS = (
        "action",
        "client_id",
        "client_id_alias",
        "client_id_alias_used",
        "client_name",
        "scopes",
    )

    action: Action | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    scopes: list[Scope] | None = None


class DeviceCompleteRequest(ApiModel):
    """
    Request to /device/complete.

    ``subject`` is required when ``result`` is AUTHORIZED.
    """

    class Result(StrEnum):
        AUTHORIZED = "AUTHORIZED"
        ACCESS_DENIED = "ACCESS_DENIED"
        TRANSACTION_FAILED = "TRANSACTION_FAILED"

    user_code: str
    result: Result
    subject: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None


class DeviceCompleteResponse(ApiResponse):
    class Action(StrEnum):
        SUCCESS = "SUCCESS"
        INVALID_REQUEST = "INVALID_REQUEST"
        USER_CODE_EXPIRED = "USER_CODE_EXPIRED"
        USER_CODE_NOT_EXIST = "USER_CODE_NOT_EXIST"
        SERVER_ERROR = "SERVER_ERROR"

    SUMMARY_FIELDS = ("action",)

    action: Action | None = None
