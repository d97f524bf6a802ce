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
Models of the Client Initiated Backchannel Authentication (CIBA) APIs.

/backchannel/authentication parses the backchannel authentication request, then
/backchannel/authentication/issue or /backchannel/authentication/fail answer it, and
/backchannel/authentication/complete reports the end-user's decision.
"""

from enum import StrEnum

from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Property, Scope
from coreason_authz.types import DeliveryMode, UserIdentificationHintType


class BackchannelAuthenticationRequest(ApiModel):
    parameters: str
    client_id: str | None = None
    client_secret: str | None = None
    client_certificate: str | None = None
    client_certificate_path: list[str] | None = None


class BackchannelAuthenticationResponse(ApiResponse):
    """
    Response from /backchannel/authentication.

    On USER_IDENTIFICATION the caller identifies the end-user from ``hint`` (whose kind is
    ``hint_type``), then calls /backchannel/authentication/issue or /backchannel/authentication/fail
    with ``ticket``.
    """

    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        UNAUTHORIZED = "UNAUTHORIZED"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        USER_IDENTIFICATION = "USER_IDENTIFICATION"

    SUMMARY_FIELDS = (
        "action",
        "client_id",
        "client_id_alias",
        "client_id_alias_used",
        "client_name",
        "delivery_mode",
        "scopes",
        "claim_names",
        "acrs",
        "hint_type",
        "hint",
        "sub",
        "binding_message",
        "warnings",
        "ticket",
    )

    action: Action | None = None
    response_content: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_used: bool = False
    client_name: str | None = None
    delivery_mode: DeliveryMode | None = None
    scopes: list[Scope] | None = None
    claim_names: list[str] | None = None
    client_notification_token: str | None = None
    acrs: list[str] | None = None
    hint_type: UserIdentificationHintType | None = None
    hint: str | None = None
    sub: str | None = None
    binding_message: str | None = None
    warnings: list[str] | None = None
    ticket: str | None = None


class BackchannelAuthenticationIssueRequest(ApiModel):
    ticket: str


class BackchannelAuthenticationIssueResponse(ApiResponse):
    """Response from /backchannel/authentication/issue. OK carries ``auth_req_id``."""

    class Action(StrEnum):
        OK = "OK"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    SUMMARY_FIELDS = ("action", "response_content", "auth_req_id", "expires_in", "interval")

    action: Action | None = None
    response_content: str | None = None
    auth_req_id: str | None = None
    expires_in: int = 0
    interval: int = 0


class BackchannelAuthenticationFailRequest(ApiModel):
    class Reason(StrEnum):
        EXPIRED_LOGIN_HINT_TOKEN = "EXPIRED_LOGIN_HINT_TOKEN"
        UNKNOWN_USER_ID = "UNKNOWN_USER_ID"
        INVALID_USER_CODE = "INVALID_USER_CODE"
        ACCESS_DENIED = "ACCESS_DENIED"
        SERVER_ERROR = "SERVER_ERROR"

    ticket: str
    reason: Reason
    description: str | None = None
    uri: str | None = None


class BackchannelAuthenticationFailResponse(ApiResponse):
    class Action(StrEnum):
        BAD_REQUEST = "BAD_REQUEST"
        FORBIDDEN = "FORBIDDEN"
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        INVALID_TICKET = "INVALID_TICKET"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None


class BackchannelAuthenticationCompleteRequest(ApiModel):
    """
    Request to /backchannel/authentication/complete.

    Attributes:
        ticket (str): The ticket issued by /backchannel/authentication.
        result (Result): The end-user's decision.
        subject (str | None): The subject of the end-user; required when result is AUTHORIZED.
        auth_time (int): Time of end-user authentication in seconds since the Unix epoch.
    """

    class Result(StrEnum):
        AUTHORIZED = "AUTHORIZED"
        ACCESS_DENIED = "ACCESS_DENIED"
        TRANSACTION_FAILED = "TRANSACTION_FAILED"

    ticket: str
    result: Result
    subject: str | None = None
    sub: str | None = None
    auth_time: int = 0
    acr: str | None = None
    claims: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    error_description: str | None = None
    error_uri: str | None = None


class BackchannelAuthenticationCompleteResponse(ApiResponse):
    """
    Response from /backchannel/authentication/complete.

    NOTIFICATION means the client must be notified (ping or push mode) at
    ``client_notification_endpoint`` with ``response_content`` as the body.
    """

    class Action(StrEnum):
        NOTIFICATION = "NOTIFICATION"
        NO_ACTION = "NO_ACTION"

    SUMMARY_FIELDS = ("action", "response_content", "client_notification_endpoint")

    action: Action | None = None
    response_content: str | None = None
    client_notification_endpoint: str | None = None
    client_notification_token: str | None = None
