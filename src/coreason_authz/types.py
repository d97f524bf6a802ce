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
Enumerated types shared by the API models.

The value of each member is the name the API uses on the wire (e.g. "AUTHORIZATION_CODE").
The protocol parameter string (e.g. "authorization_code") is available as ``member.parameter``.
"""

from enum import StrEnum
from typing import Self


class ParameterEnum(StrEnum):
    """
    StrEnum whose members also carry the protocol parameter value.
    Members are declared as ``NAME = ("NAME", "parameter")``.
    """

    parameter: str

    def __new__(cls, value: str, parameter: str) -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.parameter = parameter
        return obj

    @classmethod
    def parse(cls, parameter: str | None) -> Self | None:
        """
        Looks up a member by its protocol parameter value.

        Returns:
            The matching member, or None if parameter is None or unknown.
        """
        if parameter is None:
            return None
        for member in cls:
            if member.parameter == parameter:
                return member
        return None


class GrantType(ParameterEnum):
    AUTHORIZATION_CODE = ("AUTHORIZATION_CODE", "authorization_code")
    IMPLICIT = ("IMPLICIT", "implicit")
    PASSWORD = ("PASSWORD", "password")
    CLIENT_CREDENTIALS = ("CLIENT_CREDENTIALS", "client_credentials")
    REFRESH_TOKEN = ("REFRESH_TOKEN", "refresh_token")
    CIBA = ("CIBA", "urn:openid:params:grant-type:ciba")
    DEVICE_CODE = ("DEVICE_CODE", "urn:ietf:params:oauth:grant-type:device_code")


class ClientAuthMethod(ParameterEnum):
    NONE = ("NONE", "none")
    CLIENT_SECRET_BASIC = ("CLIENT_SECRET_BASIC", "client_secret_basic")
    CLIENT_SECRET_POST = ("CLIENT_SECRET_POST", "client_secret_post")
    CLIENT_SECRET_JWT = ("CLIENT_SECRET_JWT", "client_secret_jwt")
    PRIVATE_KEY_JWT = ("PRIVATE_KEY_JWT", "private_key_jwt")
    TLS_CLIENT_AUTH = ("TLS_CLIENT_AUTH", "tls_client_auth")
    SELF_SIGNED_TLS_CLIENT_AUTH = ("SELF_SIGNED_TLS_CLIENT_AUTH", "self_signed_tls_client_auth")


class ClientType(ParameterEnum):
    PUBLIC = ("PUBLIC", "public")
    CONFIDENTIAL = ("CONFIDENTIAL", "confidential")


class TokenType(ParameterEnum):
    """Token types of RFC 8693 Token Exchange."""

    JWT = ("JWT", "urn:ietf:params:oauth:token-type:jwt")
    ACCESS_TOKEN = ("ACCESS_TOKEN", "urn:ietf:params:oauth:token-type:access_token")
    REFRESH_TOKEN = ("REFRESH_TOKEN", "urn:ietf:params:oauth:token-type:refresh_token")
    ID_TOKEN = ("ID_TOKEN", "urn:ietf:params:oauth:token-type:id_token")
    SAML1 = ("SAML1", "urn:ietf:params:oauth:token-type:saml1")
    SAML2 = ("SAML2", "urn:ietf:params:oauth:token-type:saml2")
    DEVICE_SECRET = ("DEVICE_SECRET", "urn:openid:params:token-type:device-secret")


class GMAction(ParameterEnum):
    """Values of the ``grant_management_action`` request parameter (Grant Management for OAuth 2.0)."""

    CREATE = ("CREATE", "create")
    QUERY = ("QUERY", "query")
    REPLACE = ("REPLACE", "replace")
    REVOKE = ("REVOKE", "revoke")
    UPDATE = ("UPDATE", "update")


class DeliveryMode(ParameterEnum):
    """CIBA token delivery modes."""

    POLL = ("POLL", "poll")
    PING = ("PING", "ping")
    PUSH = ("PUSH", "push")


class UserIdentificationHintType(ParameterEnum):
    ID_TOKEN_HINT = ("ID_TOKEN_HINT", "id_token_hint")
    LOGIN_HINT = ("LOGIN_HINT", "login_hint")
    LOGIN_HINT_TOKEN = ("LOGIN_HINT_TOKEN", "login_hint_token")


class Display(ParameterEnum):
    PAGE = ("PAGE", "page")
    POPUP = ("POPUP", "popup")
    TOUCH = ("TOUCH", "touch")
    WAP = ("WAP", "wap")


class Prompt(ParameterEnum):
    NONE = ("NONE", "none")
    LOGIN = ("LOGIN", "login")
    CONSENT = ("CONSENT", "consent")
    SELECT_ACCOUNT = ("SELECT_ACCOUNT", "select_account")
    CREATE = ("CREATE", "create")
