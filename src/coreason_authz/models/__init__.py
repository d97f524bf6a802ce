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
Request and response models of the authorization server API.
"""

from .authorization import (
    AuthorizationFailRequest,
    AuthorizationFailResponse,
    AuthorizationIssueRequest,
    AuthorizationIssueResponse,
    AuthorizationRequest,
    AuthorizationResponse,
)
from .authz_details import AuthzDetails, AuthzDetailsElement
from .backchannel import (
    BackchannelAuthenticationCompleteRequest,
    BackchannelAuthenticationCompleteResponse,
    BackchannelAuthenticationFailRequest,
    BackchannelAuthenticationFailResponse,
    BackchannelAuthenticationIssueRequest,
    BackchannelAuthenticationIssueResponse,
    BackchannelAuthenticationRequest,
    BackchannelAuthenticationResponse,
)
from .base import ApiModel, ApiResponse, ExtensibleModel
from .client_secret import ClientSecretUpdateRequest, ClientSecretUpdateResponse
from .common import Client, DynamicScope, Pair, Property, Scope, Service, TaggedValue
from .device import (
    DeviceAuthorizationRequest,
    DeviceAuthorizationResponse,
    DeviceCompleteRequest,
    DeviceCompleteResponse,
    DeviceVerificationRequest,
    DeviceVerificationResponse,
)
from .grant import Grant, GrantScope
from .grant_management import GMRequest, GMResponse, GrantedScopesGetResponse
from .introspection import (
    IntrospectionRequest,
    IntrospectionResponse,
    StandardIntrospectionRequest,
    StandardIntrospectionResponse,
)
from .pushed_auth_req import PushedAuthReqRequest, PushedAuthReqResponse
from .revocation import RevocationRequest, RevocationResponse
from .token import (
    TokenFailRequest,
    TokenFailResponse,
    TokenInfo,
    TokenIssueRequest,
    TokenIssueResponse,
    TokenRequest,
    TokenResponse,
)
from .token_management import (
    TokenCreateRequest,
    TokenCreateResponse,
    TokenRevokeRequest,
    TokenRevokeResponse,
    TokenUpdateRequest,
    TokenUpdateResponse,
)
from .userinfo import UserInfoIssueRequest, UserInfoIssueResponse, UserInfoRequest, UserInfoResponse

__all__ = [
    "ApiModel",
    "ApiResponse",
    "AuthorizationFailRequest",
    "AuthorizationFailResponse",
    "AuthorizationIssueRequest",
    "AuthorizationIssueResponse",
    "AuthorizationRequest",
    "AuthorizationResponse",
    "AuthzDetails",
    "AuthzDetailsElement",
    "BackchannelAuthenticationCompleteRequest",
    "BackchannelAuthenticationCompleteResponse",
    "BackchannelAuthenticationFailRequest",
    "BackchannelAuthenticationFailResponse",
    "BackchannelAuthenticationIssueRequest",
    "BackchannelAuthenticationIssueResponse",
    "BackchannelAuthenticationRequest",
    "BackchannelAuthenticationResponse",
    "Client",
    "ClientSecretUpdateRequest",
    "ClientSecretUpdateResponse",
    "DeviceAuthorizationRequest",
    "DeviceAuthorizationResponse",
    "DeviceCompleteRequest",
    "DeviceCompleteResponse",
    "DeviceVerificationRequest",
    "DeviceVerificationResponse",
    "DynamicScope",
    "ExtensibleModel",
    "GMRequest",
    "GMResponse",
    "Grant",
    "GrantScope",
    "GrantedScopesGetResponse",
    "IntrospectionRequest",
    "IntrospectionResponse",
    "Pair",
    "Property",
    "PushedAuthReqRequest",
    "PushedAuthReqResponse",
    "RevocationRequest",
    "RevocationResponse",
    "Scope",
    "Service",
    "StandardIntrospectionRequest",
    "StandardIntrospectionResponse",
    "TaggedValue",
    "TokenCreateRequest",
    "TokenCreateResponse",
    "TokenFailRequest",
    "TokenFailResponse",
    "TokenInfo",
    "TokenIssueRequest",
    "TokenIssueResponse",
    "TokenRequest",
    "TokenResponse",
    "TokenRevokeRequest",
    "TokenRevokeResponse",
    "TokenUpdateRequest",
    "TokenUpdateResponse",
    "UserInfoIssueRequest",
    "UserInfoIssueResponse",
    "UserInfoRequest",
    "UserInfoResponse",
]
