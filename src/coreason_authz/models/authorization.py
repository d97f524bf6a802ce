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
Models of the authorization endpoint APIs (/auth/authorization, /auth/authorization/issue, /auth/authorization/fail).
"""

from enum import StrEnum

from coreason_authz.models.authz_details import AuthzDetails
from coreason_authz.models.base import ApiModel, ApiResponse
from coreason_authz.models.common import Client, DynamicScope, Property, Scope, Service
from coreason_authz.models.grant import Grant
from coreason_authz.types import Display, GMAction, Prompt
from coreason_authz.utils.summary import join, stringify_prompts, stringify_scope_names, summarize


class AuthorizationRequest(ApiModel):
    """
    Request to /auth/authorization.

    Attributes:
        parameters (str): The authorization request parameters in application/x-www-form-urlencoded format.
        context (str | None): Arbitrary text echoed back by the server.
    """

    parameters: str
    context: str | None = None


class AuthorizationResponse(ApiResponse):
    """
    Response from /auth/authorization.

    ``action`` tells the authorization server what to do next: render an error (BAD_REQUEST,
    INTERNAL_SERVER_ERROR, LOCATION, FORM), issue or fail without user interaction (NO_INTERACTION)
    or show an authorization page (INTERACTION). ``ticket`` correlates the follow-up call.
    """

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"
        NO_INTERACTION = "NO_INTERACTION"
        INTERACTION = "INTERACTION"

    action: Action | None = None
    service: Service | None = None
    client: Client | None = None
    display: Display | None = None
    max_age: int = 0
    scopes: list[Scope] | None = None
    dynamic_scopes: list[DynamicScope] | None = None
    ui_locales: list[str] | None = None
    claims_locales: list[str] | None = None
    claims: list[str] | None = None
    acr_essential: bool = False
    client_id_alias_used: bool = False
    acrs: list[str] | None = None
    subject: str | None = None
    login_hint: str | None = None
    lowest_prompt: Prompt | None = None
    prompts: list[Prompt] | None = None
    request_object_payload: str | None = None
    id_token_claims: str | None = None
    user_info_claims: str | None = None
    resources: list[str] | None = None
    authorization_details: AuthzDetails | None = None
    purpose: str | None = None
    gm_action: GMAction | None = None
    grant_id: str | None = None
    grant_subject: str | None = None
    grant: Grant | None = None
    response_content: str | None = None
    ticket: str | None = None

    def summarize(self) -> str:
        client = self.client
        return summarize(
            [
                ("ticket", self.ticket),
                ("action", self.action),
                ("serviceNumber", client.service_number if client else 0),
                ("clientNumber", client.number if client else 0),
                ("clientId", client.client_id if client else 0),
                ("clientSecret", client.client_secret if client else None),
                ("clientType", client.client_type if client else None),
                ("developer", client.developer if client else None),
                ("display", self.display),
                ("maxAge", self.max_age),
                ("scopes", stringify_scope_names(self.scopes)),
                ("uiLocales", join(self.ui_locales)),
                ("claimsLocales", join(self.claims_locales)),
                ("claims", join(self.claims)),
                ("acrEssential", self.acr_essential),
                ("clientIdAliasUsed", self.client_id_alias_used),
                ("acrs", join(self.acrs)),
                ("subject", self.subject),
                ("loginHint", self.login_hint),
                ("lowestPrompt", self.lowest_prompt),
                ("prompts", stringify_prompts(self.prompts)),
            ]
        )


class AuthorizationIssueRequest(ApiModel):
    """
    Request to /auth/authorization/issue, sent once the user has authorized the client.

    Attributes:
        ticket (str): The ticket issued by /auth/authorization.
        subject (str): The subject (unique identifier) of the authenticated user.
        sub (str | None): Value of the ``sub`` claim of the ID token, if it differs from subject.
        auth_time (int): Time of user authentication in seconds since the Unix epoch.
        acr (str | None): The authentication context class reference satisfied.
    """

    ticket: str
    subject: str
    sub: str | None = None
    auth_time: int = 0
    acr: str | None = None
    claims: str | None = None
    properties: list[Property] | None = None
    scopes: list[str] | None = None
    idt_header_params: str | None = None
    authorization_details: AuthzDetails | None = None
    consented_claims: list[str] | None = None
    claims_for_tx: str | None = None
    verified_claims_for_tx: list[str] | None = None


class AuthorizationIssueResponse(ApiResponse):
    """Response from /auth/authorization/issue."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    SUMMARY_FIELDS = (
        "action",
        "response_content",
        "access_token",
        "access_token_expires_at",
        "access_token_duration",
        "id_token",
        "authorization_code",
        "jwt_access_token",
    )

    action: Action | None = None
    response_content: str | None = None
    access_token: str | None = None
    access_token_expires_at: int = 0
    access_token_duration: int = 0
    id_token: str | None = None
    authorization_code: str | None = None
    jwt_access_token: str | None = None


class AuthorizationFailRequest(ApiModel):
    """
    Request to /auth/authorization/fail, sent when the authorization request cannot be fulfilled.
    """

    class Reason(StrEnum):
        UNKNOWN = "UNKNOWN"
        NOT_LOGGED_IN = "NOT_LOGGED_IN"
        MAX_AGE_NOT_SUPPORTED = "MAX_AGE_NOT_SUPPORTED"
        EXCEEDS_MAX_AGE = "EXCEEDS_MAX_AGE"
        DIFFERENT_SUBJECT = "DIFFERENT_SUBJECT"
        ACR_NOT_SATISFIED = "ACR_NOT_SATISFIED"
        DENIED = "DENIED"
        SERVER_ERROR = "SERVER_ERROR"
        NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
        ACCOUNT_SELECTION_REQUIRED = "ACCOUNT_SELECTION_REQUIRED"
        CONSENT_REQUIRED = "CONSENT_REQUIRED"
        INTERACTION_REQUIRED = "INTERACTION_REQUIRED"
        INVALID_TARGET = "INVALID_TARGET"

    ticket: str
    reason: Reason
    description: str | None = None


class AuthorizationFailResponse(ApiResponse):
    """Response from /auth/authorization/fail."""

    class Action(StrEnum):
        INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
        BAD_REQUEST = "BAD_REQUEST"
        LOCATION = "LOCATION"
        FORM = "FORM"

    SUMMARY_FIELDS = ("action", "response_content")

    action: Action | None = None
    response_content: str | None = None
