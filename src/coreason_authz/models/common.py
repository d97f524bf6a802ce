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
Small value objects shared by many API models.
"""

from collections.abc import Sequence

from pydantic import ConfigDict

from coreason_authz.models.base import ApiModel
from coreason_authz.types import ClientAuthMethod, ClientType, GrantType


class Pair(ApiModel):
    """A key/value pair, e.g. a service or client attribute."""

    key: str | None = None
    value: str | None = None


class Property(ApiModel):
    """
    An arbitrary key/value property associated with an access token or a grant.

    Attributes:
        key (str | None): The property name.
        value (str | None): The property value.
        hidden (bool): If True the property never appears in responses sent to the client,
            although it stays associated with the token and is visible through introspection.
    """

    key: str | None = None
    value: str | None = None
    hidden: bool = False

    def __str__(self) -> str:
        return f"{self.key}={self.value}{' (hidden)' if self.hidden else ''}"


class TaggedValue(ApiModel):
    """A value with a language tag (e.g. tag "ja" for a Japanese description)."""

    tag: str | None = None
    value: str | None = None


class Scope(ApiModel):
    """
    A scope supported by a service.

    Attributes:
        name (str | None): The scope name.
        default_entry (bool): Whether the scope is granted when a request omits the scope parameter.
        description (str | None): A human-readable description.
        descriptions (list[TaggedValue] | None): Localized descriptions.
    """

    name: str | None = None
    default_entry: bool = False
    description: str | None = None
    descriptions: list[TaggedValue] | None = None

    @staticmethod
    def extract_names(scopes: Sequence["Scope | None"] | None) -> list[str | None] | None:
        """Returns the names of the given scopes, keeping positions. None in, None out."""
        if scopes is None:
            return None
        return [None if scope is None else scope.name for scope in scopes]


class DynamicScope(ApiModel):
    """A scope with a variable part, e.g. name "payment" and value "payment:123"."""

    name: str | None = None
    value: str | None = None


class Client(ApiModel):
    """
    A client application registered to a service.

    Only the members used by the authorization flows are modelled; every other member of the
    API's client object is kept as an extra attribute so the object round-trips unchanged.
    """

    model_config = ConfigDict(extra="allow")

    number: int = 0
    service_number: int = 0
    developer: str | None = None
    client_id: int = 0
    client_id_alias: str | None = None
    client_id_alias_enabled: bool = False
    client_secret: str | None = None
    client_type: ClientType | None = None
    client_name: str | None = None
    client_names: list[TaggedValue] | None = None
    redirect_uris: list[str] | None = None
    grant_types: list[GrantType] | None = None
    contacts: list[str] | None = None
    logo_uri: str | None = None
    client_uri: str | None = None
    policy_uri: str | None = None
    tos_uri: str | None = None
    jwks_uri: str | None = None
    token_auth_method: ClientAuthMethod | None = None
    default_max_age: int = 0


class Service(ApiModel):
    """
    A service, i.e. an authorization server instance.

    As with Client, unmodelled members are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    number: int = 0
    service_owner_number: int = 0
    service_name: str | None = None
    api_key: int = 0
    api_secret: str | None = None
    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    revocation_endpoint: str | None = None
    user_info_endpoint: str | None = None
    jwks_uri: str | None = None
    registration_endpoint: str | None = None
    supported_scopes: list[Scope] | None = None
    supported_grant_types: list[GrantType] | None = None
    supported_token_auth_methods: list[ClientAuthMethod] | None = None
    supported_claims: list[str] | None = None
