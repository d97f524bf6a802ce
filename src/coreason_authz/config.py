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
Configuration for reaching the authorization server API.
"""

from enum import StrEnum
from typing import Self

from pydantic import AliasChoices, Field, SecretStr, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthleteApiVersion(StrEnum):
    """Version of the authorization server API."""

    V2 = "V2"
    V3 = "V3"

    @classmethod
    def parse(cls, version: str | None) -> "AuthleteApiVersion | None":
        """
        Returns the version whose name is exactly ``version``, or None if there is none.
        """
        if version is None:
            return None
        try:
            return cls[version]
        except KeyError:
            return None


class AuthleteConfig(BaseSettings):
    """
    Configuration settings for the authorization server API.

    Values are read from the same environment variables as the other Authlete libraries
    (AUTHLETE_BASE_URL, AUTHLETE_SERVICE_APIKEY, ...).

    Attributes:
        base_url (str): Base URL of the API, without a trailing slash.
        api_version (AuthleteApiVersion): V2 authenticates with API key/secret pairs, V3 with access tokens.
        service_owner_api_key (str | None): API key of the service owner (V2).
        service_owner_api_secret (SecretStr | None): API secret of the service owner (V2).
        service_owner_access_token (SecretStr | None): Access token of the service owner (V3).
        service_api_key (str | None): API key of the service (V2); the service ID in V3.
        service_api_secret (SecretStr | None): API secret of the service (V2).
        service_access_token (SecretStr | None): Access token of the service (V3).
        dpop_key (SecretStr | None): JWK used to sign DPoP proofs for API calls.
        client_certificate (str | None): PEM certificate for mutual TLS with the API.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTHLETE_",
        case_sensitive=False,
    )

    unsafe_local_dev: bool = False
    base_url: str
    api_version: AuthleteApiVersion = AuthleteApiVersion.V2
    service_owner_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_APIKEY", "service_owner_api_key"),
    )
    service_owner_api_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_APISECRET", "service_owner_api_secret"),
    )
    service_owner_access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICEOWNER_ACCESSTOKEN", "service_owner_access_token"),
    )
    service_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_APIKEY", "service_api_key"),
    )
    service_api_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_APISECRET", "service_api_secret"),
    )
    service_access_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AUTHLETE_SERVICE_ACCESSTOKEN", "service_access_token"),
    )
    dpop_key: SecretStr | None = None
    client_certificate: str | None = None

    @field_validator("base_url", mode="after")
    @classmethod
    def validate_base_url(cls, v: str, info: ValidationInfo) -> str:
        """
        Strips trailing slashes and ensures HTTPS, unless strictly opted out for local dev.
        """
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty.")
        if not v.startswith("https://") and not info.data.get("unsafe_local_dev", False):
            raise ValueError("HTTPS is required for production. Set 'unsafe_local_dev=True' only for local testing.")
        return v

    @model_validator(mode="after")
    def validate_credentials(self) -> Self:
        """
        Checks that the credentials match the API version.

        V3 needs a service or service owner access token. V2 key/secret pairs must be complete.
        """
        if self.api_version == AuthleteApiVersion.V3:
            if self.service_access_token is None and self.service_owner_access_token is None:
                raise ValueError("API version V3 requires a service or service owner access token.")
            return self

        if (self.service_api_key is None) != (self.service_api_secret is None):
            raise ValueError("service_api_key and service_api_secret must be provided together.")
        if (self.service_owner_api_key is None) != (self.service_owner_api_secret is None):
            raise ValueError("service_owner_api_key and service_owner_api_secret must be provided together.")
        return self
