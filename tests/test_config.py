# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from coreason_authz.config import AuthleteApiVersion, AuthleteConfig


def test_config_loading_v2() -> None:
    """Test loading a V2 configuration from the environment variables."""
    with patch.dict(
        os.environ,
        {
            "AUTHLETE_BASE_URL": "https://api.authlete.com/",
            "AUTHLETE_SERVICE_APIKEY": "1234",
            "AUTHLETE_SERVICE_APISECRET": "service-secret",
            "AUTHLETE_SERVICEOWNER_APIKEY": "5678",
            "AUTHLETE_SERVICEOWNER_APISECRET": "owner-secret",
        },
        clear=True,
    ):
        config = AuthleteConfig()

    assert config.base_url == "https://api.authlete.com"
    assert config.api_version is AuthleteApiVersion.V2
    assert config.service_api_key == "1234"
    assert config.service_api_secret is not None
    assert config.service_api_secret.get_secret_value() == "service-secret"
    assert config.service_owner_api_key == "5678"
    assert config.service_owner_api_secret is not None
    assert config.service_owner_api_secret.get_secret_value() == "owner-secret"
    assert config.service_access_token is None


def test_config_loading_v3() -> None:
    with patch.dict(
        os.environ,
        {
            "AUTHLETE_BASE_URL": "https://us.authlete.com",
            "AUTHLETE_API_VERSION": "V3",
            "AUTHLETE_SERVICE_APIKEY": "715948317",
            "AUTHLETE_SERVICE_ACCESSTOKEN": "service-token",
            "AUTHLETE_DPOP_KEY": '{"kty":"EC"}',
        },
        clear=True,
    ):
        config = AuthleteConfig()

    assert config.api_version is AuthleteApiVersion.V3
    assert config.service_access_token is not None
    assert config.service_access_token.get_secret_value() == "service-token"
    assert config.dpop_key is not None
    assert config.dpop_key.get_secret_value() == '{"kty":"EC"}'


def test_config_case_insensitive() -> None:
    """Test that environment variables are case-insensitive (pydantic-settings default behavior)."""
    with patch.dict(
        os.environ,
        {"authlete_base_url": "https://lower.example.com"},
        clear=True,
    ):
        config = AuthleteConfig()
    assert config.base_url == "https://lower.example.com"


def test_config_by_field_name() -> None:
    with patch.dict(os.environ, {}, clear=True):
        config = AuthleteConfig(
            base_url="https://api.authlete.com",
            service_api_key="1234",
            service_api_secret="secret",
        )
    assert config.service_api_key == "1234"


def test_base_url_required() -> None:
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError) as exc:
            AuthleteConfig()
    assert "base_url" in str(exc.value)


def test_https_enforcement() -> None:
    """Test that an HTTP base URL is rejected by default."""
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError) as exc:
            AuthleteConfig(base_url="http://localhost:8080")
    assert "HTTPS is required for production" in str(exc.value)


def test_https_override() -> None:
    """Test that an HTTP base URL is accepted with unsafe_local_dev=True."""
    with patch.dict(os.environ, {}, clear=True):
        config = AuthleteConfig(base_url="http://localhost:8080/", unsafe_local_dev=True)
    assert config.base_url == "http://localhost:8080"
    assert config.unsafe_local_dev is True


def test_empty_base_url() -> None:
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError, match="must not be empty"):
            AuthleteConfig(base_url="/")


def test_v3_requires_access_token() -> None:
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError, match="requires a service or service owner access token"):
            AuthleteConfig(base_url="https://api.authlete.com", api_version="V3")

        config = AuthleteConfig(
            base_url="https://api.authlete.com",
            api_version="V3",
            service_owner_access_token="owner-token",
        )
    assert config.service_owner_access_token is not None


def test_v2_key_and_secret_together() -> None:
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError, match="service_api_key and service_api_secret"):
            AuthleteConfig(base_url="https://api.authlete.com", service_api_key="1234")

        with pytest.raises(ValidationError, match="service_owner_api_key and service_owner_api_secret"):
            AuthleteConfig(base_url="https://api.authlete.com", service_owner_api_secret="secret")


def test_unknown_api_version_rejected() -> None:
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValidationError):
            AuthleteConfig(base_url="https://api.authlete.com", api_version="V4")


def test_secrets_are_masked() -> None:
    with patch.dict(os.environ, {}, clear=True):
        config = AuthleteConfig(
            base_url="https://api.authlete.com",
            service_api_key="1234",
            service_api_secret="super-secret-value",
        )
    assert "super-secret-value" not in repr(config)
    assert "super-secret-value" not in str(config)


def test_api_version_parse() -> None:
    assert AuthleteApiVersion.parse("V2") is AuthleteApiVersion.V2
    assert AuthleteApiVersion.parse("V3") is AuthleteApiVersion.V3
    assert AuthleteApiVersion.parse("v3") is None
    assert AuthleteApiVersion.parse("V4") is None
    assert AuthleteApiVersion.parse(None) is None
