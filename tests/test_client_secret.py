# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_authz

import pytest
from pydantic import ValidationError

from coreason_authz.models import ClientSecretUpdateRequest, ClientSecretUpdateResponse


def test_update_request_accepts_valid_secret() -> None:
    request = ClientSecretUpdateRequest(client_secret="new-Secret_01")

    assert request.client_secret == "new-Secret_01"
    assert request.to_dict() == {"clientSecret": "new-Secret_01"}


def test_update_request_accepts_wire_name() -> None:
    request = ClientSecretUpdateRequest.from_json('{"clientSecret": "abc"}')
    assert request is not None
    assert request.client_secret == "abc"


@pytest.mark.parametrize(
    ("secret", "message"),
    [
        (None, "clientSecret is null."),
        ("", "clientSecret is empty."),
        ("x" * 87, "clientSecret is too long."),
        ("bad secret", "clientSecret contains an illegal character."),
    ],
)
def test_update_request_rejects_invalid_secret(secret: str | None, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        ClientSecretUpdateRequest(client_secret=secret)  # type: ignore[arg-type]


def test_update_request_validates_on_assignment() -> None:
    request = ClientSecretUpdateRequest(client_secret="abc")

    with pytest.raises(ValidationError, match="illegal character"):
        request.client_secret = "a+b"

    # The previous value is left untouched
    assert request.client_secret == "abc"

    request.client_secret = "def"
    assert request.client_secret == "def"


def test_update_response() -> None:
    response = ClientSecretUpdateResponse.from_json(
        '{"resultCode": "A148001", "newClientSecret": "new", "oldClientSecret": "old"}'
    )

    assert response is not None
    assert response.result_code == "A148001"
    assert response.new_client_secret == "new"
    assert response.old_client_secret == "old"
    assert response.summarize() == "newClientSecret=new"
