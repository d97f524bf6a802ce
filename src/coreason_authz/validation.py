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
Format checks for values sent to the authorization server.
"""

import re

from coreason_authz.exceptions import InvalidArgumentError
from coreason_authz.utils.logger import logger

CLIENT_SECRET_MAX_LENGTH = 86

_CLIENT_SECRET_CHARSET = re.compile(r"[A-Za-z0-9_-]+")


def check_client_secret(client_secret: str | None) -> str:
    """
    Checks that a client secret complies with the format accepted by the server.

    Valid characters are A-Z, a-z, 0-9, '-' and '_'. The maximum length is 86.

    Args:
        client_secret: The candidate client secret.

    Returns:
        The client secret, unchanged.

    Raises:
        InvalidArgumentError: If the value is None, empty, too long or contains an illegal character.
    """
    if client_secret is None:
        raise InvalidArgumentError("clientSecret is null.")

    if not isinstance(client_secret, str):
        raise InvalidArgumentError("clientSecret is not a string.")

    if len(client_secret) == 0:
        raise InvalidArgumentError("clientSecret is empty.")

    if len(client_secret) > CLIENT_SECRET_MAX_LENGTH:
        logger.warning(f"Rejected client secret of length {len(client_secret)}")
        raise InvalidArgumentError("clientSecret is too long.")

    # fullmatch, not match: '$' would accept a trailing newline
    if not _CLIENT_SECRET_CHARSET.fullmatch(client_secret):
        logger.warning("Rejected client secret containing an illegal character")
        raise InvalidArgumentError("clientSecret contains an illegal character.")

    return client_secret
