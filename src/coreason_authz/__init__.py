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
Typed models of the OAuth 2.0 / OpenID Connect authorization server API, with lossless handling
of extensible JSON objects such as RFC 9396 authorization details.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import AuthleteApiVersion, AuthleteConfig
from .exceptions import CoreasonAuthzError, InvalidArgumentError, InvalidJsonError
from .models import AuthzDetails, AuthzDetailsElement, Grant, GrantScope
from .utils.json_fields import map_array, merge_known_fields, split_known_fields
from .validation import check_client_secret

__all__ = [
    "AuthleteApiVersion",
    "AuthleteConfig",
    "AuthzDetails",
    "AuthzDetailsElement",
    "CoreasonAuthzError",
    "Grant",
    "GrantScope",
    "InvalidArgumentError",
    "InvalidJsonError",
    "check_client_secret",
    "map_array",
    "merge_known_fields",
    "split_known_fields",
]
