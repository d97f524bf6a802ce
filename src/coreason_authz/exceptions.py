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
Custom exceptions for the coreason-authz package.
"""


class CoreasonAuthzError(Exception):
    """Base exception for all coreason-authz errors."""


class InvalidArgumentError(CoreasonAuthzError, ValueError):
    """
    Raised when a value handed to a model or helper does not comply with the required format
    (e.g. a client secret containing an illegal character).
    Being a ValueError, it is wrapped into a pydantic ValidationError when raised from a validator.
    """


class InvalidJsonError(CoreasonAuthzError, ValueError):
    """Raised when JSON text or a decoded JSON value does not have the expected structure."""
