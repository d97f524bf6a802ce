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
Base classes for the API request/response models.
"""

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from coreason_authz.utils.json_fields import dumps, loads, require_object
from coreason_authz.utils.summary import summarize


class ApiModel(BaseModel):
    """
    Base for every object exchanged with the authorization server API.

    Wire names are camelCase, attribute names snake_case; either is accepted on input.
    Models are mutable and re-validated on assignment.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Dumps the model to a JSON-compatible dict using wire names, omitting unset members."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Dumps the model to JSON text using wire names, omitting unset members."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Self | None:
        """
        Builds the model from a decoded JSON object.

        Returns:
            None if data is None.

        Raises:
            pydantic.ValidationError: If the data does not match the model.
        """
        if data is None:
            return None
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, json: str | None) -> Self | None:
        """
        Builds the model from JSON text.

        Returns:
            None if json is None or the JSON literal null.

        Raises:
            InvalidJsonError: If the text is not valid JSON.
            pydantic.ValidationError: If the data does not match the model.
        """
        if json is None:
            return None
        return cls.from_dict(loads(json))


class ExtensibleModel(ApiModel):
    """
    Base for records that promote a fixed set of properties to attributes and keep the rest verbatim.

    Attributes:
        other_fields (str | None): JSON object text holding every property not in KNOWN_FIELDS, or None.
    """

    # Wire names of the properties promoted to typed attributes.
    KNOWN_FIELDS: ClassVar[tuple[str, ...]] = ()

    other_fields: str | None = None

    @field_validator("other_fields")
    @classmethod
    def validate_other_fields(cls, v: str | None) -> str | None:
        """Ensures other_fields, when set, is the JSON text of an object."""
        if v is not None:
            require_object(loads(v), "otherFields")
        return v

    def get_other_fields_as_map(self) -> dict[str, Any] | None:
        """Returns the other properties as a dict, or None if there are none."""
        if self.other_fields is None:
            return None
        return require_object(loads(self.other_fields), "otherFields")

    def set_other_fields_from_map(self, other_fields: Mapping[str, Any] | None) -> None:
        """Replaces the other properties. None clears them."""
        self.other_fields = None if other_fields is None else dumps(dict(other_fields))


class ApiResponse(ApiModel):
    """
    Common part of every API response.

    Attributes:
        result_code (str | None): The code of the result of the API call.
        result_message (str | None): A short message describing the result.
    """

    # Attribute names rendered by summarize(), in order.
    SUMMARY_FIELDS: ClassVar[tuple[str, ...]] = ()

    result_code: str | None = None
    result_message: str | None = None

    def summarize(self) -> str:
        """
        Returns a one-line summary of the response, suitable for logging.
        """
        fields = type(self).model_fields
        return summarize((fields[name].alias or name, getattr(self, name)) for name in self.SUMMARY_FIELDS)
