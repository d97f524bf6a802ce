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
Models for the ``authorization_details`` request parameter (RFC 9396, OAuth 2.0 Rich Authorization Requests).

Two JSON shapes exist for these objects:

* The RFC 9396 shape, an array of objects whose unknown properties are type-specific. It is produced
  and consumed by ``to_json``/``from_json`` (text) and ``to_wire``/``from_wire`` (decoded values).
  Properties other than the six common ones are kept verbatim in ``other_fields``.
* The API shape, used when the objects are nested in other API models
  (``{"elements": [{"type": ..., "otherFields": "..."}]}``). It is the regular pydantic dump.
"""

from typing import Any, ClassVar, Self

from coreason_authz.models.base import ApiModel, ExtensibleModel
from coreason_authz.utils.json_fields import (
    dumps,
    get_string,
    get_string_array,
    loads,
    map_array,
    merge_known_fields,
    require_object,
    split_known_fields,
)


class AuthzDetailsElement(ExtensibleModel):
    """
    An element of ``authorization_details``.

    Attributes:
        type (str | None): The type of the authorization details.
        locations (list[str | None] | None): Resources or resource servers (``locations``).
        actions (list[str | None] | None): Kinds of actions to be taken at the resource (``actions``).
        data_types (list[str | None] | None): Kinds of data being requested (``datatypes``).
        identifier (str | None): A specific resource available at the API (``identifier``).
        privileges (list[str | None] | None): Types or levels of privilege (``privileges``).
        other_fields (str | None): JSON object text holding every other property, or None.
    """

    KNOWN_FIELDS: ClassVar[tuple[str, ...]] = (
        "type",
        "locations",
        "actions",
        "datatypes",
        "identifier",
        "privileges",
    )

    type: str | None = None
    locations: list[str | None] | None = None
    actions: list[str | None] | None = None
    data_types: list[str | None] | None = None
    identifier: str | None = None
    privileges: list[str | None] | None = None

    @classmethod
    def from_wire(cls, value: Any) -> Self | None:
        """
        Builds an element from a decoded RFC 9396 JSON object.

        Returns:
            None if value is None (JSON null).

        Raises:
            InvalidJsonError: If value is not an object or a common property has the wrong type.
        """
        if value is None:
            return None

        obj = require_object(value, "authorization details element")
        _, other_fields = split_known_fields(obj, cls.KNOWN_FIELDS)

        return cls(
            type=get_string(obj, "type"),
            locations=get_string_array(obj, "locations"),
            actions=get_string_array(obj, "actions"),
            data_types=get_string_array(obj, "datatypes"),
            identifier=get_string(obj, "identifier"),
            privileges=get_string_array(obj, "privileges"),
            other_fields=other_fields,
        )

    def to_wire(self) -> dict[str, Any]:
        """Returns the RFC 9396 JSON object, with the other properties merged back in as siblings."""
        known = {
            "type": self.type,
            "locations": self.locations,
            "actions": self.actions,
            "datatypes": self.data_types,
            "identifier": self.identifier,
            "privileges": self.privileges,
        }
        return merge_known_fields(known, self.other_fields)

    @classmethod
    def from_json(cls, json: str | None) -> Self | None:
        if json is None:
            return None
        return cls.from_wire(loads(json))

    def to_json(self) -> str:
        return dumps(self.to_wire())


class AuthzDetails(ApiModel):
    """
    The content of ``authorization_details``: an ordered array of elements.

    ``elements`` being None means no array was provided, as opposed to an empty array.
    """

    elements: list[AuthzDetailsElement | None] | None = None

    @classmethod
    def from_wire(cls, value: Any) -> Self | None:
        """
        Builds the model from a decoded RFC 9396 JSON array.

        Returns:
            None if value is None (JSON null).

        Raises:
            InvalidJsonError: If value is not an array or an element is invalid.
        """
        if value is None:
            return None
        return cls(elements=map_array(value, AuthzDetailsElement.from_wire))

    def to_wire(self) -> list[Any] | None:
        """Returns the RFC 9396 JSON array, or None if elements is None."""
        return map_array(self.elements, AuthzDetailsElement.to_wire)

    @classmethod
    def from_json(cls, json: str | None) -> Self | None:
        if json is None:
            return None
        return cls.from_wire(loads(json))

    def to_json(self) -> str:
        """Returns the RFC 9396 JSON text; "null" if elements is None."""
        return dumps(self.to_wire())
