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
Models of a grant, as defined by Grant Management for OAuth 2.0.
"""


from typing import Any, ClassVar, Self

from coreason_authz.models.authz_details import AuthzDetails
from coreason_authz.models.base import ApiModel, ExtensibleModel
from coreason_authz.utils.json_fields import (
    dumps,
    get_array,
    get_string,
    get_string_array,
    loads,
    map_array,
    merge_known_fields,
    require_object,
    split_known_fields,
)


class GrantScope(ApiModel):
    """
    A scope granted to a client, optionally bound to resources.

    Attributes:
        scope (str | None): Space-delimited scopes.
        resource (list[str | None] | None): Resource indicators the scopes are bound to.
    """

    scope: str | None = None
    resource: list[str | None] | None = None

    @classmethod
    def from_wire(cls, value: Any) -> Self | None:
        """Builds a grant scope from a decoded JSON object. Numbers and booleans are read as strings."""
        if value is None:
            return None

        obj = require_object(value, "grant scope")
        return cls(scope=get_string(obj, "scope"), resource=get_string_array(obj, "resource"))

    def to_wire(self) -> dict[str, Any]:
        return merge_known_fields({"scope": self.scope, "resource": self.resource}, None)


class Grant(ExtensibleModel):
    """
    A grant: the set of permissions a user has given to a client.

    ``to_json``/``from_json`` use the Grant Management wire format, where the authorization details
    are an RFC 9396 array under ``authorization_details``. Properties other than the three below are
    kept verbatim in ``other_fields``.

    Attributes:
        scopes (list[GrantScope | None] | None): The granted scopes.
        claims (list[str | None] | None): The granted claims.
        authorization_details (AuthzDetails | None): The granted authorization details.
        other_fields (str | None): JSON object text holding every other property, or None.
    """

    KNOWN_FIELDS: ClassVar[tuple[str, ...]] = ("scopes", "claims", "authorization_details")

    scopes: list[GrantScope | None] | None = None
    claims: list[str | None] | None = None
    authorization_details: AuthzDetails | None = None

    @classmethod
    def from_wire(cls, value: Any) -> Self | None:
        """
        Builds a grant from a decoded JSON object. Absent members stay None.

        Returns:
            None if value is None (JSON null).

        Raises:
            InvalidJsonError: If value is not an object or a member has the wrong structure.
        """
        if value is None:
            return None

        obj = require_object(value, "grant")
        _, other_fields = split_known_fields(obj, cls.KNOWN_FIELDS)

        return cls(
            scopes=map_array(get_array(obj, "scopes"), GrantScope.from_wire),
            claims=get_string_array(obj, "claims"),
            authorization_details=AuthzDetails.from_wire(get_array(obj, "authorization_details")),
            other_fields=other_fields,
        )

    def to_wire(self) -> dict[str, Any]:
        """Returns the grant as a JSON object. Unset members are omitted; other properties are merged back in."""
        scopes = map_array(self.scopes, lambda s: s.to_wire())
        details = None if self.authorization_details is None else self.authorization_details.to_wire()

        return merge_known_fields(
            {
                "scopes": scopes,
                "claims": self.claims,
                "authorization_details": details,
            },
            self.other_fields,
        )

    @classmethod
    def from_json(cls, json: str | None) -> Self | None:
        if json is None:
            return None
        return cls.from_wire(loads(json))

    def to_json(self) -> str:
        return dumps(self.to_wire())
