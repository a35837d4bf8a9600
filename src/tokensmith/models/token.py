"""Representation of an encoded JWT and its parsed contents."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeAlias

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
)

__all__ = [
    "Audience",
    "ClaimValue",
    "Claims",
    "Jwt",
    "Parsed",
    "ReadOnlyClaims",
    "is_numeric_date",
]

ClaimValue: TypeAlias = str | int | list[str]
"""Type of a claim value accepted by the token builder."""

Audience: TypeAlias = str | list[str]
"""Type of the ``aud`` claim, either one audience or a list of them."""

Claims: TypeAlias = dict[str, Any]
"""Type of a decoded header or payload."""

ReadOnlyClaims: TypeAlias = Annotated[
    Mapping[str, Any], AfterValidator(lambda v: MappingProxyType(dict(v)))
]
"""Type of the decoded header or payload held by a parsed token."""


def is_numeric_date(value: Any) -> bool:
    """Whether a claim value is a finite number of seconds since epoch.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return not isinstance(value, float) or math.isfinite(value)


class Jwt(BaseModel):
    """An encoded JWT split into its three segments.

    Notes
    -----
    The segments are kept exactly as they appear in the token. In particular
    the signature is not decoded, so that it can be compared against a
    recomputed signature without any normalization.
    """

    model_config = ConfigDict(frozen=True)

    header: str = Field(..., title="Encoded header segment")

    payload: str = Field(..., title="Encoded payload segment")

    signature: str = Field(..., title="Encoded signature segment")

    @property
    def signing_input(self) -> str:
        """The ``header.payload`` string covered by the signature."""
        return f"{self.header}.{self.payload}"

    def __str__(self) -> str:
        """Return the encoded token."""
        return f"{self.header}.{self.payload}.{self.signature}"


class Parsed(BaseModel):
    """A JWT whose header and payload have been decoded.

    Created by `~tokensmith.parser.TokenParser`. Nothing about the token has
    been verified at this point. The accessors for well-known claims never
    fail: an absent claim, or one of the wrong type, reads as an empty string
    or zero.

    The header and payload are read-only views of copies of the decoded
    claims. Nested lists and objects inside a claim value are not copied.
    """

    model_config = ConfigDict(frozen=True)

    jwt: Jwt = Field(..., title="The token as it was received")

    header: ReadOnlyClaims = Field(..., title="Decoded header claims")

    payload: ReadOnlyClaims = Field(..., title="Decoded payload claims")

    signature: str = Field(..., title="Signature segment of the token")

    @field_serializer("header", "payload")
    def _serialize_claims(self, claims: Mapping[str, Any]) -> Claims:
        return dict(claims)

    @property
    def algorithm(self) -> str:
        """The ``alg`` header claim, or an empty string."""
        return self._get_str(self.header, "alg")

    @property
    def type(self) -> str:
        """The ``typ`` header claim, or an empty string."""
        return self._get_str(self.header, "typ")

    @property
    def content_type(self) -> str:
        """The ``cty`` header claim, or an empty string."""
        return self._get_str(self.header, "cty")

    @property
    def issuer(self) -> str:
        """The ``iss`` payload claim, or an empty string."""
        return self._get_str(self.payload, "iss")

    @property
    def subject(self) -> str:
        """The ``sub`` payload claim, or an empty string."""
        return self._get_str(self.payload, "sub")

    @property
    def audience(self) -> Audience:
        """The ``aud`` payload claim.

        This is either a single audience or a list of audiences, or an empty
        string if the claim is absent or malformed.
        """
        aud = self.payload.get("aud")
        if isinstance(aud, str):
            return aud
        if isinstance(aud, list) and all(isinstance(a, str) for a in aud):
            return list(aud)
        return ""

    @property
    def expiration(self) -> int:
        """The ``exp`` payload claim, or zero."""
        return self._get_int(self.payload, "exp")

    @property
    def not_before(self) -> int:
        """The ``nbf`` payload claim, or zero."""
        return self._get_int(self.payload, "nbf")

    @property
    def issued_at(self) -> int:
        """The ``iat`` payload claim, or zero."""
        return self._get_int(self.payload, "iat")

    @property
    def jwt_id(self) -> str:
        """The ``jti`` payload claim, or an empty string."""
        return self._get_str(self.payload, "jti")

    def get_claim(self, name: str, default: Any = None) -> Any:
        """Return an arbitrary payload claim.

        Parameters
        ----------
        name
            Name of the claim.
        default
            Value to return if the claim is not present.

        Returns
        -------
        Any
            Value of the claim as decoded from JSON.
        """
        return self.payload.get(name, default)

    @staticmethod
    def _get_int(claims: Mapping[str, Any], name: str) -> int:
        value = claims.get(name)
        return int(value) if is_numeric_date(value) else 0

    @staticmethod
    def _get_str(claims: Mapping[str, Any], name: str) -> str:
        value = claims.get(name)
        return value if isinstance(value, str) else ""
