"""Exceptions for tokensmith."""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    "BuildError",
    "DecodeError",
    "EncodeError",
    "ExpiredError",
    "InvalidAudienceError",
    "InvalidClaimError",
    "NotYetValidError",
    "ParseError",
    "SignatureMismatchError",
    "StructureError",
    "TokenError",
    "UnsupportedAlgorithmError",
    "ValidateError",
]


class TokenError(Exception):
    """Base class for all tokensmith errors.

    Every subclass carries a short machine-readable error code so that
    callers (and the logs) can distinguish failures without matching on the
    human-readable message.
    """

    error: ClassVar[str] = "invalid_token"
    """Machine-readable code for this kind of failure."""


class EncodeError(TokenError):
    """A claims mapping could not be serialized to JSON."""

    error = "invalid_claims"


class ParseError(TokenError):
    """A token string could not be parsed into its parts."""

    error = "malformed_token"


class StructureError(ParseError):
    """The token does not have exactly three dot-separated segments."""

    error = "invalid_structure"


class DecodeError(ParseError):
    """A token segment is not valid base64url-encoded JSON object syntax."""

    error = "invalid_encoding"


class BuildError(TokenError):
    """The token builder is misconfigured and cannot produce a token.

    This indicates a programming error, such as a missing or too-short
    secret or a header that does not declare the supported algorithm. It is
    never raised because of the current time.
    """

    error = "invalid_configuration"


class ValidateError(TokenError):
    """Base class for a token that parsed but failed validation."""

    error = "invalid_token"


class ExpiredError(ValidateError):
    """The token expiration time has passed."""

    error = "token_expired"


class NotYetValidError(ValidateError):
    """The token not-before time is still in the future."""

    error = "token_not_yet_valid"


class SignatureMismatchError(ValidateError):
    """The recomputed signature does not match the token signature."""

    error = "invalid_signature"


class UnsupportedAlgorithmError(ValidateError):
    """The token header declares an algorithm other than HS256."""

    error = "unsupported_algorithm"


class InvalidAudienceError(ValidateError):
    """The token was not issued for the expected audience."""

    error = "invalid_audience"


class InvalidClaimError(ValidateError):
    """A time claim is present but does not hold a number of seconds."""

    error = "invalid_claim"
