"""Simple interface for creating and validating tokens.

These functions cover the common case of a token identifying a user. For
other claim sets, use the builder, parser and validator returned by
`builder`, `parser` and `validator`.
"""

from __future__ import annotations

from datetime import timedelta

from .builder import TokenBuilder
from .factory import Factory
from .models.token import ClaimValue
from .parser import TokenParser
from .validator import TokenValidator

__all__ = [
    "build_token",
    "builder",
    "parser",
    "validate_token",
    "validator",
]


def build_token(
    user_id: ClaimValue,
    secret: str,
    expiration: int | timedelta,
    issuer: str,
) -> str:
    """Create a token identifying a user.

    Parameters
    ----------
    user_id
        Identifier of the user, stored in the ``user_id`` claim.
    secret
        Shared signing secret.
    expiration
        Lifetime of the token, as seconds or a `~datetime.timedelta`.
    issuer
        Value of the ``iss`` claim.

    Returns
    -------
    str
        The encoded token.

    Raises
    ------
    BuildError
        Raised if the secret is empty or too short.
    """
    return (
        builder()
        .add_payload("user_id", user_id)
        .set_secret(secret)
        .set_expiration(expiration)
        .set_issuer(issuer)
        .build()
    )


def validate_token(token: str, secret: str) -> bool:
    """Check the algorithm, time claims and signature of a token.

    Parameters
    ----------
    token
        The encoded token.
    secret
        Shared signing secret.

    Returns
    -------
    bool
        Whether the token is valid. Malformed tokens are reported as invalid
        rather than raising an exception.
    """
    return validator().validate(token, secret)


def builder() -> TokenBuilder:
    """Return a new token builder with the default configuration."""
    return Factory().create_token_builder()


def parser() -> TokenParser:
    """Return a new token parser with the default configuration."""
    return Factory().create_token_parser()


def validator() -> TokenValidator:
    """Return a new token validator with the default configuration."""
    return Factory().create_token_validator()
