"""Validate a JWT."""

from __future__ import annotations

from typing import Self

import structlog
from structlog.stdlib import BoundLogger

from .config import Config
from .constants import ALGORITHM
from .exceptions import (
    ExpiredError,
    InvalidAudienceError,
    InvalidClaimError,
    NotYetValidError,
    SignatureMismatchError,
    TokenError,
    UnsupportedAlgorithmError,
    ValidateError,
)
from .models.token import Parsed, is_numeric_date
from .parser import TokenParser
from .signer import sign, signatures_match
from .util import current_timestamp

__all__ = ["TokenValidator"]


class TokenValidator:
    """Checks the validity of a JWT.

    Validation happens in steps. `split_token` parses the token and each
    ``validate_*`` method then checks one property, returning the validator so
    that the steps can be chained and raising a specific exception on
    failure. `validate` runs every step and reduces the outcome to a boolean.

    A validator holds the most recently parsed token, so use a separate
    validator for each token.

    Parameters
    ----------
    config
        Token policy. Defaults are used if not given.
    logger
        Logger to use. Defaults to the tokensmith logger.
    """

    def __init__(
        self, config: Config | None = None, logger: BoundLogger | None = None
    ) -> None:
        self._config = config or Config()
        self._logger = logger or structlog.get_logger(self._config.logger_name)
        self._parser = TokenParser(self._config, self._logger)
        self._parsed: Parsed | None = None

    @property
    def parsed(self) -> Parsed:
        """The parsed token.

        Raises
        ------
        ValidateError
            Raised if `split_token` has not been called successfully.
        """
        if self._parsed is None:
            raise ValidateError("No token has been parsed")
        return self._parsed

    def split_token(self, token: str) -> Self:
        """Parse the token to validate.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        TokenValidator
            The validator, for chaining.

        Raises
        ------
        ParseError
            Raised if the token is malformed.
        """
        self._parsed = None
        self._parsed = self._parser.parse(token)
        return self

    def validate_algorithm(self) -> Self:
        """Check that the token header declares the HS256 algorithm.

        Raises
        ------
        UnsupportedAlgorithmError
            Raised if the ``alg`` header claim is missing or not HS256.
        """
        algorithm = self.parsed.algorithm
        if algorithm != ALGORITHM:
            msg = f"Token algorithm {algorithm!r} is not {ALGORITHM}"
            raise UnsupportedAlgorithmError(msg)
        return self

    def validate_expiration(self) -> Self:
        """Check that the token has not expired.

        A token without an ``exp`` claim, or with an ``exp`` of zero, never
        expires.

        Raises
        ------
        ExpiredError
            Raised if the current time is at or after the expiration.
        InvalidClaimError
            Raised if the ``exp`` claim is present but not a finite number.
        """
        expiration = self._check_time_claim("exp", self.parsed.expiration)
        if not expiration:
            return self
        leeway = int(self._config.leeway.total_seconds())
        if current_timestamp() >= expiration + leeway:
            raise ExpiredError(f"Token expired at {expiration}")
        return self

    def validate_not_before(self) -> Self:
        """Check that the token is already valid.

        Raises
        ------
        NotYetValidError
            Raised if the current time is before the ``nbf`` claim.
        InvalidClaimError
            Raised if the ``nbf`` claim is present but not a finite number.
        """
        not_before = self._check_time_claim("nbf", self.parsed.not_before)
        if not not_before:
            return self
        leeway = int(self._config.leeway.total_seconds())
        if current_timestamp() + leeway < not_before:
            raise NotYetValidError(f"Token not valid before {not_before}")
        return self

    def validate_signature(self, secret: str) -> Self:
        """Check the token signature.

        Parameters
        ----------
        secret
            The shared signing secret.

        Raises
        ------
        SignatureMismatchError
            Raised if the secret is empty or the signature does not match.
        """
        if not secret:
            raise SignatureMismatchError("No secret to check signature with")
        jwt = self.parsed.jwt
        expected = sign(jwt.header, jwt.payload, secret)
        if not signatures_match(expected, self.parsed.signature):
            raise SignatureMismatchError("Token signature does not match")
        return self

    def validate_audience(self, audience: str) -> Self:
        """Check that the token was issued for an audience.

        Parameters
        ----------
        audience
            The expected audience. It must equal the ``aud`` claim or be one
            of its elements if the claim is a list.

        Raises
        ------
        InvalidAudienceError
            Raised if the token is not intended for that audience.
        """
        aud = self.parsed.audience
        valid = audience in aud if isinstance(aud, list) else audience == aud
        if not audience or not valid:
            raise InvalidAudienceError(f"Token not valid for {audience}")
        return self

    def validate(self, token: str, secret: str) -> bool:
        """Check whether a token is valid.

        The token is parsed and then its algorithm, expiration, not-before
        time and signature are checked.

        Parameters
        ----------
        token
            The encoded token.
        secret
            The shared signing secret.

        Returns
        -------
        bool
            `True` if every check passed, `False` otherwise. The reason for a
            failure is logged but no exception is raised.
        """
        try:
            (
                self.split_token(token)
                .validate_algorithm()
                .validate_expiration()
                .validate_not_before()
                .validate_signature(secret)
            )
        except TokenError as e:
            self._logger.info(
                "Token validation failed", error=e.error, reason=str(e)
            )
            return False
        self._logger.debug("Token is valid", jti=self.parsed.jwt_id or None)
        return True

    def _check_time_claim(self, name: str, timestamp: int) -> int:
        value = self.parsed.get_claim(name)
        if value is not None and not is_numeric_date(value):
            raise InvalidClaimError(f"Invalid {name} claim: {value!r}")
        return timestamp

