"""Construction of signed tokens."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Self

import structlog
from structlog.stdlib import BoundLogger

from .config import Config
from .constants import ALGORITHM, TOKEN_TYPE
from .encoder import encode
from .exceptions import BuildError, EncodeError
from .models.token import Audience, ClaimValue, Jwt
from .signer import sign
from .util import current_timestamp, normalize_timedelta, to_timestamp

__all__ = ["TokenBuilder"]


class TokenBuilder:
    """Accumulate claims and build a signed token.

    Every configuration method returns the builder so that calls can be
    chained. Nothing is checked until `build` is called.

    Parameters
    ----------
    config
        Token policy. Defaults are used if not given.
    logger
        Logger to use. Defaults to the tokensmith logger.

    Examples
    --------
    .. code-block:: python

       token = (
           TokenBuilder()
           .add_payload("user_id", 42)
           .set_secret("super-secret-key!!")
           .set_expiration(20)
           .set_issuer("trusted-issuer")
           .build()
       )
    """

    def __init__(
        self, config: Config | None = None, logger: BoundLogger | None = None
    ) -> None:
        self._config = config or Config()
        self._logger = logger or structlog.get_logger(self._config.logger_name)
        self._header: dict[str, Any] = {}
        self._payload: dict[str, Any] = {}
        self._secret: str | None = None
        self.reset()

    def reset(self) -> Self:
        """Discard all claims and the secret and restore the default header.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        self._header = {"alg": ALGORITHM, "typ": TOKEN_TYPE}
        self._payload = {}
        self._secret = None
        return self

    def add_header(self, key: str, value: ClaimValue) -> Self:
        """Add or replace a header claim.

        Parameters
        ----------
        key
            Name of the claim.
        value
            Value of the claim.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        self._header[key] = value
        return self

    def add_payload(self, key: str, value: ClaimValue) -> Self:
        """Add or replace a payload claim.

        New claims are serialized in the order they were first added.
        Replacing a claim keeps its original position.

        Parameters
        ----------
        key
            Name of the claim.
        value
            Value of the claim.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        self._payload[key] = value
        return self

    def set_secret(self, secret: str) -> Self:
        """Set the signing secret.

        The secret is checked against the minimum length when the token is
        built, not here.
        """
        self._secret = secret
        return self

    def set_content_type(self, content_type: str) -> Self:
        """Set the ``cty`` header claim."""
        return self.add_header("cty", content_type)

    def set_expiration(self, lifetime: int | timedelta) -> Self:
        """Set the ``exp`` claim relative to the current time.

        Parameters
        ----------
        lifetime
            How long the token should remain valid, as seconds or a
            `~datetime.timedelta`. Negative values produce a token that has
            already expired.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        return self.add_payload("exp", self._from_now(lifetime))

    def set_expiration_at(self, expires: datetime | int) -> Self:
        """Set the ``exp`` claim to an absolute time.

        Parameters
        ----------
        expires
            Expiration as an aware datetime or seconds since epoch.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        return self.add_payload("exp", self._at(expires))

    def set_not_before(self, offset: int | timedelta) -> Self:
        """Set the ``nbf`` claim relative to the current time.

        Parameters
        ----------
        offset
            Delay before the token becomes valid, as seconds or a
            `~datetime.timedelta`.

        Returns
        -------
        TokenBuilder
            The builder, for chaining.
        """
        return self.add_payload("nbf", self._from_now(offset))

    def set_not_before_at(self, not_before: datetime | int) -> Self:
        """Set the ``nbf`` claim to an absolute time."""
        return self.add_payload("nbf", self._at(not_before))

    def set_issued_at(self) -> Self:
        """Set the ``iat`` claim to the current time."""
        return self.add_payload("iat", current_timestamp())

    def set_issuer(self, issuer: str) -> Self:
        """Set the ``iss`` claim."""
        return self.add_payload("iss", issuer)

    def set_subject(self, subject: str) -> Self:
        """Set the ``sub`` claim."""
        return self.add_payload("sub", subject)

    def set_audience(self, audience: Audience) -> Self:
        """Set the ``aud`` claim to one audience or a list of audiences."""
        if isinstance(audience, list):
            audience = list(audience)
        return self.add_payload("aud", audience)

    def set_jwt_id(self, jwt_id: str) -> Self:
        """Set the ``jti`` claim."""
        return self.add_payload("jti", jwt_id)

    def build(self) -> str:
        """Build and sign the token.

        Building does not change the builder, so building again without
        further changes returns the same token.

        Returns
        -------
        str
            The encoded token.

        Raises
        ------
        BuildError
            Raised if the header does not declare an HS256 JWT, the secret
            is missing or shorter than the configured minimum, or some claim
            cannot be serialized.
        """
        return str(self.build_jwt())

    def build_jwt(self) -> Jwt:
        """Build and sign the token, returning its segments.

        Returns
        -------
        Jwt
            The encoded token.

        Raises
        ------
        BuildError
            Raised under the same conditions as `build`.
        """
        secret = self._check_secret()
        self._check_header()
        try:
            header = encode(self._header)
            payload = encode(self._payload)
        except EncodeError as e:
            raise BuildError(str(e)) from e
        signature = sign(header, payload, secret)
        self._logger.debug("Built token", claims=list(self._payload))
        return Jwt(header=header, payload=payload, signature=signature)

    def _at(self, when: datetime | int) -> int:
        try:
            return to_timestamp(when)
        except (TypeError, ValueError) as e:
            raise BuildError(str(e)) from e

    def _check_header(self) -> None:
        typ = self._header.get("typ")
        if typ != TOKEN_TYPE:
            raise BuildError(f"Header typ must be {TOKEN_TYPE}, not {typ!r}")
        alg = self._header.get("alg")
        if alg != ALGORITHM:
            raise BuildError(f"Header alg must be {ALGORITHM}, not {alg!r}")

    def _check_secret(self) -> str:
        if not self._secret:
            raise BuildError("No signing secret set")
        minimum = self._config.minimum_secret_length
        if len(self._secret) < minimum:
            msg = f"Signing secret must be at least {minimum} characters"
            raise BuildError(msg)
        return self._secret

    def _from_now(self, offset: int | timedelta) -> int:
        try:
            delta = normalize_timedelta(offset)
        except ValueError as e:
            raise BuildError(str(e)) from e
        if delta is None:
            raise BuildError("Time offset must be given")
        return current_timestamp() + int(delta.total_seconds())
