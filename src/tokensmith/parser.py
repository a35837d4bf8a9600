"""Parse an encoded JWT into its parts."""

from __future__ import annotations

import structlog
from structlog.stdlib import BoundLogger

from .config import Config
from .encoder import decode
from .exceptions import DecodeError, StructureError
from .models.token import Jwt, Parsed

__all__ = ["TokenParser"]


class TokenParser:
    """Split and decode JWTs without verifying them.

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

    def parse(self, token: str) -> Parsed:
        """Parse a token.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        Parsed
            The token segments and the decoded header and payload. The
            signature is kept in encoded form.

        Raises
        ------
        StructureError
            Raised if the token does not have exactly three segments.
        DecodeError
            Raised if the header or payload is not base64url-encoded JSON.
        """
        jwt = self.split(token)
        try:
            header = decode(jwt.header)
        except DecodeError as e:
            raise DecodeError(f"Invalid token header: {e!s}") from e
        try:
            payload = decode(jwt.payload)
        except DecodeError as e:
            raise DecodeError(f"Invalid token payload: {e!s}") from e
        self._logger.debug("Parsed token", jti=payload.get("jti"))
        return Parsed(
            jwt=jwt, header=header, payload=payload, signature=jwt.signature
        )

    def split(self, token: str) -> Jwt:
        """Split a token into its segments without decoding them.

        Parameters
        ----------
        token
            The encoded token.

        Returns
        -------
        Jwt
            The three segments of the token.

        Raises
        ------
        StructureError
            Raised if the token does not have exactly three segments.
        """
        segments = token.split(".")
        if len(segments) != 3:
            msg = f"Token has {len(segments)} segments instead of 3"
            raise StructureError(msg)
        header, payload, signature = segments
        return Jwt(header=header, payload=payload, signature=signature)
