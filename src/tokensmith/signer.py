"""HMAC-SHA256 token signatures."""

from __future__ import annotations

import hashlib
import hmac

from .util import base64url_encode

__all__ = ["sign", "signatures_match"]


def sign(header_segment: str, payload_segment: str, secret: str) -> str:
    """Compute the signature segment for a token.

    Parameters
    ----------
    header_segment
        Encoded header of the token.
    payload_segment
        Encoded payload of the token.
    secret
        Shared signing secret. Callers are responsible for rejecting empty
        or short secrets.

    Returns
    -------
    str
        HMAC-SHA256 of ``header_segment.payload_segment`` keyed with the
        secret, encoded in URL-safe base64 without padding.
    """
    message = f"{header_segment}.{payload_segment}".encode("ascii")
    mac = hmac.new(secret.encode(), message, hashlib.sha256)
    return base64url_encode(mac.digest())


def signatures_match(expected: str, actual: str) -> bool:
    """Compare two signature segments in constant time.

    Parameters
    ----------
    expected
        Signature computed locally.
    actual
        Signature taken from the token.

    Returns
    -------
    bool
        Whether the signatures are identical.
    """
    return hmac.compare_digest(expected.encode(), actual.encode())
