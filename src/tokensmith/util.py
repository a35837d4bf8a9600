"""General utility functions."""

from __future__ import annotations

import base64
import os
import re
from datetime import datetime, timedelta

from safir.datetime import current_datetime

__all__ = [
    "add_padding",
    "base64url_decode",
    "base64url_encode",
    "current_timestamp",
    "generate_secret",
    "normalize_timedelta",
    "to_timestamp",
]

_BASE64URL_REGEX = re.compile(r"^[A-Za-z0-9_-]*$")


def add_padding(encoded: str) -> str:
    """Add padding to base64 encoded bytes.

    Parameters
    ----------
    encoded
        A base64-encoded string, possibly with the padding removed.

    Returns
    -------
    str
        A correctly-padded version of the encoded string.
    """
    underflow = len(encoded) % 4
    if underflow:
        return encoded + ("=" * (4 - underflow))
    else:
        return encoded


def base64url_encode(data: bytes) -> str:
    """Encode bytes in URL-safe base64 with the padding stripped.

    Parameters
    ----------
    data
        Data to encode.

    Returns
    -------
    str
        The encoded form, using ``-`` and ``_`` in place of ``+`` and ``/``
        and with no trailing ``=`` characters.
    """
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def base64url_decode(encoded: str) -> bytes:
    """Decode URL-safe base64, tolerating missing padding.

    Unlike `base64.urlsafe_b64decode`, characters outside the URL-safe
    alphabet are rejected rather than silently discarded, and so is explicit
    padding, since token segments never carry it.

    Parameters
    ----------
    encoded
        URL-safe base64 without padding.

    Returns
    -------
    bytes
        The decoded data.

    Raises
    ------
    ValueError
        Raised if the input is not valid unpadded URL-safe base64.
    """
    if not _BASE64URL_REGEX.match(encoded):
        raise ValueError("Invalid character in base64url data")
    if len(encoded) % 4 == 1:
        raise ValueError("Invalid length for base64url data")
    return base64.urlsafe_b64decode(add_padding(encoded))


def current_timestamp() -> int:
    """Return the current time in seconds since epoch."""
    return int(current_datetime().timestamp())


def generate_secret(nbytes: int = 32) -> str:
    """Generate a random signing secret.

    Parameters
    ----------
    nbytes
        Number of random bytes. The default of 32 matches the HMAC-SHA256
        block output size.

    Returns
    -------
    str
        Random bytes encoded in URL-safe base64 without padding.
    """
    return base64url_encode(os.urandom(nbytes))


def normalize_timedelta(v: int | timedelta | None) -> timedelta | None:
    """Convert an offset in seconds to a `~datetime.timedelta`.

    Parameters
    ----------
    v
        Offset as a number of seconds or already as a timedelta. `None` is
        passed through.

    Returns
    -------
    datetime.timedelta or None
        The offset as a timedelta.

    Raises
    ------
    ValueError
        Raised if the input is not an integer or timedelta.
    """
    if v is None or isinstance(v, timedelta):
        return v
    elif isinstance(v, int) and not isinstance(v, bool):
        return timedelta(seconds=v)
    else:
        raise ValueError(f"Invalid time offset: {v!r}")


def to_timestamp(when: datetime | int) -> int:
    """Convert a point in time to seconds since epoch.

    Parameters
    ----------
    when
        Either an aware `~datetime.datetime` or seconds since epoch.

    Returns
    -------
    int
        Seconds since epoch, truncated to an integer.

    Raises
    ------
    ValueError
        Raised if a naive datetime is given, since its epoch offset would
        depend on the local time zone.
    """
    if isinstance(when, datetime):
        if when.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return int(when.timestamp())
    return int(when)
