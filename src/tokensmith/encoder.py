"""Conversion between claims mappings and encoded token segments."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .exceptions import DecodeError, EncodeError
from .util import base64url_decode, base64url_encode

__all__ = ["decode", "encode"]


def encode(claims: Mapping[str, Any]) -> str:
    """Encode a claims mapping as a token segment.

    The claims are serialized as compact JSON in the iteration order of the
    mapping, so the same ordered mapping always yields the same segment.

    Parameters
    ----------
    claims
        Claims to encode.

    Returns
    -------
    str
        URL-safe base64 encoding of the JSON, without padding.

    Raises
    ------
    EncodeError
        Raised if some claim value cannot be represented in JSON.
    """
    try:
        data = json.dumps(
            dict(claims),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Cannot encode claims as JSON: {e!s}") from e
    return base64url_encode(data.encode())


def decode(segment: str) -> dict[str, Any]:
    """Decode a token segment into a claims mapping.

    Parameters
    ----------
    segment
        URL-safe base64-encoded JSON, with or without padding removed.

    Returns
    -------
    dict of Any
        The decoded claims.

    Raises
    ------
    DecodeError
        Raised if the segment is not valid base64url, does not decode to
        UTF-8 JSON, the JSON is nested too deeply to parse, or the JSON is
        not an object.
    """
    try:
        data = base64url_decode(segment)
    except ValueError as e:
        raise DecodeError(f"Segment is not valid base64url: {e!s}") from e
    try:
        claims = json.loads(data.decode())
    except UnicodeDecodeError as e:
        raise DecodeError("Segment is not valid UTF-8") from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"Segment is not valid JSON: {e!s}") from e
    except RecursionError as e:
        msg = "Segment is not valid JSON: nested too deeply"
        raise DecodeError(msg) from e
    if not isinstance(claims, dict):
        raise DecodeError("Segment is not a JSON object")
    return claims
