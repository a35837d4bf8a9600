"""Tests for the tokensmith.encoder module."""

from __future__ import annotations

import pytest

from tokensmith.encoder import decode, encode
from tokensmith.exceptions import DecodeError, EncodeError
from tokensmith.util import base64url_encode

from .support.constants import JWT_IO_TOKEN


def test_encode() -> None:
    header_segment, payload_segment, _ = JWT_IO_TOKEN.split(".")
    assert encode({"alg": "HS256", "typ": "JWT"}) == header_segment
    payload = {"sub": "1234567890", "name": "John Doe", "iat": 1516239022}
    assert encode(payload) == payload_segment


def test_encode_order() -> None:
    first = encode({"a": 1, "b": 2})
    second = encode({"b": 2, "a": 1})
    assert first != second
    assert decode(first) == decode(second)
    assert encode({"a": 1, "b": 2}) == first


def test_encode_values() -> None:
    claims = {"aud": ["a", "b"], "name": "Zoë", "exp": 0}
    segment = encode(claims)
    assert "=" not in segment
    assert "+" not in segment
    assert "/" not in segment
    assert decode(segment) == claims


def test_encode_invalid() -> None:
    with pytest.raises(EncodeError):
        encode({"key": object()})
    with pytest.raises(EncodeError):
        encode({"key": float("nan")})


def test_decode() -> None:
    _, payload_segment, _ = JWT_IO_TOKEN.split(".")
    assert decode(payload_segment) == {
        "sub": "1234567890",
        "name": "John Doe",
        "iat": 1516239022,
    }
    assert decode(base64url_encode(b"{}")) == {}


def test_decode_invalid() -> None:
    bad_segments = [
        "!!!!",
        "eyJ",
        "eyJhIjoxfQ==",
        base64url_encode(b"not json"),
        base64url_encode(b"[1, 2, 3]"),
        base64url_encode(b'"string"'),
        base64url_encode(b"\xff\xfe"),
        "",
    ]
    for segment in bad_segments:
        with pytest.raises(DecodeError):
            decode(segment)


def test_decode_deeply_nested() -> None:
    nested = b'{"a":' + b"[" * 200000 + b"]" * 200000 + b"}"
    with pytest.raises(DecodeError, match="nested too deeply"):
        decode(base64url_encode(nested))
