"""Tests for the simple token interface."""

from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from tokensmith import build_token, validate_token
from tokensmith.exceptions import BuildError
from tokensmith.tokens import builder, parser, validator

from .support.clock import MockClock
from .support.constants import TEST_SECRET

# Long enough that PyJWT does not complain about the HMAC key length.
INTEROP_SECRET = "an-interoperability-secret-of-sufficient-length"


def test_build_token(clock: MockClock) -> None:
    token = build_token(42, TEST_SECRET, 20, "trusted-issuer")

    parsed = parser().parse(token)
    assert parsed.header == {"alg": "HS256", "typ": "JWT"}
    assert parsed.payload == {
        "user_id": 42,
        "exp": clock.timestamp + 20,
        "iss": "trusted-issuer",
    }
    assert parsed.issuer == "trusted-issuer"

    assert validate_token(token, TEST_SECRET)
    assert not validate_token(token, "wrong-key")
    assert not validate_token(token, "")
    clock.advance(20)
    assert not validate_token(token, TEST_SECRET)

    token = build_token("rra", TEST_SECRET, timedelta(hours=1), "issuer")
    assert parser().parse(token).get_claim("user_id") == "rra"
    assert validate_token(token, TEST_SECRET)


def test_build_token_errors() -> None:
    with pytest.raises(BuildError):
        build_token(42, "", 20, "trusted-issuer")
    with pytest.raises(BuildError):
        build_token(42, "short", 20, "trusted-issuer")


def test_components(clock: MockClock) -> None:
    token = (
        builder()
        .set_secret(TEST_SECRET)
        .set_subject("user")
        .set_audience(["service"])
        .set_expiration(60)
        .build()
    )
    assert validator().split_token(token).validate_audience("service")
    assert validator().validate(token, TEST_SECRET)
    assert parser().parse(token).audience == ["service"]


def test_pyjwt_decodes() -> None:
    token = build_token(42, INTEROP_SECRET, 60, "trusted-issuer")
    payload = jwt.decode(
        token,
        INTEROP_SECRET,
        algorithms=["HS256"],
        issuer="trusted-issuer",
    )
    assert payload["user_id"] == 42
    assert payload["iss"] == "trusted-issuer"

    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(token, INTEROP_SECRET + "x", algorithms=["HS256"])


def test_pyjwt_encodes() -> None:
    token = jwt.encode(
        {"user_id": 42, "iss": "trusted-issuer", "jti": "abc"},
        INTEROP_SECRET,
        algorithm="HS256",
    )
    assert validate_token(token, INTEROP_SECRET)
    assert not validate_token(token, TEST_SECRET)
    parsed = parser().parse(token)
    assert parsed.jwt_id == "abc"
    assert parsed.get_claim("user_id") == 42

    token = jwt.encode({"user_id": 42}, INTEROP_SECRET, algorithm="HS384")
    assert not validate_token(token, INTEROP_SECRET)
