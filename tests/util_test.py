"""Tests for the tokensmith.util module."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tokensmith.util import (
    add_padding,
    base64url_decode,
    base64url_encode,
    current_timestamp,
    generate_secret,
    normalize_timedelta,
    to_timestamp,
)

from .support.clock import MockClock


def test_add_padding() -> None:
    assert add_padding("") == ""
    assert add_padding("Zg") == "Zg=="
    assert add_padding("Zgo") == "Zgo="
    assert add_padding("Zm8K") == "Zm8K"
    assert add_padding("Zm9vCg") == "Zm9vCg=="


def test_base64url_encode() -> None:
    assert base64url_encode(b"") == ""
    assert base64url_encode(b"f") == "Zg"
    assert base64url_encode(b"\xfb\xff") == "-_8"
    assert base64url_encode(b"foobar") == "Zm9vYmFy"


def test_base64url_decode() -> None:
    assert base64url_decode("") == b""
    assert base64url_decode("Zg") == b"f"
    assert base64url_decode("-_8") == b"\xfb\xff"

    for bad in ("+/8", "Zg==", "Zm9v YmFy", "Zm9vY", "Zm9v!"):
        with pytest.raises(ValueError):
            base64url_decode(bad)


def test_current_timestamp(clock: MockClock) -> None:
    assert current_timestamp() == clock.timestamp
    clock.advance(30)
    assert current_timestamp() == clock.timestamp


def test_generate_secret() -> None:
    secret = generate_secret()
    assert len(secret) == 43
    assert len(base64url_decode(secret)) == 32
    assert secret != generate_secret()
    assert len(base64url_decode(generate_secret(16))) == 16


def test_normalize_timedelta() -> None:
    assert normalize_timedelta(None) is None
    assert normalize_timedelta(10) == timedelta(seconds=10)
    assert normalize_timedelta(timedelta(hours=1)) == timedelta(hours=1)

    with pytest.raises(ValueError):
        normalize_timedelta("not an int")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        normalize_timedelta(True)


def test_to_timestamp() -> None:
    when = datetime(2026, 1, 1, tzinfo=UTC)
    assert to_timestamp(when) == 1767225600
    assert to_timestamp(when + timedelta(microseconds=500)) == 1767225600
    assert to_timestamp(1767225600) == 1767225600

    with pytest.raises(ValueError):
        to_timestamp(datetime(2026, 1, 1))  # noqa: DTZ001
