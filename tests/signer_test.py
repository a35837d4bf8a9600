"""Tests for the tokensmith.signer module."""

from __future__ import annotations

from tokensmith.signer import sign, signatures_match

from .support.constants import JWT_IO_SECRET, JWT_IO_TOKEN, TEST_SECRET


def test_sign() -> None:
    header, payload, signature = JWT_IO_TOKEN.split(".")
    assert sign(header, payload, JWT_IO_SECRET) == signature
    assert sign(header, payload, JWT_IO_SECRET) == signature

    assert sign(header, payload, TEST_SECRET) != signature
    assert sign(payload, header, JWT_IO_SECRET) != signature
    assert len(sign("a", "b", TEST_SECRET)) == 43


def test_signatures_match() -> None:
    _, _, signature = JWT_IO_TOKEN.split(".")
    assert signatures_match(signature, signature)
    assert not signatures_match(signature, signature[:-1])
    assert not signatures_match(signature, signature[:-1] + "x")
    assert not signatures_match(signature, "")
    assert not signatures_match(signature, "ü" * 43)
