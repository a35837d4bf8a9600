"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from safir.logging import LogLevel, Profile, configure_logging

from tokensmith.constants import LOGGER_NAME, SECRET_ENV_VAR
from tokensmith.factory import Factory

from .support.clock import MockClock
from .support.constants import TEST_NOW


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any tokensmith settings from the environment."""
    monkeypatch.delenv(SECRET_ENV_VAR, raising=False)
    for name in (
        "ISSUER",
        "LEEWAY",
        "LIFETIME",
        "LOG_LEVEL",
        "MINIMUM_SECRET_LENGTH",
        "PROFILE",
    ):
        monkeypatch.delenv(f"TOKENSMITH_{name}", raising=False)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> MockClock:
    """Freeze the current time seen by tokensmith at `TEST_NOW`."""
    mock_clock = MockClock(TEST_NOW)
    monkeypatch.setattr("tokensmith.util.current_datetime", mock_clock)
    return mock_clock


@pytest.fixture
def factory() -> Factory:
    """Return a component factory with the default configuration."""
    return Factory()


@pytest.fixture
def json_logging() -> Iterator[None]:
    """Configure tokensmith to log JSON at debug level."""
    configure_logging(
        name=LOGGER_NAME, profile=Profile.production, log_level=LogLevel.DEBUG
    )
    yield
    configure_logging(
        name=LOGGER_NAME,
        profile=Profile.development,
        log_level=LogLevel.WARNING,
    )
