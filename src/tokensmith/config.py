"""Configuration for tokensmith.

tokensmith has two configuration containers: `Config` and
`~tokensmith.settings.Settings`. Config, defined here, is the policy used by
the builder, parser and validator. It has safe defaults and library callers
normally never construct one. Settings is the model for the environment
variables read by the command-line interface, and is converted to Config for
use by the library.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_LIFETIME, LOGGER_NAME, MINIMUM_SECRET_LENGTH
from .util import normalize_timedelta

__all__ = ["Config"]


class Config(BaseModel):
    """Token policy shared by all components created by a factory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum_secret_length: int = Field(
        MINIMUM_SECRET_LENGTH,
        title="Minimum secret length",
        description=(
            "Shortest signing secret the builder will accept. An empty secret"
            " is always rejected."
        ),
        ge=1,
    )

    lifetime: timedelta = Field(
        DEFAULT_LIFETIME,
        title="Default token lifetime",
        description=(
            "Used by the command-line interface when no lifetime is given"
        ),
    )

    leeway: timedelta = Field(
        timedelta(seconds=0),
        title="Clock leeway",
        description=(
            "Allowed clock skew when checking the expiration and not-before"
            " claims"
        ),
    )

    issuer: str | None = Field(
        None,
        title="Default issuer",
        description=(
            "iss claim for tokens created by the command-line interface"
        ),
    )

    logger_name: str = Field(LOGGER_NAME, title="Name of the logger")

    _normalize_offsets = field_validator("lifetime", "leeway", mode="before")(
        normalize_timedelta
    )

    @field_validator("lifetime", "leeway")
    @classmethod
    def _validate_offset(cls, v: timedelta) -> timedelta:
        if v < timedelta(seconds=0):
            raise ValueError("must not be negative")
        return v
