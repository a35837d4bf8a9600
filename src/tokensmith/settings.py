"""Environment settings for the tokensmith command-line interface.

The library never reads the environment. The command-line interface parses
``TOKENSMITH_*`` environment variables into `Settings` and then converts them
into a `~tokensmith.config.Config` for the components it creates.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from safir.logging import LogLevel, Profile, configure_logging
from safir.pydantic import HumanTimedelta

from .config import Config
from .constants import DEFAULT_LIFETIME, LOGGER_NAME, MINIMUM_SECRET_LENGTH

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Settings for the command-line interface."""

    model_config = SettingsConfigDict(
        env_prefix="TOKENSMITH_", extra="forbid"
    )

    secret: SecretStr | None = Field(
        None,
        title="Signing secret",
        description="Shared HMAC-SHA256 secret for creating and validating",
    )

    issuer: str | None = Field(
        None,
        title="Issuer",
        description="iss claim to add to created tokens",
    )

    lifetime: HumanTimedelta = Field(
        DEFAULT_LIFETIME,
        title="Token lifetime",
        description="Lifetime of created tokens, such as ``20s`` or ``1h``",
    )

    leeway: HumanTimedelta = Field(
        timedelta(seconds=0),
        title="Clock leeway",
        description="Allowed clock skew when validating tokens",
    )

    minimum_secret_length: int = Field(
        MINIMUM_SECRET_LENGTH,
        title="Minimum secret length",
        ge=1,
    )

    log_level: LogLevel = Field(
        LogLevel.WARNING,
        title="Logging level",
        description="Python logging level",
    )

    profile: Profile = Field(
        Profile.development,
        title="Logging profile",
        description="Use ``production`` for JSON log output",
    )

    def configure_logging(self) -> None:
        """Configure logging based on the settings."""
        configure_logging(
            name=LOGGER_NAME, profile=self.profile, log_level=self.log_level
        )

    def to_config(self) -> Config:
        """Convert the settings to the configuration used by the library.

        Returns
        -------
        Config
            Token policy corresponding to these settings.
        """
        return Config(
            minimum_secret_length=self.minimum_secret_length,
            lifetime=self.lifetime,
            leeway=self.leeway,
            issuer=self.issuer,
        )
