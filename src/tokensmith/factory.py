"""Create tokensmith components."""

from __future__ import annotations

from typing import Self

import structlog
from structlog.stdlib import BoundLogger

from .builder import TokenBuilder
from .config import Config
from .parser import TokenParser
from .settings import Settings
from .validator import TokenValidator

__all__ = ["Factory"]


class Factory:
    """Build tokensmith components.

    Every component created by the same factory shares its configuration and
    logger. Components are cheap and hold per-token state, so a new one is
    created for each call.

    Parameters
    ----------
    config
        Token policy. Defaults are used if not given.
    logger
        Logger to use. Defaults to the logger named in the configuration.
    """

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Create a factory from command-line interface settings.

        Parameters
        ----------
        settings
            Settings parsed from the environment.

        Returns
        -------
        Factory
            Newly-created factory.
        """
        return cls(settings.to_config())

    def __init__(
        self, config: Config | None = None, logger: BoundLogger | None = None
    ) -> None:
        self._config = config or Config()
        self._logger = logger or structlog.get_logger(self._config.logger_name)

    @property
    def config(self) -> Config:
        """Configuration shared by the created components."""
        return self._config

    def create_token_builder(self) -> TokenBuilder:
        """Create a new, empty token builder."""
        return TokenBuilder(self._config, self._logger)

    def create_token_parser(self) -> TokenParser:
        """Create a new token parser."""
        return TokenParser(self._config, self._logger)

    def create_token_validator(self) -> TokenValidator:
        """Create a new token validator."""
        return TokenValidator(self._config, self._logger)
