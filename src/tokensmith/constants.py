"""Constants for tokensmith."""

from datetime import timedelta

__all__ = [
    "ALGORITHM",
    "DEFAULT_LIFETIME",
    "LOGGER_NAME",
    "MINIMUM_SECRET_LENGTH",
    "SECRET_ENV_VAR",
    "TOKEN_TYPE",
]

ALGORITHM = "HS256"
"""JWT algorithm used for all tokens."""

TOKEN_TYPE = "JWT"
"""Value of the ``typ`` header claim."""

MINIMUM_SECRET_LENGTH = 12
"""Default minimum length of the shared signing secret."""

DEFAULT_LIFETIME = timedelta(minutes=15)
"""Lifetime of tokens created by the command-line interface by default."""

LOGGER_NAME = "tokensmith"
"""Name of the structlog logger used by all components."""

SECRET_ENV_VAR = "TOKENSMITH_SECRET"
"""Environment variable holding the signing secret for the CLI."""
