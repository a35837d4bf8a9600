"""Command-line interface for creating and checking tokens."""

from __future__ import annotations

import json
import sys

import click
import structlog
from pydantic import ValidationError
from safir.click import display_help

from .constants import LOGGER_NAME, SECRET_ENV_VAR
from .exceptions import TokenError
from .factory import Factory
from .models.token import ClaimValue
from .settings import Settings
from .util import generate_secret

__all__ = [
    "create",
    "generate_secret_command",
    "help",
    "inspect",
    "main",
    "validate",
]

_SECRET_OPTION = click.option(
    "--secret",
    default=None,
    help=f"Signing secret (default: ${SECRET_ENV_VAR}).",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Create and validate HMAC-SHA256 JSON Web Tokens."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.option("--user-id", required=True, help="Value of the user_id claim.")
@click.option("--issuer", default=None, help="Value of the iss claim.")
@click.option(
    "--lifetime",
    default=None,
    help="Token lifetime, such as 20s, 5m, or 1h.",
)
@click.option(
    "--claim",
    "claims",
    multiple=True,
    metavar="KEY=VALUE",
    help="Additional payload claim. May be given more than once.",
)
@_SECRET_OPTION
def create(
    *,
    user_id: str,
    issuer: str | None,
    lifetime: str | None,
    claims: tuple[str, ...],
    secret: str | None,
) -> None:
    """Create a new signed token.

    Numeric user IDs are stored as integers, anything else as a string.
    """
    settings = _load_settings(secret=secret, issuer=issuer, lifetime=lifetime)
    factory = Factory.from_settings(settings)
    builder = factory.create_token_builder()
    builder.add_payload("user_id", _parse_user_id(user_id))
    for key, value in (_parse_claim(c) for c in claims):
        builder.add_payload(key, value)
    builder.set_secret(_get_secret(settings))
    builder.set_issued_at().set_expiration(factory.config.lifetime)
    if factory.config.issuer:
        builder.set_issuer(factory.config.issuer)
    try:
        token = builder.build()
    except TokenError as e:
        raise click.ClickException(str(e)) from e
    sys.stdout.write(token + "\n")


@main.command(name="generate-secret")
def generate_secret_command() -> None:
    """Generate a new random signing secret."""
    sys.stdout.write(generate_secret() + "\n")


@main.command()
@click.argument("token")
def inspect(token: str) -> None:
    """Show the header and payload of a token without validating it."""
    settings = _load_settings()
    parser = Factory.from_settings(settings).create_token_parser()
    try:
        parsed = parser.parse(token)
    except TokenError as e:
        raise click.ClickException(str(e)) from e
    output = parsed.model_dump(include={"header", "payload"})
    sys.stdout.write(json.dumps(output, indent=2, ensure_ascii=False) + "\n")


@main.command()
@click.argument("token")
@click.option(
    "--audience", default=None, help="Also require this aud claim value."
)
@_SECRET_OPTION
def validate(*, token: str, audience: str | None, secret: str | None) -> None:
    """Check the algorithm, time claims, and signature of a token.

    Exits with status 1 and prints the reason if the token is not valid.
    """
    settings = _load_settings(secret=secret)
    validator = Factory.from_settings(settings).create_token_validator()
    try:
        validator.split_token(token)
        validator.validate_algorithm()
        validator.validate_expiration()
        validator.validate_not_before()
        validator.validate_signature(_get_secret(settings))
        if audience:
            validator.validate_audience(audience)
    except TokenError as e:
        sys.stdout.write(f"invalid ({e.error}): {e!s}\n")
        sys.exit(1)
    sys.stdout.write("valid\n")


def _get_secret(settings: Settings) -> str:
    if not settings.secret:
        msg = f"No signing secret given (use --secret or ${SECRET_ENV_VAR})"
        raise click.UsageError(msg)
    return settings.secret.get_secret_value()


def _load_settings(**overrides: str | None) -> Settings:
    """Load settings from the environment, applying command-line options.

    Options that were not given on the command line are omitted so that they
    do not override the environment.
    """
    kwargs = {k: v for k, v in overrides.items() if v is not None}
    try:
        settings = Settings(**kwargs)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e
    settings.configure_logging()
    logger = structlog.get_logger(LOGGER_NAME)
    logger.debug("Loaded settings", options=sorted(kwargs))
    return settings


def _parse_claim(claim: str) -> tuple[str, str]:
    key, sep, value = claim.partition("=")
    if not sep or not key:
        msg = f"Claim {claim!r} is not of the form KEY=VALUE"
        raise click.BadParameter(msg, param_hint="--claim")
    return key, value


def _parse_user_id(user_id: str) -> ClaimValue:
    return int(user_id) if user_id.isdigit() else user_id
