"""Create and validate HMAC-SHA256 JSON Web Tokens."""

from .builder import TokenBuilder
from .config import Config
from .exceptions import (
    BuildError,
    DecodeError,
    EncodeError,
    ExpiredError,
    InvalidAudienceError,
    InvalidClaimError,
    NotYetValidError,
    ParseError,
    SignatureMismatchError,
    StructureError,
    TokenError,
    UnsupportedAlgorithmError,
    ValidateError,
)
from .factory import Factory
from .models.token import Jwt, Parsed
from .parser import TokenParser
from .tokens import build_token, validate_token
from .validator import TokenValidator

__all__ = [
    "BuildError",
    "Config",
    "DecodeError",
    "EncodeError",
    "ExpiredError",
    "Factory",
    "InvalidAudienceError",
    "InvalidClaimError",
    "Jwt",
    "NotYetValidError",
    "ParseError",
    "Parsed",
    "SignatureMismatchError",
    "StructureError",
    "TokenBuilder",
    "TokenError",
    "TokenParser",
    "TokenValidator",
    "UnsupportedAlgorithmError",
    "ValidateError",
    "build_token",
    "validate_token",
]
