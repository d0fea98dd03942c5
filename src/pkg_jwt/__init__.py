"""
pkg_jwt

Shared-secret (HS256) token issuance and verification core, plus a
parser for human time expressions ("2 hours", "30 mins ago").
Framework integrations (FastAPI) live under `pkg_jwt.integrations`.
"""

__version__ = "0.1.0"

from .domain.constants import (
    ALGORITHM,
    DEFAULT_AUDIENCE,
    DEFAULT_EXPIRATION_SECONDS,
    DEFAULT_ISSUER,
    MIN_SECRET_LENGTH,
    Direction,
    ErrorKey,
    TimeUnit,
)
from .domain.entities import VerifiedToken
from .domain.exceptions import (
    JWTError,
    SecretNotFoundError,
    SecretTooWeakError,
    InvalidTimeExpressionError,
    ExpirationInPastError,
    SignFailureError,
    TokenVerificationError,
    TokenExpiredError,
    ClaimValidationError,
    InvalidSignatureError,
    MalformedTokenError,
    VerificationFailedError,
)
from .domain.value_objects import (
    AbsoluteInstant,
    HumanExpression,
    ParsedTimeExpression,
    RelativeSeconds,
    VerifyOptions,
    expiration_spec_from,
)
from .domain.ports import TokenCodec

from .application.time_expression import parse_human_time, parse_time_expression
from .application.use_cases.sign import SignTokenUseCase, resolve_expiration
from .application.use_cases.verify import VerifyTokenUseCase

from .adapters.pyjwt.codec import PyJWTCodec

from .config import TokenSettings, settings_from_env
from .integrations.common.token_service import (
    TokenService,
    create_token_service,
    create_token_service_from_env,
)
from .tokens import sign_token, verify_token

__all__ = [
    "__version__",
    # constants
    "ALGORITHM",
    "DEFAULT_AUDIENCE",
    "DEFAULT_EXPIRATION_SECONDS",
    "DEFAULT_ISSUER",
    "MIN_SECRET_LENGTH",
    "Direction",
    "ErrorKey",
    "TimeUnit",
    # domain core
    "VerifiedToken",
    "AbsoluteInstant",
    "HumanExpression",
    "ParsedTimeExpression",
    "RelativeSeconds",
    "VerifyOptions",
    "expiration_spec_from",
    "TokenCodec",
    # exceptions
    "JWTError",
    "SecretNotFoundError",
    "SecretTooWeakError",
    "InvalidTimeExpressionError",
    "ExpirationInPastError",
    "SignFailureError",
    "TokenVerificationError",
    "TokenExpiredError",
    "ClaimValidationError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "VerificationFailedError",
    # parser + use cases
    "parse_human_time",
    "parse_time_expression",
    "resolve_expiration",
    "SignTokenUseCase",
    "VerifyTokenUseCase",
    # adapters
    "PyJWTCodec",
    # config + facade
    "TokenSettings",
    "settings_from_env",
    "TokenService",
    "create_token_service",
    "create_token_service_from_env",
    "sign_token",
    "verify_token",
]
