from __future__ import annotations

from typing import Optional

from .constants import ErrorKey


class JWTError(Exception):
    """
    Base class for every failure raised by pkg_jwt.

    `key` is a stable, namespaced identifier (safe for i18n lookups),
    `status_code` is an HTTP-class hint for integrations.
    """

    key: ErrorKey = ErrorKey.VERIFICATION_FAILED
    status_code: int = 500

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.key.value)
        self.message = message or self.key.value

    def __str__(self) -> str:
        return self.message


class SecretNotFoundError(JWTError):
    """Raised when no signing secret is configured."""
    key = ErrorKey.SECRET_NOT_FOUND
    status_code = 500


class SecretTooWeakError(JWTError):
    """Raised when the secret is shorter than MIN_SECRET_LENGTH."""
    key = ErrorKey.SECRET_TOO_WEAK
    status_code = 500


class InvalidTimeExpressionError(JWTError, ValueError):
    """Raised when a human time expression cannot be parsed."""
    key = ErrorKey.INVALID_TIME_EXPRESSION
    status_code = 400


class ExpirationInPastError(JWTError):
    """Raised when the resolved expiration is not in the future."""
    key = ErrorKey.EXPIRATION_PASSED
    status_code = 400


class SignFailureError(JWTError):
    """Raised when the token codec fails while signing."""
    key = ErrorKey.SIGN_ERROR
    status_code = 500


# --- Verification ---------------------------------------------------------


class TokenVerificationError(JWTError):
    """Base class for all verification failures."""
    key = ErrorKey.VERIFICATION_FAILED
    status_code = 401


class TokenExpiredError(TokenVerificationError):
    """Raised when token has expired."""
    key = ErrorKey.TOKEN_EXPIRED


class ClaimValidationError(TokenVerificationError):
    """Raised when iss / aud / nbf / iat or another registered claim is rejected."""
    key = ErrorKey.CLAIM_VALIDATION_FAILED


class InvalidSignatureError(TokenVerificationError):
    """Raised when the signature does not match the secret."""
    key = ErrorKey.INVALID_SIGNATURE


class MalformedTokenError(TokenVerificationError):
    """Raised when token is structurally broken."""
    key = ErrorKey.MALFORMED_TOKEN


class VerificationFailedError(TokenVerificationError):
    """Catch-all for verification failures without a more specific cause."""
    key = ErrorKey.VERIFICATION_FAILED
