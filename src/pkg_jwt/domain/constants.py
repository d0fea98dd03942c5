from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

ALGORITHM = "HS256"
TOKEN_TYPE = "JWT"

MIN_SECRET_LENGTH = 32

DEFAULT_ISSUER = "Core-Issuer"
DEFAULT_SUBJECT = ""
DEFAULT_AUDIENCE: tuple[str, ...] = ("Core-Audience",)

# 15 minutes
DEFAULT_EXPIRATION_SECONDS = 15 * 60


class ErrorKey(str, Enum):
    SECRET_NOT_FOUND = "jwt.error.secret_not_found"
    SECRET_TOO_WEAK = "jwt.error.secret_too_weak"
    EXPIRATION_PASSED = "jwt.error.expiration_passed"
    SIGN_ERROR = "jwt.error.sign_error"
    INVALID_TIME_EXPRESSION = "time_expression.error.invalid"

    TOKEN_EXPIRED = "jwt.error.token_expired"
    CLAIM_VALIDATION_FAILED = "jwt.error.claim_validation_failed"
    INVALID_SIGNATURE = "jwt.error.invalid_signature"
    MALFORMED_TOKEN = "jwt.error.malformed_token"
    VERIFICATION_FAILED = "jwt.error.verification_failed"


class TimeUnit(Enum):
    SECOND = 1
    MINUTE = 60
    HOUR = 60 * 60
    DAY = 60 * 60 * 24
    WEEK = 60 * 60 * 24 * 7
    # 365.25 days, averages out leap years
    YEAR = 60 * 60 * 24 * 365 + 60 * 60 * 6

    @property
    def seconds(self) -> int:
        return self.value


class Direction(str, Enum):
    AGO = "ago"
    FROM_NOW = "from now"


UNIT_ALIASES: Mapping[str, TimeUnit] = MappingProxyType(
    {
        "s": TimeUnit.SECOND,
        "sec": TimeUnit.SECOND,
        "secs": TimeUnit.SECOND,
        "second": TimeUnit.SECOND,
        "seconds": TimeUnit.SECOND,
        "m": TimeUnit.MINUTE,
        "min": TimeUnit.MINUTE,
        "mins": TimeUnit.MINUTE,
        "minute": TimeUnit.MINUTE,
        "minutes": TimeUnit.MINUTE,
        "h": TimeUnit.HOUR,
        "hr": TimeUnit.HOUR,
        "hrs": TimeUnit.HOUR,
        "hour": TimeUnit.HOUR,
        "hours": TimeUnit.HOUR,
        "d": TimeUnit.DAY,
        "day": TimeUnit.DAY,
        "days": TimeUnit.DAY,
        "w": TimeUnit.WEEK,
        "week": TimeUnit.WEEK,
        "weeks": TimeUnit.WEEK,
        "y": TimeUnit.YEAR,
        "yr": TimeUnit.YEAR,
        "yrs": TimeUnit.YEAR,
        "year": TimeUnit.YEAR,
        "years": TimeUnit.YEAR,
    }
)
