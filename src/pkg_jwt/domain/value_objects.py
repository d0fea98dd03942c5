# src/pkg_jwt/domain/value_objects.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Tuple, Union

from .constants import Direction, TimeUnit
from .exceptions import InvalidTimeExpressionError


# --- Expiration ------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RelativeSeconds:
    """Offset in seconds from the signing instant."""
    seconds: Union[int, float]

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool):
            raise TypeError("Expiration must not be a bool")
        if isinstance(self.seconds, float) and not math.isfinite(self.seconds):
            raise TypeError(f"Expiration must be a finite number, got {self.seconds!r}")


@dataclass(frozen=True, slots=True)
class AbsoluteInstant:
    """
    A fixed point in time.

    Naive datetimes are interpreted as UTC.
    """
    at: datetime


@dataclass(frozen=True, slots=True)
class HumanExpression:
    """A human time expression such as "2 hours" or "+30 minutes"."""
    text: str


ExpirationSpec = Union[RelativeSeconds, AbsoluteInstant, HumanExpression]

ExpirationInput = Union[int, float, timedelta, datetime, str, RelativeSeconds, AbsoluteInstant, HumanExpression]


def expiration_spec_from(value: ExpirationInput) -> ExpirationSpec:
    """
    Normalize raw caller input into an ExpirationSpec.

        int / float  -> RelativeSeconds
        timedelta    -> RelativeSeconds
        datetime     -> AbsoluteInstant
        str          -> HumanExpression
    """
    if isinstance(value, (RelativeSeconds, AbsoluteInstant, HumanExpression)):
        return value
    # bool is an int subclass, but True/False as an expiration is a bug
    if isinstance(value, bool):
        raise TypeError("Expiration must not be a bool")
    if isinstance(value, (int, float)):
        return RelativeSeconds(value)
    if isinstance(value, timedelta):
        return RelativeSeconds(value.total_seconds())
    if isinstance(value, datetime):
        return AbsoluteInstant(value)
    if isinstance(value, str):
        return HumanExpression(value)
    raise TypeError(f"Unsupported expiration type: {type(value).__name__}")


# --- Time expressions ------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParsedTimeExpression:
    """
    Structured form of a single-term human time expression.

    - sign:      "+", "-" or None when no sign was written
    - magnitude: non-negative decimal value
    - unit:      TimeUnit
    - direction: Direction.AGO, Direction.FROM_NOW or None

    A sign and a direction keyword together is an over-specification
    and is rejected.
    """

    sign: Optional[str]
    magnitude: Decimal
    unit: TimeUnit
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        if self.sign is not None and self.direction is not None:
            raise InvalidTimeExpressionError(
                "Time expression cannot combine a sign with a direction"
            )
        if self.sign not in (None, "+", "-"):
            raise InvalidTimeExpressionError(f"Invalid sign: {self.sign!r}")
        if self.magnitude < 0:
            raise InvalidTimeExpressionError("Magnitude must be non-negative")

    @property
    def is_past(self) -> bool:
        return self.sign == "-" or self.direction is Direction.AGO

    @property
    def seconds(self) -> int:
        total = (self.magnitude * self.unit.seconds).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return -int(total) if self.is_past else int(total)


# --- Verification ----------------------------------------------------------


def _normalize(values: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalize an iterable of strings into a tuple.
    If a plain string is passed, treat it as a single-element collection.
    """
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class VerifyOptions:
    """
    Extra claim constraints enforced on top of signature and time checks.

    - issuer:   decoded `iss` must equal it exactly
    - audience: decoded `aud` must equal or contain one of these values
    """

    issuer: Optional[str] = None
    audience: Tuple[str, ...] = ()

    def __init__(
            self,
            issuer: Optional[str] = None,
            audience: Iterable[str] | None = None,
    ) -> None:
        object.__setattr__(self, "issuer", issuer)
        object.__setattr__(self, "audience", _normalize(audience or ()))
