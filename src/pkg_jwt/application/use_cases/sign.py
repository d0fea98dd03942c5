from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from datetime import timezone
from typing import Any, Callable, Dict, Mapping, Optional, Union
from uuid import uuid4

from ...domain.constants import (
    ALGORITHM,
    DEFAULT_AUDIENCE,
    DEFAULT_EXPIRATION_SECONDS,
    DEFAULT_ISSUER,
    DEFAULT_SUBJECT,
    MIN_SECRET_LENGTH,
    TOKEN_TYPE,
)
from ...domain.exceptions import (
    ExpirationInPastError,
    SecretTooWeakError,
    SignFailureError,
)
from ...domain.ports import TokenCodec
from ...domain.value_objects import (
    AbsoluteInstant,
    ExpirationInput,
    ExpirationSpec,
    HumanExpression,
    RelativeSeconds,
    expiration_spec_from,
)
from ..time_expression import parse_human_time

logger = logging.getLogger(__name__)

Secret = Union[str, bytes]


def ensure_secret_strength(secret: Optional[Secret]) -> bytes:
    """
    Check the secret against MIN_SECRET_LENGTH and return it as raw bytes.

    Raises:
        SecretTooWeakError
    """
    if not secret or len(secret) < MIN_SECRET_LENGTH:
        raise SecretTooWeakError(
            f"Secret must be at least {MIN_SECRET_LENGTH} characters long"
        )
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def resolve_expiration(spec: ExpirationSpec, now: int) -> int:
    """
    Resolve an ExpirationSpec to absolute Unix seconds, relative to `now`.

    Raises:
        InvalidTimeExpressionError
    """
    if isinstance(spec, RelativeSeconds):
        return now + math.floor(spec.seconds)
    if isinstance(spec, AbsoluteInstant):
        at = spec.at
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        return math.floor(at.timestamp())
    if isinstance(spec, HumanExpression):
        return now + parse_human_time(spec.text)
    raise TypeError(f"Unsupported expiration spec: {type(spec).__name__}")


def build_claims(
        claims: Optional[Mapping[str, Any]],
        *,
        now: int,
        exp: int,
) -> Dict[str, Any]:
    """
    Defaults -> caller claims (shallow merge) -> resolved `exp`.

    The caller mapping is never mutated. `sub` and `jti` must stay
    strings, verifiers reject anything else.
    """
    payload: Dict[str, Any] = {
        "iss": DEFAULT_ISSUER,
        "sub": DEFAULT_SUBJECT,
        "aud": list(DEFAULT_AUDIENCE),
        "jti": str(uuid4()),
        "nbf": now,
        "iat": now,
    }
    payload.update(claims or {})
    payload["exp"] = exp

    for name in ("sub", "jti"):
        if not isinstance(payload[name], str):
            raise TypeError(f"Claim {name!r} must be a string, got {type(payload[name]).__name__}")
    return payload


@dataclass(slots=True)
class SignTokenUseCase:
    """
    Application use case:
    - Gate the secret strength
    - Resolve the expiration (seconds / datetime / human expression)
    - Assemble default + caller claims
    - Sign via TokenCodec port

    Framework-agnostic; the codec decides the wire format.
    """

    codec: TokenCodec
    clock: Callable[[], float] = field(default=time.time)

    def execute(
            self,
            secret: Secret,
            claims: Optional[Mapping[str, Any]] = None,
            expiration: ExpirationInput = DEFAULT_EXPIRATION_SECONDS,
    ) -> str:
        """
        Sign `claims` with `secret` and return the compact token.

        Raises:
            SecretTooWeakError
            InvalidTimeExpressionError
            ExpirationInPastError
            SignFailureError
            TypeError for an unsupported expiration or a non-string sub / jti
        """
        key = ensure_secret_strength(secret)

        now = math.floor(self.clock())
        exp = resolve_expiration(expiration_spec_from(expiration), now)
        if exp <= now:
            raise ExpirationInPastError(
                f"Expiration {exp} is not after the current time {now}"
            )

        payload = build_claims(claims, now=now, exp=exp)
        headers = {"alg": ALGORITHM, "typ": TOKEN_TYPE}

        try:
            token = self.codec.encode(payload, key, headers)
        except Exception as exc:
            logger.exception("Token signing failed (jti=%s)", payload.get("jti"))
            raise SignFailureError(f"Token signing failed: {exc}") from exc

        logger.debug("Signed token jti=%s exp=%s", payload.get("jti"), exp)
        return token
