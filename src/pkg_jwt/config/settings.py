from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.constants import DEFAULT_EXPIRATION_SECONDS
from ..domain.value_objects import ExpirationInput


@dataclass(slots=True)
class TokenSettings:
    """
    Signing / verification settings for a service.

    Host code decides how to construct this (env, config file, etc.).
    `issuer` and `audience` are optional: when unset, the built-in claim
    defaults apply and verification does not constrain them.
    """
    secret: str
    issuer: Optional[str] = None
    audience: List[str] = field(default_factory=list)
    expiration: ExpirationInput = DEFAULT_EXPIRATION_SECONDS

    def __repr__(self) -> str:
        return (
            f"TokenSettings(secret='***', issuer={self.issuer!r}, "
            f"audience={self.audience!r}, expiration={self.expiration!r})"
        )
