from __future__ import annotations

import os
from typing import Union

from ..domain.constants import DEFAULT_EXPIRATION_SECONDS
from ..domain.exceptions import SecretNotFoundError
from .settings import TokenSettings


def settings_from_env() -> TokenSettings:
    """
    Build TokenSettings from the process environment:

        JWT_SECRET      required
        JWT_ISSUER      optional
        JWT_AUDIENCE    optional, comma separated
        JWT_EXPIRATION  optional, seconds ("3600") or a human expression ("1 hour")

    Raises:
        SecretNotFoundError if JWT_SECRET is missing or empty.
    """
    def _split_csv(key: str) -> list[str]:
        raw = os.getenv(key)
        if not raw:
            return []
        return [x.strip() for x in raw.split(",") if x and x.strip()]

    def _expiration(key: str) -> Union[int, str]:
        raw = (os.getenv(key) or "").strip()
        if not raw:
            return DEFAULT_EXPIRATION_SECONDS
        try:
            return int(raw)
        except ValueError:
            return raw

    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise SecretNotFoundError("Missing token settings: JWT_SECRET")

    return TokenSettings(
        secret=secret,
        issuer=os.getenv("JWT_ISSUER") or None,
        audience=_split_csv("JWT_AUDIENCE"),
        expiration=_expiration("JWT_EXPIRATION"),
    )
