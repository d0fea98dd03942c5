"""
Module-level convenience API backed by the PyJWT codec.

    token = sign_token(secret, {"sub": "user-1"}, "2 hours")
    verified = verify_token(token, secret, VerifyOptions(issuer="Core-Issuer"))
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .adapters.pyjwt.codec import PyJWTCodec
from .application.use_cases.sign import SignTokenUseCase
from .application.use_cases.verify import VerifyTokenUseCase
from .domain.constants import DEFAULT_EXPIRATION_SECONDS
from .domain.entities import VerifiedToken
from .domain.value_objects import ExpirationInput, VerifyOptions

_codec = PyJWTCodec()
_signer = SignTokenUseCase(codec=_codec)
_verifier = VerifyTokenUseCase(codec=_codec)


def sign_token(
        secret: Union[str, bytes],
        claims: Optional[Mapping[str, Any]] = None,
        expiration: ExpirationInput = DEFAULT_EXPIRATION_SECONDS,
) -> str:
    """Sign `claims` and return a three-segment HS256 token."""
    return _signer.execute(secret, claims, expiration)


def verify_token(
        token: str,
        secret: Union[str, bytes],
        options: Optional[VerifyOptions] = None,
) -> VerifiedToken:
    """Verify `token` and return its payload and header (or raise)."""
    return _verifier.execute(token, secret, options)
