from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from ...adapters.pyjwt.codec import PyJWTCodec
from ...application.use_cases.sign import SignTokenUseCase
from ...application.use_cases.verify import VerifyTokenUseCase
from ...config.env import settings_from_env
from ...config.settings import TokenSettings
from ...domain.entities import VerifiedToken
from ...domain.ports import TokenCodec
from ...domain.value_objects import ExpirationInput, VerifyOptions


@dataclass(slots=True)
class TokenService:
    """
    Framework-agnostic token facade bound to one service's settings.

    Integrations (FastAPI, CLI, etc.) adapt this to their own
    dependency / command systems.
    """

    sign_use_case: SignTokenUseCase
    verify_use_case: VerifyTokenUseCase
    settings: TokenSettings

    # --- Core operations --------------------------------------------------

    def sign(
            self,
            claims: Optional[Mapping[str, Any]] = None,
            expiration: Optional[ExpirationInput] = None,
    ) -> str:
        """Claims -> token, with the configured issuer / audience applied."""
        merged: dict[str, Any] = {}
        if self.settings.issuer:
            merged["iss"] = self.settings.issuer
        if self.settings.audience:
            merged["aud"] = list(self.settings.audience)
        merged.update(claims or {})

        return self.sign_use_case.execute(
            self.settings.secret,
            merged,
            self.settings.expiration if expiration is None else expiration,
        )

    def verify(self, token: str, options: Optional[VerifyOptions] = None) -> VerifiedToken:
        """Token -> VerifiedToken (or raise verification errors)."""
        return self.verify_use_case.execute(
            token,
            self.settings.secret,
            options or self.default_verify_options(),
        )

    def default_verify_options(self) -> VerifyOptions:
        return VerifyOptions(
            issuer=self.settings.issuer,
            audience=self.settings.audience,
        )


def create_token_service(
        *,
        secret: str,
        issuer: str | None = None,
        audience: Iterable[str] | str | None = None,
        expiration: ExpirationInput | None = None,
        codec: TokenCodec | None = None,
) -> TokenService:
    """
    High-level factory: explicit config -> TokenService.

    - builds a PyJWTCodec (unless one is given)
    - wires SignTokenUseCase + VerifyTokenUseCase
    - returns a TokenService facade.
    """
    if isinstance(audience, str):
        audience = [audience]

    settings = TokenSettings(secret=secret, issuer=issuer, audience=list(audience or []))
    if expiration is not None:
        settings.expiration = expiration

    return _build(settings, codec)


def create_token_service_from_env(codec: TokenCodec | None = None) -> TokenService:
    """Same as create_token_service, configured from JWT_* env vars."""
    return _build(settings_from_env(), codec)


def _build(settings: TokenSettings, codec: TokenCodec | None) -> TokenService:
    codec = codec or PyJWTCodec()
    return TokenService(
        sign_use_case=SignTokenUseCase(codec=codec),
        verify_use_case=VerifyTokenUseCase(codec=codec),
        settings=settings,
    )
