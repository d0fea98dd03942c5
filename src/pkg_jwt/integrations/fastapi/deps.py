from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import (
    DEFAULT_COOKIE_NAME,
    bearer_challenge,
    bearer_scheme,
    extract_token_from_request,
)
from ..common.token_service import TokenService
from ...domain.entities import VerifiedToken
from ...domain.exceptions import JWTError, TokenVerificationError


def to_http_exception(exc: JWTError) -> HTTPException:
    """Translate a pkg_jwt error into an HTTPException carrying its key."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = bearer_challenge("invalid_token")
    return HTTPException(
        status_code=exc.status_code,
        detail=exc.key.value,
        headers=headers,
    )


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_jwt.

    Built on top of the framework-agnostic TokenService facade.
    """

    service: TokenService
    cookie_name: str = DEFAULT_COOKIE_NAME

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_current_token(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> VerifiedToken:
        """Dependency: Require a valid token."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        try:
            return self.service.verify(token)
        except JWTError as exc:
            raise to_http_exception(exc) from exc

    async def get_optional_token(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> VerifiedToken | None:
        """Dependency: Optional authentication."""
        try:
            token = extract_token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            # no token anywhere -> anonymous
            return None

        try:
            return self.service.verify(token)
        except TokenVerificationError:
            # bad token -> treat as anonymous
            return None

    # ------------------------------------------------------------------ #
    # Claim dependency factories
    # ------------------------------------------------------------------ #

    def require_claims(self, **expected: Any) -> Callable:
        """
        Dependency factory: every given claim must be present with the
        given value (list-valued claims must contain it).
        """

        async def dependency(
                verified: VerifiedToken = Depends(self.get_current_token),
        ) -> VerifiedToken:
            for name, value in expected.items():
                actual = verified.payload.get(name)
                if actual == value:
                    continue
                if isinstance(actual, list) and value in actual:
                    continue
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Missing required claim: {name}",
                )
            return verified

        return dependency


"""

from fastapi import Depends, FastAPI
from pkg_jwt import VerifiedToken
from pkg_jwt.integrations.fastapi import create_fastapi_auth

token_auth = create_fastapi_auth(secret=settings.JWT_SECRET, issuer="my-service")

app = FastAPI()

@app.get("/me")
async def me(token: VerifiedToken = Depends(token_auth.get_current_token)):
    return {"sub": token.subject}

@app.get("/admin")
async def admin(token: VerifiedToken = Depends(token_auth.require_claims(role="admin"))):
    ...

"""
