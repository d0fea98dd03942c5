from __future__ import annotations

from typing import Iterable

from .deps import FastAPITokenAuth, to_http_exception
from .security import bearer_challenge, bearer_scheme, extract_token_from_request, parse_authorization_header
from ..common.token_service import TokenService, create_token_service


def create_fastapi_auth(
    *,
    secret: str,
    issuer: str | None = None,
    audience: Iterable[str] | str | None = None,
    cookie_name: str = "access_token",
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates a TokenService from explicit config
    - Wraps it in FastAPITokenAuth, exposing dependencies like:

        token_auth.get_current_token
        token_auth.get_optional_token
        token_auth.require_claims(...)
    """
    service: TokenService = create_token_service(
        secret=secret,
        issuer=issuer,
        audience=audience,
    )
    return FastAPITokenAuth(service=service, cookie_name=cookie_name)


__all__ = [
    "FastAPITokenAuth",
    "bearer_challenge",
    "bearer_scheme",
    "create_fastapi_auth",
    "extract_token_from_request",
    "parse_authorization_header",
    "to_http_exception",
]
