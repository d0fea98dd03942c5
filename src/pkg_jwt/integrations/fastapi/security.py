from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# OpenAPI security scheme; a missing or non-Bearer header yields None
bearer_scheme = HTTPBearer(auto_error=False)

BEARER = "bearer"
DEFAULT_COOKIE_NAME = "access_token"


def bearer_challenge(error: Optional[str] = None) -> dict[str, str]:
    """`WWW-Authenticate` header for 401 responses (RFC 6750 section 3)."""
    if error:
        return {"WWW-Authenticate": f'Bearer error="{error}"'}
    return {"WWW-Authenticate": "Bearer"}


def unauthorized(detail: str = "Not authenticated", error: Optional[str] = None) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers=bearer_challenge(error),
    )


def parse_authorization_header(value: Optional[str]) -> Optional[str]:
    """
    Return the token of a `Bearer <token>` header.

    The scheme is case-insensitive. An absent or blank header gives None
    so callers can fall back to other sources; any other scheme, or a
    Bearer header without a token, is rejected with 401.
    """
    if not value or not value.strip():
        return None

    scheme, _, token = value.strip().partition(" ")
    if scheme.lower() != BEARER:
        raise unauthorized(f"Unsupported authorization scheme: {scheme}", "invalid_request")

    token = token.strip()
    if not token:
        raise unauthorized("Empty bearer token", "invalid_request")
    return token


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Find the token in, by priority:

      1. credentials resolved by `bearer_scheme`
      2. the raw Authorization header
      3. the `cookie_name` cookie

    Raises HTTPException(401) if nothing usable is found.
    """
    if credentials is not None and credentials.scheme.lower() == BEARER:
        token = (credentials.credentials or "").strip()
        if token:
            return token

    token = parse_authorization_header(request.headers.get("Authorization"))
    if token:
        return token

    cookie_token = request.cookies.get(cookie_name)
    if cookie_token:
        return cookie_token

    raise unauthorized()
