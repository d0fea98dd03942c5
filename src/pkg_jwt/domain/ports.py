from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class TokenCodec(Protocol):
    """
    Port for the signed-token wire format.

    Implementations live in the adapters layer (e.g. PyJWT codec).
    """

    def encode(
        self,
        claims: Mapping[str, Any],
        secret: bytes,
        headers: Mapping[str, Any],
    ) -> str:
        """Sign `claims` with `secret` and return the compact token."""
        ...

    def decode(
        self,
        token: str,
        secret: bytes,
        issuer: Optional[str] = None,
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        """
        Verify and decode the given token into (payload, header).

        Should:
          - verify structure and signature
          - check exp / nbf and, when given, the issuer
        Raises:
          - TokenExpiredError
          - ClaimValidationError
          - InvalidSignatureError
          - MalformedTokenError
          - VerificationFailedError
        """
        ...
