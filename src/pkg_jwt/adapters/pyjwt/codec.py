from typing import Any, Dict, Mapping, Optional, Tuple

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidAudienceError,
    InvalidIssuedAtError,
    InvalidIssuerError,
    InvalidJTIError,
    InvalidSignatureError as JWTInvalidSignatureError,
    InvalidSubjectError,
    MissingRequiredClaimError,
    PyJWTError,
)

from ...domain.constants import ALGORITHM
from ...domain.exceptions import (
    ClaimValidationError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
    VerificationFailedError,
)
from ...domain.ports import TokenCodec

_CLAIM_ERRORS = (
    ImmatureSignatureError,
    InvalidAudienceError,
    InvalidIssuedAtError,
    InvalidIssuerError,
    InvalidJTIError,
    InvalidSubjectError,
    MissingRequiredClaimError,
)


class PyJWTCodec(TokenCodec):
    """
    Adapter implementing TokenCodec port using PyJWT.

    Infrastructure layer:
    - Knows about JWS compact serialization and HMAC verification.
    - Only accepts the single configured algorithm (HS256).
    - Translates PyJWT exceptions into the domain taxonomy.
    """

    def __init__(self, algorithm: str = ALGORITHM, leeway: int = 0) -> None:
        self._algorithm = algorithm
        self._leeway = leeway

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def encode(
        self,
        claims: Mapping[str, Any],
        secret: bytes,
        headers: Mapping[str, Any],
    ) -> str:
        # PyJWT errors propagate; the sign use case wraps them
        return jwt.encode(
            dict(claims),
            secret,
            algorithm=self._algorithm,
            headers=dict(headers),
        )

    def decode(
        self,
        token: str,
        secret: bytes,
        issuer: Optional[str] = None,
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        Verify and decode a token.

        Returns:
            (payload, header)

        Raises:
            TokenExpiredError
            ClaimValidationError
            InvalidSignatureError
            MalformedTokenError
            VerificationFailedError
        """
        try:
            # Audience is enforced by the verifier, which knows about
            # multi-value `aud` claims; PyJWT would reject any token
            # carrying `aud` when no audience is requested.
            decoded = jwt.decode_complete(
                token,
                secret,
                algorithms=[self._algorithm],
                issuer=issuer,
                leeway=self._leeway,
                options={"verify_aud": False},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token has expired") from exc
        except _CLAIM_ERRORS as exc:
            raise ClaimValidationError(f"Claim validation failed: {exc}") from exc
        except JWTInvalidSignatureError as exc:
            raise InvalidSignatureError("Signature verification failed") from exc
        except DecodeError as exc:
            raise MalformedTokenError(f"Malformed token: {exc}") from exc
        except PyJWTError as exc:
            raise VerificationFailedError(f"Invalid token: {exc}") from exc

        return decoded["payload"], decoded["header"]
