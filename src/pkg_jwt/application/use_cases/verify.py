from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ...domain.entities import VerifiedToken
from ...domain.exceptions import (
    ClaimValidationError,
    TokenVerificationError,
    VerificationFailedError,
)
from ...domain.ports import TokenCodec
from ...domain.value_objects import VerifyOptions

logger = logging.getLogger(__name__)


def _audience_list(aud_claim: Any) -> list[str]:
    # `aud` may be a single string or a list of strings
    if aud_claim is None:
        return []
    if isinstance(aud_claim, str):
        return [aud_claim]
    if isinstance(aud_claim, (list, tuple)):
        return list(aud_claim)
    raise ClaimValidationError("Audience claim must be a string or a list of strings")


@dataclass(slots=True)
class VerifyTokenUseCase:
    """
    Application use case:
    - Verify and decode a token via TokenCodec port
    - Enforce optional issuer / audience constraints
    - Surface exactly one taxonomy error on failure
    """

    codec: TokenCodec

    def execute(
            self,
            token: str,
            secret: Union[str, bytes],
            options: Optional[VerifyOptions] = None,
    ) -> VerifiedToken:
        """
        Verify `token` against `secret` and return payload + header.

        Raises:
            TokenExpiredError
            ClaimValidationError
            InvalidSignatureError
            MalformedTokenError
            VerificationFailedError
        """
        options = options or VerifyOptions()
        key = secret.encode("utf-8") if isinstance(secret, str) else secret

        try:
            payload, header = self.codec.decode(token, key, issuer=options.issuer)
            if options.audience:
                self._check_audience(payload, options.audience)
        except TokenVerificationError as exc:
            # let callers distinguish these explicitly
            logger.info("Token rejected: %s", exc.key.value)
            raise
        except Exception as exc:
            # Wrap unexpected errors in the catch-all
            logger.info("Token rejected: %s", VerificationFailedError.key.value)
            raise VerificationFailedError(f"Token verification failed: {exc}") from exc

        logger.debug("Verified token jti=%s", payload.get("jti"))
        return VerifiedToken(payload=dict(payload), header=dict(header))

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _check_audience(payload: Mapping[str, Any], accepted: tuple[str, ...]) -> None:
        aud_list = _audience_list(payload.get("aud"))
        if not any(aud in aud_list for aud in accepted):
            raise ClaimValidationError(
                f"Invalid audience: expected one of {list(accepted)}, got {aud_list}"
            )
