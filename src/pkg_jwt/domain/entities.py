from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True, slots=True)
class VerifiedToken:
    """
    Result of a successful verification: the full decoded claim set
    and the protected header.
    """
    payload: Dict[str, Any] = field(default_factory=dict)
    header: Dict[str, Any] = field(default_factory=dict)

    # --- Read-only shortcuts for registered claims -------------------------

    @property
    def issuer(self) -> Optional[str]:
        return self.payload.get("iss")

    @property
    def subject(self) -> Optional[str]:
        return self.payload.get("sub")

    @property
    def audiences(self) -> Tuple[str, ...]:
        aud = self.payload.get("aud")
        if aud is None:
            return ()
        if isinstance(aud, str):
            return (aud,)
        return tuple(aud)

    @property
    def token_id(self) -> Optional[str]:
        return self.payload.get("jti")

    @property
    def issued_at(self) -> Optional[int]:
        return self.payload.get("iat")

    @property
    def not_before(self) -> Optional[int]:
        return self.payload.get("nbf")

    @property
    def expires_at(self) -> Optional[int]:
        return self.payload.get("exp")
