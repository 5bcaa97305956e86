"""Signed session token issuance and verification."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import jwt

from reservia.domain.errors import Expired, InvalidSignature, SigningError

_ALGORITHM = "HS256"
# Only the signature and expiry are checked; other claims belong to the caller.
_VERIFY_OPTIONS = {
    "require": ["exp"],
    "verify_exp": True,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_iat": False,
    "verify_nbf": False,
}

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TokenService:
    """Issue and verify HS256 tokens that expire after a fixed lifetime."""

    secret: str
    ttl_seconds: int = 3600
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, payload: dict[str, object]) -> str:
        """Sign the payload together with an expiration timestamp."""
        if not self.secret:
            raise SigningError("Token signing secret is not configured")
        expires_at = self.clock() + timedelta(seconds=self.ttl_seconds)
        claims = {**payload, "exp": expires_at}
        try:
            token = jwt.encode(claims, self.secret, algorithm=_ALGORITHM)
        except (TypeError, ValueError) as exc:
            raise SigningError(str(exc)) from exc
        _logger.info("Issued session token expiring at %s", expires_at.isoformat())
        return token

    def verify(self, token: str) -> dict[str, object]:
        """Return the payload originally passed to issue()."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options=_VERIFY_OPTIONS,
            )
        except jwt.ExpiredSignatureError as exc:
            raise Expired("Session token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidSignature("Session token signature is invalid") from exc
        claims.pop("exp", None)
        return claims
