# doctors_portal/core/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from doctors_portal.core.config import settings

# HS256 with the shared ACCESS_TOKEN secret.
ALGORITHM = "HS256"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    *,
    email: str,
    expires_minutes: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    """
    Sign a bearer token carrying the caller's email.
    """
    exp_minutes = settings.ACCESS_EXPIRES_MIN if expires_minutes is None else expires_minutes
    now = _utcnow()
    to_encode: Dict[str, Any] = {
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=exp_minutes)).timestamp()),
    }
    return jwt.encode(to_encode, secret or settings.ACCESS_TOKEN, algorithm=ALGORITHM)


class InvalidTokenError(Exception):
    """Raised when a token is missing/invalid/expired or claims are malformed."""


def decode_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    """
    Decode and validate a JWT. Raises InvalidTokenError on failure.
    """
    if not token:
        raise InvalidTokenError("missing_token")
    try:
        payload = jwt.decode(token, secret or settings.ACCESS_TOKEN, algorithms=[ALGORITHM])
    except JWTError as exc:
        # covers expired signature, invalid signature, bad format
        raise InvalidTokenError("invalid_token") from exc

    if not payload.get("email"):
        raise InvalidTokenError("invalid_claims")

    return payload
