# doctors_portal/dependencies.py
from __future__ import annotations

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.config import Settings
from doctors_portal.core.errors import (
    AuthenticationInvalid,
    AuthenticationMissing,
    AuthorizationDenied,
)
from doctors_portal.core.security import InvalidTokenError, decode_token
from doctors_portal.db.sql import get_session
from doctors_portal.modules.payments.gateway import PaymentGateway
from doctors_portal.modules.users import service as users_svc

logger = logging.getLogger(__name__)


async def verify_token(request: Request) -> str:
    """
    Identity gate. Returns the email carried by the bearer token.

    - no Authorization header -> 401
    - token not verifiable (bad signature, expired, malformed) -> 403
    """
    auth = request.headers.get("authorization")
    if not auth:
        raise AuthenticationMissing()

    token = auth.split(" ", 1)[1].strip() if " " in auth else ""
    try:
        payload = decode_token(token)
    except InvalidTokenError as exc:
        logger.warning("rejected bearer token on %s: %s", request.url.path, exc)
        raise AuthenticationInvalid() from exc

    return payload["email"]


async def verify_admin(
    email: str = Depends(verify_token),
    session: AsyncSession = Depends(get_session),
) -> str:
    """
    Role gate, always behind verify_token. Looks the caller up on every request.
    """
    if not await users_svc.is_admin(session, email):
        raise AuthorizationDenied()
    return email


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway
