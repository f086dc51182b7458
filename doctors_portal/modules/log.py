from __future__ import annotations

import logging

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.users.models import AuditLog

logger = logging.getLogger(__name__)


async def write_audit_log(
    session: AsyncSession,
    email: str | None,
    action: str,
    details: str | None = None,
):
    """
    Write an audit log entry.

    action:
        "<METHOD> <path> COMMIT"
        "<METHOD> <path> ROLLBACK"
    """
    logger.debug("audit email=%s action=%s", email, action)
    stmt = insert(AuditLog).values(
        email=email,
        action=action,
        details=details,
    )
    await session.execute(stmt)
