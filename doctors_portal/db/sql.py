# doctors_portal/db/sql.py
from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from doctors_portal.core.config import Settings
from doctors_portal.core.security import InvalidTokenError, decode_token
from doctors_portal.db.base import Base
from doctors_portal.modules.log import write_audit_log

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the process-wide engine. SQLite does not take pool sizing options.
    """
    if settings.SQL_DSN.startswith("sqlite"):
        return create_async_engine(settings.SQL_DSN, echo=settings.DB_ECHO)
    return create_async_engine(
        settings.SQL_DSN,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_timeout=settings.DB_POOL_TIMEOUT,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


def _caller_email(request: Request) -> str | None:
    auth = request.headers.get("authorization") or ""
    if " " not in auth:
        return None
    try:
        return decode_token(auth.split(" ", 1)[1].strip()).get("email")
    except InvalidTokenError:
        return None


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Provide a DB session for each request.
    Commits on success, rolls back on error, and writes an audit row either way.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    email = _caller_email(request)
    action = f"{request.method} {request.url.path}"

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
            await write_audit_log(
                session,
                email=email,
                action=f"{action} COMMIT",
                details="Operation completed successfully",
            )
            await session.commit()

        except Exception as exc:
            await session.rollback()
            try:
                await write_audit_log(
                    session,
                    email=email,
                    action=f"{action} ROLLBACK",
                    details=str(exc) or exc.__class__.__name__,
                )
                await session.commit()
            except Exception:
                # the request error is the one the caller sees
                logger.warning("audit write failed for %s", action, exc_info=True)
            raise


async def ping_db(session: AsyncSession) -> bool:
    await session.execute(text("SELECT 1"))
    return True


async def init_db(engine: AsyncEngine, *, drop: bool = False) -> None:
    """
    Create all tables (optionally dropping them first).
    """
    # register every model on Base.metadata
    from doctors_portal import models  # noqa: F401

    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
