# doctors_portal/modules/users/service.py
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import InsertResult, UpdateResult
from doctors_portal.core.security import create_access_token
from doctors_portal.db.base import parse_id
from doctors_portal.modules.users import repository as users_repo
from doctors_portal.modules.users.models import User, UserRole
from doctors_portal.modules.users.schemas import AccessToken, UserCreate, UserPublic

logger = logging.getLogger(__name__)


# Service-level errors (map them to HTTP in the router)
class UnknownUser(Exception):
    pass


def _to_public(user: User) -> UserPublic:
    return UserPublic.model_validate(user)


async def list_users(session: AsyncSession) -> List[UserPublic]:
    return [_to_public(u) for u in await users_repo.list_users(session)]


async def register_user(session: AsyncSession, payload: UserCreate) -> InsertResult:
    """
    Sign-up is an upsert on email: a returning user keeps its id and role,
    only the display name is refreshed.
    """
    existing = await users_repo.get_by_email(session, payload.email)
    if existing:
        if payload.name and payload.name != existing.name:
            existing.name = payload.name
            await session.flush()
        return InsertResult(inserted_id=str(existing.id))

    try:
        user = await users_repo.create_user(session, email=payload.email, name=payload.name)
    except users_repo.EmailAlreadyExistsError:
        # lost a race with a concurrent sign-up for the same email
        user = await users_repo.get_by_email(session, payload.email)
        if user is None:
            raise
    logger.info("registered user %s", payload.email)
    return InsertResult(inserted_id=str(user.id))


async def is_admin(session: AsyncSession, email: str) -> bool:
    """
    Live lookup, never cached: a demoted admin loses access on the next request.
    """
    user = await users_repo.get_by_email(session, email)
    return bool(user and user.is_admin)


async def promote_to_admin(session: AsyncSession, user_id: str) -> UpdateResult:
    """
    Upsert role=admin on the given id. An unknown id gets a bare admin row.
    """
    uid = parse_id(user_id)
    user = await users_repo.get_by_id(session, uid)
    if user is None:
        await users_repo.create_user(session, email=None, role=UserRole.ADMIN.value, user_id=uid)
        logger.info("created admin placeholder %s", uid)
        return UpdateResult(upserted_id=str(uid), upserted_count=1)

    modified = await users_repo.set_role(session, user, UserRole.ADMIN)
    if modified:
        logger.info("promoted %s to admin", user.email)
    return UpdateResult(matched_count=1, modified_count=int(modified))


async def issue_token(session: AsyncSession, email: str) -> AccessToken:
    user = await users_repo.get_by_email(session, email)
    if not user:
        raise UnknownUser(email)
    return AccessToken(access_token=create_access_token(email=email))
