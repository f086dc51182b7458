# doctors_portal/modules/users/repository.py
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.users.models import User, UserRole


class EmailAlreadyExistsError(Exception):
    """Raised when trying to insert a user with an email that already exists."""


async def get_by_id(session: AsyncSession, user_id: UUID) -> Optional[User]:
    """
    Returns a User by primary key or None if not found.
    """
    return await session.get(User, user_id)


async def get_by_email(session: AsyncSession, email: str) -> Optional[User]:
    """
    Returns a User by exact email or None.
    """
    stmt = select(User).where(User.email == email)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def list_users(session: AsyncSession) -> Sequence[User]:
    rows = await session.execute(select(User).order_by(User.created_at, User.id))
    return rows.scalars().all()


async def create_user(
    session: AsyncSession,
    *,
    email: Optional[str],
    name: Optional[str] = None,
    role: Optional[str] = None,
    user_id: Optional[UUID] = None,
) -> User:
    """
    Inserts a new user row and returns the persisted ORM instance.
    """
    user = User(email=email, name=name, role=role)
    if user_id is not None:
        user.id = user_id

    session.add(user)
    try:
        # Flush to force INSERT and surface constraint violations here
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise EmailAlreadyExistsError("Email already registered") from exc
    return user


async def set_role(session: AsyncSession, user: User, role: UserRole) -> bool:
    """
    Set the role in place. Returns False when the user already had it.
    """
    if user.role == role.value:
        return False
    user.role = role.value
    await session.flush()
    return True
