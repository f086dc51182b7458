# doctors_portal/routers/users.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import InsertResult, UpdateResult
from doctors_portal.db.sql import get_session
from doctors_portal.dependencies import verify_admin
from doctors_portal.modules.users import service as users_svc
from doctors_portal.modules.users.schemas import AdminStatus, UserCreate, UserPublic

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserPublic])
async def list_users(session: AsyncSession = Depends(get_session)):
    return await users_svc.list_users(session)


@router.get("/admin/{email}", response_model=AdminStatus)
async def admin_status(email: str, session: AsyncSession = Depends(get_session)):
    return AdminStatus(is_admin=await users_svc.is_admin(session, email))


@router.post("", response_model=InsertResult, summary="Register (or re-register) a user")
async def register(payload: UserCreate, session: AsyncSession = Depends(get_session)):
    return await users_svc.register_user(session, payload)


@router.put(
    "/admin/{user_id}",
    response_model=UpdateResult,
    dependencies=[Depends(verify_admin)],
    summary="Make a user admin (admin only)",
)
async def make_admin(user_id: str, session: AsyncSession = Depends(get_session)):
    return await users_svc.promote_to_admin(session, user_id)
