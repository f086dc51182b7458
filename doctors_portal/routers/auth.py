# doctors_portal/routers/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.db.sql import get_session
from doctors_portal.modules.users.schemas import AccessToken
from doctors_portal.modules.users.service import UnknownUser, issue_token

router = APIRouter(tags=["auth"])


@router.get(
    "/jwt",
    response_model=AccessToken,
    summary="Exchange a registered email for a 1 hour access token",
    responses={403: {"description": "Email not registered, body is {accessToken: ''}"}},
)
async def jwt_token(
    email: str = Query(""),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await issue_token(session, email)
    except UnknownUser:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"accessToken": ""},
        )
