# doctors_portal/routers/bookings.py
from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.errors import AuthorizationDenied
from doctors_portal.core.schemas import InsertResult, Rejected
from doctors_portal.db.sql import get_session
from doctors_portal.dependencies import verify_token
from doctors_portal.modules.bookings.schemas import BookingCreate, BookingPublic
from doctors_portal.modules.bookings.service import (
    BookingAlreadyExists,
    create_booking_svc,
    get_booking,
    list_bookings_for_email,
)

router = APIRouter(tags=["bookings"])


@router.get(
    "/bookings",
    response_model=List[BookingPublic],
    summary="Bookings of the caller (Bearer required)",
)
async def my_bookings(
    email: Optional[str] = Query(None),
    decoded_email: str = Depends(verify_token),
    session: AsyncSession = Depends(get_session),
):
    # Patients may only read their own bookings
    if email != decoded_email:
        raise AuthorizationDenied("Unauthorized Access")
    return await list_bookings_for_email(session, email)


@router.get("/bookings/{booking_id}", response_model=Optional[BookingPublic])
async def booking_detail(booking_id: str, session: AsyncSession = Depends(get_session)):
    return await get_booking(session, booking_id)


@router.post(
    "/bookings",
    response_model=Union[InsertResult, Rejected],
    summary="Book a slot; a second booking of the same treatment on the same day is refused",
)
async def create_booking(payload: BookingCreate, session: AsyncSession = Depends(get_session)):
    try:
        return await create_booking_svc(session, payload)
    except BookingAlreadyExists as e:
        return Rejected(message=str(e))
