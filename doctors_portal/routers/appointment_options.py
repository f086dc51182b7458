# doctors_portal/routers/appointment_options.py
from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import DeleteResult, InsertResult, Rejected
from doctors_portal.db.sql import get_session
from doctors_portal.dependencies import verify_admin
from doctors_portal.modules.catalog import service as catalog_svc
from doctors_portal.modules.catalog.schemas import (
    AppointmentOptionCreate,
    AppointmentOptionPublic,
    SpecialtyPublic,
)

router = APIRouter(tags=["appointment-options"])

DateQuery = Query(None, description="Booking date, compared verbatim with stored bookings")


@router.get(
    "/appointmentOptions",
    response_model=List[AppointmentOptionPublic],
    summary="Appointment options with the slots still free on a date",
)
async def appointment_options(
    date: Optional[str] = DateQuery,
    session: AsyncSession = Depends(get_session),
):
    return await catalog_svc.list_available_options(session, date or "")


@router.get(
    "/v2/appointmentOptions",
    response_model=List[AppointmentOptionPublic],
    summary="Same as /appointmentOptions, computed by the database",
)
async def appointment_options_v2(
    date: Optional[str] = DateQuery,
    session: AsyncSession = Depends(get_session),
):
    return await catalog_svc.query_available_options(session, date or "")


@router.get("/specialty", response_model=List[SpecialtyPublic])
async def specialty(session: AsyncSession = Depends(get_session)):
    return await catalog_svc.list_specialties(session)


@router.post(
    "/appointmentOptions",
    response_model=Union[InsertResult, Rejected],
    dependencies=[Depends(verify_admin)],
    summary="Add a treatment to the catalog (admin only)",
)
async def add_appointment_option(
    payload: AppointmentOptionCreate,
    session: AsyncSession = Depends(get_session),
):
    try:
        return await catalog_svc.add_option(session, payload)
    except catalog_svc.OptionAlreadyExists as e:
        return Rejected(message=str(e))


@router.delete(
    "/appointmentOptions/{option_id}",
    response_model=DeleteResult,
    dependencies=[Depends(verify_admin)],
    summary="Remove a treatment from the catalog (admin only)",
)
async def delete_appointment_option(
    option_id: str,
    session: AsyncSession = Depends(get_session),
):
    return await catalog_svc.remove_option(session, option_id)
