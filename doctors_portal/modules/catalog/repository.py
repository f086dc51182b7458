# doctors_portal/modules/catalog/repository.py
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.bookings.models import Booking
from doctors_portal.modules.catalog.models import AppointmentOption, AppointmentSlot


async def list_options(session: AsyncSession) -> Sequence[AppointmentOption]:
    rows = await session.execute(
        select(AppointmentOption).order_by(AppointmentOption.name)
    )
    return rows.scalars().all()


async def list_option_names(session: AsyncSession) -> list[tuple[UUID, str]]:
    rows = await session.execute(
        select(AppointmentOption.id, AppointmentOption.name).order_by(AppointmentOption.name)
    )
    return [(r.id, r.name) for r in rows]


async def get_by_name(session: AsyncSession, name: str) -> Optional[AppointmentOption]:
    row = await session.execute(select(AppointmentOption).where(AppointmentOption.name == name))
    return row.scalar_one_or_none()


async def create_option(
    session: AsyncSession, *, name: str, price: float, slots: list[str]
) -> AppointmentOption:
    option = AppointmentOption(name=name, price=price, slots=slots)
    session.add(option)
    await session.flush()
    return option


async def delete_option(session: AsyncSession, *, option_id: UUID) -> int:
    # slot rows go through ON DELETE CASCADE and the explicit delete below
    await session.execute(delete(AppointmentSlot).where(AppointmentSlot.option_id == option_id))
    res = await session.execute(delete(AppointmentOption).where(AppointmentOption.id == option_id))
    return res.rowcount or 0  # type: ignore


async def free_slot_rows(session: AsyncSession, *, appointment_date: str):
    """
    Store-side availability: every catalog slot with no booking for the same
    treatment, date and label. Rows come back grouped per option in slot order;
    options whose slots are all taken still appear once with a NULL label.
    """
    booked = (
        select(Booking.id)
        .where(
            Booking.treatment == AppointmentOption.name,
            Booking.appointment_date == appointment_date,
            Booking.slot == AppointmentSlot.label,
        )
        .correlate(AppointmentOption, AppointmentSlot)
        .exists()
    )
    stmt = (
        select(
            AppointmentOption.id,
            AppointmentOption.name,
            AppointmentOption.price,
            AppointmentSlot.label,
        )
        .select_from(AppointmentOption)
        .outerjoin(
            AppointmentSlot,
            and_(AppointmentSlot.option_id == AppointmentOption.id, ~booked),
        )
        .order_by(AppointmentOption.name, AppointmentSlot.position)
    )
    rows = await session.execute(stmt)
    return rows.all()
