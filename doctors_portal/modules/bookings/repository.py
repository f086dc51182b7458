# doctors_portal/modules/bookings/repository.py
from __future__ import annotations

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.bookings.models import Booking


class DuplicateBookingError(Exception):
    """Raised when the (date, treatment, email) unique constraint fires."""


# PostgreSQL names the constraint, SQLite lists its columns
_DUPLICATE_MARKERS = (
    "uq_bookings_date_treatment_email",
    "bookings.appointment_date, bookings.treatment, bookings.email",
)


async def get_by_id(session: AsyncSession, booking_id: UUID) -> Optional[Booking]:
    return await session.get(Booking, booking_id)


async def list_by_email(session: AsyncSession, *, email: str) -> Sequence[Booking]:
    rows = await session.execute(
        select(Booking).where(Booking.email == email).order_by(Booking.created_at)
    )
    return rows.scalars().all()


async def list_by_date(session: AsyncSession, *, appointment_date: str) -> Sequence[Booking]:
    rows = await session.execute(
        select(Booking).where(Booking.appointment_date == appointment_date)
    )
    return rows.scalars().all()


async def find_existing(
    session: AsyncSession, *, appointment_date: str, treatment: str, email: str
) -> Sequence[Booking]:
    rows = await session.execute(
        select(Booking).where(
            Booking.appointment_date == appointment_date,
            Booking.treatment == treatment,
            Booking.email == email,
        )
    )
    return rows.scalars().all()


async def create_booking(session: AsyncSession, **fields) -> Booking:
    booking = Booking(paid=False, **fields)
    session.add(booking)
    try:
        # Flush to force INSERT and surface the unique constraint here
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        message = str(exc.orig).lower() if exc.orig else str(exc).lower()
        if any(marker in message for marker in _DUPLICATE_MARKERS):
            raise DuplicateBookingError("booking_already_exists") from exc
        raise
    return booking


async def mark_paid(session: AsyncSession, *, booking_id: UUID, transaction_id: str) -> int:
    res = await session.execute(
        update(Booking)
        .where(Booking.id == booking_id)
        .values(paid=True, transaction_id=transaction_id)
    )
    return res.rowcount or 0  # type: ignore
