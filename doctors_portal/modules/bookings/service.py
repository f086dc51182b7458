# doctors_portal/modules/bookings/service.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import InsertResult
from doctors_portal.db.base import parse_id
from doctors_portal.modules.bookings import repository as bookings_repo
from doctors_portal.modules.bookings.schemas import BookingCreate, BookingPublic

logger = logging.getLogger(__name__)


class BookingAlreadyExists(Exception):
    """
    The patient already holds a booking for this treatment on this date.
    Routers turn it into a negative acknowledgment, not an error status.
    """


def _to_public(booking) -> BookingPublic:
    return BookingPublic.model_validate(booking)


async def create_booking_svc(session: AsyncSession, payload: BookingCreate) -> InsertResult:
    """
    Insert a booking unless the patient already booked this treatment that day.

    The slot itself is not locked: two patients can still take the same slot.
    """
    already_booked = await bookings_repo.find_existing(
        session,
        appointment_date=payload.appointment_date,
        treatment=payload.treatment,
        email=payload.email,
    )
    message = f"You already have a booking on {payload.appointment_date}"
    if already_booked:
        logger.info("duplicate booking for %s on %s", payload.email, payload.appointment_date)
        raise BookingAlreadyExists(message)

    try:
        booking = await bookings_repo.create_booking(
            session, **payload.model_dump(by_alias=False)
        )
    except bookings_repo.DuplicateBookingError as exc:
        raise BookingAlreadyExists(message) from exc

    return InsertResult(inserted_id=str(booking.id))


async def list_bookings_for_email(session: AsyncSession, email: str) -> List[BookingPublic]:
    return [_to_public(b) for b in await bookings_repo.list_by_email(session, email=email)]


async def get_booking(session: AsyncSession, booking_id: str) -> Optional[BookingPublic]:
    booking = await bookings_repo.get_by_id(session, parse_id(booking_id))
    return _to_public(booking) if booking else None
