# doctors_portal/modules/catalog/service.py
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import DeleteResult, InsertResult
from doctors_portal.db.base import parse_id
from doctors_portal.modules.bookings import repository as bookings_repo
from doctors_portal.modules.bookings.models import Booking
from doctors_portal.modules.catalog import repository as catalog_repo
from doctors_portal.modules.catalog.models import AppointmentOption
from doctors_portal.modules.catalog.schemas import (
    AppointmentOptionCreate,
    AppointmentOptionPublic,
    SpecialtyPublic,
)

logger = logging.getLogger(__name__)


class OptionAlreadyExists(Exception):
    pass


def resolve_availability(
    options: Sequence[AppointmentOption],
    bookings: Iterable[Booking],
    appointment_date: str,
) -> List[AppointmentOptionPublic]:
    """
    For each option, keep the slot labels not taken by a booking with the
    option's name on exactly ``appointment_date``. Catalog order is preserved.
    """
    taken: dict[str, set[str]] = {}
    for booking in bookings:
        if booking.appointment_date == appointment_date:
            taken.setdefault(booking.treatment, set()).add(booking.slot)

    result: List[AppointmentOptionPublic] = []
    for option in options:
        booked = taken.get(option.name, set())
        result.append(
            AppointmentOptionPublic(
                id=option.id,
                name=option.name,
                price=option.price,
                slots=[slot for slot in option.slots if slot not in booked],
            )
        )
    return result


async def list_available_options(
    session: AsyncSession, appointment_date: str
) -> List[AppointmentOptionPublic]:
    """Availability computed in application code."""
    options = await catalog_repo.list_options(session)
    bookings = await bookings_repo.list_by_date(session, appointment_date=appointment_date)
    return resolve_availability(options, bookings, appointment_date)


async def query_available_options(
    session: AsyncSession, appointment_date: str
) -> List[AppointmentOptionPublic]:
    """Availability computed by the store (anti-join against bookings)."""
    rows = await catalog_repo.free_slot_rows(session, appointment_date=appointment_date)

    grouped: dict = {}
    for option_id, name, price, label in rows:
        entry = grouped.setdefault(
            option_id, {"id": option_id, "name": name, "price": price, "slots": []}
        )
        if label is not None:
            entry["slots"].append(label)
    return [AppointmentOptionPublic(**entry) for entry in grouped.values()]


async def list_specialties(session: AsyncSession) -> List[SpecialtyPublic]:
    return [
        SpecialtyPublic(id=option_id, name=name)
        for option_id, name in await catalog_repo.list_option_names(session)
    ]


async def add_option(session: AsyncSession, payload: AppointmentOptionCreate) -> InsertResult:
    if await catalog_repo.get_by_name(session, payload.name):
        raise OptionAlreadyExists(f"Appointment option {payload.name} already exists")

    option = await catalog_repo.create_option(
        session, name=payload.name, price=payload.price, slots=list(payload.slots)
    )
    logger.info("appointment option %s added with %d slots", option.name, len(payload.slots))
    return InsertResult(inserted_id=str(option.id))


async def remove_option(session: AsyncSession, option_id: str) -> DeleteResult:
    deleted = await catalog_repo.delete_option(session, option_id=parse_id(option_id))
    return DeleteResult(deleted_count=deleted)
