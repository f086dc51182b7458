# doctors_portal/modules/bookings/schemas.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from doctors_portal.core.schemas import CamelModel, Document

Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
# Compared by exact equality against query strings and token claims
Verbatim = Annotated[str, StringConstraints(min_length=1)]


class BookingCreate(CamelModel):
    """
    Payload to create a booking.
    - appointment_date is kept verbatim (no calendar normalization).
    - patient/phone/price are informational only.
    """

    appointment_date: Verbatim
    treatment: Text
    slot: Text
    email: Verbatim
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)


class BookingPublic(Document):
    appointment_date: str
    treatment: str
    slot: str
    email: str
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = None
    paid: bool = False
    transaction_id: Optional[str] = None
