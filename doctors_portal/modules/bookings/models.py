# doctors_portal/modules/bookings/models.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Float, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, UUIDPKMixin, TimestampMixin, ReprMixin


class Booking(UUIDPKMixin, TimestampMixin, ReprMixin, Base):
    """
    A patient's claim on one slot of one treatment on one date.

    ``appointment_date`` is stored verbatim; availability compares it by
    exact string equality.
    """

    __tablename__ = "bookings"

    appointment_date: Mapped[str] = mapped_column(String(64), nullable=False)
    treatment: Mapped[str] = mapped_column(String(120), nullable=False)
    slot: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    patient: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    transaction_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        # One booking per patient, treatment and day
        UniqueConstraint(
            "appointment_date", "treatment", "email",
            name="uq_bookings_date_treatment_email",
        ),
        Index("ix_bookings_date_treatment", "appointment_date", "treatment"),
        Index("ix_bookings_email", "email"),
    )
