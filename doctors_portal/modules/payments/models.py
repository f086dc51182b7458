# doctors_portal/modules/payments/models.py
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import JSON, Float, String, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, UUIDPKMixin, TimestampMixin, ReprMixin


class Payment(UUIDPKMixin, TimestampMixin, ReprMixin, Base):
    """
    Settled card payment for one booking. Written once, never updated.
    """

    __tablename__ = "payments"

    # Plain reference, not a foreign key: a payment is kept even when no
    # booking carries this id
    booking_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    transaction_id: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)

    # "metadata" is reserved on declarative classes
    extra: Mapped[Optional[dict]] = mapped_column(
        "metadata", JSON(none_as_null=True), nullable=True
    )

    __table_args__ = (
        Index("ix_payments_booking", "booking_id"),
    )
