# doctors_portal/modules/catalog/models.py
from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import Float, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from doctors_portal.db.base import Base, UUIDPKMixin, TimestampMixin, ReprMixin


class AppointmentOption(UUIDPKMixin, TimestampMixin, ReprMixin, Base):
    """
    Treatment catalog entry. ``name`` is what bookings reference as ``treatment``.
    """

    __tablename__ = "appointment_options"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    slot_rows: Mapped[List["AppointmentSlot"]] = relationship(
        back_populates="option",
        order_by="AppointmentSlot.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_appointment_options_name"),
    )

    @property
    def slots(self) -> list[str]:
        return [row.label for row in self.slot_rows]

    @slots.setter
    def slots(self, labels: list[str]) -> None:
        self.slot_rows = [
            AppointmentSlot(position=i, label=label) for i, label in enumerate(labels)
        ]


class AppointmentSlot(Base):
    """
    One bookable slot label of an option. ``position`` keeps the catalog order.
    """

    __tablename__ = "appointment_slots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    option_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("appointment_options.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    label: Mapped[str] = mapped_column(String(64), nullable=False)

    option: Mapped[AppointmentOption] = relationship(back_populates="slot_rows")

    __table_args__ = (
        UniqueConstraint("option_id", "position", name="uq_appointment_slots_position"),
        Index("ix_appointment_slots_option", "option_id", "position"),
    )
