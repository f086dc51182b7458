# doctors_portal/modules/doctors/models.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import JSON, String, Index
from sqlalchemy.orm import Mapped, mapped_column

from doctors_portal.db.base import Base, UUIDPKMixin, TimestampMixin, ReprMixin


class Doctor(UUIDPKMixin, TimestampMixin, ReprMixin, Base):
    """
    Admin-managed doctor profile. ``specialty`` matches an appointment option name.
    """

    __tablename__ = "doctors"

    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    specialty: Mapped[str] = mapped_column(String(120), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    slots: Mapped[list] = mapped_column(JSON, nullable=False, default=list)


Index("ix_doctors_specialty", Doctor.specialty)
