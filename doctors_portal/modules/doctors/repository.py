# doctors_portal/modules/doctors/repository.py
from __future__ import annotations
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.doctors.models import Doctor


async def create_doctor(
    db: AsyncSession,
    *,
    name: str,
    specialty: str,
    email: Optional[str] = None,
    image: Optional[str] = None,
    slots: Optional[list[str]] = None,
) -> Doctor:
    doctor = Doctor(
        name=name,
        specialty=specialty,
        email=email,
        image=image,
        slots=list(slots or []),
    )
    db.add(doctor)
    await db.flush()
    return doctor


async def list_doctors(db: AsyncSession) -> Sequence[Doctor]:
    rows = await db.execute(select(Doctor).order_by(Doctor.created_at, Doctor.name))
    return rows.scalars().all()


async def delete_doctor(db: AsyncSession, *, doctor_id: UUID) -> int:
    res = await db.execute(delete(Doctor).where(Doctor.id == doctor_id))
    return res.rowcount or 0 # type: ignore
