# doctors_portal/routers/doctors.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import DeleteResult, InsertResult
from doctors_portal.db.base import parse_id
from doctors_portal.db.sql import get_session
from doctors_portal.dependencies import verify_admin
from doctors_portal.modules.doctors import repository as repo
from doctors_portal.modules.doctors.schemas import DoctorCreate, DoctorPublic

router = APIRouter(tags=["doctors"], dependencies=[Depends(verify_admin)])


@router.get(
    "/manageDoctors",
    response_model=List[DoctorPublic],
    summary="List doctors (admin only)",
)
async def manage_doctors(db: AsyncSession = Depends(get_session)):
    return await repo.list_doctors(db)


@router.post(
    "/addDoctors",
    response_model=InsertResult,
    summary="Add a doctor (admin only)",
)
async def add_doctor(payload: DoctorCreate, db: AsyncSession = Depends(get_session)):
    doctor = await repo.create_doctor(db, **payload.model_dump(by_alias=False))
    return InsertResult(inserted_id=str(doctor.id))


@router.delete(
    "/deleteDoctor/{doctor_id}",
    response_model=DeleteResult,
    summary="Delete a doctor by id (admin only)",
)
async def delete_doctor(doctor_id: str, db: AsyncSession = Depends(get_session)):
    deleted = await repo.delete_doctor(db, doctor_id=parse_id(doctor_id))
    return DeleteResult(deleted_count=deleted)
