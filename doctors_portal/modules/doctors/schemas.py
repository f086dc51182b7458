# doctors_portal/modules/doctors/schemas.py
from __future__ import annotations
from typing import Annotated, List, Optional

from pydantic import EmailStr, Field, StringConstraints

from doctors_portal.core.schemas import CamelModel, Document

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class DoctorCreate(CamelModel):
    name: NameStr
    specialty: NameStr = Field(..., description="Appointment option name")
    email: Optional[EmailStr] = None
    image: Optional[str] = Field(None, description="Profile picture URL")
    slots: List[str] = Field(default_factory=list)


class DoctorPublic(Document):
    name: str
    specialty: str
    email: Optional[str] = None
    image: Optional[str] = None
    slots: List[str] = Field(default_factory=list)
