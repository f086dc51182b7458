# doctors_portal/modules/users/schemas.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator
from pydantic.networks import validate_email

from doctors_portal.core.schemas import CamelModel, Document

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class UserCreate(CamelModel):
    # Stored exactly as submitted; lookups compare the raw string
    email: str = Field(..., min_length=3, max_length=320)
    name: Optional[NameStr] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        validate_email(v)
        return v


class UserPublic(Document):
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class AdminStatus(CamelModel):
    is_admin: bool


class AccessToken(CamelModel):
    access_token: str
