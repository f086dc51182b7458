# doctors_portal/modules/catalog/schemas.py
from __future__ import annotations

from typing import Annotated, List

from pydantic import Field, StringConstraints

from doctors_portal.core.schemas import CamelModel, Document

SlotLabel = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]


class AppointmentOptionCreate(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
    price: float = Field(0.0, ge=0)
    slots: List[SlotLabel] = Field(default_factory=list)


class AppointmentOptionPublic(Document):
    """
    Catalog entry. On the availability endpoints ``slots`` only holds the
    labels still free on the requested date.
    """

    name: str
    price: float
    slots: List[str]


class SpecialtyPublic(Document):
    name: str
