# doctors_portal/core/schemas.py
"""
Shared DTO helpers.

Documents go over the wire with camelCase keys and a string ``_id``; write
results use the same shapes the portal's frontend already understands
(``acknowledged``, ``insertedId``, ``modifiedCount`` ...).
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Document(CamelModel):
    id: UUID = Field(..., alias="_id")


class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0
    upserted_id: Optional[str] = None
    upserted_count: int = 0


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int = 0


class Rejected(CamelModel):
    """Successful response whose payload says nothing was written."""

    acknowledged: bool = False
    message: str
