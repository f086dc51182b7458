# doctors_portal/modules/payments/schemas.py
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field

from doctors_portal.core.schemas import CamelModel


class PaymentIntentRequest(CamelModel):
    """
    The checkout page posts the whole booking; only ``price`` matters here.
    """

    price: float = Field(..., gt=0, description="Amount in currency units, e.g. 99.5")


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentCreate(CamelModel):
    booking_id: str
    transaction_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, validation_alias=AliasChoices("amount", "price"))
    email: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
