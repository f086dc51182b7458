# doctors_portal/modules/payments/repository.py
from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.modules.payments.models import Payment


async def create_payment(
    session: AsyncSession,
    *,
    booking_id: UUID,
    transaction_id: str,
    amount: float,
    email: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Payment:
    payment = Payment(
        booking_id=booking_id,
        transaction_id=transaction_id,
        amount=amount,
        email=email,
        extra=metadata,
    )
    session.add(payment)
    await session.flush()
    return payment

