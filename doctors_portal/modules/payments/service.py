# doctors_portal/modules/payments/service.py
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.schemas import InsertResult
from doctors_portal.db.base import parse_id
from doctors_portal.modules.bookings import repository as bookings_repo
from doctors_portal.modules.payments import repository as payments_repo
from doctors_portal.modules.payments.gateway import PaymentGateway
from doctors_portal.modules.payments.schemas import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
)

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """99.99 -> 9999. Rounds half up to the nearest cent."""
    return int((Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def create_payment_intent_svc(
    gateway: PaymentGateway, payload: PaymentIntentRequest, currency: str
) -> PaymentIntentResponse:
    secret = await gateway.create_card_intent(
        amount=to_minor_units(payload.price), currency=currency
    )
    return PaymentIntentResponse(client_secret=secret)


async def record_payment_svc(session: AsyncSession, payload: PaymentCreate) -> InsertResult:
    """
    Store the payment, then flag the booking as paid.

    Both writes run in the request's transaction, payment row first.
    booking_id is not a foreign key, so an unknown booking still yields the
    payment insert on every backend; the miss is only logged.
    """
    booking_id = parse_id(payload.booking_id)

    payment = await payments_repo.create_payment(
        session,
        booking_id=booking_id,
        transaction_id=payload.transaction_id,
        amount=payload.amount,
        email=payload.email,
        metadata=payload.metadata,
    )

    updated = await bookings_repo.mark_paid(
        session, booking_id=booking_id, transaction_id=payload.transaction_id
    )
    if not updated:
        logger.warning("payment %s recorded for unknown booking %s", payment.id, booking_id)

    return InsertResult(inserted_id=str(payment.id))
