# doctors_portal/routers/payments.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctors_portal.core.config import Settings
from doctors_portal.core.schemas import InsertResult
from doctors_portal.db.sql import get_session
from doctors_portal.dependencies import get_payment_gateway, get_settings
from doctors_portal.modules.payments.gateway import PaymentGateway
from doctors_portal.modules.payments.schemas import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
)
from doctors_portal.modules.payments.service import (
    create_payment_intent_svc,
    record_payment_svc,
)

router = APIRouter(tags=["payments"])


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    summary="Start a card payment and hand the client secret to the browser",
)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
    settings: Settings = Depends(get_settings),
):
    return await create_payment_intent_svc(gateway, payload, settings.PAYMENT_CURRENCY)


@router.post(
    "/payments",
    response_model=InsertResult,
    summary="Record a settled payment and mark its booking paid",
)
async def record_payment(payload: PaymentCreate, session: AsyncSession = Depends(get_session)):
    return await record_payment_svc(session, payload)
