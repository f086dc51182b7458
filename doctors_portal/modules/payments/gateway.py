# doctors_portal/modules/payments/gateway.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

import stripe
from starlette.concurrency import run_in_threadpool

from doctors_portal.core.config import Settings
from doctors_portal.core.errors import PaymentGatewayError

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    async def create_card_intent(self, *, amount: int, currency: str) -> str:
        """Create a card payment intent for ``amount`` minor units; return its client secret."""
        ...


class StripeGateway(PaymentGateway):
    def __init__(self, settings: Settings, api_key: Optional[str] = None):
        self.api_key = api_key or settings.STRIPE_SECRET_KEY

    async def create_card_intent(self, *, amount: int, currency: str) -> str:
        if not self.api_key:
            raise PaymentGatewayError("Stripe secret key not configured")
        try:
            # the stripe SDK is blocking
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                api_key=self.api_key,
                amount=amount,
                currency=currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError as exc:
            raise PaymentGatewayError(exc.user_message or str(exc)) from exc
        logger.info("payment intent %s created for %d %s", intent.id, amount, currency)
        return intent.client_secret
