import asyncio
import logging

import stripe

from app.exceptions.custom import CheckoutError
from app.schemas.responses import StagedOptionalTour

logger = logging.getLogger(__name__)

CURRENCY = "usd"


def build_line_items(staged: list[StagedOptionalTour]) -> list[dict]:
    line_items = []
    for tour in staged:
        line_items.append({
            "price_data": {
                "currency": CURRENCY,
                "product_data": {"name": f"{tour.cityName}: {tour.visitName}"[:100]},
                # Stripe expects unit_amount in cents
                "unit_amount": int(round(tour.price * 100)),
            },
            "quantity": 1,
        })
    return line_items


class CheckoutService:
    def __init__(self, api_key: str, site_url: str):
        self._api_key = api_key
        self._site_url = site_url.rstrip("/")

    async def create_extras_session(
        self, booking_id: str, staged: list[StagedOptionalTour]
    ) -> str:
        """Create a Checkout Session for add-on visits and return its URL.

        The booking id travels in the session metadata so the completed
        payment is reconciled by the webhook.
        """

        def _create():
            return stripe.checkout.Session.create(
                api_key=self._api_key,
                mode="payment",
                payment_method_types=["card"],
                line_items=build_line_items(staged),
                metadata={"booking": booking_id},
                success_url=f"{self._site_url}/account?checkout=success",
                cancel_url=f"{self._site_url}/account?checkout=cancelled",
            )

        try:
            session = await asyncio.to_thread(_create)
        except stripe.StripeError as exc:
            raise CheckoutError(str(exc), status_code=exc.http_status) from exc

        logger.info(
            "Created checkout session %s for booking %s (%d extras)",
            session.id,
            booking_id,
            len(staged),
        )
        return session.url
