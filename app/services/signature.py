import logging

import stripe
from pydantic import ValidationError

from app.exceptions.custom import WebhookSignatureError
from app.schemas.stripe_event import StripeEvent

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 300


def verify_event(
    payload: bytes | str,
    signature: str | None,
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE,
) -> StripeEvent:
    """Verify a Stripe webhook delivery and return the parsed event.

    The body is only decoded into an event after the ``Stripe-Signature``
    header has been checked against ``secret``. Raises WebhookSignatureError
    on any failure.
    """
    if not signature:
        raise WebhookSignatureError("Missing Stripe-Signature header")

    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WebhookSignatureError(f"Invalid payload encoding: {exc}") from exc

    try:
        stripe.WebhookSignature.verify_header(payload, signature, secret, tolerance)
    except stripe.SignatureVerificationError as exc:
        raise WebhookSignatureError(str(exc)) from exc

    try:
        event = StripeEvent.model_validate_json(payload)
    except ValidationError as exc:
        raise WebhookSignatureError(f"Invalid payload: {exc.error_count()} validation error(s)") from exc

    logger.info("Verified webhook event %s (%s)", event.id, event.type)
    return event
