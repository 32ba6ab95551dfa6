import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum

from pydantic import ValidationError

from app.exceptions.custom import BookingServiceError, RateLimitError
from app.schemas.stripe_event import CHECKOUT_SESSION_COMPLETED, CheckoutSession, StripeEvent
from app.services.booking import BookingService
from app.services.notification import NotificationService

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT = "New Bookings!"
NOTIFICATION_TEXT = "Thanks for the new bookings"


class WebhookOutcome(StrEnum):
    completed = "completed"
    ignored = "ignored"
    missing_booking = "missing_booking"
    failed = "failed"


EventHandler = Callable[[StripeEvent], Awaitable[WebhookOutcome]]


class WebhookService:
    """Routes verified Stripe events to their handlers.

    Only ``checkout.session.completed`` has a handler: it marks the booking
    named in the session metadata as paid, then sends a notification in a
    detached task. The notification is skipped when the payment mutation
    fails. Every other event type is ignored.
    """

    def __init__(
        self,
        booking: BookingService,
        notification: NotificationService,
        backend_secret: str,
        redeliver_on_failure: bool = False,
    ):
        self._booking = booking
        self._notification = notification
        self._backend_secret = backend_secret
        self._redeliver_on_failure = redeliver_on_failure
        self._handlers: dict[str, EventHandler] = {
            CHECKOUT_SESSION_COMPLETED: self._handle_checkout_completed,
        }
        self._pending: set[asyncio.Task] = set()

    async def dispatch(self, event: StripeEvent) -> WebhookOutcome:
        handler = self._handlers.get(event.type)
        if handler is None:
            logger.info("Ignoring webhook event %s of type %s", event.id, event.type)
            return WebhookOutcome.ignored
        return await handler(event)

    async def _handle_checkout_completed(self, event: StripeEvent) -> WebhookOutcome:
        try:
            session = CheckoutSession.model_validate(event.data.object)
        except ValidationError:
            logger.warning("Event %s carries a malformed checkout session", event.id)
            return WebhookOutcome.missing_booking

        booking_id = session.booking_id
        if booking_id is None:
            logger.warning(
                "Checkout session %s (event %s) has no booking in metadata",
                session.id,
                event.id,
            )
            return WebhookOutcome.missing_booking

        try:
            await self._booking.complete_booking(booking_id, self._backend_secret)
        except (BookingServiceError, RateLimitError):
            logger.exception("Failed to mark booking %s as paid (event %s)", booking_id, event.id)
            if self._redeliver_on_failure:
                raise
            return WebhookOutcome.failed

        self._notify_in_background(NOTIFICATION_SUBJECT, NOTIFICATION_TEXT)
        return WebhookOutcome.completed

    def _notify_in_background(self, subject: str, text: str) -> None:
        task = asyncio.create_task(self._notification.send(subject, text))
        self._pending.add(task)
        task.add_done_callback(self._on_notification_done)

    def _on_notification_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.warning("Notification task was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Notification failed: %s: %s",
                type(exc).__name__,
                exc,
                exc_info=exc,
            )

    @property
    def pending_notifications(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for in-flight notifications to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
