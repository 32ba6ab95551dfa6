import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    BookingNotFoundError,
    BookingServiceError,
    CheckoutError,
    InvalidSelectionError,
    NotificationError,
    RateLimitError,
    SanityError,
)
from app.exceptions.handlers import (
    booking_not_found_handler,
    booking_service_error_handler,
    checkout_error_handler,
    invalid_selection_handler,
    notification_error_handler,
    rate_limit_error_handler,
    sanity_error_handler,
)
from app.routers.account import router as account_router
from app.routers.content import router as content_router
from app.routers.webhook import router as webhook_router
from app.services.account import AccountService
from app.services.booking import BookingService
from app.services.checkout import CheckoutService
from app.services.notification import NotificationService
from app.services.sanity import SanityService
from app.services.webhook import WebhookService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        booking = BookingService(client, settings.graphql_url)
        notification = NotificationService(client, settings.notification_url)
        sanity = SanityService(
            client,
            settings.sanity_project_id,
            settings.sanity_dataset,
            settings.sanity_api_version,
            token=settings.sanity_token,
        )

        checkout: CheckoutService | None = None
        if settings.stripe_api_key:
            checkout = CheckoutService(settings.stripe_api_key, settings.site_url)

        webhook = WebhookService(
            booking,
            notification,
            settings.backend_secret,
            redeliver_on_failure=settings.webhook_redeliver_on_failure,
        )

        app.state.settings = settings
        app.state.webhook_service = webhook
        app.state.sanity_service = sanity
        app.state.account_service = AccountService(booking, sanity, checkout=checkout)

        yield

        # Let detached notifications finish before the HTTP client closes
        await webhook.drain()


app = FastAPI(title="Tour Booking Site", lifespan=lifespan)

app.add_exception_handler(BookingServiceError, booking_service_error_handler)
app.add_exception_handler(SanityError, sanity_error_handler)
app.add_exception_handler(NotificationError, notification_error_handler)
app.add_exception_handler(CheckoutError, checkout_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(BookingNotFoundError, booking_not_found_handler)
app.add_exception_handler(InvalidSelectionError, invalid_selection_handler)

app.include_router(webhook_router)
app.include_router(account_router)
app.include_router(content_router)
