import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    BookingNotFoundError,
    BookingServiceError,
    CheckoutError,
    InvalidSelectionError,
    NotificationError,
    RateLimitError,
    SanityError,
)

logger = logging.getLogger(__name__)


async def booking_service_error_handler(
    _request: Request, exc: BookingServiceError
) -> JSONResponse:
    logger.error("Booking service error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Booking service error: {exc.message}"},
    )


async def sanity_error_handler(_request: Request, exc: SanityError) -> JSONResponse:
    logger.error("Sanity error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Sanity error: {exc.message}"},
    )


async def notification_error_handler(
    _request: Request, exc: NotificationError
) -> JSONResponse:
    logger.error("Notification error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Notification error: {exc.message}"},
    )


async def checkout_error_handler(_request: Request, exc: CheckoutError) -> JSONResponse:
    logger.error("Checkout error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Checkout error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def booking_not_found_handler(
    _request: Request, exc: BookingNotFoundError
) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def invalid_selection_handler(
    _request: Request, exc: InvalidSelectionError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.message})
