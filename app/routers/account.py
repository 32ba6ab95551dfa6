import logging

from fastapi import APIRouter, HTTPException

from app.dependencies import AccountDep, UserTokenDep
from app.schemas.responses import (
    AccountBookingResponse,
    ExtrasCheckoutResponse,
    ExtrasSelection,
    RequestSubmission,
    TravellersUpdate,
    UpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account")


@router.get("/booking", response_model=AccountBookingResponse)
async def get_booking(
    service: AccountDep,
    token: UserTokenDep,
    locale: str = "en",
) -> AccountBookingResponse:
    return await service.get_overview(token, locale=locale)


@router.post("/booking/requests", response_model=UpdateResponse)
async def submit_request(
    body: RequestSubmission,
    service: AccountDep,
    token: UserTokenDep,
) -> UpdateResponse:
    booking = await service.add_request(token, body.request)
    return UpdateResponse(booking_id=booking.id, status="submitted")


@router.put("/booking/travellers", response_model=UpdateResponse)
async def update_travellers(
    body: TravellersUpdate,
    service: AccountDep,
    token: UserTokenDep,
) -> UpdateResponse:
    booking = await service.update_travellers(token, body.adults)
    return UpdateResponse(booking_id=booking.id, status="updated")


@router.post("/booking/extras-checkout", response_model=ExtrasCheckoutResponse)
async def extras_checkout(
    body: ExtrasSelection,
    service: AccountDep,
    token: UserTokenDep,
) -> ExtrasCheckoutResponse:
    if not service.checkout_enabled:
        raise HTTPException(status_code=503, detail="Stripe not configured")
    return await service.create_extras_checkout(
        token, body.optional_visits, locale=body.locale
    )
