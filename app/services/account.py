import logging

from app.exceptions.custom import BookingNotFoundError, CheckoutError, InvalidSelectionError
from app.mappers.account import build_summary, trip_information_sections
from app.mappers.extras import list_optional_visits, stage_optional_tours, staged_total
from app.mappers.travellers import adult_to_form, form_to_update_input
from app.schemas.booking import AdultForm, Booking
from app.schemas.responses import AccountBookingResponse, ExtrasCheckoutResponse
from app.services.booking import BookingService
from app.services.checkout import CheckoutService
from app.services.sanity import SanityService

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(
        self,
        booking: BookingService,
        sanity: SanityService,
        checkout: CheckoutService | None = None,
    ):
        self._booking = booking
        self._sanity = sanity
        self._checkout = checkout

    @property
    def checkout_enabled(self) -> bool:
        return self._checkout is not None

    async def get_upcoming_booking(self, token: str) -> Booking:
        bookings = await self._booking.get_user_bookings(token)
        if not bookings:
            raise BookingNotFoundError("No booking found for this account")
        return bookings[0]

    async def get_overview(self, token: str, locale: str = "en") -> AccountBookingResponse:
        booking = await self.get_upcoming_booking(token)
        tour = await self._sanity.fetch_tour_page(booking.tour)

        response = AccountBookingResponse(
            booking=booking,
            adults=[adult_to_form(a) for a in booking.adults],
            summary=build_summary(booking),
        )
        if tour is not None:
            response.hero = tour.hero_section
            response.sections = trip_information_sections(tour)
            response.optional_visits = list_optional_visits(tour, booking, locale)
        return response

    async def add_request(self, token: str, request: str) -> Booking:
        booking = await self.get_upcoming_booking(token)
        requests = [*(booking.requests or []), request]
        await self._booking.update_booking(
            token, {"id": booking.id, "requests": requests}
        )
        booking.requests = requests
        logger.info("Added request to booking %s (%d total)", booking.id, len(requests))
        return booking

    async def update_travellers(self, token: str, adults: list[AdultForm]) -> Booking:
        booking = await self.get_upcoming_booking(token)
        if len(adults) != len(booking.adults):
            raise InvalidSelectionError(
                f"Expected {len(booking.adults)} travellers, got {len(adults)}"
            )
        await self._booking.update_booking(
            token,
            {"id": booking.id, "adults": [form_to_update_input(a) for a in adults]},
        )
        return booking

    async def create_extras_checkout(
        self,
        token: str,
        selection: dict[str, list[str]],
        locale: str = "en",
    ) -> ExtrasCheckoutResponse:
        if self._checkout is None:
            raise CheckoutError("Stripe not configured", status_code=503)

        booking = await self.get_upcoming_booking(token)
        tour = await self._sanity.fetch_tour_page(booking.tour)
        if tour is None:
            raise BookingNotFoundError(f"Tour page '{booking.tour}' not found")

        staged = stage_optional_tours(selection, tour, booking, locale)
        if not staged:
            raise InvalidSelectionError("No new optional visits selected")

        url = await self._checkout.create_extras_session(booking.id, staged)
        return ExtrasCheckoutResponse(
            url=url,
            amount=staged_total(staged),
            staged_optional_tours=staged,
        )
