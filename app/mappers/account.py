from app.schemas.booking import Booking
from app.schemas.responses import BookingSummary
from app.schemas.sanity import Section, TourPage

TRIP_INFORMATION_SECTIONS = (
    "whats_included_section",
    "itinerary_section",
    "memorable_experiences_section",
    "faq_section",
)


def trip_information_sections(tour: TourPage) -> list[Section]:
    return [s for s in tour.sections if s.type in TRIP_INFORMATION_SECTIONS]


def build_summary(booking: Booking) -> BookingSummary:
    travellers = len(booking.adults)
    per_traveller = booking.price / travellers if travellers else booking.price
    return BookingSummary(
        travellers=travellers,
        price=booking.price,
        price_per_traveller=round(per_traveller, 2),
        paid=booking.paid,
        remaining=booking.price - booking.paid,
        date_from=booking.from_,
        date_to=booking.to,
    )
