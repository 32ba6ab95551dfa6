from app.mappers.locale import localized_number, localized_string
from app.schemas.booking import Booking
from app.schemas.responses import OptionalVisitOption, StagedOptionalTour
from app.schemas.sanity import TourPage


def _booked_pairs(booking: Booking) -> set[tuple[str, str]]:
    return {(t.cityID, t.visitID) for t in booking.optionalTours or []}


def list_optional_visits(
    tour: TourPage, booking: Booking, locale: str = "en"
) -> list[OptionalVisitOption]:
    if tour.payment is None:
        return []
    booked = _booked_pairs(booking)
    options: list[OptionalVisitOption] = []
    for city in tour.payment.extras:
        for visit in city.visits:
            options.append(
                OptionalVisitOption(
                    city_id=city.key,
                    city_name=localized_string(city.city_name, locale),
                    visit_id=visit.key,
                    visit_name=localized_string(visit.title, locale),
                    price=localized_number(
                        visit.price.discounted_price if visit.price else None, locale
                    ),
                    already_booked=(city.key, visit.key) in booked,
                )
            )
    return options


def stage_optional_tours(
    selection: dict[str, list[str]],
    tour: TourPage,
    booking: Booking,
    locale: str = "en",
) -> list[StagedOptionalTour]:
    """Resolve selected visit keys against the tour's extras.

    Unknown cities or visits are dropped, as are visits the booking already
    includes. Selection order is preserved.
    """
    if tour.payment is None:
        return []
    cities = {city.key: city for city in tour.payment.extras}
    booked = _booked_pairs(booking)
    staged: list[StagedOptionalTour] = []
    seen: set[tuple[str, str]] = set()

    for city_id, visit_ids in selection.items():
        city = cities.get(city_id)
        if city is None:
            continue
        visits = {visit.key: visit for visit in city.visits}
        for visit_id in visit_ids:
            if not visit_id:
                continue
            visit = visits.get(visit_id)
            pair = (city_id, visit_id)
            if visit is None or pair in booked or pair in seen:
                continue
            seen.add(pair)
            staged.append(
                StagedOptionalTour(
                    cityID=city_id,
                    visitID=visit_id,
                    cityName=localized_string(city.city_name, locale),
                    visitName=localized_string(visit.title, locale),
                    price=localized_number(
                        visit.price.discounted_price if visit.price else None, locale
                    ),
                )
            )
    return staged


def staged_total(staged: list[StagedOptionalTour]) -> float:
    return sum(tour.price for tour in staged)
