from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from app.schemas.booking import AdultForm, Booking, OptionalTour
from app.schemas.sanity import HeroSection, Section


class BookingSummary(BaseModel):
    travellers: int
    price: float
    price_per_traveller: float
    paid: float
    remaining: float
    date_from: str | None = None
    date_to: str | None = None


class OptionalVisitOption(BaseModel):
    city_id: str
    city_name: str
    visit_id: str
    visit_name: str
    price: float
    already_booked: bool = False


class AccountBookingResponse(BaseModel):
    booking: Booking
    adults: list[AdultForm]
    summary: BookingSummary
    hero: HeroSection | None = None
    sections: list[Section] = []
    optional_visits: list[OptionalVisitOption] = []


class RequestSubmission(BaseModel):
    request: str = Field(min_length=1)


class TravellersUpdate(BaseModel):
    adults: list[AdultForm] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_required_fields(self) -> TravellersUpdate:
        for i, adult in enumerate(self.adults):
            if adult.dob is None:
                raise ValueError(f"adults.{i}.dob is required")
            if not adult.nationality:
                raise ValueError(f"adults.{i}.nationality is required")
        lead = self.adults[0]
        if lead.phone is None or not lead.phone.code or not lead.phone.number:
            raise ValueError("adults.0.phone is required")
        return self


class ExtrasSelection(BaseModel):
    optional_visits: dict[str, list[str]]
    locale: str = "en"


class StagedOptionalTour(OptionalTour):
    cityName: str
    visitName: str
    price: float


class ExtrasCheckoutResponse(BaseModel):
    url: str
    amount: float
    staged_optional_tours: list[StagedOptionalTour]


class UpdateResponse(BaseModel):
    booking_id: str
    status: str
