from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class AdultName(BaseModel):
    designation: str | None = None
    firstName: str
    middleName: str | None = None
    lastName: str


class Phone(BaseModel):
    code: str | None = None
    number: str | None = None


class Address(BaseModel):
    line1: str | None = None
    town: str | None = None
    state: str | None = None
    country: str | None = None


class Adult(BaseModel):
    name: AdultName
    email: str | None = None
    address: Address | None = None
    dob: str  # epoch milliseconds, as stored by the backend
    nationality: str | None = None
    phone: Phone | None = None
    passportNumber: str | None = None
    passportExpiry: str | None = None  # epoch milliseconds
    additionalInformation: str | None = None
    additionalTravellers: int | None = None


class OptionalTour(BaseModel):
    cityID: str
    visitID: str


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    tour: str
    email: str | None = None
    requests: list[str] | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    price: float = 0.0
    paid: float = 0.0
    optionalTours: list[OptionalTour] | None = None
    adults: list[Adult] = []


class AdultForm(BaseModel):
    """Traveller data as entered in the account form (dates as YYYY-MM-DD)."""

    name: AdultName
    email: str | None = None
    address: Address | None = None
    dob: date | None = None
    nationality: str | None = None
    phone: Phone | None = None
    passportNumber: str | None = None
    passportExpiry: date | None = None
    additionalInformation: str | None = None
    additionalTravellers: int | None = None
