from pydantic import BaseModel, ConfigDict, Field

# CMS locale objects look like {"_type": "locale_string", "en": "...", "es": "..."}
LocaleValue = dict | str | float | int | None


class SanityDocument(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Section(SanityDocument):
    key: str | None = Field(default=None, alias="_key")
    type: str = Field(alias="_type")


class VisitPrice(SanityDocument):
    initial_price: LocaleValue = None
    discounted_price: LocaleValue = None


class Visit(SanityDocument):
    key: str = Field(alias="_key")
    title: LocaleValue = None
    price: VisitPrice | None = None


class CityExtras(SanityDocument):
    key: str = Field(alias="_key")
    city_name: LocaleValue = None
    visits: list[Visit] = []


class TourPayment(SanityDocument):
    extras: list[CityExtras] = []


class HeroSection(SanityDocument):
    image: dict | None = None
    title: LocaleValue = None


class TourPage(SanityDocument):
    id: str | None = Field(default=None, alias="_id")
    slug: dict | None = None
    hero_section: HeroSection | None = None
    sections: list[Section] = []
    payment: TourPayment | None = None


class Globals(SanityDocument):
    id: str | None = Field(default=None, alias="_id")
