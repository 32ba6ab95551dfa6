from pydantic import BaseModel, ConfigDict

CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"


class EventData(BaseModel):
    object: dict


class StripeEvent(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    data: EventData
    livemode: bool = False


class CheckoutSession(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    metadata: dict[str, str] | None = None
    amount_total: int | None = None
    payment_status: str | None = None

    @property
    def booking_id(self) -> str | None:
        return (self.metadata or {}).get("booking") or None
