from datetime import date, datetime, timezone

from app.schemas.booking import Adult, AdultForm


def millis_to_date(value: str | None) -> date | None:
    """Convert the backend's epoch-millisecond string to a calendar date (UTC).

    Unparseable values map to None rather than failing the whole booking.
    """
    if value is None or value == "":
        return None
    try:
        millis = int(value)
    except ValueError:
        # Some records hold ISO strings instead of timestamps
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError):
        return None


def adult_to_form(adult: Adult) -> AdultForm:
    data = adult.model_dump()
    data["dob"] = millis_to_date(adult.dob)
    data["passportExpiry"] = millis_to_date(adult.passportExpiry)
    return AdultForm(**data)


def form_to_update_input(adult: AdultForm) -> dict:
    data = adult.model_dump(exclude_none=True)
    if adult.dob:
        data["dob"] = adult.dob.isoformat()
    if adult.passportExpiry:
        data["passportExpiry"] = adult.passportExpiry.isoformat()
    return data
