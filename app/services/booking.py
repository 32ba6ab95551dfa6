import logging

import httpx

from app.exceptions.custom import BookingServiceError, RateLimitError
from app.schemas.booking import Booking

logger = logging.getLogger(__name__)

COMPLETE_BOOKING_MUTATION = """
mutation UpdateBookingPayment($id: String!, $key: String!) {
  completeBooking(booking: $id, token: $key)
}
"""

UPDATE_BOOKING_MUTATION = """
mutation UpdateBooking($booking: UpdateBookingInput!) {
  updateBooking(booking: $booking)
}
"""

USER_BOOKINGS_QUERY = """
query Bookings {
  user {
    bookings {
      _id
      tour
      email
      requests
      from
      to
      paid
      price
      optionalTours {
        cityID
        visitID
      }
      adults {
        name {
          designation
          firstName
          middleName
          lastName
        }
        email
        address {
          line1
          town
          state
          country
        }
        dob
        nationality
        phone {
          code
          number
        }
        passportNumber
        passportExpiry
        additionalInformation
        additionalTravellers
      }
    }
  }
}
"""


class BookingService:
    """Client for the booking backend's GraphQL API."""

    def __init__(self, client: httpx.AsyncClient, graphql_url: str):
        self._client = client
        self._url = graphql_url

    async def _execute(
        self,
        query: str,
        variables: dict | None = None,
        token: str | None = None,
    ) -> dict:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            resp = await self._client.post(
                self._url,
                json={"query": query, "variables": variables or {}},
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise BookingServiceError(f"{type(exc).__name__}: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Booking service")
        if resp.status_code >= 400:
            raise BookingServiceError(resp.text, status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError as exc:
            raise BookingServiceError(
                f"Invalid JSON response: {resp.text[:200]}", status_code=resp.status_code
            ) from exc
        if not isinstance(body, dict):
            raise BookingServiceError("Unexpected response shape", status_code=resp.status_code)
        if body.get("errors"):
            messages = "; ".join(e.get("message", "unknown error") for e in body["errors"])
            raise BookingServiceError(messages, status_code=resp.status_code)
        return body.get("data") or {}

    async def complete_booking(self, booking_id: str, key: str) -> None:
        await self._execute(
            COMPLETE_BOOKING_MUTATION, {"id": booking_id, "key": key}
        )
        logger.info("Marked booking %s as paid", booking_id)

    async def update_booking(self, token: str, booking: dict) -> None:
        await self._execute(UPDATE_BOOKING_MUTATION, {"booking": booking}, token=token)
        logger.info("Updated booking %s", booking.get("id"))

    async def get_user_bookings(self, token: str) -> list[Booking]:
        data = await self._execute(USER_BOOKINGS_QUERY, token=token)
        user = data.get("user") or {}
        bookings = [Booking(**b) for b in user.get("bookings") or []]
        logger.info("Fetched %d bookings for current user", len(bookings))
        return bookings
