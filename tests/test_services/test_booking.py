import json

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import BookingServiceError, RateLimitError
from app.services.booking import BookingService

GRAPHQL_URL = "https://backend.test/graphql"


BOOKING_PAYLOAD = {
    "_id": "b-1",
    "tour": "classic-japan",
    "email": "ana@example.com",
    "requests": ["Vegetarian meals"],
    "from": "2024-04-01",
    "to": "2024-04-12",
    "paid": 1000,
    "price": 4000,
    "optionalTours": [{"cityID": "kyoto", "visitID": "tea"}],
    "adults": [
        {
            "name": {"designation": "Ms", "firstName": "Ana", "middleName": None, "lastName": "Diaz"},
            "email": "ana@example.com",
            "address": None,
            "dob": "631152000000",
            "nationality": "ES",
            "phone": {"code": "+34", "number": "600000000"},
            "passportNumber": "X123",
            "passportExpiry": "1893456000000",
            "additionalInformation": None,
            "additionalTravellers": None,
        }
    ],
}


@respx.mock
@pytest.mark.asyncio
async def test_complete_booking_sends_id_and_key():
    route = respx.post(GRAPHQL_URL).mock(
        return_value=Response(200, json={"data": {"completeBooking": True}})
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        await service.complete_booking("b-1", "secret")

    assert route.call_count == 1
    body = json.loads(route.calls.last.request.content)
    assert "completeBooking(booking: $id, token: $key)" in body["query"]
    assert body["variables"] == {"id": "b-1", "key": "secret"}
    assert "Authorization" not in route.calls.last.request.headers


@respx.mock
@pytest.mark.asyncio
async def test_graphql_errors_raise():
    respx.post(GRAPHQL_URL).mock(
        return_value=Response(
            200, json={"data": None, "errors": [{"message": "Invalid token"}]}
        )
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        with pytest.raises(BookingServiceError) as exc_info:
            await service.complete_booking("b-1", "wrong")

    assert "Invalid token" in exc_info.value.message


@respx.mock
@pytest.mark.asyncio
async def test_http_error_raises_with_status():
    respx.post(GRAPHQL_URL).mock(return_value=Response(500, text="server error"))

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        with pytest.raises(BookingServiceError) as exc_info:
            await service.complete_booking("b-1", "secret")

    assert exc_info.value.status_code == 500


@respx.mock
@pytest.mark.asyncio
async def test_rate_limit():
    respx.post(GRAPHQL_URL).mock(return_value=Response(429))

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        with pytest.raises(RateLimitError):
            await service.complete_booking("b-1", "secret")


@respx.mock
@pytest.mark.asyncio
async def test_get_user_bookings_forwards_token():
    route = respx.post(GRAPHQL_URL).mock(
        return_value=Response(
            200, json={"data": {"user": {"bookings": [BOOKING_PAYLOAD]}}}
        )
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        bookings = await service.get_user_bookings("user-token")

    assert route.calls.last.request.headers["Authorization"] == "Bearer user-token"
    assert len(bookings) == 1
    booking = bookings[0]
    assert booking.id == "b-1"
    assert booking.from_ == "2024-04-01"
    assert booking.adults[0].name.firstName == "Ana"
    assert booking.optionalTours[0].visitID == "tea"


@respx.mock
@pytest.mark.asyncio
async def test_get_user_bookings_without_user():
    respx.post(GRAPHQL_URL).mock(
        return_value=Response(200, json={"data": {"user": None}})
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        bookings = await service.get_user_bookings("user-token")

    assert bookings == []


@respx.mock
@pytest.mark.asyncio
async def test_update_booking_sends_input():
    route = respx.post(GRAPHQL_URL).mock(
        return_value=Response(200, json={"data": {"updateBooking": True}})
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        await service.update_booking("user-token", {"id": "b-1", "requests": ["a"]})

    body = json.loads(route.calls.last.request.content)
    assert "updateBooking(booking: $booking)" in body["query"]
    assert body["variables"] == {"booking": {"id": "b-1", "requests": ["a"]}}


@respx.mock
@pytest.mark.asyncio
async def test_network_error_wrapped():
    respx.post(GRAPHQL_URL).mock(side_effect=httpx.ConnectError("down"))

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        with pytest.raises(BookingServiceError) as exc_info:
            await service.complete_booking("b-1", "secret")

    assert "ConnectError" in exc_info.value.message
    assert exc_info.value.status_code is None


@respx.mock
@pytest.mark.asyncio
async def test_non_json_response_wrapped():
    respx.post(GRAPHQL_URL).mock(
        return_value=Response(200, text="<html>gateway</html>")
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(client, GRAPHQL_URL)
        with pytest.raises(BookingServiceError) as exc_info:
            await service.complete_booking("b-1", "secret")

    assert "Invalid JSON response" in exc_info.value.message
    assert exc_info.value.status_code == 200
