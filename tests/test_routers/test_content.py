import respx
from httpx import AsyncClient, Response

SANITY_URL = "https://proj123.api.sanity.io/v2023-05-03/data/query/production"


@respx.mock
async def test_get_tour_page(client: AsyncClient):
    respx.get(SANITY_URL).mock(
        return_value=Response(
            200,
            json={
                "result": {
                    "_id": "tour-1",
                    "_type": "tour_page",
                    "slug": {"current": "classic-japan"},
                    "sections": [{"_key": "s", "_type": "pricing_section", "price": {"en": 999}}],
                }
            },
        )
    )

    resp = await client.get("/content/tours/classic-japan")

    assert resp.status_code == 200
    data = resp.json()
    assert data["_id"] == "tour-1"
    assert data["sections"][0]["price"] == {"en": 999}


@respx.mock
async def test_get_tour_page_not_found(client: AsyncClient):
    respx.get(SANITY_URL).mock(return_value=Response(200, json={"result": None}))

    resp = await client.get("/content/tours/missing")

    assert resp.status_code == 404


@respx.mock
async def test_get_globals(client: AsyncClient):
    respx.get(SANITY_URL).mock(
        return_value=Response(200, json={"result": {"_id": "globals", "navbar": {"links": []}}})
    )

    resp = await client.get("/content/globals")

    assert resp.status_code == 200
    assert resp.json()["navbar"] == {"links": []}


@respx.mock
async def test_cms_error_maps_to_502(client: AsyncClient):
    respx.get(SANITY_URL).mock(return_value=Response(500, text="oops"))

    resp = await client.get("/content/globals")

    assert resp.status_code == 502
