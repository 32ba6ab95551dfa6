import json
import logging

import httpx

from app.exceptions.custom import RateLimitError, SanityError
from app.schemas.sanity import Globals, TourPage

logger = logging.getLogger(__name__)

QUERY_URL = "https://{project_id}.api.sanity.io/v{api_version}/data/query/{dataset}"

TOUR_PAGE_QUERY = """*[_type == "tour_page" && slug.current == $slug][0]{
  ...,
  destination->,
  sections[] {
    ...,
    _type == "featured_tours_section" => {
      ...,
      tour_cards[] {
        ...,
        content->
      }
    },
    _type == "tour_selection_section" => {
      ...,
      tags[]->
    },
    _type == "pricing_section" => {
      ...,
      "weekly_schedule": ^.timeline.timeline,
      "disabled": ^.timeline.disabled,
      "price_overrides": ^.price_overrides,
      "price": ^.overview_card.price,
    },
    _type == "memorable_experiences_section" => {
      ...,
      experience_cards[]->
    }
  }
}"""

GLOBALS_QUERY = '*[_type == "globals"][0]{..., navbar{..., links[]->}, footer}'


def build_query_url(project_id: str, dataset: str, api_version: str) -> str:
    return QUERY_URL.format(
        project_id=project_id, api_version=api_version.lstrip("v"), dataset=dataset
    )


class SanityService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        project_id: str,
        dataset: str,
        api_version: str,
        token: str = "",
    ):
        self._client = client
        self._url = build_query_url(project_id, dataset, api_version)
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    async def _query(self, query: str, params: dict | None = None):
        query_params = {"query": query}
        # GROQ parameters travel as JSON-encoded "$name" query arguments
        for name, value in (params or {}).items():
            query_params[f"${name}"] = json.dumps(value)

        resp = await self._client.get(
            self._url, params=query_params, headers=self._headers
        )

        if resp.status_code == 429:
            raise RateLimitError("Sanity")
        if resp.status_code >= 400:
            raise SanityError(resp.text, status_code=resp.status_code)

        return resp.json().get("result")

    async def fetch_tour_page(self, slug: str) -> TourPage | None:
        result = await self._query(TOUR_PAGE_QUERY, {"slug": slug})
        if not result:
            logger.warning("No tour page found for slug '%s'", slug)
            return None
        return TourPage(**result)

    async def fetch_globals(self) -> Globals | None:
        result = await self._query(GLOBALS_QUERY)
        if not result:
            return None
        return Globals(**result)
