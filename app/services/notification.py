import logging

import httpx

from app.exceptions.custom import NotificationError, RateLimitError

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, client: httpx.AsyncClient, url: str):
        self._client = client
        self._url = url

    async def send(self, subject: str, text: str) -> None:
        resp = await self._client.post(
            self._url, json={"subject": subject, "text": text}
        )

        if resp.status_code == 429:
            raise RateLimitError("Notification")
        if resp.status_code >= 400:
            raise NotificationError(resp.text, status_code=resp.status_code)

        logger.info("Sent notification '%s'", subject)
