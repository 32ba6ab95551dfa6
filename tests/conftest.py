import hashlib
import hmac
import time

import httpx
import pytest
from httpx import ASGITransport

WEBHOOK_SECRET = "whsec_test_secret"
BACKEND_SECRET = "backend-secret"
GRAPHQL_URL = "https://backend.test/graphql"
NOTIFICATION_URL = "https://site.test/api/email"
SANITY_URL = "https://proj123.api.sanity.io/v2023-05-03/data/query/production"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("WEBHOOK_SECRET", WEBHOOK_SECRET)
    monkeypatch.setenv("BACKEND_SECRET", BACKEND_SECRET)
    monkeypatch.setenv("GRAPHQL_URL", GRAPHQL_URL)
    monkeypatch.setenv("NOTIFICATION_URL", NOTIFICATION_URL)
    monkeypatch.setenv("SANITY_PROJECT_ID", "proj123")
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_123")
    monkeypatch.setenv("SITE_URL", "https://site.test")


@pytest.fixture
def sign_payload():
    """Build a Stripe-Signature header value for a payload."""

    def _sign(payload: str, secret: str = WEBHOOK_SECRET, timestamp: int | None = None) -> str:
        ts = timestamp if timestamp is not None else int(time.time())
        signed = f"{ts}.{payload}".encode("utf-8")
        digest = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
        return f"t={ts},v1={digest}"

    return _sign


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
