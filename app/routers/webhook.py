import logging
from typing import Annotated

from fastapi import APIRouter, Header, Request
from fastapi.responses import PlainTextResponse

from app.dependencies import SettingsDep, WebhookDep
from app.exceptions.custom import WebhookSignatureError
from app.services.signature import verify_event

logger = logging.getLogger(__name__)

router = APIRouter()

ACKNOWLEDGEMENT = "payment confirmation route received"


@router.post("/api/webhook", response_class=PlainTextResponse)
async def payment_webhook(
    request: Request,
    service: WebhookDep,
    settings: SettingsDep,
    stripe_signature: Annotated[str | None, Header()] = None,
) -> PlainTextResponse:
    payload = await request.body()

    try:
        event = verify_event(
            payload,
            stripe_signature,
            settings.webhook_secret,
            tolerance=settings.webhook_tolerance,
        )
    except WebhookSignatureError as exc:
        logger.warning("Rejected webhook delivery: %s", exc.message)
        return PlainTextResponse(f"Webhook error: {exc.message}", status_code=400)

    outcome = await service.dispatch(event)
    logger.info("Webhook event %s processed: %s", event.id, outcome)
    return PlainTextResponse(ACKNOWLEDGEMENT, status_code=200)
