from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request

from app.config import Settings
from app.services.account import AccountService
from app.services.sanity import SanityService
from app.services.webhook import WebhookService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_webhook_service(request: Request) -> WebhookService:
    return request.app.state.webhook_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_sanity_service(request: Request) -> SanityService:
    return request.app.state.sanity_service


def get_user_token(authorization: Annotated[str | None, Header()] = None) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Not authenticated")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid authorization header")
    return token.strip()


SettingsDep = Annotated[Settings, Depends(get_settings)]
WebhookDep = Annotated[WebhookService, Depends(get_webhook_service)]
AccountDep = Annotated[AccountService, Depends(get_account_service)]
SanityDep = Annotated[SanityService, Depends(get_sanity_service)]
UserTokenDep = Annotated[str, Depends(get_user_token)]
