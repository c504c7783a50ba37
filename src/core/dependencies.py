"""Dependency injection for FastAPI."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from src.core.config import Settings
from src.domain.entities import Credentials
from src.infrastructure.clients import HttpDarajaClient
from src.application.services import CallbackService, StkPushService


# Application state dependencies
def get_settings(request: Request) -> Settings:
    """Get the Settings the application was constructed with."""
    return request.app.state.settings


def get_credentials(request: Request) -> Credentials:
    """Get the merchant credentials captured at startup."""
    return request.app.state.credentials


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared outbound HTTP client opened in the app lifespan."""
    return request.app.state.http_client


# External client dependencies
def get_gateway_client(
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[Credentials, Depends(get_credentials)],
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> HttpDarajaClient:
    """Get a PaymentGatewayClient instance."""
    return HttpDarajaClient(
        credentials=credentials,
        http_client=http_client,
        base_url=settings.daraja_base_url,
    )


# Service dependencies
def get_stk_push_service(
    gateway_client: Annotated[HttpDarajaClient, Depends(get_gateway_client)],
) -> StkPushService:
    """Get a StkPushService instance."""
    return StkPushService(gateway_client=gateway_client)


def get_callback_service() -> CallbackService:
    """Get a CallbackService instance."""
    return CallbackService()
