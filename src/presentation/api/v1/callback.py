"""Gateway callback (webhook) endpoint."""

import json
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, Response

from src.application.services import CallbackService
from src.core.dependencies import get_callback_service

logger = structlog.get_logger(__name__)

callback_router = APIRouter(prefix="/callback")


@callback_router.post(
    "",
    status_code=200,
    summary="Receive STK Push Callback",
    description="""
    Receives the asynchronous transaction result posted by the gateway.

    The payload is logged and always acknowledged with an empty 200.
    """,
    response_class=Response,
)
async def receive_callback(
    request: Request,
    callback_service: Annotated[CallbackService, Depends(get_callback_service)],
) -> Response:
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else None
    except (ValueError, RecursionError):
        payload = raw.decode("utf-8", errors="replace")

    # Acknowledged even when the payload cannot be summarised or logged
    try:
        callback_service.handle(payload)
    except Exception as e:
        logger.exception(
            "callback_handling_failed",
            error_type=type(e).__name__,
            body_bytes=len(raw),
        )

    return Response(status_code=200)
