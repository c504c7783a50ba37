"""
STK Relay - Main Application Entry Point

Relays STK Push payment requests to the M-Pesa Daraja API and
acknowledges the gateway's asynchronous result callbacks.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import Settings, load_settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Open the shared outbound HTTP client
    - Close it on shutdown
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    app.state.http_client = httpx.AsyncClient(timeout=settings.gateway_timeout)

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        gateway=settings.daraja_base_url,
        shortcode=settings.business_shortcode,
    )

    yield

    await app.state.http_client.aclose()
    logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an explicit Settings object.

    Credentials are captured once here and handed to request handlers
    through dependencies.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="STK Relay",
        description="M-Pesa STK Push relay and callback receiver",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.credentials = settings.credentials()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)

    app.include_router(api_router)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to API documentation."""

        return RedirectResponse(url="/docs")

    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
