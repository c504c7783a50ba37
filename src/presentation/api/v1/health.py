"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src import __version__
from src.core.config import Settings
from src.core.dependencies import get_settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service. Does not contact the gateway.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    return HealthResponse(status="healthy", service=settings.app_name, version=__version__)
