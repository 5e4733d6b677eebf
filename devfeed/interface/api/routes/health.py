"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from devfeed.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


class CORSDebugResponse(BaseModel):
    """CORS debugging information."""

    origin: str | None
    allowed_origins: list[str]
    origin_allowed: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        environment=settings.environment,
    )


@router.get("/health/cors", response_model=CORSDebugResponse)
async def cors_debug(request: Request, settings: FromDishka[Settings]) -> CORSDebugResponse:
    """Report whether the calling origin is on the CORS allow list."""
    origin = request.headers.get("origin")
    return CORSDebugResponse(
        origin=origin,
        allowed_origins=settings.cors_origins,
        origin_allowed=origin in settings.cors_origins,
    )
