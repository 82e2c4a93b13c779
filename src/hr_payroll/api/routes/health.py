"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel

from hr_payroll.api.dependencies import AppSettings, Events

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    events_recorded: int


class InfoResponse(BaseModel):
    """Application info response."""

    name: str
    version: str
    default_currency: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(events: Events) -> HealthResponse:
    """Check API health."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        events_recorded=len(events),
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}


@router.get("/api/info", response_model=InfoResponse)
async def app_info(settings: AppSettings) -> InfoResponse:
    return InfoResponse(
        name=settings.app_name,
        version=settings.app_version,
        default_currency=settings.default_currency,
    )
