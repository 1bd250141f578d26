"""Health API endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from hedera_recon.config import settings
from hedera_recon.core.clock import utc_now_iso
from hedera_recon.health.models import ComponentStatus
from hedera_recon.health.monitor import HealthMonitor
from hedera_recon.health.setup import get_health_monitor

router = APIRouter(prefix="/api/health", tags=["health"])

ENDPOINTS = [
    "GET /api/health",
    "GET /api/health/detailed",
    "GET /api/transactions/compare?payerID=&query=&accountFrom=",
    "GET /api/hgraph/transactions?payerID=&query=&accountFrom=",
    "GET /api/hgraph/transactions/dg-format?payerID=&query=&accountFrom=",
    "GET /api/dashboard/status",
]


class HealthResponse(BaseModel):
    """Response for the liveness check."""

    status: str
    timestamp: str
    version: str
    endpoints: list[str]


class ProviderHealthResponse(BaseModel):
    """Response for single provider health."""

    component: str
    status: str
    latency_ms: float | None
    last_check: datetime
    message: str | None


class SystemHealthResponse(BaseModel):
    """Response for aggregate provider health."""

    overall_status: str
    components: list[ProviderHealthResponse]
    checked_at: datetime


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
        version=settings.version,
        endpoints=ENDPOINTS,
    )


@router.get("/detailed", response_model=SystemHealthResponse)
async def get_detailed_health(
    response: Response,
    monitor: HealthMonitor = Depends(get_health_monitor),
) -> SystemHealthResponse:
    """Probe both providers.

    Returns 200 if all are healthy, 503 if any is down.
    """
    health = await monitor.check_all()

    if health.overall_status != ComponentStatus.HEALTHY:
        response.status_code = 503

    return SystemHealthResponse(
        overall_status=health.overall_status.value,
        components=[
            ProviderHealthResponse(
                component=c.component,
                status=c.status.value,
                latency_ms=c.latency_ms,
                last_check=c.last_check,
                message=c.message,
            )
            for c in health.components
        ],
        checked_at=health.checked_at,
    )
