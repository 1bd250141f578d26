"""Provider health models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ComponentStatus(str, Enum):
    """Status of a monitored provider."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass
class HealthStatus:
    """Health of a single provider.

    Attributes:
        component: Provider source tag (dragonglass, hgraphio)
        status: Current status
        latency_ms: Round-trip time of the probe, None if it failed
        last_check: When the probe ran
        message: Error detail for failed probes
    """

    component: str
    status: ComponentStatus
    latency_ms: float | None
    last_check: datetime
    message: str | None


@dataclass
class SystemHealth:
    """Aggregate health across all providers."""

    overall_status: ComponentStatus
    components: list[HealthStatus]
    checked_at: datetime
