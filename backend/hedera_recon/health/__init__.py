"""Provider health monitoring package."""

from hedera_recon.health.checkers import HealthChecker, ProviderHealthChecker
from hedera_recon.health.models import ComponentStatus, HealthStatus, SystemHealth
from hedera_recon.health.monitor import HealthMonitor

__all__ = [
    "ComponentStatus",
    "HealthChecker",
    "HealthMonitor",
    "HealthStatus",
    "ProviderHealthChecker",
    "SystemHealth",
]
