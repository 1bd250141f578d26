"""Health monitoring initialization."""

from hedera_recon.config import Settings, settings
from hedera_recon.health.checkers import ProviderHealthChecker
from hedera_recon.health.monitor import HealthMonitor
from hedera_recon.providers.base import TransactionFilter
from hedera_recon.providers.dragonglass import DragonGlassClient
from hedera_recon.providers.hgraph import HGraphClient

_health_monitor: HealthMonitor | None = None


def build_health_monitor(config: Settings = settings) -> HealthMonitor:
    """Create a monitor probing both providers with the dashboard filter triple."""
    probe = TransactionFilter(
        payer_id=config.dashboard_payer_id,
        query=config.dashboard_query,
        account_from=config.dashboard_account_from,
    )
    clients = [
        DragonGlassClient(
            base_url=config.dragonglass_url,
            timeout_seconds=config.provider_timeout_seconds,
            cache_seconds=config.dragonglass_cache_seconds,
        ),
        # A single row is enough to prove the indexer answers
        HGraphClient(
            url=config.hgraph_url,
            timeout_seconds=config.provider_timeout_seconds,
            limit=1,
        ),
    ]
    probe_timeout = config.provider_timeout_seconds * 2
    return HealthMonitor(
        checkers=[
            ProviderHealthChecker(client, probe, timeout_seconds=probe_timeout)
            for client in clients
        ]
    )


def get_health_monitor() -> HealthMonitor:
    """Get the global health monitor, creating it on first use."""
    global _health_monitor
    if _health_monitor is None:
        _health_monitor = build_health_monitor()
    return _health_monitor


def set_health_monitor(monitor: HealthMonitor | None) -> None:
    """Replace the global health monitor. Used for testing."""
    global _health_monitor
    _health_monitor = monitor
