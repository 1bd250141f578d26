"""Reconciliation service initialization.

Usage:
    from hedera_recon.reconciliation.setup import get_reconciliation_service

    service = get_reconciliation_service()
    report = await service.compare(filters)
"""

import logging

from hedera_recon.config import Settings, settings
from hedera_recon.providers.dragonglass import DragonGlassClient
from hedera_recon.providers.hgraph import HGraphClient
from hedera_recon.reconciliation.service import ReconciliationService

logger = logging.getLogger(__name__)

_service: ReconciliationService | None = None


def build_reconciliation_service(config: Settings = settings) -> ReconciliationService:
    """Create a service with both provider clients configured from settings."""
    dragonglass = DragonGlassClient(
        base_url=config.dragonglass_url,
        timeout_seconds=config.provider_timeout_seconds,
        cache_seconds=config.dragonglass_cache_seconds,
    )
    hgraph = HGraphClient(
        url=config.hgraph_url,
        timeout_seconds=config.provider_timeout_seconds,
        limit=config.hgraph_limit,
    )
    return ReconciliationService(dragonglass=dragonglass, hgraph=hgraph)


def init_reconciliation_service(config: Settings = settings) -> ReconciliationService:
    """Build the global service instance and return it."""
    global _service
    _service = build_reconciliation_service(config)
    logger.info(
        f"Reconciliation service initialized: dragonglass={config.dragonglass_url} "
        f"hgraph={config.hgraph_url} timeout={config.provider_timeout_seconds}s"
    )
    return _service


def get_reconciliation_service() -> ReconciliationService:
    """Get the global service instance, creating it on first use."""
    global _service
    if _service is None:
        _service = build_reconciliation_service()
    return _service


def set_reconciliation_service(service: ReconciliationService | None) -> None:
    """Replace the global service instance. Used for testing."""
    global _service
    _service = service
