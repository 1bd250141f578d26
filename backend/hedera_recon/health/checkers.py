"""Health checks for transaction data providers."""

import asyncio
import time
from datetime import datetime, timezone
from typing import Protocol

from hedera_recon.health.models import ComponentStatus, HealthStatus
from hedera_recon.providers.base import ProviderClient, TransactionFilter


class HealthChecker(Protocol):
    """Protocol for health checkers."""

    async def check(self) -> HealthStatus:
        """Perform health check and return status."""
        ...


class ProviderHealthChecker:
    """Probes a provider by running one real query against it."""

    def __init__(
        self,
        client: ProviderClient,
        probe: TransactionFilter,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with a provider client.

        Args:
            client: Provider client to probe
            probe: Filter triple used for the probe query
            timeout_seconds: Upper bound on the probe, on top of the client's own timeout
        """
        self._client = client
        self._probe = probe
        self._timeout = timeout_seconds

    async def check(self) -> HealthStatus:
        """Run the probe query.

        Returns:
            HEALTHY with latency if the provider answered, DOWN with the
            provider's error otherwise
        """
        component = self._client.source
        start = time.perf_counter()
        try:
            result = await asyncio.wait_for(
                self._client.fetch_transactions(self._probe), timeout=self._timeout
            )
        except TimeoutError:
            return HealthStatus(
                component=component,
                status=ComponentStatus.DOWN,
                latency_ms=None,
                last_check=datetime.now(tz=timezone.utc),
                message="Health check timeout",
            )

        if not result.success:
            return HealthStatus(
                component=component,
                status=ComponentStatus.DOWN,
                latency_ms=None,
                last_check=datetime.now(tz=timezone.utc),
                message=result.error,
            )

        return HealthStatus(
            component=component,
            status=ComponentStatus.HEALTHY,
            latency_ms=(time.perf_counter() - start) * 1000,
            last_check=datetime.now(tz=timezone.utc),
            message=None,
        )
