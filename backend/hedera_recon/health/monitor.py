"""Aggregation of provider health checks."""

import asyncio
from collections.abc import Sequence
from datetime import datetime, timezone

from hedera_recon.health.checkers import HealthChecker
from hedera_recon.health.models import ComponentStatus, HealthStatus, SystemHealth


class HealthMonitor:
    """Runs all provider checks concurrently and derives an overall status."""

    def __init__(self, checkers: Sequence[HealthChecker]) -> None:
        self._checkers = list(checkers)

    async def check_all(self) -> SystemHealth:
        results = await asyncio.gather(
            *[checker.check() for checker in self._checkers],
            return_exceptions=True,
        )

        statuses: list[HealthStatus] = []
        for result in results:
            if isinstance(result, Exception):
                statuses.append(
                    HealthStatus(
                        component="unknown",
                        status=ComponentStatus.DOWN,
                        latency_ms=None,
                        last_check=datetime.now(tz=timezone.utc),
                        message=f"Checker error: {result}",
                    )
                )
            else:
                statuses.append(result)

        return SystemHealth(
            overall_status=self._overall_status(statuses),
            components=statuses,
            checked_at=datetime.now(tz=timezone.utc),
        )

    @staticmethod
    def _overall_status(statuses: list[HealthStatus]) -> ComponentStatus:
        """HEALTHY if none down, DOWN if all down, DEGRADED in between."""
        if not statuses:
            return ComponentStatus.UNKNOWN

        down_count = sum(1 for s in statuses if s.status == ComponentStatus.DOWN)
        if down_count == 0:
            return ComponentStatus.HEALTHY
        if down_count == len(statuses):
            return ComponentStatus.DOWN
        return ComponentStatus.DEGRADED
