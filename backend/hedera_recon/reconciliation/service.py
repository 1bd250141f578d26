"""Reconciliation service comparing DragonGlass against HGraph."""

import asyncio
import logging
import time
from typing import Any

from hedera_recon.core.clock import utc_now_iso
from hedera_recon.providers.base import DRAGONGLASS, HGRAPH, ProviderResult, TransactionFilter
from hedera_recon.providers.dragonglass import DragonGlassClient
from hedera_recon.providers.hgraph import HGraphClient, OrderBy
from hedera_recon.reconciliation.canonical import transform_hgraph_to_dragonglass
from hedera_recon.reconciliation.comparator import compare_hashes
from hedera_recon.reconciliation.hashes import extract_hashes
from hedera_recon.reconciliation.models import ComparisonStatus, SourceStatus

logger = logging.getLogger(__name__)


class ReconciliationService:
    """
    Fetches the same transactions from both providers and reports which
    hashes either one is missing.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, dragonglass: DragonGlassClient, hgraph: HGraphClient):
        self._dragonglass = dragonglass
        self._hgraph = hgraph

    async def compare(self, filters: TransactionFilter) -> dict[str, Any]:
        """
        Compare both providers for one filter triple.

        DragonGlass data is the primary payload. HGraph's canonical records are
        attached under metadata.additional_hgraph_data when a discrepancy exists.
        """
        start_time = time.perf_counter()

        # Both calls in flight together; clients never raise
        dragonglass_result, hgraph_result = await asyncio.gather(
            self._dragonglass.fetch_transactions(filters),
            self._hgraph.fetch_transactions(filters),
        )

        hgraph_reference = transform_hgraph_to_dragonglass(hgraph_result.data)

        dragonglass_hashes = extract_hashes(dragonglass_result.data, DRAGONGLASS)
        hgraph_hashes = extract_hashes(hgraph_result.data, HGRAPH)

        comparison = compare_hashes(dragonglass_hashes, hgraph_hashes)

        primary = dragonglass_result.data
        records = primary.get("data")
        tagged = self._tag_records(records) if isinstance(records, list) else []

        metadata: dict[str, Any] = {
            "comparison": {
                **comparison.to_dict(),
                "sources_called": [DRAGONGLASS, HGRAPH],
                "dragonglass_success": dragonglass_result.success,
                "hgraphio_success": hgraph_result.success,
                "canonical_hashes": {
                    DRAGONGLASS: dragonglass_hashes,
                    HGRAPH: hgraph_hashes,
                },
                "errors": {
                    DRAGONGLASS: dragonglass_result.error,
                    HGRAPH: hgraph_result.error,
                },
            },
            "timestamp": utc_now_iso(),
        }

        if not comparison.is_match and comparison.discrepancies is not None:
            metadata["additional_hgraph_data"] = hgraph_reference
            for missing in comparison.discrepancies.missing_in_dragonglass:
                logger.warning(f"Transaction missing in DragonGlass: {missing}")
            for missing in comparison.discrepancies.missing_in_hgraph:
                logger.warning(f"Transaction missing in HGraph: {missing}")

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Comparison payerID={filters.payer_id} accountFrom={filters.account_from} "
            f"status={comparison.status.value} dragonglass={len(dragonglass_hashes)} "
            f"hgraph={len(hgraph_hashes)} duration_ms={duration_ms:.1f}"
        )

        return {**primary, "data": tagged, "metadata": metadata}

    async def fetch_hgraph(
        self, filters: TransactionFilter, order_by: OrderBy = "desc"
    ) -> dict[str, Any]:
        """HGraph's native (precision-fixed) payload with a metadata block."""
        result = await self._hgraph.fetch_transactions(filters, order_by=order_by)
        return {**result.data, "metadata": self._source_metadata(result, filters, order_by)}

    async def fetch_hgraph_reference(
        self, filters: TransactionFilter, order_by: OrderBy = "desc"
    ) -> dict[str, Any]:
        """HGraph's payload converted to the DragonGlass reference format."""
        result = await self._hgraph.fetch_transactions(filters, order_by=order_by)
        reference = transform_hgraph_to_dragonglass(result.data)
        metadata = self._source_metadata(result, filters, order_by)
        metadata["format"] = "dragonglass"
        return {**reference, "metadata": metadata}

    async def dashboard_status(self, filters: TransactionFilter) -> dict[str, Any]:
        """Summarize source availability and agreement for one filter triple."""
        report = await self.compare(filters)
        comparison = report["metadata"]["comparison"]
        discrepancies = comparison["discrepancies"]
        hashes = comparison["canonical_hashes"]

        missing_in_dragonglass = discrepancies["missing_in_dragonglass"] if discrepancies else []
        missing_in_hgraph = discrepancies["missing_in_hgraph"] if discrepancies else []
        bug_detected = (
            comparison["status"] == ComparisonStatus.DISCREPANCY_DETECTED.value
            and len(missing_in_dragonglass) > 0
        )

        return {
            "timestamp": utc_now_iso(),
            "filters": filters.as_dict(),
            "sources": {
                DRAGONGLASS: self._source_summary(
                    comparison["dragonglass_success"],
                    len(hashes[DRAGONGLASS]),
                    comparison["errors"][DRAGONGLASS],
                ),
                HGRAPH: self._source_summary(
                    comparison["hgraphio_success"],
                    len(hashes[HGRAPH]),
                    comparison["errors"][HGRAPH],
                ),
            },
            "comparison": {
                "status": comparison["status"],
                "missing_in_dragonglass_count": len(missing_in_dragonglass),
                "missing_in_hgraph_count": len(missing_in_hgraph),
                "discrepancies": discrepancies,
            },
            "bug_detected": bug_detected,
        }

    @staticmethod
    def _tag_records(records: list[Any]) -> list[dict[str, Any]]:
        tagged: list[dict[str, Any]] = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed DragonGlass record at index {index}")
                continue
            tagged.append({**record, "source": DRAGONGLASS})
        return tagged

    @staticmethod
    def _source_summary(success: bool, count: int, error: str | None) -> dict[str, Any]:
        return {
            "status": (SourceStatus.ONLINE if success else SourceStatus.OFFLINE).value,
            "transaction_count": count,
            "error": error,
        }

    @staticmethod
    def _source_metadata(
        result: ProviderResult, filters: TransactionFilter, order_by: OrderBy
    ) -> dict[str, Any]:
        return {
            "source": result.source,
            "success": result.success,
            "error": result.error,
            "filters": filters.as_dict(),
            "order_by": order_by,
            "timestamp": utc_now_iso(),
        }
