"""Tests for ReconciliationService."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from hedera_recon.providers.base import ProviderResult, TransactionFilter
from hedera_recon.providers.dragonglass import empty_envelope
from hedera_recon.reconciliation.service import ReconciliationService
from tests.factories import (
    COMMON_HASHES,
    HGRAPH_ONLY_HASHES,
    dragonglass_envelope,
    make_dragonglass_tx,
    make_hgraph_tx,
)


@pytest.fixture
def filters():
    return TransactionFilter(payer_id=26027, query="kpay.live", account_from=657983)


def _mock_client(result: ProviderResult):
    client = MagicMock()
    client.source = result.source
    client.fetch_transactions = AsyncMock(return_value=result)
    return client


def _dragonglass_ok(hashes):
    records = [make_dragonglass_tx(h, index=i) for i, h in enumerate(hashes)]
    return ProviderResult(success=True, source="dragonglass", data=dragonglass_envelope(records))


def _hgraph_ok(hashes):
    txs = [make_hgraph_tx(h, index=i) for i, h in enumerate(hashes)]
    return ProviderResult(success=True, source="hgraphio", data={"transaction": txs})


class TestCompare:
    async def test_scenario_indexer_has_two_extra(self, providers, filters):
        """10 indexer vs 8 explorer transactions, 8 shared."""
        report = await providers.service().compare(filters)

        comparison = report["metadata"]["comparison"]
        assert comparison["status"] == "discrepancy_detected"
        assert comparison["discrepancies"]["missing_in_dragonglass"] == sorted(HGRAPH_ONLY_HASHES)
        assert comparison["discrepancies"]["missing_in_hgraph"] == []
        assert comparison["discrepancies"]["dragonglass_count"] == 8
        assert comparison["discrepancies"]["hgraph_count"] == 10
        assert comparison["dragonglass_success"] is True
        assert comparison["hgraphio_success"] is True
        assert comparison["sources_called"] == ["dragonglass", "hgraphio"]

        additional = report["metadata"]["additional_hgraph_data"]
        assert additional["size"] == 10
        assert all(record["source"] == "hgraphio" for record in additional["data"])

    async def test_primary_payload_comes_from_dragonglass(self, providers, filters):
        report = await providers.service().compare(filters)

        assert report["size"] == 8
        assert report["totalCount"] == 8
        assert report["mapping"] is None
        assert report["facets"] == {"transactionTypes": {"CRYPTO_TRANSFER": 8}}
        assert len(report["data"]) == 8
        assert all(record["source"] == "dragonglass" for record in report["data"])

    async def test_canonical_hashes_reported(self, providers, filters):
        report = await providers.service().compare(filters)

        hashes = report["metadata"]["comparison"]["canonical_hashes"]
        assert hashes["dragonglass"] == sorted(COMMON_HASHES)
        assert hashes["hgraphio"] == sorted(COMMON_HASHES + HGRAPH_ONLY_HASHES)

    async def test_identical_sets_match(self, filters):
        service = ReconciliationService(
            dragonglass=_mock_client(_dragonglass_ok(COMMON_HASHES)),
            hgraph=_mock_client(_hgraph_ok(list(reversed(COMMON_HASHES)))),
        )

        report = await service.compare(filters)

        comparison = report["metadata"]["comparison"]
        assert comparison["status"] == "match"
        assert comparison["discrepancies"] is None
        assert "additional_hgraph_data" not in report["metadata"]

    async def test_case_difference_is_not_a_discrepancy(self, filters):
        service = ReconciliationService(
            dragonglass=_mock_client(_dragonglass_ok([h.upper() for h in COMMON_HASHES])),
            hgraph=_mock_client(_hgraph_ok(COMMON_HASHES)),
        )

        report = await service.compare(filters)

        assert report["metadata"]["comparison"]["status"] == "match"

    async def test_dragonglass_outage_degrades(self, providers, filters):
        providers.dragonglass_error = httpx.ConnectError("Connection refused")

        report = await providers.service().compare(filters)

        comparison = report["metadata"]["comparison"]
        assert report["data"] == []
        assert report["size"] == 0
        assert comparison["dragonglass_success"] is False
        assert comparison["hgraphio_success"] is True
        assert comparison["canonical_hashes"]["hgraphio"] == sorted(
            COMMON_HASHES + HGRAPH_ONLY_HASHES
        )
        assert "Connection refused" in comparison["errors"]["dragonglass"]
        assert comparison["errors"]["hgraphio"] is None

    async def test_both_down_is_a_match_of_nothing(self, filters):
        service = ReconciliationService(
            dragonglass=_mock_client(
                ProviderResult(False, "dragonglass", empty_envelope(), "down")
            ),
            hgraph=_mock_client(ProviderResult(False, "hgraphio", {"transaction": []}, "down")),
        )

        report = await service.compare(filters)

        comparison = report["metadata"]["comparison"]
        assert comparison["status"] == "match"
        assert comparison["dragonglass_success"] is False
        assert comparison["hgraphio_success"] is False

    async def test_both_calls_in_flight_together(self, filters):
        """Neither provider call waits for the other to finish."""
        started: list[str] = []
        both_started = asyncio.Event()

        def _slow(result):
            async def fetch(_filters):
                started.append(result.source)
                if len(started) == 2:
                    both_started.set()
                await asyncio.wait_for(both_started.wait(), timeout=1.0)
                return result

            client = MagicMock()
            client.fetch_transactions = fetch
            return client

        service = ReconciliationService(
            dragonglass=_slow(_dragonglass_ok(COMMON_HASHES)),
            hgraph=_slow(_hgraph_ok(COMMON_HASHES)),
        )

        report = await service.compare(filters)

        assert sorted(started) == ["dragonglass", "hgraphio"]
        assert report["metadata"]["comparison"]["status"] == "match"

    async def test_clients_receive_filters(self, filters):
        dragonglass = _mock_client(_dragonglass_ok([]))
        hgraph = _mock_client(_hgraph_ok([]))
        service = ReconciliationService(dragonglass=dragonglass, hgraph=hgraph)

        await service.compare(filters)

        dragonglass.fetch_transactions.assert_awaited_once_with(filters)
        hgraph.fetch_transactions.assert_awaited_once_with(filters)


class TestHGraphViews:
    async def test_fetch_hgraph_returns_native_payload(self, providers, filters):
        payload = await providers.service().fetch_hgraph(filters)

        assert len(payload["transaction"]) == 10
        first = payload["transaction"][0]
        assert first["consensus_timestamp"] == "1700000002623456789"
        assert first["transaction_hash"].startswith("\\x")
        assert payload["metadata"]["source"] == "hgraphio"
        assert payload["metadata"]["success"] is True
        assert payload["metadata"]["filters"] == {
            "payerID": 26027,
            "query": "kpay.live",
            "accountFrom": 657983,
        }

    async def test_fetch_hgraph_reference_is_canonical(self, providers, filters):
        payload = await providers.service().fetch_hgraph_reference(filters, order_by="asc")

        assert payload["size"] == 10
        assert payload["data"][0]["readableTransactionID"] == "0.0.26027@1700000000.123456789"
        assert payload["metadata"]["format"] == "dragonglass"
        assert payload["metadata"]["order_by"] == "asc"

    async def test_fetch_hgraph_failure_is_reported_in_metadata(self, providers, filters):
        providers.hgraph_status = 500

        payload = await providers.service().fetch_hgraph(filters)

        assert payload["transaction"] == []
        assert payload["metadata"]["success"] is False
        assert "500" in payload["metadata"]["error"]


class TestDashboardStatus:
    async def test_bug_detected_when_dragonglass_misses_records(self, providers, filters):
        status = await providers.service().dashboard_status(filters)

        assert status["bug_detected"] is True
        assert status["sources"]["dragonglass"]["status"] == "online"
        assert status["sources"]["hgraphio"]["status"] == "online"
        assert status["sources"]["dragonglass"]["transaction_count"] == 8
        assert status["sources"]["hgraphio"]["transaction_count"] == 10
        assert status["comparison"]["status"] == "discrepancy_detected"
        assert status["comparison"]["missing_in_dragonglass_count"] == 2
        assert status["comparison"]["missing_in_hgraph_count"] == 0

    async def test_no_bug_when_only_hgraph_misses_records(self, filters):
        service = ReconciliationService(
            dragonglass=_mock_client(_dragonglass_ok(COMMON_HASHES)),
            hgraph=_mock_client(_hgraph_ok(COMMON_HASHES[:6])),
        )

        status = await service.dashboard_status(filters)

        assert status["comparison"]["status"] == "discrepancy_detected"
        assert status["bug_detected"] is False

    async def test_offline_source_reported(self, providers, filters):
        providers.hgraph_error = httpx.ConnectError("unreachable")

        status = await providers.service().dashboard_status(filters)

        assert status["sources"]["hgraphio"]["status"] == "offline"
        assert "unreachable" in status["sources"]["hgraphio"]["error"]
        assert status["sources"]["dragonglass"]["status"] == "online"
        # DragonGlass has records HGraph lacks, which is not the bug being watched
        assert status["bug_detected"] is False
