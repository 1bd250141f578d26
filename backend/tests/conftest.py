import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hedera_recon.health.setup import set_health_monitor
from hedera_recon.main import app
from hedera_recon.reconciliation.setup import (
    get_reconciliation_service,
    set_reconciliation_service,
)
from tests.factories import (
    COMMON_HASHES,
    HGRAPH_ONLY_HASHES,
    FakeProviders,
    make_dragonglass_tx,
    make_hgraph_tx,
)


@pytest.fixture
def hgraph_transactions():
    """Ten indexer transactions: the eight shared ones plus two indexer-only."""
    hashes = COMMON_HASHES + HGRAPH_ONLY_HASHES
    return [make_hgraph_tx(h, index=i) for i, h in enumerate(hashes)]


@pytest.fixture
def dragonglass_records():
    """Eight explorer records, all shared with the indexer."""
    return [make_dragonglass_tx(h, index=i) for i, h in enumerate(COMMON_HASHES)]


@pytest.fixture
def providers(dragonglass_records, hgraph_transactions):
    return FakeProviders(dragonglass_records, hgraph_transactions)


@pytest_asyncio.fixture
async def client(providers):
    """HTTP client whose reconciliation service talks to FakeProviders."""
    app.dependency_overrides[get_reconciliation_service] = providers.service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    set_reconciliation_service(None)
    set_health_monitor(None)
