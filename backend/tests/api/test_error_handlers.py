"""Tests for app-level error responses."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from hedera_recon.config import settings
from hedera_recon.main import app
from hedera_recon.reconciliation.setup import get_reconciliation_service


@pytest.fixture
def failing_service():
    service = MagicMock()
    service.dashboard_status = AsyncMock(side_effect=RuntimeError("database of hashes exploded"))
    app.dependency_overrides[get_reconciliation_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


async def _get(path: str):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.get(path)


class TestNotFound:
    async def test_unknown_route(self, client):
        response = await client.get("/api/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Not found"
        assert body["message"] == "Route GET /api/nope not found"
        assert "timestamp" in body


class TestUnhandledError:
    async def test_returns_500_without_detail(self, failing_service, monkeypatch):
        monkeypatch.setattr(settings, "debug", False)

        response = await _get("/api/dashboard/status")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Internal server error"
        assert "exploded" not in body["message"]

    async def test_debug_exposes_message(self, failing_service, monkeypatch):
        monkeypatch.setattr(settings, "debug", True)

        response = await _get("/api/dashboard/status")

        assert response.status_code == 500
        assert response.json()["message"] == "database of hashes exploded"
