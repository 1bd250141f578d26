"""Dashboard status endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from hedera_recon.config import settings
from hedera_recon.providers.base import TransactionFilter
from hedera_recon.reconciliation.service import ReconciliationService
from hedera_recon.reconciliation.setup import get_reconciliation_service

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def dashboard_filters() -> TransactionFilter:
    return TransactionFilter(
        payer_id=settings.dashboard_payer_id,
        query=settings.dashboard_query,
        account_from=settings.dashboard_account_from,
    )


@router.get("/status")
async def get_dashboard_status(
    filters: TransactionFilter = Depends(dashboard_filters),
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> dict[str, Any]:
    """Source availability and agreement for the watched filter triple.

    bug_detected is true when DragonGlass is missing transactions HGraph has.
    """
    return await service.dashboard_status(filters)
