"""Cross-source comparison endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from hedera_recon.api.errors import error_response
from hedera_recon.api.params import transaction_filters
from hedera_recon.providers.base import TransactionFilter
from hedera_recon.reconciliation.service import ReconciliationService
from hedera_recon.reconciliation.setup import get_reconciliation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("/compare")
async def compare_transactions(
    filters: TransactionFilter = Depends(transaction_filters),
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> Any:
    """Compare DragonGlass and HGraph for one payer/memo/account filter.

    Returns DragonGlass's payload with a metadata.comparison block. Provider
    outages show up as *_success: false rather than an error status.
    """
    try:
        return await service.compare(filters)
    except Exception as e:
        logger.exception("Error in comparison endpoint")
        return error_response(500, str(e))
