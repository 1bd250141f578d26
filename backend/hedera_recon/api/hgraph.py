"""HGraph-only transaction endpoints."""

import logging
from typing import Any, Literal

from fastapi import APIRouter, Depends, Query

from hedera_recon.api.errors import error_response
from hedera_recon.api.params import hgraph_filters, transaction_filters
from hedera_recon.providers.base import TransactionFilter
from hedera_recon.reconciliation.service import ReconciliationService
from hedera_recon.reconciliation.setup import get_reconciliation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/hgraph", tags=["hgraph"])


@router.get("/transactions")
async def get_hgraph_transactions(
    filters: TransactionFilter = Depends(hgraph_filters),
    order_by: Literal["asc", "desc"] = Query("desc"),
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> Any:
    """HGraph's native payload, timestamps rendered exactly."""
    try:
        return await service.fetch_hgraph(filters, order_by=order_by)
    except Exception as e:
        logger.exception("Error fetching HGraph data")
        return error_response(500, str(e))


@router.get("/transactions/dg-format")
async def get_hgraph_transactions_reference(
    filters: TransactionFilter = Depends(transaction_filters),
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> Any:
    """HGraph's payload converted to the DragonGlass reference format."""
    try:
        return await service.fetch_hgraph_reference(filters)
    except Exception as e:
        logger.exception("Error converting HGraph data")
        return error_response(500, str(e))
