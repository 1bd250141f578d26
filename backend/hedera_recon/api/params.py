"""Query parameter parsing for the transaction endpoints.

Validation happens here, before any provider is called.
"""

from fastapi import Query

from hedera_recon.api.errors import (
    INVALID_PARAMETERS,
    MISSING_PARAMETERS,
    FilterValidationError,
)
from hedera_recon.providers.base import TransactionFilter


def _account_number(value: str) -> int:
    """Parse ``26027`` or ``0.0.26027`` into 26027."""
    text = value.strip()
    if text.startswith("0.0."):
        text = text[len("0.0.") :]
    if not (text.isascii() and text.isdigit()):
        raise FilterValidationError(INVALID_PARAMETERS)
    return int(text)


def parse_filters(
    payer_id: str | None, query: str | None, account_from: str | None
) -> TransactionFilter:
    values = (payer_id, query, account_from)
    if any(value is None or not value.strip() for value in values):
        raise FilterValidationError(MISSING_PARAMETERS)

    return TransactionFilter(
        payer_id=_account_number(payer_id),
        query=query,
        account_from=_account_number(account_from),
    )


def transaction_filters(
    payer_id: str | None = Query(None, alias="payerID"),
    query: str | None = Query(None),
    account_from: str | None = Query(None, alias="accountFrom"),
) -> TransactionFilter:
    """Dependency reading payerID, query and accountFrom."""
    return parse_filters(payer_id, query, account_from)


def hgraph_filters(
    payer_id: str | None = Query(None, alias="payerID"),
    query: str | None = Query(None),
    account_from: str | None = Query(None, alias="accountFrom"),
    payer_account_id: str | None = Query(None),
    decoded_memo: str | None = Query(None),
    crypto_transfer_entity_id: str | None = Query(None),
) -> TransactionFilter:
    """Like transaction_filters, also accepting the indexer's own column names."""
    return parse_filters(
        payer_account_id or payer_id,
        decoded_memo or query,
        crypto_transfer_entity_id or account_from,
    )
