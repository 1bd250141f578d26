"""Mapping of HGraph transactions into the DragonGlass reference format.

DragonGlass already serves the reference format, so only HGraph payloads
pass through here.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from hedera_recon.providers.base import HGRAPH

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
SUCCESS_RESULT_CODE = 22
HASH_ESCAPE_PREFIX = "\\x"  # Postgres bytea hex output, e.g. "\x1a2b..."

# HGraph results are only ever synthesized as crypto transfers, whatever the
# underlying transaction type.
TRANSACTION_TYPE = "CRYPTO_TRANSFER"
KNOWN_LABEL = "CryptoTransfer"
TYPE_LABEL = "Crypto Transfer"
SERVICE_TYPE = "CRYPTO"


def empty_reference_envelope() -> dict[str, Any]:
    return {
        "size": 0,
        "totalCount": 0,
        "data": [],
        "facets": {
            "transactionTypes": {},
            "payerID": {},
            "serviceTypes": {},
        },
        "mapping": None,
    }


def strip_hash_prefix(transaction_hash: str) -> str:
    """Remove the binary escape prefix if present. Idempotent."""
    while transaction_hash.startswith(HASH_ESCAPE_PREFIX):
        transaction_hash = transaction_hash[len(HASH_ESCAPE_PREFIX) :]
    return transaction_hash


def entity_id(num: int | str) -> str:
    return f"0.0.{num}"


def split_nanos(timestamp_ns: int | str) -> tuple[int, int]:
    """Split a nanosecond timestamp into (seconds, nanoseconds)."""
    return divmod(int(timestamp_ns), NANOS_PER_SECOND)


def nanos_to_iso(timestamp_ns: int | str) -> str:
    """Format a nanosecond epoch timestamp as ISO-8601 UTC with 9 fractional digits."""
    seconds, nanos = split_nanos(timestamp_ns)
    whole = datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{whole}.{nanos:09d}Z"


def readable_transaction_id(payer_account_id: int, valid_start_ns: int | str) -> str:
    """Hedera transaction ID form ``0.0.<payer>@<seconds>.<nanos>``, nanos zero-padded to 9."""
    seconds, nanos = split_nanos(valid_start_ns)
    return f"0.0.{payer_account_id}@{seconds}.{nanos:09d}"


def node_fee(transfers: list[dict[str, Any]], node_account: str) -> int:
    """Amount credited to the node account, 0 if there is none."""
    for transfer in transfers:
        if transfer["accountID"] == node_account and transfer["amount"] > 0:
            return transfer["amount"]
    return 0


def canonicalize_transaction(tx: dict[str, Any]) -> dict[str, Any]:
    """Convert one raw HGraph transaction to a reference-format record."""
    payer = int(tx["payer_account_id"])
    valid_start_ns = str(tx["valid_start_ns"])
    node_account = entity_id(tx["node_account_id"])

    transfers = [
        {"accountID": entity_id(t["entity_id"]), "amount": int(t["amount"])}
        for t in tx.get("crypto_transfer") or []
    ]

    transaction_fee = int(tx["charged_tx_fee"])
    node_fees = node_fee(transfers, node_account)

    return {
        "transactionID": f"{payer:08d}{valid_start_ns}",
        "readableTransactionID": readable_transaction_id(payer, valid_start_ns),
        "transactionHash": strip_hash_prefix(tx.get("transaction_hash") or ""),
        "payerID": entity_id(payer),
        "startTime": nanos_to_iso(valid_start_ns),
        "nodeID": node_account,
        "consensusTime": nanos_to_iso(tx["consensus_timestamp"]),
        "transactionFee": transaction_fee,
        "nodeFees": node_fees,
        "networkFees": transaction_fee - node_fees,
        "transfers": transfers,
        "status": "SUCCESS" if tx.get("result") == SUCCESS_RESULT_CODE else "FAILED",
        # Mirrors the explorer's current output: the charged fee, not a transfer sum
        "amount": transaction_fee,
        "memo": tx.get("decoded_memo") or "",
        "transactionType": TRANSACTION_TYPE,
        "knownLabel": KNOWN_LABEL,
        "typeLabel": TYPE_LABEL,
        "serviceType": SERVICE_TYPE,
        "source": HGRAPH,
    }


def build_facets(records: list[dict[str, Any]]) -> dict[str, dict[str, int]]:
    payer_counts: dict[str, int] = {}
    for record in records:
        payer_counts[record["payerID"]] = payer_counts.get(record["payerID"], 0) + 1

    return {
        "transactionTypes": {TRANSACTION_TYPE: len(records)},
        "payerID": payer_counts,
        "serviceTypes": {SERVICE_TYPE: len(records)},
    }


def transform_hgraph_to_dragonglass(hgraph_data: dict[str, Any] | None) -> dict[str, Any]:
    """Convert an HGraph ``{"transaction": [...]}`` payload to a reference envelope.

    Args:
        hgraph_data: Precision-fixed HGraph payload

    Returns:
        ``{size, totalCount, data, facets, mapping}``; the zero-value envelope
        when the transaction list is absent or not a list. Records that cannot
        be converted are logged and left out.
    """
    transactions = (hgraph_data or {}).get("transaction")
    if not isinstance(transactions, list):
        return empty_reference_envelope()

    records: list[dict[str, Any]] = []
    for index, tx in enumerate(transactions):
        try:
            records.append(canonicalize_transaction(tx))
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Skipping malformed HGraph transaction at index {index}: {e!r}")

    return {
        "size": len(records),
        "totalCount": len(records),
        "data": records,
        "facets": build_facets(records),
        "mapping": None,
    }
