"""Reduction of provider payloads to sorted transaction hash lists."""

import logging
from typing import Any

from hedera_recon.providers.base import DRAGONGLASS, HGRAPH
from hedera_recon.reconciliation.canonical import strip_hash_prefix

logger = logging.getLogger(__name__)

# (list key, hash key) per source's native payload shape
_HASH_LOCATIONS: dict[str, tuple[str, str]] = {
    DRAGONGLASS: ("data", "transactionHash"),
    HGRAPH: ("transaction", "transaction_hash"),
}


def clean_hash(transaction_hash: str) -> str:
    """Normalize a hash for comparison: no escape prefix, lower case."""
    return strip_hash_prefix(transaction_hash.strip()).lower()


def extract_hashes(payload: dict[str, Any] | None, source: str) -> list[str]:
    """Return the sorted, cleaned transaction hashes of a provider payload.

    Args:
        payload: DragonGlass envelope or HGraph ``{"transaction": [...]}`` payload
        source: Source tag selecting where hashes live in the payload

    Returns:
        Sorted hash list; empty for an unknown source or missing list
    """
    location = _HASH_LOCATIONS.get(source)
    if location is None or not payload:
        return []

    list_key, hash_key = location
    records = payload.get(list_key)
    if not isinstance(records, list):
        return []

    hashes: list[str] = []
    for record in records:
        value = record.get(hash_key) if isinstance(record, dict) else None
        if not isinstance(value, str) or not value:
            logger.warning(f"Skipping {source} record without a transaction hash")
            continue
        hashes.append(clean_hash(value))

    return sorted(hashes)
