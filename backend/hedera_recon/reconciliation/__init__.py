"""Cross-source reconciliation package."""

from hedera_recon.reconciliation.canonical import transform_hgraph_to_dragonglass
from hedera_recon.reconciliation.comparator import compare_hashes
from hedera_recon.reconciliation.hashes import clean_hash, extract_hashes
from hedera_recon.reconciliation.models import (
    ComparisonResult,
    ComparisonStatus,
    Discrepancies,
    SourceStatus,
)
from hedera_recon.reconciliation.service import ReconciliationService

# Note: setup is intentionally not exported here; it imports settings at
# module load. Import directly from hedera_recon.reconciliation.setup.

__all__ = [
    "ComparisonResult",
    "ComparisonStatus",
    "Discrepancies",
    "ReconciliationService",
    "SourceStatus",
    "clean_hash",
    "compare_hashes",
    "extract_hashes",
    "transform_hgraph_to_dragonglass",
]
