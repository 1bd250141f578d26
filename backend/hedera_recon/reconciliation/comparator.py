"""Set comparison of transaction hash lists."""

from hedera_recon.reconciliation.models import (
    ComparisonResult,
    ComparisonStatus,
    Discrepancies,
)


def compare_hashes(dragonglass_hashes: list[str], hgraph_hashes: list[str]) -> ComparisonResult:
    """Compare DragonGlass hashes against HGraph hashes.

    Args:
        dragonglass_hashes: Sorted hashes reported by DragonGlass
        hgraph_hashes: Sorted hashes reported by HGraph

    Returns:
        MATCH with no discrepancies when both hash sets are equal, otherwise
        DISCREPANCY_DETECTED with both set differences and the raw list lengths
    """
    dragonglass_set = set(dragonglass_hashes)
    hgraph_set = set(hgraph_hashes)

    missing_in_dragonglass = sorted(hgraph_set - dragonglass_set)
    missing_in_hgraph = sorted(dragonglass_set - hgraph_set)

    if not missing_in_dragonglass and not missing_in_hgraph:
        return ComparisonResult(status=ComparisonStatus.MATCH, discrepancies=None)

    return ComparisonResult(
        status=ComparisonStatus.DISCREPANCY_DETECTED,
        discrepancies=Discrepancies(
            missing_in_dragonglass=missing_in_dragonglass,
            missing_in_hgraph=missing_in_hgraph,
            dragonglass_count=len(dragonglass_hashes),
            hgraph_count=len(hgraph_hashes),
        ),
    )
