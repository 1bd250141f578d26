"""Reconciliation data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ComparisonStatus(str, Enum):
    """Overall agreement between the two sources."""

    MATCH = "match"
    DISCREPANCY_DETECTED = "discrepancy_detected"


class SourceStatus(str, Enum):
    """Reachability of a provider as seen by the dashboard."""

    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class Discrepancies:
    """Hash set differences between DragonGlass and HGraph.

    Counts are raw list lengths, so duplicate hashes in a source show up as a
    count larger than the number of distinct hashes.
    """

    missing_in_dragonglass: list[str]  # HGraph has, DragonGlass doesn't
    missing_in_hgraph: list[str]  # DragonGlass has, HGraph doesn't
    dragonglass_count: int
    hgraph_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "missing_in_dragonglass": self.missing_in_dragonglass,
            "missing_in_hgraph": self.missing_in_hgraph,
            "dragonglass_count": self.dragonglass_count,
            "hgraph_count": self.hgraph_count,
        }


@dataclass
class ComparisonResult:
    """Result of comparing two hash lists."""

    status: ComparisonStatus
    discrepancies: Discrepancies | None

    @property
    def is_match(self) -> bool:
        return self.status == ComparisonStatus.MATCH

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "discrepancies": self.discrepancies.to_dict() if self.discrepancies else None,
        }
