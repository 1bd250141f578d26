"""Provider client interface and the success/failure envelope they return."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

DRAGONGLASS = "dragonglass"
HGRAPH = "hgraphio"


@dataclass(frozen=True)
class TransactionFilter:
    """The three scalar filters every provider query is parameterized by.

    Attributes:
        payer_id: Payer account number (the ``<n>`` in ``0.0.<n>``)
        query: Memo substring to match, case-insensitively
        account_from: Account number that must appear in the crypto transfers
    """

    payer_id: int
    query: str
    account_from: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "payerID": self.payer_id,
            "query": self.query,
            "accountFrom": self.account_from,
        }


@dataclass
class ProviderResult:
    """Outcome of a single provider call.

    ``data`` always has the provider's normal response shape, even on failure,
    so callers never branch on shape.

    Attributes:
        success: Whether the call returned a usable payload
        source: Source tag of the provider ("dragonglass" or "hgraphio")
        data: Parsed payload, or the provider's empty payload on failure
        error: Error message if the call failed
    """

    success: bool
    source: str
    data: dict[str, Any]
    error: str | None = None


@runtime_checkable
class ProviderClient(Protocol):
    """
    Interface for transaction data providers.

    Implementations:
    - DragonGlassClient: REST explorer, already in reference format
    - HGraphClient: GraphQL indexer over the mirror-node schema

    fetch_transactions must never raise: every failure is returned as a
    ProviderResult with success=False.
    """

    source: str

    async def fetch_transactions(self, filters: TransactionFilter) -> ProviderResult:
        """Fetch transactions matching the filters."""
        ...
