"""HGraph indexer client (GraphQL over the Hedera mirror-node schema)."""

import logging
from decimal import Decimal
from typing import Any, Literal

import httpx

from hedera_recon.providers.base import HGRAPH, ProviderResult, TransactionFilter
from hedera_recon.providers.precision import fix_precision

logger = logging.getLogger(__name__)

OrderBy = Literal["asc", "desc"]

# Fixed document; every caller-supplied value is bound through a variable.
TRANSACTIONS_QUERY = """
query TransactionsByPayerMemoAndTransfer(
  $payerAccountId: bigint!
  $memoPattern: String!
  $transferEntityId: bigint!
  $orderBy: order_by!
  $limit: Int
) {
  transaction(
    where: {
      payer_account_id: { _eq: $payerAccountId }
      decoded_memo: { _ilike: $memoPattern }
      crypto_transfer: { entity_id: { _eq: $transferEntityId } }
    }
    order_by: { consensus_timestamp: $orderBy }
    limit: $limit
  ) {
    consensus_timestamp
    payer_account_id
    result
    charged_tx_fee
    decoded_memo
    type
    transaction_hash
    node_account_id
    valid_start_ns
    max_fee
    valid_duration_seconds
    crypto_transfer {
      entity_id
      amount
    }
    token_transfer {
      token_id
      account_id
      amount
    }
  }
}
"""


def empty_payload() -> dict[str, Any]:
    """An HGraph transaction query result with no records."""
    return {"transaction": []}


def memo_pattern(text: str) -> str:
    """Build an ``_ilike`` pattern matching ``text`` as a literal substring."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class HGraphClient:
    """Queries the HGraph GraphQL indexer for transactions.

    Issues exactly one POST per call. Successful payloads are passed through
    fix_precision before being returned.
    """

    source = HGRAPH

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 5.0,
        limit: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            timeout_seconds: Timeout for the whole request (default: 5.0 seconds)
            limit: Default row cap, None for unbounded
            transport: Optional httpx transport, used by tests
        """
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.limit = limit
        self._transport = transport

    def build_request(
        self,
        filters: TransactionFilter,
        order_by: OrderBy = "desc",
        limit: int | None = None,
    ) -> dict[str, Any]:
        return {
            "query": TRANSACTIONS_QUERY,
            "variables": {
                "payerAccountId": filters.payer_id,
                "memoPattern": memo_pattern(filters.query),
                "transferEntityId": filters.account_from,
                "orderBy": order_by,
                "limit": limit if limit is not None else self.limit,
            },
        }

    async def fetch_transactions(
        self,
        filters: TransactionFilter,
        order_by: OrderBy = "desc",
        limit: int | None = None,
    ) -> ProviderResult:
        """Fetch transactions from HGraph.

        Args:
            filters: Payer, memo substring and transfer account filters
            order_by: Consensus timestamp ordering (default: newest first)
            limit: Row cap for this call, overrides the client default

        Returns:
            ProviderResult with the precision-fixed ``data`` member on success,
            or success=False with an empty transaction list on any failure
        """
        body = self.build_request(filters, order_by=order_by, limit=limit)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(self.url, json=body)
                response.raise_for_status()
                result = response.json(parse_float=Decimal)
        except httpx.TimeoutException:
            return self._failure(f"Request timed out after {self.timeout_seconds}s")
        except httpx.HTTPStatusError as e:
            return self._failure(f"HGraph API responded with status: {e.response.status_code}")
        except httpx.RequestError as e:
            return self._failure(f"Request failed: {e}")
        except ValueError as e:
            return self._failure(f"Invalid JSON response: {e}")
        except Exception as e:
            return self._failure(str(e))

        if not isinstance(result, dict):
            return self._failure("Unexpected response shape")

        data = result.get("data")
        if not isinstance(data, dict):
            errors = result.get("errors") or []
            if errors and isinstance(errors[0], dict) and errors[0].get("message"):
                return self._failure(f"GraphQL error: {errors[0]['message']}")
            return self._failure("Response has no data")

        if result.get("errors"):
            logger.warning(f"HGraph returned partial data with errors: {result['errors']}")

        return ProviderResult(success=True, source=self.source, data=fix_precision(data))

    def _failure(self, message: str) -> ProviderResult:
        logger.warning(f"HGraph fetch failed: {message}")
        return ProviderResult(
            success=False,
            source=self.source,
            data=empty_payload(),
            error=message,
        )
