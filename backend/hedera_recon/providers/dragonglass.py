"""DragonGlass explorer client (REST, reference record format)."""

import logging
from typing import Any

import httpx

from hedera_recon.providers.base import DRAGONGLASS, ProviderResult, TransactionFilter

logger = logging.getLogger(__name__)


def empty_envelope() -> dict[str, Any]:
    """A DragonGlass list response with no records."""
    return {"size": 0, "totalCount": 0, "data": [], "facets": {}, "mapping": None}


class DragonGlassClient:
    """Queries the DragonGlass explorer for transactions.

    Issues exactly one GET per call. Filters are sent as URL-encoded query
    parameters alongside a cache hint.
    """

    source = DRAGONGLASS

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        cache_seconds: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Explorer endpoint URL
            timeout_seconds: Timeout for the whole request (default: 5.0 seconds)
            cache_seconds: Cache hint forwarded to the explorer
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.cache_seconds = cache_seconds
        self._transport = transport

    def build_params(self, filters: TransactionFilter) -> dict[str, Any]:
        return {
            "cacheSeconds": self.cache_seconds,
            "endpoint": "transactions",
            "payerID": f"0.0.{filters.payer_id}",
            "accountFrom": f"0.0.{filters.account_from}",
            "query": filters.query,
        }

    async def fetch_transactions(self, filters: TransactionFilter) -> ProviderResult:
        """Fetch transactions from DragonGlass.

        Returns:
            ProviderResult with the parsed body on 2xx, or success=False with an
            empty envelope on any failure
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(self.base_url, params=self.build_params(filters))
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException:
            return self._failure(f"Request timed out after {self.timeout_seconds}s")
        except httpx.HTTPStatusError as e:
            return self._failure(
                f"DragonGlass API responded with status: {e.response.status_code}"
            )
        except httpx.RequestError as e:
            return self._failure(f"Request failed: {e}")
        except ValueError as e:
            return self._failure(f"Invalid JSON response: {e}")
        except Exception as e:
            return self._failure(str(e))

        if not isinstance(data, dict):
            return self._failure("Unexpected response shape")

        return ProviderResult(success=True, source=self.source, data=data)

    def _failure(self, message: str) -> ProviderResult:
        logger.warning(f"DragonGlass fetch failed: {message}")
        return ProviderResult(
            success=False,
            source=self.source,
            data=empty_envelope(),
            error=message,
        )
