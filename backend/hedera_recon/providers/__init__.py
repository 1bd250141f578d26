"""Transaction data provider clients."""

from hedera_recon.providers.base import (
    DRAGONGLASS,
    HGRAPH,
    ProviderClient,
    ProviderResult,
    TransactionFilter,
)
from hedera_recon.providers.dragonglass import DragonGlassClient
from hedera_recon.providers.hgraph import HGraphClient
from hedera_recon.providers.precision import fix_precision

__all__ = [
    "DRAGONGLASS",
    "DragonGlassClient",
    "HGRAPH",
    "HGraphClient",
    "ProviderClient",
    "ProviderResult",
    "TransactionFilter",
    "fix_precision",
]
