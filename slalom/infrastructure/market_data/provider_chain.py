"""
Provider chain - try primary, then fallbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from slalom.domain.models import AssetSnapshot
from slalom.infrastructure.market_data.types import MarketDataProvider, SnapshotLookupMixin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedProvider:
    name: str
    provider: MarketDataProvider


class ChainedMarketDataProvider(SnapshotLookupMixin):
    def __init__(self, providers: List[NamedProvider]):
        if not providers:
            raise ValueError("Provider chain needs at least one provider")
        self.providers = providers
        self.last_source: Optional[str] = None

    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        for named in self.providers:
            try:
                data = await named.provider.get_all_snapshots()
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("Market data provider %s failed: %s", named.name, exc)
                continue
            if data:
                self.last_source = named.name
                return data
            logger.info("Market data provider %s returned no coins", named.name)
        self.last_source = None
        return []
