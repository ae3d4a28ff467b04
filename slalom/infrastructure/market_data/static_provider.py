"""
Static market data provider backed by config/market_universe.yml.
"""

from __future__ import annotations

import logging
from typing import List

from slalom.domain.models import AssetSnapshot
from slalom.domain.services.config_engine import MarketUniverse
from slalom.infrastructure.market_data.feed import snapshot_from_feed
from slalom.infrastructure.market_data.types import SnapshotLookupMixin

logger = logging.getLogger(__name__)


class StaticMarketDataProvider(SnapshotLookupMixin):
    def __init__(self, universe: MarketUniverse):
        self.universe = universe
        self._snapshots: List[AssetSnapshot] = [snapshot_from_feed(e) for e in universe.entries]
        logger.info(
            "Static market data loaded: %d coins (as of %s)",
            len(self._snapshots),
            universe.as_of or "unknown",
        )

    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        return list(self._snapshots)
