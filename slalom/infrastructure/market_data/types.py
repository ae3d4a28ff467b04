"""
Market data provider protocol for type hints.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from slalom.domain.models import AssetSnapshot


class MarketDataProvider(Protocol):
    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        ...

    async def get_snapshot(self, ticker: str) -> Optional[AssetSnapshot]:
        ...

    async def get_top_snapshots(self, limit: int = 50) -> List[AssetSnapshot]:
        ...


class SnapshotLookupMixin:
    """Derives single-ticker and top-N lookups from get_all_snapshots()."""

    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        raise NotImplementedError

    async def get_snapshot(self, ticker: str) -> Optional[AssetSnapshot]:
        wanted = (ticker or "").strip().upper()
        if not wanted:
            return None
        for snapshot in await self.get_all_snapshots():
            if snapshot.ticker.upper() == wanted:
                return snapshot
        return None

    async def get_top_snapshots(self, limit: int = 50) -> List[AssetSnapshot]:
        snapshots = await self.get_all_snapshots()
        ranked = sorted(snapshots, key=lambda s: s.total_notional_usd, reverse=True)
        return ranked[:max(0, limit)]
