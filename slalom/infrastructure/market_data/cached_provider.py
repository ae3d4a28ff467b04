"""
TTL cache in front of a market data provider.
Uses Redis when configured, otherwise an in-process entry.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from slalom.domain.models import AssetSnapshot, Direction
from slalom.infrastructure.cache.redis_cache import RedisCache
from slalom.infrastructure.market_data.types import MarketDataProvider, SnapshotLookupMixin

logger = logging.getLogger(__name__)

CACHE_KEY = "snapshots:all"


def snapshot_to_dict(snapshot: AssetSnapshot) -> Dict[str, Any]:
    data = asdict(snapshot)
    if snapshot.majority_side is not None:
        data["majority_side"] = snapshot.majority_side.value
    return data


def snapshot_from_dict(data: Dict[str, Any]) -> AssetSnapshot:
    data = dict(data)
    if data.get("majority_side") is not None:
        data["majority_side"] = Direction(data["majority_side"])
    return AssetSnapshot(**data)


class CachedMarketDataProvider(SnapshotLookupMixin):
    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 300,
        redis_cache: Optional[RedisCache] = None,
    ):
        self.provider = provider
        self.cache_ttl_seconds = cache_ttl_seconds
        self.redis_cache = redis_cache
        self._cache: Optional[tuple[float, List[AssetSnapshot]]] = None
        self._inflight: Optional[asyncio.Task] = None

    def _cache_get(self) -> Optional[List[AssetSnapshot]]:
        if not self._cache:
            return None
        ts, value = self._cache
        if time.time() - ts > self.cache_ttl_seconds:
            return None
        return value

    def _cache_set(self, value: List[AssetSnapshot]) -> None:
        self._cache = (time.time(), value)

    async def invalidate(self) -> None:
        """Drop cached snapshots so the next read goes upstream."""
        self._cache = None
        if self.redis_cache is not None:
            await self.redis_cache.delete(CACHE_KEY)
        logger.info("Market data cache invalidated")

    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        cached = self._cache_get()
        if cached is not None:
            logger.debug("Using cached coin data")
            return list(cached)

        # Concurrent misses share one in-flight refill
        if self._inflight is None:
            self._inflight = asyncio.create_task(self._refill())
            self._inflight.add_done_callback(self._clear_inflight)
        snapshots = await asyncio.shield(self._inflight)
        return list(snapshots)

    def _clear_inflight(self, _task: asyncio.Task) -> None:
        self._inflight = None

    async def _refill(self) -> List[AssetSnapshot]:
        if self.redis_cache is not None:
            raw = await self.redis_cache.get_json(CACHE_KEY)
            if raw:
                snapshots = [snapshot_from_dict(item) for item in raw]
                self._cache_set(snapshots)
                return list(snapshots)

        snapshots = await self.provider.get_all_snapshots()
        if snapshots:
            self._cache_set(snapshots)
            if self.redis_cache is not None:
                await self.redis_cache.set_json(
                    CACHE_KEY,
                    [snapshot_to_dict(s) for s in snapshots],
                    ttl_seconds=self.cache_ttl_seconds,
                )
        return list(snapshots)
