"""
HyperDash analytics provider.
Fetches the per-coin positioning feed over HTTP.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from slalom.domain.models import AssetSnapshot
from slalom.infrastructure.market_data.feed import snapshot_from_feed
from slalom.infrastructure.market_data.types import SnapshotLookupMixin

logger = logging.getLogger(__name__)


class HyperDashProvider(SnapshotLookupMixin):
    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def _request_json(self) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(self.url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return response.json()

    async def get_all_snapshots(self) -> List[AssetSnapshot]:
        payload = await self._request_json()
        entries = payload.get("coins", []) if isinstance(payload, dict) else payload
        if not isinstance(entries, list):
            raise ValueError("Unexpected HyperDash payload shape")

        snapshots: List[AssetSnapshot] = []
        for entry in entries:
            try:
                snapshots.append(snapshot_from_feed(entry))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed HyperDash entry %r: %s", entry, exc)

        logger.debug("HyperDash returned %d coins", len(snapshots))
        return snapshots
