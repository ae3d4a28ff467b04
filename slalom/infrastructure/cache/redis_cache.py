"""
Redis cache wrapper for market snapshots.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisCache:
    def __init__(self, url: str, prefix: str = "slalom:", enabled: bool = True, client: Any = None):
        self._client = client if client is not None else redis.Redis.from_url(url, decode_responses=True)
        self._prefix = prefix
        self._enabled = enabled

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get_json(self, key: str) -> Optional[Any]:
        if not self._enabled:
            return None
        try:
            raw = await self._client.get(self._key(key))
        except RedisError as exc:
            logger.debug("Redis get_json failed: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            logger.debug("Redis value for %s is not JSON: %s", key, exc)
            return None

    async def set_json(self, key: str, value: Any, ttl_seconds: int) -> None:
        if not self._enabled:
            return
        try:
            await self._client.set(self._key(key), json.dumps(value), ex=ttl_seconds)
        except RedisError as exc:
            logger.debug("Redis set_json failed: %s", exc)

    async def delete(self, key: str) -> None:
        if not self._enabled:
            return
        try:
            await self._client.delete(self._key(key))
        except RedisError as exc:
            logger.debug("Redis delete failed: %s", exc)

    async def close(self) -> None:
        try:
            await self._client.aclose()
        except RedisError as exc:
            logger.debug("Redis close failed: %s", exc)
