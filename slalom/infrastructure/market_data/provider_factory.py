"""
Market data provider factory (config-driven).
"""

from __future__ import annotations

import logging
from typing import Optional

from slalom.config import Settings, settings as default_settings
from slalom.domain.services.config_engine import ConfigEngine
from slalom.infrastructure.cache.redis_cache import RedisCache
from slalom.infrastructure.market_data.cached_provider import CachedMarketDataProvider
from slalom.infrastructure.market_data.hyperdash_provider import HyperDashProvider
from slalom.infrastructure.market_data.provider_chain import ChainedMarketDataProvider, NamedProvider
from slalom.infrastructure.market_data.static_provider import StaticMarketDataProvider
from slalom.infrastructure.market_data.types import MarketDataProvider

logger = logging.getLogger(__name__)


def _build_provider(name: str, config_engine: ConfigEngine, app_settings: Settings) -> MarketDataProvider:
    name = (name or "").lower()
    static = StaticMarketDataProvider(config_engine.market_universe)

    if name == "hyperdash":
        live = HyperDashProvider(
            url=app_settings.MARKET_DATA_URL,
            timeout=app_settings.MARKET_DATA_TIMEOUT,
        )
        return ChainedMarketDataProvider([
            NamedProvider("hyperdash", live),
            NamedProvider("static", static),
        ])
    if name != "static":
        raise ValueError(f"Unknown market data provider: {name}")
    return static


def get_market_data_provider(
    config_engine: ConfigEngine,
    app_settings: Optional[Settings] = None,
) -> CachedMarketDataProvider:
    app_settings = app_settings or default_settings
    provider = _build_provider(app_settings.MARKET_DATA_PROVIDER, config_engine, app_settings)

    redis_cache = None
    if app_settings.REDIS_ENABLED:
        redis_cache = RedisCache(app_settings.REDIS_URL)

    logger.info(
        "Market data provider: %s (cache %ss, redis %s)",
        app_settings.MARKET_DATA_PROVIDER,
        app_settings.MARKET_DATA_CACHE_TTL,
        "on" if redis_cache else "off",
    )
    return CachedMarketDataProvider(
        provider,
        cache_ttl_seconds=app_settings.MARKET_DATA_CACHE_TTL,
        redis_cache=redis_cache,
    )
