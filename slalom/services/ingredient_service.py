# slalom/services/ingredient_service.py

import asyncio
import logging
from typing import List, Optional, Sequence

from slalom.domain.models import IngredientRating, MarketOverview
from slalom.domain.services.ingredient_scorer import IngredientScorer
from slalom.domain.services.market_overview import build_market_overview
from slalom.infrastructure.market_data.types import MarketDataProvider

logger = logging.getLogger(__name__)


class IngredientService:
    """Looks up market snapshots and rates them."""

    def __init__(self, provider: MarketDataProvider, scorer: Optional[IngredientScorer] = None):
        self.provider = provider
        self.scorer = scorer or IngredientScorer()

    async def rate_ingredient(self, ticker: str) -> IngredientRating:
        ticker = (ticker or "").strip().upper()
        logger.info("🐼 Rating ingredient: %s", ticker)

        snapshot = await self.provider.get_snapshot(ticker)
        if snapshot is None:
            logger.info("ℹ️ No market data for %s, using neutral rating", ticker)
            return self.scorer.default_rating(ticker)

        return self.scorer.rate(snapshot)

    async def rate_ingredients_batch(self, tickers: Sequence[str]) -> List[IngredientRating]:
        logger.info("Rating %d ingredients", len(tickers))
        ratings = await asyncio.gather(*(self.rate_ingredient(t) for t in tickers))
        return list(ratings)

    async def rate_all_ingredients(self, limit: int = 50) -> List[IngredientRating]:
        snapshots = await self.provider.get_top_snapshots(limit)
        ratings = [self.scorer.rate(s) for s in snapshots]
        logger.info("✓ Rated %d ingredients", len(ratings))
        return ratings

    async def get_market_overview(self) -> MarketOverview:
        snapshots = await self.provider.get_all_snapshots()
        return build_market_overview(snapshots)
