"""
Ingredient routes - ratings and market overview.
"""

from fastapi import APIRouter, Depends, Query
import logging

from slalom.api.dependencies import KitchenServices, get_services
from slalom.domain.schemas.ingredient import (
    BatchRatingRequest,
    IngredientRatingListResponse,
    IngredientRatingResponse,
    IngredientRatingSchema,
    MarketOverviewSchema,
)
from slalom.infrastructure.market_data.cached_provider import CachedMarketDataProvider

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=IngredientRatingListResponse)
async def list_ingredients(
    limit: int | None = Query(None, ge=1, le=200),
    services: KitchenServices = Depends(get_services),
):
    """Rate every available ingredient (top by notional)."""
    limit = limit or services.settings.TOP_INGREDIENTS_LIMIT
    ratings = await services.ingredients.rate_all_ingredients(limit)
    return IngredientRatingListResponse(
        count=len(ratings),
        ratings=[IngredientRatingSchema.from_domain(r) for r in ratings],
    )


@router.get("/overview", response_model=MarketOverviewSchema)
async def market_overview(services: KitchenServices = Depends(get_services)):
    """Aggregated long/short positioning across all ingredients."""
    overview = await services.ingredients.get_market_overview()
    return MarketOverviewSchema.from_domain(overview)


@router.post("/batch", response_model=IngredientRatingListResponse)
async def rate_batch(
    payload: BatchRatingRequest,
    services: KitchenServices = Depends(get_services),
):
    """Rate several tickers; unknown tickers get the neutral rating."""
    ratings = await services.ingredients.rate_ingredients_batch(payload.tickers)
    return IngredientRatingListResponse(
        count=len(ratings),
        ratings=[IngredientRatingSchema.from_domain(r) for r in ratings],
    )


@router.get("/{ticker}", response_model=IngredientRatingResponse)
async def rate_ingredient(ticker: str, services: KitchenServices = Depends(get_services)):
    """Rate a single ingredient."""
    rating = await services.ingredients.rate_ingredient(ticker)
    return IngredientRatingResponse(rating=IngredientRatingSchema.from_domain(rating))


@router.post("/refresh")
async def refresh_market_data(services: KitchenServices = Depends(get_services)):
    """Drop cached snapshots so the next rating reads the feed."""
    if not isinstance(services.market_data, CachedMarketDataProvider):
        return {"status": "uncached"}
    await services.market_data.invalidate()
    return {"status": "refreshed"}
