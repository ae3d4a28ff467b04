from pydantic import BaseModel, Field
from typing import List, Optional

from slalom.domain.models import AssetSnapshot, IngredientRating, MarketOverview


class AssetSnapshotSchema(BaseModel):
    ticker: str
    long_short_ratio: float
    long_trader_count: int
    short_trader_count: int
    total_notional_usd: float
    majority_side_profitable: bool
    majority_side: Optional[str] = None
    volume_24h_usd: Optional[float] = None
    open_interest_usd: Optional[float] = None
    majority_side_notional_usd: Optional[float] = None
    oi_coverage_pct: Optional[float] = None

    @classmethod
    def from_domain(cls, snapshot: AssetSnapshot) -> "AssetSnapshotSchema":
        return cls(
            ticker=snapshot.ticker,
            long_short_ratio=snapshot.long_short_ratio,
            long_trader_count=snapshot.long_trader_count,
            short_trader_count=snapshot.short_trader_count,
            total_notional_usd=snapshot.total_notional_usd,
            majority_side_profitable=snapshot.majority_side_profitable,
            majority_side=snapshot.majority_side.value if snapshot.majority_side else None,
            volume_24h_usd=snapshot.volume_24h_usd,
            open_interest_usd=snapshot.open_interest_usd,
            majority_side_notional_usd=snapshot.majority_side_notional_usd,
            oi_coverage_pct=snapshot.oi_coverage_pct,
        )


class IngredientRatingSchema(BaseModel):
    ticker: str
    score: int
    quality: str
    sentiment: str
    risk_level: str
    color: str
    recommendation: str
    chef_notes: List[str]
    ls_ratio: float
    market_data: Optional[AssetSnapshotSchema] = None

    @classmethod
    def from_domain(cls, rating: IngredientRating) -> "IngredientRatingSchema":
        return cls(
            ticker=rating.ticker,
            score=rating.score,
            quality=rating.quality_label,
            sentiment=rating.sentiment_label,
            risk_level=rating.risk_label,
            color=rating.color_tier.value,
            recommendation=rating.recommendation_text,
            chef_notes=list(rating.notes),
            ls_ratio=rating.long_short_ratio,
            market_data=AssetSnapshotSchema.from_domain(rating.snapshot) if rating.snapshot else None,
        )


class IngredientRatingResponse(BaseModel):
    success: bool = True
    rating: IngredientRatingSchema


class IngredientRatingListResponse(BaseModel):
    success: bool = True
    count: int
    ratings: List[IngredientRatingSchema]


class BatchRatingRequest(BaseModel):
    tickers: List[str] = Field(..., max_length=200)


class MarketOverviewSchema(BaseModel):
    total_notional: float
    long_short_ratio: int
    global_bias: str
    long_exposure: float
    short_exposure: float
    total_tickers: int
    last_update: str

    @classmethod
    def from_domain(cls, overview: MarketOverview) -> "MarketOverviewSchema":
        return cls(
            total_notional=overview.total_notional_usd,
            long_short_ratio=overview.long_short_ratio,
            global_bias=overview.global_bias.value,
            long_exposure=overview.long_exposure_usd,
            short_exposure=overview.short_exposure_usd,
            total_tickers=overview.total_tickers,
            last_update=overview.last_update,
        )
