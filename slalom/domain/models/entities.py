"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Direction(str, Enum):
    """Side of a configured position"""
    LONG = "LONG"
    SHORT = "SHORT"


class OrderType(str, Enum):
    """How a position is sent to the exchange"""
    MARKET = "MARKET"
    LIMIT = "LIMIT"


class ColorTier(str, Enum):
    """Traffic-light tier of an ingredient score"""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class Grade(str, Enum):
    """Letter grade of a strategy evaluation"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class MarketBias(str, Enum):
    """Aggregate positioning bias across all tickers"""
    LONG = "LONG"
    SHORT = "SHORT"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class AssetSnapshot:
    """Positioning snapshot for one asset - Immutable"""
    ticker: str
    long_short_ratio: float
    long_trader_count: int
    short_trader_count: int
    total_notional_usd: float
    majority_side_profitable: bool

    # Descriptive feed fields, not used for scoring
    majority_side: Optional[Direction] = None
    volume_24h_usd: Optional[float] = None
    open_interest_usd: Optional[float] = None
    majority_side_notional_usd: Optional[float] = None
    oi_coverage_pct: Optional[float] = None

    def __post_init__(self):
        if not self.ticker:
            raise ValueError("Ticker cannot be empty")
        if not 0 <= self.long_short_ratio <= 100:
            raise ValueError(f"Long/short ratio must be within 0-100, got {self.long_short_ratio}")
        if self.long_trader_count < 0 or self.short_trader_count < 0:
            raise ValueError("Trader counts cannot be negative")
        if self.total_notional_usd < 0:
            raise ValueError("Total notional cannot be negative")

    @property
    def total_traders(self) -> int:
        return self.long_trader_count + self.short_trader_count


@dataclass(frozen=True)
class IngredientRating:
    """Quality rating of one ingredient"""
    ticker: str
    score: int
    quality_label: str
    sentiment_label: str
    risk_label: str
    color_tier: ColorTier
    recommendation_text: str
    notes: List[str]
    long_short_ratio: float
    snapshot: Optional[AssetSnapshot] = None

    @property
    def has_market_data(self) -> bool:
        return self.snapshot is not None


@dataclass(frozen=True)
class PositionConfig:
    """One configured position of a strategy - Immutable"""
    ticker: str
    direction: Direction
    leverage: float
    allocation_percent: float
    order_type: OrderType = OrderType.MARKET
    limit_price: Optional[float] = None


@dataclass(frozen=True)
class StrategyEvaluation:
    """Scripted evaluation of a strategy"""
    score: int
    grade: Grade
    commentary: str
    strengths: List[str]
    risks: List[str]
    approved: bool
    allocation_variance: float
    average_leverage: float


@dataclass(frozen=True)
class MarketOverview:
    """Aggregated positioning across the ingredient universe"""
    total_notional_usd: float
    long_short_ratio: int
    global_bias: MarketBias
    long_exposure_usd: float
    short_exposure_usd: float
    total_tickers: int
    last_update: str


@dataclass
class ExecutedPosition:
    """Simulated fill of one position"""
    ticker: str
    order_id: str
    status: str
    execution_price: float
    quantity: float


@dataclass
class BondingProgress:
    """Bonding curve state of a vault"""
    current: float
    target: float

    @property
    def percentage(self) -> float:
        if self.target <= 0:
            return 0.0
        return (self.current / self.target) * 100

    @property
    def next_price(self) -> float:
        # Linear curve from 0.01 to 1 USDC
        if self.target <= 0:
            return 1.0
        return 0.01 + (self.current / self.target) * 0.99


@dataclass
class VaultDeployment:
    """Simulated vault created through the bridge"""
    vault_address: str
    transaction_hash: str
    bridge_transaction_hash: str
    name: str
    description: str
    owner: str
    deployed_at: float
    grade: Grade
    score: int
    positions: List[PositionConfig] = field(default_factory=list)
    status: str = "deployed"
    bonding: BondingProgress = field(default_factory=lambda: BondingProgress(current=1.0, target=100.0))
