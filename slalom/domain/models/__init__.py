"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    ColorTier,
    Direction,
    Grade,
    MarketBias,
    OrderType,

    # Entities
    AssetSnapshot,
    BondingProgress,
    ExecutedPosition,
    IngredientRating,
    MarketOverview,
    PositionConfig,
    StrategyEvaluation,
    VaultDeployment,
)

__all__ = [
    # Enums
    "ColorTier",
    "Direction",
    "Grade",
    "MarketBias",
    "OrderType",

    # Entities
    "AssetSnapshot",
    "BondingProgress",
    "ExecutedPosition",
    "IngredientRating",
    "MarketOverview",
    "PositionConfig",
    "StrategyEvaluation",
    "VaultDeployment",
]
