"""Aggregate positioning overview across the ingredient universe."""

import math
from datetime import datetime, timezone
from typing import Sequence

from slalom.domain.models import AssetSnapshot, MarketBias, MarketOverview


def neutral_overview() -> MarketOverview:
    return MarketOverview(
        total_notional_usd=0.0,
        long_short_ratio=50,
        global_bias=MarketBias.NEUTRAL,
        long_exposure_usd=0.0,
        short_exposure_usd=0.0,
        total_tickers=0,
        last_update=datetime.now(tz=timezone.utc).isoformat(),
    )


def build_market_overview(snapshots: Sequence[AssetSnapshot]) -> MarketOverview:
    if not snapshots:
        return neutral_overview()

    total_notional = sum(s.total_notional_usd for s in snapshots)
    # Half-up rounding
    avg_ratio = math.floor(sum(s.long_short_ratio for s in snapshots) / len(snapshots) + 0.5)

    bias = MarketBias.NEUTRAL
    if avg_ratio > 55:
        bias = MarketBias.LONG
    elif avg_ratio < 45:
        bias = MarketBias.SHORT

    return MarketOverview(
        total_notional_usd=total_notional,
        long_short_ratio=avg_ratio,
        global_bias=bias,
        long_exposure_usd=total_notional * (avg_ratio / 100),
        short_exposure_usd=total_notional * ((100 - avg_ratio) / 100),
        total_tickers=len(snapshots),
        last_update=datetime.now(tz=timezone.utc).isoformat(),
    )
