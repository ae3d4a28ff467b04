from datetime import datetime

import pytest

from slalom.domain.models import AssetSnapshot, MarketBias
from slalom.domain.services.market_overview import build_market_overview, neutral_overview
from slalom.infrastructure.market_data.static_provider import StaticMarketDataProvider


def _snap(ratio, notional=1_000_000):
    return AssetSnapshot(
        ticker=f"T{ratio}",
        long_short_ratio=ratio,
        long_trader_count=1,
        short_trader_count=1,
        total_notional_usd=notional,
        majority_side_profitable=True,
    )


def test_empty_universe_is_neutral():
    overview = build_market_overview([])
    neutral = neutral_overview()

    assert overview.total_notional_usd == neutral.total_notional_usd == 0.0
    assert overview.long_short_ratio == 50
    assert overview.global_bias == MarketBias.NEUTRAL
    assert overview.total_tickers == 0


def test_average_ratio_rounds_half_up():
    overview = build_market_overview([_snap(55), _snap(56)])

    assert overview.long_short_ratio == 56
    assert overview.global_bias == MarketBias.LONG


@pytest.mark.parametrize("ratios,bias", [
    ((55, 55), MarketBias.NEUTRAL),
    ((45, 45), MarketBias.NEUTRAL),
    ((44, 44), MarketBias.SHORT),
    ((80, 40), MarketBias.LONG),
])
def test_bias_thresholds(ratios, bias):
    assert build_market_overview([_snap(r) for r in ratios]).global_bias == bias


def test_exposure_split():
    overview = build_market_overview([_snap(60, 300), _snap(60, 700)])

    assert overview.total_notional_usd == 1000
    assert overview.long_exposure_usd == pytest.approx(600)
    assert overview.short_exposure_usd == pytest.approx(400)
    datetime.fromisoformat(overview.last_update)


@pytest.mark.asyncio
async def test_bundled_universe_overview(config_engine):
    provider = StaticMarketDataProvider(config_engine.market_universe)
    overview = build_market_overview(await provider.get_all_snapshots())

    assert overview.total_tickers == 20
    assert overview.long_short_ratio == 41
    assert overview.global_bias == MarketBias.SHORT
