from pathlib import Path

import pytest
import yaml

from slalom.domain.services.config_engine import ConfigEngine


def _write_yaml(path: Path, payload) -> None:
    path.write_text(yaml.safe_dump(payload, sort_keys=False))


def _coin(ticker):
    return {
        "ticker": ticker,
        "ls_ratio": 50,
        "total_notional": "$10M",
        "traders": {"long": 5, "short": 5},
        "maj_side_pl": "Profit",
    }


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    _write_yaml(tmp_path / "market_universe.yml", {"as_of": "2024-11-12", "coins": [_coin("BTC"), _coin("eth")]})
    _write_yaml(tmp_path / "mock_prices.yml", {"default_price": 100.0, "prices": {"btc": 43250.5}})
    return tmp_path


def test_loads_bundled_config(config_engine):
    universe = config_engine.market_universe

    assert universe.as_of == "2024-11-12"
    assert len(universe.tickers) == 20
    assert "BTC" in universe.tickers
    assert "XYZ" not in universe.tickers

    prices = config_engine.mock_prices
    assert prices.get("BTC") == 43250.50
    assert prices.get("eth") == 2285.75
    assert prices.get("UNKNOWN") == prices.default_price == 100.0


def test_tickers_are_uppercased(config_dir):
    engine = ConfigEngine(config_dir)
    engine.load_all()

    assert engine.market_universe.tickers == ["BTC", "ETH"]
    assert engine.mock_prices.get("BTC") == 43250.5


def test_duplicate_tickers_fail(config_dir):
    _write_yaml(config_dir / "market_universe.yml", {"coins": [_coin("BTC"), _coin("btc")]})

    with pytest.raises(ValueError, match="Duplicate tickers"):
        ConfigEngine(config_dir).load_all()


def test_missing_scoring_field_fails(config_dir):
    coin = _coin("BTC")
    del coin["traders"]
    _write_yaml(config_dir / "market_universe.yml", {"coins": [coin]})

    with pytest.raises(ValueError, match="missing 'traders'"):
        ConfigEngine(config_dir).load_all()


def test_non_positive_price_fails(config_dir):
    _write_yaml(config_dir / "mock_prices.yml", {"prices": {"BTC": 0}})

    with pytest.raises(ValueError, match="positive"):
        ConfigEngine(config_dir).load_all()


def test_missing_file_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigEngine(tmp_path).load_all()


def test_access_before_load_fails(config_dir):
    engine = ConfigEngine(config_dir)

    with pytest.raises(RuntimeError):
        _ = engine.market_universe
    with pytest.raises(RuntimeError):
        _ = engine.mock_prices
