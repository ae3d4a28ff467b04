"""
CONFIG ENGINE
Load, validate, and expose kitchen configuration

RESPONSIBILITIES:
- Load YAML configuration files
- Validate configuration integrity
- Expose read-only typed objects

RULES:
❌ No defaults if config missing
✅ Fail fast on invalid config
✅ Deterministic output
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MarketUniverse:
    """Feed entries of every known ingredient"""
    as_of: Optional[str]
    entries: List[Dict[str, Any]]
    tickers: List[str]


@dataclass(frozen=True)
class MockPrices:
    """Reference prices for simulated fills"""
    prices: Dict[str, float]
    default_price: float

    def get(self, ticker: str) -> float:
        return self.prices.get(ticker.upper(), self.default_price)


class ConfigEngine:
    """
    Configuration Engine
    Single source of truth for kitchen configuration
    """

    def __init__(self, config_dir: Path):
        """Initialize with config directory"""
        self.config_dir = config_dir
        self._market_universe: Optional[MarketUniverse] = None
        self._mock_prices: Optional[MockPrices] = None

    def load_all(self) -> None:
        """Load all configuration files"""
        self._load_market_universe()
        self._load_mock_prices()

    def _read_yaml(self, filename: str) -> Dict[str, Any]:
        path = self.config_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def _load_market_universe(self) -> None:
        """Load ingredient universe from market_universe.yml"""
        data = self._read_yaml("market_universe.yml")

        entries = list(data.get("coins", []))
        for entry in entries:
            for key in ("ticker", "ls_ratio", "total_notional", "traders"):
                if key not in entry:
                    raise ValueError(f"Market universe entry missing '{key}': {entry}")

        tickers = [str(e["ticker"]).upper() for e in entries]
        if len(tickers) != len(set(tickers)):
            raise ValueError("Duplicate tickers found in market universe")

        as_of = data.get("as_of")
        self._market_universe = MarketUniverse(
            as_of=str(as_of) if as_of is not None else None,
            entries=entries,
            tickers=tickers,
        )

    def _load_mock_prices(self) -> None:
        """Load reference prices from mock_prices.yml"""
        data = self._read_yaml("mock_prices.yml")

        prices = {str(k).upper(): float(v) for k, v in (data.get("prices") or {}).items()}
        default_price = float(data.get("default_price", 100.0))
        if default_price <= 0 or any(p <= 0 for p in prices.values()):
            raise ValueError("Mock prices must be positive")

        self._mock_prices = MockPrices(prices=prices, default_price=default_price)

    @property
    def market_universe(self) -> MarketUniverse:
        if self._market_universe is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._market_universe

    @property
    def mock_prices(self) -> MockPrices:
        if self._mock_prices is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._mock_prices
