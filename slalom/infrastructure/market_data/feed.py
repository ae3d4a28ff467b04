"""
Analytics feed entry -> AssetSnapshot conversion.

Feed entries look like:
    {"ticker": "BTC", "ls_ratio": 31, "maj_side_pl": "Profit",
     "traders": {"long": 87, "short": 158}, "total_notional": "$1,254.41B", ...}
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from slalom.domain.models import AssetSnapshot, Direction
from slalom.utils.money import parse_money, parse_percent


def _optional_money(entry: Dict[str, Any], key: str) -> Optional[float]:
    if entry.get(key) is None:
        return None
    return parse_money(entry[key])


def snapshot_from_feed(entry: Dict[str, Any]) -> AssetSnapshot:
    """
    Build an AssetSnapshot from one feed entry

    Raises:
        KeyError / ValueError: on entries missing the scoring fields
    """
    traders = entry.get("traders") or {}
    majority_side = entry.get("majority_side")

    return AssetSnapshot(
        ticker=str(entry["ticker"]).upper(),
        long_short_ratio=float(entry["ls_ratio"]),
        long_trader_count=int(traders.get("long", 0)),
        short_trader_count=int(traders.get("short", 0)),
        total_notional_usd=parse_money(entry["total_notional"]),
        majority_side_profitable=str(entry.get("maj_side_pl", "")).lower() == "profit",
        majority_side=Direction(str(majority_side).upper()) if majority_side else None,
        volume_24h_usd=_optional_money(entry, "volume_24h"),
        open_interest_usd=_optional_money(entry, "open_interest"),
        majority_side_notional_usd=_optional_money(entry, "maj_side_notional"),
        oi_coverage_pct=parse_percent(entry["oi_coverage"]) if entry.get("oi_coverage") is not None else None,
    )
