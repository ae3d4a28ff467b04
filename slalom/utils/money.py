"""
Money / percent text parsing for analytics feeds.
"""

from __future__ import annotations

import re
from typing import Any

_SUFFIXES = {
    "B": 1e9,
    "M": 1e6,
    "K": 1e3,
}
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def _leading_number(text: str) -> float:
    match = _NUMBER.search(text)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_money(value: Any) -> float:
    """
    Parse values like "$2,926.58M" into a float.

    Numbers pass through unchanged; unparsable text gives 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    cleaned = str(value).replace("$", "").replace(",", "").strip().upper()
    for suffix, multiplier in _SUFFIXES.items():
        if suffix in cleaned:
            return _leading_number(cleaned.replace(suffix, "")) * multiplier
    return _leading_number(cleaned)


def parse_percent(value: Any) -> float:
    """Parse "43%" (or 43) into 43.0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return _leading_number(str(value).replace("%", ""))
