"""
ALLOCATION RULES
Validate and rebalance position allocations

RULES:
✅ Allocations across a strategy total 100% (+/- 0.1)
✅ Returns new PositionConfig objects, never mutates input
"""

from dataclasses import replace
from typing import List, Sequence

from slalom.domain.models import Direction, PositionConfig


ALLOCATION_TOTAL = 100.0
ALLOCATION_TOLERANCE = 0.1
DEFAULT_LEVERAGE = 5.0


class AllocationError(ValueError):
    """Raised when a strategy's allocations are not usable"""


def total_allocation(positions: Sequence[PositionConfig]) -> float:
    return sum(p.allocation_percent for p in positions)


def validate_total_allocation(positions: Sequence[PositionConfig]) -> None:
    """
    Ensure allocations sum to 100%

    Raises:
        AllocationError: if positions are empty or the total is off by more than 0.1
    """
    if not positions:
        raise AllocationError("Invalid request: positions array is required")

    total = total_allocation(positions)
    if abs(total - ALLOCATION_TOTAL) > ALLOCATION_TOLERANCE:
        raise AllocationError(f"Total allocation must be 100%. Current: {total:g}%")


def rebalance(
    positions: Sequence[PositionConfig],
    index: int,
    allocation: float,
) -> List[PositionConfig]:
    """
    Set one position's allocation and spread the rest evenly

    Args:
        positions: Current positions
        index: Position being changed
        allocation: New allocation percent for that position

    Returns:
        New list of positions
    """
    if not 0 <= index < len(positions):
        raise AllocationError(f"Position index out of range: {index}")
    if not 0 <= allocation <= ALLOCATION_TOTAL:
        raise AllocationError(f"Allocation must be within 0-100%, got {allocation:g}%")

    others = len(positions) - 1
    per_other = round((ALLOCATION_TOTAL - allocation) / others, 1) if others else None

    balanced = []
    for idx, position in enumerate(positions):
        if idx == index:
            balanced.append(replace(position, allocation_percent=allocation))
        else:
            balanced.append(replace(position, allocation_percent=per_other))
    return balanced


def equal_split(tickers: Sequence[str], leverage: float = DEFAULT_LEVERAGE) -> List[PositionConfig]:
    """Default LONG positions with allocations split evenly"""
    if not tickers:
        return []

    share = round(ALLOCATION_TOTAL / len(tickers), 1)
    positions = [
        PositionConfig(
            ticker=ticker.upper(),
            direction=Direction.LONG,
            leverage=leverage,
            allocation_percent=share,
        )
        for ticker in tickers
    ]
    # Rounding remainder goes to the first position
    drift = round(ALLOCATION_TOTAL - share * len(tickers), 1)
    if drift:
        positions[0] = replace(positions[0], allocation_percent=round(share + drift, 1))
    return positions
