"""
Strategy routes - evaluation and allocation helpers.
"""

from fastapi import APIRouter, Depends, HTTPException

from slalom.api.dependencies import KitchenServices, get_services
from slalom.domain.schemas.strategy import (
    PositionSchema,
    RebalanceRequest,
    RebalanceResponse,
    SplitRequest,
    StrategyEvaluationSchema,
    StrategyRequest,
)
from slalom.domain.services.allocation_rules import AllocationError, total_allocation

router = APIRouter()


@router.post("/evaluate", response_model=StrategyEvaluationSchema)
async def evaluate_strategy(
    payload: StrategyRequest,
    services: KitchenServices = Depends(get_services),
):
    """Score, grade and approve a dish."""
    try:
        evaluation = services.strategy.evaluate_strategy(payload.to_domain())
    except AllocationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return StrategyEvaluationSchema.from_domain(evaluation)


@router.post("/rebalance", response_model=RebalanceResponse)
async def rebalance_strategy(
    payload: RebalanceRequest,
    services: KitchenServices = Depends(get_services),
):
    """Change one allocation and spread the remainder over the other positions."""
    try:
        positions = services.strategy.rebalance(payload.to_domain(), payload.index, payload.allocation)
    except AllocationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return RebalanceResponse(
        positions=[PositionSchema.from_domain(p) for p in positions],
        total_allocation=round(total_allocation(positions), 1),
    )


@router.post("/split", response_model=RebalanceResponse)
async def split_strategy(
    payload: SplitRequest,
    services: KitchenServices = Depends(get_services),
):
    """Equal LONG allocations for a fresh set of ingredients."""
    positions = services.strategy.equal_split(payload.tickers, payload.leverage)
    if not positions:
        raise HTTPException(status_code=400, detail="At least one ticker is required")
    return RebalanceResponse(
        positions=[PositionSchema.from_domain(p) for p in positions],
        total_allocation=round(total_allocation(positions), 1),
    )
