"""
Order routes - simulated execution (mock mode).
"""

from fastapi import APIRouter, Depends, HTTPException

from slalom.api.dependencies import KitchenServices, get_services
from slalom.domain.schemas.execution import (
    ExecutedPositionSchema,
    ExecuteOrderRequest,
    ExecuteOrderResponse,
)
from slalom.domain.services.allocation_rules import AllocationError

router = APIRouter()


@router.post("/execute", response_model=ExecuteOrderResponse)
async def execute_orders(
    payload: ExecuteOrderRequest,
    services: KitchenServices = Depends(get_services),
):
    """Fill every configured position at mock prices."""
    try:
        capital = payload.total_capital or services.settings.DEFAULT_ORDER_CAPITAL
        executed = services.orders.execute(payload.to_domain(), capital)
    except AllocationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return ExecuteOrderResponse(
        message=f"Successfully executed {len(executed)} position(s)",
        order_ids=[e.order_id for e in executed],
        executed_positions=[ExecutedPositionSchema.from_domain(e) for e in executed],
    )


@router.get("/status")
async def order_status(services: KitchenServices = Depends(get_services)):
    return {
        "status": "ok",
        "message": "Order execution API is operational (mock mode)",
        "environment": services.settings.APP_ENV,
    }
