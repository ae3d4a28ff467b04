# slalom/services/execution_service.py

import logging
import random
import string
import time
from typing import Callable, List, Optional, Sequence

from slalom.domain.models import ExecutedPosition, OrderType, PositionConfig
from slalom.domain.services.allocation_rules import validate_total_allocation
from slalom.domain.services.config_engine import MockPrices

logger = logging.getLogger(__name__)

MAX_SLIPPAGE = 0.002  # full band, +/- 0.1%
ORDER_ID_ALPHABET = string.ascii_uppercase + string.digits


class OrderExecutor:
    """
    Simulated HyperLiquid order execution.
    Every position fills immediately at a mock price.
    """

    def __init__(
        self,
        mock_prices: MockPrices,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.mock_prices = mock_prices
        self.rng = rng or random.Random()
        self.clock = clock

    def _order_id(self) -> str:
        suffix = "".join(self.rng.choice(ORDER_ID_ALPHABET) for _ in range(9))
        return f"HL-{int(self.clock() * 1000)}-{suffix}"

    def _execution_price(self, position: PositionConfig) -> float:
        if position.limit_price:
            return position.limit_price

        base_price = self.mock_prices.get(position.ticker)
        slippage = 0.0
        if position.order_type == OrderType.MARKET:
            slippage = (self.rng.random() - 0.5) * MAX_SLIPPAGE
        return base_price * (1 + slippage)

    def execute(
        self,
        positions: Sequence[PositionConfig],
        total_capital: float = 10000.0,
    ) -> List[ExecutedPosition]:
        """
        Fill every position of a strategy

        Raises:
            AllocationError: positions empty or allocations not totalling 100%
            ValueError: non-positive capital
        """
        validate_total_allocation(positions)
        if total_capital <= 0:
            raise ValueError("Total capital must be positive")

        executed: List[ExecutedPosition] = []
        for position in positions:
            price = self._execution_price(position)
            capital = (total_capital * position.allocation_percent) / 100
            quantity = (capital * position.leverage) / price

            executed.append(ExecutedPosition(
                ticker=position.ticker,
                order_id=self._order_id(),
                status="FILLED",
                execution_price=round(price, 2),
                quantity=round(quantity, 6),
            ))

        logger.info("Successfully executed %d position(s)", len(executed))
        return executed
