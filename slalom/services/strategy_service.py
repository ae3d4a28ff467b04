# slalom/services/strategy_service.py

import logging
from typing import List, Optional, Sequence

from slalom.domain.models import PositionConfig, StrategyEvaluation
from slalom.domain.services.allocation_rules import equal_split, rebalance, validate_total_allocation
from slalom.domain.services.strategy_evaluator import StrategyEvaluator

logger = logging.getLogger(__name__)


class StrategyService:
    """Validates a dish and hands it to the evaluator."""

    def __init__(self, evaluator: Optional[StrategyEvaluator] = None):
        self.evaluator = evaluator or StrategyEvaluator()

    def evaluate_strategy(self, positions: Sequence[PositionConfig]) -> StrategyEvaluation:
        """
        Raises:
            AllocationError: positions empty or allocations not totalling 100%
        """
        validate_total_allocation(positions)

        evaluation = self.evaluator.evaluate(positions)
        logger.info(
            "Strategy evaluated: %d positions, score %d, grade %s, %s",
            len(positions),
            evaluation.score,
            evaluation.grade.value,
            "approved" if evaluation.approved else "rejected",
        )
        return evaluation

    @staticmethod
    def rebalance(
        positions: Sequence[PositionConfig],
        index: int,
        allocation: float,
    ) -> List[PositionConfig]:
        return rebalance(positions, index, allocation)

    @staticmethod
    def equal_split(tickers: Sequence[str], leverage: float) -> List[PositionConfig]:
        """Starting positions for freshly picked ingredients"""
        return equal_split([t.strip() for t in tickers if t.strip()], leverage=leverage)
