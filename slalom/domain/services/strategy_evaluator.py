"""
STRATEGY EVALUATOR
Grade a set of configured positions

RESPONSIBILITIES:
- Score allocation balance, leverage and diversification
- Map score to grade and approval
- List strengths and risks

RULES:
❌ No allocation-sum validation (caller's job)
❌ No state between calls
✅ Pure calculation
✅ Deterministic output
"""

from typing import List, Sequence

from slalom.domain.models import Grade, PositionConfig, StrategyEvaluation


BASE_SCORE = 70
APPROVAL_SCORE = 65

# Bonus and risk cutoffs differ; values between them neither score nor flag.
BALANCED_VARIANCE = 200
UNBALANCED_VARIANCE = 300
CONSERVATIVE_LEVERAGE = 10
HIGH_LEVERAGE_RISK = 15
AGGRESSIVE_LEVERAGE = 20
DIVERSIFIED_COUNT = 3

COMMENTARY_EXCELLENT = (
    "Excellent work! This is a well-thought-out strategy that balances risk and "
    "opportunity. I'm approving this dish for bonding."
)
COMMENTARY_SOLID = (
    "A solid strategy with room for improvement. Consider adjusting your allocations "
    "or leverage. I'll approve it, but be cautious."
)
COMMENTARY_REFINE = (
    "This strategy needs refinement. The risk profile is concerning. Please reconsider "
    "your configuration before proceeding."
)


def allocation_variance(positions: Sequence[PositionConfig]) -> float:
    """Population variance of allocation percentages"""
    values = [p.allocation_percent for p in positions]
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def average_leverage(positions: Sequence[PositionConfig]) -> float:
    return sum(p.leverage for p in positions) / len(positions)


def score_to_grade(score: float) -> Grade:
    if score >= 85:
        return Grade.A
    if score >= 75:
        return Grade.B
    if score >= 65:
        return Grade.C
    return Grade.D


class StrategyEvaluator:
    """
    Strategy Evaluator
    Scores a dish (set of positions) for approval
    """

    def evaluate(self, positions: Sequence[PositionConfig]) -> StrategyEvaluation:
        """
        Evaluate a strategy

        Args:
            positions: Configured positions, allocations summing to ~100

        Returns:
            StrategyEvaluation
        """
        if not positions:
            raise ValueError("Strategy must contain at least one position")

        variance = allocation_variance(positions)
        avg_leverage = average_leverage(positions)
        count = len(positions)

        score = BASE_SCORE
        if variance < BALANCED_VARIANCE:
            score += 10

        if avg_leverage <= CONSERVATIVE_LEVERAGE:
            score += 10
        elif avg_leverage > AGGRESSIVE_LEVERAGE:
            score -= 10

        if count >= DIVERSIFIED_COUNT:
            score += 10

        score = int(max(0, min(100, score)))

        return StrategyEvaluation(
            score=score,
            grade=score_to_grade(score),
            commentary=self._commentary(score),
            strengths=self._strengths(count, avg_leverage, variance),
            risks=self._risks(count, avg_leverage, variance),
            approved=score >= APPROVAL_SCORE,
            allocation_variance=variance,
            average_leverage=avg_leverage,
        )

    @staticmethod
    def _risks(count: int, avg_leverage: float, variance: float) -> List[str]:
        risks: List[str] = []
        if avg_leverage > HIGH_LEVERAGE_RISK:
            risks.append("High leverage detected - potential for amplified losses")
        if count < 2:
            risks.append("Low diversification - concentrated risk")
        if variance > UNBALANCED_VARIANCE:
            risks.append("Unbalanced allocation - consider more even distribution")
        return risks

    @staticmethod
    def _strengths(count: int, avg_leverage: float, variance: float) -> List[str]:
        strengths: List[str] = []
        if count >= DIVERSIFIED_COUNT:
            strengths.append("Good diversification across multiple assets")
        if avg_leverage <= CONSERVATIVE_LEVERAGE:
            strengths.append("Conservative leverage approach reduces risk")
        if variance < BALANCED_VARIANCE:
            strengths.append("Well-balanced allocation strategy")
        return strengths

    @staticmethod
    def _commentary(score: int) -> str:
        if score >= 75:
            return COMMENTARY_EXCELLENT
        if score >= APPROVAL_SCORE:
            return COMMENTARY_SOLID
        return COMMENTARY_REFINE
