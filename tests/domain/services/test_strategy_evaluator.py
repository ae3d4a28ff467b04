"""
Unit Tests for Strategy Evaluator
"""

import pytest

from slalom.domain.models import Direction, Grade, PositionConfig
from slalom.domain.services.strategy_evaluator import (
    COMMENTARY_EXCELLENT,
    COMMENTARY_REFINE,
    COMMENTARY_SOLID,
    StrategyEvaluator,
    allocation_variance,
    average_leverage,
    score_to_grade,
)


@pytest.fixture
def evaluator():
    """Fixture for StrategyEvaluator"""
    return StrategyEvaluator()


def build(allocations, leverage=5.0):
    tickers = ["BTC", "ETH", "SOL", "LINK", "UNI", "AAVE", "DOGE"]
    return [
        PositionConfig(
            ticker=tickers[idx],
            direction=Direction.LONG,
            leverage=leverage,
            allocation_percent=alloc,
        )
        for idx, alloc in enumerate(allocations)
    ]


class TestStrategyEvaluator:
    """Test suite for Strategy Evaluator"""

    def test_single_position_full_allocation(self, evaluator):
        result = evaluator.evaluate(build([100], leverage=5))

        assert result.score == 90
        assert result.grade == Grade.A
        assert result.approved is True
        assert result.allocation_variance == 0
        assert result.risks == ["Low diversification - concentrated risk"]
        assert "Conservative leverage approach reduces risk" in result.strengths
        assert "Well-balanced allocation strategy" in result.strengths
        assert result.commentary == COMMENTARY_EXCELLENT

    def test_high_leverage_pair(self, evaluator):
        result = evaluator.evaluate(build([50, 50], leverage=25))

        assert result.score == 70
        assert result.grade == Grade.C
        assert result.approved is True
        assert result.risks == ["High leverage detected - potential for amplified losses"]
        assert result.commentary == COMMENTARY_SOLID

    def test_unbalanced_conservative_pair(self, evaluator):
        result = evaluator.evaluate(build([80, 20], leverage=5))

        assert result.score == 80
        assert result.grade == Grade.B
        assert "Unbalanced allocation - consider more even distribution" in result.risks

    def test_rejected_strategy(self, evaluator):
        result = evaluator.evaluate(build([90, 10], leverage=30))

        assert result.score == 60
        assert result.grade == Grade.D
        assert result.approved is False
        assert len(result.risks) == 2
        assert result.strengths == []
        assert result.commentary == COMMENTARY_REFINE

    def test_diversified_balanced_strategy(self, evaluator):
        result = evaluator.evaluate(build([34, 33, 33], leverage=3))

        assert result.score == 100
        assert result.grade == Grade.A
        assert len(result.strengths) == 3
        assert result.risks == []

    def test_variance_at_balanced_cutoff_earns_nothing(self, evaluator):
        result = evaluator.evaluate(build([45, 25, 15, 10, 5], leverage=12))

        assert result.allocation_variance == pytest.approx(200)
        assert result.score == 80
        assert result.grade == Grade.B
        assert result.strengths == ["Good diversification across multiple assets"]
        assert result.risks == []

    def test_variance_at_unbalanced_cutoff_is_not_flagged(self, evaluator):
        result = evaluator.evaluate(build([55, 15, 15, 15], leverage=12))

        assert result.allocation_variance == pytest.approx(300)
        assert result.score == 80
        assert result.risks == []

    def test_leverage_between_cutoffs(self, evaluator):
        # 15 < avg <= 20 flags risk without a score penalty
        result = evaluator.evaluate(build([50, 50], leverage=18))

        assert result.score == 80
        assert result.risks == ["High leverage detected - potential for amplified losses"]

    def test_empty_strategy_rejected(self, evaluator):
        with pytest.raises(ValueError):
            evaluator.evaluate([])

    def test_approval_matches_threshold(self, evaluator):
        for allocations, leverage in [([100], 50), ([50, 50], 21), ([70, 30], 20), ([25] * 4, 1)]:
            result = evaluator.evaluate(build(allocations, leverage))
            assert result.approved == (result.score >= 65)
            assert 0 <= result.score <= 100


@pytest.mark.parametrize("score,grade", [
    (100, Grade.A),
    (85, Grade.A),
    (84, Grade.B),
    (75, Grade.B),
    (74, Grade.C),
    (65, Grade.C),
    (64, Grade.D),
    (0, Grade.D),
])
def test_score_to_grade(score, grade):
    assert score_to_grade(score) == grade


def test_population_variance():
    positions = build([40, 30, 20, 10])
    assert allocation_variance(positions) == pytest.approx(125.0)


def test_average_leverage_mixed():
    positions = build([50, 50], leverage=5)
    positions[1] = PositionConfig("ETH", Direction.SHORT, 15, 50)
    assert average_leverage(positions) == 10


def test_three_majors_example(evaluator):
    positions = build([40, 35, 25], leverage=5)

    result = evaluator.evaluate(positions)

    assert result.allocation_variance == pytest.approx(38.89, abs=0.01)
    assert result.score == 100
    assert result.grade == Grade.A
    assert result.approved is True
