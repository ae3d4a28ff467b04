"""
Unit Tests for Ingredient Scorer
"""

import pytest

from slalom.domain.models import AssetSnapshot, ColorTier
from slalom.domain.services.ingredient_scorer import IngredientScorer


@pytest.fixture
def scorer():
    """Fixture for IngredientScorer"""
    return IngredientScorer()


def snapshot(
    ratio=50.0,
    longs=30,
    shorts=30,
    notional=50_000_000.0,
    profitable=True,
    ticker="TEST",
) -> AssetSnapshot:
    return AssetSnapshot(
        ticker=ticker,
        long_short_ratio=ratio,
        long_trader_count=longs,
        short_trader_count=shorts,
        total_notional_usd=notional,
        majority_side_profitable=profitable,
    )


class TestIngredientScorer:
    """Test suite for Ingredient Scorer"""

    def test_best_case_scores_100(self, scorer):
        rating = scorer.rate(snapshot(ratio=50, longs=60, shorts=60, notional=150_000_000, profitable=True))
        assert rating.score == 100
        assert rating.color_tier == ColorTier.GREEN
        assert rating.quality_label == "Excellent"
        assert rating.risk_label == "Low"
        assert rating.recommendation_text.startswith("Highly Recommended")

    def test_worst_case_scores_10(self, scorer):
        rating = scorer.rate(snapshot(ratio=80, longs=5, shorts=5, notional=500_000, profitable=False))
        assert rating.score == 10
        assert rating.color_tier == ColorTier.RED
        assert rating.risk_label == "Very High"
        assert rating.quality_label == "Very Poor"
        assert rating.recommendation_text.startswith("Avoid")

    def test_moderate_ratio_band(self, scorer):
        # 35..75 outside 45..65 -> +10; 60 traders -> +5; profit +10; 50M -> +5
        rating = scorer.rate(snapshot(ratio=70))
        assert rating.score == 80

    def test_ratio_between_25_and_35_is_neutral(self, scorer):
        rating = scorer.rate(snapshot(ratio=30))
        assert rating.score == 50 + 0 + 5 + 10 + 5
        assert scorer.assess_risk(snapshot(ratio=30)) == "Low"

    def test_ratio_edges(self, scorer):
        assert scorer.calculate_score(snapshot(ratio=45)) == scorer.calculate_score(snapshot(ratio=65))
        assert scorer.calculate_score(snapshot(ratio=75)) == 50 + 10 + 5 + 10 + 5
        assert scorer.calculate_score(snapshot(ratio=25)) == 50 + 0 + 5 + 10 + 5
        assert scorer.calculate_score(snapshot(ratio=24.9)) == 50 - 15 + 5 + 10 + 5

    def test_trader_participation_bands(self, scorer):
        base = dict(ratio=50, notional=50_000_000, profitable=True)
        assert scorer.calculate_score(snapshot(longs=60, shorts=41, **base)) == 95
        assert scorer.calculate_score(snapshot(longs=50, shorts=50, **base)) == 90
        assert scorer.calculate_score(snapshot(longs=25, shorts=25, **base)) == 85
        assert scorer.calculate_score(snapshot(longs=10, shorts=9, **base)) == 75

    def test_liquidity_bands(self, scorer):
        base = dict(ratio=50, longs=30, shorts=30, profitable=True)
        assert scorer.calculate_score(snapshot(notional=100_000_001, **base)) == 95
        assert scorer.calculate_score(snapshot(notional=100_000_000, **base)) == 90
        assert scorer.calculate_score(snapshot(notional=10_000_000, **base)) == 85
        assert scorer.calculate_score(snapshot(notional=999_999, **base)) == 75

    def test_score_is_clamped(self, scorer):
        for ratio in (0, 10, 30, 50, 70, 90, 100):
            for traders in (0, 10, 60, 200):
                for notional in (0, 2_000_000, 20_000_000, 2e9):
                    for profitable in (True, False):
                        score = scorer.calculate_score(
                            snapshot(ratio=ratio, longs=traders, shorts=0, notional=notional, profitable=profitable)
                        )
                        assert isinstance(score, int)
                        assert 0 <= score <= 100

    @pytest.mark.parametrize("ratio,expected", [
        (71, "Very Bullish"),
        (70, "Bullish"),
        (56, "Bullish"),
        (55, "Neutral"),
        (45, "Neutral"),
        (44, "Bearish"),
        (30, "Bearish"),
        (29, "Very Bearish"),
    ])
    def test_sentiment_labels(self, scorer, ratio, expected):
        assert scorer.sentiment_label(ratio) == expected

    def test_risk_points(self, scorer):
        assert scorer.assess_risk(snapshot(profitable=False)) == "Medium"
        assert scorer.assess_risk(snapshot(notional=4_000_000)) == "Medium"
        assert scorer.assess_risk(snapshot(ratio=90)) == "High"
        assert scorer.assess_risk(snapshot(longs=5, shorts=5, profitable=False)) == "High"
        assert scorer.assess_risk(snapshot(ratio=90, longs=5, shorts=5)) == "Very High"

    @pytest.mark.parametrize("score,expected", [
        (80, "Excellent"),
        (79, "Very Good"),
        (70, "Very Good"),
        (60, "Good"),
        (50, "Fair"),
        (40, "Poor"),
        (39, "Very Poor"),
    ])
    def test_quality_labels(self, scorer, score, expected):
        assert scorer.quality_label(score) == expected

    def test_color_tiers(self, scorer):
        assert scorer.color_tier(70) == ColorTier.GREEN
        assert scorer.color_tier(69) == ColorTier.YELLOW
        assert scorer.color_tier(50) == ColorTier.YELLOW
        assert scorer.color_tier(49) == ColorTier.RED

    def test_recommendation_table(self, scorer):
        assert scorer.recommendation(75, "High").startswith("Highly Recommended")
        assert scorer.recommendation(90, "Very High").startswith("Use with Caution")
        assert scorer.recommendation(60, "Low").startswith("Recommended")
        assert scorer.recommendation(60, "Medium").startswith("Use with Caution")
        assert scorer.recommendation(45, "Low").startswith("Risky")
        assert scorer.recommendation(39, "Low").startswith("Avoid")

    def test_notes_follow_thresholds(self, scorer):
        rating = scorer.rate(snapshot(ratio=55, longs=80, shorts=40, notional=150_000_000))
        assert len(rating.notes) == 5
        assert "magnificent" in rating.notes[0]
        assert "balanced" in rating.notes[1]
        assert "120 traders" in rating.notes[2]
        assert "profitable" in rating.notes[3]
        assert "aggressive growth" in rating.notes[4]

    def test_notes_for_crowded_shorts(self, scorer):
        rating = scorer.rate(snapshot(ratio=20, longs=30, shorts=30, profitable=False))
        assert "80% betting against it" in rating.notes[1]
        # 60 traders -> no activity note
        assert len(rating.notes) == 4
        assert "losing" in rating.notes[2]

    def test_default_rating(self, scorer):
        rating = scorer.default_rating("NOPE")
        assert rating.ticker == "NOPE"
        assert rating.score == 50
        assert rating.quality_label == "Unknown"
        assert rating.sentiment_label == "Neutral"
        assert rating.risk_label == "Medium"
        assert rating.color_tier == ColorTier.YELLOW
        assert rating.snapshot is None
        assert rating.has_market_data is False
        assert len(rating.notes) == 2

    def test_rate_is_idempotent(self, scorer):
        snap = snapshot(ratio=62, longs=11, shorts=19, notional=14_940_000)
        assert scorer.rate(snap) == scorer.rate(snap)


def test_snapshot_rejects_out_of_range_ratio():
    with pytest.raises(ValueError, match="0-100"):
        snapshot(ratio=101)


def test_snapshot_rejects_negative_traders():
    with pytest.raises(ValueError, match="negative"):
        snapshot(longs=-1)
