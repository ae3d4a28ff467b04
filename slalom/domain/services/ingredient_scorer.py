"""
INGREDIENT SCORER
Rate one asset's positioning snapshot (quality, sentiment, risk)

RESPONSIBILITIES:
- Score a snapshot 0-100 from fixed threshold rules
- Derive quality / sentiment / risk / color labels
- Produce recommendation and chef notes
- Provide the neutral rating used when no data exists

RULES:
❌ No data fetching
❌ No state between calls
✅ Pure calculation
✅ Deterministic output
"""

from typing import List

from slalom.domain.models import AssetSnapshot, ColorTier, IngredientRating


BASE_SCORE = 50

# Long/short balance bands (percent long)
BALANCED_RATIO = (45, 65)
MODERATE_RATIO = (35, 75)
EXTREME_RATIO_HIGH = 75
EXTREME_RATIO_LOW = 25

# Liquidity (USD notional)
HIGH_LIQUIDITY = 100_000_000
GOOD_LIQUIDITY = 10_000_000
LOW_LIQUIDITY = 1_000_000
ILLIQUID_RISK = 5_000_000

LOW_TRADER_COUNT = 20


class IngredientScorer:
    """
    Ingredient Scorer
    Turns a market snapshot into an IngredientRating
    """

    def rate(self, snapshot: AssetSnapshot) -> IngredientRating:
        """
        Rate a single ingredient

        Args:
            snapshot: Positioning snapshot of the asset

        Returns:
            IngredientRating
        """
        score = self.calculate_score(snapshot)
        risk_label = self.assess_risk(snapshot)

        return IngredientRating(
            ticker=snapshot.ticker,
            score=score,
            quality_label=self.quality_label(score),
            sentiment_label=self.sentiment_label(snapshot.long_short_ratio),
            risk_label=risk_label,
            color_tier=self.color_tier(score),
            recommendation_text=self.recommendation(score, risk_label),
            notes=self.chef_notes(snapshot, score),
            long_short_ratio=snapshot.long_short_ratio,
            snapshot=snapshot,
        )

    @staticmethod
    def default_rating(ticker: str) -> IngredientRating:
        """Neutral rating for a ticker with no market data"""
        return IngredientRating(
            ticker=ticker,
            score=50,
            quality_label="Unknown",
            sentiment_label="Neutral",
            risk_label="Medium",
            color_tier=ColorTier.YELLOW,
            recommendation_text="No data available - proceed with caution",
            notes=[
                f"I couldn't find fresh data for {ticker}, dear guest!",
                "Check back later when the market wakes up!",
            ],
            long_short_ratio=50,
            snapshot=None,
        )

    @staticmethod
    def is_extreme_ratio(ratio: float) -> bool:
        return ratio > EXTREME_RATIO_HIGH or ratio < EXTREME_RATIO_LOW

    def calculate_score(self, snapshot: AssetSnapshot) -> int:
        """
        Calculate score from four factors

        Logic:
        - L/S ratio: balanced +20, moderate +10, extreme -15
        - Traders: >100 +10, >50 +5, <20 -10
        - Majority P/L: profit +10, loss -5
        - Notional: >100M +10, >10M +5, <1M -10
        """
        score = BASE_SCORE

        # Factor 1: L/S ratio (balanced is best)
        ratio = snapshot.long_short_ratio
        if BALANCED_RATIO[0] <= ratio <= BALANCED_RATIO[1]:
            score += 20
        elif MODERATE_RATIO[0] <= ratio <= MODERATE_RATIO[1]:
            score += 10
        elif self.is_extreme_ratio(ratio):
            score -= 15

        # Factor 2: trader participation
        traders = snapshot.total_traders
        if traders > 100:
            score += 10
        elif traders > 50:
            score += 5
        elif traders < LOW_TRADER_COUNT:
            score -= 10

        # Factor 3: majority side P/L
        if snapshot.majority_side_profitable:
            score += 10
        else:
            score -= 5

        # Factor 4: liquidity proxy
        notional = snapshot.total_notional_usd
        if notional > HIGH_LIQUIDITY:
            score += 10
        elif notional > GOOD_LIQUIDITY:
            score += 5
        elif notional < LOW_LIQUIDITY:
            score -= 10

        return int(max(0, min(100, score)))

    @staticmethod
    def sentiment_label(ratio: float) -> str:
        if ratio > 70:
            return "Very Bullish"
        if ratio > 55:
            return "Bullish"
        if ratio < 30:
            return "Very Bearish"
        if ratio < 45:
            return "Bearish"
        return "Neutral"

    def assess_risk(self, snapshot: AssetSnapshot) -> str:
        """
        Tally risk points

        Logic:
        - Extreme ratio: +2
        - Fewer than 20 traders: +2
        - Majority side losing: +1
        - Notional under 5M: +1
        """
        risk_points = 0

        if self.is_extreme_ratio(snapshot.long_short_ratio):
            risk_points += 2
        if snapshot.total_traders < LOW_TRADER_COUNT:
            risk_points += 2
        if not snapshot.majority_side_profitable:
            risk_points += 1
        if snapshot.total_notional_usd < ILLIQUID_RISK:
            risk_points += 1

        if risk_points >= 4:
            return "Very High"
        if risk_points >= 2:
            return "High"
        if risk_points >= 1:
            return "Medium"
        return "Low"

    @staticmethod
    def quality_label(score: int) -> str:
        if score >= 80:
            return "Excellent"
        if score >= 70:
            return "Very Good"
        if score >= 60:
            return "Good"
        if score >= 50:
            return "Fair"
        if score >= 40:
            return "Poor"
        return "Very Poor"

    @staticmethod
    def color_tier(score: int) -> ColorTier:
        if score >= 70:
            return ColorTier.GREEN
        if score >= 50:
            return ColorTier.YELLOW
        return ColorTier.RED

    @staticmethod
    def recommendation(score: int, risk_label: str) -> str:
        if score >= 75 and risk_label != "Very High":
            return "Highly Recommended - Excellent ingredient!"
        if score >= 60 and risk_label == "Low":
            return "Recommended - Good quality ingredient"
        if score >= 50:
            return "Use with Caution - Mix with safer ingredients"
        if score >= 40:
            return "Risky - Only for experienced chefs"
        return "Avoid - Too risky right now"

    @staticmethod
    def chef_notes(snapshot: AssetSnapshot, score: int) -> List[str]:
        ticker = snapshot.ticker
        ratio = snapshot.long_short_ratio
        notes: List[str] = []

        # Opening
        if score >= 75:
            notes.append(f"Ah, {ticker}! A magnificent ingredient, my dear guest!")
        elif score >= 60:
            notes.append(f"Hmm, {ticker} is quite good, though needs careful preparation.")
        elif score >= 50:
            notes.append(f"{ticker}? A bit tricky, but manageable with the right recipe.")
        else:
            notes.append(f"Oh dear, {ticker} is rather... unpredictable at the moment.")

        # Crowding
        if ratio > 70:
            notes.append(f"Everyone wants a taste! {ratio:g}% longs - beware of the crowd!")
        elif ratio < 30:
            notes.append(f"Too many shorts! {100 - ratio:g}% betting against it - contrarian opportunity?")
        elif 50 <= ratio <= 60:
            notes.append("Perfectly balanced sentiment - like a well-seasoned dish!")

        # Activity
        traders = snapshot.total_traders
        if traders > 100:
            notes.append(f"{traders} traders watching - very popular ingredient!")
        elif traders < LOW_TRADER_COUNT:
            notes.append(f"Only {traders} traders - not very popular, handle with care!")

        if snapshot.majority_side_profitable:
            notes.append("The majority is profitable - a good sign!")
        else:
            notes.append("Currently losing - might need time to recover.")

        # Closing advice
        if score >= 70:
            notes.append("I recommend using this in aggressive growth recipes!")
        elif score >= 60:
            notes.append("Perfect for balanced recipes with risk management!")
        elif score >= 50:
            notes.append("Use sparingly, and always with a protective stop-loss!")
        else:
            notes.append("Perhaps wait for better market conditions, dear guest!")

        return notes
