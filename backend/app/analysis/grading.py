"""Shared grading utilities for converting ESG scores to ratings, tiers and bands."""
import math


def score_to_rating(score: float) -> str:
    """Convert a 0-100 ESG score to a letter rating.

    Bands are inclusive on their lower bound:
      AAA >= 90, AA >= 85, A >= 75, BBB >= 65, BB >= 55,
      B >= 45, CCC >= 35, CC >= 25, otherwise C.
    """
    if score >= 90:
        return "AAA"
    elif score >= 85:
        return "AA"
    elif score >= 75:
        return "A"
    elif score >= 65:
        return "BBB"
    elif score >= 55:
        return "BB"
    elif score >= 45:
        return "B"
    elif score >= 35:
        return "CCC"
    elif score >= 25:
        return "CC"
    else:
        return "C"


def rating_to_tier(rating: str) -> str:
    if rating.startswith("A"):
        return "leader"
    elif rating.startswith("B"):
        return "average"
    else:
        return "laggard"


def score_to_band(score: float) -> str:
    if score >= 75:
        return "strong"
    elif score >= 50:
        return "moderate"
    else:
        return "weak"


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def finite_or(value: float, default: float = 0) -> float:
    """Return the default for NaN and infinities."""
    if not isinstance(value, (int, float)) or math.isnan(value) or math.isinf(value):
        return default
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (47.5 -> 48, 46.5 -> 47).

    Built-in round() uses banker's rounding, which would move published
    scores by a point on exact halves.
    """
    return int(math.floor(value + 0.5))
