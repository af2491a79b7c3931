import math
from typing import Any, List, Tuple

from .schema import RatingLevel

MIN_RATING: float = 0.0
MAX_RATING: float = 5.0

EXCELLENT_THRESHOLD: float = 4.5
GOOD_THRESHOLD: float = 3.5
NEEDS_ATTENTION_THRESHOLD: float = 2.5

EXCELLENT = RatingLevel(level="Excellent", color="#4CAF50")
GOOD = RatingLevel(level="Good", color="#2196F3")
NEEDS_ATTENTION = RatingLevel(level="Needs Attention", color="#FF9800")
AT_RISK = RatingLevel(level="At-Risk Level", color="#F44336")

# Only used by callers for synthesized zero records, never returned by classify()
NO_DATA = RatingLevel(level="No Data", color="#9E9E9E")

# Evaluated top-down, lower bounds are inclusive
RATING_THRESHOLDS: List[Tuple[float, RatingLevel]] = [
    (EXCELLENT_THRESHOLD, EXCELLENT),
    (GOOD_THRESHOLD, GOOD),
    (NEEDS_ATTENTION_THRESHOLD, NEEDS_ATTENTION),
]

LEVEL_ORDER: List[str] = [
    NO_DATA.level,
    AT_RISK.level,
    NEEDS_ATTENTION.level,
    GOOD.level,
    EXCELLENT.level,
]


def classify(rating: float) -> RatingLevel:
    for threshold, ratingLevel in RATING_THRESHOLDS:
        if rating >= threshold:
            return ratingLevel
    return AT_RISK


def level_rank(level: str) -> int:
    return LEVEL_ORDER.index(level)


def clamp_rating(value: Any) -> float:
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return MIN_RATING

    if math.isnan(rating):
        return MIN_RATING
    return max(MIN_RATING, min(MAX_RATING, rating))
