"""Score-weighted random choice of pickup grades."""

import random
from typing import List, Optional, Tuple

from gradeflap.game.entities import Grade

# Base weights, walked in this order when drawing
BASE_WEIGHTS: Tuple[Tuple[Grade, float], ...] = (
    (Grade.A, 20.0),
    (Grade.B, 12.0),
    (Grade.C, 25.0),
    (Grade.D, 15.0),
    (Grade.E, 10.0),
    (Grade.F, 8.0),
)

SCORE_FACTOR = 0.02
MAX_GOOD_MULTIPLIER = 2.0
MIN_BAD_MULTIPLIER = 0.3
FALLBACK_GRADE = Grade.C


def multipliers(score: int) -> Tuple[float, float]:
    """Return (favorable, unfavorable) weight multipliers for a score."""
    score = max(0, score or 0)
    good = min(MAX_GOOD_MULTIPLIER, 1 + score * SCORE_FACTOR)
    bad = max(MIN_BAD_MULTIPLIER, 1 - score * SCORE_FACTOR)
    return good, bad


def adjusted_weights(score: int) -> List[Tuple[Grade, float]]:
    """Base weights scaled so good grades grow more likely as score rises."""
    good, bad = multipliers(score)
    return [
        (grade, weight * (good if grade.favorable else bad))
        for grade, weight in BASE_WEIGHTS
    ]


def pick_grade(score: int, rng: Optional[random.Random] = None) -> Grade:
    """Draw one grade from the score-adjusted distribution.

    Args:
        score: Current run score (negative values count as 0)
        rng: Random source; the module-level generator when omitted

    Returns:
        One of the six grades, never None
    """
    rng = rng or random
    entries = adjusted_weights(score)
    total = sum(weight for _, weight in entries)

    r = rng.random() * total
    for grade, weight in entries:
        if r < weight:
            return grade
        r -= weight

    # Only reachable through float rounding at the very top of the range
    return FALLBACK_GRADE
