import random

import pytest

from gradeflap.game.entities import Grade
from gradeflap.game.picker import adjusted_weights, multipliers, pick_grade

from conftest import FixedRandom


def test_multipliers_at_zero_score():
    assert multipliers(0) == (1.0, 1.0)


def test_multipliers_clamp_at_high_score():
    good, bad = multipliers(500)
    assert good == 2.0
    assert bad == 0.3


def test_negative_score_treated_as_zero():
    assert adjusted_weights(-10) == adjusted_weights(0)


@pytest.mark.parametrize("score", [0, 1, 10, 35, 50, 100, 10_000])
def test_total_weight_positive_and_draw_in_enum(score):
    total = sum(w for _, w in adjusted_weights(score))
    assert total > 0

    rng = random.Random(score)
    for _ in range(200):
        assert pick_grade(score, rng) in Grade


def test_favorable_weights_grow_with_score():
    low = dict(adjusted_weights(0))
    high = dict(adjusted_weights(30))
    assert high[Grade.A] > low[Grade.A]
    assert high[Grade.F] < low[Grade.F]


def test_draw_walks_grades_in_order():
    # Score 0 cumulative weights: A 20, B 32, C 57, D 72, E 82, F 90
    assert pick_grade(0, FixedRandom(0.0)) is Grade.A
    assert pick_grade(0, FixedRandom(25 / 90)) is Grade.B
    assert pick_grade(0, FixedRandom(60 / 90)) is Grade.D
    assert pick_grade(0, FixedRandom(0.9999)) is Grade.F


def test_fallback_is_middle_grade():
    assert pick_grade(0, FixedRandom(1.0)) is Grade.C
