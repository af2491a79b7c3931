import math

import pytest

from growth_backend.handlers.ratings.rating_classifier import (
    AT_RISK,
    EXCELLENT,
    GOOD,
    NEEDS_ATTENTION,
    NO_DATA,
    clamp_rating,
    classify,
    level_rank,
)


@pytest.mark.parametrize("rating, expected", [
    (5.0, EXCELLENT),
    (4.5, EXCELLENT),
    (4.49, GOOD),
    (3.5, GOOD),
    (3.49, NEEDS_ATTENTION),
    (2.5, NEEDS_ATTENTION),
    (2.49, AT_RISK),
    (0.0, AT_RISK),
])
def test_threshold_boundaries(rating, expected):
    assert classify(rating) == expected


def test_classifier_never_returns_no_data():
    assert classify(0.0).level != NO_DATA.level


def test_levels_are_monotonic():
    ratings = [step / 100 for step in range(0, 501)]
    ranks = [level_rank(classify(rating).level) for rating in ratings]
    assert ranks == sorted(ranks)


def test_colors():
    assert classify(4.8).color == "#4CAF50"
    assert classify(1.0).color == "#F44336"


def test_clamp_rating():
    assert clamp_rating(7) == 5.0
    assert clamp_rating(-1.5) == 0.0
    assert clamp_rating("3.25") == 3.25
    assert clamp_rating(None) == 0.0
    assert clamp_rating(float("nan")) == 0.0
    assert clamp_rating(math.inf) == 5.0
