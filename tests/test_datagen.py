import random

import pytest

from hsort.datagen import (
    RANDOM_HIGH,
    SCENARIOS,
    best_case,
    generate_many_duplicates,
    generate_many_unique_spread,
    random_ints,
    trend_with_jumps,
    worst_case,
    worst_case_alternating_high_low,
)


@pytest.mark.parametrize("name", list(SCENARIOS))
@pytest.mark.parametrize("n", [1, 2, 17, 100])
def test_scenarios_have_requested_length(name, n):
    arr = SCENARIOS[name](n, rng=random.Random(0))
    assert len(arr) == n
    assert all(isinstance(x, int) for x in arr)


@pytest.mark.parametrize("name", list(SCENARIOS))
def test_scenarios_are_reproducible(name):
    a = SCENARIOS[name](50, rng=random.Random(3))
    b = SCENARIOS[name](50, rng=random.Random(3))
    assert a == b


def test_fixed_shapes():
    assert best_case(4) == [0, 1, 2, 3]
    assert worst_case(4) == [4, 3, 2, 1]
    assert worst_case_alternating_high_low(5) == [5, 1, 4, 2, 3]


def test_random_ints_bounds():
    arr = random_ints(500, -3, 3, rng=random.Random(1))
    assert min(arr) >= -3
    assert max(arr) <= 3


def test_trend_with_jumps_stays_positive():
    arr = trend_with_jumps(1_000, jump_prob=0.5, rng=random.Random(2))
    assert min(arr) >= 1


def test_many_duplicates():
    arr = generate_many_duplicates(200, distinct_values=3, max_value=20, rng=random.Random(4))
    assert len(set(arr)) <= 3


def test_unique_spread():
    arr = generate_many_unique_spread(100, range_multiplier=10, rng=random.Random(5))
    assert len(set(arr)) == 100
    assert max(arr) <= 1_000


def test_random_scenario_default_range():
    arr = SCENARIOS["random"](2_000, rng=random.Random(6))
    assert min(arr) >= 1
    assert max(arr) <= RANDOM_HIGH
