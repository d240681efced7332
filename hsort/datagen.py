from __future__ import annotations

import random
from typing import Callable

Generator = Callable[..., list[int]]


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


# kept narrow: hash_int walks every value between min and max
RANDOM_HIGH = 1_000_000


def random_ints(n, low=1, high=RANDOM_HIGH, rng=None):
    r = _rng(rng)
    return [r.randint(low, high) for _ in range(n)]


def trend_with_jumps(n, jump_prob=0.05, rng=None):
    r = _rng(rng)
    arr = []
    value = 1
    for _ in range(n):
        if r.random() < jump_prob:
            value += r.randint(-10, 10)
        else:
            value += r.randint(0, 1)

        if value < 1:
            value = 1

        arr.append(value)

    return arr


def worst_case(n, rng=None):
    return list(range(n, 0, -1))


def best_case(n, rng=None):
    return list(range(n))


def worst_case_alternating_high_low(n, rng=None):
    high = list(range(n, 0, -1))
    low = list(range(1, n + 1))
    arr = []
    for h, l in zip(high, low):
        arr.append(h)
        arr.append(l)
    return arr[:n]


def generate_many_duplicates(n, distinct_values=3, max_value=20, rng=None):
    r = _rng(rng)
    base_values = r.sample(range(1, max_value + 1), k=distinct_values)
    return [r.choice(base_values) for _ in range(n)]


def generate_many_unique_spread(n, range_multiplier=1000, rng=None):
    """
    range_multiplier - "range" of values will be n * range_multiplier
    """
    r = _rng(rng)
    max_value = n * range_multiplier
    return r.sample(range(1, max_value + 1), n)


SCENARIOS: dict[str, Generator] = {
    "random": random_ints,
    "jumps": trend_with_jumps,
    "best": best_case,
    "worst": worst_case,
    "alternating": worst_case_alternating_high_low,
    "duplicates": generate_many_duplicates,
    "unique": generate_many_unique_spread,
}
