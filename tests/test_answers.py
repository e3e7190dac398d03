import random

import pytest

from dsakit.answers import (
    min_bouquet_days,
    min_eating_speed,
    ship_within_days,
    smallest_divisor,
    split_array,
)


def _hours(piles, speed):
    return sum(-(-p // speed) for p in piles)


def _bouquets(days, day, k):
    count = run = 0
    for bloom in days:
        run = run + 1 if bloom <= day else 0
        if run == k:
            count += 1
            run = 0
    return count


def _parts(values, limit):
    parts, current = 1, 0
    for v in values:
        if current + v > limit:
            parts += 1
            current = 0
        current += v
    return parts


def test_min_eating_speed_source_example():
    assert min_eating_speed([7, 15, 6, 3], 8) == 5


@pytest.mark.parametrize("seed", range(5))
def test_min_eating_speed_is_least_feasible(seed):
    rng = random.Random(seed)
    for _ in range(30):
        piles = [rng.randint(1, 40) for _ in range(rng.randint(1, 8))]
        hours = rng.randint(len(piles), 3 * len(piles) + 10)
        speed = min_eating_speed(piles, hours)
        assert 1 <= speed <= max(piles)
        assert _hours(piles, speed) <= hours
        assert speed == 1 or _hours(piles, speed - 1) > hours


def test_min_eating_speed_errors():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)
    with pytest.raises(ValueError):
        min_eating_speed([1, 2, 3], 2)


def test_min_bouquet_days_source_example():
    assert min_bouquet_days([7, 7, 7, 7, 13, 11, 12, 7], 3, 2) == 12


def test_min_bouquet_days_too_few_flowers():
    assert min_bouquet_days([1, 2, 3], 2, 2) is None


@pytest.mark.parametrize("seed", range(5))
def test_min_bouquet_days_is_least_feasible(seed):
    rng = random.Random(seed)
    for _ in range(30):
        days = [rng.randint(1, 30) for _ in range(rng.randint(1, 12))]
        k = rng.randint(1, 3)
        m = rng.randint(1, max(1, len(days) // k))
        if m * k > len(days):
            continue
        day = min_bouquet_days(days, k, m)
        assert day in days
        assert _bouquets(days, day, k) >= m
        assert _bouquets(days, day - 1, k) < m


@pytest.mark.parametrize("seed", range(5))
def test_smallest_divisor_is_least_feasible(seed):
    rng = random.Random(seed)
    for _ in range(30):
        values = [rng.randint(1, 50) for _ in range(rng.randint(1, 8))]
        threshold = rng.randint(len(values), sum(values) + 5)
        d = smallest_divisor(values, threshold)
        assert _hours(values, d) <= threshold
        assert d == 1 or _hours(values, d - 1) > threshold


def test_smallest_divisor_caps_at_largest_item():
    values = [4, 9, 2]
    assert smallest_divisor(values, 1) == max(values)


@pytest.mark.parametrize("seed", range(5))
def test_ship_within_days_is_least_feasible(seed):
    rng = random.Random(seed)
    for _ in range(30):
        weights = [rng.randint(1, 20) for _ in range(rng.randint(1, 10))]
        days = rng.randint(1, len(weights))
        capacity = ship_within_days(weights, days)
        assert max(weights) <= capacity <= sum(weights)
        assert _parts(weights, capacity) <= days
        assert capacity == max(weights) or _parts(weights, capacity - 1) > days


def test_ship_within_days_extremes():
    weights = [3, 2, 2, 4, 1, 4]
    assert ship_within_days(weights, 1) == sum(weights)
    assert ship_within_days(weights, len(weights)) == max(weights)


@pytest.mark.parametrize("seed", range(5))
def test_split_array_is_least_feasible(seed):
    rng = random.Random(seed)
    for _ in range(30):
        values = [rng.randint(0, 20) for _ in range(rng.randint(1, 10))]
        k = rng.randint(1, len(values) + 2)
        limit = split_array(values, k)
        assert max(values) <= limit <= sum(values)
        assert _parts(values, limit) <= k
        assert limit == max(values) or _parts(values, limit - 1) > k


def test_split_array_single_part_is_total():
    values = [7, 2, 5, 10, 8]
    assert split_array(values, 1) == sum(values)