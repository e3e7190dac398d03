"""Everyday array problems: extremes, set operations on sorted data, rotations."""

from functools import reduce
from itertools import accumulate, groupby
from operator import xor


def largest_element(values):
    """Largest item of ``values``; raises ValueError when it is empty."""
    return max(values)


def intersection(a, b):
    """Distinct items common to the sorted sequences ``a`` and ``b``, in order."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            if not result or result[-1] != a[i]:
                result.append(a[i])
            i += 1
            j += 1
    return result


def max_consecutive_ones(values):
    """Length of the longest run of 1s in ``values``."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(values) if key == 1),
        default=0,
    )


def remove_duplicates(values):
    """Items of the sorted ``values`` with repeats collapsed to one."""
    return [key for key, _ in groupby(values)]


def single_number(values):
    """The item that appears once when every other item appears twice."""
    return reduce(xor, values, 0)


def move_zeroes(values):
    """Items of ``values`` with every zero moved to the end, others kept in order."""
    items = list(values)
    nonzero = [item for item in items if item != 0]
    return nonzero + [0] * (len(items) - len(nonzero))


def rotate_left(values, k):
    """``values`` rotated ``k`` places to the left; ``k`` wraps around the length."""
    items = list(values)
    if not items:
        return []
    k %= len(items)
    return items[k:] + items[:k]


def rotate_right(values, k):
    """``values`` rotated ``k`` places to the right; ``k`` wraps around the length."""
    return rotate_left(values, -k)


def second_largest(values):
    """Second largest distinct item, or None if there is no such item."""
    largest = second = None
    for value in values:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value != largest and (second is None or value > second):
            second = value
    return second


def second_smallest(values):
    """Second smallest distinct item, or None if there is no such item."""
    smallest = second = None
    for value in values:
        if smallest is None or value < smallest:
            second, smallest = smallest, value
        elif value != smallest and (second is None or value < second):
            second = value
    return second


def max_profit(prices):
    """Best gain from one buy followed by one later sell; 0 if none is positive."""
    prices = list(prices)
    return max(
        (price - lowest for price, lowest in zip(prices, accumulate(prices, min))),
        default=0,
    )