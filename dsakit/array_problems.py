"""Array problems: pair sums, subarray sums, majorities, permutations and more."""

from collections import Counter
from functools import reduce
from itertools import zip_longest
from operator import xor

_COLOURS = frozenset((0, 1, 2))
_MISSING = object()


def two_sum_pair(values, target):
    """Indices ``(i, j)`` with ``i < j`` of the first pair summing to ``target``.

    Returns None when no such pair exists.
    """
    items = list(values)
    for i, first in enumerate(items):
        for j in range(i + 1, len(items)):
            if first + items[j] == target:
                return i, j
    return None


def has_two_sum(values, target):
    """Return True if two distinct items of ``values`` add up to ``target``."""
    items = sorted(values)
    left, right = 0, len(items) - 1
    while left < right:
        total = items[left] + items[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False


def is_sorted_rotated(values):
    """Return True if ``values`` is a non-decreasing sequence, possibly rotated."""
    items = list(values)
    if not items:
        return True
    drops = sum(1 for a, b in zip(items, items[1:]) if a > b)
    if items[-1] > items[0]:
        drops += 1
    return drops <= 1


def max_subarray(values):
    """Largest sum of a non-empty contiguous slice, with the slice itself.

    Returns ``(best_sum, slice)``; raises ValueError when ``values`` is empty.
    """
    items = list(values)
    if not items:
        raise ValueError("max_subarray() arg is an empty sequence")
    best = None
    bounds = (0, 0)
    total = 0
    start = 0
    for i, value in enumerate(items):
        if total == 0:
            start = i
        total += value
        if best is None or total > best:
            best = total
            bounds = (start, i)
        if total < 0:
            total = 0
    first, last = bounds
    return best, items[first:last + 1]


def leaders(values):
    """Items greater than every item to their right, in their original order."""
    result = []
    highest = _MISSING
    for value in reversed(list(values)):
        if highest is _MISSING or value > highest:
            result.append(value)
            highest = value
    result.reverse()
    return result


def longest_subarray_with_sum(values, k):
    """Length of the longest contiguous slice summing to ``k`` (any signs)."""
    first_seen = {}
    total = 0
    best = 0
    for i, value in enumerate(values):
        total += value
        if total == k:
            best = max(best, i + 1)
        earlier = first_seen.get(total - k)
        if earlier is not None:
            best = max(best, i - earlier)
        first_seen.setdefault(total, i)
    return best


def longest_subarray_with_sum_nonnegative(values, k):
    """Length of the longest contiguous slice summing to ``k``.

    Only valid for sequences without negative items; uses a sliding window.
    """
    items = list(values)
    best = 0
    left = 0
    total = 0
    for right, value in enumerate(items):
        total += value
        while left <= right and total > k:
            total -= items[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def majority_element(values):
    """Item occurring more than half the time, or None if there is none."""
    items = list(values)
    candidate = None
    count = 0
    for value in items:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def majority_elements_third(values):
    """Items occurring more than a third of the time, in order of first appearance."""
    items = list(values)
    counts = Counter(items)
    limit = len(items) // 3
    result = []
    for value in items:
        if value not in result and counts[value] > limit:
            result.append(value)
            if len(result) == 2:
                break
    return result


def missing_number(values):
    """The one number of ``0..len(values)`` that is absent from ``values``."""
    items = list(values)
    return reduce(xor, range(len(items) + 1), 0) ^ reduce(xor, items, 0)


def next_permutation(values):
    """The next permutation in lexicographic order, wrapping to the smallest."""
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        items.reverse()
        return items
    swap = next(
        j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
    )
    items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def rearrange_by_sign(values):
    """Alternate non-negative and negative items, starting with a non-negative.

    Relative order inside each group is kept; surplus items go at the end.
    """
    items = list(values)
    positives = [value for value in items if value >= 0]
    negatives = [value for value in items if value < 0]
    result = []
    for pos, neg in zip_longest(positives, negatives, fillvalue=_MISSING):
        result.extend(value for value in (pos, neg) if value is not _MISSING)
    return result


def longest_consecutive(values):
    """Length of the longest run of consecutive integers found in ``values``."""
    present = set(values)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        best = max(best, end - value + 1)
    return best


def sort_colors(values):
    """Sort a sequence of 0s, 1s and 2s in one pass; other items raise ValueError."""
    items = list(values)
    invalid = [value for value in items if value not in _COLOURS]
    if invalid:
        raise ValueError(f"expected only 0, 1 or 2, got {invalid[0]!r}")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def count_subarrays_with_sum(values, k):
    """Number of contiguous slices of ``values`` whose items sum to ``k``."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count