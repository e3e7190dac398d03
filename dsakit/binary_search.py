"""Binary search over sorted and rotated sequences."""

from bisect import bisect_left, bisect_right
from math import isqrt


def lower_bound(values, x):
    """Index of the first item of the sorted ``values`` not less than ``x``.

    Returns ``len(values)`` when every item is smaller.
    """
    return bisect_left(values, x)


def upper_bound(values, x):
    """Index of the first item of the sorted ``values`` greater than ``x``.

    Returns ``len(values)`` when no item is greater.
    """
    return bisect_right(values, x)


def floor_and_ceil(values, x):
    """``(floor, ceil)`` of ``x`` in the sorted ``values``.

    The floor is the largest item not above ``x`` and the ceiling the smallest
    item not below it; either is None when no such item exists.
    """
    after = bisect_right(values, x)
    floor = values[after - 1] if after > 0 else None
    start = bisect_left(values, x)
    ceil = values[start] if start < len(values) else None
    return floor, ceil


def find_peak_element(values):
    """Index of an item no smaller than its neighbours.

    Raises ValueError when ``values`` is empty.
    """
    if not values:
        raise ValueError("find_peak_element() arg is an empty sequence")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid] < values[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def search_range(values, target):
    """``(first, last)`` indices of ``target`` in the sorted ``values``, or None."""
    first = bisect_left(values, target)
    if first == len(values) or values[first] != target:
        return None
    return first, bisect_right(values, target) - 1


def count_occurrences(values, x):
    """Number of times ``x`` occurs in the sorted ``values``."""
    return bisect_right(values, x) - bisect_left(values, x)


def search_rotated(values, target):
    """Index of ``target`` in a rotated sorted sequence of distinct items, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def search_rotated_with_duplicates(values, target):
    """Return True if ``target`` occurs in a rotated sorted sequence with repeats."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return True
        if values[low] == values[mid] == values[high]:
            low += 1
            high -= 1
            continue
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def single_non_duplicate(values):
    """The one item of a sorted sequence whose other items all come in pairs.

    Raises ValueError when ``values`` is empty.
    """
    if not values:
        raise ValueError("single_non_duplicate() arg is an empty sequence")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if mid % 2:
            mid -= 1
        if values[mid] == values[mid + 1]:
            low = mid + 2
        else:
            high = mid
    return values[low]


def floor_sqrt(n):
    """Largest integer whose square does not exceed ``n``; negative ``n`` raises."""
    return isqrt(n)