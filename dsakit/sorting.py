"""Classic comparison sorts; each returns a new sorted list."""

from heapq import merge as _merge


def insertion_sort(values):
    """Sort by sinking each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def merge_sort(values):
    """Sort by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(_merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items, low, high):
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i < high:
            i += 1
        while items[j] > pivot and j > low:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values):
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def selection_sort(values):
    """Sort by repeatedly moving the smallest remaining item forward."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values):
    """Sort by adjacent swaps, stopping early once a pass makes none."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items