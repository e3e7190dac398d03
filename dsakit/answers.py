"""Binary search on the answer: the least value for which a test passes."""


def _least_passing(low, high, passes):
    """Smallest value in ``[low, high]`` for which ``passes`` holds, else ``high + 1``."""
    while low <= high:
        mid = (low + high) // 2
        if passes(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def min_eating_speed(piles, hours):
    """Least eating speed that finishes every pile within ``hours``.

    Raises ValueError when there are no piles or fewer hours than piles.
    """
    piles = list(piles)
    if not piles:
        raise ValueError("min_eating_speed() needs at least one pile")
    if hours < len(piles):
        raise ValueError("cannot finish every pile in fewer hours than piles")

    def finishes(speed):
        return sum(-(-pile // speed) for pile in piles) <= hours

    return _least_passing(1, max(piles), finishes)


def min_bouquet_days(bloom_days, k, m):
    """Least day by which ``m`` bouquets of ``k`` adjacent flowers can be made.

    Returns None when there are too few flowers for that many bouquets.
    """
    days = list(bloom_days)
    if m * k > len(days):
        return None

    def enough(day):
        bouquets = 0
        run = 0
        for bloom in days:
            if bloom <= day:
                run += 1
            else:
                bouquets += run // k
                run = 0
        bouquets += run // k
        return bouquets >= m

    return _least_passing(min(days), max(days), enough)


def smallest_divisor(values, threshold):
    """Least divisor for which the rounded-up quotients sum to at most ``threshold``.

    The search never goes above the largest item, which is returned when no
    smaller divisor suffices.
    """
    values = list(values)
    largest = max(values)

    def within(divisor):
        return sum(-(-value // divisor) for value in values) <= threshold

    return min(_least_passing(1, largest - 1, within), largest)


def _parts_needed(values, limit):
    parts = 1
    current = 0
    for value in values:
        if current + value > limit:
            parts += 1
            current = 0
        current += value
    return parts


def ship_within_days(weights, days):
    """Least ship capacity that carries every weight, in order, within ``days``."""
    weights = list(weights)
    return _least_passing(
        max(weights),
        sum(weights),
        lambda capacity: _parts_needed(weights, capacity) <= days,
    )


def split_array(values, k):
    """Least possible largest sum when ``values`` is cut into at most ``k`` slices."""
    values = list(values)
    return _least_passing(
        max(values),
        sum(values),
        lambda limit: _parts_needed(values, limit) <= k,
    )