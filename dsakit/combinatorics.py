"""Binomial coefficients, Pascal's triangle and stair climbing."""


def n_cr(n, r):
    """Binomial coefficient n choose r, built up one factor at a time."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_triangle(n):
    """The first ``n`` rows of Pascal's triangle."""
    return [[n_cr(row, col) for col in range(row + 1)] for row in range(n)]


def climb_stairs(n):
    """Number of ways to climb ``n`` stairs taking one or two steps at a time."""
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b