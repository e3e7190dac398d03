"""Frequency counting and the counting query command."""

import argparse
import sys
from collections import Counter


def count_frequencies(values):
    """Map each distinct value to the number of times it occurs."""
    return dict(Counter(values))


def query_counts(values, queries):
    """Number of occurrences in ``values`` of each item in ``queries``."""
    counts = Counter(values)
    return [counts[query] for query in queries]


def _read_input(tokens):
    it = iter(tokens)
    n = int(next(it))
    values = [int(next(it)) for _ in range(n)]
    q = int(next(it))
    queries = [int(next(it)) for _ in range(q)]
    return values, queries


def main(argv=None):
    """Read numbers and queries from standard input and print their counts."""
    parser = argparse.ArgumentParser(
        description="Count integers read from standard input and answer queries."
    )
    parser.parse_args(argv)
    try:
        values, queries = _read_input(sys.stdin.read().split())
    except (ValueError, StopIteration):
        print("error: malformed input", file=sys.stderr)
        return 1
    for value, count in count_frequencies(values).items():
        print(f"{value}->{count}")
    for count in query_counts(values, queries):
        print(count)
    return 0