"""Classic array, string, matrix, sorting and binary-search algorithms."""

__version__ = "0.1.0"
__all__ = [
    "answers",
    "array_problems",
    "arrays",
    "binary_search",
    "combinatorics",
    "frequency",
    "matrix",
    "sorting",
    "strings",
]