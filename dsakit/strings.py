"""String algorithms: anagrams, palindromes, word handling and parsing."""

from collections import Counter
from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_DIGITS = frozenset("0123456789")
_VOWELS = frozenset("aeiou")


def is_anagram(s, t):
    """Return True if ``t`` uses exactly the same letters as ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def beauty_sum(s):
    """Sum, over all substrings, of the most minus the least frequent letter count."""
    total = 0
    for start in range(len(s)):
        counts = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def is_isomorphic(s, t):
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward, backward = {}, {}
    for a, b in zip(s, t):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def length_of_last_word(s):
    """Length of the last space-separated word in ``s`` (0 if there is none)."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def largest_odd_number(num):
    """Longest prefix of the digit string ``num`` that ends in an odd digit."""
    return num.rstrip("02468")


def _expand(s, left, right):
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s):
    """Longest palindromic substring of ``s``; the earliest one wins ties."""
    if not s:
        return ""
    start, best = 0, 1
    for i in range(len(s)):
        length = max(_expand(s, i, i), _expand(s, i, i + 1))
        if length > best:
            best = length
            start = i - (length - 1) // 2
    return s[start:start + best]


def reverse_words(s):
    """Words of ``s`` in reverse order, joined by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def rotate_string(s, goal):
    """Return True if ``goal`` is some rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def longest_common_prefix(strs):
    """Longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    first, *rest = strs
    for i, ch in enumerate(first):
        if any(i >= len(other) or other[i] != ch for other in rest):
            return first[:i]
    return first


def frequency_sort(s):
    """Characters of ``s`` grouped together, most frequent first."""
    return "".join(ch * n for ch, n in Counter(s).most_common())


def my_atoi(s):
    """Parse a leading signed integer from ``s``, clamped to the 32-bit range."""
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    result = 0
    for ch in takewhile(_DIGITS.__contains__, rest):
        result = result * 10 + int(ch)
        if result * sign >= INT_MAX:
            return INT_MAX
        if result * sign <= INT_MIN:
            return INT_MIN
    return result * sign


def is_palindrome(s):
    """Return True if ``s`` reads the same backwards."""
    return s == s[::-1]


def count_vowels(s):
    """Number of lower-case vowels in ``s``."""
    return sum(1 for ch in s if ch in _VOWELS)