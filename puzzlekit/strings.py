"""String puzzles: palindromes, anagrams, alternating pairs and common children."""

from __future__ import annotations

from collections import Counter
from itertools import combinations, groupby

_NINE = "9"


def highest_palindrome(s: str, k: int) -> str:
    """Return the largest palindrome reachable from digit string ``s`` with at most ``k`` changes.

    Raises ValueError when ``k`` changes cannot make ``s`` a palindrome.
    """
    digits = list(s)
    n = len(digits)
    half = n // 2
    mismatches = sum(1 for i in range(half) if digits[i] != digits[n - 1 - i])
    if mismatches > k:
        raise ValueError("too few changes to make a palindrome")

    spare = k - mismatches
    for i in range(half):
        j = n - 1 - i
        left, right = digits[i], digits[j]
        if left == right:
            if left != _NINE and spare >= 2:
                digits[i] = digits[j] = _NINE
                spare -= 2
        elif _NINE in (left, right):
            digits[i] = digits[j] = _NINE
        elif spare >= 1:
            digits[i] = digits[j] = _NINE
            spare -= 1
        else:
            digits[i] = digits[j] = max(left, right)

    if spare > 0 and n % 2 == 1:
        digits[half] = _NINE
    return "".join(digits)


def substrings(s: str) -> list[str]:
    """Return every non-empty substring of ``s``, ordered by start then length."""
    n = len(s)
    return [s[start:end] for start in range(n) for end in range(start + 1, n + 1)]


def anagram_pairs(s: str) -> int:
    """Count unordered pairs of substrings of ``s`` that are anagrams of each other."""
    seen: Counter[str] = Counter()
    pairs = 0
    for part in substrings(s):
        key = "".join(sorted(part))
        pairs += seen[key]
        seen[key] += 1
    return pairs


def two_characters(s: str) -> int:
    """Length of the longest alternating string left after keeping exactly two letters of ``s``."""
    counts = Counter(s)
    best = 0
    for first, second in combinations(sorted(counts), 2):
        kept = (char for char in s if char in (first, second))
        if all(len(list(run)) == 1 for _, run in groupby(kept)):
            best = max(best, counts[first] + counts[second])
    return best


def common_child(s1: str, s2: str) -> int:
    """Length of the longest common subsequence of ``s1`` and ``s2``."""
    previous = [0] * (len(s2) + 1)
    for char1 in s1:
        current = [0]
        for position, char2 in enumerate(s2):
            if char1 == char2:
                current.append(previous[position] + 1)
            else:
                current.append(max(previous[position + 1], current[position]))
        previous = current
    return previous[-1]