"""Small counting and summing puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

_UINT32_MASK = 0xFFFFFFFF

_TEN_POWERS: dict[int, int] = {exponent: 10**exponent for exponent in range(11)}


def very_big_sum(values: Iterable[int]) -> int:
    """Return the exact sum of the given integers."""
    return sum(values)


def camel_case_words(s: str) -> int:
    """Count the words in a camelCase identifier.

    The first word starts in lower case, so the count is one more than
    the number of upper-case ASCII letters.
    """
    return 1 + sum(1 for char in s if "A" <= char <= "Z")


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference between the two diagonal sums of a square matrix."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    primary = sum(row[index] for index, row in enumerate(matrix))
    secondary = sum(row[size - 1 - index] for index, row in enumerate(matrix))
    return abs(primary - secondary)


def _has_single_bit(value: int) -> bool:
    return value != 0 and value & (value - 1) == 0


def single_bit_and_pairs(values: Sequence[int]) -> int:
    """Count pairs whose bitwise AND, read as a 32-bit unsigned value, is a power of two."""
    return sum(
        1
        for first, second in combinations(values, 2)
        if _has_single_bit((first & second) & _UINT32_MASK)
    )


def construction_cost(s: str) -> int:
    """Cost of building ``s`` when each new character costs one and copies are free."""
    return len(set(s))


def has_balanced_index(values: Sequence[int]) -> bool:
    """Tell whether some element has equal sums to its left and to its right."""
    left = 0
    right = sum(values)
    for value in values:
        right -= value
        if left == right:
            return True
        left += value
    return False


def is_valid_string(s: str) -> bool:
    """Tell whether the character frequencies of ``s`` count as valid.

    Valid means all characters occur equally often, or there are exactly
    two distinct frequencies and one of them is shared by a single character.
    """
    frequencies = Counter(Counter(s).values())
    if len(frequencies) == 1:
        return True
    if len(frequencies) == 2:
        return 1 in frequencies.values()
    return False


def coin_change_ways(amount: int, coins: Iterable[int]) -> int:
    """Count the ways of making ``amount`` from unlimited coins of the given values."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def power_of_ten(n: int) -> int:
    """Return ten to the power ``n``, built by repeated halving of the exponent."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    cached = _TEN_POWERS.get(n)
    if cached is not None:
        return cached
    half = power_of_ten(n // 2)
    result = half * half
    if n % 2:
        result *= 10
    _TEN_POWERS[n] = result
    return result