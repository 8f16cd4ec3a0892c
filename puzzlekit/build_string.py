"""Build a string: append characters at one price or copy earlier substrings at another."""

from __future__ import annotations

from puzzlekit.suffixes import longest_previous_match


def build_string_cost(s: str, a: int, b: int) -> int:
    """Cheapest cost of building ``s`` left to right.

    Appending one character costs ``a``; appending any substring of what
    has already been built costs ``b``.
    """
    n = len(s)
    if n == 0:
        return 0
    reach = longest_previous_match(s)
    best: list[int | None] = [None] * n
    best[0] = a
    for i in range(1, n):
        before = best[i - 1]
        assert before is not None
        for end in (i, *range(i, i + reach[i])):
            cost = before + (a if end == i and best[i] is None else b)
            if end == i:
                single = before + a
                current = best[i]
                best[i] = single if current is None else min(current, single)
                if reach[i] == 0:
                    break
                cost = before + b
            current = best[end]
            best[end] = cost if current is None else min(current, cost)
    result = best[n - 1]
    assert result is not None
    return result