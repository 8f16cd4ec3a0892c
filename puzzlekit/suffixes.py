"""Suffix arrays and the longest earlier, non-overlapping repeat at each position."""

from __future__ import annotations

from itertools import pairwise


def suffix_array(s: str) -> list[int]:
    """Start positions of the suffixes of ``s`` in lexicographic order.

    Built by prefix doubling: suffixes are ranked by their first 2**k
    characters until every rank is distinct.
    """
    n = len(s)
    order = list(range(n))
    rank = [ord(char) for char in s]
    span = 1
    while span < n:
        keys = [
            (rank[i], rank[i + span] if i + span < n else -1) for i in range(n)
        ]
        order.sort(key=keys.__getitem__)
        new_rank = [0] * n
        for previous, current in pairwise(order):
            new_rank[current] = new_rank[previous] + (keys[previous] < keys[current])
        rank = new_rank
        span *= 2
    return order


def _match_length(s: str, start: int, position: int) -> int:
    """Length of the common prefix of ``s[start:]`` and ``s[position:]`` ending before ``position``."""
    length = 0
    n = len(s)
    while (
        start + length < position
        and position + length < n
        and s[start + length] == s[position + length]
    ):
        length += 1
    return length


def longest_previous_match(s: str) -> list[int]:
    """For each position, the longest prefix of the rest of ``s`` that also lies wholly before it.

    Entry ``i`` is the largest ``length`` such that ``s[i:i + length]``
    occurs as a substring of ``s[:i]``.
    """
    n = len(s)
    order = suffix_array(s)
    rank = [0] * n
    for position, start in enumerate(order):
        rank[start] = position

    lengths = []
    for i, char in enumerate(s):
        best = 0
        for neighbours in (reversed(range(rank[i])), range(rank[i] + 1, n)):
            for position in neighbours:
                start = order[position]
                if start > i:
                    continue
                if s[start] != char:
                    break
                length = _match_length(s, start, i)
                best = max(best, length)
                if start + length < i:
                    break
        lengths.append(best)
    return lengths