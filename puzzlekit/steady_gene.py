"""Steady gene: the shortest stretch to replace so every base occurs equally often."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields

_NAMED_BASES = "ACG"


def _slot(base: str) -> int:
    """Index of a base in (A, C, G, T); anything that is not A, C or G counts as T."""
    index = _NAMED_BASES.find(base)
    return 3 if index < 0 else index


@dataclass(frozen=True)
class BaseCount:
    """How many of each base, A, C, G and T, a stretch of gene holds."""

    a: int = 0
    c: int = 0
    g: int = 0
    t: int = 0

    @classmethod
    def from_sequence(cls, sequence: Iterable[str]) -> BaseCount:
        """Count the bases of ``sequence``; characters other than A, C and G count as T."""
        totals = [0, 0, 0, 0]
        for base in sequence:
            totals[_slot(base)] += 1
        return cls(*totals)

    def covers(self, other: BaseCount) -> bool:
        """Tell whether every count here is at least the matching count of ``other``."""
        return all(
            getattr(self, field.name) >= getattr(other, field.name)
            for field in fields(self)
        )


def excess_counts(sequence: str) -> BaseCount:
    """How far each base's count goes beyond a quarter of the sequence length, never below zero."""
    quarter = len(sequence) // 4
    counts = BaseCount.from_sequence(sequence)
    return BaseCount(
        *(max(getattr(counts, field.name) - quarter, 0) for field in fields(counts))
    )


def steady_gene(sequence: str) -> int:
    """Length of the shortest substring whose replacement makes the gene steady."""
    target = excess_counts(sequence)
    if BaseCount().covers(target):
        return 0

    best = len(sequence)
    window = [0, 0, 0, 0]
    left = 0
    for right, base in enumerate(sequence):
        window[_slot(base)] += 1
        while BaseCount(*window).covers(target):
            best = min(best, right - left + 1)
            window[_slot(sequence[left])] -= 1
            left += 1
    return best