"""Minimum loss: buy in one year, sell later at a lower price, losing as little as possible."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def minimum_loss(prices: Sequence[int]) -> int:
    """Smallest positive loss from buying at one price and selling later at a lower one.

    Only neighbouring distinct price levels are compared. Raises ValueError
    when no such sale is possible.
    """
    spans: dict[int, tuple[int, int]] = {}
    for year, price in enumerate(prices):
        first, _ = spans.get(price, (year, year))
        spans[price] = (first, year)

    best: int | None = None
    levels = sorted(spans.items())
    for (low, (_, low_last)), (high, (high_first, _)) in pairwise(levels):
        if high_first < low_last:
            loss = high - low
            if best is None or loss < best:
                best = loss
    if best is None:
        raise ValueError("no later sale at a lower price is possible")
    return best