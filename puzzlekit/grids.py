"""Grid puzzles: connected regions of filled cells and knight-like moves on a board."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_NEIGHBOURS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


def largest_region(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest group of cells holding 1, joined across sides and corners."""
    filled = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == 1
    }
    best = 0
    while filled:
        start = filled.pop()
        queue = deque([start])
        size = 1
        while queue:
            i, j = queue.popleft()
            for di, dj in _NEIGHBOURS:
                neighbour = (i + di, j + dj)
                if neighbour in filled:
                    filled.remove(neighbour)
                    queue.append(neighbour)
                    size += 1
        best = max(best, size)
    return best


def knight_moves(n: int, a: int, b: int) -> int:
    """Moves of an (a, b) knight from the far corner to (0, 0) on an n-by-n board.

    Distances are spread by a single sweep from cell (n-1, n-1) back towards
    (0, 0), each reached cell relaxing its eight jumps once. Returns -1 when
    that sweep never reaches (0, 0).
    """
    if n < 1:
        raise ValueError("board size must be positive")
    jumps = {
        (sa * x, sb * y)
        for x, y in ((a, b), (b, a))
        for sa in (1, -1)
        for sb in (1, -1)
    }
    distance: dict[tuple[int, int], int] = {(n - 1, n - 1): 0}
    for i in reversed(range(n)):
        for j in reversed(range(n)):
            here = distance.get((i, j))
            if here is None:
                continue
            for di, dj in jumps:
                target = (i + di, j + dj)
                if 0 <= target[0] < n and 0 <= target[1] < n:
                    known = distance.get(target)
                    if known is None or known > here + 1:
                        distance[target] = here + 1
    return distance.get((0, 0), -1)


def knight_move_table(n: int) -> list[tuple[int, int, int]]:
    """Rows ``(a, b, moves)`` for every 1 <= a <= b < n on an n-by-n board."""
    return [(a, b, knight_moves(n, a, b)) for a in range(1, n) for b in range(a, n)]