"""Bike racers: bipartite matching and the earliest moment a race can start."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Point = tuple[int, int]

_UNREACHED = -1


def max_matching(
    left_count: int, right_count: int, edges: Iterable[tuple[int, int]]
) -> int:
    """Size of a maximum matching in a bipartite graph, found by Hopcroft-Karp.

    ``edges`` holds pairs ``(left, right)`` of zero-based vertex indices.
    """
    if left_count < 0 or right_count < 0:
        raise ValueError("vertex counts must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(left_count)]
    for left, right in edges:
        if not (0 <= left < left_count and 0 <= right < right_count):
            raise ValueError(f"edge ({left}, {right}) is out of range")
        adjacency[left].append(right)

    match_of_left: list[int | None] = [None] * left_count
    match_of_right: list[int | None] = [None] * right_count

    def layer() -> list[int]:
        distance = [_UNREACHED] * left_count
        queue: deque[int] = deque()
        for vertex in range(left_count):
            if match_of_left[vertex] is None:
                distance[vertex] = 0
                queue.append(vertex)
        while queue:
            vertex = queue.popleft()
            for right in adjacency[vertex]:
                partner = match_of_right[right]
                if partner is not None and distance[partner] == _UNREACHED:
                    distance[partner] = distance[vertex] + 1
                    queue.append(partner)
        return distance

    size = 0
    while True:
        distance = layer()
        visited = [False] * left_count

        def augment(vertex: int) -> bool:
            visited[vertex] = True
            for right in adjacency[vertex]:
                partner = match_of_right[right]
                if partner is None or (
                    not visited[partner]
                    and distance[partner] == distance[vertex] + 1
                    and augment(partner)
                ):
                    match_of_right[right] = vertex
                    match_of_left[vertex] = right
                    return True
            return False

        found = sum(
            1
            for vertex in range(left_count)
            if match_of_left[vertex] is None and augment(vertex)
        )
        if not found:
            return size
        size += found


def bike_race_time(
    bikers: Sequence[Sequence[int]], bikes: Sequence[Sequence[int]], k: int
) -> int:
    """Smallest squared time after which ``k`` bikers can each have their own bike.

    Bikers, and bikes, that share a position count only once. When ``k``
    pairs can never be formed, the largest squared distance is returned.
    """
    if k < 1:
        raise ValueError("k must be at least one")
    riders: list[Point] = list(dict.fromkeys((x, y) for x, y in bikers))
    machines: list[Point] = list(dict.fromkeys((x, y) for x, y in bikes))
    if not riders or not machines:
        raise ValueError("there must be at least one biker and one bike")

    distances = sorted(
        ((rx - mx) ** 2 + (ry - my) ** 2, rider, machine)
        for rider, (rx, ry) in enumerate(riders)
        for machine, (mx, my) in enumerate(machines)
    )
    times = sorted({distance for distance, _, _ in distances})

    def enough(limit: int) -> bool:
        edges = [(rider, machine) for d, rider, machine in distances if d <= limit]
        return max_matching(len(riders), len(machines), edges) >= k

    low, high = 0, len(times) - 1
    while low < high:
        middle = (low + high) // 2
        if enough(times[middle]):
            high = middle
        else:
            low = middle + 1
    return times[low]