"""Command line entry point: solve a puzzle from input given on standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from puzzlekit.basics import has_balanced_index, very_big_sum
from puzzlekit.bike_racers import bike_race_time
from puzzlekit.build_string import build_string_cost
from puzzlekit.steady_gene import steady_gene


class _Tokens:
    """Whitespace-separated tokens read one at a time."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def rest(self) -> list[int]:
        return [int(item) for item in self._items]


def _very_big_sum(tokens: _Tokens) -> list[str]:
    tokens.number()
    return [str(very_big_sum(tokens.rest()))]


def _balanced_array(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.number()):
        values = tokens.numbers(tokens.number())
        lines.append("YES" if has_balanced_index(values) else "NO")
    return lines


def _build_string(tokens: _Tokens) -> list[str]:
    lines = []
    for _ in range(tokens.number()):
        tokens.number()
        a, b = tokens.number(), tokens.number()
        lines.append(str(build_string_cost(tokens.word(), a, b)))
    return lines


def _bike_racers(tokens: _Tokens) -> list[str]:
    bikers_count, bikes_count, k = tokens.numbers(3)
    bikers = [tuple(tokens.numbers(2)) for _ in range(bikers_count)]
    bikes = [tuple(tokens.numbers(2)) for _ in range(bikes_count)]
    return [str(bike_race_time(bikers, bikes, k))]


def _steady_gene(tokens: _Tokens) -> list[str]:
    tokens.number()
    return [str(steady_gene(tokens.word()))]


_COMMANDS: dict[str, Callable[[_Tokens], list[str]]] = {
    "very-big-sum": _very_big_sum,
    "balanced-array": _balanced_array,
    "build-string": _build_string,
    "bike-racers": _bike_racers,
    "steady-gene": _steady_gene,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the named puzzle on standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="puzzlekit", description="Solve a puzzle read from standard input."
    )
    parser.add_argument("puzzle", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        lines = _COMMANDS[args.puzzle](_Tokens(sys.stdin.read()))
    except ValueError as error:
        print(f"puzzlekit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())