# puzzlekit

Solvers for well-known programming puzzles, usable as a library or, for
some of them, from the command line. It needs nothing beyond the Python
standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

The solvers are plain functions grouped by theme. Where a puzzle has no
answer for the given input, a `ValueError` is raised.

### `puzzlekit.basics`

- `very_big_sum(values)`: exact sum of the integers.
- `camel_case_words(s)`: words in a camelCase identifier (one plus the number of upper-case ASCII letters).
- `diagonal_difference(matrix)`: absolute difference of the two diagonal sums; raises `ValueError` if the matrix is not square.
- `single_bit_and_pairs(values)`: pairs whose bitwise AND, taken as a 32-bit unsigned value, is a power of two.
- `construction_cost(s)`: number of distinct characters in `s`.
- `has_balanced_index(values)`: whether some element has equal sums to its left and right.
- `is_valid_string(s)`: true when all characters occur equally often, or when there are exactly two distinct frequencies and one of them belongs to a single character.
- `coin_change_ways(amount, coins)`: number of ways to make `amount` from unlimited coins; rejects a negative amount and non-positive coins.
- `power_of_ten(n)`: ten to the power `n`, computed by halving the exponent and cached.

```python
from puzzlekit.basics import camel_case_words, coin_change_ways

camel_case_words("saveChangesInTheEditor")   # 5
coin_change_ways(4, [1, 2, 3])               # 4
```

### `puzzlekit.strings`

- `highest_palindrome(s, k)`: largest palindrome reachable from the digit string `s` with at most `k` changes; `ValueError` if `k` is too small.
- `substrings(s)`: every non-empty substring, ordered by start then length.
- `anagram_pairs(s)`: number of unordered substring pairs that are anagrams.
- `two_characters(s)`: length of the longest alternating string left after keeping exactly two of its letters (0 if none).
- `common_child(s1, s2)`: length of the longest common subsequence.

### `puzzlekit.steady_gene`

- `BaseCount`: a frozen tally of the bases `a`, `c`, `g`, `t`. `BaseCount.from_sequence(sequence)` counts a sequence (characters other than A, C and G count as T); `covers(other)` tells whether every count is at least the other's.
- `excess_counts(sequence)`: how far each base exceeds a quarter of the length, never below zero.
- `steady_gene(sequence)`: length of the shortest substring whose replacement makes every base equally frequent.

### `puzzlekit.grids`

- `largest_region(grid)`: size of the largest group of `1` cells, joined across sides and corners.
- `knight_moves(n, a, b)`: move count for an (a, b) knight from cell (n-1, n-1) to (0, 0), spread by a single sweep of the board from the far corner; `-1` if that sweep never reaches (0, 0).
- `knight_move_table(n)`: rows `(a, b, moves)` for every `1 <= a <= b < n`.

### `puzzlekit.minimum_loss`

`minimum_loss(prices)`: smallest positive loss from buying at one price
and selling later at a lower one, comparing neighbouring distinct price
levels; `ValueError` if no such sale exists.

### `puzzlekit.suffixes`

- `suffix_array(s)`: start positions of the suffixes of `s` in lexicographic order, built by prefix doubling.
- `longest_previous_match(s)`: for each position `i`, the largest length such that `s[i:i + length]` occurs within `s[:i]`.

### `puzzlekit.build_string`

`build_string_cost(s, a, b)`: cheapest cost of building `s` left to right
when appending a character costs `a` and appending a substring of what is
already built costs `b`.

### `puzzlekit.bike_racers`

- `max_matching(left_count, right_count, edges)`: maximum bipartite matching size (Hopcroft-Karp); `edges` are zero-based `(left, right)` pairs.
- `bike_race_time(bikers, bikes, k)`: smallest squared distance within which `k` bikers can each have their own bike. Bikers, and bikes, at the same position count once; if `k` pairs can never be formed, the largest squared distance is returned.

## Command line

The `puzzlekit` command takes a puzzle name and reads its input, as
whitespace-separated tokens, from standard input:

| Puzzle           | Input                                                                 | Output                    |
|------------------|-----------------------------------------------------------------------|---------------------------|
| `very-big-sum`   | a count, then the integers (all remaining integers are summed)        | the sum                   |
| `balanced-array` | number of cases; per case a length and that many integers             | `YES` or `NO` per case    |
| `build-string`   | number of cases; per case `n a b` and the string                      | the cost per case         |
| `bike-racers`    | `N M K`, then `N` biker coordinates, then `M` bike coordinates        | the squared time          |
| `steady-gene`    | the length, then the gene                                             | the substring length      |

```
echo "5 1000000001 1000000002 1000000003 1000000004 1000000005" | puzzlekit very-big-sum
```

On malformed input or an input with no answer, the command prints an
error on standard error and exits with status 1.

## Limits

Only the five puzzles above are reachable from the command line; the
other solvers are available as library functions only.