"""Solutions to short puzzles over lists of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby


def min_swaps_to_arrange(heights: Sequence[int]) -> int:
    """Return the adjacent swaps that put the tallest first and shortest last."""
    if not heights:
        raise ValueError("no heights given")
    n = len(heights)
    max_index = heights.index(max(heights))
    min_index = n - 1 - list(reversed(heights)).index(min(heights))
    moves = max_index + (n - 1 - min_index)
    return moves - 1 if max_index > min_index else moves


def count_guest_uniform_games(teams: Iterable[tuple[int, int]]) -> int:
    """Count games where the host wears its guest uniform."""
    home_colours: set[int] = set()
    away_colours: set[int] = set()
    games = 0
    for home, away in teams:
        if away in home_colours:
            games += 1
        if home in away_colours:
            games += 1
        home_colours.add(home)
        away_colours.add(away)
    return games


def min_puzzle_difference(n: int, pieces: Iterable[int]) -> int:
    """Return the least spread between the largest and smallest of n pieces."""
    ordered = sorted(pieces)
    if not 1 <= n <= len(ordered):
        raise ValueError(f"cannot choose {n} of {len(ordered)} pieces")
    return min(high - low for low, high in zip(ordered, ordered[n - 1:]))


def count_magnet_groups(magnets: Iterable[str]) -> int:
    """Count groups of equally oriented neighbouring magnets."""
    return sum(1 for _ in groupby(magnets))


def count_free_rooms(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms with space for two more people."""
    return sum(1 for occupied, capacity in rooms if capacity - occupied > 1)


def can_pass_all_levels(n: int, x_levels: Iterable[int], y_levels: Iterable[int]) -> bool:
    """Tell whether two players together pass every level 1..n."""
    return set(range(1, n + 1)) <= set(x_levels) | set(y_levels)


def longest_nondecreasing_run(values: Iterable[int]) -> int:
    """Return the length of the longest non-decreasing contiguous run."""
    best = 0
    run = 0
    previous = None
    for value in values:
        run = run + 1 if previous is not None and value >= previous else 1
        best = max(best, run)
        previous = value
    return best


def count_solved_problems(views: Iterable[tuple[int, int, int]]) -> int:
    """Count problems at least two of the three friends are sure about."""
    return sum(1 for view in views if sum(view) > 1)


def moves_to_beautiful(matrix: Sequence[Sequence[int]]) -> int:
    """Return the moves that bring the single one to the centre of a 5x5 matrix."""
    if len(matrix) != 5 or any(len(row) != 5 for row in matrix):
        raise ValueError("matrix must be 5 by 5")
    cells = [
        (r, c)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value
    ]
    if not cells:
        raise ValueError("matrix holds no one")
    row, column = cells[-1]
    return abs(row - 2) + abs(column - 2)


def min_taxis(groups: Iterable[int]) -> int:
    """Return the fewest four-seat taxis that carry every group whole."""
    sizes = Counter(groups)
    if any(size not in (1, 2, 3, 4) for size in sizes):
        raise ValueError("group sizes must be between 1 and 4")
    taxis = sizes[4]
    paired = min(sizes[1], sizes[3])
    taxis += paired
    ones = sizes[1] - paired
    threes = sizes[3] - paired
    taxis += sizes[2] // 2
    twos = sizes[2] % 2
    if ones:
        taxis += -(-(ones + 2 * twos) // 4)
    elif threes:
        taxis += threes + twos
    elif twos:
        taxis += 1
    return taxis


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the most passengers aboard at once, given (exit, enter) per stop."""
    loads = list(accumulate(enter - leave for leave, enter in stops))
    if not loads:
        raise ValueError("no stops given")
    return max(loads)


def min_coins_to_take(coins: Iterable[int]) -> int:
    """Return the fewest coins whose sum exceeds the sum of the rest."""
    ordered = sorted(coins)
    if not ordered:
        raise ValueError("no coins given")
    rest = sum(ordered)
    given = 0
    moved = 0
    for coin in ordered:
        if rest <= given:
            break
        rest -= coin
        given += coin
        moved += 1
    return len(ordered) - moved + 1