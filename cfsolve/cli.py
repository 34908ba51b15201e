"""Read a puzzle's input, solve it, and print the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cfsolve import numbers, sequences, strings


class _Tokens:
    """Whitespace-separated input tokens."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def rest(self) -> list[str]:
        return list(self._items)


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _counted(read: Callable[[_Tokens, int], list]) -> Callable[[_Tokens], list]:
    return lambda tokens: read(tokens, tokens.number())


def _watermelon(tokens: _Tokens) -> str:
    weights = [int(token) for token in tokens.rest()]
    return "\n".join(_yes_no(numbers.can_split_watermelon(w)) for w in weights)


def _puzzles(tokens: _Tokens) -> str:
    n = tokens.number()
    m = tokens.number()
    return str(sequences.min_puzzle_difference(n, tokens.numbers(m)))


def _levels(tokens: _Tokens) -> str:
    n = tokens.number()
    x_levels = _counted(_Tokens.numbers)(tokens)
    y_levels = _counted(_Tokens.numbers)(tokens)
    if sequences.can_pass_all_levels(n, x_levels, y_levels):
        return "I become the guy."
    return "Oh, my keyboard!"


def _matrix(tokens: _Tokens) -> str:
    rows = [tokens.numbers(5) for _ in range(5)]
    return str(sequences.moves_to_beautiful(rows))


def _views(tokens: _Tokens) -> str:
    count = tokens.number()
    views = [tuple(tokens.numbers(3)) for _ in range(count)]
    return str(sequences.count_solved_problems(views))


def _long_words(tokens: _Tokens) -> str:
    words = _counted(_Tokens.words)(tokens)
    return "\n".join(strings.abbreviate(word) for word in words)


PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "144A": lambda t: str(sequences.min_swaps_to_arrange(_counted(_Tokens.numbers)(t))),
    "208A": lambda t: strings.remove_dubstep(t.word()),
    "268A": lambda t: str(sequences.count_guest_uniform_games(_counted(_Tokens.pairs)(t))),
    "318A": lambda t: str(numbers.nth_in_odd_even_order(t.number(), t.number())),
    "337A": _puzzles,
    "344A": lambda t: str(sequences.count_magnet_groups(_counted(_Tokens.words)(t))),
    "379A": lambda t: str(numbers.socks_days(t.number(), t.number())),
    "41A": lambda t: _yes_no(strings.is_reversed_translation(t.word(), t.word())),
    "460A": lambda t: str(numbers.socks_days(t.number(), t.number())),
    "467A": lambda t: str(sequences.count_free_rooms(_counted(_Tokens.pairs)(t))),
    "469A": _levels,
    "472A": lambda t: " ".join(map(str, numbers.composite_split(t.number()))),
    "479A": lambda t: str(numbers.max_expression(*t.numbers(3))),
    "486A": lambda t: str(numbers.alternating_sum(t.number())),
    "580A": lambda t: str(sequences.longest_nondecreasing_run(_counted(_Tokens.numbers)(t))),
    "617A": lambda t: str(numbers.min_elephant_steps(t.number())),
    "61A": lambda t: strings.xor_digit_strings(t.word(), t.word()),
    "69A": lambda t: str(numbers.next_distinct_digit_year(t.number())),
    "82A": lambda t: numbers.cola_queue_name(t.number()),
    "beautiful_matrix": _matrix,
    "bit++": lambda t: str(strings.run_bitpp(_counted(_Tokens.words)(t))),
    "boy_or_girl": lambda t: strings.gender_by_username(t.word()),
    "domino_piling": lambda t: str(numbers.domino_count(t.number(), t.number())),
    "football": lambda t: _yes_no(strings.is_dangerous(t.word())),
    "helpful_math": lambda t: strings.rearrange_sum(t.word()),
    "long_words": _long_words,
    "lucky_division": lambda t: _yes_no(numbers.is_almost_lucky(t.number())),
    "nearly_lucky": lambda t: _yes_no(strings.is_nearly_lucky(t.word())),
    "soldiers": lambda t: str(numbers.banana_debt(*t.numbers(3))),
    "taxi": lambda t: str(sequences.min_taxis(_counted(_Tokens.numbers)(t))),
    "team": _views,
    "tram": lambda t: str(sequences.tram_capacity(_counted(_Tokens.pairs)(t))),
    "twins": lambda t: str(sequences.min_coins_to_take(_counted(_Tokens.numbers)(t))),
    "watermelon": _watermelon,
    "word_capital": lambda t: strings.capitalize_word(t.word()),
}


def solve(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the answer."""
    try:
        solver = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="cfsolve", description=__doc__)
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    options = parser.parse_args(argv)
    try:
        answer = solve(options.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0