"""Solutions to short string puzzles."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

DANGER_RUN = 7


def remove_dubstep(song: str) -> str:
    """Recover the original words from a remix that inserted WUB."""
    return " ".join(part for part in song.split("WUB") if part)


def is_reversed_translation(word: str, translation: str) -> bool:
    """Tell whether translation is word spelled backwards."""
    return translation[::-1] == word


def xor_digit_strings(first: str, second: str) -> str:
    """Compare two binary strings digit by digit: 0 where equal, 1 otherwise."""
    if len(first) != len(second):
        raise ValueError("strings must have the same length")
    return "".join("0" if a == b else "1" for a, b in zip(first, second))


def is_dangerous(situation: str) -> bool:
    """Tell whether seven or more players of one team stand in a row."""
    return any(
        sum(1 for _ in run) >= DANGER_RUN
        for _, run in groupby(situation, key=lambda ch: ch == "0")
    )


def is_nearly_lucky(number: str | int) -> bool:
    """Tell whether the count of digits 4 and 7 is itself lucky."""
    lucky_digits = sum(1 for ch in str(number) if ch in "47")
    return lucky_digits in (4, 7)


def gender_by_username(name: str) -> str:
    """Guess by the parity of distinct letters, as the puzzle prescribes."""
    if len(set(name)) % 2:
        return "IGNORE HIM!"
    return "CHAT WITH HER!"


def rearrange_sum(expression: str) -> str:
    """Reorder the summands of a sum of digits into non-decreasing order."""
    digits = [ch for ch in expression if ch != "+"]
    if len(digits) < 2:
        return expression
    return "+".join(sorted(digits, key=int))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first, count, last."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def capitalize_word(word: str) -> str:
    """Uppercase the first letter if it is a lowercase Latin letter."""
    if word and "a" <= word[0] <= "z":
        return word[0].upper() + word[1:]
    return word


def run_bitpp(statements: Iterable[str]) -> int:
    """Run Bit++ statements on x starting from zero and return x."""
    x = 0
    for statement in statements:
        if statement.startswith("+") or statement.endswith("+"):
            x += 1
        else:
            x -= 1
    return x