"""Solutions to short arithmetic puzzles."""

from __future__ import annotations

from itertools import count

LUCKY_NUMBERS = (4, 7, 44, 47, 74, 77, 444, 447, 474, 477, 744, 747, 774, 777)
QUEUE_NAMES = ("Sheldon", "Leonard", "Penny", "Rajesh", "Howard")


def nth_in_odd_even_order(n: int, k: int) -> int:
    """Return the k-th number when 1..n is listed odds first, then evens."""
    if not 1 <= k <= n:
        raise ValueError(f"position {k} is outside 1..{n}")
    odd_count = n - n // 2
    if k <= odd_count:
        return 2 * k - 1
    return 2 * (k - odd_count)


def socks_days(n: int, m: int) -> int:
    """Count the days n items last when every m-th day yields one more."""
    if m < 2:
        raise ValueError("m must be at least 2")
    days = 0
    while n:
        days += 1
        n -= 1
        if days % m == 0:
            n += 1
    return days


def composite_split(n: int) -> tuple[int, int]:
    """Split n into two composite numbers."""
    if n < 12:
        raise ValueError("n must be at least 12")
    first = 9 if n % 2 else 8
    return first, n - first


def max_expression(a: int, b: int, c: int) -> int:
    """Return the largest value of a, b, c joined by + and * with brackets."""
    return max(
        (a + b) * c,
        a + b + c,
        a * (b + c),
        a * b * c,
    )


def alternating_sum(n: int) -> int:
    """Return -1 + 2 - 3 + ... + (-1)**n * n."""
    if n % 2 == 0:
        return n // 2
    return -((n + 1) // 2)


def min_elephant_steps(x: int) -> int:
    """Return the fewest steps of length at most 5 that cover distance x."""
    return -(-x // 5)


def _has_distinct_digits(value: int) -> bool:
    digits = str(value)
    return len(set(digits)) == len(digits)


def next_distinct_digit_year(year: int) -> int:
    """Return the first year after the given one whose digits all differ."""
    return next(
        candidate
        for candidate in count(year + 1)
        if _has_distinct_digits(candidate)
    )


def cola_queue_name(n: int) -> str:
    """Return who drinks the n-th can in the doubling queue."""
    if n < 1:
        raise ValueError("n must be positive")
    drunk = 0
    copies = 1
    while drunk + copies * len(QUEUE_NAMES) < n:
        drunk += copies * len(QUEUE_NAMES)
        copies *= 2
    return QUEUE_NAMES[(n - 1 - drunk) // copies]


def domino_count(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m by n board."""
    return m * n // 2


def can_split_watermelon(weight: int) -> bool:
    """Tell whether weight splits into two positive even parts."""
    return weight > 2 and weight % 2 == 0


def is_almost_lucky(n: int) -> bool:
    """Tell whether n is divisible by some lucky number."""
    for lucky in LUCKY_NUMBERS:
        if n % lucky == 0:
            return True
        if n < lucky:
            break
    return False


def banana_debt(k: int, n: int, w: int) -> int:
    """Return what must be borrowed to buy w bananas costing k, 2k, ... with n."""
    cost = k * w * (w + 1) // 2
    return max(0, cost - n)