import pytest

from cfsolve.numbers import (
    LUCKY_NUMBERS,
    QUEUE_NAMES,
    alternating_sum,
    banana_debt,
    can_split_watermelon,
    cola_queue_name,
    composite_split,
    domino_count,
    is_almost_lucky,
    max_expression,
    min_elephant_steps,
    next_distinct_digit_year,
    nth_in_odd_even_order,
    socks_days,
)


def _is_composite(value):
    return value > 3 and any(value % d == 0 for d in range(2, value))


@pytest.mark.parametrize("n", range(1, 15))
def test_odd_even_order_lists_odds_then_evens(n):
    produced = [nth_in_odd_even_order(n, k) for k in range(1, n + 1)]
    assert produced == list(range(1, n + 1, 2)) + list(range(2, n + 1, 2))


def test_odd_even_order_rejects_bad_position():
    with pytest.raises(ValueError):
        nth_in_odd_even_order(5, 0)
    with pytest.raises(ValueError):
        nth_in_odd_even_order(5, 6)


def test_socks_days_example():
    assert socks_days(2, 2) == 3


@pytest.mark.parametrize("n", [1, 4, 9])
def test_socks_days_without_refill(n):
    assert socks_days(n, n + 1) == n


def test_socks_days_grows_with_refills():
    assert socks_days(9, 3) > 9


def test_socks_days_rejects_endless_refill():
    with pytest.raises(ValueError):
        socks_days(3, 1)


@pytest.mark.parametrize("n", range(12, 60))
def test_composite_split(n):
    first, second = composite_split(n)
    assert first + second == n
    assert _is_composite(first) and _is_composite(second)


def test_composite_split_rejects_small():
    with pytest.raises(ValueError):
        composite_split(11)


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (2, 10, 3), (1, 1, 1), (5, 1, 5)])
def test_max_expression_bounds(a, b, c):
    result = max_expression(a, b, c)
    assert result >= a + b + c
    assert result >= a * b * c
    assert result == max_expression(c, b, a)


def test_alternating_sum_small():
    assert alternating_sum(0) == 0
    assert alternating_sum(1) == -1


@pytest.mark.parametrize("n", range(1, 40))
def test_alternating_sum_steps(n):
    step = n if n % 2 == 0 else -n
    assert alternating_sum(n) - alternating_sum(n - 1) == step


@pytest.mark.parametrize("x", range(1, 40))
def test_elephant_steps_cover_distance(x):
    steps = min_elephant_steps(x)
    assert 5 * steps >= x > 5 * (steps - 1)


@pytest.mark.parametrize("year", [1000, 1987, 2013, 8999])
def test_next_distinct_year(year):
    result = next_distinct_digit_year(year)
    assert result > year
    assert len(set(str(result))) == len(str(result))
    for between in range(year + 1, result):
        assert len(set(str(between))) < len(str(between))


def test_cola_queue_first_round():
    assert [cola_queue_name(n) for n in range(1, 6)] == list(QUEUE_NAMES)


def test_cola_queue_later_positions():
    assert cola_queue_name(6) == "Sheldon"
    assert cola_queue_name(1802) == "Penny"


def test_cola_queue_rejects_zero():
    with pytest.raises(ValueError):
        cola_queue_name(0)


@pytest.mark.parametrize("m,n", [(2, 4), (3, 3), (1, 1), (16, 15)])
def test_domino_count(m, n):
    result = domino_count(m, n)
    assert 2 * result <= m * n < 2 * result + 2


@pytest.mark.parametrize("weight", range(4, 40, 2))
def test_watermelon_even(weight):
    assert can_split_watermelon(weight) is True


@pytest.mark.parametrize("weight", [1, 2, 3, 5, 99])
def test_watermelon_unsplittable(weight):
    assert can_split_watermelon(weight) is False


@pytest.mark.parametrize("lucky", LUCKY_NUMBERS)
def test_lucky_numbers_are_almost_lucky(lucky):
    assert is_almost_lucky(lucky)
    assert is_almost_lucky(lucky * 2)


def test_one_is_not_almost_lucky():
    assert is_almost_lucky(1) is False


def test_banana_debt_example():
    assert banana_debt(3, 17, 4) == 13


def test_banana_debt_single_banana():
    assert banana_debt(7, 0, 1) == 7


def test_banana_debt_never_negative():
    assert banana_debt(2, 10**6, 5) == 0


def test_banana_debt_money_reduces_debt():
    assert banana_debt(5, 0, 6) - banana_debt(5, 1, 6) == 1