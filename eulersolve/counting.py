"""Counting puzzles: number words, calendars, coins, fractions and polygonal numbers."""

from datetime import date
from functools import lru_cache
from math import isqrt

_UNITS = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
)
_COINS = (1, 2, 5, 10, 20, 50, 100, 200)
_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})
_SUNDAY = 6


def _spelled_length(n):
    length = 0
    thousands, rest = divmod(n, 1000)
    if thousands:
        length += len(_UNITS[thousands]) + len("thousand")
    hundreds, tail = divmod(rest, 100)
    if hundreds:
        length += len(_UNITS[hundreds]) + len("hundred")
        if tail:
            length += len("and")
    if tail < 20:
        length += len(_UNITS[tail])
    else:
        length += len(_TENS[tail // 10]) + len(_UNITS[tail % 10])
    return length


def letter_count(limit):
    """Letters used writing out 1..limit in British English, without spaces or hyphens."""
    if limit > 9999:
        raise ValueError("limit must not exceed 9999")
    return sum(_spelled_length(n) for n in range(1, limit + 1))


def month_days(year, month):
    """Number of days in ``month`` of ``year`` in the Gregorian calendar."""
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        leap = year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)
        return 29 if leap else 28
    raise ValueError(f"invalid month: {month}")


def count_sundays():
    """Number of months from 1901 to 2000 that began on a Sunday."""
    return sum(
        1
        for year in range(1901, 2001)
        for month in range(1, 13)
        if date(year, month, 1).weekday() == _SUNDAY
    )


def coin_sums(total, max_coin_index=len(_COINS) - 1):
    """Ways to make ``total`` pence from coins up to ``_COINS[max_coin_index]``."""
    if not 0 <= max_coin_index < len(_COINS):
        raise ValueError("max_coin_index out of range")
    if total < 0:
        raise ValueError("total must be non-negative")
    return _coin_ways(total, max_coin_index)


@lru_cache(maxsize=None)
def _coin_ways(total, index):
    if index == 0 or total == 0:
        return 1
    coin = _COINS[index]
    return sum(
        _coin_ways(total - count * coin, index - 1)
        for count in range(total // coin + 1)
    )


def is_digit_cancelling(numerator, denominator):
    """True when striking a shared digit from the two-digit fraction keeps its value."""
    n_high, n_low = divmod(numerator, 10)
    d_high, d_low = divmod(denominator, 10)
    if n_low == 0 or d_low == 0:
        return False
    return (
        (n_high == d_high and numerator * d_low == denominator * n_low)
        or (n_high == d_low and numerator * d_high == denominator * n_low)
        or (n_low == d_high and numerator * d_low == denominator * n_high)
        or (n_low == d_low and numerator * d_high == denominator * n_high)
    )


def digit_cancelling_fractions():
    """All non-trivial two-digit digit-cancelling fractions below one."""
    return [
        (a, b)
        for a in range(11, 99)
        for b in range(a + 1, 100)
        if is_digit_cancelling(a, b)
    ]


def max_right_triangles(limit):
    """Perimeter up to ``limit`` with the most integer right triangles, or None."""
    counts = {}
    for a in range(1, limit // 2 + 1):
        for b in range(1, a + 1):
            square = a * a + b * b
            c = isqrt(square)
            if a + b + c > limit:
                break
            if c * c == square:
                counts[a + b + c] = counts.get(a + b + c, 0) + 1
    if not counts:
        return None
    return max(sorted(counts), key=counts.get)


def pentagonal(n):
    """The n-th pentagonal number."""
    return n * (3 * n - 1) // 2


def is_pentagonal(a):
    """True when ``a`` is a positive pentagonal number."""
    if a < 1:
        return False
    discriminant = 24 * a + 1
    root = isqrt(discriminant)
    return root * root == discriminant and root % 6 == 5


def min_pentagon_difference(limit):
    """Difference of the first pentagonal pair, by index gap then index, whose sum and difference are pentagonal."""
    for gap in range(1, limit):
        for a in range(1, limit):
            lower = pentagonal(a)
            upper = pentagonal(a + gap)
            if is_pentagonal(upper - lower) and is_pentagonal(upper + lower):
                return upper - lower
    return None


def triangle_pentagonal_hexagonal(limit):
    """Numbers below ``limit`` that are triangular, pentagonal and hexagonal."""
    found = []
    n = 1
    while (hexagonal := n * (2 * n - 1)) < limit:
        if is_pentagonal(hexagonal):
            found.append(hexagonal)
        n += 1
    return found