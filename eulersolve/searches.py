"""Search-driven puzzles over digits, squares and binomials."""

from itertools import compress
from math import comb, isqrt

from .sieve import prime_sieve

_FACTORIAL_SKIP = 5**8
_CONCEALED_RANGES = ((40000000, 49999999), (100000000, 199999999))


def is_bouncy(n):
    """True when the digits of ``n`` neither rise nor fall throughout."""
    digits = list(str(n))
    return digits != sorted(digits) and digits != sorted(digits, reverse=True)


def bouncy_threshold(percent, limit):
    """First number below ``limit`` at which bouncy numbers reach exactly ``percent`` percent."""
    count = 0
    for k in range(1, limit):
        if is_bouncy(k):
            count += 1
            if 100 * count == k * percent:
                return k
    return None


def _is_square(n):
    return n >= 0 and isqrt(n) ** 2 == n


def perfect_square_collection(limit):
    """Search parameters below ``limit`` for x + y, x - y, x + z, ... all squares; the found sum or None."""
    for a in range(1, limit):
        for c in range(1, a):
            for b in range(1 if a % 2 else 2, c, 2):
                d_square = a * a + b * b - c * c
                if (
                    _is_square(d_square)
                    and _is_square(c * c - b * b)
                    and _is_square(a * a - c * c)
                    and c * c > d_square
                ):
                    return a * a + (c * c - d_square) // 2
    return None


def is_reversible(n):
    """True when ``n`` has no trailing zero and n + reverse(n) has only odd digits."""
    if n <= 0 or n % 10 == 0:
        return False
    total = n + int(str(n)[::-1])
    return all(int(d) % 2 for d in str(total))


def count_reversible(limit):
    """Number of reversible numbers below ``limit``."""
    return sum(1 for k in range(1, limit) if is_reversible(k))


def factorial_trailing_digits(n):
    """Last non-zero digits, up to six, of (n // 5**8)!, reducing modulo 10**8 along the way."""
    value = 1
    for k in range(1, n // _FACTORIAL_SKIP + 1):
        value *= k
        while value % 10 == 0:
            value //= 10
        value %= 10**8
    return value % 10**6


def squarefree_binomial_sum(rows):
    """Sum of the distinct squarefree numbers in the first ``rows`` rows of Pascal's triangle."""
    if rows < 1:
        return 0
    primes = list(compress(range(rows + 1), prime_sieve(rows)))
    values = {comb(n, k) for n in range(rows) for k in range(n + 1)}
    return sum(v for v in values if all(v % (p * p) for p in primes))


def is_concealed_square(n):
    """True when n*n has the digits 9, 8, ..., 1 at every other place from the right."""
    square = n * n
    for digit in range(9, 0, -1):
        if square % 10 != digit:
            return False
        square //= 100
    return True


def concealed_square():
    """The integer whose square has the form 1_2_3_4_5_6_7_8_9_0."""
    for start, stop in _CONCEALED_RANGES:
        for base in range(start - start % 10, stop + 1, 10):
            for k in (base + 3, base + 7):
                if start <= k <= stop and is_concealed_square(k):
                    return 10 * k
    return None


def idempotents(limit):
    """Sum over 1 <= n <= ``limit`` of the largest a < n with a*a congruent to a mod n."""
    return sum(
        next((a for a in range(n - 1, 0, -1) if a * (a - 1) % n == 0), 0)
        for n in range(1, limit + 1)
    )


def square_root_digit_sum(n, digits):
    """Sum of the first ``digits`` decimal digits of the square root of ``n``."""
    if n < 1 or digits < 1:
        raise ValueError("n and digits must be positive")
    text = str(isqrt(n * 10 ** (2 * digits)))[:digits]
    return sum(int(d) for d in text)


def square_root_digital_expansion(limit, digits):
    """Total of ``square_root_digit_sum`` over the non-squares from 1 to ``limit``."""
    return sum(
        square_root_digit_sum(k, digits)
        for k in range(1, limit + 1)
        if not _is_square(k)
    )