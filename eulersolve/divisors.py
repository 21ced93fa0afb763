"""Divisor counts, divisor sums, Collatz chains and reciprocal cycles."""

from math import comb, isqrt
from typing import NamedTuple


class CollatzRecord(NamedTuple):
    """Starting number of the longest Collatz chain and that chain's length."""

    start: int
    length: int


class ReciprocalCycle(NamedTuple):
    """Denominator whose reciprocal has the longest recurring cycle, and that cycle's length."""

    denominator: int
    length: int


def count_divisors(n):
    """Number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    root = isqrt(n)
    pairs = sum(1 for k in range(1, root + 1) if n % k == 0)
    return 2 * pairs - (root * root == n)


def highly_divisible_triangle(n):
    """First triangle number with more than ``n`` divisors."""
    index = 1
    triangle = 1
    while count_divisors(triangle) <= n:
        index += 1
        triangle += index
    return triangle


def collatz_length(n):
    """Number of terms in the Collatz chain from ``n`` down to 1, both included."""
    if n < 1:
        raise ValueError("n must be positive")
    length = 1
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        length += 1
    return length


def longest_collatz(limit):
    """Start below ``limit`` (from 2) producing the longest Collatz chain, or None."""
    if limit <= 2:
        return None
    lengths = [0] * limit
    lengths[1] = 1
    best = None
    for start in range(2, limit):
        value = start
        steps = 0
        while value >= start:
            value = value // 2 if value % 2 == 0 else 3 * value + 1
            steps += 1
        lengths[start] = steps + lengths[value]
        if best is None or lengths[start] > best.length:
            best = CollatzRecord(start, lengths[start])
    return best


def proper_divisor_sum(n):
    """Sum of the divisors of ``n`` smaller than ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    total = 1
    root = isqrt(n)
    for k in range(2, root + 1):
        if n % k == 0:
            partner = n // k
            total += k if partner == k else k + partner
    return total


def amicable_sum(limit):
    """Sum of the amicable numbers below ``limit``."""
    total = 0
    for k in range(2, limit):
        partner = proper_divisor_sum(k)
        if partner != k and proper_divisor_sum(partner) == k:
            total += k
    return total


def abundance(n):
    """1 if ``n`` is abundant, 0 if perfect, -1 if deficient."""
    divisor_sum = proper_divisor_sum(n)
    return (divisor_sum > n) - (divisor_sum < n)


def non_abundant_sum(limit):
    """Sum of the numbers 1..limit that are not a sum of two abundant numbers."""
    if limit < 1:
        return 0
    sums = [0] * (limit + 1)
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit + 1, d):
            sums[multiple] += d
    abundant = [k for k in range(1, limit + 1) if sums[k] > k]
    expressible = bytearray(limit + 1)
    for position, a in enumerate(abundant):
        for b in abundant[position:]:
            if a + b > limit:
                break
            expressible[a + b] = 1
    return sum(n for n in range(1, limit + 1) if not expressible[n])


def cycle_length(n):
    """Length of the recurring cycle in the decimal expansion of 1/n; 0 if it terminates."""
    if n < 1:
        raise ValueError("n must be positive")
    for factor in (2, 5):
        while n % factor == 0:
            n //= factor
    if n == 1:
        return 0
    length = 1
    remainder = 10 % n
    while remainder != 1:
        remainder = remainder * 10 % n
        length += 1
    return length


def longest_reciprocal_cycle(limit):
    """Denominator from 2 below ``limit`` whose reciprocal has the longest cycle, or None."""
    best = None
    for k in range(2, limit):
        length = cycle_length(k)
        if length > (best.length if best else 0):
            best = ReciprocalCycle(k, length)
    return best


def choose(n, r):
    """Binomial coefficient n over r; 0 when r exceeds n."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    return comb(n, r)


def combinatoric_selections(limit, cutoff):
    """Count of C(n, r) for 1 <= n <= ``limit`` exceeding ``cutoff``."""
    total = 0
    for n in range(1, limit + 1):
        first = next(
            (r for r in range(1, n // 2) if choose(n, r) > cutoff), None
        )
        if first is not None:
            total += n - 2 * first + 1
    return total