"""Closed forms and simple sequences: sums, Fibonacci numbers, powers."""

from math import comb, lcm

_POWER_LOW = 2
_POWER_HIGH = 100
_MERSENNE_MULTIPLIER = 28433
_MERSENNE_EXPONENT = 7830457
_TEN_DIGITS = 10000000000


def series_sum(n):
    """Sum of the integers 1..n."""
    return n * (n + 1) // 2


def multiples_sum(x, y, upper_bound):
    """Sum of the natural numbers below ``upper_bound`` that are multiples of ``x`` or ``y``."""
    if x < 1 or y < 1:
        raise ValueError("x and y must be positive")
    top = max(upper_bound - 1, 0)
    both = lcm(x, y)
    return (
        x * series_sum(top // x)
        + y * series_sum(top // y)
        - both * series_sum(top // both)
    )


def fibonacci(n):
    """The n-th Fibonacci number, with F0 = 0 and F1 = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for bit in bin(n)[2:]:
        doubled = current * (2 * following - current)
        squared = current * current + following * following
        if bit == "1":
            current, following = squared, doubled + squared
        else:
            current, following = doubled, squared
    return current


def even_fibonacci_sum(upper_bound):
    """Sum of the even Fibonacci numbers below ``upper_bound``."""
    total = 0
    index = 3
    while (term := fibonacci(index)) < upper_bound:
        total += term
        index += 3
    return total


def smallest_multiple(n):
    """Smallest positive number evenly divisible by each of 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return lcm(*range(1, n + 1))


def sum_square_difference(n):
    """Square of the sum of 1..n minus the sum of their squares."""
    return series_sum(n) ** 2 - n * (n + 1) * (2 * n + 1) // 6


def pythagorean_triplet_product(perimeter):
    """Product a*b*c of the first Pythagorean triplet with a + b + c = ``perimeter``, or None."""
    half = perimeter // 2
    for a in range(1, half):
        for b in range(a, half):
            c = perimeter - a - b
            if a * a + b * b == c * c:
                return a * b * c
    return None


def lattice_paths(n):
    """Number of right/down routes through an n-by-n grid."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return comb(2 * n, n)


def spiral_diagonal_sum(layers):
    """Sum of the diagonals of a number spiral with ``layers`` rings around the centre."""
    if layers < 0:
        raise ValueError("layers must be non-negative")
    return 1 + sum(16 * n * n + 4 * n + 4 for n in range(1, layers + 1))


def distinct_powers():
    """Number of distinct terms a**b for 2 <= a, b <= 100."""
    span = range(_POWER_LOW, _POWER_HIGH + 1)
    return len({a**b for a in span for b in span})


def self_powers_sum(limit, modulus):
    """Sum of k**k for k in 1..limit, reduced modulo ``modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return sum(pow(k, k, modulus) for k in range(1, limit + 1)) % modulus


def large_non_mersenne_prime():
    """Last ten digits of 28433 * 2**7830457 + 1."""
    power = pow(2, _MERSENNE_EXPONENT, _TEN_DIGITS)
    return (_MERSENNE_MULTIPLIER * power + 1) % _TEN_DIGITS


def powerful_digit_counts():
    """Count of positive integers with n digits that are also an n-th power."""
    count = 0
    for base in range(1, 10):
        power = 1
        while len(str(base**power)) == power:
            count += 1
            power += 1
    return count


def square_root_convergents(expansions):
    """Count of the first ``expansions - 1`` expansions of sqrt(2) whose numerator outgrows the denominator."""
    numerator, denominator = 1, 1
    count = 0
    for _ in range(1, expansions):
        numerator, denominator = numerator + 2 * denominator, numerator + denominator
        if len(str(numerator)) > len(str(denominator)):
            count += 1
    return count