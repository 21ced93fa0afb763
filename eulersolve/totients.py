"""Euler's totient and the fraction-counting puzzles built on it."""

from fractions import Fraction
from itertools import compress
from math import gcd, prod

from .sieve import prime_sieve

_RESILIENCE_THRESHOLD = Fraction(15499, 94744)


def _factorize(n):
    factors = {}
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            factors[factor] = factors.get(factor, 0) + 1
            n //= factor
        factor += 1 if factor == 2 else 2
    if n > 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def _totients(limit):
    values = list(range(limit + 1))
    for p in range(2, limit + 1):
        if values[p] == p:
            for multiple in range(p, limit + 1, p):
                values[multiple] -= values[multiple] // p
    return values


def phi(n):
    """Euler's totient: count of 1 <= k <= n coprime to ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    for p in _factorize(n):
        result -= result // p
    return result


def totient_maximum(limit):
    """The n from 2 to ``limit`` maximising n / phi(n), or None."""
    if limit < 2:
        return None
    totients = _totients(limit)
    best = 2
    for n in range(3, limit + 1):
        if n * totients[best] > best * totients[n]:
            best = n
    return best


def ordered_fraction_numerator(limit):
    """Numerator of the reduced fraction just left of 3/7 for denominators up to ``limit``."""
    if limit < 7:
        raise ValueError("limit must be at least 7")
    return 3 * (limit // 7) - 1


def counting_fractions(limit):
    """Number of reduced proper fractions with denominator from 2 to ``limit``."""
    if limit < 2:
        return 0
    return sum(_totients(limit)[2:])


def fractions_in_range(limit):
    """Number of reduced fractions strictly between 1/3 and 1/2 with denominator up to ``limit``."""
    return sum(
        1
        for n in range(2, limit // 2 + 1)
        for d in range(2 * n, min(3 * n, limit) + 1)
        if gcd(n, d) == 1
    )


def resilience(limit):
    """Smallest denominator built from primes below ``limit`` whose resilience is under 15499/94744."""
    if limit < 3:
        return None
    flags = prime_sieve(limit)
    numerator = denominator = 1
    for k in compress(range(limit), flags[:limit]):
        numerator *= k - 1
        denominator *= k
        for u in range(1, k):
            if Fraction(numerator * u, denominator * u - 1) < _RESILIENCE_THRESHOLD:
                return denominator * u
    return None


def _reciprocal_solutions(n):
    divisors_of_square = prod(2 * e + 1 for e in _factorize(n).values())
    return (divisors_of_square + 1) // 2


def diophantine_reciprocals(limit, target):
    """Least n up to ``limit`` with at least ``target`` solutions of 1/x + 1/y = 1/n, or None."""
    return next(
        (n for n in range(1, limit + 1) if _reciprocal_solutions(n) >= target), None
    )