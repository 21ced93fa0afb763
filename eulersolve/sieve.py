"""Prime sieving and basic prime queries."""

from itertools import compress, takewhile
from math import isqrt


def prime_sieve(limit):
    """Return a bytearray of length ``limit + 1`` whose entry k is 1 exactly when k is prime."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    flags = bytearray(b"\x01") * (limit + 1)
    for k in range(min(2, limit + 1)):
        flags[k] = 0
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return flags


def prime_sum(limit):
    """Sum of all primes not exceeding ``limit``."""
    return sum(compress(range(limit + 1), prime_sieve(limit)))


def nth_prime(n):
    """Return the n-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError("n must be at least 1")
    primes = [2]
    candidate = 3
    while len(primes) < n:
        bounded = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in bounded):
            primes.append(candidate)
        candidate += 2
    return primes[n - 1]


def largest_prime_factor(n):
    """Return the largest prime dividing ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    largest = 1
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            largest = factor
            n //= factor
        factor += 1 if factor == 2 else 2
    return n if n > 1 else largest