"""Puzzles built on prime numbers."""

from collections import defaultdict
from functools import lru_cache
from itertools import accumulate, compress
from math import isqrt
from typing import NamedTuple

from .sieve import prime_sieve

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _is_prime(n):
    """Deterministic Miller-Rabin test, exact far beyond 64-bit values."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def _primes_up_to(limit):
    if limit < 2:
        return []
    return list(compress(range(limit + 1), prime_sieve(limit)))


def rotations(n):
    """Digit rotations of ``n``, each moving the last digit to the front, ending with ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    order = 10 ** (len(str(n)) - 1)
    result = []
    current = n
    while True:
        current = order * (current % 10) + current // 10
        result.append(current)
        if current == n:
            return result


def circular_primes(limit):
    """Primes not exceeding ``limit`` all of whose rotations are prime."""
    if limit < 2:
        return []
    bound = max(limit, 10 ** len(str(limit - 1)) - 1)
    flags = prime_sieve(bound)
    return [
        k
        for k in range(2, limit + 1)
        if flags[k] and all(flags[r] for r in rotations(k))
    ]


def truncations(p):
    """Left-anchored prefixes of ``p`` followed by its right-anchored suffixes."""
    text = str(p)
    prefixes = [int(text[:i]) for i in range(1, len(text) + 1)]
    suffixes = [int(text[-i:]) for i in range(1, len(text) + 1)]
    return prefixes + suffixes


def truncatable_primes_sum(limit):
    """Sum of primes from 10 to ``limit`` that stay prime under every truncation."""
    if limit < 10:
        return 0
    flags = prime_sieve(limit)
    return sum(
        k
        for k in range(10, limit + 1)
        if flags[k] and all(flags[t] for t in truncations(k))
    )


def is_pandigital_set(n):
    """True when the digits of ``n`` are distinct and are exactly 1..len(digits)."""
    text = str(n) if n > 0 else ""
    digits = set(text)
    if len(digits) != len(text):
        return False
    return digits >= {str(k) for k in range(1, len(digits) + 1)}


def largest_pandigital_prime(limit):
    """Largest pandigital prime not exceeding ``limit``, or None."""
    if limit < 2:
        return None
    flags = prime_sieve(limit)
    return next(
        (k for k in range(limit, 1, -1) if flags[k] and is_pandigital_set(k)),
        None,
    )


def goldbach_counterexample(limit):
    """Smallest odd composite up to ``limit`` that is not a prime plus twice a square."""
    flags = prime_sieve(max(limit, 0))
    for n in range(3, limit + 1, 2):
        if flags[n]:
            continue
        s = 1
        while (diff := n - 2 * s * s) > 0 and not flags[diff]:
            s += 1
        if diff < 0:
            return n
    return None


def distinct_prime_factors_run(limit, factors):
    """First of ``factors`` consecutive composites each with ``factors`` distinct prime factors."""
    if factors < 1:
        raise ValueError("factors must be at least 1")
    if limit < 2:
        return None
    flags = prime_sieve(limit)
    counts = [0] * (limit + 1)
    for p in compress(range(limit + 1), flags):
        for multiple in range(p, limit + 1, p):
            counts[multiple] += 1
    run = 0
    last = 0
    for n in range(3, limit - 2):
        if flags[n]:
            continue
        if counts[n] == factors:
            if last < n - 1:
                run = 0
            run += 1
            last = n
            if run >= factors:
                return n - factors + 1
        else:
            run = 0
    return None


def prime_permutations(limit):
    """Triples of four-digit-or-more primes below ``limit`` in arithmetic progression that permute each other."""
    if limit <= 1000:
        return []
    flags = prime_sieve(limit - 1)

    def signature(value):
        return "".join(sorted(str(value)))

    groups = defaultdict(list)
    for p in compress(range(1000, limit), flags[1000:]):
        groups[signature(p)].append(p)

    triples = []
    for k in compress(range(1000, limit), flags[1000:]):
        key = signature(k)
        for m in groups[key]:
            if m <= k:
                continue
            third = 2 * m - k
            if third < limit and flags[third] and signature(third) == key:
                triples.append((k, m, third))
                break
    return triples


def consecutive_prime_sum(limit):
    """Prime below ``limit`` written as the sum of the most consecutive primes."""
    primes = _primes_up_to(limit)
    flags = prime_sieve(max(limit, 0))
    prefix = [0, *accumulate(primes)]
    best_length = 0
    best_sum = 0
    for start in range(len(primes)):
        for end in range(start + 2, len(prefix)):
            total = prefix[end] - prefix[start]
            if total >= limit:
                break
            length = end - start
            if flags[total] and length > best_length:
                best_length = length
                best_sum = total
    return best_sum


class QuadraticPrimes(NamedTuple):
    """Coefficients of n*n + a*n + b and the length of its run of primes."""

    a: int
    b: int
    length: int

    @property
    def product(self):
        return self.a * self.b


def quadratic_primes(bound):
    """Coefficients with |a|, |b| below ``bound`` giving the longest prime run from n = 0."""
    limit = max(2 * bound * bound + bound, 0)
    flags = prime_sieve(limit)

    def prime(value):
        return 0 <= value <= limit and bool(flags[value])

    best = QuadraticPrimes(0, 0, 0)
    for a in range(-bound, bound):
        for b in range(-bound, bound):
            length = next(
                (n for n in range(bound) if not prime(n * n + a * n + b)), bound
            )
            if length > best.length:
                best = QuadraticPrimes(a, b, length)
    return best


def prime_cube_partnership(limit):
    """Count primes up to ``limit`` that are a difference of consecutive cubes."""
    flags = prime_sieve(max(limit, 0))
    found = 0
    k = 1
    while (diff := 3 * k * k - 3 * k + 1) <= limit:
        found += flags[diff]
        k += 1
    return found


def spiral_primes(side_bound):
    """Side length of the number spiral at which diagonal primes first fall below 10%."""
    primes_found = 0
    for n in range(1, side_bound + 1):
        square = 4 * n * n
        corners = (square - 2 * n + 1, square + 1, square + 2 * n + 1)
        primes_found += sum(map(_is_prime, corners))
        if 10 * primes_found < 4 * n + 1:
            return 2 * n + 1
    return None


def prime_power_triples(limit):
    """Count numbers below ``limit`` expressible as p**2 + q**3 + r**4 for primes p, q, r."""
    primes = _primes_up_to(1 + isqrt(max(limit, 0)))
    sums = set()
    for a in primes:
        fourth = a**4
        if fourth > limit:
            break
        for b in primes:
            cube = b**3
            if fourth + cube > limit:
                break
            for c in primes:
                total = fourth + cube + c * c
                if total >= limit:
                    break
                sums.add(total)
    return len(sums)


def prime_summations(limit, threshold):
    """First value up to ``limit`` with more than ``threshold`` ways to be written as a sum of primes."""
    ways = [1] + [0] * max(limit, 0)
    for p in _primes_up_to(limit):
        for m in range(p, limit + 1):
            ways[m] += ways[m - p]
    return next((k for k, count in enumerate(ways) if count > threshold), None)


def concatenate(a, b):
    """Join the decimal digits of ``a`` and ``b``."""
    if b < 0:
        raise ValueError("b must be non-negative")
    if b == 0:
        return a
    return a * 10 ** len(str(b)) + b


def prime_pair_sets(prime_bound, set_size):
    """First set of ``set_size`` primes below ``prime_bound`` whose pairwise concatenations are prime."""
    if set_size < 1:
        raise ValueError("set_size must be at least 1")
    primes = _primes_up_to(prime_bound - 1)

    @lru_cache(maxsize=None)
    def compatible(x, y):
        return _is_prime(concatenate(x, y)) and _is_prime(concatenate(y, x))

    def search(chosen, candidates):
        if len(chosen) == set_size:
            return chosen
        for position, p in enumerate(candidates):
            remaining = [q for q in candidates[position + 1 :] if compatible(p, q)]
            found = search(chosen + (p,), remaining)
            if found:
                return found
        return None

    return search((), primes)


def largest_divisible(p, q, n):
    """Largest number up to ``n`` whose only prime factors are ``p`` and ``q``, both present; 0 if none."""
    if p * q > n:
        return 0
    best = 0
    power_p = p
    while power_p * q <= n:
        value = power_p * q
        while value * q <= n:
            value *= q
        best = max(best, value)
        power_p *= p
    return best


def two_prime_divisible_sum(limit):
    """Sum of ``largest_divisible`` over every pair of distinct primes whose product is within ``limit``."""
    primes = _primes_up_to(limit)
    total = 0
    for position, p in enumerate(primes):
        if p * p > limit:
            break
        for q in primes[position + 1 :]:
            if p * q > limit:
                break
            total += largest_divisible(p, q, limit)
    return total