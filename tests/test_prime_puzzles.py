from itertools import accumulate
from math import isqrt

import pytest

from eulersolve.prime_puzzles import (
    circular_primes,
    concatenate,
    consecutive_prime_sum,
    distinct_prime_factors_run,
    goldbach_counterexample,
    is_pandigital_set,
    largest_divisible,
    largest_pandigital_prime,
    prime_cube_partnership,
    prime_pair_sets,
    prime_permutations,
    prime_power_triples,
    prime_summations,
    quadratic_primes,
    rotations,
    spiral_primes,
    truncatable_primes_sum,
    truncations,
    two_prime_divisible_sum,
)
from eulersolve.sieve import prime_sieve

FLAGS = prime_sieve(200000)


def _prime(n):
    return n >= 0 and bool(FLAGS[n])


def _distinct_factors(n):
    found = set()
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            found.add(factor)
            n //= factor
        factor += 1
    if n > 1:
        found.add(n)
    return len(found)


@pytest.mark.parametrize("n", [197, 1234, 7, 98765])
def test_rotations_cycle_back(n):
    result = rotations(n)
    assert result[-1] == n
    assert len(result) == len(str(n))
    assert all(sorted(str(r)) == sorted(str(n)) for r in result)


def test_rotations_with_zero_digit():
    result = rotations(10)
    assert len(result) == 2
    assert result[-1] == 10


def test_circular_primes_are_circular():
    found = circular_primes(100)
    assert all(k <= 100 for k in found)
    assert all(_prime(r) for k in found for r in rotations(k))


def test_circular_primes_prefix_consistent():
    small = circular_primes(100)
    assert circular_primes(1000)[: len(small)] == small


@pytest.mark.parametrize("p", [3797, 739397, 23])
def test_truncations_shape(p):
    result = truncations(p)
    half = len(str(p))
    assert len(result) == 2 * half
    assert result[half - 1] == p
    assert result[-1] == p
    assert all(str(p).startswith(str(t)) for t in result[:half])
    assert all(str(p).endswith(str(t)) for t in result[half:])


def test_truncatable_primes_sum_small_limits():
    assert truncatable_primes_sum(23) == 23
    assert truncatable_primes_sum(9) == truncatable_primes_sum(22)


@pytest.mark.parametrize(
    "n, expected",
    [(2143, True), (2243, False), (1023, False), (4, False), (1, True), (321, True)],
)
def test_is_pandigital_set(n, expected):
    assert is_pandigital_set(n) is expected


def test_largest_pandigital_prime():
    result = largest_pandigital_prime(10000)
    assert result <= 10000
    assert _prime(result)
    assert is_pandigital_set(result)
    assert largest_pandigital_prime(1) is None


def test_goldbach_counterexample():
    n = goldbach_counterexample(10000)
    assert n % 2 == 1
    assert not _prime(n)
    assert all(not _prime(n - 2 * s * s) for s in range(1, isqrt(n // 2) + 1))
    assert goldbach_counterexample(n - 1) is None


@pytest.mark.parametrize("factors", [2, 3])
def test_distinct_prime_factors_run(factors):
    start = distinct_prime_factors_run(1000, factors)
    assert all(_distinct_factors(start + k) == factors for k in range(factors))


def test_distinct_prime_factors_run_not_found():
    assert distinct_prime_factors_run(10, 3) is None


def test_distinct_prime_factors_run_rejects_zero():
    with pytest.raises(ValueError):
        distinct_prime_factors_run(100, 0)


def test_prime_permutations():
    triples = prime_permutations(10000)
    assert triples
    for k, m, t in triples:
        assert 1000 <= k < m < t < 10000
        assert m - k == t - m
        assert all(_prime(x) for x in (k, m, t))
        assert sorted(str(k)) == sorted(str(m)) == sorted(str(t))
    assert prime_permutations(1000) == []


def test_consecutive_prime_sum():
    result = consecutive_prime_sum(1000)
    assert result < 1000
    assert _prime(result)
    primes = [k for k in range(1000) if _prime(k)]
    prefix = [0, *accumulate(primes)]
    windows = {b - a for i, a in enumerate(prefix) for b in prefix[i + 2 :]}
    assert result in windows


def test_quadratic_primes():
    best = quadratic_primes(50)
    assert -50 <= best.a < 50
    assert -50 <= best.b < 50
    assert best.product == best.a * best.b
    assert all(_prime(n * n + best.a * n + best.b) for n in range(best.length))
    assert best.length >= quadratic_primes(10).length


def test_prime_cube_partnership():
    assert prime_cube_partnership(19) - prime_cube_partnership(18) == (
        prime_cube_partnership(7) - prime_cube_partnership(6)
    )
    assert prime_cube_partnership(1000) >= prime_cube_partnership(100)


def test_spiral_primes():
    assert spiral_primes(5) is None
    side = spiral_primes(15000)
    assert side % 2 == 1
    assert spiral_primes(20000) == side


def test_prime_power_triples_worked_example():
    assert prime_power_triples(50) == 4


def test_prime_summations():
    assert prime_summations(100, 4) == 10
    assert prime_summations(5, 4000) is None
    assert prime_summations(100, 5000) > prime_summations(100, 4)


def test_concatenate():
    assert str(concatenate(12, 34)) == "12" + "34"
    assert concatenate(5, 0) == 5
    with pytest.raises(ValueError):
        concatenate(5, -1)


def test_prime_pair_sets_rejects_empty():
    with pytest.raises(ValueError):
        prime_pair_sets(100, 0)


def test_largest_divisible():
    result = largest_divisible(2, 3, 100)
    assert result <= 100
    assert result % 6 == 0
    rest = result
    for p in (2, 3):
        while rest % p == 0:
            rest //= p
    assert rest == 1
    assert largest_divisible(5, 7, 30) == 0


def test_two_prime_divisible_sum_worked_example():
    assert two_prime_divisible_sum(100) == 2262