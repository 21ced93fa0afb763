import pytest

from eulersolve.divisors import (
    abundance,
    amicable_sum,
    choose,
    collatz_length,
    combinatoric_selections,
    count_divisors,
    cycle_length,
    highly_divisible_triangle,
    longest_collatz,
    longest_reciprocal_cycle,
    non_abundant_sum,
    proper_divisor_sum,
)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11])
@pytest.mark.parametrize("k", range(0, 6))
def test_count_divisors_prime_powers(p, k):
    assert count_divisors(p**k) == k + 1


@pytest.mark.parametrize("a,b", [(4, 9), (8, 15), (7, 12), (16, 27)])
def test_count_divisors_multiplicative(a, b):
    assert count_divisors(a * b) == count_divisors(a) * count_divisors(b)


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


def test_highly_divisible_example():
    assert highly_divisible_triangle(5) == 28


def test_highly_divisible_is_first():
    result = highly_divisible_triangle(20)
    assert count_divisors(result) > 20
    index, triangle = 1, 1
    while triangle < result:
        assert count_divisors(triangle) <= 20
        index += 1
        triangle += index
    assert triangle == result


@pytest.mark.parametrize("n", range(1, 60))
def test_collatz_doubling(n):
    assert collatz_length(2 * n) == collatz_length(n) + 1


@pytest.mark.parametrize("n", range(3, 60, 2))
def test_collatz_odd_step(n):
    assert collatz_length(n) == collatz_length(3 * n + 1) + 1


def test_collatz_one_and_error():
    assert collatz_length(1) == 1
    with pytest.raises(ValueError):
        collatz_length(0)


def test_longest_collatz_is_maximal():
    best = longest_collatz(200)
    assert best.length == collatz_length(best.start)
    assert all(collatz_length(k) <= best.length for k in range(2, 200))
    assert all(collatz_length(k) < best.length for k in range(2, best.start))


def test_longest_collatz_empty():
    assert longest_collatz(2) is None


def test_amicable_pair():
    assert proper_divisor_sum(220) == 284
    assert proper_divisor_sum(284) == 220
    assert amicable_sum(285) == 220 + 284


@pytest.mark.parametrize("p", [2, 3, 13, 97, 101])
def test_proper_divisor_sum_primes(p):
    assert proper_divisor_sum(p) == 1


def test_proper_divisor_sum_one():
    assert proper_divisor_sum(1) == 0


@pytest.mark.parametrize("n,expected", [(6, 0), (28, 0), (12, 1), (13, -1), (1, -1)])
def test_abundance(n, expected):
    assert abundance(n) == expected


def test_non_abundant_sum_below_first_pair():
    assert non_abundant_sum(23) == sum(range(24))
    assert non_abundant_sum(24) == sum(range(24))


@pytest.mark.parametrize("limit", range(1, 80))
def test_non_abundant_sum_step(limit):
    step = non_abundant_sum(limit) - non_abundant_sum(limit - 1)
    assert step in (0, limit)


@pytest.mark.parametrize("n", [3, 7, 11, 13, 17, 19, 21, 97, 119])
def test_cycle_length_is_order(n):
    length = cycle_length(n)
    assert pow(10, length, n) == 1
    assert all(pow(10, k, n) != 1 for k in range(1, length))


@pytest.mark.parametrize("n", [3, 7, 13, 41])
def test_cycle_length_ignores_two_and_five(n):
    assert cycle_length(10 * n) == cycle_length(n)


def test_cycle_length_terminating():
    assert cycle_length(8) == 0


def test_longest_reciprocal_cycle():
    best = longest_reciprocal_cycle(60)
    assert best.length == cycle_length(best.denominator)
    assert all(cycle_length(k) <= best.length for k in range(2, 60))


@pytest.mark.parametrize("n", range(0, 15))
def test_choose_symmetry_and_pascal(n):
    for r in range(0, n + 1):
        assert choose(n, r) == choose(n, n - r)
        if 0 < r:
            assert choose(n + 1, r) == choose(n, r) + choose(n, r - 1)


def test_choose_edges():
    assert choose(3, 5) == 0
    with pytest.raises(ValueError):
        choose(-1, 2)


def test_combinatoric_selections_first_row():
    assert combinatoric_selections(23, 1000000) == 4


def test_combinatoric_selections_zero_cutoff():
    assert combinatoric_selections(30, 0) == sum(n - 1 for n in range(4, 31))