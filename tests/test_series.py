from math import isqrt

import pytest

from eulersolve.series import (
    distinct_powers,
    even_fibonacci_sum,
    fibonacci,
    large_non_mersenne_prime,
    lattice_paths,
    multiples_sum,
    powerful_digit_counts,
    pythagorean_triplet_product,
    self_powers_sum,
    series_sum,
    smallest_multiple,
    spiral_diagonal_sum,
    square_root_convergents,
    sum_square_difference,
)


@pytest.mark.parametrize("n", range(1, 30))
def test_series_sum_increments(n):
    assert series_sum(n) - series_sum(n - 1) == n


def test_multiples_sum_example():
    assert multiples_sum(3, 5, 10) == 23


@pytest.mark.parametrize("bound", range(1, 60))
def test_multiples_sum_step(bound):
    step = multiples_sum(3, 5, bound + 1) - multiples_sum(3, 5, bound)
    expected = bound if bound % 3 == 0 or bound % 5 == 0 else 0
    assert step == expected


def test_multiples_sum_rejects_zero():
    with pytest.raises(ValueError):
        multiples_sum(0, 5, 10)


@pytest.mark.parametrize("n", range(60))
def test_fibonacci_recurrence(n):
    assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_fibonacci_start_and_error():
    assert (fibonacci(0), fibonacci(1)) == (0, 1)
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_even_fibonacci_sum_small():
    assert even_fibonacci_sum(fibonacci(9)) == fibonacci(3) + fibonacci(6)


def test_even_fibonacci_sum_is_even():
    assert even_fibonacci_sum(4000000) % 2 == 0


def test_smallest_multiple_example():
    assert smallest_multiple(10) == 2520


def test_smallest_multiple_minimal():
    result = smallest_multiple(20)
    assert all(result % k == 0 for k in range(1, 21))
    for p in (2, 3, 5, 7, 11, 13, 17, 19):
        assert not all((result // p) % k == 0 for k in range(1, 21))


def test_smallest_multiple_rejects_zero():
    with pytest.raises(ValueError):
        smallest_multiple(0)


@pytest.mark.parametrize("n", range(1, 40))
def test_sum_square_difference_step(n):
    assert sum_square_difference(n) - sum_square_difference(n - 1) == n * n * (n - 1)


@pytest.mark.parametrize("scale", [2, 3])
def test_pythagorean_triplet_scaling(scale):
    base = pythagorean_triplet_product(12)
    assert base > 0
    assert pythagorean_triplet_product(12 * scale) == scale**3 * base


def test_pythagorean_triplet_odd_perimeter():
    assert pythagorean_triplet_product(1001) is None


def test_lattice_paths_ratio():
    assert lattice_paths(0) == 1
    for n in range(30):
        assert lattice_paths(n + 1) * (n + 1) == lattice_paths(n) * 2 * (2 * n + 1)


def test_lattice_paths_negative():
    with pytest.raises(ValueError):
        lattice_paths(-1)


@pytest.mark.parametrize("n", range(1, 20))
def test_spiral_diagonal_step(n):
    assert spiral_diagonal_sum(0) == 1
    step = spiral_diagonal_sum(n) - spiral_diagonal_sum(n - 1)
    assert step == 4 * (2 * n + 1) ** 2 - 12 * n


def test_distinct_powers():
    assert distinct_powers() == 9183


@pytest.mark.parametrize("n", range(1, 21))
def test_self_powers_step(n):
    modulus = 10**40
    assert self_powers_sum(n, modulus) - self_powers_sum(n - 1, modulus) == n**n


def test_self_powers_reduced():
    assert 0 <= self_powers_sum(1000, 10000000000) < 10000000000


def test_large_non_mersenne_prime_shape():
    result = large_non_mersenne_prime()
    assert 0 <= result < 10000000000
    assert result % 2 == 1


def test_powerful_digit_counts_bounds():
    result = powerful_digit_counts()
    assert 9 <= result < 9 * 22


def test_square_root_convergents_first_hit():
    assert square_root_convergents(8) == square_root_convergents(1)
    assert square_root_convergents(9) == square_root_convergents(8) + 1


@pytest.mark.parametrize("n", range(1, 60))
def test_square_root_convergents_monotone(n):
    step = square_root_convergents(n + 1) - square_root_convergents(n)
    assert step in (0, 1)
    assert isqrt(4) == 2 or step is None