"""Digit manipulations: digit sums, digit chains and digit products."""

from functools import lru_cache
from math import factorial, prod


def digits_of(n):
    """Decimal digits of ``n``, least significant first; empty for 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = []
    while n:
        n, digit = divmod(n, 10)
        result.append(digit)
    return result


def power_digit_sum(power):
    """Sum of the decimal digits of 2**power."""
    if power < 0:
        raise ValueError("power must be non-negative")
    return sum(digits_of(2**power))


def factorial_digit_sum(n):
    """Sum of the decimal digits of n!."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return sum(digits_of(factorial(n)))


def first_fibonacci_with_digits(num_digits):
    """Index of the first Fibonacci term with ``num_digits`` digits, counting from F2 = 1."""
    if num_digits < 1:
        raise ValueError("num_digits must be at least 1")
    threshold = 10 ** (num_digits - 1)
    previous, current, index = 1, 1, 2
    while current < threshold:
        previous, current = current, previous + current
        index += 1
    return index


def large_sum_prefix(numbers):
    """First ten digits of the sum of equally long decimal numbers."""
    texts = [str(number).strip() for number in numbers]
    if len({len(text) for text in texts}) > 1:
        raise ValueError("all numbers must have the same length")
    total = sum(int(text) for text in texts)
    return int(str(total)[:10])


def largest_series_product(digits, length=5):
    """Largest product of ``length`` adjacent digits in the digit string ``digits``."""
    text = str(digits)
    if length < 1:
        raise ValueError("length must be at least 1")
    if length > len(text):
        raise ValueError("length exceeds the number of digits")
    values = [int(ch) for ch in text]
    return max(
        prod(values[start : start + length])
        for start in range(len(values) - length + 1)
    )


def digit_power_sum(n, power):
    """Sum of the digits of ``n``, each raised to ``power``."""
    return sum(digit**power for digit in digits_of(n))


def digit_power_numbers_sum(limit, power):
    """Sum of the numbers from 3 to ``limit`` equal to the sum of their digits raised to ``power``."""
    return sum(k for k in range(3, limit + 1) if k == digit_power_sum(k, power))


_FACTORIALS = tuple(factorial(d) for d in range(10))


def digit_factorial_sum(n):
    """Sum of the factorials of the digits of ``n``."""
    return sum(_FACTORIALS[digit] for digit in digits_of(n))


def digit_factorials_total(limit):
    """Sum of the numbers from 3 to ``limit`` equal to the sum of the factorials of their digits."""
    return sum(k for k in range(3, limit + 1) if k == digit_factorial_sum(k))


@lru_cache(maxsize=None)
def _small_square_chain_end(n):
    current = digit_power_sum(n, 2)
    while current not in (1, 89):
        current = digit_power_sum(current, 2)
    return current


def square_digit_chain_end(n):
    """Where the chain of digit-square sums starting after ``n`` arrives: 1 or 89."""
    if n < 1:
        raise ValueError("n must be positive")
    return _small_square_chain_end(n)


def square_digit_chains(limit):
    """Count the starting numbers below ``limit`` whose digit-square chain arrives at 89."""
    count = 0
    for k in range(1, limit):
        first = digit_power_sum(k, 2)
        end = 89 if first == 89 else (1 if first == 1 else _small_square_chain_end(first))
        count += end == 89
    return count


def digit_factorial_chain_length(n):
    """Number of distinct terms in the digit-factorial chain starting at ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    seen = set()
    current = n
    while current not in seen:
        seen.add(current)
        current = digit_factorial_sum(current)
    return len(seen)


def digit_factorial_chains(limit, target):
    """Count the starting numbers below ``limit`` whose chain has exactly ``target`` terms."""
    return sum(
        1 for n in range(1, limit) if digit_factorial_chain_length(n) == target
    )


def champernowne_product(limit):
    """Product of the digits at positions 1, 10, 100, ... up to ``limit`` of Champernowne's constant."""
    product = 1
    position = 1
    consumed = 0
    number = 0
    while position <= limit:
        number += 1
        text = str(number)
        while position <= limit and consumed + len(text) >= position:
            product *= int(text[position - consumed - 1])
            position *= 10
        consumed += len(text)
    return product


def max_power_digit_sum(limit):
    """Largest digit sum of a**b for 1 <= a <= ``limit`` and 2 <= b < ``limit``."""
    return max(
        (
            sum(digits_of(a**b))
            for a in range(1, limit + 1)
            for b in range(2, limit)
        ),
        default=0,
    )