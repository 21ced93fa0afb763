"""Permutation, pandigital and palindrome puzzles."""

from itertools import product
from math import factorial

from .prime_puzzles import concatenate

_SUBSTRING_DIVISORS = (2, 3, 5, 7, 11, 13, 17)
_MIN_PANDIGITAL = 123456789


def next_permutation(seq):
    """Next lexicographic permutation of ``seq`` as a list; an unchanged copy if it is the last."""
    items = list(seq)
    pivot = next(
        (k for k in range(len(items) - 2, -1, -1) if items[k] < items[k + 1]), None
    )
    if pivot is None:
        return items
    successor = max(
        k for k in range(pivot + 1, len(items)) if items[k] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = sorted(items[pivot + 1 :])
    return items


def nth_permutation(items, count):
    """The ``count``-th (from 1) lexicographic permutation of distinct ``items``."""
    pool = sorted(items)
    total = factorial(len(pool))
    if not 1 <= count <= total:
        raise ValueError("count out of range")
    index = count - 1
    result = []
    while pool:
        block = factorial(len(pool) - 1)
        position, index = divmod(index, block)
        result.append(pool.pop(position))
    return result


def substring_divisible(digits):
    """True when the three-digit windows from the second digit on divide by 2, 3, 5, 7, 11, 13, 17."""
    values = list(digits)
    if len(values) != 10:
        raise ValueError("exactly ten digits are required")
    return all(
        (100 * values[start] + 10 * values[start + 1] + values[start + 2]) % divisor
        == 0
        for start, divisor in enumerate(_SUBSTRING_DIVISORS, start=1)
    )


def _substring_divisible_permutations():
    def extend(prefix, remaining):
        if not remaining:
            yield prefix
            return
        for digit in sorted(remaining):
            candidate = prefix + (digit,)
            start = len(candidate) - 3
            if start >= 1:
                window = 100 * candidate[start] + 10 * candidate[start + 1] + candidate[start + 2]
                if window % _SUBSTRING_DIVISORS[start - 1]:
                    continue
            yield from extend(candidate, remaining - {digit})

    yield from extend((), frozenset(range(10)))


def substring_divisibility_sum():
    """Sum of all 0-9 pandigital arrangements with the substring divisibility property."""
    return sum(
        int("".join(map(str, digits))) for digits in _substring_divisible_permutations()
    )


def pandigital_products(limit):
    """Sorted distinct products a*b whose digits with a and b use 1..9 once, b < min(a, limit // a)."""
    found = set()
    target = set("123456789")
    for a in range(1, limit):
        for b in range(1, min(a, limit // a)):
            text = f"{a}{b}{a * b}"
            if len(text) == 9 and set(text) == target:
                found.add(a * b)
    return sorted(found)


def concatenate_numbers(x, y):
    """Join the decimal digits of ``x`` and ``y``."""
    return concatenate(x, y)


def is_pandigital(n):
    """True when ``n`` has nine digits using each of 1..9 once."""
    return n > 0 and "".join(sorted(str(n))) == "123456789"


def max_pandigital_multiple(limit):
    """Largest pandigital concatenated product x*(1, 2, ...) for x below ``limit``, or None."""
    best = None
    for x in range(1, limit):
        value = concatenate_numbers(x, 2 * x)
        multiplier = 3
        while value <= _MIN_PANDIGITAL:
            value = concatenate_numbers(value, multiplier * x)
            multiplier += 1
        if is_pandigital(value) and (best is None or value > best):
            best = value
    return best


def permuted_multiples(limit, max_multiple):
    """Smallest n up to ``limit`` whose multiples 2n..max_multiple*n share its digits, or None."""
    for n in range(1, limit + 1):
        key = sorted(str(n))
        if all(sorted(str(k * n)) == key for k in range(2, max_multiple + 1)):
            return n
    return None


def is_palindrome(n, base):
    """True when ``n`` reads the same both ways in ``base``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if base < 2:
        raise ValueError("base must be at least 2")
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(digit)
    return digits == digits[::-1]


def _decimal_palindromes(limit):
    for width in range(1, len(str(max(limit, 1))) + 1):
        half_width = (width + 1) // 2
        low = 0 if width == 1 else 10 ** (half_width - 1)
        for half in range(low, 10**half_width):
            text = str(half)
            mirrored = text[::-1] if width % 2 == 0 else text[-2::-1]
            value = int(text + mirrored)
            if value >= limit:
                return
            yield value


def double_base_palindromes(limit):
    """Sum of numbers below ``limit`` palindromic in base 10 and base 2."""
    return sum(p for p in _decimal_palindromes(limit) if is_palindrome(p, 2))


def reverse_and_add(n):
    """``n`` plus the number formed by its digits reversed."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n + int(str(n)[::-1])


def lychrel_count(limit, iterations):
    """Count numbers below ``limit`` not reaching a palindrome within ``iterations - 1`` reverse-adds."""
    count = 0
    for k in range(1, limit):
        value = k
        for _ in range(1, iterations):
            value = reverse_and_add(value)
            if is_palindrome(value, 10):
                break
        else:
            count += 1
    return count


def largest_palindrome_product():
    """Largest six-digit palindrome that is a product of two three-digit numbers."""
    for a, b, c in product(range(9, -1, -1), repeat=3):
        palindrome = 100001 * a + 10010 * b + 1100 * c
        for first in range(100, 1000):
            if palindrome % first == 0 and 100 <= palindrome // first < 1000:
                return palindrome
    return None