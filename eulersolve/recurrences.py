"""Puzzles solved by linear recurrences and Pythagorean parametrisations."""

from math import gcd, isqrt

from .series import fibonacci

_MODIFIED_SEEDS = ((0, -1), (0, 1), (-3, -2), (-3, 2), (-4, -5), (-4, 5), (2, -7), (2, 7))


def arranged_probability(limit):
    """Blue discs in the first arrangement with at least ``limit`` discs and P(two blue) = 1/2."""
    blue, total = 15, 21
    while total < limit:
        blue, total = 3 * blue + 2 * total - 2, 4 * blue + 3 * total - 3
    return blue


def golden_nugget(n):
    """The n-th Fibonacci golden nugget."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return fibonacci(2 * n) * fibonacci(2 * n + 1)


def special_isosceles_triangles(count):
    """Sum of the legs of the first ``count`` isosceles triangles with height one off the base."""
    x, y = 0, -1
    total = 0
    for _ in range(count):
        x, y = -9 * x - 4 * y + 4, -20 * x - 9 * y + 8
        total += abs(y)
    return total


def modified_golden_nuggets(count):
    """Sum of the first ``count`` golden nuggets of the series with G1 = 1, G2 = 4."""
    found = set()
    for x, y in _MODIFIED_SEEDS:
        for _ in range(count):
            x, y = -9 * x - 4 * y - 14, -20 * x - 9 * y - 28
            if x > 0:
                found.add(x)
    return sum(sorted(found)[:count])


def square_remainders(limit):
    """Sum of the maximal remainders of (a-1)**n + (a+1)**n mod a**2 for 3 <= a <= ``limit``."""
    return sum(2 * a * ((a - 1) // 2) for a in range(3, limit + 1))


def pythagorean_tiles(limit):
    """Count right triangles with perimeter up to ``limit`` whose square tiling works."""
    top = 1 + isqrt(max(limit, 0) // 2)
    total = 0
    for n in range(2, top + 1):
        for m in range(1 + n % 2, n, 2):
            if gcd(m, n) != 1:
                continue
            a, b, c = n * n - m * m, 2 * m * n, m * m + n * n
            if c % abs(b - a) == 0:
                total += limit // (a + b + c)
    return total


def singular_right_triangles(limit):
    """Count perimeters up to ``limit`` forming exactly one integer right triangle."""
    counts = [0] * (limit + 1)
    side = 1 + isqrt(max(limit, 0) // 2)
    for m in range(1, side + 1):
        for n in range(m + 1, side + 1, 2):
            if gcd(m, n) != 1:
                continue
            perimeter = 2 * n * (m + n)
            for multiple in range(perimeter, limit + 1, perimeter):
                counts[multiple] += 1
    return sum(1 for c in counts if c == 1)


def same_differences(limit, target):
    """Count n up to ``limit`` with exactly ``target`` solutions of x*x - y*y - z*z = n in progression."""
    counts = [0] * (limit + 1)
    for u in range(1, limit + 1):
        v = u // 3 + 1
        while u * v <= limit:
            if (u + v) % 4 == 0 and (3 * v - u) % 4 == 0:
                counts[u * v] += 1
            v += 1
    return sum(1 for c in counts if c == target)


def counting_rectangles(target):
    """Area of the grid whose count of contained rectangles is closest to ``target``."""
    side = isqrt(target)
    best_gap = target
    best = 0
    for x in range(1, side + 1):
        for y in range(x, side + 1):
            total = (x * (x + 1) // 2) * (y * (y + 1) // 2)
            if total > target + best_gap:
                break
            if abs(total - target) < best_gap:
                best_gap = abs(total - target)
                best = x * y
    return best