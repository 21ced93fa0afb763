"""Partitions, tilings and dice distributions."""

from collections import Counter
from itertools import islice

_PETER = (4, 9)
_COLIN = (6, 6)


def count_summations(n):
    """Ways to write ``n`` as a sum of at least two positive integers."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for m in range(part, n + 1):
            ways[m] += ways[m - part]
    return ways[n] - 1 if n else 0


def coin_partitions(limit, target):
    """Least n from 2 below ``limit`` whose partition count divides by ``target``, or None."""
    if target < 1:
        raise ValueError("target must be positive")
    partitions = [1]
    for n in range(1, limit):
        total = 0
        k = 1
        while (first := k * (3 * k - 1) // 2) <= n:
            sign = 1 if k % 2 else -1
            total += sign * partitions[n - first]
            second = k * (3 * k + 1) // 2
            if second <= n:
                total += sign * partitions[n - second]
            k += 1
        partitions.append(total % target)
        if n >= 2 and partitions[n] == 0:
            return n
    return None


def _block_counts(min_length):
    counts = []
    while True:
        n = len(counts)
        if n < min_length:
            value = 1
        else:
            value = 1 + counts[n - 1] + sum(
                counts[n - 1 - m] for m in range(min_length, n)
            )
        counts.append(value)
        yield value


def block_combinations(length):
    """Ways to fill a row of ``length`` with red blocks of at least three, separated by gaps."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return next(islice(_block_counts(3), length, None))


def block_combinations_threshold(min_length, target, limit):
    """First row length up to ``limit`` whose block count exceeds ``target``, or None."""
    if min_length < 1:
        raise ValueError("min_length must be positive")
    for n, value in enumerate(islice(_block_counts(min_length), limit + 1)):
        if n >= min_length and value > target:
            return n
    return None


def _single_colour(length, tile):
    ways = [1] * tile
    for n in range(tile, length + 1):
        ways.append(ways[n - 1] + ways[n - tile])
    return ways[length]


def coloured_tiles(length):
    """Ways to place at least one tile of a single colour (sizes 2, 3 or 4) in a row."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return sum(_single_colour(length, tile) - 1 for tile in (2, 3, 4))


def mixed_tiles(length):
    """Ways to tile a row with black squares and tiles of lengths 2, 3 and 4 mixed."""
    if length < 0:
        raise ValueError("length must be non-negative")
    ways = [1]
    for n in range(1, length + 1):
        ways.append(sum(ways[n - m] for m in range(1, min(4, n) + 1)))
    return ways[length]


def dice_totals(sides, count):
    """Mapping of each total to the number of ways ``count`` dice with ``sides`` faces reach it."""
    if sides < 1 or count < 0:
        raise ValueError("sides must be positive and count non-negative")
    totals = Counter({0: 1})
    for _ in range(count):
        following = Counter()
        for total, ways in totals.items():
            for face in range(1, sides + 1):
                following[total + face] += ways
        totals = following
    return dict(sorted(totals.items()))


def dice_game():
    """Probability, to seven places, that nine four-sided dice beat six six-sided dice."""
    peter = dice_totals(*_PETER)
    colin = dice_totals(*_COLIN)
    wins = sum(
        pw * cw for pt, pw in peter.items() for ct, cw in colin.items() if ct < pt
    )
    games = sum(peter.values()) * sum(colin.values())
    return round(wins / games, 7)