"""Number triangles and matrices: reading them and finding extreme path sums."""

import heapq
import re
from itertools import accumulate

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(token):
    """Leading integer of ``token``; 0 when it does not start with one."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def read_lines(path):
    """Lines of the text file at ``path``, without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle]


def read_triangle(path):
    """Whitespace-separated integers from ``path`` laid out as rows of 1, 2, 3, ... entries."""
    with open(path, encoding="utf-8") as handle:
        numbers = [int(token) for token in handle.read().split()]
    rows = []
    start = 0
    width = 1
    while start < len(numbers):
        rows.append(numbers[start : start + width])
        start += width
        width += 1
    return rows


def max_triangle_path(rows):
    """Largest total of a top-to-bottom path through a number triangle, moving to adjacent entries."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("the triangle is empty")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must have {depth + 1} entries")
    previous = rows[0]
    best = previous[0]
    for row in rows[1:]:
        last = len(previous) - 1
        previous = [
            value + max(previous[max(0, col - 1)], previous[min(last, col)])
            for col, value in enumerate(row)
        ]
        best = max(best, max(previous))
    return best


def read_matrix(path):
    """Comma-separated integer rows from ``path``; entries without a number read as 0."""
    return [
        [_to_int(token) for token in line.split(",")]
        for line in read_lines(path)
        if line.strip()
    ]


def _checked(matrix):
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("the matrix is empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("the matrix is not rectangular")
    return rows


def min_path_two_ways(matrix):
    """Minimal path sum from top left to bottom right moving only right and down."""
    rows = _checked(matrix)
    previous = list(accumulate(rows[0]))
    for row in rows[1:]:
        current = []
        for col, value in enumerate(row):
            above = previous[col]
            current.append(value + (above if col == 0 else min(above, current[-1])))
        previous = current
    return previous[-1]


def min_path_three_ways(matrix):
    """Minimal path sum from any cell of the left column to any of the right, moving up, down and right."""
    columns = [list(column) for column in zip(*_checked(matrix))]
    scores = columns[0]
    height = len(scores)
    for column in columns[1:]:
        best = [score + value for score, value in zip(scores, column)]
        for row in range(1, height):
            best[row] = min(best[row], best[row - 1] + column[row])
        for row in range(height - 2, -1, -1):
            best[row] = min(best[row], best[row + 1] + column[row])
        scores = best
    return min(scores)


def min_path_four_ways(matrix):
    """Minimal path sum from top left to bottom right moving in all four directions."""
    rows = _checked(matrix)
    height, width = len(rows), len(rows[0])
    target = (height - 1, width - 1)
    best = {(0, 0): rows[0][0]}
    queue = [(rows[0][0], 0, 0)]
    while queue:
        score, row, col = heapq.heappop(queue)
        if (row, col) == target:
            return score
        if score > best[(row, col)]:
            continue
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 0 <= r < height and 0 <= c < width:
                candidate = score + rows[r][c]
                if candidate < best.get((r, c), candidate + 1):
                    best[(r, c)] = candidate
                    heapq.heappush(queue, (candidate, r, c))
    raise ValueError("the bottom right cell cannot be reached")