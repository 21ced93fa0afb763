"""Puzzles over word lists, number pairs, triangles, networks and key logs."""

from math import isqrt, log

from .grids import read_lines, read_matrix


def word_score(word):
    """Sum of the alphabet positions of the capital letters in ``word``."""
    return sum(ord(ch) - ord("A") + 1 for ch in word if "A" <= ch <= "Z")


def name_scores(names):
    """Total of each name's score times its position in sorted order, counting from 1."""
    ordered = sorted(name.strip().strip('"') for name in names)
    return sum(position * word_score(name) for position, name in enumerate(ordered, start=1))


def read_quoted_words(path):
    """Words of a file of comma-separated, double-quoted words."""
    text = "".join(read_lines(path))
    return [token.strip().strip('"') for token in text.split(",") if token.strip()]


def coded_triangle_words(words):
    """Number of ``words`` whose score is a triangle number."""
    count = 0
    for word in words:
        twice = 2 * word_score(word)
        n = isqrt(twice)
        if n * (n + 1) == twice:
            count += 1
    return count


def read_int_rows(path):
    """Rows of comma-separated integers from ``path``; entries without a number read as 0."""
    return read_matrix(path)


def largest_exponential(pairs):
    """1-based position of the (base, exponent) pair with the largest base**exponent, or None."""
    best_position = None
    best_value = 0.0
    for position, (base, exponent) in enumerate(pairs, start=1):
        value = exponent * log(base)
        if value > best_value:
            best_value = value
            best_position = position
    return best_position


def triangle_contains_origin(points):
    """True when the triangle with vertices (x1, y1, x2, y2, x3, y3) strictly contains the origin."""
    x1, y1, x2, y2, x3, y3 = points
    det = x1 * y2 - y1 * x2
    if det == 0:
        raise ValueError("degenerate triangle: first two vertices are collinear with the origin")
    det_a = x2 * y3 - y2 * x3
    det_b = y1 * x3 - x1 * y3
    return det_a * det > 0 and det_b * det > 0


def triangle_containment(triangles):
    """Number of ``triangles`` that contain the origin."""
    return sum(1 for points in triangles if triangle_contains_origin(points))


def minimal_network_savings(matrix):
    """Weight saved by keeping only a minimum spanning tree of a network; 0 entries mean no edge."""
    rows = [list(row) for row in matrix]
    order = len(rows)
    if order == 0:
        raise ValueError("the network is empty")
    if any(len(row) != order for row in rows):
        raise ValueError("the adjacency matrix must be square")
    total = sum(map(sum, rows)) // 2
    connected = {0}
    tree = 0
    while len(connected) < order:
        edges = [
            (rows[x][y], y)
            for x in connected
            for y in range(order)
            if y not in connected and rows[x][y] > 0
        ]
        if not edges:
            raise ValueError("the network is not connected")
        weight, node = min(edges)
        connected.add(node)
        tree += weight
    return total - tree


def derive_passcode(attempts):
    """Shortest digit sequence consistent with every login attempt's digit order."""
    successors = {}
    for attempt in attempts:
        text = f"{int(attempt):03d}"
        for digit in text:
            successors.setdefault(digit, set())
        for first, second in zip(text, text[1:]):
            successors[first].add(second)
    incoming = {digit: 0 for digit in successors}
    for targets in successors.values():
        for digit in targets:
            incoming[digit] += 1
    ready = sorted(digit for digit, count in incoming.items() if count == 0)
    passcode = []
    while ready:
        digit = ready.pop(0)
        passcode.append(digit)
        for following in successors[digit]:
            incoming[following] -= 1
            if incoming[following] == 0:
                ready.append(following)
        ready.sort()
    if len(passcode) != len(successors):
        raise ValueError("the attempts contradict each other")
    return "".join(passcode)