"""Counting lines and rectangles among lattice points."""

from collections import Counter, defaultdict
from itertools import combinations
from math import gcd


def _direction(dx, dy):
    """Reduce ``(dx, dy)`` to a canonical direction shared by its opposite."""
    divisor = gcd(dx, dy)
    dx, dy = dx // divisor, dy // divisor
    if dx < 0 or (dx == 0 and dy < 0):
        dx, dy = -dx, -dy
    return dx, dy


def max_points(points):
    """Return the largest number of points lying on one straight line.

    Repeated points count once for each time they appear.
    """
    points = [tuple(point) for point in points]
    best = 0
    for anchor_index, (ax, ay) in enumerate(points):
        slopes = Counter()
        duplicates = 0
        for bx, by in points[anchor_index + 1:]:
            if (bx, by) == (ax, ay):
                duplicates += 1
            else:
                slopes[_direction(bx - ax, by - ay)] += 1
        best = max(best, max(slopes.values(), default=0) + duplicates + 1)
    return best


def min_area_rect(points):
    """Return the smallest area of an axis-aligned rectangle whose four
    corners are all among ``points``, or 0 when there is none."""
    columns = defaultdict(set)
    for x, y in points:
        columns[x].add(y)
    tall_columns = [(x, ys) for x, ys in columns.items() if len(ys) >= 2]
    best = None
    for (x1, ys1), (x2, ys2) in combinations(tall_columns, 2):
        shared = sorted(ys1 & ys2)
        width = abs(x2 - x1)
        for low, high in zip(shared, shared[1:]):
            area = width * (high - low)
            if best is None or area < best:
                best = area
    return 0 if best is None else best