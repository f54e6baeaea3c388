"""Shared fixtures and helpers for emptyrect tests."""

import numpy as np
import pytest

from emptyrect import Point, Rectangle


# =============================================================================
# Hand-checked configurations
# =============================================================================

# (points, width, height, expected rectangles as (x, y, width, height))
KNOWN_CASES = [
    # Empty container
    ([], 5, 5, [(0, 0, 5, 5)]),
    # One point in the middle, one rectangle on each side of it
    ([(2, 2)], 5, 5, [(0, 0, 2, 5), (0, 0, 5, 2), (0, 2, 5, 3), (2, 0, 3, 5)]),
    # Diagonal pair, includes the one-column strip between columns 2 and 3
    ([(2, 2), (3, 3)], 5, 5, [
        (0, 0, 2, 5), (0, 0, 5, 2), (0, 2, 3, 3), (0, 3, 5, 2),
        (2, 0, 1, 5), (2, 0, 3, 3), (3, 0, 2, 5),
    ]),
]


# =============================================================================
# Helper functions
# =============================================================================

def is_empty(rect, points):
    """No point lies strictly inside the rectangle."""
    return not any(rect.contains_interior(p) for p in points)


def is_maximal(rect, points, width, height):
    """No edge of an empty rectangle can move outward."""
    x0, y0 = rect.origin
    x1, y1 = rect.right, rect.bottom
    pts = [tuple(p) for p in points]
    left = x0 == 0 or any(px == x0 and y0 < py < y1 for px, py in pts)
    right = x1 == width or any(px == x1 and y0 < py < y1 for px, py in pts)
    top = y0 == 0 or any(py == y0 and x0 < px < x1 for px, py in pts)
    bottom = y1 == height or any(py == y1 and x0 < px < x1 for px, py in pts)
    return left and right and top and bottom


def brute_force_maximal_rectangles(points, width, height):
    """All maximal empty rectangles, by checking every candidate rectangle."""
    points = [tuple(p) for p in points]
    result = set()
    for x0 in range(width):
        for x1 in range(x0 + 1, width + 1):
            for y0 in range(height):
                for y1 in range(y0 + 1, height + 1):
                    rect = Rectangle(Point(x0, y0), x1 - x0, y1 - y0)
                    if is_empty(rect, points) and is_maximal(rect, points, width, height):
                        result.add(rect)
    return result


def random_points(n, width, height, rng=None):
    """Random points inside the container (edges included), in sweep order."""
    rng = np.random.default_rng() if rng is None else rng
    x = rng.integers(0, width + 1, size=n)
    y = rng.integers(0, height + 1, size=n)
    order = np.lexsort((x, y))
    return np.stack([x[order], y[order]], axis=1).astype(np.int64)


def general_position_points(n, width, height, rng=None):
    """Random points strictly inside the container, no two sharing a row or column."""
    rng = np.random.default_rng() if rng is None else rng
    x = rng.choice(np.arange(1, width), size=n, replace=False)
    y = rng.choice(np.arange(1, height), size=n, replace=False)
    order = np.argsort(y)
    return np.stack([x[order], y[order]], axis=1).astype(np.int64)


def as_tuples(rects):
    return [(r.origin.x, r.origin.y, r.width, r.height) for r in rects]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def rng():
    """A seeded random generator, so failures can be reproduced."""
    return np.random.default_rng(0)


@pytest.fixture
def checkerboard_mask():
    """A 7x9 mask with an obstacle on every other cell of the odd rows."""
    mask = np.zeros((7, 9), bool)
    mask[1::2, 1::2] = True
    return mask
