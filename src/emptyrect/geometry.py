"""Point and rectangle value types, and their conversions to and from arrays.

The sweep itself works on plain integer arrays. The types here are the
Python-side view of its inputs and outputs: ``Point`` for obstacle points and
``Rectangle`` for the maximal empty rectangles it reports.
"""

from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """An obstacle point on the integer grid, ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class Rectangle(NamedTuple):
    """Axis-aligned rectangle ``[x, x + width] x [y, y + height]``.

    ``origin`` is the corner with the smallest coordinates (the top-left one when
    rows grow downward). Being a tuple, rectangles order lexicographically by
    ``(origin.x, origin.y, width, height)``, which is the order results are
    sorted in by default.
    """

    origin: Point
    width: int
    height: int

    @property
    def right(self):
        return self.origin.x + self.width

    @property
    def bottom(self):
        return self.origin.y + self.height

    @property
    def area(self):
        return self.width * self.height

    def contains_interior(self, point):
        """Whether ``point`` lies strictly inside, i.e. not on an edge."""
        px, py = _xy(point)
        return self.origin.x < px < self.right and self.origin.y < py < self.bottom


def _xy(p):
    if hasattr(p, 'x') and hasattr(p, 'y'):
        return p.x, p.y
    x, y = p
    return x, y


def as_point_array(points):
    """Convert points to an ``(N, 2)`` int64 array of ``(x, y)`` rows.

    Accepts an array, ``Point``s, objects with ``x`` and ``y`` attributes, or
    plain ``(x, y)`` pairs. The order of the points is preserved. Coordinates
    must be whole numbers, ``2.0`` is accepted but ``2.5`` raises ``ValueError``.
    """
    if isinstance(points, np.ndarray):
        arr = points
    else:
        arr = np.array([_xy(p) for p in points])

    if arr.size == 0:
        return np.zeros((0, 2), np.int64)

    if arr.dtype.kind not in 'iub':
        as_float = arr.astype(np.float64)
        if not np.all(np.isfinite(as_float)) or np.any(as_float != np.round(as_float)):
            raise ValueError(f'Point coordinates must be integers, got dtype {arr.dtype}')
    return np.ascontiguousarray(arr, dtype=np.int64)


def sort_points(points):
    """Return the points as ``Point``s in sweep order: by row, then by column.

    Duplicates are kept, the sweep skips a point equal to its predecessor.
    """
    arr = as_point_array(points)
    order = np.lexsort((arr[:, 0], arr[:, 1]))
    return [Point(int(x), int(y)) for x, y in arr[order]]


def rectangles_from_array(arr):
    """Turn a ``(K, 4)`` array of ``[x, y, width, height]`` rows into ``Rectangle``s."""
    return [
        Rectangle(Point(int(x), int(y)), int(w), int(h))
        for x, y, w, h in np.asarray(arr).reshape(-1, 4)
    ]


def rectangles_to_array(rectangles):
    """Inverse of `rectangles_from_array`."""
    rows = [(r.origin.x, r.origin.y, r.width, r.height) for r in rectangles]
    if not rows:
        return np.zeros((0, 4), np.int64)
    return np.array(rows, dtype=np.int64)
