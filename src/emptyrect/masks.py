"""Helpers for obstacle masks and for picking the largest empty rectangle."""

import numpy as np

from emptyrect.staircase import DEFAULT_HEIGHT, DEFAULT_WIDTH, maximal_rectangles_array
from emptyrect.geometry import Point, Rectangle


def points_from_mask(mask):
    """Obstacle points from the nonzero entries of a 2D array.

    Entry ``mask[row, col]`` becomes the point ``(col, row)``. The result is an
    ``(N, 2)`` int64 array already in sweep order (by row, then by column), so it
    can be passed to `maximal_rectangles` directly, with the container being
    ``width = mask.shape[1] - 1`` and ``height = mask.shape[0] - 1``.
    """
    mask = np.asarray(mask)
    if mask.ndim != 2:
        raise ValueError(f'Mask must be 2D, got shape {mask.shape}')

    # np.nonzero returns indices in row-major order
    rows, cols = np.nonzero(mask)
    return np.stack([cols, rows], axis=1).astype(np.int64)


def largest_empty_rectangle(points, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, *,
                            check_input=True):
    """The maximal empty rectangle with the largest area.

    Ties are broken by the natural rectangle order, i.e. the one with the
    smallest ``(x, y, width, height)`` wins.

    Returns:
        A ``Rectangle``, or None if the sweep found no rectangle at all.
    """
    rects = maximal_rectangles_array(points, width, height, check_input=check_input)
    if len(rects) == 0:
        return None

    area = rects[:, 2] * rects[:, 3]
    # lexsort uses the last key as the primary one
    order = np.lexsort((rects[:, 3], rects[:, 2], rects[:, 1], rects[:, 0], -area))
    x, y, w, h = rects[order[0]]
    return Rectangle(Point(int(x), int(y)), int(w), int(h))
