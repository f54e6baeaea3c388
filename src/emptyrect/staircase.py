"""
Maximal Empty Rectangles
========================

Given a set of obstacle points on the integer grid ``[0, width] x [0, height]``,
find every axis-aligned rectangle that has no point strictly inside it and
cannot be enlarged in any direction without enclosing a point or leaving the
container. Points on the edges of a rectangle are allowed; they are what stops
the rectangle from growing.

The algorithm
-------------

This is the staircase algorithm of Edmonds, Gryz, Liang and Miller ("Mining
for empty rectangles in large data sets", 2003). It runs in O(n × m) time for
n points on a grid m columns wide.

The points are visited in row order. For each column, a table ``yr`` keeps the
row of the most recent point seen in that column (0 if none). When a point P on
row y is visited, ``yr`` describes the "skyline" above P: every rectangle whose
bottom edge lies on row y can only extend upward until it hits one of those
recorded points.

Scanning the columns from left to right, a stack of steps ``(x, y)`` is kept.
A step means "from column x to the current column, no recorded point is below
row y". Reading the stack from the top down gives the staircase: steps get
further to the left and lower (larger y) the deeper they are.

When the scan reaches a column i holding a recorded point at row ``yr[i]`` and
i is at or right of P, every step above ``yr[i]`` closes a rectangle:

- its top-left corner is the step ``(xi, yi)``,
- its bottom-right corner is ``(i, y)``,
- the point in column i stops it on the right, the step's own point stops it
  on top, the column xi stops it on the left, and P stops it at the bottom,
  as long as P lies strictly between xi and i.

Those steps are popped, the rectangles are emitted, and a new step for column
i replaces them.

The container edges are handled with synthetic points:

- ``yr[width]`` is set to ``y - 1`` for every visited point, so the right edge
  of the container behaves like a point just above the current row.
- A final point ``(0, height)`` is visited after all real points. While its row
  is scanned it is moved to the column just left of each blocking column, so
  that every step qualifies and the rectangles reaching the bottom edge are
  emitted.

One-column rectangles along the bottom edge would be rejected by the
"P strictly between xi and i" test, since there P sits on xi itself. The
extractor therefore moves the bound two columns right when that happens on the
bottom row.

Complexity
----------

- Time: O(n × m). Every visited point scans all m + 1 columns once, and each
  column pushes at most two steps, which are popped at most once.
- Space: O(m) for ``yr`` and the stack, plus the output.
"""

import logging

import numba
import numpy as np

from emptyrect.geometry import as_point_array, rectangles_from_array

logger = logging.getLogger(__name__)

# Container size used when none is given.
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100


def maximal_rectangles(
        points, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, *, sort=True, key=None,
        check_input=True):
    """Find all maximal empty rectangles among the given obstacle points.

    Args:
        points: Obstacle points sorted by row, then by column. Either an ``(N, 2)``
            integer array of ``(x, y)`` rows, or an iterable of ``Point``s, objects
            with ``x`` and ``y`` attributes, or ``(x, y)`` pairs.
        width: Container width, coordinates run from 0 to ``width`` inclusive.
        height: Container height, coordinates run from 0 to ``height`` inclusive.
        sort: Sort the result. Without ``key``, rectangles are ordered by
            ``(origin.x, origin.y, width, height)``.
        key: Optional sort key defining another total order on rectangles. Only
            valid together with ``sort=True``.
        check_input: Validate the container size, point bounds and point order,
            raising ``ValueError`` on violation. Without the checks, bad input
            gives meaningless results.

    Returns:
        List of ``Rectangle``s. Sorted if ``sort`` is True, otherwise in the order
        the sweep finds them.

        A point on the bottom edge of the container moves the bound used for the
        bottom row, so the same rectangle can then be listed more than once, and
        one-column rectangles lying inside another listed rectangle can appear.
        Points on a shared row can likewise yield rectangles that are empty but
        not maximal. Use ``set(result)`` where repeats matter.
    """
    if key is not None and not sort:
        raise ValueError('A sort key was given but sort is False')

    arr = maximal_rectangles_array(points, width, height, check_input=check_input)
    rects = rectangles_from_array(arr)
    if sort:
        rects.sort(key=key)
    return rects


def maximal_rectangles_array(points, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, *,
                             check_input=True):
    """Array version of `maximal_rectangles`.

    Returns:
        ``(K, 4)`` int64 array of ``[x, y, width, height]`` rows, in the order the
        sweep finds them.
    """
    pts = as_point_array(points)
    if check_input:
        _check_input(pts, width, height)

    result = _sweep(pts, int(width), int(height))
    logger.debug(
        'Found %d maximal rectangles among %d points in a %dx%d container',
        len(result), len(pts), width, height)
    return result


def _check_input(pts, width, height):
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f'{name} must be an integer, got {value!r}')
        if value <= 0:
            raise ValueError(f'{name} must be positive, got {value}')

    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f'Points must have shape (N, 2), got {pts.shape}')
    if len(pts) == 0:
        return

    x = pts[:, 0]
    y = pts[:, 1]
    outside = (x < 0) | (x > width) | (y < 0) | (y > height)
    if np.any(outside):
        i = int(np.argmax(outside))
        raise ValueError(
            f'Point {tuple(pts[i].tolist())} lies outside the container '
            f'[0, {width}] x [0, {height}]')

    # Row-major rank of each point, must not decrease along the sequence
    rank = y * (width + 1) + x
    unsorted = np.diff(rank) < 0
    if np.any(unsorted):
        i = int(np.argmax(unsorted))
        raise ValueError(
            f'Points must be sorted by row, then by column, but '
            f'{tuple(pts[i + 1].tolist())} comes after {tuple(pts[i].tolist())}')


@numba.njit(cache=True)
def _sweep(points, width, height):
    n_points = points.shape[0]
    yr = np.zeros(width + 1, np.int64)
    # Each column pushes at most two steps per visited point
    stack = np.empty((2 * width + 4, 2), np.int64)
    top = 0
    out = np.empty((16, 4), np.int64)
    n_out = 0

    prev_x = -1
    prev_y = -1
    synthetic_x = 0

    # The extra iteration visits the synthetic point on the bottom edge
    for k in range(n_points + 1):
        is_last = k == n_points
        if is_last:
            px = synthetic_x
            py = height
        else:
            px = points[k, 0]
            py = points[k, 1]

        if px == prev_x and py == prev_y and not is_last:
            continue

        x = 0
        yr[width] = py - 1
        top = 0

        for i in range(width + 1):
            yi = yr[i]
            if yi != 0 and yi != py:
                if py == height:
                    # On the bottom row the synthetic point is the bound, always
                    # just left of the blocking column
                    synthetic_x = i - 1
                    px = synthetic_x

                stack[top, 0] = x
                stack[top, 1] = 0
                top += 1

                if i >= px:
                    x, top, out, n_out = _extract_maximal(
                        stack, top, px, yi, i, py, height, out, n_out)

                while top > 0 and stack[top - 1, 1] <= yi:
                    top -= 1
                    x = stack[top, 0]

                stack[top, 0] = x
                stack[top, 1] = yi
                top += 1
                x = i
            elif yi != 0:
                # Another point on the current row, acts as a wall but closes nothing
                stack[top, 0] = x
                stack[top, 1] = yi
                top += 1
                x = i

        yr[px] = py
        prev_x = px
        prev_y = py

    return out[:n_out].copy()


@numba.njit(cache=True)
def _extract_maximal(stack, top, xstar, ystar, right, row, bottom, out, n_out):
    """Pop the steps above ``ystar`` and emit the maximal rectangles they close.

    ``(right, row)`` is the bottom-right corner shared by all these rectangles,
    ``xstar`` the column of the point bounding them from below and ``bottom``
    the last row of the container. Steps at or below ``ystar`` are left on the
    stack, they belong to the staircase of the next column.

    Returns the column of the last popped step (0 if none), the new stack top,
    and the output buffer with its fill count.
    """
    xi = 0
    while top > 0 and stack[top - 1, 1] < ystar:
        top -= 1
        xi = stack[top, 0]
        yi = stack[top, 1]

        # Allow one-column rectangles on the bottom row
        if xstar == xi and row == bottom:
            xstar += 2

        if xi < xstar and yi < ystar and xstar != right:
            if n_out == out.shape[0]:
                out = _grow(out)
            out[n_out, 0] = xi
            out[n_out, 1] = yi
            out[n_out, 2] = right - xi
            out[n_out, 3] = row - yi
            n_out += 1

    return xi, top, out, n_out


@numba.njit(cache=True)
def _grow(arr):
    grown = np.empty((2 * arr.shape[0], arr.shape[1]), np.int64)
    grown[:arr.shape[0]] = arr
    return grown
