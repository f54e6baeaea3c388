"""Emptyrect: all maximal empty rectangles among obstacle points on a grid.

The rectangles are found with the staircase algorithm of Edmonds et al. in
O(n × m) time for n points on a grid m columns wide.

Example:
    >>> from emptyrect import maximal_rectangles
    >>> maximal_rectangles([(2, 2)], width=5, height=5)
    [Rectangle(origin=Point(x=0, y=0), width=2, height=5), ...]
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"

__all__ = [
    # Types
    "Point",
    "Rectangle",
    "sort_points",
    # Sweep
    "maximal_rectangles",
    "maximal_rectangles_array",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    # Masks
    "points_from_mask",
    "largest_empty_rectangle",
]

from emptyrect.geometry import (
    Point,
    Rectangle,
    sort_points,
)

from emptyrect.staircase import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    maximal_rectangles,
    maximal_rectangles_array,
)

from emptyrect.masks import (
    largest_empty_rectangle,
    points_from_mask,
)
