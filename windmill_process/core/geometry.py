"""Exact geometric predicates on plane points.

Collinearity is decided with the cross-product identity

    (y2 - y1) * (x3 - x2) == (y3 - y2) * (x2 - x1)

which needs no division, so vertical lines and repeated points need no
special casing. Integer coordinates are compared as-is; any other coordinate
is converted to a ``Fraction`` first (exact for floats), so the test never
suffers from floating-point round-off.
"""

from fractions import Fraction
from numbers import Integral

from .models import Number, Point


def _exact(value: Number):
    if isinstance(value, Integral):
        return int(value)
    return Fraction(value)


def is_collinear(p1: Point, p2: Point, p3: Point) -> bool:
    """Check whether three points lie on a common line.

    Args:
        p1: First point (x, y).
        p2: Second point (x, y).
        p3: Third point (x, y).

    Returns:
        True if the points are collinear. Any triple containing a repeated
        point is collinear.

    Examples:
        >>> is_collinear((1, 2), (3, 4), (5, 6))
        True
        >>> is_collinear((1, 2), (3, 4), (5, 7))
        False
    """
    x1, y1 = (_exact(v) for v in p1)
    x2, y2 = (_exact(v) for v in p2)
    x3, y3 = (_exact(v) for v in p3)
    return (y2 - y1) * (x3 - x2) == (y3 - y2) * (x2 - x1)


def squared_distance(a: Point, b: Point) -> Number:
    """Squared Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy
