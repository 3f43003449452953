"""Search for the next point struck by the rotating line.

The line rotates clockwise around the pivot. Among the other points, a point
closer to the pivot is always struck before one further away, except that a
point the line has already swept past cannot be struck again. For the
vertical line built by ``get_line_points_from_pivot`` a point is taken as
swept past when it lies to the right of both line endpoints.

The x-only "behind" test holds for the vertical line only. A line at any
other angle needs a half-plane test: the sign of the cross product of the
line direction with the vector from the pivot to the point.
"""

import logging

from .errors import NoIntersectionError
from .geometry import squared_distance
from .line import get_directional_line_segments
from .models import Line, Plane, Point

logger = logging.getLogger(__name__)


def _is_behind_rotation(point: Point, pivot: Point, line: Line) -> bool:
    segments = get_directional_line_segments(pivot, line)
    return point.x > segments.front.end.x and point.x > segments.back.end.x


def get_next_intersection_point(plane: Plane, pivot: Point, line: Line) -> Point:
    """Find the point the rotating line strikes next.

    Candidates are the plane's points other than the pivot, ordered by
    Euclidean distance to the pivot. Ties keep the plane's order. The closest
    candidate wins unless it is behind the rotation, in which case the
    second-closest is returned.

    Args:
        plane: The point set.
        pivot: Current rotation center.
        line: Current line through the pivot.

    Returns:
        The next pivot.

    Raises:
        NoIntersectionError: If no candidate remains, or the only candidate
            is behind the rotation.
    """
    pivot = Point.of(pivot)
    candidates = plane.without(pivot)
    if not candidates:
        raise NoIntersectionError(f"No point other than the pivot {pivot} to strike")

    # exact integer distances; sorted() is stable so ties keep plane order
    order = sorted(range(len(candidates)), key=lambda i: squared_distance(pivot, candidates[i]))

    closest = candidates[order[0]]
    if not _is_behind_rotation(closest, pivot, line):
        logger.debug("Next point after %s is %s (closest)", pivot, closest)
        return closest

    if len(order) < 2:
        raise NoIntersectionError(
            f"Only candidate {closest} is behind the rotation around {pivot}"
        )
    following = candidates[order[1]]
    logger.debug(
        "Closest point %s is behind the rotation around %s; next point is %s",
        closest,
        pivot,
        following,
    )
    return following
