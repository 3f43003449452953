"""Count points on either side of the line's current orientation.

Both counters skip the pivot and any point collinear with the front segment.
A point whose x lies between the two endpoint x-values belongs to neither
side.
"""

from .geometry import is_collinear
from .line import get_directional_line_segments
from .models import Line, Plane, Point


def get_number_of_points_in_front_of_line(plane: Plane, pivot: Point, line: Line) -> int:
    """Count points to the right of both line endpoints."""
    pivot = Point.of(pivot)
    segments = get_directional_line_segments(pivot, line)
    front = segments.front
    return sum(
        1
        for point in plane.without(pivot)
        if point.x > front.end.x
        and point.x > segments.back.end.x
        and not is_collinear(front.start, front.end, point)
    )


def get_number_of_points_behind_line(plane: Plane, pivot: Point, line: Line) -> int:
    """Count points to the left of both line endpoints."""
    pivot = Point.of(pivot)
    segments = get_directional_line_segments(pivot, line)
    front = segments.front
    return sum(
        1
        for point in plane.without(pivot)
        if point.x < front.end.x
        and point.x < segments.back.end.x
        and not is_collinear(front.start, front.end, point)
    )
