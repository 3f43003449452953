"""Line construction through a pivot and its split into directional segments."""

from .errors import InvalidInputError
from .models import DirectionalSegments, Line, Plane, Point, Segment


def get_line_points_from_pivot(plane: Plane, pivot: Point) -> Line:
    """Build the vertical line through the pivot spanning the plane.

    The endpoints take the pivot's x-coordinate together with the lowest and
    highest y-coordinate found anywhere in the plane (the pivot included),
    whichever points those belong to.

    Other orientations follow the same recipe with a different projection:
    take the extremes of the points projected onto the line's direction and
    place the endpoints at those extremes on the line through the pivot.

    Args:
        plane: The point set.
        pivot: Rotation center.

    Returns:
        ``Line(near=(pivot.x, min_y), far=(pivot.x, max_y))``.

    Raises:
        InvalidInputError: If the plane is empty.
    """
    if len(plane) == 0:
        raise InvalidInputError("Cannot build a line over an empty plane")

    min_y, max_y = plane.y_extent()
    x = pivot[0]
    return Line(near=Point(x, min_y), far=Point(x, max_y))


def get_directional_line_segments(pivot: Point, line: Line) -> DirectionalSegments:
    """Split a line at the pivot into its front and back segments.

    The front segment runs from the pivot to the far (high-y) endpoint, the
    back segment from the pivot to the near (low-y) endpoint. ``line`` may be
    a ``Line`` or a plain ``(near, far)`` pair.
    """
    pivot = Point.of(pivot)
    line = Line.coerce(line)
    return DirectionalSegments(
        front=Segment(start=pivot, end=line.far),
        back=Segment(start=pivot, end=line.near),
    )
