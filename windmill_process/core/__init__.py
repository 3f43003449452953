"""Core windmill-process components."""

from .errors import WindmillError, InvalidInputError, NoIntersectionError
from .models import Point, Plane, Line, Segment, DirectionalSegments, RunConfig
from .geometry import is_collinear, squared_distance
from .plane import generate_random_plane, get_pivot_point
from .line import get_line_points_from_pivot, get_directional_line_segments
from .intersection import get_next_intersection_point
from .classifier import (
    get_number_of_points_in_front_of_line,
    get_number_of_points_behind_line,
)

__all__ = [
    "WindmillError",
    "InvalidInputError",
    "NoIntersectionError",
    "Point",
    "Plane",
    "Line",
    "Segment",
    "DirectionalSegments",
    "RunConfig",
    "is_collinear",
    "squared_distance",
    "generate_random_plane",
    "get_pivot_point",
    "get_line_points_from_pivot",
    "get_directional_line_segments",
    "get_next_intersection_point",
    "get_number_of_points_in_front_of_line",
    "get_number_of_points_behind_line",
]
