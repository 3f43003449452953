"""Data models for the windmill process."""

from __future__ import annotations

import json
from dataclasses import dataclass
from numbers import Real
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional, Union

import numpy as np

from .errors import InvalidInputError

Number = Union[int, float]


class Point(NamedTuple):
    """A point in the plane.

    Points are plain value types: two points are equal when their coordinates
    are equal, and a point compares equal to the tuple ``(x, y)``.
    """

    x: Number
    y: Number

    @classmethod
    def of(cls, value: Union[Point, Iterable[Number]]) -> Point:
        """Coerce a ``Point`` or any ``(x, y)`` pair into a ``Point``.

        Raises:
            InvalidInputError: If the value does not hold exactly two numeric
                coordinates.
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise InvalidInputError(f"Expected an (x, y) pair, got {value!r}") from None
        for coord in (x, y):
            if isinstance(coord, bool) or not isinstance(coord, Real):
                raise InvalidInputError(f"Point coordinates must be numbers, got {value!r}")
        return cls(x, y)


class Plane:
    """A finite set of distinct points with a stable iteration order.

    The points are kept in a list (insertion order) next to a set used for
    membership tests. Duplicates are dropped, keeping the first occurrence.
    A plane is never modified after construction.
    """

    __slots__ = ("_points", "_index")

    def __init__(self, points: Iterable[Union[Point, Iterable[Number]]] = ()):
        self._points: list[Point] = []
        self._index: set[Point] = set()
        for value in points:
            point = Point.of(value)
            if point not in self._index:
                self._index.add(point)
                self._points.append(point)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __contains__(self, value: object) -> bool:
        try:
            return Point.of(value) in self._index  # type: ignore[arg-type]
        except InvalidInputError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self._index == other._index

    def __repr__(self) -> str:
        return f"Plane({self._points!r})"

    @property
    def points(self) -> tuple[Point, ...]:
        """Points in iteration order."""
        return tuple(self._points)

    def without(self, point: Point) -> list[Point]:
        """Return the points of the plane, in order, minus ``point``."""
        return [p for p in self._points if p != point]

    def y_extent(self) -> tuple[Number, Number]:
        """Lowest and highest y-coordinate over the whole plane.

        Raises:
            InvalidInputError: If the plane is empty.
        """
        if not self._points:
            raise InvalidInputError("Plane is empty")
        ys = [p.y for p in self._points]
        return min(ys), max(ys)

    def to_array(self) -> np.ndarray:
        """Points as an ``(n, 2)`` array in iteration order."""
        if not self._points:
            return np.empty((0, 2))
        return np.asarray(self._points)

    def to_list(self) -> list[list[Number]]:
        """Points as ``[[x, y], ...]`` for JSON output."""
        return [[p.x, p.y] for p in self._points]


@dataclass(frozen=True)
class Line:
    """A line given by two endpoints.

    Attributes:
        near: Lower-y endpoint at construction time.
        far: Higher-y endpoint at construction time.
    """

    near: Point
    far: Point

    def __iter__(self) -> Iterator[Point]:
        return iter((self.near, self.far))

    @classmethod
    def of(cls, near: Iterable[Number], far: Iterable[Number]) -> Line:
        """Build a line from two coordinate pairs."""
        return cls(near=Point.of(near), far=Point.of(far))

    @classmethod
    def coerce(cls, value: Union[Line, Iterable]) -> Line:
        """Accept a ``Line`` or an ordered ``(near, far)`` pair of points.

        Raises:
            InvalidInputError: If the value is not a pair of points.
        """
        if isinstance(value, Line):
            return value
        try:
            near, far = value
        except (TypeError, ValueError):
            raise InvalidInputError(f"Expected a (near, far) pair of points, got {value!r}") from None
        return cls.of(near, far)

    def to_list(self) -> list[list[Number]]:
        return [[self.near.x, self.near.y], [self.far.x, self.far.y]]


@dataclass(frozen=True)
class Segment:
    """A directed segment from ``start`` to ``end``."""

    start: Point
    end: Point


@dataclass(frozen=True)
class DirectionalSegments:
    """Orientation of a line relative to its pivot for one step.

    Attributes:
        front: Segment from the pivot to the line's far (high-y) endpoint.
        back: Segment from the pivot to the line's near (low-y) endpoint.
    """

    front: Segment
    back: Segment


@dataclass
class RunConfig:
    """Parameters of a windmill run.

    Attributes:
        size: Side length of the grid the plane is generated on.
        density: Probability that a grid cell holds a point, in [0, 1].
        seed: Seed for the random source (None = unseeded).
        max_steps: Number of rotation steps to run.
        points: Explicit plane; when given, size and density are not used.
        pivot: Explicit starting pivot; must be a member of the plane.
    """

    size: int = 10
    density: float = 0.3
    seed: Optional[int] = None
    max_steps: int = 20
    points: Optional[list[Point]] = None
    pivot: Optional[Point] = None

    @classmethod
    def from_json_file(cls, path: str | Path) -> RunConfig:
        """Load configuration from a JSON file.

        Raises:
            InvalidInputError: If the file cannot be read, is not valid JSON,
                or holds invalid values.
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except OSError as e:
            raise InvalidInputError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Config file {path} is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> RunConfig:
        """Create configuration from a dictionary.

        Raises:
            InvalidInputError: If a value is missing its expected type or range.
        """
        if not isinstance(data, dict):
            raise InvalidInputError("Config must be a JSON object")

        size = data.get("size", 10)
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidInputError(f"Config 'size' must be a positive integer, got {size!r}")

        density = data.get("density", 0.3)
        if isinstance(density, bool) or not isinstance(density, (int, float)):
            raise InvalidInputError(f"Config 'density' must be a number, got {density!r}")
        density = float(density)
        if not 0.0 <= density <= 1.0:
            raise InvalidInputError(f"Config 'density' must lie in [0, 1], got {density}")

        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidInputError(f"Config 'seed' must be an integer or null, got {seed!r}")

        max_steps = data.get("max_steps", 20)
        if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 0:
            raise InvalidInputError(
                f"Config 'max_steps' must be a non-negative integer, got {max_steps!r}"
            )

        points = None
        if data.get("points") is not None:
            if not isinstance(data["points"], list):
                raise InvalidInputError(
                    f"Config 'points' must be a list of [x, y] pairs, got {data['points']!r}"
                )
            points = [Point.of(p) for p in data["points"]]

        pivot = None
        if data.get("pivot") is not None:
            pivot = Point.of(data["pivot"])

        return cls(
            size=size,
            density=density,
            seed=seed,
            max_steps=max_steps,
            points=points,
            pivot=pivot,
        )

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        data = {
            "size": self.size,
            "density": self.density,
            "seed": self.seed,
            "max_steps": self.max_steps,
        }
        if self.points is not None:
            data["points"] = [[p.x, p.y] for p in self.points]
        if self.pivot is not None:
            data["pivot"] = [self.pivot.x, self.pivot.y]
        return data
