"""Step-limited driver for the windmill process.

This module repeatedly invokes the core (line builder, intersection finder,
point classifier) and records every step. It stops after a fixed number of
steps; deciding whether the pivot sequence has settled into a cycle is left
to whoever reads the result.
"""

import json
import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np

from ..core.classifier import (
    get_number_of_points_behind_line,
    get_number_of_points_in_front_of_line,
)
from ..core.errors import InvalidInputError
from ..core.geometry import squared_distance
from ..core.intersection import get_next_intersection_point
from ..core.line import get_line_points_from_pivot
from ..core.models import Line, Plane, Point, RunConfig
from ..core.plane import RandomSource, generate_random_plane, get_pivot_point

logger = logging.getLogger(__name__)


@dataclass
class WindmillStep:
    """One rotation step.

    Attributes:
        index: Zero-based step number.
        pivot: Pivot at the start of the step.
        line: Line through the pivot used for this step.
        next_pivot: Point struck by the rotating line.
        points_in_front: Points in front of the line at the start of the step.
        points_behind: Points behind the line at the start of the step.
    """

    index: int
    pivot: Point
    line: Line
    next_pivot: Point
    points_in_front: int
    points_behind: int

    @property
    def distance(self) -> float:
        """Euclidean distance from the pivot to the next pivot."""
        return math.sqrt(squared_distance(self.pivot, self.next_pivot))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "pivot": list(self.pivot),
            "line": self.line.to_list(),
            "next_pivot": list(self.next_pivot),
            "points_in_front": self.points_in_front,
            "points_behind": self.points_behind,
        }


@dataclass
class WindmillRun:
    """Result of a windmill run.

    Attributes:
        plane: The point set the run was played on.
        start_pivot: Pivot before the first step.
        steps: Recorded steps in order.
    """

    plane: Plane
    start_pivot: Point
    steps: list[WindmillStep] = field(default_factory=list)

    @property
    def pivots(self) -> list[Point]:
        """Start pivot followed by the pivot reached after each step."""
        return [self.start_pivot] + [s.next_pivot for s in self.steps]

    @property
    def final_pivot(self) -> Point:
        return self.pivots[-1]

    @property
    def visit_counts(self) -> Counter:
        """How many times each point served as the pivot, start included."""
        return Counter(self.pivots)

    def to_dict(self, include_plane: bool = True) -> dict:
        """Convert to dictionary."""
        result = {
            "n_points": len(self.plane),
            "start_pivot": list(self.start_pivot),
            "final_pivot": list(self.final_pivot),
            "n_steps": len(self.steps),
            "steps": [s.to_dict() for s in self.steps],
        }
        if include_plane:
            result["plane"] = self.plane.to_list()
        return result


def simulate_windmill(
    plane: Plane,
    pivot: Optional[Point] = None,
    max_steps: int = 20,
    rng: RandomSource = None,
) -> WindmillRun:
    """Run the windmill process for a fixed number of steps.

    Each step builds the vertical line through the current pivot, counts the
    points on either side, and moves the pivot to the next struck point.

    Args:
        plane: The point set.
        pivot: Starting pivot. Picked at random from the plane when None.
        max_steps: Number of steps to run (zero runs none).
        rng: Random source for the starting pivot.

    Returns:
        WindmillRun holding every step.

    Raises:
        InvalidInputError: If the plane is empty, the pivot is not in the
            plane, or max_steps is negative.
        NoIntersectionError: If a step finds no point to strike.
    """
    if max_steps < 0:
        raise InvalidInputError(f"max_steps must be non-negative, got {max_steps}")
    if pivot is None:
        pivot = get_pivot_point(plane, rng)
    else:
        pivot = Point.of(pivot)
        if pivot not in plane:
            raise InvalidInputError(f"Pivot {pivot} is not a point of the plane")

    logger.info("Running %d windmill steps over %d points from %s", max_steps, len(plane), pivot)
    run = WindmillRun(plane=plane, start_pivot=pivot)

    for index in range(max_steps):
        line = get_line_points_from_pivot(plane, pivot)
        next_pivot = get_next_intersection_point(plane, pivot, line)
        step = WindmillStep(
            index=index,
            pivot=pivot,
            line=line,
            next_pivot=next_pivot,
            points_in_front=get_number_of_points_in_front_of_line(plane, pivot, line),
            points_behind=get_number_of_points_behind_line(plane, pivot, line),
        )
        logger.debug("Step %d: %s -> %s", index, pivot, next_pivot)
        run.steps.append(step)
        pivot = next_pivot

    return run


def run_from_config(config: RunConfig) -> WindmillRun:
    """Build the plane and starting pivot described by a config and run it.

    An explicit point list takes precedence over generating a plane from the
    configured size and density. One random stream, seeded from the config,
    drives both plane generation and pivot selection.
    """
    rng = np.random.default_rng(config.seed)
    if config.points is not None:
        plane = Plane(config.points)
    else:
        plane = generate_random_plane(config.size, config.density, rng)

    return simulate_windmill(plane, pivot=config.pivot, max_steps=config.max_steps, rng=rng)


def save_run_result(
    run: WindmillRun,
    path: str | Path,
    include_plane: bool = True,
) -> None:
    """Save a run result to a JSON file.

    Args:
        run: The windmill run.
        path: Output file path.
        include_plane: Whether to include the full point list.
    """
    with open(path, "w") as f:
        json.dump(run.to_dict(include_plane), f, indent=2)
