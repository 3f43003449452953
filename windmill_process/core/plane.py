"""Random plane generation and pivot selection.

Both functions take the random source as an argument. ``rng`` may be a
``numpy.random.Generator``, an integer seed, or None for fresh OS entropy;
it is normalized with ``numpy.random.default_rng``.
"""

import logging
from numbers import Integral, Real
from typing import Optional, Union

import numpy as np

from .errors import InvalidInputError
from .models import Plane, Point

logger = logging.getLogger(__name__)

RandomSource = Optional[Union[np.random.Generator, int]]


def generate_random_plane(size: int, density: float, rng: RandomSource = None) -> Plane:
    """Generate a random point set over a ``size`` x ``size`` grid.

    Each unit cell ``(x, y)`` with ``0 <= x, y < size`` independently holds a
    point with probability ``density``. A held point sits on one of the
    cell's integer corners, with x drawn from ``{x, x + 1}`` and y from
    ``{y, y + 1}``. Neighbouring cells can pick the same corner; such
    duplicates collapse, so the plane has at most ``size**2`` points and may
    be empty.

    Cells are visited column by column (x outer, y inner), which fixes the
    plane's iteration order for a given random stream.

    Args:
        size: Grid side length, a positive integer.
        density: Inclusion probability in [0, 1].
        rng: Random source (Generator, seed or None).

    Returns:
        The generated plane.

    Raises:
        InvalidInputError: If size is not a positive integer or density is
            outside [0, 1].
    """
    if isinstance(size, bool) or not isinstance(size, Integral) or size <= 0:
        raise InvalidInputError(f"size must be a positive integer, got {size!r}")
    if isinstance(density, bool) or not isinstance(density, Real) or not 0 <= density <= 1:
        raise InvalidInputError(f"density must be a number in [0, 1], got {density!r}")

    rng = np.random.default_rng(rng)
    points = []
    for x in range(size):
        for y in range(size):
            if rng.random() < density:
                px = x + int(rng.integers(0, 2))
                py = y + int(rng.integers(0, 2))
                points.append(Point(px, py))

    plane = Plane(points)
    logger.debug(
        "Generated plane size=%d density=%.3f with %d points (%d duplicates dropped)",
        size,
        density,
        len(plane),
        len(points) - len(plane),
    )
    return plane


def get_pivot_point(plane: Plane, rng: RandomSource = None) -> Point:
    """Pick a uniformly random point of the plane.

    Raises:
        InvalidInputError: If the plane is empty.
    """
    if len(plane) == 0:
        raise InvalidInputError("Cannot pick a pivot from an empty plane")

    rng = np.random.default_rng(rng)
    pivot = plane[int(rng.integers(len(plane)))]
    logger.debug("Picked pivot %s from %d points", pivot, len(plane))
    return pivot
