"""Tests for the Plane model, plane generation and pivot selection."""

import numpy as np
import pytest

from windmill_process.core.errors import InvalidInputError
from windmill_process.core.models import Plane, Point
from windmill_process.core.plane import generate_random_plane, get_pivot_point


class TestPlane:
    """Tests for the Plane container."""

    def test_duplicates_collapse_keeping_first(self):
        plane = Plane([(1, 2), (3, 4), (1, 2), (0, 0)])
        assert len(plane) == 3
        assert plane.points == (Point(1, 2), Point(3, 4), Point(0, 0))

    def test_iteration_order_is_insertion_order(self):
        points = [(5, 5), (0, 0), (2, 9), (1, 1)]
        assert list(Plane(points)) == [Point(*p) for p in points]

    def test_membership_accepts_tuples_and_lists(self):
        plane = Plane([(1, 2), (3, 4)])
        assert Point(1, 2) in plane
        assert (3, 4) in plane
        assert [3, 4] in plane
        assert (4, 3) not in plane
        assert "not a point" not in plane

    def test_equality_ignores_order(self):
        assert Plane([(1, 2), (3, 4)]) == Plane([(3, 4), (1, 2)])
        assert Plane([(1, 2)]) != Plane([(1, 2), (3, 4)])

    def test_without_removes_only_given_point(self):
        plane = Plane([(1, 2), (3, 4), (5, 6)])
        assert plane.without(Point(3, 4)) == [Point(1, 2), Point(5, 6)]
        assert plane.without(Point(9, 9)) == list(plane)

    def test_y_extent(self):
        plane = Plane([(1, 2), (3, -4), (5, 6)])
        assert plane.y_extent() == (-4, 6)

    def test_y_extent_empty_raises(self):
        with pytest.raises(InvalidInputError):
            Plane().y_extent()

    def test_to_array(self):
        plane = Plane([(1, 2), (3, 4)])
        np.testing.assert_array_equal(plane.to_array(), np.array([[1, 2], [3, 4]]))
        assert Plane().to_array().shape == (0, 2)

    def test_malformed_point_raises(self):
        with pytest.raises(InvalidInputError):
            Plane([(1, 2, 3)])

    @pytest.mark.parametrize("value", [("a", "b"), (1, None), (True, 2), (1, [2])])
    def test_non_numeric_coordinates_raise(self, value):
        with pytest.raises(InvalidInputError):
            Plane([(0, 0), value])

    def test_numpy_coordinates_accepted(self):
        plane = Plane([(np.int64(1), np.int64(2)), (np.float64(0.5), 3)])
        assert (1, 2) in plane


class TestGenerateRandomPlane:
    """Tests for generate_random_plane function."""

    def test_size_bounds(self):
        """Plane never holds more points than grid cells."""
        for seed in range(20):
            plane = generate_random_plane(5, 0.5, rng=seed)
            assert 0 <= len(plane) <= 25

    def test_points_lie_on_grid_corners(self):
        """Coordinates are integers in [0, size]."""
        plane = generate_random_plane(6, 0.8, rng=3)
        for x, y in plane:
            assert isinstance(x, int) and isinstance(y, int)
            assert 0 <= x <= 6
            assert 0 <= y <= 6

    def test_zero_density_is_empty(self):
        assert len(generate_random_plane(10, 0.0, rng=1)) == 0

    def test_full_density_single_cell(self):
        plane = generate_random_plane(1, 1.0, rng=0)
        assert len(plane) == 1
        x, y = plane[0]
        assert x in (0, 1) and y in (0, 1)

    def test_full_density_is_not_empty(self):
        assert len(generate_random_plane(4, 1.0, rng=0)) > 0

    def test_same_seed_same_plane(self):
        """A seeded source reproduces both the points and their order."""
        a = generate_random_plane(8, 0.4, rng=123)
        b = generate_random_plane(8, 0.4, rng=123)
        assert a.points == b.points

    def test_accepts_generator(self):
        a = generate_random_plane(8, 0.4, rng=np.random.default_rng(9))
        b = generate_random_plane(8, 0.4, rng=9)
        assert a.points == b.points

    def test_expected_size_matches_density(self):
        """Average plane size tracks density * size**2 (minus collapsed duplicates)."""
        rng = np.random.default_rng(2024)
        sizes = [len(generate_random_plane(10, 0.3, rng)) for _ in range(50)]
        mean = sum(sizes) / len(sizes)
        assert 15 < mean <= 30

    @pytest.mark.parametrize("size", [0, -3, 2.5, True, "4"])
    def test_invalid_size_raises(self, size):
        with pytest.raises(InvalidInputError):
            generate_random_plane(size, 0.5)

    @pytest.mark.parametrize("density", [-0.1, 1.5, "0.5", None])
    def test_invalid_density_raises(self, density):
        with pytest.raises(InvalidInputError):
            generate_random_plane(4, density)


class TestGetPivotPoint:
    """Tests for get_pivot_point function."""

    def test_pivot_is_member(self):
        plane = Plane([(1, 2), (3, 4), (5, 6)])
        for seed in range(10):
            assert get_pivot_point(plane, rng=seed) in plane

    def test_single_point_plane(self):
        assert get_pivot_point(Plane([(7, 7)])) == Point(7, 7)

    def test_seeded_choice_is_reproducible(self):
        plane = generate_random_plane(6, 0.5, rng=5)
        assert get_pivot_point(plane, rng=42) == get_pivot_point(plane, rng=42)

    def test_every_point_can_be_picked(self):
        plane = Plane([(0, 0), (1, 1), (2, 2)])
        rng = np.random.default_rng(0)
        picked = {get_pivot_point(plane, rng) for _ in range(200)}
        assert picked == set(plane)

    def test_empty_plane_raises(self):
        with pytest.raises(InvalidInputError):
            get_pivot_point(Plane())
