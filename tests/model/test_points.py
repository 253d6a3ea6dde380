"""Unit tests for the point registry."""

import dataclasses

import numpy as np
import pytest

from pointtrigger.model.points import Point, PointRegistry


class TestPointRegistry:
    """Append/count/clear behaviour."""

    def test_new_registry_is_empty(self):
        registry = PointRegistry()
        assert registry.count() == 0
        assert len(registry) == 0
        assert list(registry) == []

    @pytest.mark.parametrize("n", [1, 2, 17])
    def test_count_matches_number_of_appends(self, n):
        registry = PointRegistry()
        for i in range(n):
            registry.append(Point(i, i))
        assert registry.count() == n

    def test_same_point_twice_gives_two_entries(self):
        """No duplicate detection: re-clicking a pixel records it again."""
        registry = PointRegistry()
        registry.append(Point(5, 5))
        registry.append(Point(5, 5))
        assert registry.count() == 2

    def test_insertion_order_is_kept(self):
        registry = PointRegistry()
        pts = [Point(3, 1), Point(1, 2), Point(2, 3)]
        for p in pts:
            registry.append(p)
        assert list(registry) == pts
        assert registry[0] == Point(3, 1)

    def test_clear_empties_registry(self, demo_registry):
        demo_registry.clear()
        assert demo_registry.count() == 0

    def test_clear_twice_is_harmless(self, demo_registry):
        demo_registry.clear()
        demo_registry.clear()
        assert demo_registry.count() == 0

    def test_points_are_immutable(self):
        p = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5


class TestAsArray:

    def test_empty_registry_gives_n_by_2_array(self):
        arr = PointRegistry().as_array()
        assert arr.shape == (0, 2)
        assert arr.dtype == np.float64

    def test_array_follows_registry_order(self, demo_registry):
        arr = demo_registry.as_array()
        np.testing.assert_array_equal(arr, [[10, 490], [250, 250]])
