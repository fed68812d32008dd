"""Tests for enclave.types.rect."""

from __future__ import annotations

import numpy as np
import pytest

from enclave.types import Interval, Point, Rect

# ------------------------------------------------------------------
# Construction
# ------------------------------------------------------------------


class TestConstruction:
    def test_default_is_point_at_origin(self):
        r = Rect()
        assert r.x == Interval(0.0, 0.0)
        assert r.y == Interval(0.0, 0.0)
        assert not r.is_empty
        assert r.is_valid

    def test_default_is_not_empty_rect(self):
        assert Rect() != Rect.empty()

    def test_empty(self):
        r = Rect.empty()
        assert r.x.lo == 1.0 and r.x.hi == 0.0
        assert r.y.lo == 1.0 and r.y.hi == 0.0
        assert r.is_empty
        assert r.is_valid

    def test_from_points_empty_list(self):
        assert Rect.from_points([]) == Rect()

    def test_from_points_single_point_does_not_include_origin(self):
        r = Rect.from_points([Point(0.2, 0.3)])
        assert r.x == Interval(0.2, 0.2)
        assert r.y == Interval(0.3, 0.3)

    def test_from_points_corners(self, outer_rect):
        assert outer_rect.x == Interval(1.0, 5.0)
        assert outer_rect.y == Interval(2.0, 7.0)

    def test_from_points_accepts_iterator(self):
        r = Rect.from_points(Point(x, -x) for x in (3.0, -1.0, 2.0))
        assert r.x == Interval(-1.0, 3.0)
        assert r.y == Interval(-3.0, 1.0)

    def test_from_center_size(self):
        r = Rect.from_center_size(Point(1.0, 2.0), Point(4.0, 2.0))
        assert r.x == Interval(-1.0, 3.0)
        assert r.y == Interval(1.0, 3.0)

    def test_from_center_size_zero_size_is_point(self):
        r = Rect.from_center_size(Point(1.0, 2.0), Point(0.0, 0.0))
        assert r == Rect(Interval.from_point(1.0), Interval.from_point(2.0))
        assert not r.is_empty

    def test_frozen(self):
        r = Rect()
        with pytest.raises(AttributeError):
            r.x = Interval.empty()  # type: ignore[misc]


class TestFromArray:
    def test_bounding_rect(self):
        r = Rect.from_array(np.array([[1.0, 2.0], [5.0, 7.0], [3.0, 4.0]]))
        assert r == Rect(Interval(1.0, 5.0), Interval(2.0, 7.0))

    def test_matches_from_points(self, outer_rect):
        corners = [(1, 2), (1, 7), (5, 2), (5, 7)]
        assert Rect.from_array(corners) == outer_rect

    def test_empty_array(self):
        assert Rect.from_array([]) == Rect()
        assert Rect.from_array(np.empty((0, 2))) == Rect()

    def test_bounds_are_python_floats(self):
        r = Rect.from_array(np.array([[1, 2], [3, 4]]))
        assert type(r.x.lo) is float
        assert type(r.y.hi) is float

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            Rect.from_array(np.array([1.0, 2.0, 3.0]))
        with pytest.raises(ValueError, match="shape"):
            Rect.from_array(np.zeros((2, 3)))


# ------------------------------------------------------------------
# Validity
# ------------------------------------------------------------------


class TestValidity:
    def test_one_axis_empty_is_invalid(self):
        assert not Rect(Interval.empty(), Interval(0.0, 1.0)).is_valid
        assert not Rect(Interval(0.0, 1.0), Interval(3.0, 2.0)).is_valid

    def test_non_canonical_empty_is_valid_and_equal(self):
        r = Rect(Interval(3.0, 1.0), Interval(5.0, 2.0))
        assert r.is_valid
        assert r.is_empty
        assert r == Rect.empty()
        assert hash(r) == hash(Rect.empty())

    def test_operations_preserve_validity(self, outer_rect, inner_rect, unit_square):
        rects = [outer_rect, inner_rect, unit_square, Rect(), Rect.empty()]
        for a in rects:
            assert a.is_valid
            assert a.add_point(Point(10.0, -10.0)).is_valid
            assert a.expanded(Point(-0.75, 0.25)).is_valid
            assert a.expanded(Point(0.25, -5.0)).is_valid
            assert a.expanded_by_margin(-1.0).is_valid
            for b in rects:
                assert a.union(b).is_valid
                assert a.add_rect(b).is_valid
                assert a.intersection(b).is_valid


# ------------------------------------------------------------------
# Corners and measures
# ------------------------------------------------------------------


class TestCorners:
    def test_vertices_ccw_from_lower_left(self):
        r = Rect.from_center_size(Point(0.0, 0.0), Point(2.0, 2.0))
        assert r.vertices() == [
            Point(-1.0, -1.0),
            Point(1.0, -1.0),
            Point(1.0, 1.0),
            Point(-1.0, 1.0),
        ]

    def test_vertices_array(self):
        r = Rect.from_center_size(Point(0.0, 0.0), Point(2.0, 2.0))
        arr = r.vertices_array()
        assert arr.shape == (4, 2)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [[-1, -1], [1, -1], [1, 1], [-1, 1]])

    def test_vertex_ij(self, outer_rect):
        assert outer_rect.vertex_ij(0, 0) == Point(1.0, 2.0)
        assert outer_rect.vertex_ij(1, 0) == Point(5.0, 2.0)
        assert outer_rect.vertex_ij(1, 1) == Point(5.0, 7.0)
        assert outer_rect.vertex_ij(0, 1) == Point(1.0, 7.0)

    def test_vertex_ij_agrees_with_vertices(self, inner_rect):
        ij = [(0, 0), (1, 0), (1, 1), (0, 1)]
        assert [inner_rect.vertex_ij(i, j) for i, j in ij] == inner_rect.vertices()

    def test_lo_hi(self, outer_rect):
        assert outer_rect.lo == Point(1.0, 2.0)
        assert outer_rect.hi == Point(5.0, 7.0)

    def test_center(self, outer_rect):
        assert outer_rect.center == Point(3.0, 4.5)

    def test_size(self, outer_rect):
        assert outer_rect.size == Point(4.0, 5.0)

    def test_empty_size_negative(self):
        size = Rect.empty().size
        assert size.x < 0
        assert size.y < 0


# ------------------------------------------------------------------
# Containment
# ------------------------------------------------------------------


class TestContainment:
    def test_contains_point(self, unit_square):
        assert unit_square.contains_point(Point(0.5, 0.5))
        assert unit_square.contains_point(Point(0.0, 1.0))
        assert not unit_square.contains_point(Point(1.5, 0.5))

    def test_interior_contains_point(self, unit_square):
        assert unit_square.interior_contains_point(Point(0.5, 0.5))
        assert not unit_square.interior_contains_point(Point(0.0, 0.5))
        assert not unit_square.interior_contains_point(Point(0.5, 1.0))

    def test_empty_contains_no_point(self):
        assert not Rect.empty().contains_point(Point(0.5, 0.5))

    def test_contains_reference_scenario(self, outer_rect, inner_rect):
        assert outer_rect.contains(inner_rect)
        assert not inner_rect.contains(outer_rect)

    def test_contains_self(self, outer_rect):
        assert outer_rect.contains(outer_rect)
        assert not outer_rect.interior_contains(outer_rect)

    def test_contains_requires_both_axes(self, outer_rect):
        wide = Rect(Interval(0.0, 6.0), Interval(3.0, 4.0))
        assert not outer_rect.contains(wide)
        assert not wide.contains(outer_rect)

    def test_empty_contained_in_every_rect(self, outer_rect, unit_square):
        for r in (outer_rect, unit_square, Rect(), Rect.empty()):
            assert r.contains(Rect.empty())
            assert r.interior_contains(Rect.empty())

    def test_nonempty_not_contained_in_empty(self, outer_rect):
        assert not Rect.empty().contains(outer_rect)
        assert not Rect.empty().contains(Rect())

    def test_interior_contains(self, outer_rect, inner_rect):
        assert outer_rect.interior_contains(inner_rect)
        touching = Rect(Interval(1.0, 3.0), Interval(4.0, 6.0))
        assert outer_rect.contains(touching)
        assert not outer_rect.interior_contains(touching)

    def test_mutual_containment_means_equal(self, outer_rect):
        other = Rect.from_points([Point(5, 7), Point(1, 2)])
        assert outer_rect.contains(other) and other.contains(outer_rect)
        assert outer_rect.approx_equal(other)


# ------------------------------------------------------------------
# Intersection predicates
# ------------------------------------------------------------------


class TestIntersects:
    def test_overlapping(self, unit_square):
        other = Rect.from_center_size(Point(1.0, 1.0), Point(1.0, 1.0))
        assert unit_square.intersects(other)
        assert unit_square.interior_intersects(other)

    def test_touching_edges(self, unit_square):
        other = Rect(Interval(1.0, 2.0), Interval(0.0, 1.0))
        assert unit_square.intersects(other)
        assert not unit_square.interior_intersects(other)

    def test_overlap_on_one_axis_only(self, unit_square):
        other = Rect(Interval(0.0, 1.0), Interval(2.0, 3.0))
        assert not unit_square.intersects(other)
        assert not other.intersects(unit_square)

    def test_empty_intersects_nothing(self, unit_square):
        assert not unit_square.intersects(Rect.empty())
        assert not Rect.empty().intersects(unit_square)


# ------------------------------------------------------------------
# Operations
# ------------------------------------------------------------------


class TestOperations:
    def test_add_point(self, unit_square):
        r = unit_square.add_point(Point(2.0, -1.0))
        assert r == Rect(Interval(0.0, 2.0), Interval(-1.0, 1.0))

    def test_add_point_to_empty(self):
        r = Rect.empty().add_point(Point(2.0, 3.0))
        assert r == Rect(Interval.from_point(2.0), Interval.from_point(3.0))

    def test_add_rect(self, unit_square, inner_rect):
        r = unit_square.add_rect(inner_rect)
        assert r == Rect(Interval(0.0, 3.0), Interval(0.0, 6.0))

    def test_union_with_empty(self, unit_square):
        assert unit_square.union(Rect.empty()) == unit_square
        assert Rect.empty().union(unit_square) == unit_square

    def test_union_contains_both(self, unit_square, inner_rect):
        u = unit_square.union(inner_rect)
        assert u.contains(unit_square)
        assert u.contains(inner_rect)

    def test_clamp_point(self, unit_square):
        assert unit_square.clamp_point(Point(2.0, -1.0)) == Point(1.0, 0.0)
        assert unit_square.clamp_point(Point(0.25, 0.75)) == Point(0.25, 0.75)

    def test_expanded(self, unit_square):
        r = unit_square.expanded(Point(1.0, 2.0))
        assert r == Rect(Interval(-1.0, 2.0), Interval(-2.0, 3.0))

    def test_expanded_shrink_to_nothing(self, unit_square):
        r = unit_square.expanded(Point(-1.0, -1.0))
        assert r.is_empty
        assert r.x == Interval.empty()
        assert r.x.lo == 1.0 and r.x.hi == 0.0
        assert r.y.lo == 1.0 and r.y.hi == 0.0

    def test_expanded_one_axis_empty_normalizes(self, unit_square):
        r = unit_square.expanded(Point(-0.6, 5.0))
        assert r.is_valid
        assert r.is_empty
        assert r.y.is_empty

    def test_expanded_empty_stays_empty(self):
        assert Rect.empty().expanded(Point(10.0, 10.0)).is_empty

    def test_expanded_by_margin(self, unit_square):
        r = unit_square.expanded_by_margin(0.5)
        assert r == Rect(Interval(-0.5, 1.5), Interval(-0.5, 1.5))
        assert r == unit_square.expanded(Point(0.5, 0.5))

    def test_intersection(self, unit_square):
        other = Rect.from_center_size(Point(1.0, 1.0), Point(1.0, 1.0))
        assert unit_square.intersection(other) == Rect(Interval(0.5, 1.0), Interval(0.5, 1.0))

    def test_intersection_disjoint_one_axis_normalizes(self, unit_square):
        other = Rect(Interval(0.0, 1.0), Interval(2.0, 3.0))
        r = unit_square.intersection(other)
        assert r.is_valid
        assert r.is_empty
        assert r.x.lo == 1.0 and r.x.hi == 0.0

    def test_intersection_commutative(self, outer_rect, unit_square):
        assert outer_rect.intersection(unit_square) == unit_square.intersection(outer_rect)


# ------------------------------------------------------------------
# Approximate equality and display
# ------------------------------------------------------------------


class TestApproxEqual:
    def test_approx_equal(self, unit_square):
        nudged = Rect(Interval(1e-15, 1.0), Interval(0.0, 1.0 - 1e-15))
        assert unit_square.approx_equal(nudged)

    def test_not_approx_equal(self, unit_square):
        assert not unit_square.approx_equal(unit_square.expanded_by_margin(1e-6))

    def test_custom_epsilon(self, unit_square):
        assert unit_square.approx_equal(unit_square.expanded_by_margin(1e-6), epsilon=1e-5)

    def test_empty_matches_tiny(self):
        tiny = Rect.from_points([Point(1e-15, 1e-15)])
        assert Rect.empty().approx_equal(tiny)

    def test_str(self, unit_square):
        assert str(unit_square) == "[0.0, 1.0] x [0.0, 1.0]"
        assert str(Rect.empty()) == "empty"
