"""Tests for the low-level geometry predicates."""

import pytest

from polykernel import DegenerateGeometryError, Point2D, calc_curvature, segment_intersection
from polykernel.core.geometry_utils import (
    centroid,
    convex_hull,
    ensure_ccw,
    ensure_cw,
    has_area,
    is_ccw,
    is_convex_ring,
    orientation,
    point_in_triangle,
    reflex_vertices,
    signed_area,
)

SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
HOUSE = [(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)]


class TestOrientation:
    """Tests for orientation and signed area."""

    def test_turns(self):
        """Test left, right and collinear turns."""
        assert orientation((0, 0), (1, 0), (0, 1)) > 0
        assert orientation((0, 0), (1, 0), (0, -1)) < 0
        assert orientation((0, 0), (1, 0), (5, 0)) == 0

    def test_signed_area(self):
        """Test shoelace area for both windings."""
        assert signed_area(SQUARE) == 1.0
        assert signed_area(list(reversed(SQUARE))) == -1.0
        assert signed_area(HOUSE) == 12.0

    def test_signed_area_degenerate(self):
        """Test that fewer than three points have zero area."""
        assert signed_area([(0, 0), (1, 1)]) == 0.0

    def test_has_area(self):
        """Test rings with and without enclosed area."""
        assert has_area(SQUARE)
        assert has_area(list(reversed(SQUARE)))
        assert not has_area([(0, 0), (2, 0), (1, 0)])
        assert not has_area([(0, 0), (1, 1)])

    def test_ensure_orientation(self):
        """Test ring reorientation helpers."""
        ring = tuple(Point2D(*p) for p in reversed(SQUARE))
        assert not is_ccw(ring)
        assert is_ccw(ensure_ccw(ring))
        assert ensure_cw(ring) == ring


class TestPointInTriangle:
    """Tests for point_in_triangle."""

    def test_inside(self):
        assert point_in_triangle((0.25, 0.25), (0, 0), (1, 0), (0, 1))

    def test_on_boundary(self):
        """Test that boundary points count as inside."""
        assert point_in_triangle((0.5, 0.0), (0, 0), (1, 0), (0, 1))
        assert point_in_triangle((0, 0), (0, 0), (1, 0), (0, 1))

    def test_outside(self):
        assert not point_in_triangle((1, 1), (0, 0), (1, 0), (0, 1))

    def test_clockwise_triangle(self):
        """Test that triangle orientation does not matter."""
        assert point_in_triangle((0.25, 0.25), (0, 0), (0, 1), (1, 0))


class TestConvexHull:
    """Tests for convex_hull."""

    def test_interior_and_collinear_points_removed(self):
        """Test that only strict hull vertices remain."""
        points = SQUARE + [(0.5, 0.5), (0.5, 0.0), (0, 0)]
        hull = convex_hull(points)

        assert len(hull) == 4
        assert set(hull) == {Point2D(*map(float, p)) for p in SQUARE}
        assert signed_area(hull) > 0

    def test_degenerate_input(self):
        """Test that collinear input yields fewer than three points."""
        assert len(convex_hull([(0, 0), (1, 1), (2, 2)])) < 3


class TestConvexity:
    """Tests for is_convex_ring and reflex_vertices."""

    def test_convex(self):
        assert is_convex_ring(SQUARE)
        assert reflex_vertices(SQUARE) == []

    def test_concave(self):
        """Test that the notch of the house is reflex."""
        assert not is_convex_ring(HOUSE)
        assert reflex_vertices(HOUSE) == [3]

    def test_clockwise_concave(self):
        """Test that reflex detection follows the winding."""
        ring = list(reversed(HOUSE))
        assert reflex_vertices(ring) == [1]

    def test_collinear_ring_not_convex(self):
        assert not is_convex_ring([(0, 0), (1, 0), (2, 0)])

    def test_centroid(self):
        assert centroid(SQUARE) == Point2D(0.5, 0.5)


class TestSegmentIntersection:
    """Tests for segment_intersection."""

    def test_crossing(self):
        """Test normally crossing segments."""
        result = segment_intersection((0, -1), (0, 1), (-1, 0), (1, 0))
        assert result is not None
        assert result.x == pytest.approx(0.0)
        assert result.y == pytest.approx(0.0)

    def test_no_crossing(self):
        """Test segments whose lines cross outside the segments."""
        assert segment_intersection((0, -1), (0, 1), (1, 0), (3, 0)) is None

    def test_point_segment_on_other(self):
        """Test a zero-length segment lying on the other segment."""
        assert segment_intersection((0, -1), (0, 1), (0, 0), (0, 0)) is None

    def test_point_segment_off_other(self):
        assert segment_intersection((0, -1), (0, 1), (1, 0), (1, 0)) is None

    def test_both_points_same_position(self):
        assert segment_intersection((0, 0), (0, 0), (0, 0), (0, 0)) is None

    def test_both_points_different_position(self):
        assert segment_intersection((0, 1), (0, 1), (1, 0), (1, 0)) is None

    def test_identical_segments(self):
        """Test that collinear overlapping segments report no point."""
        assert segment_intersection((0, -1), (0, 1), (0, -1), (0, 1)) is None

    def test_endpoint_on_segment(self):
        """Test one segment ending on the other."""
        result = segment_intersection((0, -1), (0, 1), (0, 0), (1, 0))
        assert result is not None
        assert result.x == pytest.approx(0.0)
        assert result.y == pytest.approx(0.0)

    def test_shared_endpoint(self):
        """Test segments meeting at a common endpoint."""
        result = segment_intersection((0, -1), (0, 1), (0, -1), (2, -1))
        assert result is not None
        assert result.x == pytest.approx(0.0)
        assert result.y == pytest.approx(-1.0)


class TestCalcCurvature:
    """Tests for calc_curvature."""

    def test_straight_line(self):
        assert calc_curvature((0, 0), (1, 0), (2, 0)) == 0.0

    @pytest.mark.parametrize(
        "p2, p3, expected",
        [
            ((1.0, 1.0), (2.0, 0.0), -1.0),
            ((5.0, 5.0), (10.0, 0.0), -0.2),
            ((-1.0, 1.0), (-2.0, 0.0), 1.0),
            ((-5.0, 5.0), (-10.0, 0.0), 0.2),
        ],
    )
    def test_circular_arcs(self, p2, p3, expected):
        """Test curvature through three points of a circle (sign follows the turn)."""
        assert calc_curvature((0.0, 0.0), p2, p3) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "p1, p2, p3",
        [
            ((0, 0), (0, 0), (0, 0)),
            ((0, 0), (0, 0), (1, 0)),
            ((0, 0), (1, 0), (0, 0)),
            ((0, 0), (1, 0), (1, 0)),
        ],
    )
    def test_coincident_points_raise(self, p1, p2, p3):
        """Test that coincident points raise DegenerateGeometryError."""
        with pytest.raises(DegenerateGeometryError):
            calc_curvature(p1, p2, p3)
