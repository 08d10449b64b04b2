"""Tests for the metrics module."""

import pytest

from polykernel import Polygon2D, triangulate
from polykernel.metrics import measure_triangulation, polygon_area, total_area


class TestPolygonArea:
    """Tests for polygon_area and total_area."""

    def test_square(self):
        poly = Polygon2D.from_coords([(0, 0), (10, 0), (10, 10), (0, 10)])
        assert polygon_area(poly) == 100.0

    def test_with_hole(self):
        poly = Polygon2D.from_coords(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            inners=[[(2, 2), (8, 2), (8, 8), (2, 8)]],
        )
        assert polygon_area(poly) == 64.0

    def test_total_area(self):
        p1 = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        p2 = Polygon2D.from_coords([(0, 0), (2, 0), (0, 2)])
        assert total_area([p1, p2]) == 3.0

    def test_total_area_empty(self):
        assert total_area([]) == 0.0


class TestMeasureTriangulation:
    """Tests for measure_triangulation."""

    def test_concave_polygon(self):
        poly = Polygon2D.from_coords([(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)])
        metrics = measure_triangulation(poly, triangulate(poly))

        assert metrics["area"] == 12.0
        assert metrics["triangle_area"] == pytest.approx(12.0)
        assert metrics["area_error"] == pytest.approx(0.0, abs=1e-12)
        assert metrics["triangle_count"] == 3
        assert metrics["expected_triangle_count"] == 3

    def test_expected_count_with_holes(self):
        """Test the n + m + 2h - 2 triangle count law."""
        poly = Polygon2D.from_coords(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            inners=[
                [(2, 2), (4, 2), (4, 4), (2, 4)],
                [(6, 6), (8, 6), (7, 8)],
                [],
            ],
        )
        metrics = measure_triangulation(poly, [])

        assert metrics["expected_triangle_count"] == 4 + 7 + 2 * 2 - 2
        assert metrics["triangle_count"] == 0
        assert metrics["area_error"] == metrics["area"]

    def test_missing_triangle_shows_error(self):
        """Test that dropping a triangle is reported as area error."""
        poly = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        triangles = triangulate(poly)[:1]
        metrics = measure_triangulation(poly, triangles)

        assert metrics["area_error"] == pytest.approx(0.5)
