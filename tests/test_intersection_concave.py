"""Tests for concave polygon intersection through triangulation."""

import numpy as np
import pytest

from polykernel import (
    ConfigurationError,
    ConvexTest,
    Polygon2D,
    intersects_concave,
    random_concave_polygon,
    triangles_intersect,
    triangulate,
)

CONVEX_TESTS = [ConvexTest.SIMPLEX, ConvexTest.SAT]

HOUSE = [(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)]
FRAME = Polygon2D.from_coords(
    [(0, 0), (4, 0), (4, 4), (0, 4)],
    inners=[[(1, 1), (3, 1), (3, 3), (1, 3)]],
)


def reference_intersects(a: Polygon2D, b: Polygon2D) -> bool:
    """Overlap with positive area according to shapely."""
    sa, sb = a.to_shapely(), b.to_shapely()
    return sa.intersects(sb) and not sa.touches(sb)


@pytest.mark.parametrize("convex_test", CONVEX_TESTS)
class TestConcaveCases:
    """Hand-made concave cases checked with both convex tests."""

    def test_inside_hole(self, convex_test):
        """Test a square lying inside the hole of another polygon."""
        inner = Polygon2D.from_coords([(1.5, 1.5), (2.5, 1.5), (2.5, 2.5), (1.5, 2.5)])
        assert not intersects_concave(FRAME, inner, convex_test=convex_test)
        assert not intersects_concave(inner, FRAME, convex_test=convex_test)

    def test_overlapping_hole_boundary(self, convex_test):
        """Test a square reaching from the hole into the solid part."""
        crossing = Polygon2D.from_coords([(0.5, 0.5), (2.5, 0.5), (2.5, 2.0), (0.5, 2.0)])
        assert intersects_concave(FRAME, crossing, convex_test=convex_test)

    def test_concave_quadrilaterals(self, convex_test):
        a = Polygon2D.from_coords([(4, 11), (4, 5), (9, 9), (2, 2)]).corrected()
        b = Polygon2D.from_coords([(5, 7), (7, 3), (9, 6), (12, 7)]).corrected()
        assert intersects_concave(a, b, convex_test=convex_test) == reference_intersects(a, b)

    def test_shared_edge(self, convex_test):
        a = Polygon2D.from_coords([(0, 2), (2, 2), (2, 0), (0, 0)])
        b = Polygon2D.from_coords([(0, 0), (2, 0), (2, -2), (0, -2)])
        assert not intersects_concave(a, b, convex_test=convex_test)

    def test_shared_point(self, convex_test):
        a = Polygon2D.from_coords([(0, 2), (2, 2), (0, 0)])
        b = Polygon2D.from_coords([(4, 4), (4, 2), (2, 2), (2, 4)])
        assert not intersects_concave(a, b, convex_test=convex_test)

    def test_house_notch(self, convex_test):
        """Test a triangle sitting in the notch of the house."""
        house = Polygon2D.from_coords(HOUSE)
        in_notch = Polygon2D.from_coords([(1, 4), (2, 3), (3, 4)])
        assert not intersects_concave(house, in_notch, convex_test=convex_test)

        poking = Polygon2D.from_coords([(1, 4), (2, 1.5), (3, 4)])
        assert intersects_concave(house, poking, convex_test=convex_test)

    def test_string_selector(self, convex_test):
        house = Polygon2D.from_coords(HOUSE)
        assert intersects_concave(house, house, convex_test=convex_test.value)


class TestTrianglesIntersect:
    """Tests for triangles_intersect with precomputed triangulations."""

    def test_matches_intersects_concave(self):
        inner = Polygon2D.from_coords([(1.5, 1.5), (2.5, 1.5), (2.5, 2.5), (1.5, 2.5)])
        triangles1 = triangulate(FRAME)
        triangles2 = triangulate(inner)
        assert not triangles_intersect(triangles1, triangles2)
        assert not triangles_intersect(triangles1, triangles2, ConvexTest.SAT)

    def test_empty_sets(self):
        assert not triangles_intersect([], triangulate(FRAME))

    def test_custom_test(self):
        """Test that any callable with the convex test signature is accepted."""
        calls = []

        def always(a, b):
            calls.append((a, b))
            return True

        assert triangles_intersect(triangulate(FRAME), triangulate(FRAME), always)
        assert len(calls) == 1

    def test_unknown_test(self):
        with pytest.raises(ConfigurationError):
            intersects_concave(FRAME, FRAME, convex_test="bogus")


class TestRandomCrossValidation:
    """Concave intersection must agree with shapely on random polygons."""

    @pytest.mark.parametrize("vertices", range(4, 10))
    def test_agrees_with_reference(self, vertices):
        rng = np.random.default_rng(2000 + vertices)
        polygons = [random_concave_polygon(vertices, 1000.0, rng) for _ in range(12)]
        polygons = [p for p in polygons if p is not None]
        triangulations = [triangulate(p) for p in polygons]

        for a, triangles_a in zip(polygons, triangulations):
            for b, triangles_b in zip(polygons, triangulations):
                expected = reference_intersects(a, b)
                assert triangles_intersect(triangles_a, triangles_b, ConvexTest.SIMPLEX) == expected
                assert triangles_intersect(triangles_a, triangles_b, ConvexTest.SAT) == expected
