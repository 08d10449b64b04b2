"""Polygon intersection tests.

Two interchangeable convex tests (simplex search and separating axis) and
a concave test built on triangulation. Every test reports whether the
interiors overlap: touching along an edge or at a vertex is not an
intersection.
"""

from .gjk import DEFAULT_MAX_ITERATIONS, intersects_convex
from .sat import sat_intersects
from .convex import ConvexIntersectionTest, resolve_convex_test
from .concave import intersects_concave, triangles_intersect

__all__ = [
    'DEFAULT_MAX_ITERATIONS',
    'intersects_convex',
    'sat_intersects',
    'ConvexIntersectionTest',
    'resolve_convex_test',
    'intersects_concave',
    'triangles_intersect',
]
