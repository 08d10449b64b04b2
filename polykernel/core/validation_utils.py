"""Common validation utilities.

This module provides reusable checks on rings and polygons used by the
generators and by callers that want to confirm a polygon satisfies the
preconditions of the intersection and triangulation algorithms.
"""

from typing import Sequence

from shapely.geometry import LinearRing

from .geometry_utils import is_convex_ring, reflex_vertices
from .primitives import Polygon2D


def is_valid_polygon(polygon: Polygon2D, min_area: float = 0.0) -> bool:
    """Check if a polygon is valid in the OGC sense.

    Combines the checks the algorithms rely on:
    - at least three distinct vertices in the outer ring
    - shapely validity (simple rings, holes inside the shell and disjoint)
    - positive area (or at least ``min_area``)

    Args:
        polygon: Polygon to validate
        min_area: Minimum acceptable area (0 = any positive area)

    Returns:
        True if the polygon meets all criteria, False otherwise

    Examples:
        >>> poly = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> is_valid_polygon(poly)
        True

        >>> is_valid_polygon(poly, min_area=10.0)
        False  # Area is only 1.0
    """
    if not has_minimum_vertices(polygon.outer):
        return False
    if any(not has_minimum_vertices(hole) for hole in polygon.holes):
        return False

    geometry = polygon.to_shapely()
    if not geometry.is_valid or geometry.is_empty:
        return False

    area = polygon.area
    if area <= 0 or area < min_area:
        return False

    return True


def has_minimum_vertices(ring: Sequence[Sequence[float]], min_vertices: int = 3) -> bool:
    """Check that an open ring has at least ``min_vertices`` distinct points."""
    return len({(float(p[0]), float(p[1])) for p in ring}) >= min_vertices


def is_simple_ring(ring: Sequence[Sequence[float]]) -> bool:
    """Check that a ring does not touch or cross itself."""
    if not has_minimum_vertices(ring):
        return False
    return bool(LinearRing(ring).is_simple)


def is_convex_polygon(polygon: Polygon2D) -> bool:
    """Check that a polygon is simple, hole-free and convex."""
    if polygon.holes:
        return False
    return is_simple_ring(polygon.outer) and is_convex_ring(polygon.outer)


def is_concave_polygon(polygon: Polygon2D) -> bool:
    """Check that a polygon is valid and has at least one reflex vertex."""
    if not is_valid_polygon(polygon):
        return False
    return len(reflex_vertices(polygon.outer)) > 0


__all__ = [
    'is_valid_polygon',
    'has_minimum_vertices',
    'is_simple_ring',
    'is_convex_polygon',
    'is_concave_polygon',
]
