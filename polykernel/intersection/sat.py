"""Convex polygon intersection by the separating axis test.

Two convex polygons are disjoint (or only touch) exactly when the
projections of their vertices onto the normal of one of their edges form
intervals that do not overlap. Intervals sharing a single end value mean the
polygons touch along that axis, which counts as separated.
"""

from typing import Sequence, Tuple

from ..core.geometry_utils import has_area, orientation
from ..core.primitives import Point2D, Polygon2D


def sat_intersects(polygon1: Polygon2D, polygon2: Polygon2D) -> bool:
    """Check whether two convex polygons overlap with positive area.

    Only the outer rings are used; both polygons must be convex (this is
    not checked). Polygons that merely touch along an edge or at a vertex
    do not intersect.

    Args:
        polygon1: First convex polygon
        polygon2: Second convex polygon

    Returns:
        True if no edge normal of either polygon separates them

    Examples:
        >>> square = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> neighbour = Polygon2D.from_coords([(1, 0), (2, 0), (2, 1), (1, 1)])
        >>> sat_intersects(square, neighbour)
        False
    """
    ring1, ring2 = polygon1.outer, polygon2.outer
    if not (has_area(ring1) and has_area(ring2)):
        return False

    for ring in (ring1, ring2):
        n = len(ring)
        for i in range(n):
            start, end = ring[i], ring[(i + 1) % n]
            if start == end:
                continue
            min1, max1 = _project(ring1, start, end)
            min2, max2 = _project(ring2, start, end)
            if max1 <= min2 or max2 <= min1:
                return False

    return True


def _project(ring: Sequence[Point2D], start: Point2D, end: Point2D) -> Tuple[float, float]:
    """Project a ring onto the normal of the edge ``start -> end``.

    Projections are measured relative to the edge itself, so the edge's own
    endpoints project to exactly zero and a shared edge is never blurred by
    rounding.
    """
    values = [orientation(start, end, p) for p in ring]
    return min(values), max(values)


__all__ = ['sat_intersects']
