"""Convex polygon intersection by simplex search over the Minkowski difference.

Two convex polygons A and B overlap with positive area exactly when the
origin lies in the interior of the Minkowski difference ``A - B``. The search
never builds the difference explicitly: it only queries support points, the
vertex of A furthest along a direction minus the vertex of B furthest
against it, and grows a simplex (point, edge, triangle) toward the origin.

Contact without overlap (a shared edge or a shared vertex) puts the origin on
the boundary of ``A - B`` and is reported as no intersection.
"""

import warnings
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from ..core.errors import ConfigurationError, IterationLimitWarning
from ..core.geometry_utils import centroid, convex_hull, cross, dot, has_area, orientation
from ..core.primitives import Point2D, Polygon2D

DEFAULT_MAX_ITERATIONS = 100

Vector = Tuple[float, float]


class _Triangle(Enum):
    """Terminal outcomes of the triangle case."""
    CONTAINS_ORIGIN = "contains_origin"
    ON_BOUNDARY = "on_boundary"


def intersects_convex(
    polygon1: Polygon2D,
    polygon2: Polygon2D,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> bool:
    """Check whether two convex polygons overlap with positive area.

    Only the outer rings are used; both polygons must be convex (this is
    not checked). Polygons that merely touch along an edge or at a vertex
    do not intersect.

    Args:
        polygon1: First convex polygon
        polygon2: Second convex polygon
        max_iterations: Budget of support queries. When it runs out the
            polygons are reported as not intersecting and an
            IterationLimitWarning is emitted.

    Returns:
        True if the interiors of the polygons overlap

    Raises:
        ConfigurationError: If max_iterations is not positive

    Examples:
        >>> square = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> shifted = Polygon2D.from_coords([(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)])
        >>> intersects_convex(square, shifted)
        True
    """
    if max_iterations < 1:
        raise ConfigurationError(f"max_iterations must be positive, got {max_iterations}")

    ring1, ring2 = polygon1.outer, polygon2.outer
    if not (has_area(ring1) and has_area(ring2)):
        return False

    c1, c2 = centroid(ring1), centroid(ring2)
    direction: Vector = (c1.x - c2.x, c1.y - c2.y)
    if direction == (0.0, 0.0):
        direction = (1.0, 0.0)

    # Every support point lies on the boundary of the Minkowski difference,
    # so a support point at the origin means the polygons only touch.
    first = _support(ring1, ring2, direction)
    if first == (0.0, 0.0):
        return False
    simplex: List[Point2D] = [first]
    direction = (-first.x, -first.y)

    for iteration in range(max_iterations):
        point = _support(ring1, ring2, direction)
        if dot(point, direction) <= 0.0:
            return False

        # A repeated support point cannot move the simplex; the origin is
        # within rounding of the current edge.
        if point in simplex:
            outcome = _Triangle.ON_BOUNDARY
        else:
            simplex.append(point)
            if len(simplex) == 2:
                simplex, direction = _do_line(simplex)
                continue
            outcome = _do_triangle(simplex)

        if outcome is _Triangle.CONTAINS_ORIGIN:
            return True
        if outcome is _Triangle.ON_BOUNDARY:
            result = _refine_boundary(ring1, ring2, simplex, max_iterations - iteration - 1)
            if result is not None:
                return result
            break
        simplex, direction = outcome

    warnings.warn(
        f"Simplex search did not converge within {max_iterations} iterations; "
        "reporting no intersection",
        IterationLimitWarning,
        stacklevel=2,
    )
    return False


def _support(ring1: Sequence[Point2D], ring2: Sequence[Point2D], direction: Vector) -> Point2D:
    """Support point of ``ring1 - ring2`` along ``direction``."""
    dx, dy = direction
    furthest = max(ring1, key=lambda p: p.x * dx + p.y * dy)
    nearest = min(ring2, key=lambda p: p.x * dx + p.y * dy)
    return Point2D(furthest.x - nearest.x, furthest.y - nearest.y)


def _toward_origin(start: Point2D, end: Point2D) -> Vector:
    """Normal of the edge ``start -> end`` on the side of the origin.

    When the origin lies on the edge's line the left normal is returned.
    The side is read from ``cross(start, end)``, the same value the
    triangle case tests, so both always agree on it.
    """
    edge = (end.x - start.x, end.y - start.y)
    if cross(start, end) < 0:
        return (edge[1], -edge[0])
    return (-edge[1], edge[0])


def _do_line(simplex: List[Point2D]) -> Tuple[List[Point2D], Vector]:
    """Edge case: keep the edge if the origin projects onto it."""
    older, newest = simplex
    edge = (older.x - newest.x, older.y - newest.y)
    to_origin = (-newest.x, -newest.y)
    if dot(edge, to_origin) <= 0.0:
        return [newest], to_origin
    return [older, newest], _toward_origin(older, newest)


def _do_triangle(
    simplex: List[Point2D],
) -> Union[_Triangle, Tuple[List[Point2D], Vector]]:
    """Triangle case.

    Returns ``CONTAINS_ORIGIN`` when the origin is strictly inside the
    triangle, ``ON_BOUNDARY`` when it lies on one of its edges, and otherwise
    the edge facing the origin together with the next search direction.
    """
    c, b, a = simplex
    turn = orientation(c, b, a)

    # cross(p, q) * turn > 0 when the origin is on the inner side of p -> q.
    # Only edges through the newest point can exclude the origin: the search
    # direction already put it on the inner side of the kept edge c -> b.
    for start, end, kept in ((b, a, [b, a]), (a, c, [c, a])):
        if cross(start, end) * turn < 0:
            return kept, _toward_origin(kept[0], kept[1])

    if all(cross(p, q) * turn > 0 for p, q in ((b, a), (a, c), (c, b))):
        return _Triangle.CONTAINS_ORIGIN
    return _Triangle.ON_BOUNDARY


def _refine_boundary(
    ring1: Sequence[Point2D],
    ring2: Sequence[Point2D],
    points: Sequence[Point2D],
    budget: int,
) -> Optional[bool]:
    """Decide overlap when the origin lies on the edge of a simplex.

    The hull of the support points found so far contains the origin on its
    boundary. Support queries along the outward normal of a hull edge through
    the origin either prove that the origin is on the boundary of the
    Minkowski difference (no progress past it) or extend the hull across it.

    Returns None when the budget runs out.
    """
    known = list(points)
    for _ in range(budget):
        hull = convex_hull(known)
        if len(hull) < 3:
            return False

        facing = None
        for i, start in enumerate(hull):
            end = hull[(i + 1) % len(hull)]
            if cross(start, end) <= 0:
                facing = (start, end)
                break
        if facing is None:
            return True

        start, end = facing
        normal = (end.y - start.y, start.x - end.x)
        point = _support(ring1, ring2, normal)
        if dot(point, normal) <= 0.0 or point in known:
            return False
        known.append(point)
    return None


__all__ = [
    'DEFAULT_MAX_ITERATIONS',
    'intersects_convex',
]
