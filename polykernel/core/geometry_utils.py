"""Common geometry predicates and helpers.

Every algorithm in polykernel is built on the handful of exact floating
point predicates in this module. Predicates compare against zero without a
tolerance so that touching contacts are classified consistently by the
different intersection tests.
"""

import math
from typing import List, Optional, Sequence

from .errors import DegenerateGeometryError
from .primitives import Point2D, Ring


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors."""
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Sequence[float], b: Sequence[float]) -> float:
    """Z component of the cross product of two vectors."""
    return a[0] * b[1] - a[1] * b[0]


def orientation(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> float:
    """Twice the signed area of triangle ``abc``.

    Positive when ``c`` lies left of the directed line ``a -> b``
    (counter-clockwise turn), negative for a clockwise turn and zero when
    the three points are collinear.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def signed_area(ring: Sequence[Sequence[float]]) -> float:
    """Signed area of an open ring (shoelace formula).

    Positive for counter-clockwise rings, negative for clockwise rings.
    """
    n = len(ring)
    if n < 3:
        return 0.0
    total = 0.0
    for i in range(n):
        x1, y1 = ring[i][0], ring[i][1]
        x2, y2 = ring[(i + 1) % n][0], ring[(i + 1) % n][1]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def has_area(ring: Sequence[Sequence[float]]) -> bool:
    """True if the ring encloses a non-zero area."""
    return len(ring) >= 3 and signed_area(ring) != 0.0


def is_ccw(ring: Sequence[Sequence[float]]) -> bool:
    return signed_area(ring) > 0


def ensure_ccw(ring: Ring) -> Ring:
    """Return ``ring`` in counter-clockwise order."""
    if signed_area(ring) < 0:
        return tuple(reversed(ring))
    return tuple(ring)


def ensure_cw(ring: Ring) -> Ring:
    """Return ``ring`` in clockwise order."""
    if signed_area(ring) > 0:
        return tuple(reversed(ring))
    return tuple(ring)


def centroid(points: Sequence[Sequence[float]]) -> Point2D:
    """Mean of the vertices (not the area centroid)."""
    n = len(points)
    return Point2D(
        sum(p[0] for p in points) / n,
        sum(p[1] for p in points) / n,
    )


def point_in_triangle(
    p: Sequence[float],
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
) -> bool:
    """Check whether ``p`` lies inside or on the boundary of triangle ``abc``.

    Works for either triangle orientation.
    """
    d1 = orientation(a, b, p)
    d2 = orientation(b, c, p)
    d3 = orientation(c, a, p)
    has_negative = d1 < 0 or d2 < 0 or d3 < 0
    has_positive = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_negative and has_positive)


def convex_hull(points: Sequence[Sequence[float]]) -> List[Point2D]:
    """Convex hull of a point set (Andrew's monotone chain).

    Duplicate and collinear points are removed; the hull is returned in
    counter-clockwise order starting from the lowest-leftmost point.
    Degenerate inputs return fewer than three points.
    """
    unique = sorted({Point2D(float(p[0]), float(p[1])) for p in points})
    if len(unique) < 3:
        return unique

    lower: List[Point2D] = []
    for p in unique:
        while len(lower) >= 2 and orientation(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Point2D] = []
    for p in reversed(unique):
        while len(upper) >= 2 and orientation(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def is_convex_ring(ring: Sequence[Sequence[float]]) -> bool:
    """Check that every vertex of a simple ring turns the same way.

    Collinear vertices are tolerated; a ring whose vertices are all
    collinear is not convex.
    """
    n = len(ring)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        turn = orientation(ring[i - 1], ring[i], ring[(i + 1) % n])
        if turn == 0:
            continue
        current = 1 if turn > 0 else -1
        if sign == 0:
            sign = current
        elif current != sign:
            return False
    return sign != 0


def reflex_vertices(ring: Sequence[Sequence[float]]) -> List[int]:
    """Indices of the reflex vertices (interior angle > 180 degrees) of a ring."""
    n = len(ring)
    if n < 3:
        return []
    # Turns against the winding direction are reflex
    winding = 1.0 if signed_area(ring) >= 0 else -1.0
    return [
        i for i in range(n)
        if winding * orientation(ring[i - 1], ring[i], ring[(i + 1) % n]) < 0
    ]


def segment_intersection(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Optional[Point2D]:
    """Intersection point of segments ``p1-p2`` and ``p3-p4``.

    Args:
        p1, p2: Endpoints of the first segment
        p3, p4: Endpoints of the second segment

    Returns:
        The intersection point, or None when the segments do not meet or
        are parallel. Collinear (including identical) segments and
        zero-length segments return None. A segment endpoint lying on the
        other segment counts as an intersection.

    Examples:
        >>> segment_intersection((0, -1), (0, 1), (-1, 0), (1, 0))
        Point2D(x=0.0, y=0.0)
        >>> segment_intersection((0, -1), (0, 1), (1, 0), (3, 0)) is None
        True
    """
    det = (p1[0] - p2[0]) * (p4[1] - p3[1]) - (p4[0] - p3[0]) * (p1[1] - p2[1])
    if det == 0.0:
        return None

    t = ((p4[1] - p3[1]) * (p4[0] - p2[0]) + (p3[0] - p4[0]) * (p4[1] - p2[1])) / det
    s = ((p2[1] - p1[1]) * (p4[0] - p2[0]) + (p1[0] - p2[0]) * (p4[1] - p2[1])) / det
    if t < 0.0 or t > 1.0 or s < 0.0 or s > 1.0:
        return None

    # t weights p1, (1 - t) weights p2
    return Point2D(
        t * p1[0] + (1.0 - t) * p2[0],
        t * p1[1] + (1.0 - t) * p2[1],
    )


def calc_curvature(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
) -> float:
    """Signed curvature of the circle through three points.

    Positive for a counter-clockwise turn ``p1 -> p2 -> p3``, negative for a
    clockwise turn and zero for distinct collinear points.

    Raises:
        DegenerateGeometryError: If two of the points coincide.

    Examples:
        >>> calc_curvature((0, 0), (1, 0), (2, 0))
        0.0
    """
    denominator = (
        math.hypot(p2[0] - p1[0], p2[1] - p1[1])
        * math.hypot(p3[0] - p2[0], p3[1] - p2[1])
        * math.hypot(p1[0] - p3[0], p1[1] - p3[1])
    )
    if abs(denominator) < 1e-10:
        raise DegenerateGeometryError(
            "Points are too close for curvature calculation"
        )
    return 2.0 * orientation(p1, p2, p3) / denominator


__all__ = [
    'dot',
    'cross',
    'orientation',
    'signed_area',
    'has_area',
    'is_ccw',
    'ensure_ccw',
    'ensure_cw',
    'centroid',
    'point_in_triangle',
    'convex_hull',
    'is_convex_ring',
    'reflex_vertices',
    'segment_intersection',
    'calc_curvature',
]
