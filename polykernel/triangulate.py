"""Polygon triangulation by ear clipping.

Holes are first spliced into the outer boundary through pairs of coincident
bridge edges, which turns a polygon with holes into a single (weakly) simple
ring. The ring is then clipped one ear at a time.

For an outer ring of ``n`` vertices and ``h`` holes with ``m`` vertices in
total, the bridged ring has ``n + m + 2h`` vertices and yields
``n + m + 2h - 2`` triangles, unless collinear vertices have to be dropped.
"""

from typing import List, Sequence, Tuple

from .core.errors import DegenerateInputError
from .core.geometry_utils import ensure_ccw, ensure_cw, orientation, point_in_triangle, signed_area
from .core.primitives import Point2D, Polygon2D

Triangle = Tuple[Point2D, Point2D, Point2D]


def triangulate(polygon: Polygon2D) -> List[Polygon2D]:
    """Decompose a simple polygon, possibly concave and with holes, into triangles.

    The triangles cover exactly the area of the outer ring minus the holes,
    without gaps or overlaps. Each triangle is returned as a counter-clockwise
    Polygon2D with three vertices and no holes.

    Args:
        polygon: Simple polygon. Ring orientation does not matter and empty
            inner rings are ignored.

    Returns:
        List of triangles

    Raises:
        DegenerateInputError: If a ring has fewer than three distinct
            vertices or zero area, if a hole cannot be bridged to the outer
            boundary, or if the boundary intersects itself.

    Examples:
        >>> house = Polygon2D.from_coords([(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)])
        >>> len(triangulate(house))
        3
    """
    ring = bridge_holes(polygon)
    return [Polygon2D(triangle) for triangle in _clip_ears(ring)]


def bridge_holes(polygon: Polygon2D) -> List[Point2D]:
    """Splice every hole of ``polygon`` into its outer ring.

    Holes are processed from the one reaching furthest right to the one
    reaching least far. Each hole is connected from one of its vertices
    (rightmost first) to the nearest mutually visible vertex V of the ring
    built so far, and inserted as ``V, hole..., M, V``.

    Returns:
        The counter-clockwise bridged ring (open)

    Raises:
        DegenerateInputError: If a ring is degenerate or a hole cannot be
            bridged.
    """
    _check_ring(polygon.outer, "Outer ring")
    ring = list(ensure_ccw(polygon.outer))

    holes = []
    for inner in polygon.inners:
        if not inner:
            continue
        _check_ring(inner, "Hole")
        holes.append(list(ensure_cw(inner)))

    holes.sort(key=lambda hole: max(p.x for p in hole), reverse=True)
    for index, hole in enumerate(holes):
        ring = _merge_hole(ring, hole, holes[index + 1:])
    return ring


def _check_ring(ring: Sequence[Point2D], name: str) -> None:
    if len(set(ring)) < 3:
        raise DegenerateInputError(f"{name} has fewer than 3 distinct vertices")
    if signed_area(ring) == 0.0:
        raise DegenerateInputError(f"{name} encloses zero area")


# ============================================================================
# Hole bridging
# ============================================================================

def _merge_hole(
    ring: List[Point2D],
    hole: List[Point2D],
    pending: List[List[Point2D]],
) -> List[Point2D]:
    """Insert ``hole`` into ``ring`` through a bridge that crosses nothing."""
    hole_order = sorted(range(len(hole)), key=lambda i: (-hole[i].x, hole[i].y))
    for m in hole_order:
        anchor = hole[m]
        candidates = sorted(
            range(len(ring)),
            key=lambda i: ((ring[i].x - anchor.x) ** 2 + (ring[i].y - anchor.y) ** 2, i),
        )
        for v in candidates:
            if _is_bridge(ring, v, hole, m, pending):
                return ring[:v + 1] + hole[m:] + hole[:m] + [anchor, ring[v]] + ring[v + 1:]

    raise DegenerateInputError("Hole cannot be bridged to the outer boundary")


def _is_bridge(
    ring: List[Point2D],
    v: int,
    hole: List[Point2D],
    m: int,
    pending: List[List[Point2D]],
) -> bool:
    """Check that segment ``ring[v] - hole[m]`` is a valid bridge."""
    vertex, anchor = ring[v], hole[m]
    if vertex == anchor:
        return False

    n = len(ring)
    if not _in_wedge(ring[v - 1], vertex, ring[(v + 1) % n], anchor):
        return False
    if not _in_wedge(hole[m - 1], anchor, hole[(m + 1) % len(hole)], vertex):
        return False

    for other in [ring, hole] + pending:
        count = len(other)
        for i in range(count):
            if _segments_cross(vertex, anchor, other[i], other[(i + 1) % count]):
                return False
    return True


def _in_wedge(
    before: Point2D,
    vertex: Point2D,
    after: Point2D,
    target: Point2D,
) -> bool:
    """Check that ``target`` is seen from ``vertex`` through the polygon interior.

    The interior lies to the left of ``before -> vertex -> after``, which
    holds both for the counter-clockwise outer ring and for clockwise holes.
    """
    turn = orientation(before, vertex, after)
    left_of_incoming = orientation(before, vertex, target) > 0
    left_of_outgoing = orientation(vertex, after, target) > 0
    if turn > 0:
        return left_of_incoming and left_of_outgoing
    return left_of_incoming or left_of_outgoing


def _segments_cross(a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> bool:
    """Check if segments ``ab`` and ``cd`` share a point other than a common endpoint."""
    d1 = orientation(a, b, c)
    d2 = orientation(a, b, d)
    d3 = orientation(c, d, a)
    d4 = orientation(c, d, b)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    # An endpoint lying strictly inside the other segment
    if d1 == 0 and c != a and c != b and _within_box(a, b, c):
        return True
    if d2 == 0 and d != a and d != b and _within_box(a, b, d):
        return True
    if d3 == 0 and a != c and a != d and _within_box(c, d, a):
        return True
    if d4 == 0 and b != c and b != d and _within_box(c, d, b):
        return True
    return False


def _within_box(a: Point2D, b: Point2D, p: Point2D) -> bool:
    return (
        min(a.x, b.x) <= p.x <= max(a.x, b.x)
        and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )


# ============================================================================
# Ear clipping
# ============================================================================

def _clip_ears(ring: List[Point2D]) -> List[Triangle]:
    """Clip ears off a counter-clockwise ring until three vertices remain.

    The ring is kept as an index arena: ``prev[i]`` and ``next_[i]`` hold the
    neighbours of live vertex ``i``, so removing a vertex is two
    assignments.
    """
    n = len(ring)
    prev = [(i - 1) % n for i in range(n)]
    next_ = [(i + 1) % n for i in range(n)]

    triangles: List[Triangle] = []
    remaining = n
    current = 0
    visited_without_ear = 0

    def unlink(i: int) -> None:
        next_[prev[i]] = next_[i]
        prev[next_[i]] = prev[i]

    while remaining > 3:
        before, after = prev[current], next_[current]
        if _is_ear(ring, prev, next_, current):
            triangles.append((ring[before], ring[current], ring[after]))
            unlink(current)
            remaining -= 1
            current = after
            visited_without_ear = 0
            continue

        current = after
        visited_without_ear += 1
        if visited_without_ear < remaining:
            continue

        # A full pass without an ear: drop a collinear vertex (zero-area
        # triangle) if there is one, otherwise the ring crosses itself.
        collinear = _find_collinear(ring, prev, next_, current, remaining)
        if collinear is None:
            raise DegenerateInputError(
                "No ear found; the polygon boundary intersects itself"
            )
        current = next_[collinear]
        unlink(collinear)
        remaining -= 1
        visited_without_ear = 0

    a, b, c = ring[prev[current]], ring[current], ring[next_[current]]
    turn = orientation(a, b, c)
    if turn < 0:
        raise DegenerateInputError(
            "Remaining triangle is clockwise; the polygon boundary intersects itself"
        )
    if turn > 0:
        triangles.append((a, b, c))
    return triangles


def _is_ear(ring: List[Point2D], prev: List[int], next_: List[int], i: int) -> bool:
    """Check that vertex ``i`` is strictly convex and its triangle holds no other vertex.

    Vertices coinciding with a corner of the triangle (bridge copies) are
    ignored.
    """
    a, b, c = ring[prev[i]], ring[i], ring[next_[i]]
    if orientation(a, b, c) <= 0:
        return False

    j = next_[next_[i]]
    while j != prev[i]:
        p = ring[j]
        if p != a and p != b and p != c and point_in_triangle(p, a, b, c):
            return False
        j = next_[j]
    return True


def _find_collinear(
    ring: List[Point2D],
    prev: List[int],
    next_: List[int],
    start: int,
    remaining: int,
):
    i = start
    for _ in range(remaining):
        if orientation(ring[prev[i]], ring[i], ring[next_[i]]) == 0:
            return i
        i = next_[i]
    return None


__all__ = [
    'triangulate',
    'bridge_holes',
]
