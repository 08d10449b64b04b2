"""Intersection of arbitrary simple polygons through their triangulations.

Both polygons are decomposed into triangles and every pair of triangles is
checked with a convex test. Two polygons overlap with positive area exactly
when some pair of their triangles does, so the cost is
``O(triangles(a) * triangles(b))`` convex tests.
"""

from typing import Sequence, Union

from ..core.primitives import Polygon2D
from ..core.types import ConvexTest
from ..triangulate import triangulate
from .convex import ConvexIntersectionTest, resolve_convex_test


def intersects_concave(
    polygon1: Polygon2D,
    polygon2: Polygon2D,
    convex_test: Union[ConvexIntersectionTest, ConvexTest, str] = ConvexTest.SIMPLEX,
) -> bool:
    """Check whether two simple polygons overlap with positive area.

    The polygons may be concave and may have holes. A polygon lying inside
    a hole of the other does not intersect it, and neither do polygons that
    only touch.

    Args:
        polygon1: First polygon
        polygon2: Second polygon
        convex_test: Convex test applied to triangle pairs (callable,
            ConvexTest member or its string value)

    Returns:
        True if the interiors of the polygons overlap

    Raises:
        DegenerateInputError: If either polygon cannot be triangulated
        ConfigurationError: If convex_test names an unknown test

    Examples:
        >>> from polykernel import ConvexTest
        >>> intersects_concave(house, other_house, convex_test=ConvexTest.SAT)
    """
    test = resolve_convex_test(convex_test)
    return triangles_intersect(triangulate(polygon1), triangulate(polygon2), test)


def triangles_intersect(
    triangles1: Sequence[Polygon2D],
    triangles2: Sequence[Polygon2D],
    convex_test: Union[ConvexIntersectionTest, ConvexTest, str] = ConvexTest.SIMPLEX,
) -> bool:
    """Check whether any triangle of one set overlaps any triangle of the other.

    Use this with precomputed triangulations when the same polygons are
    compared many times.
    """
    test = resolve_convex_test(convex_test)
    for triangle1 in triangles1:
        for triangle2 in triangles2:
            if test(triangle1, triangle2):
                return True
    return False


__all__ = [
    'intersects_concave',
    'triangles_intersect',
]
