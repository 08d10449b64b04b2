"""Selection of the convex-convex intersection test.

Both tests share one calling convention, ``(polygon1, polygon2) -> bool``,
so callers pick one explicitly and pass the function along.
"""

from typing import Callable, Union

from ..core.primitives import Polygon2D
from ..core.types import ConvexTest, coerce_enum
from .gjk import intersects_convex
from .sat import sat_intersects

ConvexIntersectionTest = Callable[[Polygon2D, Polygon2D], bool]


def resolve_convex_test(
    convex_test: Union[ConvexIntersectionTest, ConvexTest, str],
) -> ConvexIntersectionTest:
    """Return the intersection function for ``convex_test``.

    Args:
        convex_test: A callable with the convex test signature, a ConvexTest
            member, or its string value (``"simplex"`` or ``"sat"``).

    Returns:
        The convex intersection function

    Raises:
        ConfigurationError: If the string does not name a known test
    """
    if callable(convex_test):
        return convex_test

    test = coerce_enum(convex_test, ConvexTest)
    test_map = {
        ConvexTest.SIMPLEX: intersects_convex,
        ConvexTest.SAT: sat_intersects,
    }
    return test_map[test]


__all__ = [
    'ConvexIntersectionTest',
    'resolve_convex_test',
]
