"""Type definitions for polykernel operations.

This module defines enums for strategy parameters throughout the library.
"""

from enum import Enum
from typing import Type, TypeVar, Union

from .errors import ConfigurationError

E = TypeVar('E', bound=Enum)


class ConvexTest(Enum):
    """Algorithm used to decide overlap between two convex polygons.

    Attributes:
        SIMPLEX: Simplex search over the Minkowski difference (GJK-style)
        SAT: Separating axis test over the edge normals of both polygons

    Examples:
        >>> from polykernel import intersects_concave, ConvexTest
        >>> intersects_concave(poly1, poly2, convex_test=ConvexTest.SAT)
    """
    SIMPLEX = 'simplex'
    SAT = 'sat'


def coerce_enum(value: Union[E, str], enum_type: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_type``.

    Accepts either an enum member or its string value.

    Raises:
        ConfigurationError: If the string does not name a member.
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        options = ', '.join(repr(m.value) for m in enum_type)
        raise ConfigurationError(
            f"Unknown {enum_type.__name__}: {value!r} (expected one of {options})"
        ) from None


__all__ = [
    'ConvexTest',
    'coerce_enum',
]
