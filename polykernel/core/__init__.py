"""Core types and utilities for polykernel.

This module provides the point and polygon value types, enums, exceptions,
and the geometric predicates shared by the algorithms.
"""

from .types import (
    ConvexTest,
    coerce_enum,
)

from .errors import (
    PolykernelError,
    ValidationError,
    DegenerateInputError,
    DegenerateGeometryError,
    ConfigurationError,
    IterationLimitWarning,
)

from .primitives import (
    Point2D,
    Polygon2D,
)

__all__ = [
    # Value types
    'Point2D',
    'Polygon2D',

    # Strategy enums
    'ConvexTest',
    'coerce_enum',

    # Exceptions
    'PolykernelError',
    'ValidationError',
    'DegenerateInputError',
    'DegenerateGeometryError',
    'ConfigurationError',
    'IterationLimitWarning',
]
