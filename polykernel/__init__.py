"""Polykernel - 2-D polygon intersection and triangulation kernel.

This library provides exact-predicate intersection tests for convex and
concave polygons, ear-clipping triangulation with holes, and random polygon
generators for property-based testing.
"""


# Value types
from .core import Point2D, Polygon2D

# Convex intersection tests
from .intersection import (
    DEFAULT_MAX_ITERATIONS,
    intersects_convex,
    sat_intersects,
    resolve_convex_test,
)

# Concave intersection
from .intersection import intersects_concave, triangles_intersect

# Triangulation
from .triangulate import triangulate, bridge_holes

# Random generators
from .random_polygons import (
    GeneratorConfig,
    random_convex_polygon,
    random_concave_polygon,
)

# Geometry helpers
from .core.geometry_utils import segment_intersection, calc_curvature

# Metrics
from .metrics import polygon_area, total_area, measure_triangulation

# Core types (enums)
from .core import ConvexTest

# Core exceptions
from .core import (
    PolykernelError,
    ValidationError,
    DegenerateInputError,
    DegenerateGeometryError,
    ConfigurationError,
    IterationLimitWarning,
)

__all__ = [

    # Value types
    'Point2D',
    'Polygon2D',

    # Convex intersection
    'DEFAULT_MAX_ITERATIONS',
    'intersects_convex',
    'sat_intersects',
    'resolve_convex_test',

    # Concave intersection
    'intersects_concave',
    'triangles_intersect',

    # Triangulation
    'triangulate',
    'bridge_holes',

    # Random generators
    'GeneratorConfig',
    'random_convex_polygon',
    'random_concave_polygon',

    # Geometry helpers
    'segment_intersection',
    'calc_curvature',

    # Metrics
    'polygon_area',
    'total_area',
    'measure_triangulation',

    # Core types (enums)
    'ConvexTest',

    # Core exceptions
    'PolykernelError',
    'ValidationError',
    'DegenerateInputError',
    'DegenerateGeometryError',
    'ConfigurationError',
    'IterationLimitWarning',
]
