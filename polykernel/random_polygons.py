"""Random polygon generators for property-based testing.

Both generators draw exclusively from the ``numpy.random.Generator`` they are
given, so a fixed seed reproduces the same polygons and independent
generators can be used from different threads.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .core.errors import ConfigurationError, DegenerateGeometryError
from .core.geometry_utils import centroid, convex_hull
from .core.primitives import Point2D, Polygon2D
from .core.validation_utils import is_concave_polygon


@dataclass
class GeneratorConfig:
    """Settings for the random polygon generators.

    Attributes:
        max_attempts: Number of candidates drawn before giving up
        dent_depth: Range of the fraction of the way a dent is pushed from
            its edge toward the vertex centroid
        edge_position: Range of the position of a dent along its edge
            (0 = edge start, 1 = edge end)
    """

    max_attempts: int = 100
    dent_depth: Tuple[float, float] = (0.1, 0.9)
    edge_position: Tuple[float, float] = (0.25, 0.75)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be positive, got {self.max_attempts}")
        for name in ('dent_depth', 'edge_position'):
            low, high = getattr(self, name)
            if not 0.0 < low <= high < 1.0:
                raise ConfigurationError(f"{name} must satisfy 0 < low <= high < 1, got {(low, high)}")


def random_convex_polygon(
    vertex_count_hint: int,
    coordinate_bound: float,
    rng: np.random.Generator,
    config: Optional[GeneratorConfig] = None,
) -> Polygon2D:
    """Generate a random convex polygon with Valtr's algorithm.

    Sorted random x and y coordinates are split into two chains each, the
    resulting edge vectors are paired at random and laid out by angle,
    which always closes into a convex polygon. The polygon is centred on the
    origin and reduced to its convex hull, so coincident or collinear
    vertices can leave fewer vertices than requested (never fewer than 3).

    Args:
        vertex_count_hint: Requested number of vertices (at least 3)
        coordinate_bound: Every coordinate lies in [-bound, bound]
        rng: Source of randomness
        config: Generator settings (defaults to GeneratorConfig())

    Returns:
        Counter-clockwise convex polygon without holes

    Raises:
        ValueError: If vertex_count_hint < 3 or coordinate_bound is not a
            positive finite number
        DegenerateGeometryError: If every attempt collapsed to fewer than
            3 vertices

    Examples:
        >>> rng = np.random.default_rng(42)
        >>> poly = random_convex_polygon(6, 1000.0, rng)
        >>> 3 <= len(poly.outer) <= 6
        True
    """
    _check_arguments(vertex_count_hint, coordinate_bound, minimum=3)
    config = config or GeneratorConfig()

    for _ in range(config.max_attempts):
        points = _valtr_points(vertex_count_hint, coordinate_bound, rng)
        hull = convex_hull(points)
        if len(hull) >= 3:
            return Polygon2D(tuple(hull))

    raise DegenerateGeometryError(
        f"Could not generate a convex polygon in {config.max_attempts} attempts"
    )


def random_concave_polygon(
    vertex_count_hint: int,
    coordinate_bound: float,
    rng: np.random.Generator,
    config: Optional[GeneratorConfig] = None,
) -> Optional[Polygon2D]:
    """Generate a random simple polygon with at least one reflex vertex.

    A random convex polygon is dented inward: a point on one of its edges is
    pulled toward the vertex centroid and inserted as a new vertex. The
    first dent always yields a valid concave polygon; further dents can make
    the boundary cross itself, in which case the candidate is discarded and
    a new one is drawn.

    Args:
        vertex_count_hint: Requested number of vertices (at least 4)
        coordinate_bound: Every coordinate lies in [-bound, bound]
        rng: Source of randomness
        config: Generator settings (defaults to GeneratorConfig())

    Returns:
        A simple concave polygon, or None if no valid candidate was found
        within ``config.max_attempts`` attempts

    Raises:
        ValueError: If vertex_count_hint < 4 or coordinate_bound is not a
            positive finite number
    """
    _check_arguments(vertex_count_hint, coordinate_bound, minimum=4)
    config = config or GeneratorConfig()

    for _ in range(config.max_attempts):
        dents = int(rng.integers(1, vertex_count_hint - 2))
        base = random_convex_polygon(vertex_count_hint - dents, coordinate_bound, rng, config)

        ring = list(base.outer)
        for _ in range(dents):
            ring = _dent(ring, rng, config)

        candidate = Polygon2D(tuple(ring))
        if is_concave_polygon(candidate):
            return candidate

    return None


def _check_arguments(vertex_count_hint: int, coordinate_bound: float, minimum: int) -> None:
    if vertex_count_hint < minimum:
        raise ValueError(
            f"vertex_count_hint must be at least {minimum}, got {vertex_count_hint}"
        )
    if not (math.isfinite(coordinate_bound) and coordinate_bound > 0):
        raise ValueError(f"coordinate_bound must be positive and finite, got {coordinate_bound}")


def _valtr_points(count: int, bound: float, rng: np.random.Generator) -> np.ndarray:
    """Vertices of a random convex polygon centred on the origin."""
    x_steps = _chain_steps(np.sort(rng.uniform(-bound, bound, count)), rng)
    y_steps = _chain_steps(np.sort(rng.uniform(-bound, bound, count)), rng)
    rng.shuffle(y_steps)

    steps = np.column_stack([x_steps, y_steps])
    order = np.argsort(np.arctan2(steps[:, 1], steps[:, 0]))
    points = np.cumsum(steps[order], axis=0)

    # Centre the bounding box on the origin; its extent is at most 2 * bound
    points -= (points.min(axis=0) + points.max(axis=0)) / 2.0
    return np.clip(points, -bound, bound)


def _chain_steps(values: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """Split sorted values into two monotone chains and return their steps.

    The steps sum to zero: one chain walks from the minimum up to the
    maximum, the other walks back down.
    """
    low, high = values[0], values[-1]
    last_up = last_down = low
    steps: List[float] = []
    for value in values[1:-1]:
        if rng.random() < 0.5:
            steps.append(value - last_up)
            last_up = value
        else:
            steps.append(last_down - value)
            last_down = value
    steps.append(high - last_up)
    steps.append(last_down - high)
    return np.array(steps)


def _dent(ring: List[Point2D], rng: np.random.Generator, config: GeneratorConfig) -> List[Point2D]:
    """Insert a vertex pulled inward from a random edge of ``ring``."""
    n = len(ring)
    i = int(rng.integers(n))
    start, end = ring[i], ring[(i + 1) % n]
    t = rng.uniform(*config.edge_position)
    depth = rng.uniform(*config.dent_depth)

    on_edge = (start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))
    center = centroid(ring)
    dent = Point2D(
        float(on_edge[0] + depth * (center.x - on_edge[0])),
        float(on_edge[1] + depth * (center.y - on_edge[1])),
    )
    return ring[:i + 1] + [dent] + ring[i + 1:]


__all__ = [
    'GeneratorConfig',
    'random_convex_polygon',
    'random_concave_polygon',
]
