"""Point and polygon value types.

Polygons are stored as open rings: the closing vertex is implied and never
repeated. The outer ring is counter-clockwise by convention and holes are
clockwise, but any orientation is accepted on construction;
:meth:`Polygon2D.corrected` normalises it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

from shapely.geometry import Polygon as ShapelyPolygon

from .errors import ValidationError


class Point2D(NamedTuple):
    """Immutable 2-D point."""

    x: float
    y: float


Ring = Tuple[Point2D, ...]


def _to_ring(coords: Iterable[Sequence[float]]) -> Ring:
    """Convert coordinate pairs to an open ring without consecutive duplicates."""
    ring = []
    for coord in coords:
        x, y = float(coord[0]), float(coord[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValidationError(f"Non-finite coordinate ({x}, {y})")
        point = Point2D(x, y)
        if ring and ring[-1] == point:
            continue
        ring.append(point)

    # Drop the closing point of an explicitly closed ring
    while len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return tuple(ring)


@dataclass(frozen=True)
class Polygon2D:
    """Polygon with one outer ring and zero or more holes.

    Attributes:
        outer: Vertices of the outer boundary (open ring)
        inners: Hole rings (open rings). An empty ring means "no hole".

    Examples:
        >>> square = Polygon2D.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> square.area
        1.0
    """

    outer: Ring
    inners: Tuple[Ring, ...] = ()

    @classmethod
    def from_coords(
        cls,
        outer: Iterable[Sequence[float]],
        inners: Iterable[Iterable[Sequence[float]]] = (),
    ) -> 'Polygon2D':
        """Build a polygon from ``(x, y)`` pairs.

        A repeated closing point and consecutive duplicate points are dropped.

        Raises:
            ValidationError: If a coordinate is NaN or infinite.
        """
        return cls(_to_ring(outer), tuple(_to_ring(inner) for inner in inners))

    @classmethod
    def from_shapely(cls, polygon: ShapelyPolygon) -> 'Polygon2D':
        """Build a polygon from a shapely ``Polygon``."""
        if polygon.is_empty:
            return cls(())
        return cls.from_coords(
            polygon.exterior.coords,
            [interior.coords for interior in polygon.interiors],
        )

    def to_shapely(self) -> ShapelyPolygon:
        """Return the equivalent shapely ``Polygon`` (empty holes dropped)."""
        if not self.outer:
            return ShapelyPolygon()
        return ShapelyPolygon(self.outer, holes=[hole for hole in self.holes])

    @property
    def holes(self) -> Tuple[Ring, ...]:
        """Non-empty inner rings."""
        return tuple(inner for inner in self.inners if inner)

    @property
    def is_triangle(self) -> bool:
        return len(self.outer) == 3 and not self.holes

    @property
    def area(self) -> float:
        """Area enclosed by the outer ring minus the area of the holes."""
        from .geometry_utils import signed_area

        area = abs(signed_area(self.outer))
        for hole in self.holes:
            area -= abs(signed_area(hole))
        return area

    def corrected(self) -> 'Polygon2D':
        """Return a copy with a counter-clockwise outer ring and clockwise holes."""
        from .geometry_utils import ensure_ccw, ensure_cw

        return Polygon2D(
            ensure_ccw(self.outer),
            tuple(ensure_cw(inner) for inner in self.inners),
        )


__all__ = [
    'Point2D',
    'Polygon2D',
    'Ring',
]
