"""Shared measurement helpers for polykernel results.

Callers and tests mostly need to know whether a triangulation conserved the
area of its polygon and produced the expected number of triangles.
Centralizing the bookkeeping here keeps those checks in one place.
"""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Union

from .core.primitives import Polygon2D


def polygon_area(polygon: Polygon2D) -> float:
    """Area of ``polygon`` (outer ring minus holes)."""
    return polygon.area


def total_area(polygons: Iterable[Polygon2D]) -> float:
    """Sum of the areas of ``polygons``."""
    return sum(polygon.area for polygon in polygons)


def measure_triangulation(
    polygon: Polygon2D,
    triangles: Sequence[Polygon2D],
) -> Dict[str, Union[float, int]]:
    """Return core metrics comparing ``triangles`` with the polygon they cover.

    ``expected_triangle_count`` is ``n + m + 2h - 2`` for an outer ring of
    ``n`` vertices and ``h`` holes with ``m`` vertices in total.
    """
    area = polygon.area
    triangle_area = total_area(triangles)
    holes = polygon.holes
    vertex_count = len(polygon.outer) + sum(len(hole) for hole in holes)

    return {
        "area": area,
        "triangle_area": triangle_area,
        "area_error": abs(area - triangle_area),
        "triangle_count": len(triangles),
        "expected_triangle_count": vertex_count + 2 * len(holes) - 2,
    }


__all__ = [
    "polygon_area",
    "total_area",
    "measure_triangulation",
]
