"""Simple polygon and triangulation visualization helpers for debugging."""

from typing import Sequence

import matplotlib.pyplot as plt

from polykernel import Polygon2D


def plot_triangulation(polygon: Polygon2D, triangles: Sequence[Polygon2D], title: str = "Triangulation"):
    """Plot a polygon and its triangulation side by side.

    Args:
        polygon: Polygon that was triangulated
        triangles: Triangles returned by ``triangulate``
        title: Plot title
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    _plot_polygon(ax1, polygon, color='red', alpha=0.5)
    ax1.set_title("Polygon")
    ax1.set_aspect('equal')
    ax1.grid(True, alpha=0.3)

    for triangle in triangles:
        _plot_polygon(ax2, triangle, color='blue', alpha=0.3)
    ax2.set_title(f"{len(triangles)} triangles")
    ax2.set_aspect('equal')
    ax2.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def plot_pair(polygon1: Polygon2D, polygon2: Polygon2D, intersects: bool, title: str = "Intersection"):
    """Overlay two polygons, coloured by the intersection verdict.

    Args:
        polygon1: First polygon
        polygon2: Second polygon
        intersects: Result of the intersection test
        title: Plot title
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    color = 'red' if intersects else 'green'
    _plot_polygon(ax, polygon1, color=color, alpha=0.4)
    _plot_polygon(ax, polygon2, color='blue', alpha=0.4)
    ax.set_title(f"{title}: {'intersecting' if intersects else 'separate'}")
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    plt.show()


def _plot_polygon(ax, polygon: Polygon2D, color='blue', alpha=0.5):
    """Plot a single polygon with holes.

    Args:
        ax: Matplotlib axes
        polygon: Polygon to plot
        color: Fill color
        alpha: Transparency
    """
    x = [p.x for p in polygon.outer]
    y = [p.y for p in polygon.outer]
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)

    # Plot holes (as white)
    for hole in polygon.holes:
        x = [p.x for p in hole]
        y = [p.y for p in hole]
        ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
