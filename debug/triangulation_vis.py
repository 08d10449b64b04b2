import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
import numpy as np

import polykernel
from polykernel import Polygon2D

from plot_geometry import plot_pair, plot_triangulation

square_with_holes = Polygon2D.from_coords(
    [(0, 0), (10, 0), (10, 10), (0, 10)],
    inners=[
        [(2, 2), (4, 2), (4, 4), (2, 4)],
        [(6, 5), (8, 5), (7, 8)],
    ],
)
triangles = polykernel.triangulate(square_with_holes)
print(polykernel.measure_triangulation(square_with_holes, triangles))
plot_triangulation(square_with_holes, triangles, title="Square with two holes")

rng = np.random.default_rng(7)
for vertices in [6, 12, 24]:
    poly = polykernel.random_concave_polygon(vertices, 100.0, rng)
    if poly is None:
        print(f"No concave polygon for {vertices} vertices")
        continue
    triangles = polykernel.triangulate(poly)
    plot_triangulation(poly, triangles, title=f"Random concave polygon, {vertices} vertices")

for test in ['simplex', 'sat']:
    poly1 = polykernel.random_convex_polygon(8, 10.0, rng)
    poly2 = polykernel.random_convex_polygon(8, 10.0, rng)
    result = polykernel.intersects_concave(poly1, poly2, convex_test=test)
    plot_pair(poly1, poly2, result, title=f"Convex test: {test}")
