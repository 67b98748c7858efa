"""
Slab regions and their triangulation.

A region is the quadrilateral between two adjacent active edges and two
consecutive scanline positions. Corners run

    (upper @ prev, upper @ current, lower @ current, lower @ prev)

which is clockwise with y pointing up. Regions next to a start or end
vertex have two coincident corners and degenerate to triangles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import AREA_TOL
from .errors import InvariantError
from .geometry import Edge, Point

Triangle = Tuple[Point, Point, Point]


def triangle_area(tri: Triangle) -> float:
    a, b, c = tri
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2


@dataclass(frozen=True)
class Region:
    corners: Tuple[Point, Point, Point, Point]

    @property
    def prev_x(self) -> float:
        return self.corners[0][0]

    @property
    def current_x(self) -> float:
        return self.corners[1][0]

    @property
    def width(self) -> float:
        return self.current_x - self.prev_x

    @property
    def area(self) -> float:
        """Shoelace area of the quadrilateral."""
        pts = self.corners
        s = 0.0
        for i in range(4):
            j = (i + 1) % 4
            s += pts[i][0] * pts[j][1] - pts[j][0] * pts[i][1]
        return abs(s) / 2

    def triangles(self, drop_degenerate: bool = True, area_tol: float = AREA_TOL) -> List[Triangle]:
        """Split along the (upper @ current) - (lower @ prev) diagonal."""
        c0, c1, c2, c3 = self.corners
        tris = [(c0, c1, c3), (c1, c2, c3)]
        if drop_degenerate:
            tris = [t for t in tris if triangle_area(t) > area_tol]
        return tris


def emit_regions(edges: Sequence[Edge], prev_x: float, current_x: float,
                 out: List[Region]) -> int:
    """
    Append one region per (0,1), (2,3), ... pair of ``edges`` (top to bottom)
    between the scanlines at ``prev_x`` and ``current_x``. Returns the number
    of regions appended.
    """
    if len(edges) % 2:
        raise InvariantError(
            f"odd number of active edges ({len(edges)}) between x={prev_x} and x={current_x}"
        )

    prev_pts = [e.intersect(prev_x) for e in edges]
    curr_pts = [e.intersect(current_x) for e in edges]

    for i in range(0, len(edges), 2):
        out.append(Region((prev_pts[i], curr_pts[i], curr_pts[i + 1], prev_pts[i + 1])))
    return len(edges) // 2


def triangulate(regions: Sequence[Region], drop_degenerate: bool = True,
                area_tol: float = AREA_TOL) -> List[Triangle]:
    """Triangles covering the same area as ``regions``."""
    triangles: List[Triangle] = []
    for region in regions:
        triangles.extend(region.triangles(drop_degenerate, area_tol))
    return triangles
