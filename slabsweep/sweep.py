"""
Slab decomposition of a simple polygon by a left-to-right sweep.

Vertices are visited in increasing x. Each one is a START (both incident
edges lie ahead of the scanline), END (both behind) or PASS (one of each)
event. Before a vertex changes the active edge list, the slab between the
previous scanline and this one is emitted from the list as it stands, so
edges about to be removed still contribute their right-hand corners.

Alongside the regions the sweep reports vertical cuts: the segments from a
vertex to the nearest active edge above and/or below it, on the sides
where the polygon interior lies. They are the slab boundaries drawn
through each vertex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Sequence, Tuple

from .active_edges import ActiveEdgeList
from .config import AREA_CHECK_TOL
from .errors import InvariantError
from .geometry import Edge, Ordering, Point, compare_point
from .polygons import check_sweepable, polygon_area
from .regions import Region, Triangle, emit_regions, triangulate

logger = logging.getLogger(__name__)


class VertexEvent(Enum):
    START = auto()   # both incident edges start here
    END = auto()     # both incident edges end here
    PASS = auto()    # one edge ends here, the other starts


@dataclass(frozen=True)
class VerticalCut:
    vertex: Point
    endpoint: Point
    direction: str   # "up" or "down"


@dataclass
class SweepResult:
    regions: List[Region] = field(default_factory=list)
    cuts: List[VerticalCut] = field(default_factory=list)
    events: List[Tuple[int, VertexEvent]] = field(default_factory=list)

    def triangles(self, drop_degenerate: bool = True) -> List[Triangle]:
        return triangulate(self.regions, drop_degenerate)

    @property
    def area(self) -> float:
        return sum(r.area for r in self.regions)

    def covers(self, points: Sequence[Point], rel_tol: float = AREA_CHECK_TOL) -> bool:
        """True when the regions add up to the area of ``points``."""
        poly_area = polygon_area(points)
        return abs(poly_area - self.area) <= rel_tol * max(1.0, poly_area)


class SlabDecomposer:
    """
    One-shot sweep over a fixed vertex snapshot. All sweep state is local
    to ``decompose``; calling it again recomputes from scratch.
    """

    def __init__(self, points: Sequence[Point]):
        check_sweepable(points)
        self.pts: Tuple[Point, ...] = tuple((float(x), float(y)) for x, y in points)
        self.n = len(self.pts)

    def _prev(self, i: int) -> int:
        return (i - 1 + self.n) % self.n

    def _next(self, i: int) -> int:
        return (i + 1) % self.n

    def incident_edges(self, i: int) -> Tuple[Edge, Edge]:
        """Edges from vertex ``i`` to its next and previous neighbours."""
        v = self.pts[i]
        return Edge(v, self.pts[self._next(i)]), Edge(v, self.pts[self._prev(i)])

    def classify(self, i: int) -> VertexEvent:
        x = self.pts[i][0]
        e1, e2 = self.incident_edges(i)
        b1, b2 = e1.is_behind(x), e2.is_behind(x)
        if not b1 and not b2:
            return VertexEvent.START
        if b1 and b2:
            return VertexEvent.END
        return VertexEvent.PASS

    def sweep_order(self) -> List[int]:
        return sorted(range(self.n), key=lambda i: self.pts[i][0])

    def decompose(self) -> SweepResult:
        result = SweepResult()
        active = ActiveEdgeList()
        prev_x = None

        for i in self.sweep_order():
            vertex = self.pts[i]
            x = vertex[0]
            e1, e2 = self.incident_edges(i)
            event = self.classify(i)
            result.events.append((i, event))

            if prev_x is not None:
                emit_regions(active.snapshot(), prev_x, x, result.regions)
            result.cuts.extend(self._vertical_cuts(vertex, event, active.snapshot(), (e1, e2)))

            if event is VertexEvent.START:
                active.insert(e1)
                active.insert(e2)
            elif event is VertexEvent.END:
                active.remove(e1)
                active.remove(e2)
            else:
                behind, ahead = (e1, e2) if e1.is_behind(x) else (e2, e1)
                active.remove(behind)
                active.insert(ahead)

            logger.debug("vertex %d at x=%.6g: %s, %d active", i, x, event.name, len(active))
            if len(active) % 2:
                raise InvariantError(f"odd active edge count {len(active)} after vertex {i}")
            prev_x = x

        logger.debug("swept %d vertices: %d regions, %d cuts",
                     self.n, len(result.regions), len(result.cuts))
        return result

    def _vertical_cuts(self, vertex: Point, event: VertexEvent, snapshot: List[Edge],
                       incident: Tuple[Edge, Edge]) -> List[VerticalCut]:
        """Cuts from ``vertex`` measured against the list before this vertex's mutation."""
        others = [e for e in snapshot if e not in incident]
        k = 0
        while k < len(others) and compare_point(others[k], vertex) is Ordering.BELOW:
            k += 1

        x = vertex[0]
        cuts = []
        up = k % 2 == 1
        down = up if event is not VertexEvent.PASS else not up
        if up:
            cuts.append(VerticalCut(vertex, self._neighbour(others, k - 1, vertex).intersect(x), "up"))
        if down:
            cuts.append(VerticalCut(vertex, self._neighbour(others, k, vertex).intersect(x), "down"))
        return cuts

    @staticmethod
    def _neighbour(others: List[Edge], idx: int, vertex: Point) -> Edge:
        if not 0 <= idx < len(others):
            raise InvariantError(f"no active edge at position {idx} around vertex {vertex}")
        return others[idx]


def decompose(points: Sequence[Point]) -> SweepResult:
    """Sweep ``points`` (a simple polygon in cyclic order) into slab regions and cuts."""
    return SlabDecomposer(points).decompose()


def compute_subdivisions(points: Sequence[Point]) -> List[Region]:
    """Regions only, in emission order."""
    return decompose(points).regions


def triangulate_polygon(points: Sequence[Point], drop_degenerate: bool = True) -> List[Triangle]:
    return decompose(points).triangles(drop_degenerate)
