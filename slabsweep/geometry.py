"""
Geometry primitives for the left-to-right slab sweep.

Points are plain ``(x, y)`` tuples. An ``Edge`` is a polygon side stored
with its left endpoint first. The y axis grows upward: an edge "above"
another has the larger y over their common x-range, and the active edge
list is ordered top to bottom.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Tuple

from .config import ABS_TOL, REL_TOL
from .errors import PreconditionError

Point = Tuple[float, float]


class Ordering(Enum):
    """Result of an above/below comparison."""
    ABOVE = -1      # first operand is above (sorts first)
    SAME = 0        # coincident within tolerance
    BELOW = 1       # first operand is below (sorts last)
    DISJOINT = 2    # edges share no x-range, no ordering exists


def approx_equal(a: float, b: float, tol: float = ABS_TOL) -> bool:
    """Absolute comparison; callers scale ``tol`` to the geometry involved."""
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tol)


def edge_tolerance(*edges: "Edge", rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> float:
    """
    Tie tolerance for y values taken on ``edges``: ``abs_tol`` plus
    ``rel_tol`` times the largest edge extent. Independent of where the
    edges sit, so distant coordinates do not widen it.
    """
    return abs_tol + rel_tol * max(e.extent for e in edges)


class Edge:
    """
    A polygon side between two vertices, canonicalised so ``left`` has the
    smaller x. Equality is endpoint equality, independent of the order the
    vertices were given in.
    """

    __slots__ = ("left", "right")

    def __init__(self, p: Point, q: Point):
        if p[0] > q[0]:
            p, q = q, p
        self.left: Point = (float(p[0]), float(p[1]))
        self.right: Point = (float(q[0]), float(q[1]))
        if self.left[0] == self.right[0]:
            raise PreconditionError(f"vertical edge {self.left} -> {self.right}")

    @property
    def slope(self) -> float:
        return (self.right[1] - self.left[1]) / (self.right[0] - self.left[0])

    @property
    def intercept(self) -> float:
        return self.left[1] - self.slope * self.left[0]

    @property
    def extent(self) -> float:
        """Larger of the edge's x and y spans."""
        return max(self.right[0] - self.left[0], abs(self.right[1] - self.left[1]))

    def y_at(self, x: float) -> float:
        """Height of the edge's supporting line at ``x``; exact at both endpoints."""
        if x == self.right[0]:
            return self.right[1]
        # Point-slope form keeps near-vertical edges accurate; equal to slope*x + intercept.
        return self.left[1] + self.slope * (x - self.left[0])

    def is_behind(self, x: float) -> bool:
        """True once the scanline at ``x`` has passed the edge's left endpoint."""
        return self.left[0] < x

    def intersect(self, x: float) -> Point:
        """Intersection of the edge's line with the vertical line X = x."""
        return (x, self.y_at(x))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.left, self.right))

    def __repr__(self) -> str:
        return f"Edge({self.left}, {self.right})"


def compare_point(edge: Edge, point: Point,
                  rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> Ordering:
    """
    Where ``point`` lies relative to the line through ``edge``:
    ABOVE if its y exceeds the line's y at point.x, BELOW if smaller,
    SAME within a tolerance scaled to the edge, not to the point.
    """
    line_y = edge.y_at(point[0])
    tol = edge_tolerance(edge, rel_tol=rel_tol, abs_tol=abs_tol)
    if approx_equal(point[1], line_y, tol):
        return Ordering.SAME
    return Ordering.ABOVE if point[1] > line_y else Ordering.BELOW


def compare_edges(e1: Edge, e2: Edge,
                  rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> Ordering:
    """
    Vertical order of ``e1`` relative to ``e2`` over their common x-range.

    Both lines are evaluated at the left end of the overlap. When those
    heights coincide (edges sharing a vertex on the scanline) the right end
    of the overlap decides instead. Edges without a common x-range are
    DISJOINT; callers must not treat that as a tie.
    """
    x1 = max(e1.left[0], e2.left[0])
    x2 = min(e1.right[0], e2.right[0])
    if not x1 < x2:
        return Ordering.DISJOINT

    tol = edge_tolerance(e1, e2, rel_tol=rel_tol, abs_tol=abs_tol)
    y1, y2 = e1.y_at(x1), e2.y_at(x1)
    if approx_equal(y1, y2, tol):
        y1, y2 = e1.y_at(x2), e2.y_at(x2)
        if approx_equal(y1, y2, tol):
            return Ordering.SAME

    return Ordering.ABOVE if y1 > y2 else Ordering.BELOW
