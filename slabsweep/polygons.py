"""
Input preparation and polygon helpers.

The sweep itself only validates; fixing input is the caller's job. This
module holds what a caller needs for that: precondition checks,
coincident-x nudging, simplicity checks, areas, and deterministic polygon
generators used by the scripts and tests.
"""

from __future__ import annotations

import math
import random
from typing import List, Sequence, Tuple

from .config import NUDGE_STEP, ROT_ANGLE
from .errors import PreconditionError
from .geometry import Point


# ----------------------------------------------------------------------
#  PRECONDITIONS
# ----------------------------------------------------------------------

def check_sweepable(points: Sequence[Point]) -> None:
    """
    Raise PreconditionError unless ``points`` can be swept: at least three
    finite vertices, no vertical edge, no two vertices sharing an x.
    """
    n = len(points)
    if n < 3:
        raise PreconditionError(f"need at least 3 vertices, got {n}")

    for i, (x, y) in enumerate(points):
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PreconditionError(f"vertex {i} has non-finite coordinates ({x}, {y})")

    for i in range(n):
        j = (i + 1) % n
        if points[i][0] == points[j][0]:
            raise PreconditionError(f"edge {i}-{j} is vertical at x={points[i][0]}")

    seen = {}
    for i, (x, _) in enumerate(points):
        if x in seen:
            raise PreconditionError(
                f"vertices {seen[x]} and {i} share x={x}; nudge coincident x values first"
            )
        seen[x] = i


def nudge_coincident_x(points: Sequence[Point], step: float = NUDGE_STEP) -> List[Point]:
    """
    Return a copy of ``points`` in which every x is unique. Vertices are
    visited in (x, index) order and any vertex not strictly right of the
    previous one is moved to ``previous + step``.
    """
    result = [(float(x), float(y)) for x, y in points]
    order = sorted(range(len(result)), key=lambda i: (result[i][0], i))
    last_x = -math.inf
    for i in order:
        x, y = result[i]
        if x <= last_x:
            x = last_x + step
            result[i] = (x, y)
        last_x = x
    return result


# ----------------------------------------------------------------------
#  AREA & ORIENTATION
# ----------------------------------------------------------------------

def signed_area(pts: Sequence[Point]) -> float:
    """Shoelace area; positive for counter-clockwise vertex order."""
    n = len(pts)
    s = 0.0
    for i in range(n):
        j = (i + 1) % n
        s += pts[i][0] * pts[j][1] - pts[j][0] * pts[i][1]
    return s / 2


def polygon_area(pts: Sequence[Point]) -> float:
    return abs(signed_area(pts))


def ensure_ccw(pts: Sequence[Point]) -> List[Point]:
    if signed_area(pts) < 0:
        return list(reversed(pts))
    return list(pts)


def rotate_points(points: Sequence[Point], angle_rad: float) -> List[Point]:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


# ----------------------------------------------------------------------
#  SIMPLICITY
# ----------------------------------------------------------------------

def _orientation(a: Point, b: Point, c: Point) -> int:
    """1 for a left turn a->b->c, -1 for a right turn, 0 when (nearly) collinear."""
    lhs = (b[0] - a[0]) * (c[1] - a[1])
    rhs = (b[1] - a[1]) * (c[0] - a[0])
    if math.isclose(lhs, rhs, rel_tol=1e-9, abs_tol=1e-12):
        return 0
    return 1 if lhs > rhs else -1


def _segments_cross(a: Point, b: Point, c: Point, d: Point) -> bool:
    # Proper crossings only; collinear overlaps and touching endpoints are ignored
    return (_orientation(a, b, c) * _orientation(a, b, d) < 0
            and _orientation(c, d, a) * _orientation(c, d, b) < 0)


def find_self_intersections(pts: Sequence[Point]) -> List[Tuple[int, int]]:
    """
    Pairs ``(i, j)`` of non-adjacent edges ``i -> i+1`` and ``j -> j+1``
    that properly cross. O(n^2).
    """
    n = len(pts)
    hits = []
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _segments_cross(pts[i], pts[(i + 1) % n], pts[j], pts[(j + 1) % n]):
                hits.append((i, j))
    return hits


def is_simple(pts: Sequence[Point]) -> bool:
    return not find_self_intersections(pts)


# ----------------------------------------------------------------------
#  GENERATORS
# ----------------------------------------------------------------------

def triangle() -> List[Point]:
    return [(0.0, 0.0), (3.0, 1.0), (1.0, 2.0)]


def square(size: float = 2.0) -> List[Point]:
    """Axis-aligned square; has vertical edges, nudge before sweeping."""
    return [(0.0, 0.0), (size, 0.0), (size, size), (0.0, size)]


def house() -> List[Point]:
    """Unit-ish square with a triangular roof; apex at x=1. Has vertical walls."""
    return [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (1.0, 3.0), (0.0, 2.0)]


def l_shape() -> List[Point]:
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


def paper_example() -> List[Point]:
    return [
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ]


def convex_polygon(n: int = 6, radius: float = 1.0) -> List[Point]:
    return [(radius * math.cos(2 * math.pi * i / n + math.pi / 2),
             radius * math.sin(2 * math.pi * i / n + math.pi / 2)) for i in range(n)]


def star_polygon(points: int = 5, outer: float = 2.0, inner: float = 0.8) -> List[Point]:
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def comb_polygon(teeth: int = 3) -> List[Point]:
    pts = [(0, 0), (teeth * 2, 0), (teeth * 2, 1)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1), (x, 2), (x - 0.5, 1)])
    pts.append((0, 1))
    return pts


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Star-shaped random polygon via an angular sweep around the origin."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def spiral_polygon(n: int, turns: float = 3.0, start: float = 20.0, end: float = 100.0,
                   width: float = 8.0) -> List[Point]:
    """Closed spiral strip: outward along one arm, back along a parallel inner arm."""
    half = max(2, n // 2)
    outer, inner = [], []
    for i in range(half):
        t = i / (half - 1)
        angle = 2 * math.pi * turns * t
        r = start + (end - start) * t
        outer.append((r * math.cos(angle), r * math.sin(angle)))
        inner.append(((r - width) * math.cos(angle), (r - width) * math.sin(angle)))
    return outer + inner[::-1]


GENERATORS = {
    "convex": lambda n, seed=0: convex_polygon(n, 100.0),
    "random": lambda n, seed=0: random_polygon(n, seed=seed),
    "star": lambda n, seed=0: star_polygon(max(3, n // 2), 100.0, 30.0),
    "spiral": lambda n, seed=0: spiral_polygon(n),
    "comb": lambda n, seed=0: comb_polygon(max(1, (n - 4) // 3)),
}


def generate(kind: str, n: int, seed: int = 0, rotate: bool = True) -> List[Point]:
    """Named family member, rotated by ROT_ANGLE so that no two x coincide."""
    if kind not in GENERATORS:
        raise ValueError(f"unknown polygon family {kind!r} (known: {sorted(GENERATORS)})")
    pts = GENERATORS[kind](n, seed)
    if rotate:
        pts = rotate_points(pts, ROT_ANGLE)
    return pts
