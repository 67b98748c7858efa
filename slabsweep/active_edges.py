"""
Active edge list: the edges crossing the current scanline, kept sorted
top to bottom by ``compare_edges``.

The order is only meaningful between edges that overlap in x. The sweep
guarantees that every pair it compares is simultaneously active, so a
DISJOINT comparison here means the input broke that guarantee and is
reported as an InvariantError.
"""

from __future__ import annotations

import bisect
from functools import cmp_to_key
from typing import Iterator, List, Optional

from .errors import InvariantError
from .geometry import Edge, Ordering, compare_edges


def _edge_cmp(a: Edge, b: Edge) -> int:
    order = compare_edges(a, b)
    if order is Ordering.DISJOINT:
        raise InvariantError(f"compared edges with no common x-range: {a} and {b}")
    return order.value


_edge_key = cmp_to_key(_edge_cmp)


class ActiveEdgeList:
    """
    Sorted list of active edges. Owned by a single sweep and discarded
    with it.
    """

    def __init__(self):
        self.edges: List[Edge] = []

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def insert(self, edge: Edge) -> int:
        """Insert ``edge`` at its sorted position, after any equal edges. Returns the index."""
        edges = self.edges
        if not edges or _edge_cmp(edges[-1], edge) <= 0:
            edges.append(edge)
            return len(edges) - 1
        if _edge_cmp(edges[0], edge) > 0:
            edges.insert(0, edge)
            return 0
        pos = bisect.bisect_right(edges, _edge_key(edge), key=_edge_key)
        edges.insert(pos, edge)
        return pos

    def remove(self, edge: Edge) -> int:
        """Remove ``edge`` if present. Returns its former index, or -1 when it was absent."""
        pos = self.index_of(edge)
        if pos < 0:
            return -1
        del self.edges[pos]
        return pos

    def at(self, i: int) -> Optional[Edge]:
        """Edge at ordinal position ``i``, or None when out of range."""
        if 0 <= i < len(self.edges):
            return self.edges[i]
        return None

    def index_of(self, edge: Edge) -> int:
        """
        Binary-search position of ``edge``. When absent, returns
        ``-(insertion_point + 1)``, which is always negative.
        """
        edges = self.edges
        pos = bisect.bisect_left(edges, _edge_key(edge), key=_edge_key)
        # Several members may compare SAME; walk them for the exact edge.
        i = pos
        while i < len(edges) and _edge_cmp(edges[i], edge) == 0:
            if edges[i] == edge:
                return i
            i += 1
        return -(pos + 1)

    def snapshot(self) -> List[Edge]:
        """Copy of the current top-to-bottom order."""
        return list(self.edges)
