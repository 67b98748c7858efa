"""
Slab decomposition of simple polygons.

A left-to-right sweep over vertex x-coordinates splits a simple polygon
into quadrilateral slabs, one per pair of adjacent active edges between
consecutive scanlines, and from those a triangulation.
"""

from .errors import InvariantError, PreconditionError, SweepError
from .geometry import Edge, Ordering, compare_edges, compare_point
from .active_edges import ActiveEdgeList
from .regions import Region, emit_regions, triangulate
from .sweep import (
    SlabDecomposer,
    SweepResult,
    VertexEvent,
    VerticalCut,
    compute_subdivisions,
    decompose,
    triangulate_polygon,
)
from .polygons import check_sweepable, nudge_coincident_x, polygon_area

__version__ = "0.1.0"
__all__ = [
    "SweepError",
    "PreconditionError",
    "InvariantError",
    "Edge",
    "Ordering",
    "compare_edges",
    "compare_point",
    "ActiveEdgeList",
    "Region",
    "emit_regions",
    "triangulate",
    "SlabDecomposer",
    "SweepResult",
    "VertexEvent",
    "VerticalCut",
    "compute_subdivisions",
    "decompose",
    "triangulate_polygon",
    "check_sweepable",
    "nudge_coincident_x",
    "polygon_area",
]
