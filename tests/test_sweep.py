"""
End-to-end sweep checks: event classification, region counts, area
tiling, vertical cuts and the worked scenarios (triangle, square, house).
"""

import logging

import pytest

from slabsweep import (
    PreconditionError,
    SlabDecomposer,
    VertexEvent,
    compute_subdivisions,
    decompose,
    nudge_coincident_x,
    polygon_area,
    triangulate_polygon,
)
from slabsweep.config import ROT_ANGLE
from slabsweep.geometry import Edge
from slabsweep.polygons import (
    GENERATORS,
    comb_polygon,
    generate,
    house,
    l_shape,
    paper_example,
    rotate_points,
    square,
    star_polygon,
    triangle,
)
from slabsweep.regions import triangle_area


def notch_polygon():
    """Arrow with a notch cut in from the right; vertex 2 at x=5 is a split vertex."""
    return [(0.0, 0.0), (10.0, -2.0), (5.0, 0.5), (11.0, 3.0)]


def mirrored(pts):
    return [(-x, y) for x, y in pts]


def substantial(regions, min_area=1e-3):
    return [r for r in regions if r.area > min_area]


def expected_region_count(pts):
    """Sum over scan intervals of (edges spanning the interval) / 2, counted independently."""
    n = len(pts)
    edges = [Edge(pts[i], pts[(i + 1) % n]) for i in range(n)]
    xs = sorted(x for x, _ in pts)
    total = 0
    for x0, x1 in zip(xs, xs[1:]):
        spanning = sum(1 for e in edges if e.left[0] <= x0 and e.right[0] >= x1)
        assert spanning % 2 == 0
        total += spanning // 2
    return total


NON_CONVEX = {
    "l-shape": rotate_points(l_shape(), ROT_ANGLE),
    "paper": rotate_points(paper_example(), ROT_ANGLE),
    "star-5": rotate_points(star_polygon(5), ROT_ANGLE),
    "star-7": rotate_points(star_polygon(7), ROT_ANGLE),
    "comb-3": rotate_points(comb_polygon(3), ROT_ANGLE),
    "comb-5": rotate_points(comb_polygon(5), ROT_ANGLE),
    "notch": notch_polygon(),
    "notch-mirrored": mirrored(notch_polygon()),
}


# ----------------------------------------------------------------------
#  EVENTS
# ----------------------------------------------------------------------

def test_triangle_events():
    dec = SlabDecomposer(triangle())
    assert dec.sweep_order() == [0, 2, 1]
    assert dec.classify(0) is VertexEvent.START
    assert dec.classify(2) is VertexEvent.PASS
    assert dec.classify(1) is VertexEvent.END


def test_incident_edges_point_to_next_and_previous():
    dec = SlabDecomposer(triangle())
    e_next, e_prev = dec.incident_edges(0)
    assert e_next == Edge((0, 0), (3, 1))
    assert e_prev == Edge((0, 0), (1, 2))


def test_precondition_checked_before_sweeping():
    with pytest.raises(PreconditionError):
        SlabDecomposer(square())
    with pytest.raises(PreconditionError):
        decompose([(0, 0), (1, 1)])


# ----------------------------------------------------------------------
#  SCENARIOS
# ----------------------------------------------------------------------

def test_triangle_regions():
    result = decompose(triangle())
    assert len(result.regions) == 2

    first, second = result.regions
    # Opens at the start vertex, closes at the end vertex
    assert first.corners[0] == first.corners[3] == (0.0, 0.0)
    assert first.corners[1] == pytest.approx((1.0, 2.0))
    assert first.corners[2] == pytest.approx((1.0, 1.0 / 3.0))
    assert second.corners[1] == pytest.approx((3.0, 1.0))
    assert second.corners[2] == pytest.approx((3.0, 1.0))

    assert first.area == pytest.approx(5.0 / 6.0)
    assert second.area == pytest.approx(5.0 / 3.0)
    assert result.area == pytest.approx(polygon_area(triangle()))


def test_triangle_triangulates_into_one_triangle_per_slab():
    tris = triangulate_polygon(triangle())
    assert len(tris) == 2
    assert sum(triangle_area(t) for t in tris) == pytest.approx(2.5)


def test_square_after_nudge():
    pts = nudge_coincident_x(square(2.0))
    result = decompose(pts)

    assert [e for _, e in result.events] == [
        VertexEvent.START, VertexEvent.PASS, VertexEvent.PASS, VertexEvent.END,
    ]
    assert len(result.regions) == 3

    main = substantial(result.regions)
    assert len(main) == 1
    for got, want in zip(main[0].corners, [(0, 2), (2, 2), (2, 0), (0, 0)]):
        assert got == pytest.approx(want, abs=1e-5)
    assert result.area == pytest.approx(polygon_area(pts), rel=1e-9)


def test_house_after_nudge():
    pts = nudge_coincident_x(house())
    result = decompose(pts)

    main = substantial(result.regions)
    assert len(main) == 2
    # The slabs meet exactly at the roof apex
    assert main[0].current_x == 1.0
    assert main[1].prev_x == 1.0
    assert main[0].corners[1] == pytest.approx((1.0, 3.0))
    assert main[1].corners[0] == pytest.approx((1.0, 3.0))
    assert main[0].area == pytest.approx(2.5, abs=1e-4)
    assert main[1].area == pytest.approx(2.5, abs=1e-4)
    assert result.area == pytest.approx(polygon_area(pts), rel=1e-9)


# ----------------------------------------------------------------------
#  PROPERTIES
# ----------------------------------------------------------------------

@pytest.mark.parametrize("name", sorted(NON_CONVEX))
def test_region_count_matches_spanning_edges(name):
    pts = NON_CONVEX[name]
    assert len(decompose(pts).regions) == expected_region_count(pts)


@pytest.mark.parametrize("name", sorted(NON_CONVEX))
def test_regions_tile_non_convex_polygons(name):
    pts = NON_CONVEX[name]
    result = decompose(pts)
    assert result.area == pytest.approx(polygon_area(pts), rel=1e-9)
    tri_area = sum(triangle_area(t) for t in result.triangles())
    assert tri_area == pytest.approx(polygon_area(pts), rel=1e-9)


@pytest.mark.parametrize("kind", sorted(GENERATORS))
def test_regions_tile_generated_polygons(kind):
    pts = generate(kind, 60)
    result = decompose(pts)
    assert len(result.regions) == expected_region_count(pts)
    assert result.area == pytest.approx(polygon_area(pts), rel=1e-9)


@pytest.mark.parametrize("n", [3, 4, 7, 16, 50])
def test_convex_polygon_has_one_slab_per_interval(n):
    pts = generate("convex", n)
    regions = compute_subdivisions(pts)
    assert len(regions) == n - 1
    assert sum(r.area for r in regions) == pytest.approx(polygon_area(pts), rel=1e-9)


def test_region_corners_stay_ordered():
    for pts in NON_CONVEX.values():
        for r in decompose(pts).regions:
            upper_prev, upper_cur, lower_cur, lower_prev = r.corners
            assert r.width > 0
            assert upper_prev[1] >= lower_prev[1] - 1e-9
            assert upper_cur[1] >= lower_cur[1] - 1e-9


def test_sweep_is_idempotent():
    pts = NON_CONVEX["paper"]
    first = decompose(pts)
    second = decompose(pts)
    assert first.regions == second.regions
    assert first.cuts == second.cuts
    assert first.events == second.events


@pytest.mark.parametrize("base, gap", [(1e6, 0.5), (1e4, 1e-3)])
def test_thin_sliver_far_from_origin_keeps_top_to_bottom_order(base, gap):
    pts = [(0.0, base), (10.0, base), (5.0, base + gap), (6.0, base + 500.0)]
    result = decompose(pts)
    assert len(result.regions) == expected_region_count(pts) == 4
    for r in result.regions:
        upper_prev, upper_cur, lower_cur, lower_prev = r.corners
        assert upper_prev[1] >= lower_prev[1]
        assert upper_cur[1] >= lower_cur[1]

    sliver = result.regions[2]
    assert sliver.corners[0] == (5.0, base + gap)
    assert sliver.corners[1][1] == pytest.approx(base + 0.8 * gap, abs=1e-7)
    assert sliver.corners[3] == (5.0, base)

    # Split vertex at x=5 sits inside the polygon, just above the base
    assert [c.direction for c in result.cuts] == ["up", "down"]
    assert result.cuts[1].endpoint == (5.0, base)
    assert result.covers(pts)


def test_covers_flags_missing_area():
    pts = NON_CONVEX["paper"]
    result = decompose(pts)
    assert result.covers(pts)
    result.regions.pop()
    assert not result.covers(pts)


# ----------------------------------------------------------------------
#  VERTICAL CUTS
# ----------------------------------------------------------------------

def test_split_vertex_cuts_both_ways():
    result = decompose(notch_polygon())
    assert [e for _, e in result.events] == [
        VertexEvent.START, VertexEvent.START, VertexEvent.END, VertexEvent.END,
    ]
    assert len(result.regions) == 4

    assert len(result.cuts) == 2
    up, down = result.cuts
    assert up.vertex == (5.0, 0.5)
    assert up.direction == "up"
    assert up.endpoint == pytest.approx((5.0, 15.0 / 11.0))
    assert down.direction == "down"
    assert down.endpoint == pytest.approx((5.0, -1.0))


def test_merge_vertex_cuts_both_ways():
    result = decompose(mirrored(notch_polygon()))
    events = dict(result.events)
    assert events[2] is VertexEvent.END
    assert len(result.regions) == 4

    assert [c.direction for c in result.cuts] == ["up", "down"]
    assert all(c.vertex == (-5.0, 0.5) for c in result.cuts)
    assert result.cuts[0].endpoint == pytest.approx((-5.0, 15.0 / 11.0))
    assert result.cuts[1].endpoint == pytest.approx((-5.0, -1.0))


def test_pass_through_vertex_cuts_towards_interior():
    result = decompose(triangle())
    assert len(result.cuts) == 1
    cut = result.cuts[0]
    assert cut.vertex == (1.0, 2.0)
    assert cut.direction == "down"
    assert cut.endpoint == pytest.approx((1.0, 1.0 / 3.0))


def test_square_cuts():
    result = decompose(nudge_coincident_x(square(2.0)))
    assert [c.direction for c in result.cuts] == ["down", "up"]
    assert result.cuts[0].endpoint == pytest.approx((0.0, 0.0), abs=1e-5)
    assert result.cuts[1].endpoint == pytest.approx((2.0, 2.0), abs=1e-5)


# ----------------------------------------------------------------------
#  LOGGING
# ----------------------------------------------------------------------

def test_events_are_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="slabsweep.sweep")
    decompose(triangle())
    assert "START" in caplog.text
    assert "END" in caplog.text
    assert "2 regions" in caplog.text
