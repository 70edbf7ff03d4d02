import numpy as np
import pytest
from geometry.primitives import Point
from geometry.polygon import Polygon
from mesh.regions import export_polygons, polygons_from_pslg, run_regions
from mesh.pslg import parse_node, parse_poly, node_text, poly_text, read_node, read_poly
from conftest import SQUARE_NODE, SQUARE_POLY

LEFT = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
RIGHT = Polygon([(1, 0), (2, 0), (2, 1), (1, 1)])
SPECK = Polygon([(10, 10), (10.001, 10), (10, 10.001)])


def test_one_region_inside_each_polygon():
    rng = np.random.default_rng(7)
    result = export_polygons([LEFT, RIGHT], 0.0, rng)
    assert len(result.polygons) == 2
    regions = result.poly.regions
    assert regions.shape == (2, 3)
    for k, closed in enumerate(result.polygons, start=1):
        x, y, owner = regions[k - 1]
        assert owner == k
        assert closed.is_inside(Point(x, y))


def test_shared_vertices_and_edges_are_registered_once():
    result = export_polygons([LEFT, RIGHT], 0.0)
    assert len(result.nodes) == 6
    assert result.nodes.n_attributes == 1
    # the first polygon to use a vertex owns it
    owners = dict(zip(map(tuple, result.nodes.xy.tolist()), result.nodes.attributes[:, 0]))
    assert owners[(1.0, 0.0)] == 1
    assert owners[(1.0, 1.0)] == 1
    assert owners[(2.0, 0.0)] == 2
    assert result.poly.segments.shape == (7, 2)
    assert result.poly.holes.shape == (0, 2)


def test_area_limit_drops_small_polygons():
    result = export_polygons([LEFT, SPECK], 100.0)
    assert len(result.polygons) == 1
    assert len(result.nodes) == 4
    assert export_polygons([SPECK], 0.0).poly.regions.shape == (1, 3)


def test_empty_polygons_are_skipped():
    result = export_polygons([Polygon(), LEFT], 0.0)
    assert len(result.polygons) == 1
    assert result.poly.regions[0, 2] == 1


def test_polygons_from_pslg():
    rings = polygons_from_pslg(parse_node(SQUARE_NODE), parse_poly(SQUARE_POLY))
    assert len(rings) == 1
    assert set(rings[0].data()) == {Point(0, 0), Point(0.1, 0), Point(0.1, 0.1), Point(0, 0.1)}


def test_polygons_from_pslg_unknown_node():
    with pytest.raises(ValueError):
        polygons_from_pslg(parse_node(SQUARE_NODE), parse_poly("0 2 0 0\n1 0\n1 1 9\n0\n"))


def test_run_regions_writes_owner_and_regions(square_pslg, tmp_path):
    out = str(tmp_path / "regions")
    run_regions(0.0, square_pslg, out, seed=3)

    with open(out + ".node", encoding="utf-8") as f:
        assert f.readline().strip() == "4 2 1 0"
    nodes = read_node(out + ".node")
    assert nodes.attributes[:, 0].tolist() == [1, 1, 1, 1]

    poly = read_poly(out + ".poly", allow_nodes=False)
    assert poly.segments.shape == (4, 2)
    assert poly.regions.shape == (1, 3)
    x, y, k = poly.regions[0]
    assert k == 1
    assert 0 < x < 0.1 and 0 < y < 0.1


def test_run_regions_is_reproducible(square_pslg, tmp_path):
    a = run_regions(0.0, square_pslg, str(tmp_path / "a"), seed=11)
    b = run_regions(0.0, square_pslg, str(tmp_path / "b"), seed=11)
    assert a.poly.regions.tolist() == b.poly.regions.tolist()


def test_adjacent_polygons_survive_a_text_round_trip():
    first = export_polygons([LEFT, RIGHT], 0.0)
    nodes = parse_node(node_text(first.nodes))
    poly = parse_poly(poly_text(first.poly), allow_nodes=False)

    rings = polygons_from_pslg(nodes, poly)
    # the shared edge comes back as a chain of its own
    assert sorted(len(r) for r in rings) == [2, 4, 4]

    again = export_polygons(rings, 0.0, np.random.default_rng(1))
    assert len(again.polygons) == 2
    assert again.poly.segments.shape == (7, 2)
    for k, closed in enumerate(again.polygons, start=1):
        x, y, owner = again.poly.regions[k - 1]
        assert owner == k
        assert closed.is_inside(Point(x, y))


def test_two_point_rings_are_skipped():
    result = export_polygons([Polygon([(1, 0), (1, 1)]), LEFT], 0.0)
    assert len(result.polygons) == 1
