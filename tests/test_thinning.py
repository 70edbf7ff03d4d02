import pytest
from geometry.api import plane_area
from mesh.thinning import thin_nodes, run_thin
from mesh.pslg import PSLGFormatError, parse_node, read_node

LONLAT = "+proj=longlat +datum=WGS84 +no_defs"

PLACES = """\
4 2 1 0
1 24.0   60.0 10
2 24.001 60.0 20
3 30.0   65.0 5
4 50.0   60.0 100
"""


@pytest.fixture
def area():
    # 100 plane units per degree
    return plane_area(LONLAT, (20, 55, 35, 70), (1500, 1500))


def test_thin_nodes_keeps_highest_values(area):
    out = thin_nodes(parse_node(PLACES), area)
    assert out.index.tolist() == [1, 2]
    assert out.xy.tolist() == [[24.001, 60.0], [30.0, 65.0]]
    assert out.attributes[:, 0].tolist() == [20.0, 5.0]


def test_thin_nodes_negate(area):
    out = thin_nodes(parse_node(PLACES), area, negate=True)
    assert out.attributes[:, 0].tolist() == [5.0, 10.0]


def test_thin_nodes_zero_distance_keeps_all_inside(area):
    out = thin_nodes(parse_node(PLACES), area, min_distance=0)
    # the point at 50E falls outside the plane
    assert sorted(out.attributes[:, 0].tolist()) == [5.0, 10.0, 20.0]


def test_thin_nodes_border(area):
    # (24, 60) and (24.001, 60) sit about 400 units from the left edge
    out = thin_nodes(parse_node(PLACES), area, border=450)
    assert out.xy.tolist() == [[30.0, 65.0]]


def test_thin_nodes_requires_value(area):
    with pytest.raises(PSLGFormatError):
        thin_nodes(parse_node("1 2 0 0\n1 24 60\n"), area)


def test_run_thin(tmp_path, area):
    (tmp_path / "places.node").write_text(PLACES, encoding="utf-8")
    run_thin(str(tmp_path / "places"), str(tmp_path / "labels"), area, min_distance=10)
    out = read_node(str(tmp_path / "labels.node"))
    assert len(out) == 2
    assert out.attributes[:, 0].tolist() == [20.0, 5.0]
