import numpy as np
import pytest
from geometry.primitives import Point, Nodes
from mesh.pslg import (NodeData, PolyData, EleData, PSLGFormatError,
                       parse_node, parse_poly, parse_ele, node_text, poly_text, ele_text,
                       read_node, read_poly, read_ele, write_node, write_poly, write_ele)

NODE_TEXT = """\
# vertices of a unit square
4 2 1 0
1   0.0 0.0  7
2   1.0 0.0  7
3   1.0 1.0  8   # inline comment

4   0.0 1.0  8
"""

POLY_TEXT = """\
0 2 0 0
4 0
1 1 2
2 2 3
3 3 4
4 4 1
1
1 0.5 0.5
2
1 0.25 0.25 1
2 0.75 0.75 2 0.01
"""

ELE_TEXT = """\
2 3 1
1 1 2 3 0
2 1 3 4 5
"""


def test_parse_node():
    data = parse_node(NODE_TEXT)
    assert len(data) == 4
    assert data.n_attributes == 1
    assert data.markers is None
    assert data.index.tolist() == [1, 2, 3, 4]
    assert data.xy[2].tolist() == [1.0, 1.0]
    assert data.attributes[:, 0].tolist() == [7.0, 7.0, 8.0, 8.0]
    assert data.lookup()[4] == Point(0.0, 1.0)


def test_parse_node_zero_based_with_markers():
    data = parse_node("2 2 0 1\n0 5 6 1\n1 7 8 0\n")
    assert data.index.tolist() == [0, 1]
    assert data.markers.tolist() == [1, 0]
    assert data.n_attributes == 0


def test_parse_poly():
    poly = parse_poly(POLY_TEXT)
    assert poly.nodes is None
    assert poly.segments.tolist() == [[1, 2], [2, 3], [3, 4], [4, 1]]
    assert poly.holes.tolist() == [[0.5, 0.5]]
    assert poly.regions.tolist() == [[0.25, 0.25, 1.0], [0.75, 0.75, 2.0]]
    assert np.isnan(poly.region_max_area[0])
    assert poly.region_max_area[1] == 0.01


def test_parse_poly_without_regions():
    poly = parse_poly("0 2 0 0\n1 0\n1 1 2\n0\n")
    assert poly.regions.shape == (0, 3)
    assert poly.region_max_area is None


def test_parse_poly_with_embedded_nodes():
    text = "2 2 0 0\n1 0 0\n2 1 1\n1 0\n1 1 2\n0\n"
    poly = parse_poly(text)
    assert len(poly.nodes) == 2
    with pytest.raises(PSLGFormatError):
        parse_poly(text, allow_nodes=False)


def test_parse_ele():
    ele = parse_ele(ELE_TEXT)
    assert len(ele) == 2
    assert ele.triangles.tolist() == [[1, 2, 3], [1, 3, 4]]
    assert ele.regions().tolist() == [0, 5]


def test_parse_ele_without_attributes_has_region_zero():
    ele = parse_ele("1 3 0\n1 1 2 3\n")
    assert ele.regions().tolist() == [0]


@pytest.mark.parametrize("text", [
    "3 2 0 0\n1 0 0\n2 1 1\n",              # fewer records than announced
    "2 2 0 0\n1 0 0\n3 1 1\n",              # numbering gap
    "1 2 0 0\n2 0 0\n",                     # first index must be 0 or 1
    "1 3 0 0\n1 0 0 0\n",                   # dimension
    "1 2 0\n1 0 0\n",                       # header fields
    "1 2 1 0\n1 0 0\n",                     # missing attribute column
    "1 2 0 0\n1 0 abc\n",                   # not a number
    "1 2 0 2\n1 0 0 0\n",                   # marker flag
])
def test_parse_node_rejects_malformed(text):
    with pytest.raises(PSLGFormatError):
        parse_node(text)


def test_parse_poly_rejects_edges_out_of_sequence():
    text = "0 2 0 0\n2 0\n1 1 2\n3 2 3\n0\n"
    with pytest.raises(PSLGFormatError) as info:
        parse_poly(text, "coast.poly")
    msg = str(info.value)
    assert "sequentially" in msg
    assert "coast.poly" in msg
    assert "line=4" in msg


def test_parse_ele_requires_three_nodes():
    with pytest.raises(PSLGFormatError):
        parse_ele("1 6 0\n1 1 2 3 4 5 6\n")


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_node("")


def test_node_text_uses_round_trip_floats():
    xy = np.array([[24.001, 60.0], [0.1 + 0.2, -1e-300]])
    data = NodeData(index=np.array([1, 2]), xy=xy, attributes=np.array([[3.0], [0.5]]))
    text = node_text(data)
    assert text.splitlines()[0] == "2 2 1 0"
    assert text.splitlines()[1] == "1\t24.001\t60\t3"
    back = parse_node(text)
    assert back.xy.tolist() == xy.tolist()
    assert back.attributes.tolist() == [[3.0], [0.5]]


def test_node_text_from_registry():
    nodes = Nodes()
    nodes.add(Point(2.5, 1.0), 4)
    nodes.add(Point(-1.0, 3.0), 9)
    text = node_text(NodeData.from_nodes(nodes, with_owner=True))
    assert text == "2 2 1 0\n1\t2.5\t1\t4\n2\t-1\t3\t9\n"
    assert node_text(NodeData.from_nodes(nodes)).splitlines()[0] == "2 2 0 0"


def test_poly_text_layout():
    poly = PolyData(segments=np.array([[1, 2], [2, 3], [3, 1]]),
                    regions=np.array([[0.3, 0.3, 1.0]]))
    assert poly_text(poly) == "0 2 0 0\n3 0\n1\t1\t2\n2\t2\t3\n3\t3\t1\n0\n1\n1\t0.3\t0.3\t1\n"
    # no region section when there are no regions
    assert poly_text(PolyData()) == "0 2 0 0\n0 0\n0\n"


def test_ele_text_layout():
    ele = EleData(index=np.array([1]), triangles=np.array([[4, 5, 6]]),
                  attributes=np.array([[2.0]]))
    assert ele_text(ele) == "1 3 1\n1\t4\t5\t6\t2\n"


def test_file_round_trip(tmp_path):
    base = str(tmp_path / "out" / "square")
    write_node(base + ".node", parse_node(NODE_TEXT))
    write_poly(base + ".poly", parse_poly(POLY_TEXT))
    write_ele(base + ".ele", parse_ele(ELE_TEXT))

    nodes = read_node(base + ".node")
    assert nodes.index.tolist() == [1, 2, 3, 4]
    assert nodes.xy.tolist() == [[0, 0], [1, 0], [1, 1], [0, 1]]
    assert nodes.attributes[:, 0].tolist() == [7, 7, 8, 8]

    poly = read_poly(base + ".poly", allow_nodes=False)
    assert poly.segments.tolist() == [[1, 2], [2, 3], [3, 4], [4, 1]]
    assert poly.regions[:, 2].tolist() == [1, 2]
    assert poly.region_max_area[1] == 0.01

    ele = read_ele(base + ".ele")
    assert ele.regions().tolist() == [0, 5]
