import pytest

# A 0.1 x 0.1 degree square at the equator split into two triangles, plus a
# long sliver triangle reaching out to (5, 0).
SQUARE_NODE = """\
5 2 1 0
1 0 0 1
2 0.1 0 1
3 0.1 0.1 1
4 0 0.1 1
5 5 0 2
"""

SQUARE_POLY = """\
0 2 0 0
4 0
1 1 2
2 2 3
3 3 4
4 4 1
0
"""

SQUARE_ELE = """\
3 3 1
1 1 2 3 0
2 1 3 4 0
3 2 5 3 0
"""


@pytest.fixture
def square_pslg(tmp_path):
    """Base name of the triangulated square PSLG written to a temporary directory."""
    base = tmp_path / "square"
    (tmp_path / "square.node").write_text(SQUARE_NODE, encoding="utf-8")
    (tmp_path / "square.poly").write_text(SQUARE_POLY, encoding="utf-8")
    (tmp_path / "square.ele").write_text(SQUARE_ELE, encoding="utf-8")
    return str(base)
