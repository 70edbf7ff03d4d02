import math
import numpy as np
import pytest
from geometry.primitives import Point, EARTH_RADIUS_KM
from geometry.polygon import Polygon, ClosedPolygon
from geometry.errors import NoInteriorPointFound, RingStateError
from geometry.api import ring

R2 = EARTH_RADIUS_KM * EARTH_RADIUS_KM

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
L_SHAPE = [(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)]


def test_builder_has_no_measurements():
    poly = Polygon(UNIT_SQUARE)
    for name in ("area", "geoarea", "is_inside", "some_inside_point"):
        assert not hasattr(poly, name)


def test_builder_add_clear_empty():
    poly = Polygon()
    assert poly.empty()
    poly.add(Point(1, 2))
    poly.add((3, 4))
    assert poly.data() == (Point(1, 2), Point(3, 4))
    poly.clear()
    assert poly.empty()
    assert len(poly) == 0


def test_close_appends_first_point_and_keeps_builder():
    poly = Polygon(UNIT_SQUARE)
    closed = poly.close()
    assert len(poly) == 4
    assert len(closed) == 5
    assert closed.data()[0] == closed.data()[-1] == Point(0, 0)
    assert closed.close() is closed


def test_close_already_closed_ring():
    closed = Polygon(UNIT_SQUARE + [(0, 0)]).close()
    assert len(closed) == 5


def test_closed_ring_is_read_only():
    closed = Polygon(UNIT_SQUARE).close()
    with pytest.raises(ValueError):
        closed.xy[0, 0] = 5.0


def test_unit_square_area():
    assert Polygon(UNIT_SQUARE).close().area() == 1.0
    # orientation does not matter
    assert Polygon(UNIT_SQUARE[::-1]).close().area() == 1.0


def test_l_shape_area():
    assert Polygon(L_SHAPE).close().area() == pytest.approx(7.0)


def test_degenerate_rings():
    for pts in ([], [(1, 1)], [(1, 1), (2, 3)]):
        closed = Polygon(pts).close()
        assert closed.area() == 0.0
        assert closed.geoarea() == 0.0
        assert not closed.is_inside(Point(1, 1))


def test_geoarea_small_rectangle():
    closed = Polygon(UNIT_SQUARE).close()
    expected = R2 * math.radians(1.0) * math.sin(math.radians(1.0))
    assert closed.geoarea() == pytest.approx(expected, rel=1e-12)


def test_geoarea_across_antimeridian():
    closed = Polygon([(179, 0), (-179, 0), (-179, 1), (179, 1)]).close()
    expected = R2 * math.radians(2.0) * math.sin(math.radians(1.0))
    assert closed.geoarea() == pytest.approx(expected, rel=1e-9)


def test_geoarea_northern_hemisphere():
    ring = [(lon, 0.0) for lon in range(-180, 180)]
    closed = Polygon(ring).close()
    assert closed.geoarea() == pytest.approx(2 * math.pi * R2, rel=1e-9)


@pytest.mark.parametrize("lat", [60.0, -10.0])
def test_geoarea_polar_caps(lat):
    ring = [(lon, lat) for lon in range(-180, 180)]
    closed = Polygon(ring).close()
    expected = 2 * math.pi * R2 * (1 - math.sin(math.radians(abs(lat))))
    assert closed.geoarea() == pytest.approx(expected, rel=1e-9)


def test_geoarea_is_nonnegative_both_orientations():
    ring = [(10, 50), (20, 50), (20, 60), (10, 60)]
    a = Polygon(ring).close().geoarea()
    b = Polygon(ring[::-1]).close().geoarea()
    assert a > 0
    assert a == pytest.approx(b)


def test_containment():
    square = Polygon(UNIT_SQUARE).close()
    assert square.is_inside(Point(0.5, 0.5))
    assert square.is_inside((0.25, 0.75))
    assert not square.is_inside(Point(10, 10))
    assert not square.is_inside(Point(-0.5, 0.5))

    ell = Polygon(L_SHAPE).close()
    assert ell.is_inside(Point(0.5, 3.5))
    assert ell.is_inside(Point(3.5, 0.5))
    assert not ell.is_inside(Point(3, 3))


def test_some_inside_point_triangle():
    tri = Polygon([(0, 0), (1, 0), (0, 1)]).close()
    p = tri.some_inside_point()
    assert tri.is_inside(p)
    assert p.x > 0 and p.y > 0 and p.x + p.y < 1


def test_some_inside_point_concave_and_thin():
    for ring in (L_SHAPE, [(0, 0), (100, 0), (100, 1), (0, 1)]):
        closed = Polygon(ring).close(seed=3)
        assert closed.is_inside(closed.some_inside_point())


def test_some_inside_point_is_reproducible():
    a = Polygon(L_SHAPE).close(seed=42).some_inside_point()
    b = Polygon(L_SHAPE).close(seed=42).some_inside_point()
    assert a == b

    rng1 = np.random.default_rng(5)
    rng2 = np.random.default_rng(5)
    closed = Polygon(L_SHAPE).close()
    assert closed.some_inside_point(rng1) == closed.some_inside_point(rng2)


def test_some_inside_point_needs_three_vertices():
    with pytest.raises(RingStateError):
        Polygon([(0, 0), (1, 1)]).close().some_inside_point()


def test_some_inside_point_gives_up_on_colinear_ring():
    closed = ClosedPolygon([(0, 0), (1, 1), (2, 2)])
    with pytest.raises(NoInteriorPointFound) as info:
        closed.some_inside_point(max_iterations=50)
    assert "iterations=50" in str(info.value)


def test_ring_facade():
    closed = ring([(0, 0), (2, 0), (2, 2), (0, 2)], seed=9)
    assert isinstance(closed, ClosedPolygon)
    assert closed.area() == 4.0
    assert closed.some_inside_point() == ring([(0, 0), (2, 0), (2, 2), (0, 2)], seed=9).some_inside_point()
