# -*- coding: utf-8 -*-
# Shapetools/geometry/api.py

"""
Project: Shapetools
Date: 10/3/2026

Purpose
-------
Thin, import-only facade for the geometry toolkit. Exposes the three helpers the mesh
tools need: (1) build a measured ring from raw coordinates, (2) construct a projected
image plane, and (3) thin a set of prioritized geographic points.

Main Tasks
----------
    1. `ring` -> close a coordinate sequence into a ClosedPolygon.
    2. `plane_area` -> PlaneArea from a CRS, a lon/lat box and a plane size.
    3. `select_points` -> run a PointSelector over (id, value, lon, lat) candidates.

Notes
-----
- Detailed behavior lives in `polygon`, `projection` and `selection`.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

# Internal: needed to implement helpers (not exported in __all__)
from .polygon import Polygon, ClosedPolygon
from .projection import PlaneArea
from .selection import PointSelector, DEFAULT_MIN_DISTANCE
from .errors import InvalidParameterError

__all__ = [
    "ring",
    "plane_area",
    "select_points",
]


# --------
# Helpers
# --------
def ring(points: Iterable[Tuple[float, float]], *, seed: Optional[int] = 0) -> ClosedPolygon:
    """
    Close a sequence of (x, y) pairs into a measured ring.

    Args
    ----
    points : iterable of (x, y)
        Ring vertices, closed or open.
    seed : int, optional
        Seed of the ring's interior point generator.
    """
    return Polygon(points).close(seed=seed)


def plane_area(crs, bbox: Sequence[float], size: Sequence[float]) -> PlaneArea:
    """
    Construct a PlaneArea.

    Args
    ----
    crs : str or pyproj.CRS
        Target projection.
    bbox : (lon1, lat1, lon2, lat2)
        Bottom-left and top-right geographic corners.
    size : (width, height)
        Image plane size.
    """
    if len(bbox) != 4:
        raise InvalidParameterError("bbox must have 4 values", {"bbox": tuple(bbox)})
    if len(size) != 2:
        raise InvalidParameterError("size must have 2 values", {"size": tuple(size)})
    lon1, lat1, lon2, lat2 = (float(v) for v in bbox)
    width, height = (float(v) for v in size)
    return PlaneArea(crs, (lon1, lat1), (lon2, lat2), width, height)


def select_points(
    area,
    candidates: Iterable[Tuple[int, float, float, float]],
    *,
    min_distance: float = DEFAULT_MIN_DISTANCE,
    border: float = 0.0,
    negate: bool = False,
) -> List[int]:
    """
    Thin `candidates` on the plane of `area`.

    Args
    ----
    area :
        Projection exposing `to_plane` and plane bounds.
    candidates : iterable of (id, value, lon, lat)
        Prioritized points.
    min_distance : float, optional
        Minimum plane distance between accepted points (default 10).
    border : float, optional
        Margin removed from every side of the plane before clipping (default 0).
    negate : bool, optional
        Prefer low values instead of high ones.

    Returns
    -------
    list of int
        Accepted ids in acceptance order.
    """
    selector = PointSelector(area, negate=negate)
    selector.min_distance = min_distance
    if border:
        selector.set_bounding_box(area.left + border, area.top + border,
                                  area.right - border, area.bottom - border)
    for point_id, value, lon, lat in candidates:
        selector.add(point_id, value, lon, lat)
    return selector.ids()
