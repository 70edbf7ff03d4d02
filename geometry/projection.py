# -*- coding: utf-8 -*-
# Shapetools/geometry/projection.py

"""
Project: Shapetools
Date: 9/27/2026

Purpose:
--------
Map projection collaborator used by point selection and thinning.

A `PlaneArea` maps the rectangle spanned by two geographic corners (bottom-left and
top-right, in the target CRS) onto an image plane of `width` x `height` units:

   (left, top) = (0, 0)  ...........  (right, top) = (width, 0)
        :                                   :
   (left, bottom) = (0, height) ....  (width, height)

so y grows downwards, as on a raster image. The projection math itself is delegated
to `pyproj.Transformer`.

Main Tasks:
-----------
   1. `to_plane(lon, lat)` and `to_geographic(x, y)` conversions.
   2. Plane bounds `left`, `top`, `right`, `bottom`.
   3. `geographic_bbox(area)` returns the lon/lat extents of the whole plane.
"""

from typing import Tuple
import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError
from .errors import InvalidParameterError

__all__ = ["PlaneArea", "geographic_bbox"]

GEOGRAPHIC_CRS = "EPSG:4326"


class PlaneArea:
    """
    Parameters
    ----------
    crs : str or pyproj.CRS
        Target projection (EPSG code, PROJ string, WKT ...).
    bottom_left, top_right : (float, float)
        Geographic (lon, lat) corners of the mapped rectangle.
    width, height : float
        Image plane size.
    """

    def __init__(self, crs, bottom_left: Tuple[float, float], top_right: Tuple[float, float],
                 width: float, height: float):
        if width <= 0 or height <= 0:
            raise InvalidParameterError("Plane size must be positive",
                                        {"width": width, "height": height})

        try:
            self.crs = CRS.from_user_input(crs)
        except CRSError as e:
            raise InvalidParameterError("Unknown projection", {"crs": crs, "detail": str(e)})
        self._forward = Transformer.from_crs(GEOGRAPHIC_CRS, self.crs, always_xy=True)
        self._inverse = Transformer.from_crs(self.crs, GEOGRAPHIC_CRS, always_xy=True)

        self.width = float(width)
        self.height = float(height)
        self._wx1, self._wy1 = self._forward.transform(*bottom_left)
        self._wx2, self._wy2 = self._forward.transform(*top_right)

        dx = self._wx2 - self._wx1
        dy = self._wy2 - self._wy1
        if not (np.isfinite(dx) and np.isfinite(dy)) or dx == 0 or dy == 0:
            raise InvalidParameterError("Degenerate projection corners",
                                        {"bottom_left": tuple(bottom_left),
                                         "top_right": tuple(top_right)})

    @property
    def left(self) -> float:
        return 0.0

    @property
    def top(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return self.width

    @property
    def bottom(self) -> float:
        return self.height

    def to_plane(self, lon: float, lat: float) -> Tuple[float, float]:
        wx, wy = self._forward.transform(lon, lat)
        x = (wx - self._wx1) / (self._wx2 - self._wx1) * self.width
        y = (self._wy2 - wy) / (self._wy2 - self._wy1) * self.height
        return float(x), float(y)

    def to_geographic(self, x: float, y: float) -> Tuple[float, float]:
        wx = self._wx1 + x / self.width * (self._wx2 - self._wx1)
        wy = self._wy2 - y / self.height * (self._wy2 - self._wy1)
        lon, lat = self._inverse.transform(wx, wy)
        return float(lon), float(lat)

    def __repr__(self) -> str:
        return "PlaneArea(crs={!r}, width={:g}, height={:g})".format(
            self.crs.to_string(), self.width, self.height)


def geographic_bbox(area, divisions: int = 500) -> Tuple[float, float, float, float]:
    """
    Geographic extents of the plane of `area`.

    All four plane edges are sampled at `divisions` + 1 points and converted back to
    lon/lat; curved projections may bulge past their corners, so the corners alone
    are not enough.

    Returns
    -------
    (min_lon, min_lat, max_lon, max_lat)
    """
    if divisions < 1:
        raise InvalidParameterError("divisions must be positive", {"divisions": divisions})

    t = np.linspace(0.0, 1.0, int(divisions) + 1)
    xs = area.left + t * (area.right - area.left)
    ys = area.top + t * (area.bottom - area.top)

    lons = []
    lats = []
    for x, y in zip(xs, ys):
        for px, py in ((x, area.top), (x, area.bottom), (area.left, y), (area.right, y)):
            lon, lat = area.to_geographic(px, py)
            lons.append(lon)
            lats.append(lat)

    return float(min(lons)), float(min(lats)), float(max(lons)), float(max(lats))
