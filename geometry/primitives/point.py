# -*- coding: utf-8 -*-
# Shapetools/geometry/primitives/point.py

"""
Project: Shapetools
Date: 9/14/2026

Purpose:
--------
Immutable 2D coordinate value. A Point is unit-agnostic: callers use it either for
longitude/latitude degrees or for projected plane coordinates.

Conventions:
------------
   - Equality and ordering are lexicographic on (x, y); two points compare equal only
     when both coordinates match exactly.
   - Points are hashable and therefore usable as dict/set keys (see Nodes).
"""

import math
from dataclasses import dataclass

# Mean earth radius used by all geographic measures in the toolkit (km)
EARTH_RADIUS_KM = 6371.220

__all__ = ["Point", "EARTH_RADIUS_KM", "haversine"]


def haversine(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Great-circle distance in kilometres between two lon/lat positions (degrees).

    The asin argument is clamped to 1 so that antipodal round-off cannot produce NaN.
    """
    x1 = math.radians(lon1)
    y1 = math.radians(lat1)
    x2 = math.radians(lon2)
    y2 = math.radians(lat2)

    sindx = math.sin((x2 - x1) / 2)
    sindy = math.sin((y2 - y1) / 2)
    a = sindy * sindy + math.cos(y1) * math.cos(y2) * sindx * sindx
    c = 2 * math.asin(min(1.0, math.sqrt(a)))
    return EARTH_RADIUS_KM * c


@dataclass(frozen=True, order=True)
class Point:
    """
    Immutable (x, y) pair with planar and great-circle distances.

    Attributes
    ----------
    x : float
        Longitude in degrees, or plane x.
    y : float
        Latitude in degrees, or plane y.
    """

    x: float
    y: float

    def with_x(self, x: float) -> "Point":
        """Return a copy with a new x coordinate."""
        return Point(x, self.y)

    def with_y(self, y: float) -> "Point":
        """Return a copy with a new y coordinate."""
        return Point(self.x, y)

    def distance(self, other: "Point") -> float:
        """Planar Euclidean distance."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def geodistance(self, other: "Point") -> float:
        """Great-circle distance in km, treating (x, y) as (lon, lat) degrees."""
        return haversine(self.x, self.y, other.x, other.y)

    def __iter__(self):
        yield self.x
        yield self.y
