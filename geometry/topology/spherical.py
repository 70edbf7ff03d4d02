# -*- coding: utf-8 -*-
# Shapetools/geometry/topology/spherical.py

"""
Project: Shapetools
Date: 9/18/2026

Purpose:
--------
Cartographic area of a lon/lat ring on a spherical earth.

Method:
-------
Every vertex is mapped with the Lambert cylindrical equal-area projection
(lambda, sin(phi)) and the shoelace formula is applied to the projected ring:
   - Crossing the 180 meridian is detected when consecutive projected longitudes lie on
     opposite sides of +-90 degrees; each crossing shifts all following longitudes by
     -+360 degrees, and the shift accumulates over the whole ring.
   - A ring that winds around a pole ends with a non-zero accumulated shift. The area
     is then completed by the path last point -> nearest pole -> pole at the first
     point's longitude -> first point.

Notes:
------
   - The pole correction is best-effort. It has been checked against rectangles,
     antimeridian-crossing strips and hemisphere caps, not against rings enclosing
     both poles.
"""

import numpy as np
from ._validation import _assert_xy
from ..primitives.point import EARTH_RADIUS_KM

__all__ = ["geo_area", "projected_offsets"]

_K90 = np.pi / 2
_K360 = 2 * np.pi


def projected_offsets(lon_rad: np.ndarray) -> np.ndarray:
    """
    Cumulative longitude offsets (radians) that unwrap 180-meridian crossings.

    Parameters
    ----------
    lon_rad : np.ndarray
        (N,) longitudes in radians along the ring.

    Returns
    -------
    np.ndarray
        (N,) offsets; offset[0] == 0 and offset[i] applies to vertex i.
    """
    if lon_rad.shape[0] == 0:
        return np.zeros(0)
    prev = lon_rad[:-1]
    cur = lon_rad[1:]
    jumps = np.where((prev < -_K90) & (cur > _K90), -_K360, 0.0)
    jumps = jumps + np.where((prev > _K90) & (cur < -_K90), _K360, 0.0)
    return np.concatenate(([0.0], np.cumsum(jumps)))


def geo_area(points_closed: np.ndarray, radius: float = EARTH_RADIUS_KM) -> float:
    """
    Spherical area of a closed lon/lat ring in km^2.

    Parameters
    ----------
    points_closed : np.ndarray
        (N, 2) closed ring of (lon, lat) degrees, last row equal to the first.
    radius : float, optional
        Sphere radius in km (default 6371.220).

    Returns
    -------
    float
        Non-negative area; 0 for rings of 2 rows or fewer.
    """
    _assert_xy(points_closed)
    if points_closed.shape[0] <= 2:
        return 0.0

    lon = np.radians(points_closed[:, 0])
    sinlat = np.sin(np.radians(points_closed[:, 1]))
    dx = projected_offsets(lon)

    # Shoelace over the unwrapped projected ring
    total = float(np.sum((lon[:-1] + dx[:-1]) * sinlat[1:] - (lon[1:] + dx[1:]) * sinlat[:-1]))

    shift = float(dx[-1])
    if shift != 0.0:
        x1 = float(lon[-1])
        y1 = float(sinlat[-1])
        pole = np.sin(-_K90 if y1 < 0 else _K90)
        x0 = float(lon[0])
        y0 = float(sinlat[0])
        # last point -> pole below/above it
        total += (x1 + shift) * pole - (x1 + shift) * y1
        # along the pole back to the first longitude
        total += (x1 + shift) * pole - x0 * pole
        # pole -> first point
        total += x0 * y0 - x0 * pole

    return radius * radius * abs(0.5 * total)
