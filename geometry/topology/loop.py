# -*- coding: utf-8 -*-
# Shapetools/geometry/topology/loop.py

"""
Project: Shapetools
Date: 9/16/2026

Purpose:
--------
Planar ring numerics behind ClosedPolygon:
   - closing a ring by repeating its first vertex,
   - signed and absolute (shoelace) area,
   - even-odd point containment.

Notes:
------
   - Pure NumPy; no logging or file I/O.
   - Closure is exact: rings built from Points close only when the first and last
     vertex are identical.
"""

import numpy as np
from ._validation import _assert_xy, _is_exactly_closed


def ensure_closed(ring: np.ndarray) -> np.ndarray:
    """
    Append the first vertex when the ring does not already end on it.

    Returns
    -------
    np.ndarray
        `ring` itself if it is closed or empty, else a new (N+1, 2) array.
    """
    _assert_xy(ring)
    if ring.shape[0] == 0 or _is_exactly_closed(ring):
        return ring
    return np.vstack((ring, ring[0]))


def signed_area(points_closed: np.ndarray) -> float:
    """
    Shoelace signed area for a closed ring (positive for CCW).

    Rings with fewer than 3 rows have zero area.
    """
    _assert_xy(points_closed)
    if points_closed.shape[0] < 3:
        return 0.0
    x = points_closed[:, 0]
    y = points_closed[:, 1]
    # Edges i -> i+1 over the explicit closure
    area2 = np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1])
    return 0.5 * float(area2)


def ring_area(points_closed: np.ndarray) -> float:
    """Absolute shoelace area, 0.5*|sum(x[i]*y[i+1] - x[i+1]*y[i])|."""
    return abs(signed_area(points_closed))


def contains_point(points_closed: np.ndarray, x: float, y: float) -> bool:
    """
    Even-odd ray casting test for a point against a closed ring.

    For each edge the horizontal ray through `y` is counted when
    min(y1, y2) < y <= max(y1, y2), the edge is not horizontal and the point lies
    left of or on the edge crossing. Shared vertices are therefore counted once.

    Parameters
    ----------
    points_closed : np.ndarray
        (N, 2) closed ring.
    x, y : float
        Query point.

    Returns
    -------
    bool
        True iff the crossing count is odd. Rings of 2 rows or fewer contain nothing.
    """
    _assert_xy(points_closed)
    if points_closed.shape[0] <= 2:
        return False

    x1 = points_closed[:-1, 0]
    y1 = points_closed[:-1, 1]
    x2 = points_closed[1:, 0]
    y2 = points_closed[1:, 1]

    dy = y2 - y1
    straddles = (y > np.minimum(y1, y2)) & (y <= np.maximum(y1, y2)) & (dy != 0.0)
    straddles &= x <= np.maximum(x1, x2)

    with np.errstate(divide="ignore", invalid="ignore"):
        xcross = np.where(dy != 0.0, (y - y1) * (x2 - x1) / np.where(dy != 0.0, dy, 1.0) + x1, np.inf)
    crossing = straddles & ((x1 == x2) | (x <= xcross))

    return bool(np.count_nonzero(crossing) % 2 == 1)
