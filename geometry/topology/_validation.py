# -*- coding: utf-8 -*-
# Shapetools/geometry/topology/_validation.py

"""
Project: Shapetools
Date: 9/16/2026

Purpose:
--------
Shared ring checks, so that every topology module accepts the same array layout and
agrees on what a closed ring is.

Main Tasks:
   1. Convert point sequences to (N, 2) float64 arrays.
   2. Reject arrays that are not (N, 2).
   3. Provide the exact closure predicate used by ring closing.
"""

import numpy as np


def _as_xy(points) -> np.ndarray:
    """
    Convert a sequence of (x, y) pairs (Points, tuples or an array) into a float64 (N, 2) array.

    An empty sequence becomes an empty (0, 2) array.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
    else:
        arr = np.asarray([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    return arr


def _assert_xy(ring: np.ndarray) -> None:
    """
    Raises
    ------
    ValueError
        If `ring` is missing or not an (N, 2) array of vertices.
    """
    if ring is None:
        raise ValueError("Ring vertices are missing.")
    if ring.ndim != 2 or ring.shape[1] != 2:
        raise ValueError("Ring vertices must form an (N, 2) array, got shape {}.".format(ring.shape))


def _is_exactly_closed(ring: np.ndarray) -> bool:
    """
    True when the last vertex repeats the first one exactly.

    An empty ring is not closed; a single vertex is.
    """
    if ring.shape[0] == 0:
        return False
    return bool(np.array_equal(ring[0], ring[-1]))
