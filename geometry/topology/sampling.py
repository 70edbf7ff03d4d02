# -*- coding: utf-8 -*-
# Shapetools/geometry/topology/sampling.py

"""
Project: Shapetools
Date: 9/21/2026

Purpose:
--------
Find some point strictly inside a closed ring. The point is used as a region marker for
an external triangulator, so it only has to be inside; it does not have to be central.

Method:
-------
The ring is scanned by consecutive vertex triples (p1, p2, p3). If the local part of
the ring is convex, a random point of the triangle p1-p2-p3 is likely to be inside the
ring; it is tested with the even-odd rule and the scan moves on when the test fails.
The scan wraps around the ring until a point is found or the budget is spent.

   - Nearly colinear triples are skipped: the shape index L/sqrt(A) (perimeter over the
     square root of the Heron area) must not exceed a limit. The limit starts at 10 and
     grows by 1% for every triangle examined, so the filter loosens over the whole search.
   - A point is drawn as p1 + a1*(p2-p1) + (1-a1)*a2*(p3-p1) with a1, a2 uniform in
     [0.2, 0.8]. Values near 0 or 1 put samples on the ring within rounding error.
"""

import math
from typing import Tuple
import numpy as np
from .loop import contains_point
from ._validation import _assert_xy
from ..errors import NoInteriorPointFound, RingStateError

__all__ = ["some_inside_point", "shape_index", "MAX_ITERATIONS"]

MAX_ITERATIONS = 10000
SHAPE_LIMIT = 10.0
SHAPE_GROWTH = 1.01
SAMPLE_RANGE = (0.2, 0.8)


def shape_index(p1: np.ndarray, p2: np.ndarray, p3: np.ndarray) -> float:
    """
    Perimeter over the square root of the area of triangle p1-p2-p3.

    Returns inf for degenerate (zero-area) triangles.
    """
    a = math.hypot(p1[0] - p2[0], p1[1] - p2[1])
    b = math.hypot(p2[0] - p3[0], p2[1] - p3[1])
    c = math.hypot(p1[0] - p3[0], p1[1] - p3[1])
    perimeter = a + b + c
    s = 0.5 * perimeter
    # Heron; clamp round-off below zero
    area = math.sqrt(max(s * (s - a) * (s - b) * (s - c), 0.0))
    if area == 0.0:
        return math.inf
    return perimeter / math.sqrt(area)


def some_inside_point(points_closed: np.ndarray,
                      rng: np.random.Generator,
                      *,
                      max_iterations: int = MAX_ITERATIONS) -> Tuple[float, float]:
    """
    Return (x, y) of a point inside the closed ring.

    Parameters
    ----------
    points_closed : np.ndarray
        (N, 2) closed ring (last row equals the first).
    rng : numpy.random.Generator
        Source of the sampling coefficients.
    max_iterations : int, optional
        Number of triangles that may be examined before giving up.

    Returns
    -------
    (float, float)
        A point for which `contains_point` is True.

    Raises
    ------
    RingStateError
        If the ring has fewer than 3 distinct vertices.
    NoInteriorPointFound
        If no inside point was found within `max_iterations` examined triangles.
    """
    _assert_xy(points_closed)
    n = points_closed.shape[0]
    if n < 4:
        raise RingStateError("Need at least 3 distinct vertices to find an inside point.",
                             {"rows": n})

    lo, hi = SAMPLE_RANGE
    shape_limit = SHAPE_LIMIT
    iterations = 0

    while True:
        for i in range(n - 2):
            iterations += 1
            if iterations > max_iterations:
                raise NoInteriorPointFound("Could not find a point inside polygon",
                                           {"vertices": n - 1, "iterations": max_iterations})

            p1 = points_closed[i]
            p2 = points_closed[i + 1]
            p3 = points_closed[i + 2]

            shape_limit *= SHAPE_GROWTH
            if not shape_index(p1, p2, p3) <= shape_limit:
                continue

            a1 = rng.uniform(lo, hi)
            a2 = rng.uniform(lo, hi)
            x = p1[0] + a1 * (p2[0] - p1[0]) + (1 - a1) * a2 * (p3[0] - p1[0])
            y = p1[1] + a1 * (p2[1] - p1[1]) + (1 - a1) * a2 * (p3[1] - p1[1])

            if contains_point(points_closed, x, y):
                return float(x), float(y)
