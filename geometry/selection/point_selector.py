# -*- coding: utf-8 -*-
# Shapetools/geometry/selection/point_selector.py

"""
Project: Shapetools
Date: 9/26/2026

Purpose:
--------
Priority-based spatial thinning of labelled geographic points. Typical use is picking
which place names to draw on a map: the most important places win, and no two chosen
places are closer than a minimum distance on the projected plane.

   selector = PointSelector(area)
   selector.min_distance = 20
   selector.add(1, 224400, 24, 60)   # Espoo
   selector.add(2, 574700, 25, 60)   # Helsinki
   for point_id in selector:
       ...

Main Tasks:
-----------
   1. Project and clip candidates against a bounding box on the plane.
   2. Reduce lazily: walk candidates by descending value and accept a candidate only if
      no accepted point lies closer than `min_distance`.
   3. Cache the reduction until the next successful `add`.

Notes:
------
   - Equal values keep their insertion order.
   - With `negate=True` values are negated, so low values win.
"""

import logging
import math
from typing import Iterator, List, Optional, Tuple
from .near_tree import NearTree
from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)

__all__ = ["PointSelector", "DEFAULT_MIN_DISTANCE"]

DEFAULT_MIN_DISTANCE = 10.0


class PointSelector:
    """
    Parameters
    ----------
    projection :
        Object exposing `to_plane(lon, lat) -> (x, y)` and plane bounds
        `left`, `top`, `right`, `bottom` (see `geometry.projection.PlaneArea`).
    negate : bool, optional
        Sort ascending instead of descending.

    Attributes
    ----------
    bounding_box : tuple
        (x1, y1, x2, y2) acceptance rectangle, inclusive on all sides.
    """

    def __init__(self, projection, negate: bool = False):
        self._projection = projection
        self._negate = bool(negate)
        self._min_distance = DEFAULT_MIN_DISTANCE
        self.bounding_box: Tuple[float, float, float, float] = (
            float(projection.left), float(projection.top),
            float(projection.right), float(projection.bottom),
        )
        # (sort key, id, x, y)
        self._candidates: List[Tuple[float, int, float, float]] = []
        self._results: Optional[List[int]] = []

    @property
    def min_distance(self) -> float:
        return self._min_distance

    @min_distance.setter
    def min_distance(self, value: float) -> None:
        value = float(value)
        if value < 0:
            raise InvalidParameterError("Minimum distance must be nonnegative",
                                        {"min_distance": value})
        self._min_distance = value
        self._results = None

    def set_bounding_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Override the acceptance rectangle (x1 <= x <= x2, y1 <= y <= y2)."""
        self.bounding_box = (float(x1), float(y1), float(x2), float(y2))

    def add(self, point_id: int, value: float, lon: float, lat: float) -> bool:
        """
        Add a candidate.

        Returns
        -------
        bool
            False (and nothing changes) when the projected point is not finite or
            outside the box.
        """
        x, y = self._projection.to_plane(lon, lat)
        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        x1, y1, x2, y2 = self.bounding_box
        if x < x1 or x > x2 or y < y1 or y > y2:
            return False

        key = -float(value) if self._negate else float(value)
        self._candidates.append((key, int(point_id), float(x), float(y)))
        self._results = None
        return True

    def _reduce(self) -> List[int]:
        if self._results is not None:
            return self._results

        # sorted() is stable: equal keys stay in insertion order
        ordered = sorted(self._candidates, key=lambda c: -c[0])
        tree = NearTree()
        results = []
        for _key, point_id, x, y in ordered:
            if tree.has_within(x, y, self._min_distance):
                continue
            results.append(point_id)
            tree.insert(x, y)

        logger.debug("[selector] Accepted %d of %d candidates (min distance %g)",
                     len(results), len(self._candidates), self._min_distance)
        self._results = results
        return results

    def ids(self) -> List[int]:
        """Accepted ids in acceptance order."""
        return list(self._reduce())

    def empty(self) -> bool:
        return not self._reduce()

    def size(self) -> int:
        return len(self._reduce())

    def candidates(self) -> int:
        """Number of candidates that passed the bounding box."""
        return len(self._candidates)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._reduce()))
