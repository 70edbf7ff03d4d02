# -*- coding: utf-8 -*-
# Shapetools/geometry/polygon.py

"""
Project: Shapetools
Date: 9/22/2026

Purpose:
--------
Ring types used by the mesh tools. A ring is built point by point as an open `Polygon`
and measured only after an explicit `close()`, which returns a `ClosedPolygon`:

   Polygon (open, mutable)  --close()-->  ClosedPolygon (closed, read-only)

Closing appends the first point when the last one differs. The open builder is left
untouched, so iterating a Polygon never depends on whether it was measured before.

Main Tasks:
-----------
   1. Build rings (`add`, `clear`, `empty`, `data`).
   2. Measure closed rings: planar area, spherical area, containment.
   3. Produce one guaranteed-interior sample point per ring for region markers.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Union
import numpy as np
from .primitives.point import Point
from .topology._validation import _as_xy
from .topology.loop import ensure_closed, ring_area, contains_point
from .topology.spherical import geo_area
from .topology.sampling import some_inside_point as _some_inside_point, MAX_ITERATIONS

__all__ = ["Polygon", "ClosedPolygon"]

PointLike = Union[Point, Tuple[float, float]]


def _to_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


class Polygon:
    """
    Open ring builder.

    Parameters
    ----------
    points : iterable of Point or (x, y), optional
        Initial vertices.
    """

    def __init__(self, points: Optional[Iterable[PointLike]] = None):
        self._points: List[Point] = []
        if points is not None:
            for p in points:
                self.add(p)

    def add(self, point: PointLike) -> None:
        self._points.append(_to_point(point))

    def clear(self) -> None:
        self._points.clear()

    def empty(self) -> bool:
        return not self._points

    def data(self) -> Tuple[Point, ...]:
        """Read-only view of the vertices as stored (not closed)."""
        return tuple(self._points)

    def close(self, *, seed: Optional[int] = 0) -> "ClosedPolygon":
        """
        Return the closed ring.

        Parameters
        ----------
        seed : int or None, optional
            Seed for the ring's own random generator used by `some_inside_point`.
        """
        return ClosedPolygon(self._points, seed=seed)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self) -> str:
        return "Polygon(n={})".format(len(self._points))


class ClosedPolygon:
    """
    Closed, read-only ring with measurements.

    Parameters
    ----------
    points : iterable of Point or (x, y), or an (N, 2) array
        Ring vertices; the first vertex is appended when the ring is open.
    seed : int or None, optional
        Seed of the generator owned by this ring (default 0, reproducible).

    Attributes
    ----------
    xy : np.ndarray
        Read-only (N, 2) float64 array, last row equal to the first (unless empty).
    """

    def __init__(self, points, *, seed: Optional[int] = 0):
        arr = np.array(_as_xy(points), dtype=np.float64)
        arr = ensure_closed(arr)
        arr.setflags(write=False)
        self.xy = arr
        self._rng = np.random.default_rng(seed)

    def close(self, **_kwargs) -> "ClosedPolygon":
        """Closing a closed ring is a no-op."""
        return self

    def data(self) -> Tuple[Point, ...]:
        return tuple(Point(float(x), float(y)) for x, y in self.xy)

    def empty(self) -> bool:
        return self.xy.shape[0] == 0

    def area(self) -> float:
        """Planar area (shoelace); 0 for 2 stored points or fewer."""
        return ring_area(self.xy)

    def geoarea(self) -> float:
        """Spherical area in km^2 treating vertices as (lon, lat) degrees."""
        return geo_area(self.xy)

    def is_inside(self, point: PointLike) -> bool:
        """Even-odd containment test."""
        p = _to_point(point)
        return contains_point(self.xy, p.x, p.y)

    def some_inside_point(self,
                          rng: Optional[np.random.Generator] = None,
                          *,
                          max_iterations: int = MAX_ITERATIONS) -> Point:
        """
        Return a point for which `is_inside` holds.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Generator to draw from; defaults to the ring's own seeded generator.
        max_iterations : int, optional
            Budget of examined triangles (default 10000).

        Raises
        ------
        RingStateError
            Fewer than 3 distinct vertices.
        NoInteriorPointFound
            Budget exhausted.
        """
        x, y = _some_inside_point(self.xy, rng if rng is not None else self._rng,
                                  max_iterations=max_iterations)
        return Point(x, y)

    def __len__(self) -> int:
        return int(self.xy.shape[0])

    def __iter__(self) -> Iterator[Point]:
        return iter(self.data())

    def __repr__(self) -> str:
        return "ClosedPolygon(n={})".format(len(self))
