# -*- coding: utf-8 -*-
# Shapetools/geometry/primitives/nodes.py

"""
Project: Shapetools
Date: 9/15/2026

Purpose:
--------
Registry assigning a stable 1-based ordinal to every distinct Point, together with the
owner id supplied on first registration (e.g. the number of the polygon that
contributed the point first).

Main Tasks:
-----------
   1. `add` assigns the next ordinal to an unseen point and is a no-op for known ones.
   2. Lookups by point (`number`, `id`) and by ordinal (`point`).
   3. Ordinal-ordered iteration for `.node` export.

Notes:
------
   - Lookups return sentinel values instead of raising: 0 for unknown points and
     Point(0, 0) for out-of-range ordinals. 0 is never a valid ordinal.
   - The owner id of a point is the one given at its first `add`; later ids are
     discarded (first owner wins).
"""

from typing import Dict, Iterator, List, Mapping, Tuple
from types import MappingProxyType
from .point import Point

__all__ = ["Nodes"]


class Nodes:
    """
    Canonical point registry.

    Attributes
    ----------
    _data : dict
        Point -> (ordinal, owner_id).
    _ordered : list
        Points indexed by ordinal - 1.
    """

    def __init__(self):
        self._data: Dict[Point, Tuple[int, int]] = {}
        self._ordered: List[Point] = []

    def add(self, point: Point, owner_id: int = 0) -> int:
        """
        Register `point` and return its ordinal.

        Parameters
        ----------
        point : Point
            Point to register.
        owner_id : int, optional
            Tag stored with the point on first registration only.

        Returns
        -------
        int
            The ordinal assigned now, or the one assigned when the point was first seen.
        """
        entry = self._data.get(point)
        if entry is not None:
            return entry[0]
        ordinal = len(self._ordered) + 1
        self._data[point] = (ordinal, int(owner_id))
        self._ordered.append(point)
        return ordinal

    def number(self, point: Point) -> int:
        """Ordinal of `point`, or 0 if it has not been added."""
        entry = self._data.get(point)
        return entry[0] if entry is not None else 0

    def id(self, point: Point) -> int:
        """Owner id of `point`, or 0 if it has not been added."""
        entry = self._data.get(point)
        return entry[1] if entry is not None else 0

    def point(self, ordinal: int) -> Point:
        """Point with the given ordinal, or Point(0, 0) when out of range."""
        if ordinal <= 0 or ordinal > len(self._ordered):
            return Point(0.0, 0.0)
        return self._ordered[ordinal - 1]

    def data(self) -> Mapping[Point, Tuple[int, int]]:
        """Read-only view of the Point -> (ordinal, owner_id) mapping."""
        return MappingProxyType(self._data)

    def items(self) -> Iterator[Tuple[int, Point, int]]:
        """Yield (ordinal, point, owner_id) in ordinal order."""
        for ordinal, pt in enumerate(self._ordered, start=1):
            yield ordinal, pt, self._data[pt][1]

    def __contains__(self, point) -> bool:
        return point in self._data

    def __len__(self) -> int:
        return len(self._ordered)
