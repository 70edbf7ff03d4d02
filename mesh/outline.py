# -*- coding: utf-8 -*-
# Shapetools/mesh/outline.py

"""
Project: Shapetools
Date: 10/7/2026

Purpose:
--------
Trace the outline of a set of triangles (or any edge soup) as rings.

Edges are toggled: adding an edge that is already present removes it. Every interior
edge of a triangulated region is shared by exactly two triangles, so it cancels out
and only the boundary survives. The surviving edges are then merged into maximal
chains with `shapely.ops.linemerge`.

Notes:
------
   - Edges are undirected and keyed on exact coordinates.
   - A closed chain is returned without its repeated end point; `Polygon.close()`
     adds it back.
   - Zero-length edges are ignored.
"""

from typing import Dict, Iterable, List, Tuple
import logging
from shapely.geometry import LineString, MultiLineString
from shapely.ops import linemerge
from geometry.primitives import Point
from geometry.polygon import Polygon

logger = logging.getLogger(__name__)

__all__ = ["EdgeTree"]

_Key = Tuple[Point, Point]


class EdgeTree:
    """Set of undirected coordinate edges with toggle-on-add semantics."""

    def __init__(self):
        # dict keeps insertion order, so tracing is reproducible
        self._edges: Dict[_Key, None] = {}

    @staticmethod
    def _key(a: Point, b: Point) -> _Key:
        return (a, b) if a <= b else (b, a)

    def add(self, a: Point, b: Point) -> bool:
        """
        Toggle the edge a-b.

        Returns
        -------
        bool
            True if the edge is present after the call.
        """
        if a == b:
            return False
        key = self._key(a, b)
        if key in self._edges:
            del self._edges[key]
            return False
        self._edges[key] = None
        return True

    def add_triangle(self, p1: Point, p2: Point, p3: Point) -> None:
        self.add(p1, p2)
        self.add(p2, p3)
        self.add(p3, p1)

    def add_ring(self, points: Iterable[Point]) -> None:
        """Toggle every edge of a closed sequence of points."""
        pts = list(points)
        for a, b in zip(pts, pts[1:] + pts[:1]):
            self.add(a, b)

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, edge) -> bool:
        a, b = edge
        return self._key(a, b) in self._edges

    def rings(self) -> List[Polygon]:
        """
        Merge the surviving edges into chains.

        Returns
        -------
        list of Polygon
            One open ring builder per chain.
        """
        if not self._edges:
            return []

        lines = MultiLineString([((a.x, a.y), (b.x, b.y)) for a, b in self._edges])
        merged = linemerge(lines)
        if isinstance(merged, LineString):
            chains = [merged]
        else:
            chains = list(merged.geoms)

        out = []
        for chain in chains:
            coords = list(chain.coords)
            if len(coords) > 2 and coords[0] == coords[-1]:
                coords = coords[:-1]
            out.append(Polygon(Point(float(x), float(y)) for x, y in coords))

        logger.debug("[outline] Traced %d rings from %d edges", len(out), len(self._edges))
        return out
