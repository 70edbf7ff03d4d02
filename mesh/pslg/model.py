# -*- coding: utf-8 -*-
# Shapetools/mesh/pslg/model.py

"""
Project: Shapetools
Date: 10/4/2026

Purpose:
--------
In-memory records of the PSLG file family used by the Triangle mesh generator:

   .node  ->  NodeData  (vertices, attributes, boundary markers)
   .poly  ->  PolyData  (segments, holes, regions, optionally embedded vertices)
   .ele   ->  EleData   (triangles and their attributes)

Arrays are NumPy; record indices are kept as read so that segment and triangle
endpoints can be resolved against them.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
import numpy as np
from geometry.primitives import Point, Nodes

__all__ = ["NodeData", "PolyData", "EleData"]


def _empty(cols: int, dtype=np.float64) -> np.ndarray:
    return np.empty((0, cols), dtype=dtype)


@dataclass
class NodeData:
    """
    Attributes
    ----------
    index : np.ndarray
        (N,) int record numbers.
    xy : np.ndarray
        (N, 2) float64 coordinates.
    attributes : np.ndarray
        (N, A) float64 attribute columns.
    markers : np.ndarray or None
        (N,) int boundary markers, None when the file has no marker column.
    """
    index: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    xy: np.ndarray = field(default_factory=lambda: _empty(2))
    attributes: np.ndarray = field(default_factory=lambda: _empty(0))
    markers: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return int(self.xy.shape[0])

    @property
    def n_attributes(self) -> int:
        return int(self.attributes.shape[1])

    def lookup(self) -> Dict[int, Point]:
        """Record number -> Point."""
        return {int(i): Point(float(x), float(y)) for i, (x, y) in zip(self.index, self.xy)}

    @classmethod
    def from_nodes(cls, nodes: Nodes, *, with_owner: bool = False) -> "NodeData":
        """
        Build from a Nodes registry, in ordinal order.

        With `with_owner` the owner id becomes the single attribute column.
        """
        index = []
        xy = []
        owners = []
        for ordinal, pt, owner in nodes.items():
            index.append(ordinal)
            xy.append((pt.x, pt.y))
            owners.append(owner)
        n = len(index)
        if with_owner:
            attrs = np.asarray(owners, dtype=np.float64).reshape(n, 1)
        else:
            attrs = np.empty((n, 0), dtype=np.float64)
        return cls(index=np.asarray(index, dtype=np.int64),
                   xy=np.asarray(xy, dtype=np.float64).reshape(n, 2),
                   attributes=attrs)


@dataclass
class PolyData:
    """
    Attributes
    ----------
    segments : np.ndarray
        (E, 2) int endpoint record numbers.
    segment_markers : np.ndarray or None
        (E,) int, None when absent.
    holes : np.ndarray
        (H, 2) float64 hole points.
    regions : np.ndarray
        (R, 3) float64 rows of (x, y, attribute).
    region_max_area : np.ndarray or None
        (R,) float64 area constraints, None when no region line carries one.
    nodes : NodeData or None
        Vertices embedded in the .poly file (None when they live in a .node file).
    """
    segments: np.ndarray = field(default_factory=lambda: _empty(2, np.int64))
    segment_markers: Optional[np.ndarray] = None
    holes: np.ndarray = field(default_factory=lambda: _empty(2))
    regions: np.ndarray = field(default_factory=lambda: _empty(3))
    region_max_area: Optional[np.ndarray] = None
    nodes: Optional[NodeData] = None


@dataclass
class EleData:
    """
    Attributes
    ----------
    index : np.ndarray
        (T,) int record numbers.
    triangles : np.ndarray
        (T, 3) int vertex record numbers.
    attributes : np.ndarray
        (T, A) float64; the first column is the region attribute when present.
    """
    index: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    triangles: np.ndarray = field(default_factory=lambda: _empty(3, np.int64))
    attributes: np.ndarray = field(default_factory=lambda: _empty(0))

    def __len__(self) -> int:
        return int(self.triangles.shape[0])

    def regions(self) -> np.ndarray:
        """(T,) int region attribute, zeros when the file has none."""
        if self.attributes.shape[1] == 0:
            return np.zeros(len(self), dtype=np.int64)
        return self.attributes[:, 0].astype(np.int64)
