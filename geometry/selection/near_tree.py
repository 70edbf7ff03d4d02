# -*- coding: utf-8 -*-
# Shapetools/geometry/selection/near_tree.py

"""
Project: Shapetools
Date: 9/25/2026

Purpose:
--------
Incremental "is any accepted point closer than d?" index for plane points.

`scipy.spatial.cKDTree` is static, so points are kept in two parts:
   - a tree over everything inserted before the last rebuild,
   - a small pending block checked by brute force.
The tree is rebuilt once the pending block reaches `rebuild_every` points.

Notes:
------
   - `has_within(x, y, d)` is strict: a point at exactly distance d does not count.
   - d == 0 never matches, so a zero minimum distance accepts duplicates.
"""

from typing import Optional, Tuple
import numpy as np
from scipy.spatial import cKDTree

__all__ = ["NearTree"]


class NearTree:
    """
    Parameters
    ----------
    rebuild_every : int, optional
        Pending block size that triggers a tree rebuild (default 256).
    """

    def __init__(self, rebuild_every: int = 256):
        self._rebuild_every = max(1, int(rebuild_every))
        self._indexed = np.empty((0, 2), dtype=np.float64)
        self._tree: Optional[cKDTree] = None
        self._pending = []

    def __len__(self) -> int:
        return self._indexed.shape[0] + len(self._pending)

    def insert(self, x: float, y: float) -> None:
        self._pending.append((float(x), float(y)))
        if len(self._pending) >= self._rebuild_every:
            self._rebuild()

    def _rebuild(self) -> None:
        if self._pending:
            block = np.asarray(self._pending, dtype=np.float64)
            self._indexed = np.vstack((self._indexed, block))
            self._pending = []
        self._tree = cKDTree(self._indexed) if self._indexed.shape[0] else None

    def nearest_within(self, x: float, y: float, d: float) -> Optional[Tuple[float, float]]:
        """
        Return some inserted point strictly closer than `d` to (x, y), or None.

        Parameters
        ----------
        x, y : float
            Query point.
        d : float
            Search radius (exclusive).
        """
        if d <= 0.0:
            return None
        q = np.array([x, y], dtype=np.float64)

        if self._tree is not None:
            # query_ball_point is inclusive, filter the boundary out
            idx = self._tree.query_ball_point(q, r=d)
            if idx:
                cand = self._indexed[idx]
                dist = np.hypot(cand[:, 0] - q[0], cand[:, 1] - q[1])
                hit = np.flatnonzero(dist < d)
                if hit.size:
                    px, py = cand[hit[0]]
                    return float(px), float(py)

        if self._pending:
            block = np.asarray(self._pending, dtype=np.float64)
            dist = np.hypot(block[:, 0] - q[0], block[:, 1] - q[1])
            hit = np.flatnonzero(dist < d)
            if hit.size:
                px, py = block[hit[0]]
                return float(px), float(py)

        return None

    def has_within(self, x: float, y: float, d: float) -> bool:
        return self.nearest_within(x, y, d) is not None
