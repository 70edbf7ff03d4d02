# -*- coding: utf-8 -*-
# Shapetools/mesh/thinning.py

"""
Project: Shapetools
Date: 10/11/2026

Purpose:
--------
Thin a set of prioritized points so that no two kept points are closer than a minimum
distance on a projected image plane (e.g. choosing which places to label on a map).

Inputs/Contracts:
-----------------
   - Points come from a `.node` file: x = longitude, y = latitude, the first attribute
     column is the priority value.
   - The output `.node` lists the accepted points in acceptance order, numbered from 1,
     with the priority value as the single attribute.
"""

from typing import List
import logging
import numpy as np
from geometry.api import select_points
from geometry.projection import geographic_bbox
from geometry.selection import DEFAULT_MIN_DISTANCE
from .pslg import NodeData, PSLGFormatError, read_node, write_node

logger = logging.getLogger(__name__)

__all__ = ["thin_nodes", "run_thin"]


def thin_nodes(data: NodeData, area, *, min_distance: float = DEFAULT_MIN_DISTANCE,
               border: float = 0.0, negate: bool = False, source: str = "<node>") -> NodeData:
    """
    Select a well-spaced subset of `data`.

    Parameters
    ----------
    data : NodeData
        Candidate points with at least one attribute column.
    area :
        Projection with `to_plane` and plane bounds.
    min_distance : float, optional
        Minimum plane distance between accepted points (default 10).
    border : float, optional
        Minimum distance from the plane border (default 0).
    negate : bool, optional
        Prefer low values.

    Returns
    -------
    NodeData
        Accepted points, renumbered from 1 in acceptance order.
    """
    if data.n_attributes < 1:
        raise PSLGFormatError("Node file must have a value attribute for thinning",
                              {"path": source})

    values = data.attributes[:, 0]
    candidates = ((i, float(values[i]), float(data.xy[i, 0]), float(data.xy[i, 1]))
                  for i in range(len(data)))
    chosen: List[int] = select_points(area, candidates, min_distance=min_distance,
                                      border=border, negate=negate)
    logger.info("[thin] Accepted %d of %d points", len(chosen), len(data))

    rows = np.asarray(chosen, dtype=np.int64)
    n = rows.shape[0]
    return NodeData(index=np.arange(1, n + 1, dtype=np.int64),
                    xy=data.xy[rows].reshape(n, 2),
                    attributes=values[rows].reshape(n, 1))


def run_thin(inname: str, outname: str, area, **kwargs) -> NodeData:
    """
    Read `<inname>.node`, thin it and write `<outname>.node`.

    Keyword arguments are passed to `thin_nodes`.
    """
    if logger.isEnabledFor(logging.DEBUG):
        lon1, lat1, lon2, lat2 = geographic_bbox(area)
        logger.debug("[thin] Plane covers lon %.3f..%.3f, lat %.3f..%.3f", lon1, lon2, lat1, lat2)

    path = inname + ".node"
    data = read_node(path)
    out = thin_nodes(data, area, source=path, **kwargs)
    write_node(outname + ".node", out)
    return out
