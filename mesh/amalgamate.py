# -*- coding: utf-8 -*-
# Shapetools/mesh/amalgamate.py

"""
Project: Shapetools
Date: 10/9/2026

Purpose:
--------
Amalgamate a triangulated PSLG: merge triangles with short edges into larger polygons
and write the polygon outlines back as a new PSLG.

Pipeline:
---------
   <in>.node, <in>.poly, <in>.ele
      -> keep triangles (region != 0, or all edges <= length limit in km)
      -> toggle their edges into an EdgeTree, trace the outline rings
      -> keep rings with geoarea >= area limit (all when the limit is <= 0)
      -> <out>.node (N 2 0 0), <out>.poly (0 2 0 0, edges, no holes)

Inputs/Contracts:
-----------------
   - The .node file carries exactly one attribute (the owner id).
   - The .poly file has no embedded nodes; its segments are loaded as constraints.
   - The .ele region attribute is optional; a missing one counts as region 0.

Notes:
------
   - Debug mode writes no .node/.poly; it rewrites <in>.ele with only the accepted
     triangles (renumbered from 1, region kept) for visual inspection.
   - Output edges are unique and never degenerate.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
import numpy as np
from geometry.primitives import Point, Edge, Edges, Nodes
from geometry.polygon import ClosedPolygon
from .outline import EdgeTree
from .pslg import (NodeData, PolyData, EleData, PSLGFormatError,
                   read_node, read_poly, read_ele, write_node, write_poly, write_ele)

logger = logging.getLogger(__name__)

__all__ = ["AmalgamationResult", "accepted_triangles", "amalgamate", "polygons_to_pslg",
           "run_amalgamate"]


@dataclass
class AmalgamationResult:
    """
    Attributes
    ----------
    mask : np.ndarray
        (T,) bool, accepted triangles.
    polygons : list of ClosedPolygon
        Outline rings large enough to keep.
    nodes : NodeData
        Unique ring vertices in ordinal order, no attributes.
    poly : PolyData
        Unique ring edges, no holes.
    traced : int
        Number of traced rings before the area filter.
    """
    mask: np.ndarray
    polygons: List[ClosedPolygon] = field(default_factory=list)
    nodes: NodeData = field(default_factory=NodeData)
    poly: PolyData = field(default_factory=PolyData)
    traced: int = 0


def _resolve(points: Dict[int, Point], number: int, source: str) -> Point:
    pt = points.get(int(number))
    if pt is None:
        raise PSLGFormatError("Triangle refers to an unknown node", {"path": source, "node": int(number)})
    return pt


def accepted_triangles(points: Dict[int, Point], ele: EleData, length_limit: float,
                       source: str = "<ele>") -> np.ndarray:
    """
    Mask of triangles taking part in the amalgamation.

    A triangle of region 0 is accepted when all three edges have a great-circle length
    <= `length_limit` km; any other region is always accepted.
    """
    regions = ele.regions()
    mask = np.zeros(len(ele), dtype=bool)
    for i, (a, b, c) in enumerate(ele.triangles):
        if regions[i] != 0:
            mask[i] = True
            continue
        p1 = _resolve(points, a, source)
        p2 = _resolve(points, b, source)
        p3 = _resolve(points, c, source)
        mask[i] = (p1.geodistance(p2) <= length_limit
                   and p2.geodistance(p3) <= length_limit
                   and p3.geodistance(p1) <= length_limit)
    return mask


def polygons_to_pslg(polygons: List[ClosedPolygon], *, with_owner: bool = False):
    """
    Register ring vertices and emit unique ring edges.

    Vertex owner ids are the 1-based ordinal of the first ring that uses the vertex.

    Returns
    -------
    (Nodes, NodeData, np.ndarray)
        Registry, its `.node` records and the (E, 2) edge array.
    """
    nodes = Nodes()
    for k, poly in enumerate(polygons, start=1):
        for pt in poly.data():
            nodes.add(pt, k)

    edges = Edges()
    segments = []
    for poly in polygons:
        pts = poly.data()
        for a, b in zip(pts[:-1], pts[1:]):
            edge = Edge(nodes.number(a), nodes.number(b))
            if edge.is_degenerate() or not edges.add(edge):
                continue
            segments.append((edge.first, edge.second))

    seg = np.asarray(segments, dtype=np.int64).reshape(-1, 2)
    return nodes, NodeData.from_nodes(nodes, with_owner=with_owner), seg


def amalgamate(points: Dict[int, Point], ele: EleData, length_limit: float, area_limit: float,
               *, source: str = "<ele>") -> AmalgamationResult:
    """
    Merge accepted triangles into outline polygons.

    Parameters
    ----------
    points : dict
        Node record number -> Point (lon, lat).
    ele : EleData
        Triangles.
    length_limit : float
        Maximum edge length (km) of region-0 triangles.
    area_limit : float
        Minimum ring area (km^2); <= 0 keeps every ring.
    """
    mask = accepted_triangles(points, ele, length_limit, source)

    tree = EdgeTree()
    for a, b, c in ele.triangles[mask]:
        tree.add_triangle(_resolve(points, a, source), _resolve(points, b, source),
                          _resolve(points, c, source))

    rings = tree.rings()
    kept = []
    for ring in rings:
        closed = ring.close()
        if area_limit <= 0 or closed.geoarea() >= area_limit:
            kept.append(closed)
    logger.info("[amalgamate] Found %d large enough polygons out of %d", len(kept), len(rings))

    _nodes, node_data, seg = polygons_to_pslg(kept)
    logger.info("[amalgamate] Counted %d nodes", len(node_data))
    return AmalgamationResult(mask=mask, polygons=kept, nodes=node_data,
                              poly=PolyData(segments=seg), traced=len(rings))


def _load_inputs(inname: str):
    node_path = inname + ".node"
    data = read_node(node_path)
    if data.n_attributes != 1:
        raise PSLGFormatError("Node file must contain exactly one attribute field",
                              {"path": node_path, "attributes": data.n_attributes})
    points = data.lookup()

    poly_path = inname + ".poly"
    poly = read_poly(poly_path, allow_nodes=False)
    constraints = Edges()
    for a, b in poly.segments:
        constraints.add(Edge(int(a), int(b)))
    for edge in constraints:
        if edge.first not in points or edge.second not in points:
            raise PSLGFormatError("Segment refers to an unknown node",
                                  {"path": poly_path, "segment": (edge.first, edge.second)})
    logger.debug("[amalgamate] %d unique constraint edges", len(constraints))

    ele = read_ele(inname + ".ele")
    return points, ele


def run_amalgamate(length_limit: float, area_limit: float, inname: str,
                   outname: Optional[str] = None, *, debug: bool = False) -> AmalgamationResult:
    """
    File-level driver.

    Parameters
    ----------
    inname, outname : str
        PSLG base names (without extension). `outname` is not used in debug mode.
    debug : bool, optional
        Rewrite `<inname>.ele` with the accepted triangles instead of writing output.
    """
    points, ele = _load_inputs(inname)
    result = amalgamate(points, ele, length_limit, area_limit, source=inname + ".ele")

    if debug:
        keep = result.mask
        n = int(np.count_nonzero(keep))
        accepted = EleData(index=np.arange(1, n + 1, dtype=np.int64),
                           triangles=ele.triangles[keep],
                           attributes=ele.regions()[keep].astype(np.float64).reshape(n, 1))
        write_ele(inname + ".ele", accepted)
        return result

    if not outname:
        raise ValueError("An output name is required unless debug mode is on")
    write_node(outname + ".node", result.nodes)
    write_poly(outname + ".poly", result.poly)
    return result
