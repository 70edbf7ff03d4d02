# -*- coding: utf-8 -*-
# Shapetools/mesh/regions.py

"""
Project: Shapetools
Date: 10/10/2026

Purpose:
--------
Export polygons as a PSLG with one region marker per polygon, and rebuild polygons
from a PSLG.

After triangulating the exported PSLG (`triangle -pA`), every triangle carries the
attribute of the region it belongs to, so it can be traced back to its polygon as long
as no polygon encloses another one.

Main Tasks:
-----------
   1. `export_polygons`: area filter, vertex registration (owner id = polygon ordinal),
      unique edges, one interior point per polygon.
   2. `polygons_from_pslg`: outline tracing of the PSLG segments.
   3. `run_regions`: file driver, PSLG in -> PSLG with regions out.

Notes:
------
   - The interior point search may raise NoInteriorPointFound; it is not caught here.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union
import logging
import numpy as np
from geometry.polygon import Polygon, ClosedPolygon
from geometry.topology.sampling import MAX_ITERATIONS
from .amalgamate import polygons_to_pslg
from .outline import EdgeTree
from .pslg import NodeData, PolyData, PSLGFormatError, read_node, read_poly, write_node, write_poly

logger = logging.getLogger(__name__)

__all__ = ["RegionExport", "export_polygons", "polygons_from_pslg", "run_regions"]

Ring = Union[Polygon, ClosedPolygon]


@dataclass
class RegionExport:
    """
    Attributes
    ----------
    polygons : list of ClosedPolygon
        Kept polygons; polygon k (1-based) owns region k.
    nodes : NodeData
        Unique vertices with the owner id as single attribute.
    poly : PolyData
        Unique edges, no holes, one region row (x, y, k) per polygon.
    """
    polygons: List[ClosedPolygon] = field(default_factory=list)
    nodes: NodeData = field(default_factory=NodeData)
    poly: PolyData = field(default_factory=PolyData)


def export_polygons(polygons: Sequence[Ring], area_limit: float,
                    rng: Optional[np.random.Generator] = None,
                    *, max_iterations: int = MAX_ITERATIONS) -> RegionExport:
    """
    Convert polygons to a PSLG with region markers.

    Parameters
    ----------
    polygons : sequence of Polygon or ClosedPolygon
        Input rings (lon/lat degrees).
    area_limit : float
        Minimum geoarea (km^2); <= 0 keeps every polygon.
    rng : numpy.random.Generator, optional
        Shared generator for the interior points; each ring's own generator otherwise.
    max_iterations : int, optional
        Interior point search budget per polygon.

    Raises
    ------
    NoInteriorPointFound
        If some kept polygon defeats the interior point search.
    """
    kept = []
    for ring in polygons:
        closed = ring.close()
        # fewer than 3 vertices: empty rings and lone shared edges of adjacent polygons
        if len(closed) < 4:
            continue
        if area_limit <= 0 or closed.geoarea() >= area_limit:
            kept.append(closed)
    logger.info("[regions] Found %d large enough polygons out of %d", len(kept), len(polygons))

    _nodes, node_data, seg = polygons_to_pslg(kept, with_owner=True)
    logger.info("[regions] Counted %d nodes", len(node_data))

    logger.info("[regions] Finding an inside point for %d polygons", len(kept))
    regions = np.empty((len(kept), 3), dtype=np.float64)
    for k, closed in enumerate(kept, start=1):
        pt = closed.some_inside_point(rng, max_iterations=max_iterations)
        regions[k - 1] = (pt.x, pt.y, k)

    return RegionExport(polygons=kept, nodes=node_data,
                        poly=PolyData(segments=seg, regions=regions))


def polygons_from_pslg(nodes: NodeData, poly: PolyData) -> List[Polygon]:
    """
    Rebuild rings from PSLG segments.

    Raises
    ------
    PSLGFormatError
        If a segment refers to an unknown node.
    """
    points = nodes.lookup()
    tree = EdgeTree()
    for a, b in poly.segments:
        pa = points.get(int(a))
        pb = points.get(int(b))
        if pa is None or pb is None:
            raise PSLGFormatError("Segment refers to an unknown node",
                                  {"segment": (int(a), int(b))})
        tree.add(pa, pb)
    return tree.rings()


def run_regions(area_limit: float, inname: str, outname: str, *, seed: Optional[int] = 0,
                max_iterations: int = MAX_ITERATIONS) -> RegionExport:
    """
    Read `<inname>.node/.poly`, rebuild the polygons and write `<outname>.node/.poly`
    with owner ids and region markers.
    """
    nodes = read_node(inname + ".node")
    poly = read_poly(inname + ".poly", allow_nodes=False)
    rings = polygons_from_pslg(nodes, poly)

    rng = np.random.default_rng(seed)
    result = export_polygons(rings, area_limit, rng, max_iterations=max_iterations)

    write_node(outname + ".node", result.nodes)
    write_poly(outname + ".poly", result.poly)
    return result
