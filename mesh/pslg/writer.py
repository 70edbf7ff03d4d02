# -*- coding: utf-8 -*-
# Shapetools/mesh/pslg/writer.py

"""
Project: Shapetools
Date: 10/5/2026

Purpose:
--------
Emit PSLG text (`.node`, `.poly`, `.ele`) for the Triangle mesh generator and write it
to disk.

Main Tasks:
-----------
    1. Format records tab-separated, one per line, under the standard headers.
    2. Write coordinates with the shortest repr that reads back to the same float.
    3. Write `.poly` files without embedded vertices (`0 2 0 0`) unless given some.
    4. Create parent directories when writing files.
"""

from typing import Optional
import io
import os
import logging
import numpy as np
from .model import NodeData, PolyData, EleData

logger = logging.getLogger(__name__)

__all__ = ["node_text", "poly_text", "ele_text", "write_text",
           "write_node", "write_poly", "write_ele"]


def _fmt(x) -> str:
    """
    Format a float compactly without losing precision.

    repr() of a Python float is the shortest string that parses back to the same value;
    a trailing '.0' is dropped so integral values read as integers.
    """
    s = repr(float(x))
    if s.endswith(".0"):
        s = s[:-2]
    return s


def _node_block(W, data: Optional[NodeData]) -> None:
    if data is None or len(data) == 0:
        W("0 2 0 0\n")
        return
    has_markers = data.markers is not None
    W("{} 2 {} {}\n".format(len(data), data.n_attributes, 1 if has_markers else 0))
    for i in range(len(data)):
        fields = [str(int(data.index[i])), _fmt(data.xy[i, 0]), _fmt(data.xy[i, 1])]
        fields.extend(_fmt(a) for a in data.attributes[i])
        if has_markers:
            fields.append(str(int(data.markers[i])))
        W("\t".join(fields) + "\n")


def node_text(data: NodeData) -> str:
    """
    `.node` text: header `N 2 A B`, then `index x y [attributes] [marker]`.

    An empty NodeData yields the header `0 2 A B` only.
    """
    buf = io.StringIO()
    W = buf.write
    has_markers = data.markers is not None
    if len(data) == 0:
        W("0 2 {} {}\n".format(data.n_attributes, 1 if has_markers else 0))
    else:
        _node_block(W, data)
    return buf.getvalue()


def poly_text(data: PolyData) -> str:
    """
    `.poly` text: node section, segments, holes and (when present) regions.
    """
    buf = io.StringIO()
    W = buf.write

    _node_block(W, data.nodes)

    seg = np.asarray(data.segments, dtype=np.int64).reshape(-1, 2)
    has_markers = data.segment_markers is not None
    W("{} {}\n".format(seg.shape[0], 1 if has_markers else 0))
    for i, (a, b) in enumerate(seg, start=1):
        line = "{}\t{}\t{}".format(i, int(a), int(b))
        if has_markers:
            line += "\t{}".format(int(data.segment_markers[i - 1]))
        W(line + "\n")

    holes = np.asarray(data.holes, dtype=np.float64).reshape(-1, 2)
    W("{}\n".format(holes.shape[0]))
    for i, (x, y) in enumerate(holes, start=1):
        W("{}\t{}\t{}\n".format(i, _fmt(x), _fmt(y)))

    regions = np.asarray(data.regions, dtype=np.float64).reshape(-1, 3)
    if regions.shape[0]:
        W("{}\n".format(regions.shape[0]))
        for i, (x, y, attr) in enumerate(regions, start=1):
            line = "{}\t{}\t{}\t{}".format(i, _fmt(x), _fmt(y), _fmt(attr))
            if data.region_max_area is not None and np.isfinite(data.region_max_area[i - 1]):
                line += "\t{}".format(_fmt(data.region_max_area[i - 1]))
            W(line + "\n")

    return buf.getvalue()


def ele_text(data: EleData) -> str:
    """`.ele` text: header `T 3 A`, then `index a b c [attributes]`."""
    buf = io.StringIO()
    W = buf.write
    n_attr = int(data.attributes.shape[1])
    W("{} 3 {}\n".format(len(data), n_attr))
    for i in range(len(data)):
        fields = [str(int(data.index[i]))]
        fields.extend(str(int(v)) for v in data.triangles[i])
        fields.extend(_fmt(a) for a in data.attributes[i])
        W("\t".join(fields) + "\n")
    return buf.getvalue()


def write_text(text: str, path: str) -> str:
    """
    Write PSLG text to disk, creating parent directories if needed.

    Returns
    -------
    str
        The path that was written.
    """
    dirname = os.path.dirname(path)
    if dirname and not os.path.exists(dirname):
        os.makedirs(dirname)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def write_node(path: str, data: NodeData) -> str:
    logger.info("[pslg] Writing %s with %d nodes", path, len(data))
    return write_text(node_text(data), path)


def write_poly(path: str, data: PolyData) -> str:
    logger.info("[pslg] Writing %s with %d edges", path, data.segments.shape[0])
    return write_text(poly_text(data), path)


def write_ele(path: str, data: EleData) -> str:
    logger.info("[pslg] Writing %s with %d triangles", path, len(data))
    return write_text(ele_text(data), path)
