# -*- coding: utf-8 -*-
# Shapetools/mesh/pslg/reader.py

"""
Project: Shapetools
Date: 10/5/2026

Purpose:
--------
Parse the PSLG text family (`.node`, `.poly`, `.ele`) into NumPy-backed records.

Main Features:
--------------
   1) Full-line and inline comments starting with '#' and blank lines are ignored.
   2) Headers are checked: field count, dimension 2, marker flags 0 or 1,
      3 nodes per triangle.
   3) Records must be numbered sequentially; the first record may be numbered 0 or 1.
   4) A file that ends before the announced number of records is rejected.

Notes:
------
   - Every failure is raised as PSLGFormatError with the source and line number.
   - The region section of a `.poly` file is optional, as in Triangle.
"""

from typing import Iterator, List, Optional, Tuple
import logging
import numpy as np
from .errors import PSLGFormatError
from .model import NodeData, PolyData, EleData

logger = logging.getLogger(__name__)

__all__ = [
    "parse_node", "parse_poly", "parse_ele",
    "read_node", "read_poly", "read_ele",
]


class _Records:
    """Iterator over (line number, tokens) of the non-empty, comment-free lines."""

    def __init__(self, text: str, source: str):
        self.source = source
        self._it = self._scan(text)
        self._peeked: Optional[Tuple[int, List[str]]] = None

    @staticmethod
    def _scan(text: str) -> Iterator[Tuple[int, List[str]]]:
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.split("#", 1)[0].strip()
            if line:
                yield lineno, line.split()

    def at_end(self) -> bool:
        if self._peeked is None:
            self._peeked = next(self._it, None)
        return self._peeked is None

    def take(self, what: str) -> Tuple[int, List[str]]:
        if self.at_end():
            raise PSLGFormatError("Unexpected end of file while reading {}".format(what),
                                  {"path": self.source})
        rec = self._peeked
        self._peeked = None
        return rec

    def fail(self, message: str, lineno: int) -> PSLGFormatError:
        return PSLGFormatError(message, {"path": self.source, "line": lineno})


def _int(rec: _Records, tok: str, lineno: int) -> int:
    try:
        return int(tok)
    except ValueError:
        raise rec.fail("Expected an integer, got {!r}".format(tok), lineno)


def _float(rec: _Records, tok: str, lineno: int) -> float:
    try:
        return float(tok)
    except ValueError:
        raise rec.fail("Expected a number, got {!r}".format(tok), lineno)


def _header(rec: _Records, what: str, fields: int) -> Tuple[int, List[int]]:
    lineno, toks = rec.take(what + " header")
    if len(toks) != fields:
        raise rec.fail("{} header must have {} fields, got {}".format(what, fields, len(toks)), lineno)
    values = [_int(rec, t, lineno) for t in toks]
    if values[0] < 0:
        raise rec.fail("Negative {} count".format(what), lineno)
    return lineno, values


def _check_sequence(rec: _Records, what: str, number: int, position: int, base: int,
                    lineno: int) -> int:
    """Return the index base (0 or 1) fixed by the first record."""
    if position == 0:
        if number not in (0, 1):
            raise rec.fail("{} must be numbered starting from 0 or 1, got {}".format(what, number), lineno)
        return number
    if number != base + position:
        raise rec.fail("{} must be numbered sequentially: expected {}, got {}".format(
            what, base + position, number), lineno)
    return base


def _flag(rec: _Records, value: int, what: str, lineno: int) -> bool:
    if value not in (0, 1):
        raise rec.fail("{} must be 0 or 1, got {}".format(what, value), lineno)
    return value == 1


# ---------------
# Section parsers
# ---------------
def _node_section(rec: _Records) -> NodeData:
    lineno, (count, dim, n_attr, n_mark) = _header(rec, "node", 4)
    if count > 0 and dim != 2:
        raise rec.fail("Only 2-dimensional nodes are supported, got dimension {}".format(dim), lineno)
    if n_attr < 0:
        raise rec.fail("Negative attribute count", lineno)
    has_markers = _flag(rec, n_mark, "Node boundary marker flag", lineno)

    width = 3 + n_attr + (1 if has_markers else 0)
    index = np.empty(count, dtype=np.int64)
    xy = np.empty((count, 2), dtype=np.float64)
    attrs = np.empty((count, n_attr), dtype=np.float64)
    markers = np.empty(count, dtype=np.int64) if has_markers else None

    base = 0
    for i in range(count):
        lineno, toks = rec.take("node {}".format(i + 1))
        if len(toks) < width:
            raise rec.fail("Node record needs {} fields, got {}".format(width, len(toks)), lineno)
        number = _int(rec, toks[0], lineno)
        base = _check_sequence(rec, "Nodes", number, i, base, lineno)
        index[i] = number
        xy[i, 0] = _float(rec, toks[1], lineno)
        xy[i, 1] = _float(rec, toks[2], lineno)
        for k in range(n_attr):
            attrs[i, k] = _float(rec, toks[3 + k], lineno)
        if markers is not None:
            markers[i] = _int(rec, toks[3 + n_attr], lineno)

    return NodeData(index=index, xy=xy, attributes=attrs, markers=markers)


def _segment_section(rec: _Records) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    lineno, (count, n_mark) = _header(rec, "segment", 2)
    has_markers = _flag(rec, n_mark, "Segment boundary marker flag", lineno)

    width = 3 + (1 if has_markers else 0)
    segments = np.empty((count, 2), dtype=np.int64)
    markers = np.empty(count, dtype=np.int64) if has_markers else None

    base = 0
    for i in range(count):
        lineno, toks = rec.take("segment {}".format(i + 1))
        if len(toks) < width:
            raise rec.fail("Segment record needs {} fields, got {}".format(width, len(toks)), lineno)
        number = _int(rec, toks[0], lineno)
        base = _check_sequence(rec, "Edges", number, i, base, lineno)
        segments[i, 0] = _int(rec, toks[1], lineno)
        segments[i, 1] = _int(rec, toks[2], lineno)
        if markers is not None:
            markers[i] = _int(rec, toks[3], lineno)

    return segments, markers


def _point_section(rec: _Records, what: str) -> np.ndarray:
    _lineno, (count,) = _header(rec, what, 1)
    pts = np.empty((count, 2), dtype=np.float64)
    base = 0
    for i in range(count):
        lineno, toks = rec.take("{} {}".format(what, i + 1))
        if len(toks) < 3:
            raise rec.fail("{} record needs 3 fields, got {}".format(what.capitalize(), len(toks)), lineno)
        base = _check_sequence(rec, what.capitalize() + "s", _int(rec, toks[0], lineno), i, base, lineno)
        pts[i, 0] = _float(rec, toks[1], lineno)
        pts[i, 1] = _float(rec, toks[2], lineno)
    return pts


def _region_section(rec: _Records) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    _lineno, (count,) = _header(rec, "region", 1)
    regions = np.empty((count, 3), dtype=np.float64)
    max_area = np.full(count, np.nan)
    base = 0
    for i in range(count):
        lineno, toks = rec.take("region {}".format(i + 1))
        if len(toks) < 4:
            raise rec.fail("Region record needs at least 4 fields, got {}".format(len(toks)), lineno)
        base = _check_sequence(rec, "Regions", _int(rec, toks[0], lineno), i, base, lineno)
        for k in range(3):
            regions[i, k] = _float(rec, toks[1 + k], lineno)
        if len(toks) >= 5:
            max_area[i] = _float(rec, toks[4], lineno)
    if np.isnan(max_area).all():
        return regions, None
    return regions, max_area


# -------
# Parsers
# -------
def parse_node(text: str, source: str = "<string>") -> NodeData:
    """
    Parse `.node` text.

    Parameters
    ----------
    text : str
        File content.
    source : str, optional
        Name used in error messages.

    Returns
    -------
    NodeData

    Raises
    ------
    PSLGFormatError
        On any header, count or sequence error.
    """
    return _node_section(_Records(text, source))


def parse_poly(text: str, source: str = "<string>", *, allow_nodes: bool = True) -> PolyData:
    """
    Parse `.poly` text.

    Parameters
    ----------
    allow_nodes : bool, optional
        When False a non-empty embedded node list is rejected; the mesh tools
        always keep vertices in a separate `.node` file.
    """
    rec = _Records(text, source)
    nodes = _node_section(rec)
    if len(nodes) and not allow_nodes:
        raise PSLGFormatError(".poly file also containing nodes is not supported",
                              {"path": source, "nodes": len(nodes)})
    segments, seg_markers = _segment_section(rec)
    holes = _point_section(rec, "hole")
    if rec.at_end():
        regions, max_area = np.empty((0, 3), dtype=np.float64), None
    else:
        regions, max_area = _region_section(rec)
    return PolyData(segments=segments, segment_markers=seg_markers, holes=holes,
                    regions=regions, region_max_area=max_area,
                    nodes=nodes if len(nodes) else None)


def parse_ele(text: str, source: str = "<string>") -> EleData:
    """Parse `.ele` text; only 3-node triangles are supported."""
    rec = _Records(text, source)
    lineno, (count, per_triangle, n_attr) = _header(rec, "triangle", 3)
    if per_triangle != 3:
        raise rec.fail("Triangles must have 3 points per line only, got {}".format(per_triangle), lineno)
    if n_attr < 0:
        raise rec.fail("Negative attribute count", lineno)

    width = 4 + n_attr
    index = np.empty(count, dtype=np.int64)
    tris = np.empty((count, 3), dtype=np.int64)
    attrs = np.empty((count, n_attr), dtype=np.float64)

    base = 0
    for i in range(count):
        lineno, toks = rec.take("triangle {}".format(i + 1))
        if len(toks) < width:
            raise rec.fail("Triangle record needs {} fields, got {}".format(width, len(toks)), lineno)
        number = _int(rec, toks[0], lineno)
        base = _check_sequence(rec, "Triangles", number, i, base, lineno)
        index[i] = number
        for k in range(3):
            tris[i, k] = _int(rec, toks[1 + k], lineno)
        for k in range(n_attr):
            attrs[i, k] = _float(rec, toks[4 + k], lineno)

    return EleData(index=index, triangles=tris, attributes=attrs)


# ----------
# File entry
# ----------
def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_node(path: str) -> NodeData:
    data = parse_node(_read_text(path), path)
    logger.info("[pslg] Read %d nodes from %s", len(data), path)
    return data


def read_poly(path: str, *, allow_nodes: bool = True) -> PolyData:
    data = parse_poly(_read_text(path), path, allow_nodes=allow_nodes)
    logger.info("[pslg] Read %d edges from %s", data.segments.shape[0], path)
    return data


def read_ele(path: str) -> EleData:
    data = parse_ele(_read_text(path), path)
    logger.info("[pslg] Read %d triangles from %s", len(data), path)
    return data
