# -*- coding: utf-8 -*-
# Shapetools/mesh/pslg/__init__.py

"""
Project: Shapetools
Date: 10/4/2026

PSLG Subfolder:
---------------
Plain-text Planar Straight Line Graph interchange with the Triangle mesh generator.

- model:  NodeData, PolyData, EleData records.
- reader: parse_* / read_* for .node, .poly and .ele.
- writer: *_text / write_* emitters.
- errors: PSLGFormatError.
"""

from .errors import PSLGFormatError
from .model import NodeData, PolyData, EleData
from .reader import parse_node, parse_poly, parse_ele, read_node, read_poly, read_ele
from .writer import node_text, poly_text, ele_text, write_text, write_node, write_poly, write_ele

__all__ = [
    "PSLGFormatError",
    "NodeData", "PolyData", "EleData",
    "parse_node", "parse_poly", "parse_ele",
    "read_node", "read_poly", "read_ele",
    "node_text", "poly_text", "ele_text",
    "write_text", "write_node", "write_poly", "write_ele",
]
