# -*- coding: utf-8 -*-
# Shapetools/geometry/primitives/__init__.py

"""
Project: Shapetools
Date: 9/14/2026

Primitives Subfolder:
---------------------
Value types and registries shared by every tool in the suite.

Modules:
--------
- point:  Immutable Point with lexicographic order, planar and haversine distances.

- edge:   Undirected Edge between two ordinals and the Edges set.

- nodes:  Nodes registry assigning stable 1-based ordinals and owner ids to points.
"""

from .point import Point, EARTH_RADIUS_KM, haversine
from .edge import Edge, Edges
from .nodes import Nodes

__all__ = ["Point", "EARTH_RADIUS_KM", "haversine", "Edge", "Edges", "Nodes"]
