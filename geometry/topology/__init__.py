# -*- coding: utf-8 -*-
# Shapetools/geometry/topology/__init__.py

"""
Project: Shapetools
Date: 9/16/2026

Topology Subfolder:
-------------------
Array-level ring operations behind Polygon and ClosedPolygon.

Modules:
--------
- loop:        Closure predicates and enforcement, planar shoelace area,
               even-odd point containment.

- spherical:   Cartographic area of lon/lat rings via the cylindrical equal-area
               projection, with 180-meridian unwrapping and pole correction.

- sampling:    Randomized search for a point guaranteed to be inside a ring.

- _validation: Shared array structure and closure checks.
"""

__all__ = ["loop", "spherical", "sampling"]
