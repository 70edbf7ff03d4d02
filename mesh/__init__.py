# -*- coding: utf-8 -*-
# Shapetools/mesh/__init__.py

"""
Project: Shapetools
Date: 10/4/2026

Modules:
--------
- pslg:       .node / .poly / .ele readers and writers.
- outline:    EdgeTree, outline tracing of triangle sets.
- amalgamate: merge short-edged triangles into polygons.
- regions:    polygons -> PSLG with region markers, and back.
- thinning:   priority-based spacing of points on a projected plane.
- config:     tool defaults and JSON overrides.
- cli:        argparse front end (`python main.py <tool> ...`).
"""

__all__ = ["pslg", "outline", "amalgamate", "regions", "thinning", "config", "cli"]
