# -*- coding: utf-8 -*-
# Shapetools/geometry/__init__.py

"""
Project: Shapetools
Date: 9/14/2026

Modules:
--------
- primitives: Canonical value types and registries.
                * Point (planar and great-circle distance),
                * Edge / Edges (undirected segment and its set),
                * Nodes (point -> stable 1-based ordinal plus owner id).

- topology:   Array-level ring numerics behind the polygon types.
                * Closure, shoelace area, even-odd containment (loop),
                * Spherical area with antimeridian and pole handling (spherical),
                * Randomized interior point search (sampling).

- polygon:    Polygon (open ring builder) and ClosedPolygon (measured ring).

- selection:  PointSelector (priority-first spatial thinning) and its NearTree index.

- projection: PlaneArea (pyproj-backed lon/lat <-> image plane) and geographic_bbox.

- errors:     ShapetoolsError and its typed subclasses.

- api:        Minimal public facade used by the mesh tools.
                * ring(points, seed=0) -> ClosedPolygon
                * plane_area(crs, bbox, size) -> PlaneArea
                * select_points(area, candidates, min_distance=10, border=0, negate=False)
                    -> list of accepted ids

            Usage:
                from geometry.api import ring, plane_area, select_points
"""

__all__ = ["primitives", "topology", "polygon", "selection", "projection", "errors", "api"]
