# -*- coding: utf-8 -*-
# Shapetools/geometry/selection/__init__.py

"""
Project: Shapetools
Date: 9/25/2026

Selection Subfolder:
--------------------
- near_tree:      Incremental fixed-radius neighbour index over scipy's cKDTree.
- point_selector: Greedy, priority-first thinning of projected points.
"""

from .near_tree import NearTree
from .point_selector import PointSelector, DEFAULT_MIN_DISTANCE

__all__ = ["NearTree", "PointSelector", "DEFAULT_MIN_DISTANCE"]
