# -*- coding: utf-8 -*-
# Shapetools/geometry/primitives/edge.py

"""
Project: Shapetools
Date: 9/14/2026

Purpose:
--------
Undirected edges between point ordinals and a set of unique edges. Used by the
mesh tools to make sure a segment shared by two rings is emitted only once.
"""

from dataclasses import dataclass, field
from typing import Iterator, Set

__all__ = ["Edge", "Edges"]


@dataclass(frozen=True, order=True)
class Edge:
    """
    Unordered pair of integer point indices.

    The pair is stored with the smaller index first, so Edge(a, b) == Edge(b, a)
    and both hash alike.
    """

    first: int
    second: int

    def __post_init__(self):
        a, b = int(self.first), int(self.second)
        if b < a:
            a, b = b, a
        object.__setattr__(self, "first", a)
        object.__setattr__(self, "second", b)

    def is_degenerate(self) -> bool:
        """True for a loop edge (both ends on the same point)."""
        return self.first == self.second


@dataclass
class Edges:
    """Set of unique undirected edges."""

    _data: Set[Edge] = field(default_factory=set)

    def add(self, edge: Edge) -> bool:
        """Insert `edge`; return True if it was not present before."""
        if edge in self._data:
            return False
        self._data.add(edge)
        return True

    def contains(self, edge: Edge) -> bool:
        return edge in self._data

    def __contains__(self, edge) -> bool:
        return self.contains(edge)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Edge]:
        # Deterministic order for writers and tests
        return iter(sorted(self._data))
