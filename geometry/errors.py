# -*- coding: utf-8 -*-
# Shapetools/geometry/errors.py

"""
Project: Shapetools
Date: 10/2/2026

Purpose
-------
Typed exceptions for the geometry toolkit and the mesh tools built on it, with compact,
context-aware messages so that drivers can report failures uniformly.

Main Tasks
----------
    1. Define ShapetoolsError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidParameterError, RingStateError,
       NoInteriorPointFound, ConfigError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Sentinel lookups (Nodes.number/id/point) never raise; these classes cover
  precondition violations and the interior-point search budget only.
"""

__all__ = [
    "ShapetoolsError",
    "InvalidParameterError",
    "RingStateError",
    "NoInteriorPointFound",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class ShapetoolsError(Exception):
    """
    Base class for all recoverable errors raised by the toolkit.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"path": "coast.poly", "line": 12}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(ShapetoolsError, self).__init__(message)

    def __str__(self):
        base = super(ShapetoolsError, self).__str__()
        return base + _format_context(self.context)


class InvalidParameterError(ShapetoolsError, ValueError):
    """
    A caller-supplied parameter is outside its allowed range:
      - negative minimum distance for point selection
      - non-positive projection image size
      - degenerate geographic corners
    """


class RingStateError(ShapetoolsError):
    """
    A ring operation was attempted in the wrong state, e.g. measuring a ring with
    fewer than three distinct vertices.
    """


class NoInteriorPointFound(ShapetoolsError):
    """
    The randomized interior point search exhausted its iteration budget.

    Usually signals a self-intersecting or near-zero-area ring. Callers decide whether
    this aborts the conversion; the toolkit never terminates the process itself.
    """


class ConfigError(ShapetoolsError, ValueError):
    """
    Invalid configuration: unknown sections or keys, wrong types, out-of-range values.
    """
