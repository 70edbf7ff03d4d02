# -*- coding: utf-8 -*-
# Shapetools/mesh/pslg/errors.py

"""
Project: Shapetools
Date: 10/4/2026

Purpose
-------
Typed exception for malformed PSLG text (.node, .poly, .ele).

Notes
-----
- Context usually carries {"path": ..., "line": ...} so that messages point at the
  offending record.
"""

from geometry.errors import ShapetoolsError

__all__ = ["PSLGFormatError"]


class PSLGFormatError(ShapetoolsError, ValueError):
    """
    Malformed PSLG content:
      - header with the wrong number of fields or a dimension other than 2
      - fewer records than the header announces
      - record indices out of sequence
      - a record with too few columns or non-numeric fields
    """
