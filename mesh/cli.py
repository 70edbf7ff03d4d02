# -*- coding: utf-8 -*-
# Shapetools/mesh/cli.py

"""
Project: Shapetools
Date: 10/12/2026

Purpose:
--------
Command line front end for the mesh tools.

   shapetools amalgamate LENGTH AREA INPUT OUTPUT [--debug]
   shapetools regions AREA INPUT OUTPUT [--seed N]
   shapetools thin INPUT OUTPUT --crs CRS --bbox LON1,LAT1,LON2,LAT2 --size W,H
                   [-d DIST] [-D BORDER] [-n]

INPUT and OUTPUT are PSLG base names without extension. Global options `--config FILE`
(JSON overrides of `mesh.config.DEFAULTS`) and `-v/--verbose` come before the tool.

Notes:
------
   - Flags given on the command line win over the config file.
   - This is the only place where errors become exit codes: any ShapetoolsError,
     ValueError or OSError is logged as "Error: <message>" and the exit status is 1.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence
from geometry.api import plane_area
from geometry.errors import ShapetoolsError
from .config import load_config
from .amalgamate import run_amalgamate
from .regions import run_regions
from .thinning import run_thin

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]


def _floats(count: int):
    def parse(text: str) -> List[float]:
        parts = text.split(",")
        if len(parts) != count:
            raise argparse.ArgumentTypeError("expected {} comma-separated numbers".format(count))
        try:
            return [float(p) for p in parts]
        except ValueError:
            raise argparse.ArgumentTypeError("expected numbers, got {!r}".format(text))
    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shapetools",
                                     description="PSLG tools for triangulated geographic polygons")
    parser.add_argument("--config", default=None, help="JSON file overriding the tool defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("amalgamate", help="Merge short-edged triangles into polygons")
    p.add_argument("length", type=float, help="Maximum edge length of region 0 triangles (km)")
    p.add_argument("area", type=float, help="Minimum polygon area (km^2), <= 0 keeps all")
    p.add_argument("input", help="Input PSLG base name (.node, .poly, .ele)")
    p.add_argument("output", help="Output PSLG base name (.node, .poly)")
    p.add_argument("--debug", action="store_true", default=None,
                   help="Rewrite INPUT.ele with the accepted triangles instead")

    p = sub.add_parser("regions", help="Export polygons with one region marker each")
    p.add_argument("area", type=float, help="Minimum polygon area (km^2), <= 0 keeps all")
    p.add_argument("input", help="Input PSLG base name (.node, .poly)")
    p.add_argument("output", help="Output PSLG base name (.node, .poly)")
    p.add_argument("--seed", type=int, default=None, help="Seed of the interior point search")

    p = sub.add_parser("thin", help="Keep well separated points, highest value first")
    p.add_argument("input", help="Input .node base name (lon, lat, value)")
    p.add_argument("output", help="Output .node base name")
    p.add_argument("--crs", required=True, help="Target projection (EPSG code or PROJ string)")
    p.add_argument("--bbox", required=True, type=_floats(4),
                   help="Bottom-left and top-right corners LON1,LAT1,LON2,LAT2")
    p.add_argument("--size", required=True, type=_floats(2), help="Plane size W,H")
    p.add_argument("-d", dest="min_distance", type=float, default=None,
                   help="Minimum distance between points (10)")
    p.add_argument("-D", dest="border", type=float, default=None,
                   help="Minimum distance to border (0)")
    p.add_argument("-n", dest="negate", action="store_true", default=None,
                   help="Negate the value to obtain ascending sort")
    return parser


def _pick(flag, default):
    return default if flag is None else flag


def _run(args, cfg) -> None:
    if args.command == "amalgamate":
        debug = _pick(args.debug, cfg["amalgamate"]["debug"])
        run_amalgamate(args.length, args.area, args.input, args.output, debug=debug)

    elif args.command == "regions":
        seed = _pick(args.seed, cfg["regions"]["seed"])
        run_regions(args.area, args.input, args.output, seed=seed,
                    max_iterations=cfg["regions"]["max_iterations"])

    elif args.command == "thin":
        area = plane_area(args.crs, args.bbox, args.size)
        run_thin(args.input, args.output, area,
                 min_distance=_pick(args.min_distance, cfg["thin"]["min_distance"]),
                 border=_pick(args.border, cfg["thin"]["border"]),
                 negate=_pick(args.negate, cfg["thin"]["negate"]))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse `argv`, run one tool and return the process exit status.
    """
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")

    try:
        cfg = load_config(args.config)
        if not args.verbose:
            logging.getLogger().setLevel(cfg["logging"]["level"].upper())
        _run(args, cfg)
    except (ShapetoolsError, ValueError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    logger.info("[%s] Done", args.command)
    return 0
