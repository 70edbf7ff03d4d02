# -*- coding: utf-8 -*-
# Shapetools/mesh/config.py

"""
Project: Shapetools
Date: 10/8/2026

Purpose:
--------
Defaults and JSON overrides for the mesh tools.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) per tool section.
   - Load a JSON override file and deep-merge it over the defaults.
   - Validate sections, keys and value ranges, raising ConfigError.

Schema:
-------
{
  "logging":    {"level": "INFO"},
  "amalgamate": {"debug": false},
  "regions":    {"seed": 0, "max_iterations": 10000},
  "thin":       {"min_distance": 10.0, "border": 0.0, "negate": false}
}
"""

from typing import Any, Dict, Optional
import copy
import json
import logging
from geometry.errors import ConfigError

__all__ = ["DEFAULTS", "load_config", "merge_config", "validate_config"]


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
    },
    "amalgamate": {
        "debug": False,              # rewrite the .ele with accepted triangles only
    },
    "regions": {
        "seed": 0,                   # None draws a fresh seed
        "max_iterations": 10000,     # interior point search budget per polygon
    },
    "thin": {
        "min_distance": 10.0,        # plane units
        "border": 0.0,               # margin removed from every side of the plane
        "negate": False,             # prefer low values
    },
}

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults with `overrides` merged on top, validated."""
    cfg = _deep_merge(DEFAULTS, overrides or {})
    validate_config(cfg)
    return cfg


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read JSON overrides from `path` (None for defaults only).

    Raises
    ------
    ConfigError
        If the file is not valid JSON, not an object, or fails validation.
    """
    if path is None:
        return merge_config()
    try:
        with open(path, "r", encoding="utf-8") as f:
            overrides = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError("Invalid JSON in config file", {"path": path, "detail": str(e)})
    if not isinstance(overrides, dict):
        raise ConfigError("Config file must hold a JSON object", {"path": path})
    logging.getLogger(__name__).debug("[config] Loaded overrides from %s", path)
    return merge_config(overrides)


# -------------------------
# Validation
# -------------------------
def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _require(cond: bool, message: str, section: str, key: str, value) -> None:
    if not cond:
        raise ConfigError(message, {"section": section, "key": key, "value": value})


def validate_config(cfg: Dict[str, Any]) -> None:
    """
    Check that `cfg` only uses known sections and keys with sane values.

    Raises
    ------
    ConfigError
    """
    for section, block in cfg.items():
        if section not in DEFAULTS:
            raise ConfigError("Unknown config section", {"section": section})
        if not isinstance(block, dict):
            raise ConfigError("Config section must be an object", {"section": section})
        for key in block:
            if key not in DEFAULTS[section]:
                raise ConfigError("Unknown config key", {"section": section, "key": key})

    level = cfg["logging"]["level"]
    _require(isinstance(level, str) and level.upper() in _LEVELS,
             "Unknown logging level", "logging", "level", level)

    debug = cfg["amalgamate"]["debug"]
    _require(isinstance(debug, bool), "Expected true/false", "amalgamate", "debug", debug)

    seed = cfg["regions"]["seed"]
    _require(seed is None or (isinstance(seed, int) and not isinstance(seed, bool) and seed >= 0),
             "Seed must be a nonnegative integer or null", "regions", "seed", seed)
    iters = cfg["regions"]["max_iterations"]
    _require(isinstance(iters, int) and not isinstance(iters, bool) and iters > 0,
             "Must be a positive integer", "regions", "max_iterations", iters)

    thin = cfg["thin"]
    _require(_is_number(thin["min_distance"]) and thin["min_distance"] >= 0,
             "Must be a nonnegative number", "thin", "min_distance", thin["min_distance"])
    _require(_is_number(thin["border"]) and thin["border"] >= 0,
             "Must be a nonnegative number", "thin", "border", thin["border"])
    _require(isinstance(thin["negate"], bool), "Expected true/false", "thin", "negate", thin["negate"])
