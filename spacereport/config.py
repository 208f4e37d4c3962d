"""Global configuration: paths, IFC names, environment overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from spacereport.errors import ConfigError

# Default directory for generated space reports
DEFAULT_OUTPUT_DIR = Path("reports")

# Supported IFC schemas
SUPPORTED_SCHEMAS = ("IFC2X3", "IFC4")

# IFC classes read by the extractor
SPACE_CLASS = "IfcSpace"
WINDOW_CLASS = "IfcWindow"
DOOR_CLASS = "IfcDoor"

# Property sets written by ArchiCAD and the office zone template
ZONE_PSET = "ArchiCADProperties"
ZONE_PROPERTY = "Related Zone Number"
FINISHES_PSET = "PavCusPropZones"
FLOOR_PROPERTY = "02FloorType"
CEILING_PROPERTY = "01CeilingType"
WALL_EAST_PROPERTY = "0301FinishWallEastType"
WALL_NORTH_PROPERTY = "0302FinishWallNorthType"
WALL_WEST_PROPERTY = "0303FinishWallWestType"
WALL_SOUTH_PROPERTY = "0304FinishWallSouthType"
SKIRTING_PROPERTY = "04WallPerimeterSet"

# Length quantity names (matched case-insensitively)
GROSS_HEIGHT_QUANTITY = "Height"
NET_HEIGHT_QUANTITY = "ZoneCeilingHeight"
PERIMETER_QUANTITY = "Zone Net Perimeter"

# Units appended to formatted quantities
AREA_UNIT = "m²"
LENGTH_UNIT = "m"

# Output formats and languages
DEFAULT_FORMAT = "html"
DEFAULT_LANGUAGE = "en"

# Environment variables read by the CLI
ENV_OUTPUT_DIR = "SPACEREPORT_OUTPUT_DIR"
ENV_LOG_LEVEL = "SPACEREPORT_LOG_LEVEL"
ENV_LANGUAGE = "SPACEREPORT_LANG"


def env_default(key: str, default: str) -> str:
    """Return the environment value for *key*, or *default* when unset or blank."""
    value = os.environ.get(key, "").strip()
    return value or default


def resolve_log_level(value: str | int) -> int:
    """Translate a level name such as ``"debug"`` into a ``logging`` level."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {value!r}")
    return level
