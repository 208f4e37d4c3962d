"""FieldMapping: where each report field lives in the IFC model.

The defaults match models exported from ArchiCAD with the office zone
template.  Other authoring tools can be supported with a JSON file holding
any subset of the fields below.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from spacereport import config
from spacereport.errors import ConfigError

logger = logging.getLogger(__name__)


class FieldMapping(BaseModel):
    """Property-set, property and quantity names consulted per report field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    zone_pset: str = config.ZONE_PSET
    zone_property: str = config.ZONE_PROPERTY

    finishes_pset: str = config.FINISHES_PSET
    floor_property: str = config.FLOOR_PROPERTY
    ceiling_property: str = config.CEILING_PROPERTY
    wall_east_property: str = config.WALL_EAST_PROPERTY
    wall_north_property: str = config.WALL_NORTH_PROPERTY
    wall_west_property: str = config.WALL_WEST_PROPERTY
    wall_south_property: str = config.WALL_SOUTH_PROPERTY
    skirting_property: str = config.SKIRTING_PROPERTY

    gross_height_quantity: str = config.GROSS_HEIGHT_QUANTITY
    net_height_quantity: str = config.NET_HEIGHT_QUANTITY
    perimeter_quantity: str = config.PERIMETER_QUANTITY

    @classmethod
    def from_json(cls, path: str | Path) -> FieldMapping:
        """Load a mapping from *path*; missing keys keep their defaults."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Could not read mapping file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Mapping file {path} must contain a JSON object")
        try:
            mapping = cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid mapping file {path}: {exc}") from exc
        logger.debug("Loaded field mapping from %s", path)
        return mapping


DEFAULT_MAPPING = FieldMapping()
