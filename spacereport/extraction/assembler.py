"""Build a SpaceRecord for one IfcSpace."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import ifcopenshell

from spacereport.extraction.resolver import (
    get_area,
    get_ceiling_material,
    get_floor_material,
    get_length_quantity,
    get_perimeter,
    get_skirting,
    get_storey,
    get_wall_finish,
)
from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.models.space import OpeningKind, OpeningRecord, Orientation, SpaceRecord

logger = logging.getLogger(__name__)

OpeningIndex = Mapping[str, Sequence[ifcopenshell.entity_instance]]


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None


def opening_record(
    opening: ifcopenshell.entity_instance,
    kind: OpeningKind,
) -> OpeningRecord:
    """Copy the name and overall dimensions of a window or door."""
    return OpeningRecord(
        kind=kind,
        name=opening.Name,
        global_id=getattr(opening, "GlobalId", None),
        overall_width=_optional_float(getattr(opening, "OverallWidth", None)),
        overall_height=_optional_float(getattr(opening, "OverallHeight", None)),
    )


def assemble_space_record(
    space: ifcopenshell.entity_instance,
    windows_by_zone: OpeningIndex,
    doors_by_zone: OpeningIndex,
    mapping: FieldMapping = DEFAULT_MAPPING,
) -> SpaceRecord:
    """Resolve every report field of *space*.

    Missing values stay ``None``.  The space must have a name, since the name
    is the key into both opening indexes.
    """
    name = space.Name
    if not name:
        raise ValueError(f"Cannot assemble a record for unnamed space #{space.id()}")

    storey = get_storey(space)
    windows = windows_by_zone.get(name, ())
    doors = doors_by_zone.get(name, ())

    record = SpaceRecord(
        name=name,
        long_name=getattr(space, "LongName", None),
        global_id=getattr(space, "GlobalId", None),
        storey_name=storey.Name if storey is not None else None,
        storey_id=getattr(storey, "GlobalId", None) if storey is not None else None,
        area=get_area(space),
        gross_height=get_length_quantity(space, mapping.gross_height_quantity),
        net_height=get_length_quantity(space, mapping.net_height_quantity),
        perimeter=get_perimeter(space, mapping),
        floor_material=get_floor_material(space, mapping),
        ceiling_material=get_ceiling_material(space, mapping),
        wall_finish_east=get_wall_finish(space, Orientation.EAST, mapping),
        wall_finish_north=get_wall_finish(space, Orientation.NORTH, mapping),
        wall_finish_west=get_wall_finish(space, Orientation.WEST, mapping),
        wall_finish_south=get_wall_finish(space, Orientation.SOUTH, mapping),
        skirting=get_skirting(space, mapping),
        windows=[opening_record(w, OpeningKind.WINDOW) for w in windows],
        doors=[opening_record(d, OpeningKind.DOOR) for d in doors],
    )
    logger.debug(
        "Assembled space %s (%d windows, %d doors)",
        name,
        len(record.windows),
        len(record.doors),
    )
    return record
