"""SpaceRecord: the flattened, fully resolved view of one IfcSpace.

A record holds plain values only (strings, floats, nested records).  It
never keeps a reference to the IFC model, so rendering can run without the
model being open.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Orientation(str, Enum):
    """Cardinal wall orientation, in report order."""

    EAST = "east"
    NORTH = "north"
    WEST = "west"
    SOUTH = "south"


class OpeningKind(str, Enum):
    """The two opening classes joined to spaces by zone key."""

    WINDOW = "window"
    DOOR = "door"


class OpeningRecord(BaseModel):
    """A window or door as listed in a space report."""

    kind: OpeningKind
    name: str | None = None
    global_id: str | None = None
    overall_width: float | None = None
    overall_height: float | None = None


class SpaceRecord(BaseModel):
    """Resolved attributes of a single named space.

    ``None`` means the value was not found in the model.  Placeholders are
    applied by the renderers, not here.
    """

    name: str
    long_name: str | None = None
    global_id: str | None = None

    # Owning storey
    storey_name: str | None = None
    storey_id: str | None = None

    # Quantities
    area: float | None = None
    gross_height: float | None = None
    net_height: float | None = None
    perimeter: float | None = None

    # Finishes
    floor_material: str | None = None
    ceiling_material: str | None = None
    wall_finish_east: str | None = None
    wall_finish_north: str | None = None
    wall_finish_west: str | None = None
    wall_finish_south: str | None = None
    skirting: str | None = None

    # Openings joined by zone key
    windows: list[OpeningRecord] = Field(default_factory=list)
    doors: list[OpeningRecord] = Field(default_factory=list)

    def wall_finish(self, orientation: Orientation) -> str | None:
        return getattr(self, f"wall_finish_{Orientation(orientation).value}")

    @property
    def has_openings(self) -> bool:
        return bool(self.windows or self.doors)


class BatchResult(BaseModel):
    """Outcome of one report run over a model."""

    output_dir: Path
    total: int = 0
    """Number of named spaces (the progress total)."""

    skipped_unnamed: int = 0
    written: list[Path] = Field(default_factory=list)
    duplicates: list[str] = Field(default_factory=list)
    """Space names whose report overwrote an earlier one in the same run."""

    @property
    def count(self) -> int:
        return len(self.written)
