"""Pydantic models shared by extraction and reporting."""

from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.models.space import (
    BatchResult,
    OpeningKind,
    OpeningRecord,
    Orientation,
    SpaceRecord,
)

__all__ = [
    "DEFAULT_MAPPING",
    "BatchResult",
    "FieldMapping",
    "OpeningKind",
    "OpeningRecord",
    "Orientation",
    "SpaceRecord",
]
