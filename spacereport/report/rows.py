"""Value formatting and table rows shared by the HTML and Markdown renderers.

Both renderers present the same rows in the same order; only the markup
differs.
"""

from __future__ import annotations

from typing import NamedTuple

from spacereport.config import AREA_UNIT, LENGTH_UNIT
from spacereport.models.space import OpeningRecord, Orientation, SpaceRecord
from spacereport.report.labels import ReportLabels


class FinishRow(NamedTuple):
    surface: str
    compass: str | None
    value: str


class OpeningRow(NamedTuple):
    kind: str
    name: str
    dimensions: str


def format_number(value: float | None, placeholder: str) -> str:
    return placeholder if value is None else f"{value:.2f}"


def format_measure(value: float | None, unit: str, placeholder: str) -> str:
    """Format *value* to two decimals followed by *unit*, e.g. ``12.34 m²``."""
    if value is None:
        return placeholder
    return f"{value:.2f} {unit}"


def format_text(value: str | None, placeholder: str) -> str:
    return placeholder if value is None else value


def format_dimensions(width: float | None, height: float | None, placeholder: str) -> str:
    """Format opening dimensions as ``W×H m``."""
    if width is None and height is None:
        return placeholder
    w = format_number(width, placeholder)
    h = format_number(height, placeholder)
    return f"{w}×{h} {LENGTH_UNIT}"


def subtitle(record: SpaceRecord) -> str:
    """Return ``"<name>"`` or ``"<name> - <long name>"``."""
    if record.long_name:
        return f"{record.name} - {record.long_name}"
    return record.name


def basic_rows(record: SpaceRecord, labels: ReportLabels) -> list[tuple[str, str]]:
    na = labels.not_available
    return [
        (labels.storey, format_text(record.storey_name, na)),
        (labels.area, format_measure(record.area, AREA_UNIT, na)),
        (labels.gross_height, format_measure(record.gross_height, LENGTH_UNIT, na)),
        (labels.net_height, format_measure(record.net_height, LENGTH_UNIT, na)),
        (labels.perimeter, format_measure(record.perimeter, LENGTH_UNIT, na)),
    ]


def finish_rows(record: SpaceRecord, labels: ReportLabels) -> list[FinishRow]:
    na = labels.not_available
    rows = [
        FinishRow(labels.floor, None, format_text(record.floor_material, na)),
        FinishRow(labels.ceiling, None, format_text(record.ceiling_material, na)),
    ]
    # Enum definition order is the report order: East, North, West, South
    for orientation in Orientation:
        rows.append(
            FinishRow(
                labels.wall,
                labels.compass(orientation),
                format_text(record.wall_finish(orientation), na),
            )
        )
    rows.append(FinishRow(labels.skirting, None, format_text(record.skirting, na)))
    return rows


def _opening_row(opening: OpeningRecord, kind: str, labels: ReportLabels) -> OpeningRow:
    return OpeningRow(
        kind,
        labels.missing_name if opening.name is None else opening.name,
        format_dimensions(opening.overall_width, opening.overall_height, labels.not_available),
    )


def opening_rows(record: SpaceRecord, labels: ReportLabels) -> list[OpeningRow]:
    """Windows first, then doors, each in zone-index order."""
    rows = [_opening_row(w, labels.window, labels) for w in record.windows]
    rows.extend(_opening_row(d, labels.door, labels) for d in record.doors)
    return rows
