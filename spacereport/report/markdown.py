"""Markdown space report."""

from __future__ import annotations

from datetime import datetime

from spacereport.models.space import SpaceRecord
from spacereport.report.labels import ENGLISH, ReportLabels
from spacereport.report.rows import basic_rows, finish_rows, opening_rows, subtitle


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def render_space_markdown(
    record: SpaceRecord,
    labels: ReportLabels = ENGLISH,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Return the full Markdown string for one space."""
    lines: list[str] = []

    # Title
    lines.append(f"# {labels.title}: {subtitle(record)}")
    lines.append("")

    # Basic information
    lines.append(f"## {labels.basic_info}")
    lines.append("")
    lines.append(f"| {labels.attribute} | {labels.value} |")
    lines.append("|---|---|")
    for caption, value in basic_rows(record, labels):
        lines.append(f"| {caption} | {_cell(value)} |")
    lines.append("")

    # Materials and finishes
    lines.append(f"## {labels.materials}")
    lines.append("")
    lines.append(f"| {labels.surface} | {labels.finish} |")
    lines.append("|---|---|")
    for row in finish_rows(record, labels):
        surface = row.surface if row.compass is None else f"**{row.compass}** {row.surface}"
        lines.append(f"| {surface} | {_cell(row.value)} |")
    lines.append("")

    # Openings
    if record.has_openings:
        lines.append(f"## {labels.openings}")
        lines.append("")
        lines.append(f"| {labels.opening_type} | {labels.opening_name} | {labels.dimensions} |")
        lines.append("|---|---|---|")
        for row in opening_rows(record, labels):
            lines.append(f"| {row.kind} | {_cell(row.name)} | {row.dimensions} |")
        lines.append("")

    if generated_at is not None:
        stamp = generated_at.strftime("%d/%m/%Y %H:%M")
        lines.append(f"*{labels.generated}: {stamp} | {labels.footer_note}*")
        lines.append("")

    return "\n".join(lines)
