"""HTML space report, laid out to print on a single A4 page."""

from __future__ import annotations

from datetime import datetime
from html import escape

from spacereport.models.space import SpaceRecord
from spacereport.report.labels import ENGLISH, ReportLabels
from spacereport.report.rows import basic_rows, finish_rows, opening_rows, subtitle

_STYLESHEET = """\
@page { size: A4; margin: 10mm 15mm; }
* { box-sizing: border-box; margin: 0; padding: 0; }
body { font-family: 'Segoe UI', 'Calibri', Arial, sans-serif; font-size: 9pt; line-height: 1.2; color: #333; background: white; print-color-adjust: exact; }
@media print {
    .avoid-break { page-break-inside: avoid; }
    h1, h2 { page-break-after: avoid; }
    tr { page-break-inside: avoid; }
    thead { display: table-header-group; }
    .materials-section { flex-direction: column; gap: 6pt; }
    table { font-size: 7pt; }
}
.report-container { max-width: 190mm; margin: 0 auto; display: flex; flex-direction: column; min-height: 100vh; }
.report-header { text-align: center; border-bottom: 2pt solid #2c3e50; padding: 12pt; margin-bottom: 12pt; background: #f8f9fa; }
h1 { font-size: 14pt; color: #2c3e50; text-transform: uppercase; letter-spacing: 0.5pt; margin-bottom: 4pt; }
.space-subtitle { font-size: 11pt; color: #666; }
h2 { font-size: 10pt; color: #c0392b; margin: 8pt 0 4pt; padding: 4pt 8pt; background: #f8f9fa; border-left: 3pt solid #c0392b; text-transform: uppercase; }
table { width: 100%; border-collapse: collapse; margin: 6pt 0; font-size: 8pt; }
th { background: #34495e; color: white; padding: 4pt 6pt; text-align: left; font-size: 7pt; text-transform: uppercase; }
td { padding: 3pt 6pt; border-bottom: 0.5pt solid #e0e0e0; vertical-align: top; }
tr:nth-child(even) td { background: #f8f9fa; }
.summary-box { border: 0.5pt solid #2196f3; border-radius: 3pt; padding: 8pt; margin: 6pt 0; }
.materials-section { display: flex; align-items: flex-start; gap: 12pt; margin: 8pt 0; }
.wall-diagram-container { flex: 0 0 80pt; text-align: center; padding: 8pt; background: #f8f9fa; border: 0.5pt solid #e0e0e0; }
.wall-diagram-title { font-size: 7pt; font-weight: bold; color: #2c3e50; margin-bottom: 6pt; text-transform: uppercase; }
.wall-diagram { border: 1.5pt solid #2c3e50; width: 50pt; height: 50pt; position: relative; margin: 0 auto; }
.wall-label { position: absolute; font-weight: bold; font-size: 8pt; color: #c0392b; background: white; padding: 1pt 3pt; border: 0.5pt solid #c0392b; }
.wall-label.north { top: -8pt; left: 50%; transform: translateX(-50%); }
.wall-label.south { bottom: -8pt; left: 50%; transform: translateX(-50%); }
.wall-label.east { right: -8pt; top: 50%; transform: translateY(-50%); }
.wall-label.west { left: -8pt; top: 50%; transform: translateY(-50%); }
.materials-table { flex: 1; }
.highlight-value { font-weight: bold; color: #2c3e50; }
.orientation-label { color: #c0392b; font-weight: bold; }
.content-area { flex: 1; }
.report-footer { margin-top: auto; padding-top: 6pt; border-top: 0.5pt solid #e0e0e0; font-size: 7pt; color: #666; text-align: center; }
"""


def _table(headers: tuple[str, ...], rows: list[str]) -> list[str]:
    head = "".join(f"<th>{escape(h)}</th>" for h in headers)
    return [
        "<table>",
        "<thead>",
        f"<tr>{head}</tr>",
        "</thead>",
        "<tbody>",
        *rows,
        "</tbody>",
        "</table>",
    ]


def render_space_html(
    record: SpaceRecord,
    labels: ReportLabels = ENGLISH,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Return the full HTML document for one space.

    The output depends only on the arguments.  A footer with the generation
    time is added when *generated_at* is given.
    """
    title = escape(labels.title)
    lines: list[str] = [
        "<!DOCTYPE html>",
        f'<html lang="{escape(labels.language)}">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{title} - {escape(record.name)}</title>",
        "<style>",
        _STYLESHEET.rstrip("\n"),
        "</style>",
        "</head>",
        "<body>",
        "<div class='report-container'>",
    ]

    # Header
    lines.append("<div class='report-header avoid-break'>")
    lines.append(f"<h1>{title}</h1>")
    lines.append(f"<p class='space-subtitle'>{escape(subtitle(record))}</p>")
    lines.append("</div>")

    lines.append("<div class='content-area'>")

    # Basic information
    lines.append("<div class='summary-box avoid-break'>")
    lines.append(f"<h2>{escape(labels.basic_info)}</h2>")
    lines.extend(_table(
        (labels.attribute, labels.value),
        [
            f"<tr><td>{escape(caption)}</td><td class='highlight-value'>{escape(value)}</td></tr>"
            for caption, value in basic_rows(record, labels)
        ],
    ))
    lines.append("</div>")

    # Materials and finishes
    lines.append(f"<h2>{escape(labels.materials)}</h2>")
    lines.append("<div class='materials-section avoid-break'>")
    lines.append("<div class='wall-diagram-container'>")
    lines.append(f"<div class='wall-diagram-title'>{escape(labels.orientation)}</div>")
    lines.append("<div class='wall-diagram'>")
    for css in ("north", "south", "east", "west"):
        lines.append(f"<div class='wall-label {css}'>{escape(getattr(labels, css))}</div>")
    lines.append("</div>")
    lines.append("</div>")

    finish_html: list[str] = []
    for row in finish_rows(record, labels):
        surface = escape(row.surface)
        if row.compass is not None:
            surface = f"<span class='orientation-label'>{escape(row.compass)}</span> {surface}"
        finish_html.append(f"<tr><td>{surface}</td><td>{escape(row.value)}</td></tr>")
    lines.append("<div class='materials-table'>")
    lines.extend(_table((labels.surface, labels.finish), finish_html))
    lines.append("</div>")
    lines.append("</div>")

    # Openings, only when the space has any
    if record.has_openings:
        lines.append(f"<h2>{escape(labels.openings)}</h2>")
        lines.extend(_table(
            (labels.opening_type, labels.opening_name, labels.dimensions),
            [
                f"<tr><td>{escape(row.kind)}</td><td>{escape(row.name)}</td>"
                f"<td class='highlight-value'>{escape(row.dimensions)}</td></tr>"
                for row in opening_rows(record, labels)
            ],
        ))

    lines.append("</div>")

    if generated_at is not None:
        stamp = generated_at.strftime("%d/%m/%Y %H:%M")
        lines.append("<div class='report-footer'>")
        lines.append(
            f"<p>{escape(labels.generated)}: {stamp} | {escape(labels.footer_note)}</p>"
        )
        lines.append("</div>")

    lines.append("</div>")
    lines.append("</body>")
    lines.append("</html>")
    lines.append("")

    return "\n".join(lines)
