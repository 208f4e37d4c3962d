"""Report pipeline: one document per named IfcSpace.

Entry points: ``process_ifc_file(ifc_path, output_dir)`` opens a model from
disk, ``generate_space_reports(model, output_dir)`` works on a model that is
already open.

Windows and doors are indexed by zone key once, then every named space is
assembled into a SpaceRecord, rendered and written to
``<output_dir>/<space name><suffix>``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import ifcopenshell

from spacereport.config import (
    DEFAULT_FORMAT,
    DEFAULT_OUTPUT_DIR,
    DOOR_CLASS,
    SPACE_CLASS,
    SUPPORTED_SCHEMAS,
    WINDOW_CLASS,
)
from spacereport.errors import ModelLoadError
from spacereport.extraction.assembler import assemble_space_record
from spacereport.extraction.openings import build_opening_index
from spacereport.extraction.resolver import get_related_zone_number
from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.models.space import BatchResult
from spacereport.report import get_renderer, write_report
from spacereport.report.labels import ENGLISH, ReportLabels

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def open_model(ifc_path: str | Path) -> ifcopenshell.file:
    """Open an IFC file, raising :class:`ModelLoadError` on any failure."""
    path = Path(ifc_path)
    if not path.is_file():
        raise ModelLoadError(f"IFC file not found: {path}")

    logger.info("Opening %s", path)
    try:
        model = ifcopenshell.open(str(path))
    except Exception as exc:
        raise ModelLoadError(f"Could not open IFC file {path}: {exc}") from exc

    if model.schema not in SUPPORTED_SCHEMAS:
        logger.warning("Schema %s is not tested; reading it anyway", model.schema)
    return model


def generate_space_reports(
    model: ifcopenshell.file,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    *,
    fmt: str = DEFAULT_FORMAT,
    labels: ReportLabels = ENGLISH,
    mapping: FieldMapping = DEFAULT_MAPPING,
    generated_at: datetime | None = None,
    progress: ProgressCallback | None = None,
) -> BatchResult:
    """Write one report per named space of *model* into *output_dir*.

    Parameters
    ----------
    model:
        An open IFC model.
    output_dir:
        Directory for the reports; created if absent.
    fmt:
        ``"html"`` or ``"md"``.
    labels:
        Captions and placeholders (see :mod:`spacereport.report.labels`).
    mapping:
        Property-set and quantity names to read.
    generated_at:
        Timestamp for the report footer.  Omit for footer-less output.
    progress:
        Called as ``progress(done, total)`` after each report is written.
        *total* counts named spaces only.

    Returns
    -------
    BatchResult
        Written paths, counts, and any space names that collided.
    """
    renderer = get_renderer(fmt)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    def zone_key(opening: ifcopenshell.entity_instance) -> str | None:
        return get_related_zone_number(opening, mapping)

    try:
        windows_by_zone = build_opening_index(model.by_type(WINDOW_CLASS), zone_key)
        doors_by_zone = build_opening_index(model.by_type(DOOR_CLASS), zone_key)
        spaces = model.by_type(SPACE_CLASS)
    except RuntimeError as exc:
        raise ModelLoadError(f"Could not enumerate model entities: {exc}") from exc

    named = [s for s in spaces if s.Name]
    result = BatchResult(
        output_dir=output_dir,
        total=len(named),
        skipped_unnamed=len(spaces) - len(named),
    )
    logger.info(
        "Found %d spaces (%d unnamed), %d zones with windows, %d with doors",
        len(spaces),
        result.skipped_unnamed,
        len(windows_by_zone),
        len(doors_by_zone),
    )

    seen: set[Path] = set()
    for done, space in enumerate(named, start=1):
        record = assemble_space_record(space, windows_by_zone, doors_by_zone, mapping)
        content = renderer.render(record, labels, generated_at=generated_at)
        path = write_report(output_dir, record.name, renderer.suffix, content)

        if path in seen:
            # Last write wins; earlier report for this name is gone
            logger.warning("Space name %r is not unique; overwrote %s", record.name, path)
            if record.name not in result.duplicates:
                result.duplicates.append(record.name)
        else:
            seen.add(path)
            result.written.append(path)

        if progress is not None:
            progress(done, result.total)

    logger.info("Generated %d reports -> %s", result.count, output_dir)
    return result


def process_ifc_file(
    ifc_path: str | Path,
    output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    **kwargs,
) -> BatchResult:
    """Open *ifc_path* and run :func:`generate_space_reports` on it."""
    model = open_model(ifc_path)
    return generate_space_reports(model, output_dir, **kwargs)
