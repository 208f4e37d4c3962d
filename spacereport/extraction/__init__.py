"""Attribute extraction: resolver, opening index, record assembly, pipeline."""

from spacereport.extraction.assembler import assemble_space_record
from spacereport.extraction.openings import build_opening_index
from spacereport.extraction.pipeline import (
    generate_space_reports,
    open_model,
    process_ifc_file,
)

__all__ = [
    "assemble_space_record",
    "build_opening_index",
    "generate_space_reports",
    "open_model",
    "process_ifc_file",
]
