"""spacereport: per-space reports extracted from IFC building models."""

__version__ = "1.0.0"

from spacereport.errors import (
    ConfigError,
    InvalidOrientationError,
    ModelLoadError,
    SpaceReportError,
)
from spacereport.extraction.assembler import assemble_space_record
from spacereport.extraction.openings import build_opening_index
from spacereport.extraction.pipeline import (
    generate_space_reports,
    open_model,
    process_ifc_file,
)
from spacereport.extraction.resolver import (
    QuantityKind,
    get_length_quantity,
    get_property_value,
    get_quantity_by_kind,
    get_storey,
    get_wall_finish,
)
from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.models.space import (
    BatchResult,
    OpeningKind,
    OpeningRecord,
    Orientation,
    SpaceRecord,
)
from spacereport.report import get_labels, render_space_html, render_space_markdown

__all__ = [
    "__version__",
    # Errors
    "ConfigError",
    "InvalidOrientationError",
    "ModelLoadError",
    "SpaceReportError",
    # Resolver
    "QuantityKind",
    "get_length_quantity",
    "get_property_value",
    "get_quantity_by_kind",
    "get_storey",
    "get_wall_finish",
    # Assembly and pipeline
    "assemble_space_record",
    "build_opening_index",
    "generate_space_reports",
    "open_model",
    "process_ifc_file",
    # Models
    "DEFAULT_MAPPING",
    "BatchResult",
    "FieldMapping",
    "OpeningKind",
    "OpeningRecord",
    "Orientation",
    "SpaceRecord",
    # Rendering
    "get_labels",
    "render_space_html",
    "render_space_markdown",
]
