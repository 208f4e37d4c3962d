"""Exception types raised by spacereport.

Missing data is never an error: resolvers return ``None`` for it.  The
exceptions below mark conditions that end a run.
"""

from __future__ import annotations


class SpaceReportError(Exception):
    """Base class for all fatal spacereport errors."""


class ModelLoadError(SpaceReportError):
    """Raised when an IFC model cannot be opened or enumerated."""


class InvalidOrientationError(SpaceReportError, ValueError):
    """Raised when a wall-finish lookup receives an unknown orientation."""


class ConfigError(SpaceReportError):
    """Raised for invalid configuration: unknown language, format, level or mapping file."""
