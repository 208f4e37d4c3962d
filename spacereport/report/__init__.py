"""Render SpaceRecords as HTML or Markdown documents."""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from spacereport.errors import ConfigError
from spacereport.report.html import render_space_html
from spacereport.report.labels import ENGLISH, GREEK, LABELS, ReportLabels, get_labels
from spacereport.report.markdown import render_space_markdown
from spacereport.report.writer import report_filename, write_report


class Renderer(NamedTuple):
    render: Callable[..., str]
    suffix: str


RENDERERS: dict[str, Renderer] = {
    "html": Renderer(render_space_html, ".html"),
    "md": Renderer(render_space_markdown, ".md"),
}


def get_renderer(fmt: str) -> Renderer:
    """Return the renderer registered for *fmt* (``"html"`` or ``"md"``)."""
    try:
        return RENDERERS[fmt.lower()]
    except KeyError:
        raise ConfigError(
            f"Unsupported report format {fmt!r}; choose one of {', '.join(sorted(RENDERERS))}"
        ) from None


__all__ = [
    "ENGLISH",
    "GREEK",
    "LABELS",
    "RENDERERS",
    "Renderer",
    "ReportLabels",
    "get_labels",
    "get_renderer",
    "render_space_html",
    "render_space_markdown",
    "report_filename",
    "write_report",
]
