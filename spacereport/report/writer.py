"""Write rendered reports into the output directory."""

from __future__ import annotations

import re
from pathlib import Path

# Path separators and characters Windows refuses in file names
_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def report_filename(space_name: str, suffix: str) -> str:
    """Return the file name for a space report, e.g. ``"101.html"``.

    The space name is kept as-is except for characters that cannot appear in
    a file name, which become ``_``.
    """
    stem = _UNSAFE_CHARS.sub("_", space_name).strip() or "_"
    return f"{stem}{suffix}"


def write_report(folder: Path, space_name: str, suffix: str, content: str) -> Path:
    """Write *content* to ``<folder>/<space_name><suffix>``, creating dirs if needed.

    An existing file of the same name is overwritten.  Returns the path to
    the written file.
    """
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / report_filename(space_name, suffix)
    path.write_text(content, encoding="utf-8")
    return path
