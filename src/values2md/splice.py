"""Splice generated Markdown into a reference document."""

from __future__ import annotations

import logging
from pathlib import Path

from values2md.config import CODEGEN_END_MARKER, CODEGEN_START_MARKER
from values2md.exceptions import MarkerNotFoundError

logger = logging.getLogger(__name__)


def splice_generated(
    contents: str,
    generated: str,
    *,
    start_marker: str = CODEGEN_START_MARKER,
    end_marker: str = CODEGEN_END_MARKER,
) -> str:
    """Replace the text strictly between the two markers with ``generated``.

    Raises:
        MarkerNotFoundError: If either marker is missing.
    """
    start = contents.find(start_marker)
    if start == -1:
        raise MarkerNotFoundError(f"{start_marker!r} not found")
    end = contents.find(end_marker, start + len(start_marker))
    if end == -1:
        raise MarkerNotFoundError(f"{end_marker!r} not found after {start_marker!r}")
    return contents[: start + len(start_marker)] + generated + contents[end:]


def update_reference_file(path: Path, generated: str, encoding: str = "utf-8") -> None:
    """Rewrite the generated block of the reference document at ``path``.

    Args:
        path: The reference document containing the codegen markers.
        generated: Markdown to place between the markers.
        encoding: Text encoding of the document.
    """
    contents = path.read_text(encoding=encoding)
    try:
        updated = splice_generated(contents, generated)
    except MarkerNotFoundError as exc:
        raise MarkerNotFoundError(f"{exc} in {path}") from exc
    path.write_text(updated, encoding=encoding)
    logger.debug("Wrote %d characters of generated docs to %s", len(generated), path)
