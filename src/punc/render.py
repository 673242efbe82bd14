"""Render the redacted skeleton of a text file into a PDF.

The output path is always the input path with ``-visual.pdf`` appended.  The
pipeline supplies the ``spaced`` text; page layout is left to
:mod:`punc.io.writers.pdf_writer`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .io.writers.pdf_writer import FONT_SIZE, write_pdf
from .pipeline import analyze
from .utils.logging import get_logger

__all__ = ["PDF_SUFFIX", "RenderResult", "visual_pdf_path", "render_redacted"]

PDF_SUFFIX = "-visual.pdf"

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class RenderResult:
    """Outcome of :func:`render_redacted`."""

    success: bool
    path_to_file: str

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "pathToFile": self.path_to_file}


def visual_pdf_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` with the literal ``-visual.pdf`` suffix appended."""

    return f"{os.fspath(path)}{PDF_SUFFIX}"


def render_redacted(
    path: str | os.PathLike[str],
    options: Any = None,
    *,
    font_size: float = FONT_SIZE,
) -> RenderResult:
    """Write the redacted skeleton of ``path`` to ``<path>-visual.pdf``.

    Raises
    ------
    InvalidArgumentError
        For a bad path or options.
    SourceUnavailableError
        If the input cannot be read.
    DestinationUnwritableError
        If the PDF cannot be written.
    """

    result = analyze(path, options)
    out_path = visual_pdf_path(path)
    write_pdf(out_path, result.spaced, font_size=font_size)
    log.debug("wrote %s", out_path)
    return RenderResult(success=True, path_to_file=out_path)
