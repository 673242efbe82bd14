"""PDF document writer.

Renders a redacted skeleton onto A4 pages with reportlab.  The text is drawn
in a single fixed font and size.  Lines are wrapped by character rather than
by word so that runs of spaces, which carry the layout of the skeleton, are
kept intact.  A new page starts whenever the bottom margin is reached.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from ...utils.errors import DestinationUnwritableError

PathLikeStr = os.PathLike[str]

FONT_NAME = "Courier"
FONT_SIZE = 25
MARGIN = 50


def _wrap(text: str, width_of: Callable[[str], float], max_width: float) -> Iterator[str]:
    """Yield lines of ``text`` no wider than ``max_width``.

    A single character wider than ``max_width`` is emitted on its own line.
    """

    widths: dict[str, float] = {}
    for raw_line in text.split("\n"):
        cur: list[str] = []
        cur_width = 0.0
        for ch in raw_line:
            w = widths.get(ch)
            if w is None:
                w = widths[ch] = width_of(ch)
            if cur and cur_width + w > max_width:
                yield "".join(cur)
                cur = []
                cur_width = 0.0
            cur.append(ch)
            cur_width += w
        yield "".join(cur)


def write_pdf(
    path: str | PathLikeStr,
    text: str,
    *,
    font_name: str = FONT_NAME,
    font_size: float = FONT_SIZE,
    title: str | None = None,
) -> None:
    """Write ``text`` to a PDF at ``path``.

    Raises
    ------
    DestinationUnwritableError
        If the PDF cannot be created or saved.
    """

    file_path = Path(path)
    page_w, page_h = A4
    leading = font_size * 1.2
    max_width = page_w - 2 * MARGIN

    c = canvas.Canvas(str(file_path), pagesize=A4)
    c.setAuthor("punc")
    c.setTitle(title or file_path.name)
    c.setFont(font_name, font_size)

    y = page_h - MARGIN
    for line in _wrap(text, lambda s: c.stringWidth(s, font_name, font_size), max_width):
        if y < MARGIN + leading:
            c.showPage()
            c.setFont(font_name, font_size)
            y = page_h - MARGIN
        c.drawString(MARGIN, y, line)
        y -= leading

    try:
        c.save()
    except OSError as exc:
        raise DestinationUnwritableError(f"File write error: {exc}") from exc


__all__ = ["FONT_NAME", "FONT_SIZE", "write_pdf"]
