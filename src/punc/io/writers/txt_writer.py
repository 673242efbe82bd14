"""Plain-text writer.

The :func:`write_text` helper persists the redacted skeleton to disk exactly
as given.  Directories required to store the file are created automatically.
By default UTF-8 encoding without a BOM is used.
"""

from __future__ import annotations

import os
from pathlib import Path

from ...utils.errors import DestinationUnwritableError

PathLikeStr = os.PathLike[str]


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided.

    Parameters
    ----------
    path:
        Destination file path.
    text:
        The Unicode string to be written.
    encoding:
        Output encoding.  Defaults to UTF-8 without a byte-order mark.
    newline:
        ``newline`` parameter forwarded to :func:`open`.

    Raises
    ------
    DestinationUnwritableError
        If the directory or file cannot be created or written.
    """

    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding=encoding, newline=newline) as f:
            f.write(text)
    except OSError as exc:
        raise DestinationUnwritableError(f"File write error: {exc}") from exc


__all__ = ["write_text"]
