"""Chunked plain-text reader.

:func:`iter_chunks` streams a text file as a sequence of decoded strings of at
most ``chunk_size`` characters.  Decoding is incremental, so a multi-byte
character is never split across two chunks.  Newlines are passed through
untranslated (``newline=""``); the pipeline strips them itself.

Example
-------
``list(iter_chunks(path, chunk_size=4))`` on a file holding ``"abcdef"``
yields ``["abcd", "ef"]``.  An empty file yields nothing.  ``OSError`` and
``UnicodeDecodeError`` propagate to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

PathLikeStr = os.PathLike[str]

DEFAULT_CHUNK_SIZE = 64 * 1024


def iter_chunks(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    errors: str = "strict",
) -> Iterator[str]:
    """Yield successive text chunks of ``path``.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding used to decode the file.
    chunk_size:
        Maximum number of characters per chunk.  Must be positive.
    errors:
        Error handling strategy passed to :func:`open`.

    Notes
    -----
    The file is opened lazily on the first ``next()`` and closed when the
    generator is exhausted or closed.
    """

    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield chunk


__all__ = ["DEFAULT_CHUNK_SIZE", "iter_chunks"]
