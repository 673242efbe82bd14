"""File I/O collaborators of the pipeline.

The pipeline only needs two capabilities: a chunked text source for a path
(:func:`iter_chunks`) and sinks that persist the redacted skeleton
(:func:`write_text` and :func:`write_pdf`).  Neither reader nor writers
normalize content; that is the job of the transform stages.
"""

from __future__ import annotations

from .readers.txt_reader import DEFAULT_CHUNK_SIZE, iter_chunks
from .writers.pdf_writer import write_pdf
from .writers.txt_writer import write_text

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "iter_chunks",
    "write_pdf",
    "write_text",
]
