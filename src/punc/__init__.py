"""Streaming punctuation analysis and redaction for text files.

:func:`analyze` counts the punctuation and symbols of a file, measures a naive
words-per-sentence figure and builds a redacted skeleton where letters and
digits are blanked out.  :func:`render_redacted` writes that skeleton to a
PDF.  The command line interface lives in :mod:`punc.cli`.
"""

from .config import PuncOptions, RunConfiguration, load_options, resolve_options
from .mapping import fresh_mapping, merge_mapping
from .pipeline import RunResult, analyze
from .render import RenderResult, render_redacted
from .utils.errors import (
    DestinationUnwritableError,
    InvalidArgumentError,
    PuncError,
    SourceUnavailableError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze",
    "render_redacted",
    "fresh_mapping",
    "merge_mapping",
    "resolve_options",
    "load_options",
    "PuncOptions",
    "RunConfiguration",
    "RunResult",
    "RenderResult",
    "PuncError",
    "InvalidArgumentError",
    "SourceUnavailableError",
    "DestinationUnwritableError",
]
