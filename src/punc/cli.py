"""Typer-based command line interface.

``punc analyze`` prints the punctuation counts and words-per-sentence figure
of a text file (or the full result as JSON) and can save the redacted
skeleton.  ``punc render`` writes the skeleton to ``<file>-visual.pdf``.
``punc symbols`` lists the recognized symbol catalogue.

Exit codes
----------
0 success
3 I/O error (input unreadable, output unwritable)
4 configuration error (bad options, config file or encoding)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import PuncOptions, load_options
from .io import write_text
from .mapping import symbol_groups
from .pipeline import RunResult, analyze
from .render import render_redacted
from .utils.errors import DestinationUnwritableError, InvalidArgumentError, SourceUnavailableError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="punc",
    help="Punctuation analysis of text files. Use 'punc analyze FILE' to get started.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


def _build_options(config_path: Path | None, encoding: str | None) -> PuncOptions | None:
    """Load ``config_path`` (if any) and apply the ``--encoding`` override."""

    opts: PuncOptions | None = None
    if config_path is not None:
        try:
            opts = load_options(config_path)
        except (ValidationError, InvalidArgumentError, yaml.YAMLError, OSError) as exc:
            _safe_exit(4, str(exc).splitlines()[0])
    if encoding:
        opts = (opts or PuncOptions()).model_copy(update={"encoding": encoding})
    return opts


def _format_ratio(value: float) -> str:
    return "inf" if value == float("inf") else f"{value:.2f}"


def _echo_summary(result: RunResult) -> None:
    for key, n in result.count.items():
        if n:
            typer.echo(f"{key}\t{n}")
    typer.echo(f"words per sentence\t{_format_ratio(result.words_per_sentence)}")


@app.callback()
def main() -> None:
    """Entry point for the punc command group."""
    pass


@app.command("analyze")
def analyze_cmd(
    path: str = typer.Argument(..., help="Text file to analyze"),
    encoding: Optional[str] = typer.Option(  # noqa: B008
        None, "--encoding", "-e", help="Input text encoding (default utf-8)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML options file to override defaults"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    spaced_out: Optional[Path] = typer.Option(  # noqa: B008
        None, "--spaced-out", help="Also write the redacted text to this file"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Count punctuation in ``path`` and report words per sentence."""

    configure_logging(verbose)
    opts = _build_options(config_path, encoding)

    try:
        with Timing() as t_run:
            result = analyze(path, opts)
    except InvalidArgumentError as exc:
        _safe_exit(4, str(exc))
    except SourceUnavailableError as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Analyzed {path} in {t_run.ms:.1f} ms", err=True)

    if spaced_out is not None:
        try:
            write_text(spaced_out, result.spaced)
        except DestinationUnwritableError as exc:
            _safe_exit(3, str(exc))
        if verbose:
            typer.echo(f"Wrote {spaced_out}", err=True)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _echo_summary(result)


@app.command("render")
def render_cmd(
    path: str = typer.Argument(..., help="Text file to render"),
    encoding: Optional[str] = typer.Option(  # noqa: B008
        None, "--encoding", "-e", help="Input text encoding (default utf-8)"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML options file to override defaults"
    ),
    font_size: float = typer.Option(25.0, "--font-size", min=1.0, help="PDF font size"),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Write the redacted skeleton of ``path`` to ``<path>-visual.pdf``."""

    configure_logging(verbose)
    opts = _build_options(config_path, encoding)

    try:
        with Timing() as t_render:
            rendered = render_redacted(path, opts, font_size=font_size)
    except InvalidArgumentError as exc:
        _safe_exit(4, str(exc))
    except (SourceUnavailableError, DestinationUnwritableError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Rendered in {t_render.ms:.1f} ms", err=True)
    typer.echo(rendered.path_to_file)


@app.command("symbols")
def symbols_cmd() -> None:
    """List the recognized symbols by group."""

    for group, symbols in symbol_groups().items():
        typer.echo(f"{group}: {' '.join(symbols)}")
