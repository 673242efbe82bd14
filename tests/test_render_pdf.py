"""Tests for the PDF renderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from punc import render_redacted
from punc.io.writers.pdf_writer import _wrap, write_pdf
from punc.render import RenderResult, visual_pdf_path
from punc.utils.errors import DestinationUnwritableError, InvalidArgumentError, SourceUnavailableError


def test_render_writes_visual_pdf(tmp_path: Path) -> None:
    src = tmp_path / "speech"
    src.write_text("I have a dream... that one day!\nFree at last, free at last!", encoding="utf-8")
    result = render_redacted(src)
    assert isinstance(result, RenderResult)
    assert result.success is True
    assert result.path_to_file == f"{src}-visual.pdf"
    out = Path(result.path_to_file)
    assert out.read_bytes().startswith(b"%PDF")
    assert result.to_dict() == {"success": True, "pathToFile": str(out)}


def test_render_long_text_paginates(tmp_path: Path) -> None:
    src = tmp_path / "long.txt"
    src.write_text("Hello, world! " * 2000, encoding="utf-8")
    result = render_redacted(src, font_size=12)
    assert Path(result.path_to_file).stat().st_size > 0


def test_render_empty_file(tmp_path: Path) -> None:
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")
    result = render_redacted(src)
    assert Path(result.path_to_file).read_bytes().startswith(b"%PDF")


def test_visual_pdf_path() -> None:
    assert visual_pdf_path("books/alice.txt") == "books/alice.txt-visual.pdf"
    assert visual_pdf_path(Path("dream")) == "dream-visual.pdf"


def test_render_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        render_redacted(tmp_path / "missing.txt")
    assert not (tmp_path / "missing.txt-visual.pdf").exists()


def test_render_invalid_path() -> None:
    with pytest.raises(InvalidArgumentError):
        render_redacted("   ")


def test_render_unwritable_destination(tmp_path: Path) -> None:
    src = tmp_path / "in.txt"
    src.write_text("Hi!", encoding="utf-8")
    Path(f"{src}-visual.pdf").mkdir()
    with pytest.raises(DestinationUnwritableError):
        render_redacted(src)


def test_write_pdf_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(DestinationUnwritableError):
        write_pdf(tmp_path / "no" / "such" / "dir" / "out.pdf", "!?")


def test_wrap_by_character() -> None:
    assert list(_wrap("abcdefg", len, 3)) == ["abc", "def", "g"]
    assert list(_wrap("a\nb", len, 3)) == ["a", "b"]
    assert list(_wrap("", len, 3)) == [""]


def test_wrap_keeps_runs_of_spaces() -> None:
    assert list(_wrap(" ,    !", len, 4)) == [" ,  ", "  !"]
