"""Tests for the chunked reader and plain-text writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from punc.io import iter_chunks, write_text
from punc.utils.errors import DestinationUnwritableError


def test_iter_chunks_splits_by_characters(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    path.write_text("abcdef", encoding="utf-8")
    assert list(iter_chunks(path, chunk_size=4)) == ["abcd", "ef"]


def test_iter_chunks_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert list(iter_chunks(path)) == []


def test_iter_chunks_preserves_newlines(tmp_path: Path) -> None:
    content = "A\nB\r\nC\rD"
    path = tmp_path / "eol.txt"
    path.write_bytes(content.encode("utf-8"))
    assert "".join(iter_chunks(path, chunk_size=3)) == content


def test_iter_chunks_decodes_multibyte_incrementally(tmp_path: Path) -> None:
    path = tmp_path / "emoji.txt"
    path.write_text("é💙€", encoding="utf-8")
    assert list(iter_chunks(path, chunk_size=1)) == ["é", "💙", "€"]


def test_iter_chunks_rejects_bad_chunk_size(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        list(iter_chunks(tmp_path / "x.txt", chunk_size=0))


def test_iter_chunks_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(iter_chunks(tmp_path / "missing.txt"))


def test_write_text_creates_parent_dirs(tmp_path: Path) -> None:
    file_path = tmp_path / "nested" / "dir" / "skeleton.txt"
    write_text(file_path, " , .  !")
    assert file_path.read_text(encoding="utf-8") == " , .  !"


def test_write_text_unwritable(tmp_path: Path) -> None:
    target = tmp_path / "is-a-dir"
    target.mkdir()
    with pytest.raises(DestinationUnwritableError):
        write_text(target, "data")
