"""Chunk-boundary behaviour, error propagation and run isolation."""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from punc import analyze
from punc.config import RunConfiguration
from punc.mapping import fresh_mapping
from punc.pipeline import Pipeline
from punc.stages import redact_alphanumerics, strip_line_endings
from punc.utils.errors import SourceUnavailableError


def _write(tmp_path: Path, text: str, name: str = "in.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8", newline="")
    return path


def _config(**overrides: object) -> RunConfiguration:
    values: dict[str, object] = {
        "encoding": "utf-8",
        "mapping": fresh_mapping(),
        "chunk_size": 65536,
        "words_per_sentence": "last_chunk",
    }
    values.update(overrides)
    return RunConfiguration(**values)  # type: ignore[arg-type]


def test_words_per_sentence_is_last_chunk_by_default(tmp_path: Path) -> None:
    path = _write(tmp_path, "Hi. Hi there friend")
    result = analyze(path, {"chunk_size": 4})
    # last chunk is "end": one word, no terminator
    assert result.words_per_sentence == math.inf


def test_words_per_sentence_stream_mode(tmp_path: Path) -> None:
    path = _write(tmp_path, "Hi. Hi there friend")
    result = analyze(path, {"chunk_size": 4, "words_per_sentence": "stream"})
    # chunks: "Hi. " (2 words, 1 sentence), "Hi t" (2), "here" (1), " fri" (2), "end" (1)
    assert result.words_per_sentence == 8.0


def test_stream_mode_on_empty_file(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, ""), {"words_per_sentence": "stream"})
    assert result.words_per_sentence == 0


def test_spaced_concatenates_chunks(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, "a.b,c"), {"chunk_size": 2})
    assert result.spaced == " . , "
    assert result.body == ".,"


def test_spaced_last_chunk_mode(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, "a.b,c"), {"chunk_size": 2, "spaced": "last_chunk"})
    assert result.spaced == " "
    assert result.body == ".,"


def test_spaced_last_chunk_mode_on_empty_file(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, ""), {"spaced": "last_chunk"})
    assert result.spaced == ""


def test_aggregate_split_across_chunks_is_missed(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, "a!!!"), {"chunk_size": 2})
    assert result.count["!!!"] == 0
    assert result.count["!"] == 3


def test_multibyte_characters_are_not_split(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, "💙💚💛💜"), {"chunk_size": 1})
    assert result.body == "💙💚💛💜"


def test_newline_only_file_is_not_empty(tmp_path: Path) -> None:
    result = analyze(_write(tmp_path, "\n"))
    assert result.words_per_sentence == math.inf
    assert result.spaced == ""


def test_pipeline_runs_custom_stage_list() -> None:
    pipeline = Pipeline([strip_line_endings, redact_alphanumerics])
    result = pipeline.run(["ab\ncd!", "ef"], _config())
    assert result.spaced == " ! "
    assert result.body == ""
    assert result.words_per_sentence == 0


def test_missing_key_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    mapping = fresh_mapping()
    del mapping["!"]
    with caplog.at_level(logging.WARNING, logger="punc"):
        result = Pipeline().run(["Hey! You?"], _config(mapping=mapping))
    assert "!" not in result.count
    assert result.count["?"] == 1
    assert result.body == "?"
    assert "not found in punctuation map" in caplog.text


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(SourceUnavailableError) as excinfo:
        analyze(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert str(missing) in str(excinfo.value)


def test_directory_is_unavailable(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        analyze(tmp_path)


def test_decode_error_is_unavailable(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok \xff\xfe\xfa")
    with pytest.raises(SourceUnavailableError) as excinfo:
        analyze(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_source_unavailable_is_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        analyze(tmp_path / "missing.txt")


def test_concurrent_runs_match_sequential(tmp_path: Path) -> None:
    texts = [
        "Wow!!! Really??? " * 50,
        "One. Two, three; four: five... " * 40,
        "(a) [b] {c} <d> " * 30,
        "",
        "€5 + £3 = ¥? ✓ ✗ " * 25,
    ]
    paths = [_write(tmp_path, text, f"f{i}.txt") for i, text in enumerate(texts)]
    sequential = [analyze(p, {"chunk_size": 16}) for p in paths]
    with ThreadPoolExecutor(max_workers=len(paths)) as pool:
        concurrent = list(pool.map(lambda p: analyze(p, {"chunk_size": 16}), paths))
    assert concurrent == sequential
