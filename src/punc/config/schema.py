"""Typed option schema, loader and resolver."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, conint

from ..mapping import merge_mapping
from ..utils.errors import InvalidArgumentError

ChunkMode = Literal["last_chunk", "stream"]
WordsPerSentenceMode = ChunkMode
SpacedMode = ChunkMode

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PuncOptions(BaseModel):
    """Caller supplied options.  Every field is optional."""

    encoding: Optional[str] = None
    mapping: Optional[dict[str, Any]] = None
    chunk_size: Optional[conint(ge=1)] = None  # type: ignore[valid-type]
    words_per_sentence: Optional[WordsPerSentenceMode] = None
    spaced: Optional[SpacedMode] = None

    model_config = ConfigDict(extra="forbid")


@dataclass(slots=True, frozen=True)
class RunConfiguration:
    """Fully resolved settings for one run.

    Attributes
    ----------
    encoding:
        Text encoding known to the codec registry.
    mapping:
        Count table holding every recognized symbol.  Owned by a single run
        and mutated in place while it executes.
    chunk_size:
        Number of characters read per chunk.
    words_per_sentence:
        ``"last_chunk"`` keeps the ratio of the final chunk, ``"stream"``
        divides whole-file totals.
    spaced:
        ``"stream"`` concatenates the redaction of every chunk,
        ``"last_chunk"`` keeps only the final one.
    """

    encoding: str
    mapping: dict[str, Any]
    chunk_size: int
    words_per_sentence: WordsPerSentenceMode
    spaced: SpacedMode = "stream"


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


@lru_cache(maxsize=1)
def _packaged_defaults() -> dict[str, Any]:
    with (
        importlib_resources.files("punc.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_defaults() -> dict[str, Any]:
    """Return the packaged ``defaults.yml`` as a dict.

    The file is read once per process; each call gets its own copy.
    """

    return copy.deepcopy(_packaged_defaults())


@lru_cache(maxsize=1)
def _default_options() -> PuncOptions:
    return PuncOptions.model_validate(_packaged_defaults())


def load_options(path: str | os.PathLike[str] | None = None) -> PuncOptions:
    """Load options from package defaults and an optional user YAML file.

    ``pydantic.ValidationError`` propagates for unknown keys or bad values.
    """

    defaults = load_defaults()
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise InvalidArgumentError(f"{path}: expected a YAML mapping at top level")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults
    return PuncOptions.model_validate(merged)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _validate_path(path: Any) -> str:
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not path or not isinstance(path, str):
        raise InvalidArgumentError("Invalid file path: expected non-empty string")
    if not path.strip():
        raise InvalidArgumentError("File path cannot be empty or whitespace only")
    return path


def _coerce_options(options: Any) -> PuncOptions:
    if options is None:
        return PuncOptions()
    if isinstance(options, PuncOptions):
        return options
    if isinstance(options, str):
        return PuncOptions(encoding=options or None)
    if isinstance(options, Mapping):
        try:
            return PuncOptions.model_validate(dict(options))
        except ValidationError as exc:
            first = str(exc).splitlines()[0]
            raise InvalidArgumentError(f"Invalid options: {first}") from exc
    raise InvalidArgumentError(
        "expected options to be either a mapping or a string, "
        f"but got {type(options).__name__} instead"
    )


def _check_encoding(encoding: str) -> str:
    try:
        "".encode(encoding)
    except LookupError as exc:
        raise InvalidArgumentError(f"Unknown text encoding: {encoding!r}") from exc
    return encoding


def resolve_options(path: Any, options: Any = None) -> RunConfiguration:
    """Validate ``path`` and turn ``options`` into a :class:`RunConfiguration`.

    ``options`` may be ``None``, a bare encoding name, a mapping with the
    :class:`PuncOptions` fields, or a :class:`PuncOptions` instance.  A partial
    ``mapping`` is merged over a fresh default table.

    Raises
    ------
    InvalidArgumentError
        For an empty/whitespace/non-string path, an unsupported options type,
        invalid option values or an unknown encoding.
    """

    _validate_path(path)
    opts = _coerce_options(options)
    defaults = _default_options()

    encoding = opts.encoding or defaults.encoding or "utf-8"
    return RunConfiguration(
        encoding=_check_encoding(encoding),
        mapping=merge_mapping(opts.mapping),
        chunk_size=opts.chunk_size or defaults.chunk_size or 65536,
        words_per_sentence=opts.words_per_sentence or defaults.words_per_sentence or "last_chunk",
        spaced=opts.spaced or defaults.spaced or "stream",
    )


__all__ = [
    "PuncOptions",
    "RunConfiguration",
    "SpacedMode",
    "WordsPerSentenceMode",
    "deep_merge_dicts",
    "load_defaults",
    "load_options",
    "resolve_options",
]
