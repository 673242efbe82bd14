"""Pipeline orchestrator.

:func:`analyze` drives one end-to-end run over a file: options are resolved,
the file is streamed chunk by chunk, every chunk traverses all stages in order
before the next one is read, and stage reports are absorbed into a
:class:`RunState` owned by that run alone.  Concurrent calls share nothing.

Result contract
---------------
``body``
    Every matched punctuation substring joined in store order.
``count``
    The resolved mapping after counting.
``words_per_sentence``
    Ratio of the last chunk (default) or of whole-file totals
    (``words_per_sentence="stream"``).  ``math.inf`` when no terminator was
    seen; ``0`` only when the file produced no chunk at all.
``spaced``
    The redacted skeleton, concatenated over all chunks (default), or only
    the final chunk's redaction (``spaced="last_chunk"``) to pair with the
    per-chunk ``words_per_sentence`` default.
"""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Sequence
from contextlib import closing
from dataclasses import dataclass, field
from typing import Any

from .config import RunConfiguration, resolve_options
from .config.schema import SpacedMode, WordsPerSentenceMode
from .io import iter_chunks
from .stages import DEFAULT_STAGES, PunctuationTally, SentenceMetric, Stage
from .utils.errors import SourceUnavailableError
from .utils.logging import get_logger

__all__ = ["RunResult", "RunState", "Pipeline", "analyze"]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class RunResult:
    """Terminal output of one run."""

    body: str
    count: dict[str, Any]
    words_per_sentence: float
    spaced: str

    def to_dict(self) -> dict[str, Any]:
        """Return the result using the camel-cased wire field names."""

        return {
            "body": self.body,
            "count": dict(self.count),
            "wordsPerSentence": self.words_per_sentence,
            "spaced": self.spaced,
        }


def _is_healthy_count(value: Any) -> bool:
    """Counts are non-negative numbers; negatives, ``inf`` and NaN are corrupt."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


@dataclass(slots=True)
class RunState:
    """Side-channel accumulators of a single run."""

    mapping: dict[str, Any]
    store: list[str] = field(default_factory=list)
    spaced_parts: list[str] = field(default_factory=list)
    last_ratio: float = 0.0
    total_words: int = 0
    total_sentences: int = 0
    chunks: int = 0

    def absorb(self, report: Any) -> None:
        """Fold one stage report into the run state."""

        if report is None:
            return
        if isinstance(report, PunctuationTally):
            self._apply_tally(report)
        elif isinstance(report, SentenceMetric):
            self.last_ratio = report.ratio
            self.total_words += report.words
            self.total_sentences += report.sentences
        elif isinstance(report, str):
            self.spaced_parts.append(report)
        else:
            raise TypeError(f"unsupported stage report: {type(report).__name__}")

    def _apply_tally(self, tally: PunctuationTally) -> None:
        skipped: set[str] = set()
        for key, n in tally.counts.items():
            if key not in self.mapping:
                log.warning("Key %r not found in punctuation map; skipping", key)
                skipped.add(key)
                continue
            current = self.mapping[key]
            if _is_healthy_count(current):
                self.mapping[key] = current + n
            else:
                log.warning("Malformed count %r for key %r; resetting to %d", current, key, n)
                self.mapping[key] = n
        self.store.extend(text for key, text in tally.matches if key not in skipped)

    def words_per_sentence(self, mode: WordsPerSentenceMode) -> float:
        if self.chunks == 0:
            return 0.0
        if mode == "stream":
            return SentenceMetric(self.total_words, self.total_sentences).ratio
        return self.last_ratio

    def spaced(self, mode: SpacedMode) -> str:
        if mode == "last_chunk":
            return self.spaced_parts[-1] if self.spaced_parts else ""
        return "".join(self.spaced_parts)

    def result(
        self,
        mode: WordsPerSentenceMode = "last_chunk",
        spaced_mode: SpacedMode = "stream",
    ) -> RunResult:
        return RunResult(
            body="".join(self.store),
            count=self.mapping,
            words_per_sentence=self.words_per_sentence(mode),
            spaced=self.spaced(spaced_mode),
        )


class Pipeline:
    """Ordered list of stages applied to every chunk."""

    def __init__(self, stages: Sequence[Stage] = DEFAULT_STAGES) -> None:
        self.stages: tuple[Stage, ...] = tuple(stages)

    def run(self, chunks: Iterable[str], config: RunConfiguration) -> RunResult:
        """Push ``chunks`` through every stage and assemble the result.

        ``config.mapping`` is mutated in place and becomes ``result.count``.
        """

        state = RunState(config.mapping)
        for chunk in chunks:
            state.chunks += 1
            for stage in self.stages:
                out = stage(chunk)
                state.absorb(out.report)
                chunk = out.chunk
        return state.result(config.words_per_sentence, config.spaced)


def analyze(path: str | os.PathLike[str], options: Any = None) -> RunResult:
    """Analyze the punctuation of the text file at ``path``.

    Parameters
    ----------
    path:
        File to read.
    options:
        ``None``, an encoding name, or a mapping/:class:`~punc.config.PuncOptions`
        with ``encoding``, ``mapping``, ``chunk_size``, ``words_per_sentence``
        and ``spaced``.

    Raises
    ------
    InvalidArgumentError
        Before any I/O, for a bad path or options.
    SourceUnavailableError
        If the file cannot be opened, read or decoded.  No partial result is
        returned.
    """

    config = resolve_options(path, options)
    log.debug("analyzing %s (encoding=%s, chunk_size=%d)", path, config.encoding, config.chunk_size)
    source = iter_chunks(path, encoding=config.encoding, chunk_size=config.chunk_size)
    try:
        with closing(source):
            result = Pipeline().run(source, config)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"File read error: {exc}") from exc
    log.debug("analyzed %s: body of %d characters", path, len(result.body))
    return result
