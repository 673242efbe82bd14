"""Single-pass text transforms applied to each chunk.

Every stage is a callable taking one chunk and returning a
:class:`StageOutput`: the replacement chunk plus an optional ``report``
describing what the stage observed.  Stages keep no state between chunks and
never look across a chunk boundary, so a pattern split over two chunks is not
recognized.  Accumulating reports is the orchestrator's job
(:mod:`punc.pipeline`).

Canonical order (:data:`DEFAULT_STAGES`):

1. ``strip_line_endings`` – delete ``\\r`` and ``\\n``.
2. ``collapse_whitespace`` – each whitespace run becomes one space.
3. ``find_punctuation`` – report a :class:`PunctuationTally`.
4. ``measure_sentences`` – report a :class:`SentenceMetric`.
5. ``redact_alphanumerics`` – ASCII letter/digit runs become one space; the
   redacted chunk is reported.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .mapping import SINGLE_SYMBOLS

__all__ = [
    "StageOutput",
    "PunctuationTally",
    "SentenceMetric",
    "Stage",
    "REPEATED_PATTERNS",
    "substitute",
    "strip_line_endings",
    "collapse_whitespace",
    "tally_punctuation",
    "find_punctuation",
    "measure_sentences",
    "redact_alphanumerics",
    "DEFAULT_STAGES",
]


@dataclass(slots=True, frozen=True)
class StageOutput:
    """Result of running one stage on one chunk."""

    chunk: str
    report: Any = None


@dataclass(slots=True, frozen=True)
class PunctuationTally:
    """Punctuation found in one chunk.

    ``matches`` holds ``(key, matched text)`` pairs in store order: aggregate
    matches first (pattern by pattern), then single characters left to right.
    ``counts`` maps each recognized key to its number of occurrences.
    """

    matches: tuple[tuple[str, str], ...] = ()
    counts: Counter[str] = field(default_factory=Counter)


@dataclass(slots=True, frozen=True)
class SentenceMetric:
    """Naive words-per-sentence figures for one chunk."""

    words: int
    sentences: int

    @property
    def ratio(self) -> float:
        """``words / sentences``; ``math.inf`` when no terminator was seen."""

        if self.sentences == 0:
            return math.inf
        return self.words / self.sentences


Stage = Callable[[str], StageOutput]

# Greedy, non-overlapping.  Dashes only count at the very end of a chunk.
REPEATED_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("!!!", re.compile(r"!{3,}")),
    ("???", re.compile(r"\?{3,}")),
    ("...", re.compile(r"\.{3,}")),
    ("---", re.compile(r"-{3,}\Z")),
)

_LINE_ENDINGS = re.compile(r"[\r\n]")
_WHITESPACE_RUN = re.compile(r"\s+")
_ALNUM_RUN = re.compile(r"[A-Za-z0-9]+")
_TERMINATORS = re.compile(r"[.?!]")


def substitute(pattern: str | re.Pattern[str], replacement: str, *, report: bool = False) -> Stage:
    """Build a stage replacing every match of ``pattern`` with ``replacement``.

    With ``report=True`` the transformed chunk is also returned as the report.
    """

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def stage(chunk: str) -> StageOutput:
        result = regex.sub(replacement, chunk)
        return StageOutput(result, result if report else None)

    return stage


strip_line_endings: Stage = substitute(_LINE_ENDINGS, "")
collapse_whitespace: Stage = substitute(_WHITESPACE_RUN, " ")
redact_alphanumerics: Stage = substitute(_ALNUM_RUN, " ", report=True)


def tally_punctuation(
    chunk: str,
    *,
    symbols: frozenset[str] = SINGLE_SYMBOLS,
    patterns: Iterable[tuple[str, re.Pattern[str]]] = REPEATED_PATTERNS,
) -> PunctuationTally:
    """Count aggregate patterns and recognized characters in ``chunk``.

    The two passes are independent: characters inside an aggregate match are
    counted again individually, so ``"!!!"`` adds one to ``"!!!"`` and three
    to ``"!"``.  Iteration is by code point; an astral symbol is one match.
    """

    matches: list[tuple[str, str]] = []
    counts: Counter[str] = Counter()
    for key, regex in patterns:
        found = regex.findall(chunk)
        if found:
            counts[key] += len(found)
            matches.extend((key, m) for m in found)
    for ch in chunk:
        if ch in symbols:
            counts[ch] += 1
            matches.append((ch, ch))
    return PunctuationTally(tuple(matches), counts)


def find_punctuation(chunk: str) -> StageOutput:
    """Pass ``chunk`` through unchanged, reporting its punctuation tally."""

    return StageOutput(chunk, tally_punctuation(chunk))


def measure_sentences(chunk: str) -> StageOutput:
    """Pass ``chunk`` through unchanged, reporting a :class:`SentenceMetric`.

    Sentences are ``.``, ``?`` and ``!`` characters; words are the pieces of
    ``chunk.split(" ")``, so an empty chunk still counts one word.
    """

    metric = SentenceMetric(
        words=len(chunk.split(" ")),
        sentences=len(_TERMINATORS.findall(chunk)),
    )
    return StageOutput(chunk, metric)


DEFAULT_STAGES: tuple[Stage, ...] = (
    strip_line_endings,
    collapse_whitespace,
    find_punctuation,
    measure_sentences,
    redact_alphanumerics,
)
