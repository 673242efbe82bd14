"""Recognized symbol catalogue and punctuation count tables.

The closed set of tracked symbols is data, not code: it is read from the
packaged ``catalog.yml`` where symbols are grouped by class.  Every group is a
list of single code points except ``repeated``, which holds the aggregate keys
(``"!!!"``, ``"???"``, ``"..."``, ``"---"``) counted by pattern.

Count tables are plain ``dict[str, int]`` objects in catalogue order.  A new
table is produced for every run; nothing here is shared or mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from importlib import resources as importlib_resources
from typing import Any

import yaml

from .utils.logging import get_logger

__all__ = [
    "AGGREGATE_GROUP",
    "RECOGNIZED_SYMBOLS",
    "SINGLE_SYMBOLS",
    "AGGREGATE_KEYS",
    "symbol_groups",
    "fresh_mapping",
    "merge_mapping",
]

AGGREGATE_GROUP = "repeated"

log = get_logger(__name__)


@lru_cache(maxsize=1)
def symbol_groups() -> dict[str, tuple[str, ...]]:
    """Return the catalogue as ``{group name: symbols}`` in file order.

    Raises ``ValueError`` if the catalogue lists a symbol twice or a single
    symbol that is not exactly one code point.
    """

    with importlib_resources.files("punc").joinpath("catalog.yml").open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    groups: dict[str, tuple[str, ...]] = {}
    seen: set[str] = set()
    for name, symbols in raw.items():
        entries = tuple(str(s) for s in symbols or ())
        for sym in entries:
            if sym in seen:
                raise ValueError(f"duplicate symbol in catalogue: {sym!r}")
            if name != AGGREGATE_GROUP and len(sym) != 1:
                raise ValueError(f"symbol {sym!r} in group {name!r} is not a single character")
            seen.add(sym)
        groups[str(name)] = entries
    return groups


def _all_symbols() -> tuple[str, ...]:
    return tuple(sym for entries in symbol_groups().values() for sym in entries)


RECOGNIZED_SYMBOLS: frozenset[str] = frozenset(_all_symbols())
AGGREGATE_KEYS: tuple[str, ...] = symbol_groups().get(AGGREGATE_GROUP, ())
SINGLE_SYMBOLS: frozenset[str] = RECOGNIZED_SYMBOLS - frozenset(AGGREGATE_KEYS)


def fresh_mapping() -> dict[str, int]:
    """Return a new table with every recognized symbol set to ``0``."""

    return dict.fromkeys(_all_symbols(), 0)


def merge_mapping(custom: Mapping[str, Any] | None) -> dict[str, Any]:
    """Overlay ``custom`` onto a fresh default table.

    Values for recognized keys replace the defaults as given; they are not
    validated here (the counting step heals malformed values).  Keys outside
    the catalogue are dropped: configuration cannot add symbols.
    """

    merged: dict[str, Any] = fresh_mapping()
    if not custom:
        return merged
    for key, value in custom.items():
        if key in merged:
            merged[key] = value
        else:
            log.debug("dropping unrecognized mapping key %r", key)
    return merged
