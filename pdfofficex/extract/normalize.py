"""Turn decoded fragments into the bounded list of lines used for output."""

from __future__ import annotations

import re
from typing import Iterable

from ..types import SENTINEL_LINE

__all__ = ["DEFAULT_MAX_LINES", "clean_lines", "fallback_candidates", "normalize_fragments"]

DEFAULT_MAX_LINES = 600

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_PRINTABLE = re.compile(r"[^\x09\x20-\x7e]+")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")
_PRINTABLE_RUN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9 .,;:()_/\-]{5,}")


def clean_lines(values: Iterable[str], *, limit: int = DEFAULT_MAX_LINES) -> list[str]:
    """Normalise, filter and case-insensitively dedupe ``values``."""

    output: list[str] = []
    seen: set[str] = set()
    for raw in values:
        normalized = _NON_PRINTABLE.sub("", _WHITESPACE_RUN.sub(" ", raw)).strip()
        if len(normalized) < 2 or not _ALPHANUMERIC.search(normalized):
            continue
        key = normalized.lower()
        if key in seen:
            continue
        seen.add(key)
        output.append(normalized)
        if len(output) >= limit:
            break
    return output


def fallback_candidates(source: bytes) -> list[str]:
    """Return printable runs of at least six characters found anywhere in ``source``."""

    return _PRINTABLE_RUN.findall(source.decode("latin-1"))


def normalize_fragments(
    fragments: Iterable[str],
    source: bytes,
    *,
    limit: int = DEFAULT_MAX_LINES,
) -> list[str]:
    """Clean ``fragments``; fall back to a raw scan of ``source``, then the sentinel line."""

    lines = clean_lines(fragments, limit=limit)
    if lines:
        return lines
    lines = clean_lines(fallback_candidates(source), limit=limit)
    if lines:
        return lines
    return [SENTINEL_LINE]
