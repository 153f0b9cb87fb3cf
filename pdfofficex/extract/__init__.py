"""Text extraction from raw PDF bytes.

The pipeline runs scanner → stream decoder → tokenizer → string decoder →
normalizer.  Failures while decoding a single object are logged and that
object is skipped; the rest of the document is still processed.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..exceptions import FilterUnsupported, ObjectSkipped
from .normalize import DEFAULT_MAX_LINES, clean_lines, normalize_fragments
from .scanner import ObjectScanner, iter_object_spans
from .streams import decode_stream
from .strings import decode_string_token
from .tokenizer import iter_show_tokens

__all__ = [
    "ObjectScanner",
    "clean_lines",
    "decode_stream",
    "decode_string_token",
    "extract_text_lines",
    "iter_fragments",
    "iter_object_spans",
    "iter_show_tokens",
    "normalize_fragments",
]

LOGGER = logging.getLogger(__name__)


def iter_fragments(data: bytes) -> Iterator[str]:
    """Yield decoded text fragments in physical object and operator order."""

    for span in ObjectScanner(data):
        try:
            decoded = decode_stream(span.dictionary, span.stream)
        except FilterUnsupported as exc:
            LOGGER.debug("Object %d %d: %s", span.number, span.generation, exc)
            continue
        except ObjectSkipped as exc:
            LOGGER.debug("Skipping object %d %d at offset %d: %s", span.number, span.generation, span.offset, exc)
            continue
        for token in iter_show_tokens(decoded.data):
            yield decode_string_token(token)


def extract_text_lines(data: bytes, *, limit: int = DEFAULT_MAX_LINES) -> list[str]:
    """Return the cleaned text lines of the PDF held in ``data``.

    The result is never empty: when nothing readable is found the sentinel
    line is returned instead.
    """

    lines = normalize_fragments(iter_fragments(data), data, limit=limit)
    LOGGER.debug("Extracted %d line(s) from %d byte(s)", len(lines), len(data))
    return lines
