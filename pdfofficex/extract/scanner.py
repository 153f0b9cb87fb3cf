"""Locate indirect objects and their stream bodies in raw PDF bytes.

The scanner deliberately avoids building an object graph.  It walks the
buffer looking for ``N G obj ... endobj`` markers and slices out the
dictionary and stream portions of every object that carries a stream.
Objects are reported in the order they appear in the file.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from ..types import ObjectSpan

__all__ = ["ObjectScanner", "iter_object_spans", "trim_trailing_line_breaks"]

LOGGER = logging.getLogger(__name__)

_OBJECT_MARKER = re.compile(rb"\b(\d+)\s+(\d+)\s+obj\b")
_ENDOBJ_MARKER = re.compile(rb"\bendobj\b")
_STREAM_KEYWORD = b"stream"
_ENDSTREAM_KEYWORD = b"endstream"


def trim_trailing_line_breaks(buffer: bytes) -> bytes:
    """Strip CR/LF bytes from the end of ``buffer``."""

    return buffer.rstrip(b"\r\n")


def _skip_line_terminator(body: bytes, index: int) -> int:
    if body[index : index + 2] == b"\r\n":
        return index + 2
    if body[index : index + 1] in (b"\n", b"\r"):
        return index + 1
    return index


def iter_object_spans(data: bytes) -> Iterator[ObjectSpan]:
    """Yield an :class:`ObjectSpan` for every stream-bearing object in ``data``."""

    position = 0
    while True:
        match = _OBJECT_MARKER.search(data, position)
        if match is None:
            return
        end = _ENDOBJ_MARKER.search(data, match.end())
        if end is None:
            # No later marker can be closed either.
            LOGGER.debug("Object at offset %d has no endobj; stopping scan", match.start())
            return
        position = end.end()
        body = data[match.end() : end.start()]
        stream_index = body.find(_STREAM_KEYWORD)
        if stream_index == -1:
            continue
        end_index = body.find(_ENDSTREAM_KEYWORD, stream_index + len(_STREAM_KEYWORD))
        if end_index == -1:
            LOGGER.debug(
                "Object %s %s at offset %d has no endstream; skipping",
                match.group(1).decode("ascii"),
                match.group(2).decode("ascii"),
                match.start(),
            )
            continue

        stream_start = _skip_line_terminator(body, stream_index + len(_STREAM_KEYWORD))
        yield ObjectSpan(
            number=int(match.group(1)),
            generation=int(match.group(2)),
            offset=match.start(),
            dictionary=body[:stream_index].decode("latin-1"),
            stream=trim_trailing_line_breaks(body[stream_start:end_index]),
        )


class ObjectScanner:
    """Restartable iterable over the stream-bearing objects of a PDF buffer."""

    def __init__(self, data: bytes) -> None:
        self.data = data

    def __iter__(self) -> Iterator[ObjectSpan]:
        return iter_object_spans(self.data)
