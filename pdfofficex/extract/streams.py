"""Filter decoding for located PDF streams."""

from __future__ import annotations

import logging
import re
import zlib

from ..exceptions import FilterUnsupported, ObjectSkipped
from ..types import DecodedStream

__all__ = ["IMAGE_FILTERS", "decode_stream", "inflate"]

LOGGER = logging.getLogger(__name__)

IMAGE_FILTERS = frozenset({"DCTDecode", "CCITTFaxDecode", "JBIG2Decode", "JPXDecode"})

_FILTER_NAME = re.compile(r"/Filter\s*\[?\s*/([A-Za-z0-9]+)")


def inflate(data: bytes) -> tuple[bytes, str]:
    """Inflate ``data`` as zlib, falling back to a headerless deflate stream.

    Returns the decoded bytes and the variant that succeeded.
    """

    try:
        return zlib.decompress(data), "FlateDecode"
    except zlib.error:
        pass
    try:
        return zlib.decompress(data, -zlib.MAX_WBITS), "FlateDecode/raw"
    except zlib.error as exc:
        raise ObjectSkipped(f"Unable to inflate stream: {exc}") from exc


def decode_stream(dictionary: str, raw: bytes) -> DecodedStream:
    """Decode ``raw`` according to the filter declared in ``dictionary``.

    Streams without a ``/Filter`` entry and streams using filters other
    than FlateDecode are passed through untouched.
    """

    if "/Filter" not in dictionary:
        return DecodedStream(data=raw, dictionary=dictionary)

    if "/FlateDecode" in dictionary:
        data, variant = inflate(raw)
        return DecodedStream(data=data, dictionary=dictionary, applied_filter=variant)

    match = _FILTER_NAME.search(dictionary)
    filter_name = match.group(1) if match else None
    if filter_name in IMAGE_FILTERS:
        raise FilterUnsupported(f"/{filter_name} streams carry image data")

    LOGGER.debug("Passing through stream with unrecognised filter %s", filter_name)
    return DecodedStream(data=raw, dictionary=dictionary, applied_filter=filter_name)
