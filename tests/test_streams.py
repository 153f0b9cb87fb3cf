from __future__ import annotations

import zlib

import pytest

from pdfofficex.exceptions import FilterUnsupported, ObjectSkipped
from pdfofficex.extract.streams import decode_stream, inflate

from conftest import raw_deflate


def test_unfiltered_stream_passes_through() -> None:
    decoded = decode_stream("<< /Length 5 >>", b"BT ET")

    assert decoded.data == b"BT ET"
    assert decoded.applied_filter is None


def test_flate_stream_is_inflated() -> None:
    payload = b"BT (Hello) Tj ET"

    decoded = decode_stream("<< /Filter /FlateDecode >>", zlib.compress(payload))

    assert decoded.data == payload
    assert decoded.applied_filter == "FlateDecode"


def test_flate_falls_back_to_raw_deflate() -> None:
    payload = b"BT (Headerless) Tj ET"

    data, variant = inflate(raw_deflate(payload))

    assert data == payload
    assert variant == "FlateDecode/raw"


def test_flate_in_filter_array_is_detected() -> None:
    decoded = decode_stream("<< /Filter [/FlateDecode] >>", zlib.compress(b"abc"))

    assert decoded.data == b"abc"


def test_corrupt_flate_stream_is_skipped() -> None:
    with pytest.raises(ObjectSkipped):
        decode_stream("<< /Filter /FlateDecode >>", b"\x00\x01 definitely not deflate")


@pytest.mark.parametrize("name", ["DCTDecode", "JPXDecode", "CCITTFaxDecode", "JBIG2Decode"])
def test_image_filters_are_rejected(name: str) -> None:
    with pytest.raises(FilterUnsupported):
        decode_stream(f"<< /Filter /{name} >>", b"\xff\xd8\xff")


def test_unsupported_filter_is_an_object_skip() -> None:
    assert issubclass(FilterUnsupported, ObjectSkipped)


def test_unknown_filter_passes_bytes_through() -> None:
    decoded = decode_stream("<< /Filter /ASCIIHexDecode >>", b"48656c6c6f>")

    assert decoded.data == b"48656c6c6f>"
    assert decoded.applied_filter == "ASCIIHexDecode"
