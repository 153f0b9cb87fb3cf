from __future__ import annotations

import zlib
from io import BytesIO
from pathlib import Path
from typing import Callable, Sequence
from xml.etree import ElementTree as ET
from zipfile import ZipFile
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import DictionaryObject, NameObject, StreamObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

StreamEntry = bytes | tuple[bytes, bytes]


def build_pdf(streams: Sequence[StreamEntry], *, header: bytes = b"%PDF-1.4\n") -> bytes:
    """Assemble a bare PDF body with one indirect stream object per entry.

    Entries are either raw content bytes or ``(extra_dictionary, data)``
    pairs where ``extra_dictionary`` is spliced into the stream dictionary.
    """

    output = bytearray(header)
    for number, entry in enumerate(streams, start=1):
        extra, data = entry if isinstance(entry, tuple) else (b"", entry)
        output += b"%d 0 obj\n<< /Length %d%s >>\nstream\n" % (number, len(data), extra)
        output += data
        output += b"\nendstream\nendobj\n"
    output += b"%%EOF\n"
    return bytes(output)


def raw_deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def read_xml(archive_bytes: bytes, name: str) -> ET.Element:
    with ZipFile(BytesIO(archive_bytes)) as archive:
        return ET.fromstring(archive.read(name))


def archive_names(archive_bytes: bytes) -> set[str]:
    with ZipFile(BytesIO(archive_bytes)) as archive:
        return set(archive.namelist())


@pytest.fixture()
def invoice_pdf() -> bytes:
    return build_pdf([b"BT (Invoice 42) Tj ET"])


@pytest.fixture()
def flate_pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write a single-page PDF through pypdf whose content stream is FlateDecode compressed."""

    def _create(
        text_lines: Sequence[str],
        *,
        title: str | None = None,
        metadata: dict[str, str] | None = None,
        filename: str = "flate.pdf",
    ) -> Path:
        writer = PdfWriter()
        page = writer.add_blank_page(width=612, height=792)
        font = DictionaryObject(
            {
                NameObject("/Type"): NameObject("/Font"),
                NameObject("/Subtype"): NameObject("/Type1"),
                NameObject("/BaseFont"): NameObject("/Helvetica"),
            }
        )
        page[NameObject("/Resources")] = DictionaryObject(
            {NameObject("/Font"): DictionaryObject({NameObject("/F1"): writer._add_object(font)})}
        )
        operations = [b"BT /F1 12 Tf 72 720 Td"]
        for line in text_lines:
            operations.append(b"(" + line.encode("latin-1") + b") Tj 0 -14 Td")
        operations.append(b"ET")
        content = StreamObject()
        content[NameObject("/Filter")] = NameObject("/FlateDecode")
        content._data = zlib.compress(b"\n".join(operations))
        page[NameObject("/Contents")] = writer._add_object(content)
        if title is not None:
            writer.add_metadata({"/Title": title, "/Author": "pdfofficex-tests"})
        if metadata:
            writer.add_metadata(metadata)

        path = tmp_path / filename
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create
