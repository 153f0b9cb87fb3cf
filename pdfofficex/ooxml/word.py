"""WordprocessingML (DOCX) generation."""

from __future__ import annotations

from typing import Sequence
from xml.etree.ElementTree import Element, SubElement

from .namespaces import CONTENT_TYPES, REL_TYPES, XML_NS
from .package import PACKAGE_ROOT, OfficePackage
from .types import AppProperties, CoreProperties
from .utils import ensure_lines, serialize

__all__ = ["DOCUMENT_PART", "build_document_xml", "build_docx"]

DOCUMENT_PART = "word/document.xml"

_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
# US Letter with one inch margins, in twentieths of a point.
_PAGE_SIZE = {"w": "12240", "h": "15840"}
_PAGE_MARGINS = {
    "top": "1440",
    "right": "1440",
    "bottom": "1440",
    "left": "1440",
    "header": "708",
    "footer": "708",
    "gutter": "0",
}


def build_document_xml(lines: Sequence[str]) -> bytes:
    """Return the main document part with one paragraph per line.

    The serializer escapes ``&``, ``<`` and ``>`` in text nodes.  Quotes and
    apostrophes are written literally; parsers read back the same text as
    with ``&quot;`` and ``&apos;``.
    """
    w_ns = f"{{{XML_NS['w']}}}"
    root = Element(f"{w_ns}document")
    body = SubElement(root, f"{w_ns}body")
    for line in lines:
        paragraph = SubElement(body, f"{w_ns}p")
        run = SubElement(paragraph, f"{w_ns}r")
        text = SubElement(run, f"{w_ns}t", {_XML_SPACE: "preserve"})
        text.text = line
    section = SubElement(body, f"{w_ns}sectPr")
    SubElement(section, f"{w_ns}pgSz", {f"{w_ns}{key}": value for key, value in _PAGE_SIZE.items()})
    SubElement(section, f"{w_ns}pgMar", {f"{w_ns}{key}": value for key, value in _PAGE_MARGINS.items()})
    return serialize(root)


def build_docx(lines: Sequence[str], *, core: CoreProperties, max_paragraphs: int = 1200) -> bytes:
    """Return a DOCX archive with one paragraph per line."""

    paragraphs = list(ensure_lines(lines)[:max_paragraphs])
    words = sum(len(line.split()) for line in paragraphs)
    app = AppProperties(
        application="pdfofficex Word Export",
        counts={
            "Paragraphs": len(paragraphs),
            "Words": words,
            "Characters": sum(len(line) for line in paragraphs),
        },
    )
    package = OfficePackage(core, app)
    package.add_related_part(
        PACKAGE_ROOT,
        DOCUMENT_PART,
        build_document_xml(paragraphs),
        content_type=CONTENT_TYPES["document"],
        relationship_type=REL_TYPES["office_document"],
    )
    package.declare_relationships(DOCUMENT_PART)
    return package.to_bytes()
