"""Namespace configuration and XML constants for OOXML generation."""

from __future__ import annotations

from datetime import datetime, timezone
from xml.etree.ElementTree import register_namespace

__all__ = [
    "CONTENT_TYPES",
    "DEFAULT_TIMESTAMP",
    "PACKAGE_NS",
    "REL_TYPES",
    "XML_NS",
    "ZIP_TIMESTAMP",
]

XML_NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    "p": "http://schemas.openxmlformats.org/presentationml/2006/main",
    "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
    "s": "http://schemas.openxmlformats.org/spreadsheetml/2006/main",
    "cp": "http://schemas.openxmlformats.org/package/2006/metadata/core-properties",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "xsi": "http://www.w3.org/2001/XMLSchema-instance",
    "ep": "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties",
    "vt": "http://schemas.openxmlformats.org/officeDocument/2006/docPropsVTypes",
}

for prefix, uri in XML_NS.items():
    register_namespace(prefix, uri)

PACKAGE_NS = {
    "ct": "http://schemas.openxmlformats.org/package/2006/content-types",
    "rel": "http://schemas.openxmlformats.org/package/2006/relationships",
}

CONTENT_TYPES = {
    "rels": "application/vnd.openxmlformats-package.relationships+xml",
    "xml": "application/xml",
    "core": "application/vnd.openxmlformats-package.core-properties+xml",
    "app": "application/vnd.openxmlformats-officedocument.extended-properties+xml",
    "document": "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml",
    "presentation": "application/vnd.openxmlformats-officedocument.presentationml.presentation.main+xml",
    "slide": "application/vnd.openxmlformats-officedocument.presentationml.slide+xml",
    "workbook": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml",
    "worksheet": "application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml",
}

REL_TYPES = {
    "office_document": "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument",
    "core": "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties",
    "app": "http://schemas.openxmlformats.org/officeDocument/2006/relationships/extended-properties",
    "slide": "http://schemas.openxmlformats.org/officeDocument/2006/relationships/slide",
    "worksheet": "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet",
}

DEFAULT_TIMESTAMP = datetime(2023, 1, 1, tzinfo=timezone.utc)
ZIP_TIMESTAMP = (
    DEFAULT_TIMESTAMP.year,
    DEFAULT_TIMESTAMP.month,
    DEFAULT_TIMESTAMP.day,
    DEFAULT_TIMESTAMP.hour,
    DEFAULT_TIMESTAMP.minute,
    DEFAULT_TIMESTAMP.second,
)
