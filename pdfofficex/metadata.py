"""Metadata extraction for the generated documents' core properties."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from typing import Dict, Mapping, Optional

from pypdf import PdfReader

from .ooxml.types import CoreProperties
from .utils import parse_pdf_date

LOGGER = logging.getLogger(__name__)

# Characters outside the XML 1.0 Char production, lone surrogates included.
_NON_XML_CHARS = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_EOF_MARKER = b"%%EOF"


@dataclass(frozen=True)
class PDFMetadata:
    """Document information dictionary entries relevant to office output."""

    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[str] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None


def _normalise_metadata(raw: Mapping[str, object]) -> Dict[str, str]:
    cleaned: Dict[str, str] = {}
    for key, value in raw.items():
        if not value:
            continue
        normalized_key = key[1:] if key.startswith("/") else key
        text = _NON_XML_CHARS.sub("", str(value)).strip()
        if text != str(value).strip():
            LOGGER.debug("Dropped characters not allowed in XML from /%s", normalized_key)
        if text:
            cleaned[normalized_key] = text
    return cleaned


def extract_metadata(data: bytes) -> PDFMetadata | None:
    """Read the Info dictionary of the PDF held in ``data``.

    Returns ``None`` when the document cannot be opened or its information dictionary
    has no usable entries.
    """
    if _EOF_MARKER not in data:
        LOGGER.debug("No end-of-file marker; skipping metadata")
        return None
    try:
        reader = PdfReader(BytesIO(data))
        raw = reader.metadata
        normalized = _normalise_metadata(raw) if raw else {}
    except Exception as exc:  # pypdf raises a variety of types on damaged input
        LOGGER.warning("Metadata extraction failed: %s", exc)
        return None

    if not normalized:
        return None
    return PDFMetadata(
        title=normalized.get("Title") or None,
        author=normalized.get("Author") or None,
        subject=normalized.get("Subject") or None,
        keywords=normalized.get("Keywords") or None,
        creation_date=parse_pdf_date(normalized.get("CreationDate")),
        modification_date=parse_pdf_date(normalized.get("ModDate")),
    )


def core_properties_from_metadata(metadata: PDFMetadata | None) -> CoreProperties:
    """Map PDF metadata onto core properties, keeping defaults for missing fields."""
    core = CoreProperties()
    if metadata is None:
        return core
    if metadata.title:
        core.title = metadata.title
    if metadata.author:
        core.creator = metadata.author
    if metadata.subject:
        core.subject = metadata.subject
    if metadata.keywords:
        core.keywords = metadata.keywords
    if metadata.creation_date:
        core.created = metadata.creation_date
    if metadata.modification_date:
        core.modified = metadata.modification_date
    return core
