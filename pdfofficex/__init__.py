"""Top-level package for pdfofficex.

This module exposes the public API for turning the text of PDF documents
into Word, PowerPoint and Excel files without a PDF rendering library.
"""
from .converter import convert_pdf_bytes, convert_pdf_file, extract_text_lines
from .exceptions import (
    ArchiveBuildFailed,
    ExtractionFailed,
    FilterUnsupported,
    ObjectSkipped,
    PdfOfficeXError,
)
from .types import SENTINEL_LINE, ConversionOptions, ConversionResult, OutputKind

__all__ = [
    "convert_pdf_bytes",
    "convert_pdf_file",
    "extract_text_lines",
    "ArchiveBuildFailed",
    "ExtractionFailed",
    "FilterUnsupported",
    "ObjectSkipped",
    "PdfOfficeXError",
    "ConversionOptions",
    "ConversionResult",
    "OutputKind",
    "SENTINEL_LINE",
]

__version__ = "0.1.0"
