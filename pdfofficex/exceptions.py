"""Custom exceptions for pdfofficex."""
from __future__ import annotations


class PdfOfficeXError(RuntimeError):
    """Base class for all pdfofficex exceptions."""


class ExtractionFailed(PdfOfficeXError):
    """Raised when the source document cannot be read as a byte buffer."""


class ArchiveBuildFailed(PdfOfficeXError):
    """Raised when an office package cannot be assembled into a valid archive."""


class ObjectSkipped(PdfOfficeXError):
    """Raised when a single PDF object cannot be decoded.

    Never surfaced to callers of the conversion API; the extraction loop
    catches it and continues with the next object.
    """


class FilterUnsupported(ObjectSkipped):
    """Raised when a stream only carries image data (DCT, CCITT, JBIG2, JPX)."""
