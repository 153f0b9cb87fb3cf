"""Conversion engine for pdfofficex.

``convert_pdf_bytes`` is the call contract used by job workers: PDF bytes
and a target kind in, office archive bytes out.  ``convert_pdf_file`` wraps
it for callers that work with paths.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from .exceptions import ExtractionFailed
from .extract import extract_text_lines as _extract_lines
from .metadata import core_properties_from_metadata, extract_metadata
from .ooxml import CoreProperties, build_office_document
from .types import ConversionOptions, ConversionResult, OutputKind
from .utils import PathLike, ensure_output_directory, safe_name_with_extension, time_block, to_path

LOGGER = logging.getLogger(__name__)

SourceLike = Union[bytes, bytearray, memoryview, BinaryIO]


def read_source(source: SourceLike) -> bytes:
    """Return ``source`` as ``bytes`` or raise :class:`ExtractionFailed`."""
    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, str) or not hasattr(source, "read"):
        raise ExtractionFailed(f"Cannot read PDF source of type {type(source).__name__}")
    try:
        data = source.read()
    except (OSError, ValueError) as exc:
        raise ExtractionFailed(f"Unable to read PDF source: {exc}") from exc
    if not isinstance(data, (bytes, bytearray)):
        raise ExtractionFailed("PDF source must be opened in binary mode")
    return bytes(data)


def extract_text_lines(source: SourceLike, options: ConversionOptions | None = None) -> list[str]:
    """Return the cleaned text lines recovered from ``source``."""
    options = options or ConversionOptions()
    return _extract_lines(read_source(source), limit=options.max_lines)


def convert_pdf_bytes(
    source: SourceLike,
    kind: OutputKind | str,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Convert the PDF in ``source`` to an office document of ``kind``."""
    output_kind = OutputKind.parse(kind)
    options = options or ConversionOptions()
    data = read_source(source)

    LOGGER.info("Starting PDF to %s conversion (%d bytes)", output_kind.label, len(data))
    with time_block(LOGGER, f"PDF to {output_kind.label} conversion"):
        lines = _extract_lines(data, limit=options.max_lines)
        core = (
            core_properties_from_metadata(extract_metadata(data))
            if options.include_metadata
            else CoreProperties()
        )
        archive = build_office_document(output_kind, lines, core=core, options=options)

    LOGGER.info("Conversion produced %d line(s), %d byte archive", len(lines), len(archive))
    return ConversionResult(kind=output_kind, data=archive, line_count=len(lines))


def default_output_path(input_path: Path, kind: OutputKind) -> Path:
    """Return the output path placed next to ``input_path`` for ``kind``."""
    return input_path.with_name(safe_name_with_extension(input_path.stem, kind.extension))


def convert_pdf_file(
    input_path: PathLike,
    output_path: PathLike | None = None,
    kind: OutputKind | str = OutputKind.WORD,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Convert the PDF at ``input_path`` and write the archive to disk."""
    output_kind = OutputKind.parse(kind)
    source = to_path(input_path)
    if not source.exists():
        raise FileNotFoundError(source)
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise ExtractionFailed(f"Unable to read {source}: {exc}") from exc

    destination = to_path(output_path) if output_path is not None else default_output_path(source, output_kind)
    ensure_output_directory(destination)

    LOGGER.info("Converting %s -> %s", source, destination)
    result = convert_pdf_bytes(data, output_kind, options)
    destination.write_bytes(result.data)
    result.output_path = destination
    return result
