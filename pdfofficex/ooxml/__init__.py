"""OOXML package generation for Word, PowerPoint and Excel outputs."""

from __future__ import annotations

from typing import Sequence

from ..types import ConversionOptions, OutputKind
from .excel import build_xlsx
from .package import OfficePackage
from .powerpoint import build_pptx
from .registry import register_builder, registry
from .types import AppProperties, CoreProperties
from .utils import column_letter
from .validation import validate_package
from .word import build_docx

__all__ = [
    "AppProperties",
    "CoreProperties",
    "OfficePackage",
    "build_docx",
    "build_office_document",
    "build_pptx",
    "build_xlsx",
    "column_letter",
    "registry",
    "validate_package",
]


@register_builder(OutputKind.WORD)
def _word(lines: Sequence[str], core: CoreProperties, options: ConversionOptions) -> bytes:
    return build_docx(lines, core=core, max_paragraphs=options.max_paragraphs)


@register_builder(OutputKind.POWERPOINT)
def _powerpoint(lines: Sequence[str], core: CoreProperties, options: ConversionOptions) -> bytes:
    return build_pptx(
        lines,
        core=core,
        max_source_lines=options.max_slide_source_lines,
        lines_per_slide=options.lines_per_slide,
        max_slides=options.max_slides,
    )


@register_builder(OutputKind.EXCEL)
def _excel(lines: Sequence[str], core: CoreProperties, options: ConversionOptions) -> bytes:
    return build_xlsx(lines, core=core, max_rows=options.max_rows, max_columns=options.max_columns)


def build_office_document(
    kind: OutputKind | str,
    lines: Sequence[str],
    *,
    core: CoreProperties | None = None,
    options: ConversionOptions | None = None,
) -> bytes:
    """Build the archive for ``kind`` from ``lines``."""

    builder = registry.get(OutputKind.parse(kind))
    return builder(lines, core or CoreProperties(), options or ConversionOptions())
