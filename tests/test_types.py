from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pdfofficex.types import ConversionOptions, OutputKind
from pdfofficex.utils import parse_pdf_date, safe_name_with_extension


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("word", OutputKind.WORD),
        ("DOCX", OutputKind.WORD),
        (".pptx", OutputKind.POWERPOINT),
        (" Excel ", OutputKind.EXCEL),
        (OutputKind.EXCEL, OutputKind.EXCEL),
    ],
)
def test_output_kind_parse(value: object, expected: OutputKind) -> None:
    assert OutputKind.parse(value) is expected


def test_output_kind_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="expected one of"):
        OutputKind.parse("pdf")


def test_output_kind_attributes() -> None:
    assert OutputKind.WORD.extension == ".docx"
    assert OutputKind.POWERPOINT.mime_type.endswith("presentationml.presentation")
    assert OutputKind.EXCEL.label == "Excel"


def test_default_limits() -> None:
    options = ConversionOptions()

    assert (options.max_lines, options.max_paragraphs, options.max_rows) == (600, 1200, 600)
    assert (options.max_slide_source_lines, options.lines_per_slide, options.max_slides) == (320, 12, 25)
    assert options.max_columns == 8
    assert options.include_metadata


@pytest.mark.parametrize(
    ("name", "extension", "expected"),
    [
        ("report", ".docx", "report.docx"),
        ("report.DOCX", ".docx", "report.DOCX"),
        ("q3 results/final", ".xlsx", "q3_results_final.xlsx"),
        ("", ".pptx", "converted.pptx"),
    ],
)
def test_safe_name_with_extension(name: str, extension: str, expected: str) -> None:
    assert safe_name_with_extension(name, extension) == expected


def test_parse_pdf_date_with_offset() -> None:
    parsed = parse_pdf_date("D:20240102030405+05'30'")

    assert parsed is not None
    assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2024, 1, 2, 3)
    assert parsed.utcoffset() == timedelta(hours=5, minutes=30)


def test_parse_pdf_date_rejects_garbage() -> None:
    assert parse_pdf_date("yesterday") is None
    assert parse_pdf_date(None) is None


def test_parse_pdf_date_ignores_out_of_range_offset() -> None:
    parsed = parse_pdf_date("D:20230101000000+99'00'")

    assert parsed == datetime(2023, 1, 1, tzinfo=timezone.utc)


def test_parse_pdf_date_accepts_partial_dates() -> None:
    assert parse_pdf_date("D:2023") == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert parse_pdf_date("D:20230615Z") == datetime(2023, 6, 15, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["D:20231301000000", "D:20230101250000", "D:00010101000000+05'00'"])
def test_parse_pdf_date_rejects_unrepresentable_dates(raw: str) -> None:
    assert parse_pdf_date(raw) is None
