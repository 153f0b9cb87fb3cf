"""SpreadsheetML (XLSX) generation."""

from __future__ import annotations

from typing import Sequence
from xml.etree.ElementTree import Element, SubElement

from .namespaces import CONTENT_TYPES, REL_TYPES, XML_NS
from .package import PACKAGE_ROOT, OfficePackage
from .types import AppProperties, CoreProperties
from .utils import column_letter, ensure_lines, serialize

__all__ = [
    "DELIMITERS",
    "SHEET_NAME",
    "WORKBOOK_PART",
    "build_rows",
    "build_workbook_xml",
    "build_worksheet_xml",
    "build_xlsx",
    "split_columns",
]

WORKBOOK_PART = "xl/workbook.xml"
SHEET_NAME = "Extracted Data"
DELIMITERS = ("\t", ",", ";", "|")


def split_columns(line: str) -> list[str]:
    """Split ``line`` on the first delimiter it contains (tab, comma, semicolon, pipe)."""

    for delimiter in DELIMITERS:
        if delimiter in line:
            return [item.strip() for item in line.split(delimiter) if item.strip()]
    return [line]


def build_rows(lines: Sequence[str], max_columns: int = 8) -> list[list[str]]:
    """Return the header row followed by one row per line, trimmed to the column count."""

    parsed = [split_columns(line) for line in lines]
    columns = min(max_columns, max([1, *(len(row) for row in parsed)]))
    if columns == 1:
        header = ["Extracted text"]
    else:
        header = [f"Column {index + 1}" for index in range(columns)]
    return [header, *(row[:columns] for row in parsed)]


def build_worksheet_xml(rows: Sequence[Sequence[str]]) -> bytes:
    root = Element("worksheet", {"xmlns": XML_NS["s"]})
    sheet_data = SubElement(root, "sheetData")
    for row_number, values in enumerate(rows, start=1):
        row = SubElement(sheet_data, "row", {"r": str(row_number)})
        for column_index, value in enumerate(values):
            cell = SubElement(row, "c", {"r": f"{column_letter(column_index)}{row_number}", "t": "inlineStr"})
            inline = SubElement(cell, "is")
            SubElement(inline, "t").text = value
    return serialize(root)


def build_workbook_xml(sheet_rid: str) -> bytes:
    root = Element("workbook", {"xmlns": XML_NS["s"]})
    sheets = SubElement(root, "sheets")
    SubElement(
        sheets,
        "sheet",
        {"name": SHEET_NAME, "sheetId": "1", f"{{{XML_NS['r']}}}id": sheet_rid},
    )
    return serialize(root)


def build_xlsx(
    lines: Sequence[str],
    *,
    core: CoreProperties,
    max_rows: int = 600,
    max_columns: int = 8,
) -> bytes:
    """Return an XLSX archive with one worksheet row per line."""

    rows = build_rows(ensure_lines(lines)[:max_rows], max_columns)
    app = AppProperties(application="pdfofficex Excel Export")
    package = OfficePackage(core, app)
    sheet_rid = package.add_related_part(
        WORKBOOK_PART,
        "xl/worksheets/sheet1.xml",
        build_worksheet_xml(rows),
        content_type=CONTENT_TYPES["worksheet"],
        relationship_type=REL_TYPES["worksheet"],
    )
    package.add_related_part(
        PACKAGE_ROOT,
        WORKBOOK_PART,
        build_workbook_xml(sheet_rid),
        content_type=CONTENT_TYPES["workbook"],
        relationship_type=REL_TYPES["office_document"],
    )
    return package.to_bytes()
