"""Utility helpers for OOXML generation."""

from __future__ import annotations

import posixpath
from typing import Sequence
from xml.etree.ElementTree import Element, tostring

from ..types import SENTINEL_LINE

__all__ = ["column_letter", "ensure_lines", "resolve_target", "serialize"]


def serialize(element: Element) -> bytes:
    return tostring(element, encoding="utf-8", xml_declaration=True)


def column_letter(index: int) -> str:
    """Return the spreadsheet column name for zero-based ``index`` (0 → A, 26 → AA)."""

    if index < 0:
        raise ValueError("Column index must not be negative")
    value = index + 1
    letters = ""
    while value > 0:
        value, remainder = divmod(value - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def resolve_target(source_part: str, target: str) -> str:
    """Resolve a relationship ``target`` relative to the part that owns it."""

    if target.startswith("/"):
        return target.lstrip("/")
    base = posixpath.dirname(source_part)
    return posixpath.normpath(posixpath.join(base, target))


def ensure_lines(lines: Sequence[str]) -> Sequence[str]:
    """Substitute the sentinel line for an empty sequence."""

    return lines if lines else [SENTINEL_LINE]
