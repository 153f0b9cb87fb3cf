from __future__ import annotations

from pdfofficex.extract.normalize import clean_lines, fallback_candidates, normalize_fragments
from pdfofficex.types import SENTINEL_LINE


def test_whitespace_is_collapsed_and_trimmed() -> None:
    assert clean_lines(["  Total \t\n amount  "]) == ["Total amount"]


def test_non_printable_characters_are_removed() -> None:
    assert clean_lines(["café menu\x00"]) == ["caf menu"]


def test_short_and_symbol_only_lines_are_dropped() -> None:
    assert clean_lines(["a", "--", "!!!", "ok"]) == ["ok"]


def test_case_insensitive_dedupe_keeps_first() -> None:
    assert clean_lines(["Invoice", "INVOICE", "invoice", "Total"]) == ["Invoice", "Total"]


def test_limit_bounds_output() -> None:
    values = [f"Line {index}" for index in range(1000)]

    lines = clean_lines(values, limit=600)

    assert len(lines) == 600
    assert lines[-1] == "Line 599"


def test_fallback_finds_printable_runs() -> None:
    source = b"\x00\x01Quarterly report 2024\xff\xfeab\x00"

    assert fallback_candidates(source) == ["Quarterly report 2024"]


def test_fragments_take_precedence_over_fallback() -> None:
    assert normalize_fragments(["Header"], b"Some other printable run") == ["Header"]


def test_fallback_used_when_fragments_are_empty() -> None:
    assert normalize_fragments(["", " "], b"\x00Readable text here\x00") == ["Readable text here"]


def test_sentinel_when_nothing_readable() -> None:
    assert normalize_fragments([], b"%PDF") == [SENTINEL_LINE]
