from __future__ import annotations

from pdfofficex.extract.scanner import ObjectScanner, iter_object_spans, trim_trailing_line_breaks

from conftest import build_pdf


def test_spans_report_dictionary_and_stream_in_file_order() -> None:
    data = build_pdf([b"BT (first) Tj ET", (b" /Filter /FlateDecode", b"xyz")])

    spans = list(iter_object_spans(data))

    assert [span.number for span in spans] == [1, 2]
    assert spans[0].stream == b"BT (first) Tj ET"
    assert "/Length 16" in spans[0].dictionary
    assert "/FlateDecode" in spans[1].dictionary
    assert spans[0].offset < spans[1].offset
    assert data[spans[1].offset :].startswith(b"2 0 obj")


def test_objects_without_stream_are_skipped() -> None:
    data = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n2 0 obj\n<< /Length 3 >>\nstream\nabc\nendstream\nendobj\n"

    spans = list(iter_object_spans(data))

    assert [(span.number, span.generation) for span in spans] == [(2, 0)]
    assert spans[0].stream == b"abc"


def test_missing_endstream_skips_object() -> None:
    data = b"1 0 obj\n<< >>\nstream\nBT (lost) Tj ET\nendobj\n3 0 obj\n<< >>\nstream\nkept\nendstream\nendobj"

    assert [span.stream for span in iter_object_spans(data)] == [b"kept"]


def test_crlf_after_stream_keyword_is_not_part_of_payload() -> None:
    data = b"4 1 obj\r\n<< >>\r\nstream\r\npayload\r\nendstream\r\nendobj"

    (span,) = iter_object_spans(data)

    assert span.generation == 1
    assert span.stream == b"payload"


def test_trailing_line_breaks_trimmed() -> None:
    assert trim_trailing_line_breaks(b"data\r\n\n") == b"data"
    assert trim_trailing_line_breaks(b"data \n") == b"data "


def test_scanner_is_restartable() -> None:
    scanner = ObjectScanner(build_pdf([b"one", b"two"]))

    assert [span.stream for span in scanner] == [b"one", b"two"]
    assert [span.stream for span in scanner] == [b"one", b"two"]


def test_non_pdf_input_yields_nothing() -> None:
    assert list(iter_object_spans(b"not a pdf at all")) == []


def test_unterminated_object_markers_end_the_scan() -> None:
    assert list(iter_object_spans(b"1 0 obj\n" * 5000)) == []


def test_objects_before_unterminated_markers_are_kept() -> None:
    data = build_pdf([b"BT (kept) Tj ET"]) + b"9 0 obj\n<< >>\nstream\n" * 5000

    assert [span.stream for span in iter_object_spans(data)] == [b"BT (kept) Tj ET"]
