from __future__ import annotations

from pathlib import Path
from zipfile import ZipFile

from click.testing import CliRunner

from pdfofficex import __version__
from pdfofficex.cli import cli

from conftest import build_pdf


def _write_pdf(tmp_path: Path, *lines: bytes) -> Path:
    path = tmp_path / "input.pdf"
    operations = b" ".join(b"(" + line + b") Tj" for line in lines)
    path.write_bytes(build_pdf([b"BT " + operations + b" ET"]))
    return path


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_convert_defaults_to_word(tmp_path: Path) -> None:
    source = _write_pdf(tmp_path, b"Invoice 42")

    result = CliRunner().invoke(cli, ["convert", str(source)])

    assert result.exit_code == 0, result.output
    assert "Conversion complete" in result.output
    output = tmp_path / "input.docx"
    with ZipFile(output) as archive:
        assert "word/document.xml" in archive.namelist()


def test_convert_accepts_extension_alias_and_output(tmp_path: Path) -> None:
    source = _write_pdf(tmp_path, b"Slide text")
    destination = tmp_path / "deck" / "slides.pptx"

    result = CliRunner().invoke(cli, ["convert", str(source), "--to", "PPTX", "-o", str(destination), "--no-metadata"])

    assert result.exit_code == 0, result.output
    assert "PowerPoint" in result.output
    with ZipFile(destination) as archive:
        assert "ppt/slides/slide1.xml" in archive.namelist()


def test_convert_rejects_unknown_kind(tmp_path: Path) -> None:
    source = _write_pdf(tmp_path, b"Anything")

    result = CliRunner().invoke(cli, ["convert", str(source), "--to", "odt"])

    assert result.exit_code == 2


def test_convert_missing_input(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["convert", str(tmp_path / "absent.pdf")])

    assert result.exit_code == 2


def test_extract_prints_lines(tmp_path: Path) -> None:
    source = _write_pdf(tmp_path, b"First line", b"Second line")

    result = CliRunner().invoke(cli, ["extract", str(source)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["First line", "Second line"]


def test_extract_limit_reports_remaining(tmp_path: Path) -> None:
    source = _write_pdf(tmp_path, b"First line", b"Second line", b"Third line")

    result = CliRunner().invoke(cli, ["extract", str(source), "--limit", "1"])

    assert result.exit_code == 0
    assert "First line" in result.output
    assert "Second line" not in result.output
    assert "... and 2 more" in result.output
