"""Dataclasses and enumerations shared across the pdfofficex pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "DecodedStream",
    "ObjectSpan",
    "OutputKind",
    "SENTINEL_LINE",
]

SENTINEL_LINE = "No extractable text was found in this PDF."


class OutputKind(str, Enum):
    """Office formats the converter can produce."""

    WORD = "word"
    POWERPOINT = "powerpoint"
    EXCEL = "excel"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: "OutputKind | str") -> "OutputKind":
        """Resolve ``value`` from a kind, its name, or a file extension alias."""

        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().lstrip(".")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unsupported output kind {value!r}; expected one of {choices}") from exc


_MIME_TYPES = {
    OutputKind.WORD: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    OutputKind.POWERPOINT: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    OutputKind.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}
_EXTENSIONS = {
    OutputKind.WORD: ".docx",
    OutputKind.POWERPOINT: ".pptx",
    OutputKind.EXCEL: ".xlsx",
}
_LABELS = {
    OutputKind.WORD: "Word",
    OutputKind.POWERPOINT: "PowerPoint",
    OutputKind.EXCEL: "Excel",
}
_ALIASES = {"docx": "word", "pptx": "powerpoint", "xlsx": "excel"}


@dataclass(frozen=True, slots=True)
class ObjectSpan:
    """A candidate indirect object located by textual scanning."""

    number: int
    generation: int
    offset: int
    dictionary: str
    stream: bytes


@dataclass(frozen=True, slots=True)
class DecodedStream:
    """Stream payload after filter decoding."""

    data: bytes
    dictionary: str
    applied_filter: str | None = None


@dataclass(frozen=True)
class ConversionOptions:
    """Limits and toggles controlling extraction and package generation."""

    max_lines: int = 600
    max_paragraphs: int = 1200
    max_slide_source_lines: int = 320
    lines_per_slide: int = 12
    max_slides: int = 25
    max_rows: int = 600
    max_columns: int = 8
    include_metadata: bool = True


@dataclass(slots=True)
class ConversionResult:
    """Outcome of a conversion run."""

    kind: OutputKind
    data: bytes
    line_count: int
    output_path: Path | None = None

    @property
    def mime_type(self) -> str:
        return self.kind.mime_type

    @property
    def size(self) -> int:
        return len(self.data)
