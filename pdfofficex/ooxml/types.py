"""Dataclasses used by the OOXML package writer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .namespaces import DEFAULT_TIMESTAMP

__all__ = ["AppProperties", "CoreProperties", "PackagePart", "Relationship"]


@dataclass(slots=True)
class CoreProperties:
    """Metadata for the ``docProps/core.xml`` part."""

    title: str | None = "PDF conversion output"
    creator: str | None = "pdfofficex"
    subject: str | None = None
    keywords: str | None = None
    last_modified_by: str | None = None
    created: datetime | None = DEFAULT_TIMESTAMP
    modified: datetime | None = None

    def normalise(self) -> "CoreProperties":
        if self.created is None:
            self.created = DEFAULT_TIMESTAMP
        if self.modified is None:
            self.modified = self.created
        if self.last_modified_by is None:
            self.last_modified_by = self.creator
        return self


@dataclass(slots=True)
class AppProperties:
    """Values for the ``docProps/app.xml`` part, in document order."""

    application: str
    counts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Relationship:
    rid: str
    rel_type: str
    target: str


@dataclass(slots=True)
class PackagePart:
    name: str
    data: bytes
    content_type: str | None = None
