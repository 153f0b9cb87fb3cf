"""In-memory OOXML package model and ZIP writer."""

from __future__ import annotations

import logging
import posixpath
import zlib
from io import BytesIO
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from ..exceptions import ArchiveBuildFailed
from .namespaces import CONTENT_TYPES, REL_TYPES, ZIP_TIMESTAMP
from .parts import (
    build_app_properties_xml,
    build_content_types_xml,
    build_core_properties_xml,
    build_relationships_xml,
)
from .types import AppProperties, CoreProperties, PackagePart, Relationship
from .validation import CONTENT_TYPES_PART, relationships_part_name, validate_package

__all__ = ["OfficePackage", "PACKAGE_ROOT"]

LOGGER = logging.getLogger(__name__)

PACKAGE_ROOT = ""


def _zipinfo(name: str) -> ZipInfo:
    info = ZipInfo(name)
    info.date_time = ZIP_TIMESTAMP
    info.compress_type = ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    return info


class OfficePackage:
    """Collects parts, content types and relationships for one office document.

    Registering a part through :meth:`add_related_part` records the part,
    its content-type override and the relationship from its owner in one
    step, so the three always agree.
    """

    def __init__(self, core: CoreProperties, app: AppProperties) -> None:
        self.core = core
        self.app = app
        self._parts: dict[str, PackagePart] = {}
        self._relationships: dict[str, list[Relationship]] = {}

    def add_part(self, name: str, data: bytes, content_type: str | None = None) -> None:
        if name in self._parts:
            raise ValueError(f"Duplicate part name: {name}")
        self._parts[name] = PackagePart(name=name, data=data, content_type=content_type)

    def relate(self, source: str, target: str, relationship_type: str) -> str:
        """Add a relationship from ``source`` to the part named ``target``."""

        relationships = self._relationships.setdefault(source, [])
        rid = f"rId{len(relationships) + 1}"
        relative = posixpath.relpath(target, posixpath.dirname(source) or ".")
        relationships.append(Relationship(rid=rid, rel_type=relationship_type, target=relative))
        return rid

    def add_related_part(
        self,
        source: str,
        name: str,
        data: bytes,
        *,
        content_type: str,
        relationship_type: str,
    ) -> str:
        self.add_part(name, data, content_type)
        return self.relate(source, name, relationship_type)

    def declare_relationships(self, source: str) -> None:
        """Emit a relationships part for ``source`` even if it stays empty."""

        self._relationships.setdefault(source, [])

    def _add_properties(self) -> None:
        if "docProps/core.xml" in self._parts:
            return
        self.add_related_part(
            PACKAGE_ROOT,
            "docProps/core.xml",
            build_core_properties_xml(self.core),
            content_type=CONTENT_TYPES["core"],
            relationship_type=REL_TYPES["core"],
        )
        self.add_related_part(
            PACKAGE_ROOT,
            "docProps/app.xml",
            build_app_properties_xml(self.app),
            content_type=CONTENT_TYPES["app"],
            relationship_type=REL_TYPES["app"],
        )

    def entries(self) -> dict[str, bytes]:
        """Return every archive entry, manifests first, in write order."""

        self._add_properties()
        overrides = [
            (part.name, part.content_type) for part in self._parts.values() if part.content_type is not None
        ]
        entries: dict[str, bytes] = {CONTENT_TYPES_PART: build_content_types_xml(overrides)}
        for source, relationships in self._relationships.items():
            entries[relationships_part_name(source)] = build_relationships_xml(relationships)
        for part in self._parts.values():
            entries[part.name] = part.data
        return entries

    def to_bytes(self) -> bytes:
        """Validate the package and return it as a deflated ZIP archive."""

        entries = self.entries()
        validate_package(entries)
        buffer = BytesIO()
        try:
            with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
                for name, data in entries.items():
                    archive.writestr(_zipinfo(name), data)
        except (OSError, ValueError, zlib.error) as exc:
            raise ArchiveBuildFailed(f"Unable to write office archive: {exc}") from exc
        LOGGER.debug("Wrote office archive with %d entries", len(entries))
        return buffer.getvalue()
