"""Structural validation of assembled OOXML packages."""

from __future__ import annotations

import posixpath
from typing import Mapping
from xml.etree.ElementTree import Element, ParseError, fromstring

from ..exceptions import ArchiveBuildFailed
from .namespaces import PACKAGE_NS
from .utils import resolve_target

__all__ = [
    "CONTENT_TYPES_PART",
    "relationships_part_name",
    "relationships_source",
    "validate_package",
    "validate_xml_parts",
]

CONTENT_TYPES_PART = "[Content_Types].xml"


def relationships_part_name(source: str) -> str:
    """Return the ``.rels`` part that holds relationships owned by ``source``."""

    if not source:
        return "_rels/.rels"
    directory, name = posixpath.split(source)
    return posixpath.join(directory, "_rels", f"{name}.rels")


def relationships_source(rels_part: str) -> str:
    """Inverse of :func:`relationships_part_name`."""

    directory, name = posixpath.split(rels_part)
    owner_directory = posixpath.dirname(directory)
    owner_name = name[: -len(".rels")]
    return posixpath.join(owner_directory, owner_name) if owner_name else ""


def _part_extension(name: str) -> str:
    # Leading-dot names such as "_rels/.rels" still carry an extension.
    basename = posixpath.basename(name)
    return basename.rsplit(".", 1)[-1].lower() if "." in basename else ""


def validate_xml_parts(entries: Mapping[str, bytes]) -> dict[str, Element]:
    """Ensure each XML payload is well-formed and return the parsed roots."""

    parsed: dict[str, Element] = {}
    for name, payload in entries.items():
        try:
            parsed[name] = fromstring(payload)
        except ParseError as exc:
            raise ArchiveBuildFailed(f"Generated XML for {name!r} is not well-formed: {exc}.") from exc
    return parsed


def _check_content_types(root: Element, entries: Mapping[str, bytes]) -> None:
    ns = {"ct": PACKAGE_NS["ct"]}
    defaults = {elem.attrib["Extension"].lower() for elem in root.findall("ct:Default", ns)}
    overrides = {elem.attrib["PartName"].lstrip("/") for elem in root.findall("ct:Override", ns)}

    missing = sorted(overrides - set(entries))
    if missing:
        raise ArchiveBuildFailed(f"[Content_Types].xml overrides reference missing parts: {missing}.")

    for name in entries:
        if name == CONTENT_TYPES_PART or name in overrides:
            continue
        extension = _part_extension(name)
        if extension not in defaults:
            raise ArchiveBuildFailed(f"Part {name!r} has no declared content type.")


def _check_relationships(parsed: Mapping[str, Element], entries: Mapping[str, bytes]) -> None:
    ns = {"rel": PACKAGE_NS["rel"]}
    targeted: set[str] = set()
    for name, root in parsed.items():
        if not name.endswith(".rels"):
            continue
        source = relationships_source(name)
        if source and source not in entries:
            raise ArchiveBuildFailed(f"Relationships part {name!r} belongs to missing part {source!r}.")
        seen_ids: set[str] = set()
        for relationship in root.findall("rel:Relationship", ns):
            rid = relationship.attrib["Id"]
            if rid in seen_ids:
                raise ArchiveBuildFailed(f"Duplicate relationship identifier {rid} in {name!r}.")
            seen_ids.add(rid)
            if relationship.attrib.get("TargetMode") == "External":
                continue
            target = resolve_target(source, relationship.attrib["Target"])
            if target not in entries:
                raise ArchiveBuildFailed(f"Relationship {rid} in {name!r} references missing part {target!r}.")
            targeted.add(target)

    orphans = sorted(
        name
        for name in entries
        if name != CONTENT_TYPES_PART and not name.endswith(".rels") and name not in targeted
    )
    if orphans:
        raise ArchiveBuildFailed(f"Parts are not referenced by any relationship: {orphans}.")


def validate_package(entries: Mapping[str, bytes]) -> None:
    """Check that ``entries`` forms a self-consistent OOXML package.

    Every part must be well-formed XML and covered by a content type, every
    override and relationship must point at an existing part, and every
    content part must be reachable through a relationship.
    """

    if CONTENT_TYPES_PART not in entries:
        raise ArchiveBuildFailed("Package is missing [Content_Types].xml.")
    if relationships_part_name("") not in entries:
        raise ArchiveBuildFailed("Package is missing the root relationships part.")
    parsed = validate_xml_parts(entries)
    _check_content_types(parsed[CONTENT_TYPES_PART], entries)
    _check_relationships(parsed, entries)
