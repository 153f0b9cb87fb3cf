"""Construct the package-level XML parts shared by every office format."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable
from xml.etree.ElementTree import Element, SubElement

from .namespaces import CONTENT_TYPES, PACKAGE_NS, XML_NS
from .types import AppProperties, CoreProperties, Relationship
from .utils import serialize

__all__ = [
    "build_app_properties_xml",
    "build_content_types_xml",
    "build_core_properties_xml",
    "build_relationships_xml",
]


def _format_w3cdtf(value: datetime) -> str:
    return value.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def build_core_properties_xml(metadata: CoreProperties) -> bytes:
    metadata = metadata.normalise()
    cp_ns = f"{{{XML_NS['cp']}}}"
    dc_ns = f"{{{XML_NS['dc']}}}"
    dcterms_ns = f"{{{XML_NS['dcterms']}}}"
    xsi_type = f"{{{XML_NS['xsi']}}}type"

    root = Element(f"{cp_ns}coreProperties")
    if metadata.title:
        SubElement(root, f"{dc_ns}title").text = metadata.title
    if metadata.subject:
        SubElement(root, f"{dc_ns}subject").text = metadata.subject
    if metadata.creator:
        SubElement(root, f"{dc_ns}creator").text = metadata.creator
    if metadata.keywords:
        SubElement(root, f"{cp_ns}keywords").text = metadata.keywords
    if metadata.last_modified_by:
        SubElement(root, f"{cp_ns}lastModifiedBy").text = metadata.last_modified_by
    created = SubElement(root, f"{dcterms_ns}created", {xsi_type: "dcterms:W3CDTF"})
    created.text = _format_w3cdtf(metadata.created)
    modified = SubElement(root, f"{dcterms_ns}modified", {xsi_type: "dcterms:W3CDTF"})
    modified.text = _format_w3cdtf(metadata.modified)
    return serialize(root)


def build_app_properties_xml(properties: AppProperties) -> bytes:
    ep_ns = f"{{{XML_NS['ep']}}}"
    root = Element(f"{ep_ns}Properties", {"xmlns:vt": XML_NS["vt"]})
    SubElement(root, f"{ep_ns}Application").text = properties.application
    SubElement(root, f"{ep_ns}DocSecurity").text = "0"
    for name, value in properties.counts.items():
        SubElement(root, f"{ep_ns}{name}").text = str(value)
    return serialize(root)


def build_content_types_xml(overrides: Iterable[tuple[str, str]]) -> bytes:
    root = Element("Types", {"xmlns": PACKAGE_NS["ct"]})
    SubElement(root, "Default", {"Extension": "rels", "ContentType": CONTENT_TYPES["rels"]})
    SubElement(root, "Default", {"Extension": "xml", "ContentType": CONTENT_TYPES["xml"]})
    for part_name, content_type in overrides:
        SubElement(root, "Override", {"PartName": f"/{part_name}", "ContentType": content_type})
    return serialize(root)


def build_relationships_xml(relationships: Iterable[Relationship]) -> bytes:
    root = Element("Relationships", {"xmlns": PACKAGE_NS["rel"]})
    for relationship in relationships:
        SubElement(
            root,
            "Relationship",
            {"Id": relationship.rid, "Type": relationship.rel_type, "Target": relationship.target},
        )
    return serialize(root)
