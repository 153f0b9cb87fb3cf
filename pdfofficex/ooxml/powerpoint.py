"""PresentationML (PPTX) generation."""

from __future__ import annotations

from typing import Sequence
from xml.etree.ElementTree import Element, SubElement

from .namespaces import CONTENT_TYPES, REL_TYPES, XML_NS
from .package import PACKAGE_ROOT, OfficePackage
from .types import AppProperties, CoreProperties
from .utils import ensure_lines, serialize

__all__ = ["PRESENTATION_PART", "build_presentation_xml", "build_pptx", "build_slide_xml", "chunk_lines"]

PRESENTATION_PART = "ppt/presentation.xml"

_FIRST_SLIDE_ID = 256
# 4:3 slide, in EMU.
_SLIDE_SIZE = {"cx": "9144000", "cy": "6858000", "type": "screen4x3"}
_NOTES_SIZE = {"cx": "6858000", "cy": "9144000"}
_TITLE_FRAME = (("457200", "274638"), ("8229600", "914400"))
_BODY_FRAME = (("457200", "1287788"), ("8229600", "4937760"))


def chunk_lines(lines: Sequence[str], size: int) -> list[list[str]]:
    return [list(lines[index : index + size]) for index in range(0, len(lines), size)]


def _add_shape(
    tree: Element,
    shape_id: int,
    name: str,
    frame: tuple[tuple[str, str], tuple[str, str]],
    paragraphs: Sequence[str],
    *,
    size: str,
    bold: bool = False,
    wrap: bool = False,
) -> None:
    p_ns = f"{{{XML_NS['p']}}}"
    a_ns = f"{{{XML_NS['a']}}}"
    (off_x, off_y), (ext_cx, ext_cy) = frame

    shape = SubElement(tree, f"{p_ns}sp")
    nv_sp_pr = SubElement(shape, f"{p_ns}nvSpPr")
    SubElement(nv_sp_pr, f"{p_ns}cNvPr", {"id": str(shape_id), "name": name})
    SubElement(nv_sp_pr, f"{p_ns}cNvSpPr")
    SubElement(nv_sp_pr, f"{p_ns}nvPr")

    sp_pr = SubElement(shape, f"{p_ns}spPr")
    xfrm = SubElement(sp_pr, f"{a_ns}xfrm")
    SubElement(xfrm, f"{a_ns}off", {"x": off_x, "y": off_y})
    SubElement(xfrm, f"{a_ns}ext", {"cx": ext_cx, "cy": ext_cy})
    geometry = SubElement(sp_pr, f"{a_ns}prstGeom", {"prst": "rect"})
    SubElement(geometry, f"{a_ns}avLst")

    tx_body = SubElement(shape, f"{p_ns}txBody")
    SubElement(tx_body, f"{a_ns}bodyPr", {"wrap": "square"} if wrap else {})
    SubElement(tx_body, f"{a_ns}lstStyle")
    run_attrs = {"lang": "en-US", "sz": size}
    if bold:
        run_attrs["b"] = "1"
    for text in paragraphs:
        paragraph = SubElement(tx_body, f"{a_ns}p")
        run = SubElement(paragraph, f"{a_ns}r")
        SubElement(run, f"{a_ns}rPr", run_attrs)
        SubElement(run, f"{a_ns}t").text = text
        SubElement(paragraph, f"{a_ns}endParaRPr", {"lang": "en-US", "sz": size})


def build_slide_xml(number: int, lines: Sequence[str]) -> bytes:
    p_ns = f"{{{XML_NS['p']}}}"
    a_ns = f"{{{XML_NS['a']}}}"
    root = Element(f"{p_ns}sld")
    common = SubElement(root, f"{p_ns}cSld")
    tree = SubElement(common, f"{p_ns}spTree")

    nv_grp = SubElement(tree, f"{p_ns}nvGrpSpPr")
    SubElement(nv_grp, f"{p_ns}cNvPr", {"id": "1", "name": ""})
    SubElement(nv_grp, f"{p_ns}cNvGrpSpPr")
    SubElement(nv_grp, f"{p_ns}nvPr")
    grp_sp_pr = SubElement(tree, f"{p_ns}grpSpPr")
    xfrm = SubElement(grp_sp_pr, f"{a_ns}xfrm")
    SubElement(xfrm, f"{a_ns}off", {"x": "0", "y": "0"})
    SubElement(xfrm, f"{a_ns}ext", {"cx": "0", "cy": "0"})
    SubElement(xfrm, f"{a_ns}chOff", {"x": "0", "y": "0"})
    SubElement(xfrm, f"{a_ns}chExt", {"cx": "0", "cy": "0"})

    _add_shape(tree, 2, "Title", _TITLE_FRAME, [f"PDF Slide {number}"], size="3200", bold=True)
    _add_shape(tree, 3, "Content", _BODY_FRAME, lines, size="1800", wrap=True)

    color_map = SubElement(root, f"{p_ns}clrMapOvr")
    SubElement(color_map, f"{a_ns}masterClrMapping")
    return serialize(root)


def build_presentation_xml(slide_rids: Sequence[str]) -> bytes:
    p_ns = f"{{{XML_NS['p']}}}"
    r_id = f"{{{XML_NS['r']}}}id"
    root = Element(f"{p_ns}presentation")
    id_list = SubElement(root, f"{p_ns}sldIdLst")
    for index, rid in enumerate(slide_rids):
        SubElement(id_list, f"{p_ns}sldId", {"id": str(_FIRST_SLIDE_ID + index), r_id: rid})
    SubElement(root, f"{p_ns}sldSz", _SLIDE_SIZE)
    SubElement(root, f"{p_ns}notesSz", _NOTES_SIZE)
    return serialize(root)


def _add_slide(package: OfficePackage, number: int, lines: Sequence[str]) -> str:
    """Register slide ``number``: its part, content-type override and relationship."""

    return package.add_related_part(
        PRESENTATION_PART,
        f"ppt/slides/slide{number}.xml",
        build_slide_xml(number, lines),
        content_type=CONTENT_TYPES["slide"],
        relationship_type=REL_TYPES["slide"],
    )


def build_pptx(
    lines: Sequence[str],
    *,
    core: CoreProperties,
    max_source_lines: int = 320,
    lines_per_slide: int = 12,
    max_slides: int = 25,
) -> bytes:
    """Return a PPTX archive with the lines spread across titled slides."""

    slides = chunk_lines(ensure_lines(lines)[:max_source_lines], lines_per_slide)[:max_slides]
    app = AppProperties(
        application="pdfofficex PowerPoint Export",
        counts={"Slides": len(slides), "Paragraphs": sum(len(slide) for slide in slides)},
    )
    package = OfficePackage(core, app)
    slide_rids = [_add_slide(package, number, slide) for number, slide in enumerate(slides, start=1)]
    package.add_related_part(
        PACKAGE_ROOT,
        PRESENTATION_PART,
        build_presentation_xml(slide_rids),
        content_type=CONTENT_TYPES["presentation"],
        relationship_type=REL_TYPES["office_document"],
    )
    return package.to_bytes()
