"""
Section containers and static HTML output.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Union

import railroad

from ..grammar.sections import SECTIONS, Section

logger = logging.getLogger(__name__)

PAGE_STYLE = """
body { font-family: system-ui, sans-serif; margin: 2rem; }
.rule { margin: 1.5rem 0; }
.rule h3 { font-family: monospace; margin: 0 0 0.5rem; }
.svgwrap { overflow-x: auto; }
svg.railroad-diagram g.unresolved rect { stroke-dasharray: 4 2; }
"""


def build_document(sections: Iterable[Section] = None) -> ET.Element:
    """
    Build the root container: one ``<section data-section=ID>`` per section,
    each headed by its title.
    """
    root = ET.Element("main")
    for section in SECTIONS if sections is None else sections:
        element = ET.SubElement(root, "section", {"id": section.id, "data-section": section.id})
        heading = ET.SubElement(element, "h2")
        heading.text = section.title
    return root


def to_html(root: ET.Element, title: str, css: str = None) -> str:
    """Serialize ``root`` into a standalone HTML page."""
    css = railroad.DEFAULT_STYLE if css is None else css
    html = ET.Element("html", {"lang": "en"})
    head = ET.SubElement(html, "head")
    ET.SubElement(head, "meta", {"charset": "utf-8"})
    title_element = ET.SubElement(head, "title")
    title_element.text = title
    style = ET.SubElement(head, "style")
    style.text = css + PAGE_STYLE
    body = ET.SubElement(html, "body")
    heading = ET.SubElement(body, "h1")
    heading.text = title
    body.append(root)
    return "<!DOCTYPE html>\n" + ET.tostring(html, encoding="unicode", method="html") + "\n"


def write_html(root: ET.Element, path: Union[str, Path], title: str, css: str = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_html(root, title, css), encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
