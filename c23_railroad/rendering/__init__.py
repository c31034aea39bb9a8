"""
Mounting rule diagrams into element trees and writing them out as HTML.
"""

from .document import build_document, to_html, write_html
from .renderer import (
    DEFAULT_STRATEGIES,
    EXPORT_STRATEGIES,
    DiagramRenderer,
    clear_rule_blocks,
    find_section_container,
    missing_rule_diagram,
    render_all_sections,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "EXPORT_STRATEGIES",
    "DiagramRenderer",
    "build_document",
    "clear_rule_blocks",
    "find_section_container",
    "missing_rule_diagram",
    "render_all_sections",
    "to_html",
    "write_html",
]
