"""
Rendering of rule diagrams into element-tree containers.

Each rule becomes::

    <div class="rule" id="rule-NAME">
      <h3>NAME</h3>
      <div class="svgwrap"><svg .../></div>
    </div>

A failure while rendering one rule is contained in that rule's block.
"""

import io
import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..diagrams import nodes
from ..diagrams.builder import DiagramBuilder
from ..grammar import build_registry
from ..grammar.registry import RuleRegistry
from ..grammar.sections import SECTIONS, Section

logger = logging.getLogger(__name__)

XLINK_NS = "http://www.w3.org/1999/xlink"


def _localize(element: ET.Element) -> ET.Element:
    """Strip namespace URIs so the SVG serializes inline in an HTML page."""
    for node in element.iter():
        if isinstance(node.tag, str) and node.tag.startswith("{"):
            node.tag = node.tag.split("}", 1)[1]
        for key in [k for k in node.attrib if k.startswith("{")]:
            uri, local = key[1:].split("}", 1)
            value = node.attrib.pop(key)
            node.set(f"xlink:{local}" if uri == XLINK_NS else local, value)
    return element


def _export_vector(diagram, target: ET.Element) -> None:
    """Standalone SVG document, namespaces and stylesheet included."""
    buffer = io.StringIO()
    diagram.writeStandalone(buffer.write)
    target.append(_localize(ET.fromstring(buffer.getvalue())))


def _export_markup(diagram, target: ET.Element) -> None:
    """Bare SVG markup meant for inline use; links use an undeclared xlink prefix."""
    buffer = io.StringIO()
    diagram.writeSvg(buffer.write)
    holder = ET.fromstring(f'<div xmlns:xlink="{XLINK_NS}">{buffer.getvalue()}</div>')
    if len(holder) == 0:
        raise ValueError("writeSvg() produced no element")
    for child in holder:
        target.append(_localize(child))


def _export_attach(diagram, target: ET.Element) -> None:
    before = len(target)
    diagram.addTo(target)
    if len(target) == before:
        raise RuntimeError("addTo() attached nothing")


EXPORT_STRATEGIES: Dict[str, Callable] = {
    "vector": _export_vector,
    "markup": _export_markup,
    "attach": _export_attach,
}

DEFAULT_STRATEGIES = ("vector", "markup", "attach")


def missing_rule_diagram(name: str) -> nodes.Diagram:
    return nodes.Diagram(nodes.Comment(f"No factory defined for {name}"))


class DiagramRenderer:
    """
    Turns rule descriptions into graphics and mounts them.

    Non-terminal references are resolved against ``registry`` when a diagram
    is converted: registered names link to their rule block, other names are
    drawn as unresolved placeholders.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        builder: Optional[DiagramBuilder] = None,
        link_references: bool = True,
        strategies: Iterable[str] = DEFAULT_STRATEGIES,
    ):
        """
        Args:
            registry: Rule registry used for lookups and reference resolution
            builder: Adapter over the drawing library (railroad by default)
            link_references: Whether resolved references link to ``#rule-NAME``
            strategies: Export strategy names, tried in order
        """
        strategies = list(strategies)
        unknown = [s for s in strategies if s not in EXPORT_STRATEGIES]
        if unknown:
            raise ValueError(
                f"Unknown export strategies {unknown}. Use any of {list(EXPORT_STRATEGIES)}."
            )
        self.registry = registry
        self.builder = builder or DiagramBuilder()
        self.link_references = link_references
        self.strategies: List[Tuple[str, Callable]] = [(s, EXPORT_STRATEGIES[s]) for s in strategies]

    def to_diagram(self, description):
        """Convert a description into a drawing-library diagram object."""
        if isinstance(description, nodes.Diagram):
            return self.builder.diagram(*[self._convert(item) for item in description.items])
        if isinstance(description, nodes.NODE_TYPES):
            return self.builder.diagram(self._convert(description))
        raise TypeError(f"Malformed diagram description: {description!r}")

    def _convert(self, node):
        b = self.builder
        if isinstance(node, nodes.Terminal):
            return b.terminal(node.text)
        if isinstance(node, nodes.NonTerminal):
            return self._reference(node.name)
        if isinstance(node, nodes.Comment):
            return b.comment(node.text)
        if isinstance(node, nodes.Skip):
            return b.skip()
        if isinstance(node, nodes.Sequence):
            return b.sequence(*[self._convert(item) for item in node.items])
        if isinstance(node, nodes.Stack):
            return b.stack(*[self._convert(item) for item in node.items])
        if isinstance(node, nodes.Choice):
            return b.choice(node.default, *[self._convert(item) for item in node.items])
        if isinstance(node, nodes.Optional):
            return b.optional(self._convert(node.item), node.skip)
        if isinstance(node, nodes.OneOrMore):
            return b.one_or_more(self._convert(node.item), self._convert_repeat(node.repeat))
        if isinstance(node, nodes.ZeroOrMore):
            return b.zero_or_more(self._convert(node.item), self._convert_repeat(node.repeat), node.skip)
        raise TypeError(f"Malformed diagram node: {node!r}")

    def _convert_repeat(self, repeat):
        return None if repeat is None else self._convert(repeat)

    def _reference(self, name: str):
        if name in self.registry:
            if self.link_references:
                return self.builder.non_terminal(name, href=f"#rule-{name}")
            return self.builder.non_terminal(name)
        return self.builder.non_terminal(
            name, title=f"No diagram defined for {name}", cls="unresolved"
        )

    def _open_block(self, container: ET.Element, name: str) -> Tuple[ET.Element, ET.Element]:
        wrap = ET.SubElement(container, "div", {"class": "rule", "id": f"rule-{name}"})
        heading = ET.SubElement(wrap, "h3")
        heading.text = name
        svgwrap = ET.SubElement(wrap, "div", {"class": "svgwrap"})
        return wrap, svgwrap

    def mount_rule(self, container: ET.Element, name: str, description) -> ET.Element:
        """Append the titled block for ``name`` to ``container`` and return it."""
        wrap, svgwrap = self._open_block(container, name)

        try:
            diagram = self.to_diagram(description)
        except Exception as e:
            logger.warning(f"Could not build diagram for '{name}': {e}")
            svgwrap.text = f"Render error: {e}"
            return wrap

        errors = []
        for strategy_name, export in self.strategies:
            try:
                export(diagram, svgwrap)
            except Exception as e:
                # Drop anything a failed strategy left behind.
                for child in list(svgwrap):
                    svgwrap.remove(child)
                logger.debug(f"'{strategy_name}' export failed for '{name}': {e}")
                errors.append(f"{strategy_name}: {e}")
                continue
            return wrap

        logger.warning(f"All export strategies failed for '{name}'")
        svgwrap.text = "Render error: " + ("; ".join(errors) or "no export strategy configured")
        return wrap

    def render_rule(self, container: ET.Element, name: str) -> ET.Element:
        """Look ``name`` up and mount it; absent rules get a placeholder block."""
        factory = self.registry.lookup(name)
        if factory is None:
            logger.debug(f"No factory for '{name}', mounting placeholder")
            return self.mount_rule(container, name, missing_rule_diagram(name))
        try:
            description = factory()
        except Exception as e:
            logger.warning(f"Factory for '{name}' failed: {e}")
            wrap, svgwrap = self._open_block(container, name)
            svgwrap.text = f"Render error: {e}"
            return wrap
        return self.mount_rule(container, name, description)

    def render_rule_list(self, section_root: ET.Element, names: Iterable[str]) -> None:
        for name in names:
            self.render_rule(section_root, name)

    def render_section(
        self,
        root: ET.Element,
        section: Section,
        names: Optional[Iterable[str]] = None,
    ) -> bool:
        """
        Render ``names`` (the whole section by default) into the section's container.

        Rule blocks from an earlier pass are replaced; other children (the
        section heading) are kept. Returns False when ``root`` has no
        ``[data-section=ID]`` container.
        """
        container = find_section_container(root, section.id)
        if container is None:
            logger.warning(f"No container for section '{section.id}', skipping")
            return False
        clear_rule_blocks(container)
        self.render_rule_list(container, section.rule_names if names is None else names)
        return True

    def render_all_sections(self, root: ET.Element, sections: Iterable[Section] = None) -> None:
        for section in SECTIONS if sections is None else sections:
            self.render_section(root, section)


def find_section_container(root: ET.Element, section_id: str) -> Optional[ET.Element]:
    for element in root.iter():
        if element.get("data-section") == section_id:
            return element
    return None


def clear_rule_blocks(container: ET.Element) -> int:
    """Remove the ``div.rule`` children of ``container``; returns how many went."""
    blocks = [child for child in container if child.tag == "div" and child.get("class") == "rule"]
    for block in blocks:
        container.remove(block)
    return len(blocks)


def render_all_sections(root: ET.Element, registry: Optional[RuleRegistry] = None) -> None:
    """Render every section of the C23 grammar into ``root``."""
    DiagramRenderer(registry if registry is not None else build_registry()).render_all_sections(root)
