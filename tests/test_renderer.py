"""
Tests for mounting diagrams into element trees.
"""

import xml.etree.ElementTree as ET
from types import SimpleNamespace

import pytest

from c23_railroad.diagrams.builder import DiagramBuilder
from c23_railroad.diagrams.nodes import NT, T, Diagram, Sequence
from c23_railroad.grammar import build_registry
from c23_railroad.grammar.registry import RuleRegistry
from c23_railroad.grammar.sections import SECTIONS, get_section
from c23_railroad.rendering import (
    DiagramRenderer,
    build_document,
    clear_rule_blocks,
    find_section_container,
    render_all_sections,
    to_html,
    write_html,
)


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def svg_texts(element):
    return [el.text for el in element.iter() if el.tag == "text" and el.text]


def svgwrap_of(block):
    return block.find("div[@class='svgwrap']")


class RecordingItem:
    """Stands in for a drawing-library primitive and remembers its arguments."""

    def __init__(self, *args, **kwargs):
        self.args = args
        self.kwargs = kwargs


def make_backend(diagram_cls=RecordingItem, non_terminal=RecordingItem):
    return SimpleNamespace(
        Diagram=diagram_cls,
        Sequence=RecordingItem,
        Stack=RecordingItem,
        Choice=RecordingItem,
        Optional=RecordingItem,
        OneOrMore=RecordingItem,
        ZeroOrMore=RecordingItem,
        Terminal=RecordingItem,
        NonTerminal=non_terminal,
        Comment=RecordingItem,
        Skip=RecordingItem,
    )


class MarkupOnlyDiagram(RecordingItem):
    def writeSvg(self, write):
        write('<svg class="railroad-diagram"><g><text>markup</text></g></svg>')


class AttachOnlyDiagram(RecordingItem):
    def addTo(self, parent):
        ET.SubElement(parent, "svg", {"class": "attached"})


class BrokenDiagram(RecordingItem):
    def writeStandalone(self, write):
        write("<svg><g>")
        raise RuntimeError("layout failed")

    def writeSvg(self, write):
        write("<svg><unclosed></svg>")


def single_rule_registry(name="demo"):
    registry = RuleRegistry()
    registry.register(name, lambda: Diagram(Sequence(T("("), NT(name), T(")"))))
    return registry


class TestMountRule:
    """Tests for DiagramRenderer.mount_rule with the real drawing library."""

    def test_block_structure(self, registry):
        container = ET.Element("div")
        renderer = DiagramRenderer(registry)
        block = renderer.mount_rule(container, "declarator", registry.lookup("declarator")())

        assert list(container) == [block]
        assert block.get("class") == "rule"
        assert block.get("id") == "rule-declarator"
        assert block.find("h3").text == "declarator"
        svgwrap = svgwrap_of(block)
        assert svgwrap.find("svg") is not None
        assert not (svgwrap.text or "").startswith("Render error")

    def test_multiplicative_expression(self, registry):
        container = ET.Element("div")
        DiagramRenderer(registry).render_rule(container, "multiplicative-expression")
        texts = svg_texts(container)
        assert "cast-expression" in texts
        assert {"*", "/", "%"} <= set(texts)

    def test_rendering_is_idempotent(self, registry):
        renderer = DiagramRenderer(registry)
        first, second = ET.Element("div"), ET.Element("div")
        renderer.render_rule(first, "direct-declarator")
        renderer.render_rule(second, "direct-declarator")
        assert ET.tostring(first) == ET.tostring(second)

    def test_malformed_description_renders_error(self, registry):
        container = ET.Element("div")
        block = DiagramRenderer(registry).mount_rule(container, "broken", "not a diagram")
        assert svgwrap_of(block).text.startswith("Render error: Malformed diagram description")
        assert len(svgwrap_of(block)) == 0

    def test_svg_is_inlined_without_namespaces(self, registry):
        container = ET.Element("div")
        DiagramRenderer(registry).render_rule(container, "declarator")
        tags = {el.tag for el in container.iter()}
        assert not any(tag.startswith("{") for tag in tags)


class TestRenderRule:
    """Tests for lookups, placeholders and failure isolation."""

    def test_missing_rule_renders_placeholder(self, registry):
        container = ET.Element("div")
        block = DiagramRenderer(registry).render_rule(container, "no-such-rule")
        assert block.get("id") == "rule-no-such-rule"
        assert "No factory defined for no-such-rule" in svg_texts(block)

    def test_failing_factory_is_isolated(self):
        registry = single_rule_registry("good")

        def explode():
            raise RuntimeError("factory exploded")

        registry.register("bad", explode)
        container = ET.Element("div")
        DiagramRenderer(registry).render_rule_list(container, ["bad", "good"])

        bad, good = list(container)
        assert svgwrap_of(bad).text == "Render error: factory exploded"
        assert svgwrap_of(good).find("svg") is not None

    def test_references_resolve_against_registry(self):
        registry = single_rule_registry("demo")
        registry.register("other", lambda: Diagram(Sequence(NT("demo"), NT("missing"))))
        backend = make_backend()
        renderer = DiagramRenderer(registry, builder=DiagramBuilder(backend), strategies=["vector"])

        diagram = renderer.to_diagram(registry.lookup("other")())
        resolved, unresolved = diagram.args[0].args
        assert resolved.args == ("demo",)
        assert resolved.kwargs == {"href": "#rule-demo"}
        assert unresolved.args == ("missing",)
        assert unresolved.kwargs["cls"] == "unresolved"

    def test_links_can_be_disabled(self):
        registry = single_rule_registry("demo")
        renderer = DiagramRenderer(registry, builder=DiagramBuilder(make_backend()), link_references=False)
        diagram = renderer.to_diagram(Diagram(NT("demo")))
        assert diagram.args[0].kwargs == {}

    def test_unresolved_reference_survives_backend_without_cls(self):
        class OldNonTerminal(RecordingItem):
            def __init__(self, text, href=None, title=None):
                super().__init__(text, href=href, title=title)

        registry = single_rule_registry("demo")
        backend = make_backend(non_terminal=OldNonTerminal)
        renderer = DiagramRenderer(registry, builder=DiagramBuilder(backend))
        diagram = renderer.to_diagram(Diagram(NT("missing")))
        assert diagram.args[0].kwargs["title"] == "No diagram defined for missing"


class TestExportStrategies:
    """Tests for the export fallback chain."""

    def render_with(self, diagram_cls, strategies=("vector", "markup", "attach")):
        registry = single_rule_registry()
        renderer = DiagramRenderer(
            registry, builder=DiagramBuilder(make_backend(diagram_cls)), strategies=strategies
        )
        container = ET.Element("div")
        return svgwrap_of(renderer.render_rule(container, "demo"))

    def test_falls_back_to_markup(self):
        svgwrap = self.render_with(MarkupOnlyDiagram)
        assert svg_texts(svgwrap) == ["markup"]

    def test_falls_back_to_attach(self):
        svgwrap = self.render_with(AttachOnlyDiagram)
        assert svgwrap.find("svg").get("class") == "attached"

    def test_all_strategies_fail(self):
        svgwrap = self.render_with(BrokenDiagram)
        assert len(svgwrap) == 0
        assert svgwrap.text.startswith("Render error: ")
        assert "vector: layout failed" in svgwrap.text

    def test_strategy_order_is_respected(self):
        class BothDiagram(MarkupOnlyDiagram, AttachOnlyDiagram):
            pass

        svgwrap = self.render_with(BothDiagram, strategies=("attach", "markup"))
        assert svgwrap.find("svg").get("class") == "attached"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            DiagramRenderer(RuleRegistry(), strategies=["png"])


class TestSections:
    """Tests for section containers and the full rendering pass."""

    def test_build_document(self):
        root = build_document()
        for section in SECTIONS:
            container = find_section_container(root, section.id)
            assert container is not None
            assert container.find("h2").text == section.title

    def test_render_section_without_container(self, registry):
        root = ET.Element("main")
        assert DiagramRenderer(registry).render_section(root, get_section("lexical")) is False

    def test_render_section_with_names(self, registry):
        root = build_document([get_section("statements")])
        DiagramRenderer(registry).render_section(root, get_section("statements"), ["jump-statement"])
        ids = [el.get("id") for el in root.iter("div") if el.get("class") == "rule"]
        assert ids == ["rule-jump-statement"]

    def test_rerender_replaces_earlier_blocks(self, registry):
        section = get_section("statements")
        root = build_document([section])
        renderer = DiagramRenderer(registry)
        renderer.render_section(root, section)
        renderer.render_section(root, section, ["jump-statement"])

        container = find_section_container(root, "statements")
        assert [child.tag for child in container] == ["h2", "div"]
        assert container.find("h2").text == section.title
        ids = [el.get("id") for el in root.iter("div") if el.get("class") == "rule"]
        assert ids == ["rule-jump-statement"]

    def test_render_all_sections_twice_matches_once(self, registry):
        once, twice = build_document(), build_document()
        render_all_sections(once, registry)
        render_all_sections(twice, registry)
        render_all_sections(twice, registry)
        assert ET.tostring(once) == ET.tostring(twice)

    def test_clear_rule_blocks_keeps_other_children(self):
        container = ET.Element("section")
        ET.SubElement(container, "h2").text = "Statements"
        ET.SubElement(container, "div", {"class": "rule", "id": "rule-a"})
        ET.SubElement(container, "div", {"class": "note"})
        ET.SubElement(container, "div", {"class": "rule", "id": "rule-b"})

        assert clear_rule_blocks(container) == 2
        assert [(child.tag, child.get("class")) for child in container] == [("h2", None), ("div", "note")]

    @pytest.mark.parametrize("section_id", ["it's", "a]b", 'say "hi"'])
    def test_find_section_container_with_unusual_ids(self, section_id):
        root = build_document()
        assert find_section_container(root, section_id) is None
        ET.SubElement(root, "section", {"data-section": section_id})
        assert find_section_container(root, section_id).get("data-section") == section_id

    def test_find_section_container_matches_root(self):
        root = ET.Element("section", {"data-section": "lexical"})
        assert find_section_container(root, "lexical") is root

    def test_render_all_sections(self, registry):
        root = build_document()
        render_all_sections(root, registry)
        for section in SECTIONS:
            container = find_section_container(root, section.id)
            blocks = container.findall("div[@class='rule']")
            assert [b.get("id") for b in blocks] == [f"rule-{n}" for n in section.rule_names]
            for block in blocks:
                assert not (svgwrap_of(block).text or "").startswith("Render error"), block.get("id")

    def test_write_html(self, registry, tmp_path):
        root = build_document([get_section("external")])
        DiagramRenderer(registry).render_section(root, get_section("external"))
        path = write_html(root, tmp_path / "out" / "page.html", "C23 test page")
        html = path.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>C23 test page</title>" in html
        assert 'id="rule-translation-unit"' in html
        assert "<svg" in html

    def test_to_html_uses_custom_css(self):
        html = to_html(build_document([]), "t", css="/* custom */")
        assert "/* custom */" in html


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
