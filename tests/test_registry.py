"""
Tests for the rule registry and rule sets.
"""

import pytest

from c23_railroad.diagrams.nodes import NT, T, Diagram, Sequence
from c23_railroad.grammar.registry import RuleRegistry, RuleSet, unresolved_references


class TestRuleRegistry:
    """Tests for RuleRegistry."""

    def test_register_and_lookup(self):
        registry = RuleRegistry()
        factory = lambda: Diagram(T("x"))
        registry.register("x-rule", factory)
        assert registry.lookup("x-rule") is factory
        assert "x-rule" in registry
        assert len(registry) == 1

    def test_lookup_absent_returns_none(self):
        assert RuleRegistry().lookup("no-such-rule") is None

    def test_duplicate_registration_last_writer_wins(self):
        registry = RuleRegistry()
        first = lambda: Diagram(T("first"))
        second = lambda: Diagram(T("second"))
        registry.register("rule", first)
        registry.register("rule", second)
        assert registry.lookup("rule") is second
        assert registry.names() == ["rule"]

    def test_iteration_follows_registration_order(self):
        registry = RuleRegistry()
        for name in ("c", "a", "b"):
            registry.register(name, lambda: Diagram(T(name)))
        assert list(registry) == ["c", "a", "b"]


class TestRuleSet:
    """Tests for RuleSet."""

    def test_decorator_records_in_order_and_returns_factory(self):
        rules = RuleSet("demo")

        @rules.rule("first")
        def first():
            return Diagram(T("1"))

        @rules.rule("second")
        def second():
            return Diagram(T("2"))

        assert rules.names() == ["first", "second"]
        assert first() == Diagram(T("1"))

    def test_install(self):
        rules = RuleSet("demo")
        rules.rule("only")(lambda: Diagram(T("1")))
        registry = rules.install(RuleRegistry())
        assert registry.names() == ["only"]


class TestUnresolvedReferences:
    """Tests for unresolved_references."""

    def test_reports_only_missing_names(self):
        registry = RuleRegistry()
        registry.register("a", lambda: Diagram(Sequence(NT("b"), NT("zeta"), NT("alpha"))))
        registry.register("b", lambda: Diagram(NT("a")))
        assert unresolved_references(registry) == {"a": ["alpha", "zeta"]}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
