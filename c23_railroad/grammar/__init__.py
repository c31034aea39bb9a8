"""
C23 grammar transcription: rule factories, registry and section index.
"""

from . import declarations, expressions, external, lexical, preprocessor, statements
from .registry import RuleRegistry, RuleSet, unresolved_references
from .sections import SECTIONS, Section, filter_rule_names, filter_sections

RULE_SETS = (
    lexical.rules,
    expressions.rules,
    declarations.rules,
    statements.rules,
    external.rules,
    preprocessor.rules,
)


def build_registry() -> RuleRegistry:
    """Build a fresh registry holding every C23 rule factory."""
    registry = RuleRegistry()
    for rule_set in RULE_SETS:
        rule_set.install(registry)
    return registry


__all__ = [
    "RULE_SETS",
    "SECTIONS",
    "RuleRegistry",
    "RuleSet",
    "Section",
    "build_registry",
    "filter_rule_names",
    "filter_sections",
    "unresolved_references",
]
