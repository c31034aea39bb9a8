"""
Section index: the order in which rules are presented, grouped under titles.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    rule_names: Tuple[str, ...]


SECTION_ORDER = (
    "lexical",
    "expressions",
    "declarations",
    "statements",
    "external",
    "preprocessor",
)

SECTION_TITLES = {
    "lexical": "Lexical elements",
    "expressions": "Expressions",
    "declarations": "Declarations",
    "statements": "Statements",
    "external": "External definitions",
    "preprocessor": "Preprocessing directives",
}

SECTION_RULES = {
    "lexical": (
        "token",
        "preprocessing-token",
        "identifier",
        "universal-character-name",
        "constant",
    ),
    "expressions": (
        "primary-expression",
        "generic-selection",
        "generic-assoc-list",
        "generic-association",
        "postfix-expression",
        "argument-expression-list",
        "compound-literal",
        "unary-operator",
        "unary-expression",
        "cast-expression",
        "multiplicative-expression",
        "additive-expression",
        "shift-expression",
        "relational-expression",
        "equality-expression",
        "AND-expression",
        "exclusive-OR-expression",
        "inclusive-OR-expression",
        "logical-AND-expression",
        "logical-OR-expression",
        "conditional-expression",
        "assignment-operator",
        "assignment-expression",
        "expression",
        "constant-expression",
    ),
    "declarations": (
        "declaration",
        "declaration-specifiers",
        "declaration-specifier",
        "init-declarator-list",
        "init-declarator",
        "storage-class-specifiers",
        "storage-class-specifier",
        "type-specifier-qualifier",
        "type-specifier",
        "struct-or-union-specifier",
        "struct-or-union",
        "member-declaration-list",
        "member-declaration",
        "specifier-qualifier-list",
        "member-declarator-list",
        "member-declarator",
        "enum-specifier",
        "enumerator-list",
        "enumerator",
        "enum-type-specifier",
        "atomic-type-specifier",
        "typeof-specifier",
        "typeof-specifier-argument",
        "type-qualifier",
        "type-qualifier-list",
        "function-specifier",
        "alignment-specifier",
        "declarator",
        "pointer",
        "direct-declarator",
        "parameter-type-list",
        "parameter-list",
        "parameter-declaration",
        "type-name",
        "abstract-declarator",
        "direct-abstract-declarator",
        "braced-initializer",
        "initializer",
        "initializer-list",
        "designation",
        "designator-list",
        "designator",
    ),
    "statements": (
        "statement",
        "label",
        "labeled-statement",
        "unlabeled-statement",
        "primary-block",
        "compound-statement",
        "block-item-list",
        "block-item",
        "expression-statement",
        "selection-statement",
        "iteration-statement",
        "jump-statement",
    ),
    "external": (
        "translation-unit",
        "external-declaration",
        "function-definition",
        "function-body",
    ),
    "preprocessor": (
        "preprocessing-file",
        "group",
        "group-part",
        "if-section",
        "if-group",
        "elif-groups",
        "elif-group",
        "else-group",
        "endif-line",
        "control-line",
        "text-line",
        "non-directive",
        "pp-tokens",
        "replacement-list",
    ),
}

SECTIONS = [Section(s, SECTION_TITLES[s], SECTION_RULES[s]) for s in SECTION_ORDER]


def get_section(section_id: str) -> Section:
    for section in SECTIONS:
        if section.id == section_id:
            return section
    raise KeyError(f"Unknown section '{section_id}'. Known sections: {', '.join(SECTION_ORDER)}")


def all_rule_names(sections: Iterable[Section] = None) -> List[str]:
    """Every rule name in section order."""
    sections = SECTIONS if sections is None else sections
    return [name for section in sections for name in section.rule_names]


def filter_rule_names(names: Iterable[str], query: str) -> List[str]:
    """
    Keep the names containing ``query`` (case-insensitive), in their original order.

    A blank query keeps everything.
    """
    q = (query or "").strip().lower()
    if not q:
        return list(names)
    return [n for n in names if q in n.lower()]


def filter_sections(query: str, sections: Iterable[Section] = None) -> Dict[str, List[str]]:
    """Apply ``filter_rule_names`` to each section; keys follow section order."""
    sections = SECTIONS if sections is None else sections
    return {section.id: filter_rule_names(section.rule_names, query) for section in sections}
