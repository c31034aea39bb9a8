"""
A.3.4 External definitions.
"""

from ..diagrams.nodes import NT, Choice, Diagram, OneOrMore, Optional, Sequence
from .registry import RuleSet

rules = RuleSet("external")


@rules.rule("translation-unit")
def translation_unit():
    return Diagram(OneOrMore(NT("external-declaration")))


@rules.rule("external-declaration")
def external_declaration():
    return Diagram(Choice(0, NT("function-definition"), NT("declaration")))


@rules.rule("function-definition")
def function_definition():
    return Diagram(
        Sequence(
            Optional(NT("attribute-specifier-sequence")),
            NT("declaration-specifiers"),
            NT("declarator"),
            NT("function-body"),
        )
    )


@rules.rule("function-body")
def function_body():
    return Diagram(NT("compound-statement"))
