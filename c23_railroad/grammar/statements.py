"""
A.3.3 Statements.
"""

from ..diagrams.nodes import NT, T, Choice, Diagram, OneOrMore, Optional, Sequence
from .registry import RuleSet

rules = RuleSet("statements")

ATTRIBUTES = NT("attribute-specifier-sequence")


def _controlled(keyword: str, *tail):
    """``keyword ( expression ) tail...``"""
    return Sequence(T(keyword), T("("), NT("expression"), T(")"), *tail)


@rules.rule("statement")
def statement():
    return Diagram(Choice(0, NT("labeled-statement"), NT("unlabeled-statement")))


@rules.rule("label")
def label():
    return Diagram(
        Choice(0,
               Sequence(Optional(ATTRIBUTES), NT("identifier"), T(":")),
               Sequence(Optional(ATTRIBUTES), T("case"), NT("constant-expression"), T(":")),
               Sequence(Optional(ATTRIBUTES), T("default"), T(":")))
    )


@rules.rule("labeled-statement")
def labeled_statement():
    return Diagram(Sequence(NT("label"), NT("statement")))


@rules.rule("unlabeled-statement")
def unlabeled_statement():
    return Diagram(
        Choice(0,
               NT("expression-statement"),
               Sequence(Optional(ATTRIBUTES), NT("primary-block")),
               Sequence(Optional(ATTRIBUTES), NT("jump-statement")))
    )


@rules.rule("primary-block")
def primary_block():
    return Diagram(
        Choice(0, NT("compound-statement"), NT("selection-statement"), NT("iteration-statement"))
    )


@rules.rule("compound-statement")
def compound_statement():
    return Diagram(Sequence(T("{"), Optional(NT("block-item-list")), T("}")))


@rules.rule("block-item-list")
def block_item_list():
    return Diagram(OneOrMore(NT("block-item")))


@rules.rule("block-item")
def block_item():
    return Diagram(Choice(0, NT("declaration"), NT("unlabeled-statement"), NT("label")))


@rules.rule("expression-statement")
def expression_statement():
    return Diagram(
        Choice(0,
               Sequence(Optional(NT("expression")), T(";")),
               Sequence(ATTRIBUTES, NT("expression"), T(";")))
    )


@rules.rule("selection-statement")
def selection_statement():
    return Diagram(
        Choice(0,
               _controlled("if", NT("secondary-block")),
               _controlled("if", NT("secondary-block"), T("else"), NT("secondary-block")),
               _controlled("switch", NT("secondary-block")))
    )


@rules.rule("iteration-statement")
def iteration_statement():
    optional_expression = Optional(NT("expression"))
    return Diagram(
        Choice(0,
               _controlled("while", NT("secondary-block")),
               Sequence(T("do"), NT("secondary-block"), _controlled("while"), T(";")),
               Sequence(T("for"), T("("), optional_expression, T(";"), optional_expression, T(";"),
                        optional_expression, T(")"), NT("secondary-block")),
               Sequence(T("for"), T("("), NT("declaration"), optional_expression, T(";"),
                        optional_expression, T(")"), NT("secondary-block")))
    )


@rules.rule("jump-statement")
def jump_statement():
    return Diagram(
        Choice(0,
               Sequence(T("goto"), NT("identifier"), T(";")),
               Sequence(T("continue"), T(";")),
               Sequence(T("break"), T(";")),
               Sequence(T("return"), Optional(NT("expression")), T(";")))
    )
