"""
A.3.1 Expressions.

The binary-operator levels from multiplicative-expression up to
logical-OR-expression are built with ``chain``; postfix, unary and cast
expressions are flattened into repetition form.
"""

from ..diagrams.nodes import (
    NT,
    T,
    Choice,
    Diagram,
    Optional,
    Sequence,
    ZeroOrMore,
)
from .helpers import chain, keyword_call, separated
from .registry import RuleSet

rules = RuleSet("expressions")


@rules.rule("primary-expression")
def primary_expression():
    return Diagram(
        Choice(0,
               NT("identifier"),
               NT("constant"),
               NT("string-literal"),
               Sequence(T("("), NT("expression"), T(")")),
               NT("generic-selection"))
    )


@rules.rule("generic-selection")
def generic_selection():
    return Diagram(
        Sequence(
            T("_Generic"),
            T("("),
            NT("assignment-expression"),
            T(","),
            NT("generic-assoc-list"),
            T(")"),
        )
    )


@rules.rule("generic-assoc-list")
def generic_assoc_list():
    return Diagram(separated(NT("generic-association")))


@rules.rule("generic-association")
def generic_association():
    return Diagram(
        Choice(0,
               Sequence(NT("type-name"), T(":"), NT("assignment-expression")),
               Sequence(T("default"), T(":"), NT("assignment-expression")))
    )


@rules.rule("argument-expression-list")
def argument_expression_list():
    return Diagram(separated(NT("assignment-expression")))


@rules.rule("compound-literal")
def compound_literal():
    """( storage-class-specifiers? type-name ) braced-initializer"""
    return Diagram(
        Sequence(
            T("("),
            Optional(NT("storage-class-specifiers")),
            NT("type-name"),
            T(")"),
            NT("braced-initializer"),
        )
    )


@rules.rule("postfix-expression")
def postfix_expression():
    """(primary-expression | compound-literal) postfix-suffix*"""
    suffix = Choice(0,
                    Sequence(T("["), NT("expression"), T("]")),
                    Sequence(T("("), Optional(NT("argument-expression-list")), T(")")),
                    Sequence(T("."), NT("identifier")),
                    Sequence(T("->"), NT("identifier")),
                    T("++"),
                    T("--"))
    return Diagram(
        Sequence(
            Choice(0, NT("primary-expression"), NT("compound-literal")),
            ZeroOrMore(suffix),
        )
    )


@rules.rule("unary-operator")
def unary_operator():
    return Diagram(Choice(0, T("&"), T("*"), T("+"), T("-"), T("~"), T("!")))


@rules.rule("unary-expression")
def unary_expression():
    prefix_ops = ZeroOrMore(Choice(0, T("++"), T("--"), T("sizeof")))
    core = Choice(0,
                  NT("postfix-expression"),
                  Sequence(NT("unary-operator"), NT("cast-expression")))
    return Diagram(
        Choice(0,
               Sequence(prefix_ops, core),
               keyword_call("sizeof", NT("type-name")),
               keyword_call("alignof", NT("type-name")))
    )


@rules.rule("cast-expression")
def cast_expression():
    """( ( type-name ) )* unary-expression"""
    return Diagram(
        Sequence(
            ZeroOrMore(Sequence(T("("), NT("type-name"), T(")"))),
            NT("unary-expression"),
        )
    )


@rules.rule("multiplicative-expression")
def multiplicative_expression():
    return Diagram(chain("cast-expression", ["*", "/", "%"]))


@rules.rule("additive-expression")
def additive_expression():
    return Diagram(chain("multiplicative-expression", ["+", "-"]))


@rules.rule("shift-expression")
def shift_expression():
    return Diagram(chain("additive-expression", ["<<", ">>"]))


@rules.rule("relational-expression")
def relational_expression():
    return Diagram(chain("shift-expression", ["<", ">", "<=", ">="]))


@rules.rule("equality-expression")
def equality_expression():
    return Diagram(chain("relational-expression", ["==", "!="]))


@rules.rule("AND-expression")
def and_expression():
    return Diagram(chain("equality-expression", ["&"]))


@rules.rule("exclusive-OR-expression")
def exclusive_or_expression():
    return Diagram(chain("AND-expression", ["^"]))


@rules.rule("inclusive-OR-expression")
def inclusive_or_expression():
    return Diagram(chain("exclusive-OR-expression", ["|"]))


@rules.rule("logical-AND-expression")
def logical_and_expression():
    return Diagram(chain("inclusive-OR-expression", ["&&"]))


@rules.rule("logical-OR-expression")
def logical_or_expression():
    return Diagram(chain("logical-AND-expression", ["||"]))


@rules.rule("conditional-expression")
def conditional_expression():
    """logical-OR-expression ( ? expression : conditional-expression )?"""
    return Diagram(
        Sequence(
            NT("logical-OR-expression"),
            Optional(Sequence(T("?"), NT("expression"), T(":"), NT("conditional-expression"))),
        )
    )


@rules.rule("assignment-operator")
def assignment_operator():
    return Diagram(
        Choice(0,
               T("="), T("*="), T("/="), T("%="), T("+="), T("-="),
               T("<<="), T(">>="), T("&="), T("^="), T("|="))
    )


@rules.rule("assignment-expression")
def assignment_expression():
    return Diagram(
        Choice(0,
               NT("conditional-expression"),
               Sequence(NT("unary-expression"), NT("assignment-operator"), NT("assignment-expression")))
    )


@rules.rule("expression")
def expression():
    return Diagram(separated(NT("assignment-expression")))


@rules.rule("constant-expression")
def constant_expression():
    return Diagram(NT("conditional-expression"))
