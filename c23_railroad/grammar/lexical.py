"""
A.2 Lexical grammar (condensed).

Character-level rules (keyword, hex-quad, identifier-start, ...) are left as
unresolved references.
"""

from ..diagrams.nodes import NT, T, Choice, Diagram, Sequence, ZeroOrMore
from .registry import RuleSet

rules = RuleSet("lexical")


@rules.rule("token")
def token():
    return Diagram(
        Choice(0,
               NT("keyword"),
               NT("identifier"),
               NT("constant"),
               NT("string-literal"),
               NT("punctuator"))
    )


@rules.rule("preprocessing-token")
def preprocessing_token():
    return Diagram(
        Choice(0,
               NT("header-name"),
               NT("identifier"),
               NT("pp-number"),
               NT("character-constant"),
               NT("string-literal"),
               NT("punctuator"),
               NT("universal-character-name"),
               NT("non-white-space-character"))
    )


@rules.rule("identifier")
def identifier():
    """identifier-start identifier-continue*"""
    return Diagram(
        Sequence(NT("identifier-start"), ZeroOrMore(NT("identifier-continue")))
    )


@rules.rule("universal-character-name")
def universal_character_name():
    return Diagram(
        Choice(0,
               Sequence(T("\\u"), NT("hex-quad")),
               Sequence(T("\\U"), NT("hex-quad"), NT("hex-quad")))
    )


@rules.rule("constant")
def constant():
    return Diagram(
        Choice(0,
               NT("integer-constant"),
               NT("floating-constant"),
               NT("enumeration-constant"),
               NT("character-constant"),
               NT("predefined-constant"))
    )
