"""
A.4 Preprocessing directives (condensed).
"""

from ..diagrams.nodes import NT, T, Choice, Diagram, OneOrMore, Optional, Sequence
from .helpers import directive
from .registry import RuleSet

rules = RuleSet("preprocessor")

NEW_LINE = NT("new-line")


def _conditional_group(if_name: str, ifdef_name: str, ifndef_name: str):
    """The three spellings shared by if-group and elif-group."""
    return Choice(0,
                  directive(if_name, NT("constant-expression"), NEW_LINE, Optional(NT("group"))),
                  directive(ifdef_name, NT("identifier"), NEW_LINE, Optional(NT("group"))),
                  directive(ifndef_name, NT("identifier"), NEW_LINE, Optional(NT("group"))))


@rules.rule("preprocessing-file")
def preprocessing_file():
    return Diagram(Optional(NT("group")))


@rules.rule("group")
def group():
    return Diagram(OneOrMore(NT("group-part")))


@rules.rule("group-part")
def group_part():
    return Diagram(
        Choice(0,
               NT("if-section"),
               NT("control-line"),
               NT("text-line"),
               Sequence(T("#"), NT("non-directive")))
    )


@rules.rule("if-section")
def if_section():
    return Diagram(
        Sequence(
            NT("if-group"),
            Optional(NT("elif-groups")),
            Optional(NT("else-group")),
            NT("endif-line"),
        )
    )


@rules.rule("if-group")
def if_group():
    return Diagram(_conditional_group("if", "ifdef", "ifndef"))


@rules.rule("elif-groups")
def elif_groups():
    return Diagram(OneOrMore(NT("elif-group")))


@rules.rule("elif-group")
def elif_group():
    return Diagram(_conditional_group("elif", "elifdef", "elifndef"))


@rules.rule("else-group")
def else_group():
    return Diagram(directive("else", NEW_LINE, Optional(NT("group"))))


@rules.rule("endif-line")
def endif_line():
    return Diagram(directive("endif", NEW_LINE))


@rules.rule("control-line")
def control_line():
    return Diagram(
        Choice(0,
               directive("include", NT("pp-tokens"), NEW_LINE),
               directive("embed", NT("pp-tokens"), NEW_LINE),
               directive("define", NT("identifier"), NT("replacement-list"), NEW_LINE),
               directive("undef", NT("identifier"), NEW_LINE),
               directive("line", NT("pp-tokens"), NEW_LINE),
               directive("error", Optional(NT("pp-tokens")), NEW_LINE),
               directive("warning", Optional(NT("pp-tokens")), NEW_LINE),
               directive("pragma", Optional(NT("pp-tokens")), NEW_LINE),
               Sequence(T("#"), NEW_LINE))
    )


@rules.rule("text-line")
def text_line():
    return Diagram(Sequence(Optional(NT("pp-tokens")), NEW_LINE))


@rules.rule("non-directive")
def non_directive():
    return Diagram(Sequence(NT("pp-tokens"), NEW_LINE))


@rules.rule("pp-tokens")
def pp_tokens():
    return Diagram(OneOrMore(NT("preprocessing-token")))


@rules.rule("replacement-list")
def replacement_list():
    return Diagram(Optional(NT("pp-tokens")))
