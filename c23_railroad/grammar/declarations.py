"""
A.3.2 Declarations (condensed where needed).

Declarators are drawn as a base followed by any number of array or function
suffixes instead of the left-recursive direct-declarator productions.
"""

from ..diagrams.nodes import (
    NT,
    T,
    Choice,
    Comment,
    Diagram,
    OneOrMore,
    Optional,
    Sequence,
    ZeroOrMore,
)
from .helpers import keyword_call, separated
from .registry import RuleSet

rules = RuleSet("declarations")

ATTRIBUTES = NT("attribute-specifier-sequence")


def _array_bracket_contents(*, star_only: bool):
    """The forms allowed between ``[`` and ``]`` of an array declarator."""
    star = Sequence(T("*")) if star_only else Sequence(Optional(NT("type-qualifier-list")), T("*"))
    return Choice(0,
                  Sequence(Optional(NT("type-qualifier-list")), Optional(NT("assignment-expression"))),
                  Sequence(T("static"), Optional(NT("type-qualifier-list")), NT("assignment-expression")),
                  Sequence(NT("type-qualifier-list"), T("static"), NT("assignment-expression")),
                  star)


def _declarator_suffixes(*, star_only: bool):
    array_suffix = Sequence(T("["), _array_bracket_contents(star_only=star_only), T("]"), Optional(ATTRIBUTES))
    function_suffix = Sequence(T("("), Optional(NT("parameter-type-list")), T(")"), Optional(ATTRIBUTES))
    return ZeroOrMore(Choice(0, array_suffix, function_suffix))


@rules.rule("declaration")
def declaration():
    return Diagram(
        Choice(0,
               Sequence(NT("declaration-specifiers"), Optional(NT("init-declarator-list")), T(";")),
               Sequence(ATTRIBUTES, NT("declaration-specifiers"), NT("init-declarator-list"), T(";")),
               NT("static_assert-declaration"),
               NT("attribute-declaration"))
    )


@rules.rule("declaration-specifiers")
def declaration_specifiers():
    return Diagram(
        OneOrMore(
            Sequence(NT("declaration-specifier"), Optional(ATTRIBUTES)),
            Comment("one or more"),
        )
    )


@rules.rule("declaration-specifier")
def declaration_specifier():
    return Diagram(
        Choice(0,
               NT("storage-class-specifier"),
               NT("type-specifier-qualifier"),
               NT("function-specifier"))
    )


@rules.rule("init-declarator-list")
def init_declarator_list():
    return Diagram(separated(NT("init-declarator")))


@rules.rule("init-declarator")
def init_declarator():
    return Diagram(
        Choice(0,
               NT("declarator"),
               Sequence(NT("declarator"), T("="), NT("initializer")))
    )


@rules.rule("storage-class-specifiers")
def storage_class_specifiers():
    return Diagram(OneOrMore(NT("storage-class-specifier")))


@rules.rule("storage-class-specifier")
def storage_class_specifier():
    return Diagram(
        Choice(0,
               T("auto"), T("constexpr"), T("extern"), T("register"),
               T("static"), T("thread_local"), T("typedef"))
    )


@rules.rule("type-specifier-qualifier")
def type_specifier_qualifier():
    return Diagram(
        Choice(0, NT("type-specifier"), NT("type-qualifier"), NT("alignment-specifier"))
    )


@rules.rule("type-specifier")
def type_specifier():
    return Diagram(
        Choice(0,
               T("void"), T("char"), T("short"), T("int"), T("long"),
               T("float"), T("double"), T("signed"), T("unsigned"),
               keyword_call("_BitInt", NT("constant-expression")),
               T("bool"), T("_Complex"),
               T("_Decimal32"), T("_Decimal64"), T("_Decimal128"),
               NT("atomic-type-specifier"),
               NT("struct-or-union-specifier"),
               NT("enum-specifier"),
               NT("typedef-name"),
               NT("typeof-specifier"))
    )


@rules.rule("struct-or-union-specifier")
def struct_or_union_specifier():
    return Diagram(
        Choice(0,
               Sequence(NT("struct-or-union"), Optional(ATTRIBUTES), Optional(NT("identifier")),
                        T("{"), NT("member-declaration-list"), T("}")),
               Sequence(NT("struct-or-union"), Optional(ATTRIBUTES), NT("identifier")))
    )


@rules.rule("struct-or-union")
def struct_or_union():
    return Diagram(Choice(0, T("struct"), T("union")))


@rules.rule("member-declaration-list")
def member_declaration_list():
    return Diagram(OneOrMore(NT("member-declaration")))


@rules.rule("member-declaration")
def member_declaration():
    return Diagram(
        Choice(0,
               Sequence(Optional(ATTRIBUTES), NT("specifier-qualifier-list"),
                        Optional(NT("member-declarator-list")), T(";")),
               NT("static_assert-declaration"))
    )


@rules.rule("specifier-qualifier-list")
def specifier_qualifier_list():
    return Diagram(
        OneOrMore(Sequence(NT("type-specifier-qualifier"), Optional(ATTRIBUTES)))
    )


@rules.rule("member-declarator-list")
def member_declarator_list():
    return Diagram(separated(NT("member-declarator")))


@rules.rule("member-declarator")
def member_declarator():
    return Diagram(
        Choice(0,
               NT("declarator"),
               Sequence(Optional(NT("declarator")), T(":"), NT("constant-expression")))
    )


@rules.rule("enum-specifier")
def enum_specifier():
    head = (T("enum"), Optional(ATTRIBUTES), Optional(NT("identifier")), Optional(NT("enum-type-specifier")))
    return Diagram(
        Choice(0,
               Sequence(*head, T("{"), NT("enumerator-list"), T("}")),
               Sequence(*head, T("{"), NT("enumerator-list"), T(","), T("}")),
               Sequence(T("enum"), NT("identifier"), Optional(NT("enum-type-specifier"))))
    )


@rules.rule("enumerator-list")
def enumerator_list():
    return Diagram(separated(NT("enumerator")))


@rules.rule("enumerator")
def enumerator():
    return Diagram(
        Choice(0,
               Sequence(NT("enumeration-constant"), Optional(ATTRIBUTES)),
               Sequence(NT("enumeration-constant"), Optional(ATTRIBUTES), T("="), NT("constant-expression")))
    )


@rules.rule("enum-type-specifier")
def enum_type_specifier():
    return Diagram(Sequence(T(":"), NT("specifier-qualifier-list")))


@rules.rule("atomic-type-specifier")
def atomic_type_specifier():
    return Diagram(keyword_call("_Atomic", NT("type-name")))


@rules.rule("typeof-specifier")
def typeof_specifier():
    return Diagram(
        Choice(0,
               keyword_call("typeof", NT("typeof-specifier-argument")),
               keyword_call("typeof_unqual", NT("typeof-specifier-argument")))
    )


@rules.rule("typeof-specifier-argument")
def typeof_specifier_argument():
    return Diagram(Choice(0, NT("expression"), NT("type-name")))


@rules.rule("type-qualifier")
def type_qualifier():
    return Diagram(Choice(0, T("const"), T("restrict"), T("volatile"), T("_Atomic")))


@rules.rule("type-qualifier-list")
def type_qualifier_list():
    return Diagram(OneOrMore(NT("type-qualifier")))


@rules.rule("function-specifier")
def function_specifier():
    return Diagram(Choice(0, T("inline"), T("_Noreturn")))


@rules.rule("alignment-specifier")
def alignment_specifier():
    return Diagram(
        Choice(0,
               keyword_call("alignas", NT("type-name")),
               keyword_call("alignas", NT("constant-expression")))
    )


@rules.rule("declarator")
def declarator():
    return Diagram(Sequence(Optional(NT("pointer")), NT("direct-declarator")))


@rules.rule("pointer")
def pointer():
    """( * attribute-specifier-sequence? type-qualifier-list? )+"""
    return Diagram(
        OneOrMore(Sequence(T("*"), Optional(ATTRIBUTES), Optional(NT("type-qualifier-list"))))
    )


@rules.rule("direct-declarator")
def direct_declarator():
    base = Choice(0,
                  Sequence(NT("identifier"), Optional(ATTRIBUTES)),
                  Sequence(T("("), NT("declarator"), T(")")))
    return Diagram(Sequence(base, _declarator_suffixes(star_only=False)))


@rules.rule("parameter-type-list")
def parameter_type_list():
    return Diagram(
        Choice(0,
               NT("parameter-list"),
               Sequence(NT("parameter-list"), T(","), T("...")),
               T("..."))
    )


@rules.rule("parameter-list")
def parameter_list():
    return Diagram(separated(NT("parameter-declaration")))


@rules.rule("parameter-declaration")
def parameter_declaration():
    return Diagram(
        Choice(0,
               Sequence(Optional(ATTRIBUTES), NT("declaration-specifiers"), NT("declarator")),
               Sequence(Optional(ATTRIBUTES), NT("declaration-specifiers"), Optional(NT("abstract-declarator"))))
    )


@rules.rule("type-name")
def type_name():
    return Diagram(Sequence(NT("specifier-qualifier-list"), Optional(NT("abstract-declarator"))))


@rules.rule("abstract-declarator")
def abstract_declarator():
    return Diagram(
        Choice(0,
               NT("pointer"),
               Sequence(Optional(NT("pointer")), NT("direct-abstract-declarator")))
    )


@rules.rule("direct-abstract-declarator")
def direct_abstract_declarator():
    base = Choice(0,
                  Sequence(T("("), NT("abstract-declarator"), T(")")),
                  Comment("or empty base for suffix-only forms"))
    return Diagram(Sequence(base, _declarator_suffixes(star_only=True)))


@rules.rule("braced-initializer")
def braced_initializer():
    return Diagram(
        Choice(0,
               Sequence(T("{"), T("}")),
               Sequence(T("{"), NT("initializer-list"), T("}")),
               Sequence(T("{"), NT("initializer-list"), T(","), T("}")))
    )


@rules.rule("initializer")
def initializer():
    return Diagram(Choice(0, NT("assignment-expression"), NT("braced-initializer")))


@rules.rule("initializer-list")
def initializer_list():
    return Diagram(
        Sequence(
            Optional(NT("designation")),
            NT("initializer"),
            ZeroOrMore(Sequence(T(","), Optional(NT("designation")), NT("initializer"))),
        )
    )


@rules.rule("designation")
def designation():
    return Diagram(Sequence(NT("designator-list"), T("=")))


@rules.rule("designator-list")
def designator_list():
    return Diagram(OneOrMore(NT("designator")))


@rules.rule("designator")
def designator():
    return Diagram(
        Choice(0,
               Sequence(T("["), NT("constant-expression"), T("]")),
               Sequence(T("."), NT("identifier")))
    )
