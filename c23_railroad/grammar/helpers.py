"""
Shorthands shared by the grammar modules.

Left-recursive productions are written in repetition form so they can be drawn:
``expr: expr op term | term`` becomes ``term (op term)*``.
"""

from typing import Iterable

from ..diagrams.nodes import NT, T, Choice, Node, Sequence, ZeroOrMore


def chain(base: str, ops: Iterable[str]) -> Sequence:
    """
    One binary-operator precedence level: ``base ( (op1 | op2 | ...) base )*``.

    The first operand binds first, so the level reads left-associatively.
    """
    operators = [T(op) for op in ops]
    if not operators:
        raise ValueError(f"chain('{base}') needs at least one operator")
    return Sequence(
        NT(base),
        ZeroOrMore(Sequence(Choice(0, *operators), NT(base))),
    )


def separated(item: Node, separator: str = ",") -> Sequence:
    """``item ( separator item )*``"""
    return Sequence(item, ZeroOrMore(Sequence(T(separator), item)))


def keyword_call(keyword: str, argument: Node) -> Sequence:
    """``keyword ( argument )``, e.g. ``_Atomic ( type-name )``."""
    return Sequence(T(keyword), T("("), argument, T(")"))


def directive(name: str, *rest: Node) -> Sequence:
    """A preprocessing directive line: ``# name rest...``."""
    return Sequence(T("#"), T(name), *rest)
