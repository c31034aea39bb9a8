"""
Path matching over diagram descriptions.

A symbol string is accepted by a description when it spells out one complete
path through the diagram. Terminals match their text and non-terminals match
their rule name; references are not expanded.
"""

from typing import FrozenSet, Sequence as SymbolSeq

from .nodes import (
    Choice,
    Comment,
    Diagram,
    Node,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Skip,
    Stack,
    Terminal,
    ZeroOrMore,
)


def accepts(node: Node, symbols: SymbolSeq[str]) -> bool:
    """Return True if ``symbols`` traces a complete path through ``node``."""
    symbols = tuple(symbols)
    return len(symbols) in _ends(node, symbols, 0)


def _ends(node: Node, symbols, start: int) -> FrozenSet[int]:
    """Positions reachable after matching ``node`` from ``start``."""
    if isinstance(node, Terminal):
        return _leaf(node.text, symbols, start)
    if isinstance(node, NonTerminal):
        return _leaf(node.name, symbols, start)
    if isinstance(node, (Comment, Skip)):
        return frozenset((start,))
    if isinstance(node, (Sequence, Stack, Diagram)):
        positions = frozenset((start,))
        for item in node.items:
            positions = _ends_from(item, symbols, positions)
            if not positions:
                break
        return positions
    if isinstance(node, Choice):
        return _ends_from_each(node.items, symbols, start)
    if isinstance(node, Optional):
        return frozenset((start,)) | _ends(node.item, symbols, start)
    if isinstance(node, OneOrMore):
        return _repeat(node.item, node.repeat, symbols, start)
    if isinstance(node, ZeroOrMore):
        return frozenset((start,)) | _repeat(node.item, node.repeat, symbols, start)
    raise TypeError(f"Not a diagram node: {node!r}")


def _leaf(text: str, symbols, start: int) -> FrozenSet[int]:
    if start < len(symbols) and symbols[start] == text:
        return frozenset((start + 1,))
    return frozenset()


def _ends_from(node: Node, symbols, positions) -> FrozenSet[int]:
    result = set()
    for position in positions:
        result |= _ends(node, symbols, position)
    return frozenset(result)


def _ends_from_each(items, symbols, start: int) -> FrozenSet[int]:
    result = set()
    for item in items:
        result |= _ends(item, symbols, start)
    return frozenset(result)


def _repeat(item: Node, repeat, symbols, start: int) -> FrozenSet[int]:
    # Positions are bounded by len(symbols), so the loop reaches a fixpoint.
    reached = set()
    frontier = set(_ends(item, symbols, start))
    while frontier:
        reached |= frontier
        loop_back = frontier
        if repeat is not None:
            loop_back = _ends_from(repeat, symbols, frontier)
        frontier = set(_ends_from(item, symbols, loop_back)) - reached
    return frozenset(reached)
