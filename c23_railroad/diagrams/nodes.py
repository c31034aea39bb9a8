"""
Diagram descriptions: an immutable tree of railroad primitives.

Descriptions are plain data. Non-terminal references carry only a rule name and
are resolved against a registry when the diagram is rendered, so rules may refer
to rules that are defined later (or never).
"""

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class Terminal:
    """A literal token, e.g. ``"("`` or ``"sizeof"``."""
    text: str


@dataclass(frozen=True)
class NonTerminal:
    """A reference to another grammar rule by name."""
    name: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class Sequence:
    items: Tuple["Node", ...]

    def __init__(self, *items: "Node"):
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True)
class Stack:
    """A sequence laid out vertically."""
    items: Tuple["Node", ...]

    def __init__(self, *items: "Node"):
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True)
class Choice:
    """Alternatives; ``default`` is the index drawn on the main line."""
    default: int
    items: Tuple["Node", ...]

    def __init__(self, default: int, *items: "Node"):
        if not items:
            raise ValueError("Choice needs at least one alternative")
        if not 0 <= default < len(items):
            raise ValueError(f"Choice default {default} out of range for {len(items)} items")
        object.__setattr__(self, "default", default)
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True)
class Optional:
    item: "Node"
    skip: bool = False


@dataclass(frozen=True)
class OneOrMore:
    """``item`` repeated; ``repeat`` is drawn on the loop-back path between repetitions."""
    item: "Node"
    repeat: Union["Node", None] = None


@dataclass(frozen=True)
class ZeroOrMore:
    item: "Node"
    repeat: Union["Node", None] = None
    skip: bool = False


@dataclass(frozen=True)
class Diagram:
    """Root of a description."""
    items: Tuple["Node", ...]

    def __init__(self, *items: "Node"):
        object.__setattr__(self, "items", tuple(items))


Node = Union[
    Terminal, NonTerminal, Comment, Skip, Sequence, Stack,
    Choice, Optional, OneOrMore, ZeroOrMore, Diagram,
]

NODE_TYPES = (
    Terminal, NonTerminal, Comment, Skip, Sequence, Stack,
    Choice, Optional, OneOrMore, ZeroOrMore, Diagram,
)


def T(text: str) -> Terminal:
    return Terminal(text)


def NT(name: str) -> NonTerminal:
    return NonTerminal(name)


def children(node: Node) -> Tuple[Node, ...]:
    """Direct children of a node, in drawing order."""
    if isinstance(node, (Sequence, Stack, Choice, Diagram)):
        return node.items
    if isinstance(node, Optional):
        return (node.item,)
    if isinstance(node, (OneOrMore, ZeroOrMore)):
        if node.repeat is None:
            return (node.item,)
        return (node.item, node.repeat)
    return ()


def walk(node: Node) -> Iterator[Node]:
    """Depth-first, pre-order traversal."""
    yield node
    for child in children(node):
        yield from walk(child)


def references(node: Node) -> Tuple[str, ...]:
    """Rule names referenced by ``node``, first occurrence order, without duplicates."""
    seen = {}
    for item in walk(node):
        if isinstance(item, NonTerminal):
            seen.setdefault(item.name, None)
    return tuple(seen)


def terminals(node: Node) -> Tuple[str, ...]:
    """Literal token texts in ``node``, first occurrence order, without duplicates."""
    seen = {}
    for item in walk(node):
        if isinstance(item, Terminal):
            seen.setdefault(item.text, None)
    return tuple(seen)
