"""
Diagram descriptions and the adapter over the railroad-diagrams library.
"""

from .builder import DiagramBuilder
from .matching import accepts
from .nodes import (
    Choice,
    Comment,
    Diagram,
    NonTerminal,
    NT,
    OneOrMore,
    Optional,
    Sequence,
    Skip,
    Stack,
    T,
    Terminal,
    ZeroOrMore,
)

__all__ = [
    "DiagramBuilder",
    "accepts",
    "Choice",
    "Comment",
    "Diagram",
    "NonTerminal",
    "NT",
    "OneOrMore",
    "Optional",
    "Sequence",
    "Skip",
    "Stack",
    "T",
    "Terminal",
    "ZeroOrMore",
]
