"""
Adapter over the railroad-diagrams drawing library.

The library exports some primitives as classes (``Sequence``, ``Choice``,
``Terminal``) and others as factory functions (``Optional``, ``ZeroOrMore``),
and which is which has changed between releases. Releases also differ in the
keywords the leaf primitives accept: ``href`` and ``title`` arrived before
``cls``. ``DiagramBuilder`` gives the rest of the package one calling
convention for all of them.
"""

import logging
import re

import railroad

logger = logging.getLogger(__name__)

_UNEXPECTED_KEYWORD = re.compile(r"unexpected keyword argument '(\w+)'")


def call_or_construct(ctor, *args, **kwargs):
    """
    Invoke a primitive whether it is a class or a factory function.

    A ``TypeError`` that names a supplied keyword the primitive does not accept
    is retried without that keyword. Any other failure propagates unchanged.
    """
    while True:
        try:
            return ctor(*args, **kwargs)
        except TypeError as exc:
            match = _UNEXPECTED_KEYWORD.search(str(exc))
            if match is None or match.group(1) not in kwargs:
                raise
            rejected = match.group(1)
        logger.debug(f"{getattr(ctor, '__name__', ctor)} does not accept '{rejected}', retrying without it")
        kwargs = {k: v for k, v in kwargs.items() if k != rejected}


class DiagramBuilder:
    """One method per railroad primitive, dispatched through ``build``."""

    def __init__(self, backend=railroad):
        """
        Args:
            backend: Module (or namespace) exporting the railroad primitives
        """
        self.backend = backend

    def build(self, kind: str, *args, **kwargs):
        """Construct primitive ``kind`` (e.g. ``"Sequence"``) from the backend."""
        try:
            ctor = getattr(self.backend, kind)
        except AttributeError:
            raise AttributeError(
                f"Diagram backend {getattr(self.backend, '__name__', self.backend)!r} "
                f"has no primitive '{kind}'"
            ) from None
        return call_or_construct(ctor, *args, **kwargs)

    def diagram(self, *items):
        return self.build("Diagram", *items)

    def sequence(self, *items):
        return self.build("Sequence", *items)

    def stack(self, *items):
        return self.build("Stack", *items)

    def choice(self, default: int, *items):
        return self.build("Choice", default, *items)

    def optional(self, item, skip: bool = False):
        return self.build("Optional", item, skip)

    def one_or_more(self, item, repeat=None):
        return self.build("OneOrMore", item, repeat)

    def zero_or_more(self, item, repeat=None, skip: bool = False):
        return self.build("ZeroOrMore", item, repeat, skip)

    def terminal(self, text: str, **kwargs):
        return self.build("Terminal", text, **kwargs)

    def non_terminal(self, text: str, **kwargs):
        return self.build("NonTerminal", text, **kwargs)

    def comment(self, text: str, **kwargs):
        return self.build("Comment", text, **kwargs)

    def skip(self):
        return self.build("Skip")
