"""
Rule registry: grammar rule name -> zero-argument diagram factory.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..diagrams.nodes import Diagram, references

logger = logging.getLogger(__name__)

RuleFactory = Callable[[], Diagram]


class RuleRegistry:
    """
    Mapping from rule name to the factory that describes it.

    Built once at startup and passed to the renderer. Registering a name twice
    replaces the earlier factory (last writer wins).
    """

    def __init__(self):
        self._factories: Dict[str, RuleFactory] = {}

    def register(self, name: str, factory: RuleFactory) -> None:
        if name in self._factories:
            logger.debug(f"Rule '{name}' registered again, replacing previous factory")
        self._factories[name] = factory

    def lookup(self, name: str) -> Optional[RuleFactory]:
        """Return the factory for ``name``, or None if it is not registered."""
        return self._factories.get(name)

    def names(self) -> List[str]:
        return list(self._factories)

    def __contains__(self, name) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self):
        return f"RuleRegistry({len(self)} rules)"


class RuleSet:
    """
    Ordered rule definitions collected by one grammar module.

    Example:
        rules = RuleSet("expressions")

        @rules.rule("expression")
        def expression():
            return Diagram(...)
    """

    def __init__(self, name: str):
        self.name = name
        self.definitions: List[Tuple[str, RuleFactory]] = []

    def rule(self, name: str):
        """Decorator recording ``factory`` under the grammar rule ``name``."""
        def decorator(factory: RuleFactory) -> RuleFactory:
            self.definitions.append((name, factory))
            return factory
        return decorator

    def install(self, registry: RuleRegistry) -> RuleRegistry:
        for name, factory in self.definitions:
            registry.register(name, factory)
        return registry

    def names(self) -> List[str]:
        return [name for name, _ in self.definitions]


def unresolved_references(registry: RuleRegistry) -> Dict[str, List[str]]:
    """
    Names referenced by each rule that have no factory in ``registry``.

    Rules whose references all resolve are left out of the result.
    """
    missing = {}
    for name in registry:
        description = registry.lookup(name)()
        unknown = sorted(ref for ref in references(description) if ref not in registry)
        if unknown:
            missing[name] = unknown
    return missing
