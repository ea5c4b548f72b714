"""
CapabilityRegistry: the declared capabilities of one provider class.

Every Provider subclass owns exactly one registry record. Records form a
single parent chain mirroring class inheritance; only command lookup
walks that chain; confines, defaults and features belong to one class.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator

from hostfit.sentinels import Sentinel

# Check kinds the suitability evaluator handles itself; any other kind
# names a fact.
EXISTS = "exists"
TRUE = "true"
FALSE = "false"


def as_batch(values: Any) -> list[Any]:
    """Turn a declared value into a list of values to append."""
    if isinstance(values, (list, tuple, set, frozenset)):
        return list(values)
    return [values]


@dataclass
class CapabilityRegistry:
    """
    Type-level state of a provider.

    Populated once while the provider is registered, read-only afterwards.
    """

    name: str
    """Provider name, unique within a resource type"""

    parent: "CapabilityRegistry | None" = None
    """Registry of the provider this one inherits commands from"""

    source: str | None = None
    """Shared data-source tag; None means the provider name"""

    confines: dict[str, list[Any]] = field(default_factory=dict)
    """Check kind -> expected values, in declaration order"""

    commands: dict[str, "str | Sentinel"] = field(default_factory=dict)
    """Command name -> absolute path or MISSING"""

    original_commands: dict[str, str] = field(default_factory=dict)
    """Command name -> path or name as originally declared"""

    defaults: dict[str, Any] = field(default_factory=dict)
    """Fact name -> accepted value or list of values"""

    features: set[str] = field(default_factory=set)
    """Declared feature names"""

    def add_confine(self, kind: str, values: Any) -> None:
        """Append values to a check kind; never replaces earlier ones."""
        self.confines.setdefault(str(kind), []).extend(as_batch(values))

    def add_default(self, fact: str, accepted: Any) -> None:
        self.defaults[str(fact)] = accepted

    def chain(self) -> Iterator["CapabilityRegistry"]:
        """Yield this registry and then each ancestor."""
        registry: CapabilityRegistry | None = self
        while registry is not None:
            yield registry
            registry = registry.parent

    def lookup_command(self, name: str) -> "str | Sentinel | None":
        """
        Find a command binding along the parent chain.

        Returns:
            The resolved path, MISSING, or None if no registry declares it
        """
        for registry in self.chain():
            if name in registry.commands:
                return registry.commands[name]
        return None

    @property
    def source_tag(self) -> str:
        return self.source or self.name
