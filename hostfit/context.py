"""
Execution context for hostfit providers.

The context holds the collaborators every provider consults: where facts
come from, how command names become paths, and who runs commands.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from hostfit.config.settings import HostfitConfig
from hostfit.execution import BinaryResolver, Executor, PathResolver, SubprocessExecutor
from hostfit.facts import FactSource, HostFacts, LayeredFacts, StaticFacts, YamlFacts


@dataclass
class HostfitContext:
    """
    Collaborators used by providers.

    Tracks the fact source, binary resolver and executor for the current
    process. Tests swap in doubles with use_context().
    """

    facts: FactSource = field(default_factory=HostFacts)
    resolver: BinaryResolver = field(default_factory=PathResolver)
    executor: Executor = field(default_factory=SubprocessExecutor)

    @classmethod
    def from_config(cls, config: HostfitConfig) -> "HostfitContext":
        """
        Build a context from configuration.

        Inline facts win over the facts file, which wins over detected
        host facts.
        """
        layers: list[FactSource] = []
        if config.facts:
            layers.append(StaticFacts(config.facts))
        if config.facts_file:
            layers.append(YamlFacts(config.facts_file))
        if config.use_host_facts:
            layers.append(HostFacts())

        facts: FactSource = layers[0] if len(layers) == 1 else LayeredFacts(*layers)
        return cls(
            facts=facts,
            resolver=PathResolver(config.search_path),
            executor=SubprocessExecutor(timeout=config.command_timeout),
        )


# Global context instance
_context: Optional[HostfitContext] = None


def get_context() -> HostfitContext:
    """Get the current hostfit context."""
    global _context
    if _context is None:
        _context = HostfitContext()
    return _context


def set_context(context: HostfitContext) -> None:
    """Set the global hostfit context."""
    global _context
    _context = context


def reset_context() -> None:
    """Reset the global context."""
    global _context
    _context = HostfitContext()


@contextmanager
def use_context(context: HostfitContext) -> Iterator[HostfitContext]:
    """Temporarily install a context, restoring the previous one on exit."""
    global _context
    previous = _context
    _context = context
    try:
        yield context
    finally:
        _context = previous
