"""
Command binding: declared command names resolved to executables.

Declaring a command resolves it once, at registration time. A command
that cannot be resolved is still declared; calling it raises
MissingCommandError instead of failing the declaration.
"""

import keyword
import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping

from hostfit.sentinels import MISSING

if TYPE_CHECKING:
    from hostfit.providers.provider import Provider

logger = logging.getLogger(__name__)


class CommandMethod:
    """
    Descriptor exposing a declared command as a callable attribute.

    Works on the class and on instances alike; both forward to
    run_command() on the concrete class, so lookups start at the most
    derived provider.

    Example:
        Apt.commands(apt_get="apt-get")
        Apt.apt_get("update")          # class level
        Apt(resource).apt_get("-q", "install", "nginx")  # instance level
    """

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance: Any, owner: type) -> Callable[..., Any]:
        cls = owner if instance is None else type(instance)
        name = self.name

        def command(*args: Any) -> Any:
            return cls.run_command(name, *args)

        command.__name__ = name
        command.__qualname__ = f"{cls.__name__}.{name}"
        return command

    def __repr__(self) -> str:
        return f"CommandMethod(name='{self.name}')"


def bindable(name: str) -> bool:
    """True when a command name can become a Python attribute."""
    return name.isidentifier() and not keyword.iskeyword(name)


def declare_commands(
    provider: "type[Provider]",
    commands: Mapping[str, str],
    on_resolved: Callable[[str, str | None], None] | None = None,
) -> None:
    """
    Resolve and record a batch of commands on a provider.

    Args:
        provider: Provider class being declared
        commands: Command name -> path or bare executable name
        on_resolved: Called with (name, path) after each command is
            resolved. path is None for a command whose binary was not
            found.
    """
    registry = provider.registry()
    resolver = provider.context().resolver

    for name, path in commands.items():
        name = str(name)
        registry.original_commands[name] = path

        resolved = resolver.resolve(path)
        if resolved:
            registry.commands[name] = resolved
        else:
            logger.debug("Command %s (%s) not found for provider %s", name, path, registry.name)
            registry.commands[name] = MISSING

        if on_resolved is not None:
            on_resolved(name, resolved or None)

        bind_command(provider, name)


def bind_command(provider: type, name: str) -> None:
    """Attach a CommandMethod unless the attribute name is already taken."""
    if not bindable(name):
        return
    if hasattr(provider, name):
        return
    setattr(provider, name, CommandMethod(name))
