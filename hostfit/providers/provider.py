"""
Provider: base class for platform-specific resource implementations.

A provider class declares where it can work (confines), which external
commands it drives (commands), where it is the preferred choice
(defaultfor) and which optional features it supports. Instances of a
provider manage one resource for one management cycle.
"""

import logging
from typing import Any, Mapping

from hostfit.context import HostfitContext, get_context
from hostfit.errors import DevError, MissingCommandError, NoIdentityError, NoSuchCommandError
from hostfit.providers.commands import declare_commands
from hostfit.providers.confine import SuitabilityReport, check_suitability
from hostfit.providers.defaults import matches_defaults
from hostfit.providers.features import satisfies, supports_parameter
from hostfit.providers.properties import PropertyAccessor, build_accessors
from hostfit.providers.registry import EXISTS, CapabilityRegistry
from hostfit.sentinels import ABSENT, MISSING

logger = logging.getLogger(__name__)


def _merge(mapping: Mapping[str, Any] | None, kwargs: dict[str, Any]) -> dict[str, Any]:
    merged = dict(mapping or {})
    merged.update(kwargs)
    return merged


class Provider:
    """
    Base class for providers.

    Each subclass gets its own CapabilityRegistry. A subclass of another
    provider inherits that provider's commands through the registry's
    parent chain; confines, defaults and features are never inherited.

    Example:
        @package.provide("dpkg", commands={"dpkg": "dpkg", "dpkg_query": "dpkg-query"})
        class Dpkg(Provider):
            def query(self):
                return self.dpkg_query("-W", self.name)

        @package.provide("apt", commands={"apt_get": "apt-get"},
                         defaultfor={"osfamily": "debian"})
        class Apt(Dpkg):
            def install(self):
                self.apt_get("-q", "-y", "install", self.name)
    """

    provider_name: str = "provider"
    """Provider name; set from the class name or by ResourceType.provide()"""

    resource_type: Any = None
    """Owning ResourceType, None while unattached"""

    resource: Any = None
    """Resource managed by this instance"""

    _registry: CapabilityRegistry = CapabilityRegistry(name="provider")
    _accessors: dict[str, PropertyAccessor] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        name = cls.__dict__.get("provider_name") or cls.__name__.lower()
        parent = None
        for base in cls.__mro__[1:]:
            if issubclass(base, Provider) and base is not Provider:
                parent = base._registry
                break
        cls.provider_name = name
        cls._registry = CapabilityRegistry(name=name, parent=parent)
        cls._accessors = {}

    # Collaborators and registry

    @classmethod
    def context(cls) -> HostfitContext:
        return get_context()

    @classmethod
    def registry(cls) -> CapabilityRegistry:
        return cls._registry

    @classmethod
    def source_tag(cls) -> str:
        """Tag used to avoid reading the same data source twice."""
        return cls._registry.source_tag

    @classmethod
    def describe(cls) -> str:
        if cls.resource_type is not None:
            return f"{cls.resource_type.name} provider {cls.provider_name}"
        return f"unattached provider {cls.provider_name}"

    # Confinement

    @classmethod
    def confine(cls, checks: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """
        Restrict where this provider is suitable.

        Keys are "exists", "true", "false" or a fact name. Repeated
        declarations of the same kind add to earlier ones.

        Example:
            Apt.confine(operatingsystem=["debian", "ubuntu"])
            Apt.confine(exists="/etc/apt/sources.list")
        """
        for kind, values in _merge(checks, kwargs).items():
            cls._registry.add_confine(kind, values)

    @classmethod
    def confines(cls) -> dict[str, list[Any]]:
        return {kind: list(values) for kind, values in cls._registry.confines.items()}

    @classmethod
    def suitable(cls, short: bool = True) -> "bool | SuitabilityReport":
        """
        Check whether every confine holds on this host.

        Args:
            short: Return a bool as soon as the answer is known. Pass False
                to get a SuitabilityReport of every failing confine.
        """
        return check_suitability(cls._registry.confines, cls.context().facts, short=short)

    # Commands

    @classmethod
    def optional_commands(cls, commands: Mapping[str, str] | None = None, **kwargs: str) -> None:
        """Declare commands whose absence only disables those commands."""
        declare_commands(cls, _merge(commands, kwargs))

    @classmethod
    def commands(cls, commands: Mapping[str, str] | None = None, **kwargs: str) -> None:
        """Declare commands the provider cannot work without."""

        def require(name: str, path: str | None) -> None:
            cls._registry.add_confine(EXISTS, path)

        declare_commands(cls, _merge(commands, kwargs), on_resolved=require)

    @classmethod
    def command(cls, name: str) -> str | None:
        """
        Return the resolved path of a command.

        Returns:
            Absolute path, or None if the command's binary is missing

        Raises:
            NoSuchCommandError: If neither this provider nor an ancestor
                declares the command
        """
        path = cls._registry.lookup_command(str(name))
        if path is None:
            raise NoSuchCommandError(str(name), cls.provider_name)
        if path is MISSING:
            return None
        return path

    @classmethod
    def run_command(cls, name: str, *args: Any) -> Any:
        """
        Run a declared command through the active executor.

        Raises:
            NoSuchCommandError: If the command was never declared
            MissingCommandError: If its binary was not found
            ExecutionFailure: Propagated from the executor
        """
        path = cls.command(name)
        if path is None:
            raise MissingCommandError(str(name))
        return cls.context().executor.run([path, *args])

    # Defaults

    @classmethod
    def defaultfor(cls, facts: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """
        Declare the platforms this provider is preferred on.

        Example:
            Yum.defaultfor(osfamily="redhat", operatingsystemmajrelease=["7", "8"])
        """
        for fact, accepted in _merge(facts, kwargs).items():
            cls._registry.add_default(fact, accepted)

    @classmethod
    def defaultnum(cls) -> int:
        return len(cls._registry.defaults)

    @classmethod
    def is_default(cls) -> bool:
        return matches_defaults(cls._registry.defaults, cls.context().facts)

    # Features

    @classmethod
    def has_features(cls, *names: str) -> None:
        known = cls.resource_type.features() if cls.resource_type is not None else None
        for name in names:
            if known is not None and name not in known:
                raise DevError(f"{cls.describe()} declares unknown feature {name}")
            cls._registry.features.add(name)

    has_feature = has_features

    @classmethod
    def features(cls) -> set[str]:
        return set(cls._registry.features)

    @classmethod
    def satisfies(cls, *features: str) -> bool:
        return satisfies(cls._registry.features, features)

    @classmethod
    def supports_parameter(cls, param: Any) -> bool:
        return supports_parameter(cls, param)

    # Resource properties

    @classmethod
    def mk_resource_methods(cls) -> dict[str, PropertyAccessor]:
        """
        Generate accessors for every property and parameter of the type.

        Each accessor reads and writes the instance's property hash.
        """
        if cls.resource_type is None:
            raise DevError(f"Cannot generate resource methods for {cls.describe()}")
        names = cls.resource_type.valid_properties() + cls.resource_type.parameters()
        cls._accessors = build_accessors(cls, names)
        return dict(cls._accessors)

    @classmethod
    def accessors(cls) -> dict[str, PropertyAccessor]:
        return dict(cls._accessors)

    @classmethod
    def instances(cls) -> list["Provider"]:
        """Return a provider instance for every existing resource on the host."""
        raise DevError(f"Provider {cls.provider_name} has not defined the 'instances' class method")

    # Instance behaviour

    def __init__(self, resource: Any = None):
        """
        Create a provider instance.

        Args:
            resource: The resource to manage, or a mapping of already
                known property values (used when prefetching instances)
        """
        if isinstance(resource, Mapping):
            self.property_hash: dict[str, Any] = dict(resource)
        else:
            self.property_hash = {}
            if resource is not None:
                self.resource = resource

    @property
    def name(self) -> Any:
        if "name" in self.property_hash:
            return self.property_hash["name"]
        if self.resource is not None:
            return self.resource.name
        raise NoIdentityError()

    def get(self, attr: str) -> Any:
        return self.property_hash.get(str(attr), ABSENT)

    def set(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Record several current values at once."""
        for attr, value in _merge(values, kwargs).items():
            self.property_hash[str(attr)] = value

    def __getitem__(self, attr: str) -> Any:
        return self.get(attr)

    def __setitem__(self, attr: str, value: Any) -> None:
        self.property_hash[str(attr)] = value

    def clear(self) -> None:
        """Drop the resource reference so the resource graph can be collected."""
        self.resource = None

    def __str__(self) -> str:
        resource = "" if self.resource is None else self.resource
        return f"{resource}(provider={self.provider_name})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider='{self.provider_name}', properties={self.property_hash!r})"
