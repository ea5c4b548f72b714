"""
ResourceType: the schema of an abstract resource and its providers.

A resource type declares which properties and parameters a resource has,
which optional features exist, and which provider classes implement it.
Providers register themselves with the provide() decorator.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from hostfit.errors import DevError, HostfitError
from hostfit.types.attributes import Attribute, Feature, Parameter, Property, as_names

if TYPE_CHECKING:
    from hostfit.providers.provider import Provider
    from hostfit.types.resource import Resource

logger = logging.getLogger(__name__)


class ResourceType:
    """
    Schema for one kind of resource, e.g. "package" or "service".

    Example:
        package = ResourceType("package")
        package.feature("versionable", "Can install a specific version.")
        package.newproperty("ensure")
        package.newproperty("version", required_features="versionable")
        package.newparam("name")

        @package.provide("apt", commands={"apt_get": "apt-get"},
                         defaultfor={"osfamily": "debian"},
                         features=["versionable"])
        class Apt(Provider):
            ...

        package.default_provider()  # Apt on a Debian host
    """

    def __init__(self, name: str):
        self.name = name
        self._properties: dict[str, Property] = {}
        self._parameters: dict[str, Parameter] = {}
        self._features: dict[str, Feature] = {}
        self._providers: dict[str, "type[Provider]"] = {}

    def feature(self, name: str, doc: str = "") -> Feature:
        """Declare an optional feature providers may support."""
        feature = Feature(name=name, doc=doc)
        self._features[name] = feature
        return feature

    def newproperty(
        self,
        name: str,
        doc: str = "",
        required_features: str | Iterable[str] | None = None,
    ) -> Property:
        """Declare a property of this resource type."""
        prop = Property(name=name, doc=doc, required_features=as_names(required_features))
        self._check_features(prop)
        self._properties[name] = prop
        return prop

    def newparam(
        self,
        name: str,
        doc: str = "",
        required_features: str | Iterable[str] | None = None,
    ) -> Parameter:
        """Declare a parameter of this resource type."""
        param = Parameter(name=name, doc=doc, required_features=as_names(required_features))
        self._check_features(param)
        self._parameters[name] = param
        return param

    def _check_features(self, attr: Attribute) -> None:
        for feature in attr.required_features:
            if feature not in self._features:
                raise DevError(
                    f"Attribute '{attr.name}' of {self.name} requires undeclared feature '{feature}'"
                )

    def valid_properties(self) -> list[str]:
        return list(self._properties)

    def parameters(self) -> list[str]:
        return list(self._parameters)

    def features(self) -> dict[str, Feature]:
        return dict(self._features)

    def attr_class(self, name: str) -> Attribute | None:
        """Return the property or parameter called name, or None."""
        name = str(name)
        return self._properties.get(name) or self._parameters.get(name)

    def provide(
        self,
        name: str,
        *,
        source: str | None = None,
        confine: Mapping[str, Any] | None = None,
        commands: Mapping[str, str] | None = None,
        optional_commands: Mapping[str, str] | None = None,
        defaultfor: Mapping[str, Any] | None = None,
        features: Iterable[str] | None = None,
        resource_methods: bool = False,
    ) -> Callable[["type[Provider]"], "type[Provider]"]:
        """
        Class decorator registering a provider with this resource type.

        Declarations are applied in argument order, once, when the class is
        decorated.

        Args:
            name: Provider name, unique within this resource type
            source: Data-source tag shared with sibling providers
            confine: Check kind -> expected value(s)
            commands: Mandatory commands (confine the provider on existence)
            optional_commands: Commands the provider can live without
            defaultfor: Fact name -> accepted value(s)
            features: Features the provider supports
            resource_methods: Generate property accessors for every
                property and parameter of this type

        Returns:
            Decorator returning the class unchanged apart from registration
        """

        def decorator(cls: "type[Provider]") -> "type[Provider]":
            from hostfit.providers.provider import Provider

            if not (isinstance(cls, type) and issubclass(cls, Provider)):
                raise TypeError(f"Expected a Provider subclass, got {cls!r}")
            if name in self._providers and self._providers[name] is not cls:
                raise DevError(f"Provider {name} is already registered for {self.name}")

            cls.provider_name = name
            cls.resource_type = self
            registry = cls.registry()
            registry.name = name
            if source is not None:
                registry.source = source

            if confine:
                cls.confine(confine)
            if commands:
                cls.commands(commands)
            if optional_commands:
                cls.optional_commands(optional_commands)
            if defaultfor:
                cls.defaultfor(defaultfor)
            if features:
                cls.has_features(*features)
            if resource_methods:
                cls.mk_resource_methods()

            self._providers[name] = cls
            logger.debug("Registered %s", cls.describe())
            return cls

        return decorator

    def providers(self) -> list["type[Provider]"]:
        """All registered providers, in registration order."""
        return list(self._providers.values())

    def provider(self, name: str) -> "type[Provider]":
        try:
            return self._providers[name]
        except KeyError:
            raise DevError(f"Could not find provider {name} for {self.name}") from None

    def suitable_providers(self) -> list["type[Provider]"]:
        return [p for p in self._providers.values() if p.suitable()]

    def default_provider(self) -> "type[Provider] | None":
        """
        Pick the provider to use on this host.

        Among suitable defaults the one with the most default rules wins,
        earlier registration breaking ties. Without any suitable default,
        the first suitable provider is used.
        """
        suitable = self.suitable_providers()
        if not suitable:
            return None

        defaults = [p for p in suitable if p.is_default()]
        if not defaults:
            return suitable[0]

        best = max(p.defaultnum() for p in defaults)
        candidates = [p for p in defaults if p.defaultnum() == best]
        if len(candidates) > 1:
            logger.warning(
                "Found multiple default providers for %s: %s; using %s",
                self.name,
                ", ".join(p.provider_name for p in candidates),
                candidates[0].provider_name,
            )
        return candidates[0]

    def provider_for(self, resource: "Resource", name: str | None = None) -> "Provider":
        """
        Instantiate the provider that will manage a resource.

        Args:
            resource: The resource to manage
            name: Provider name to force; otherwise the default provider

        Raises:
            DevError: If the named provider does not exist
            HostfitError: If no provider is suitable on this host
        """
        if name is not None:
            cls = self.provider(name)
        else:
            cls = self.default_provider()
            if cls is None:
                raise HostfitError(f"No suitable provider for {self.name} on this host")
        return cls(resource)

    def __repr__(self) -> str:
        return f"ResourceType(name='{self.name}', providers={list(self._providers)})"
