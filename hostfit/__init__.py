"""
hostfit: pick and drive the right implementation of a resource on this host.

A resource type ("package", "service") can be implemented by several
providers (apt, yum, systemd, ...). hostfit decides which providers are
usable here and which one the platform prefers.

Core concepts:
- ResourceType: schema of properties, parameters and features
- Provider: one implementation, declaring confines, commands and defaults
- Facts: named host information providers confine on
- Context: the fact source, binary resolver and executor in use

Example:
    from hostfit import Provider, ResourceType

    package = ResourceType("package")
    package.newproperty("ensure")
    package.newparam("name")

    @package.provide("apt", commands={"apt_get": "apt-get"},
                     defaultfor={"osfamily": "debian"})
    class Apt(Provider):
        def install(self):
            self.apt_get("-q", "-y", "install", self.name)

    provider = package.default_provider()
"""

from hostfit.sentinels import ABSENT, MISSING
from hostfit.errors import (
    HostfitError,
    DevError,
    NoSuchCommandError,
    InvalidParameterError,
    NoIdentityError,
    MissingCommandError,
    ExecutionFailure,
    ConfigError,
)
from hostfit.context import (
    HostfitContext,
    get_context,
    set_context,
    reset_context,
    use_context,
)
from hostfit.providers import Provider, SuitabilityReport
from hostfit.types import ResourceType, Resource, Property, Parameter, Feature

__version__ = "0.1.0"
__all__ = [
    "ABSENT",
    "MISSING",
    "HostfitError",
    "DevError",
    "NoSuchCommandError",
    "InvalidParameterError",
    "NoIdentityError",
    "MissingCommandError",
    "ExecutionFailure",
    "ConfigError",
    "HostfitContext",
    "get_context",
    "set_context",
    "reset_context",
    "use_context",
    "Provider",
    "SuitabilityReport",
    "ResourceType",
    "Resource",
    "Property",
    "Parameter",
    "Feature",
]
