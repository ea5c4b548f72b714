"""
Provider capability model: confinement, commands, defaults, features and
per-instance property storage.

Example:
    from hostfit import Provider, ResourceType

    service = ResourceType("service")
    service.newproperty("ensure")
    service.newparam("name")

    @service.provide("systemd", commands={"systemctl": "systemctl"},
                     defaultfor={"kernel": "linux"})
    class Systemd(Provider):
        def start(self):
            self.systemctl("start", self.name)
"""

from hostfit.providers.provider import Provider
from hostfit.providers.registry import CapabilityRegistry
from hostfit.providers.confine import SuitabilityReport, check_suitability
from hostfit.providers.commands import CommandMethod
from hostfit.providers.properties import PropertyAccessor

__all__ = [
    "Provider",
    "CapabilityRegistry",
    "SuitabilityReport",
    "check_suitability",
    "CommandMethod",
    "PropertyAccessor",
]
