"""
Attribute and feature declarations of a resource type.
"""

from dataclasses import dataclass, field
from typing import Iterable


def as_names(values: str | Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values)


@dataclass(frozen=True)
class Feature:
    """
    A named optional capability a provider may declare.

    Example:
        Feature("versionable", "The provider can install a specific version.")
    """

    name: str
    doc: str = ""


@dataclass(frozen=True)
class Attribute:
    """
    Base class for resource type attributes.

    required_features lists the features a provider must declare before
    it can manage this attribute.
    """

    name: str
    doc: str = ""
    required_features: tuple[str, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "required_features", as_names(self.required_features))


@dataclass(frozen=True)
class Property(Attribute):
    """An attribute with a current state the provider can read and change."""


@dataclass(frozen=True)
class Parameter(Attribute):
    """An attribute that influences management but is not itself state."""
