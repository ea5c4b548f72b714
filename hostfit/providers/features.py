"""
Feature gating: can a provider manage a given parameter?
"""

from typing import TYPE_CHECKING, Iterable

from hostfit.errors import InvalidParameterError
from hostfit.types.attributes import Attribute

if TYPE_CHECKING:
    from hostfit.providers.provider import Provider


def satisfies(declared: Iterable[str], required: Iterable[str]) -> bool:
    """True when every required feature is among the declared ones."""
    return set(required) <= set(declared)


def resolve_attribute(provider: "type[Provider]", param: "str | Attribute") -> Attribute:
    if isinstance(param, Attribute):
        return param

    resource_type = provider.resource_type
    attr = resource_type.attr_class(param) if resource_type is not None else None
    if attr is None:
        owner = resource_type.name if resource_type is not None else provider.describe()
        raise InvalidParameterError(str(param), owner)
    return attr


def supports_parameter(provider: "type[Provider]", param: "str | Attribute") -> bool:
    """
    Check whether a provider supports a parameter.

    Parameters without required features are always supported. Otherwise
    the provider must satisfy all of them.

    Raises:
        InvalidParameterError: If the resource type does not know param
    """
    attr = resolve_attribute(provider, param)
    if not attr.required_features:
        return True
    return provider.satisfies(*attr.required_features)
