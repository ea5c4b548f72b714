"""
Resource type schema: attributes, features, resources and provider registration.
"""

from hostfit.types.attributes import Attribute, Feature, Parameter, Property
from hostfit.types.resource_type import ResourceType
from hostfit.types.resource import Resource

__all__ = [
    "Attribute",
    "Feature",
    "Parameter",
    "Property",
    "ResourceType",
    "Resource",
]
