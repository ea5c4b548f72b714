"""
Resource: one managed instance of a resource type.
"""

from dataclasses import dataclass, field
from typing import Any

from hostfit.types.resource_type import ResourceType


@dataclass
class Resource:
    """
    A resource the engine manages, e.g. Package[nginx].

    Providers keep a back-reference to the resource they manage for the
    length of one management cycle.
    """

    type: ResourceType
    """Resource type this resource belongs to"""

    name: str
    """Identity of the resource within its type"""

    parameters: dict[str, Any] = field(default_factory=dict)
    """Desired values for properties and parameters"""

    def __getitem__(self, key: str) -> Any:
        return self.parameters.get(key)

    def __str__(self) -> str:
        return f"{self.type.name.capitalize()}[{self.name}]"
