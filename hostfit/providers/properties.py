"""
Per-instance property storage and generated accessors.
"""

import inspect
from typing import Any

from hostfit.errors import DevError
from hostfit.sentinels import ABSENT

# Instance attributes of Provider that an accessor must never shadow
RESERVED = frozenset({"resource", "property_hash"})

# Resolved from the property hash or the resource, never a plain accessor
IDENTITY = "name"


class PropertyAccessor:
    """
    Descriptor projecting one attribute of the property hash.

    Reading an unset attribute yields ABSENT; assigning stores the value
    in the instance's property hash. All accessors share that one hash.
    """

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        return instance.property_hash.get(self.name, ABSENT)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.property_hash[self.name] = value

    def __repr__(self) -> str:
        return f"PropertyAccessor(name='{self.name}')"


def build_accessors(provider: type, names: list[str]) -> dict[str, PropertyAccessor]:
    """
    Install accessors for attribute names on a provider class.

    Names that are not identifiers or are reserved are skipped, and so is
    name, which keeps its identity lookup.

    Returns:
        Attribute name -> accessor for every name now backed by the
        property hash

    Raises:
        DevError: If a name is already defined by the class hierarchy as
            something other than an accessor
    """
    accessors: dict[str, PropertyAccessor] = {}
    for name in names:
        if not name.isidentifier() or name in RESERVED:
            continue

        try:
            existing = inspect.getattr_static(provider, name)
        except AttributeError:
            existing = None

        if isinstance(existing, PropertyAccessor):
            accessors[name] = existing
            continue
        if name == IDENTITY:
            continue
        if existing is not None:
            raise DevError(f"Cannot generate accessor {name} for {provider.__name__}: name is already defined")

        accessor = PropertyAccessor(name)
        setattr(provider, name, accessor)
        accessors[name] = accessor

    return accessors
