"""
Base FactSource abstraction for hostfit.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from hostfit.sentinels import ABSENT


def normalize(value: Any) -> str:
    """
    Normalize a fact or expected value for comparison.

    Values are compared as lowercased strings, so "Debian", "debian" and
    a YAML-parsed value all compare equal.
    """
    return str(value).lower()


def is_blank(value: Any) -> bool:
    """True when a fact value should be treated as unknown."""
    return value is ABSENT or value is None or str(value) == ""


class FactSource(ABC):
    """
    Base class for fact sources.

    A fact source answers "what is the live value of fact X on this host".
    Fact names are matched case-insensitively; unknown facts return ABSENT
    rather than raising.
    """

    @abstractmethod
    def value(self, name: str) -> Any:
        """
        Return the raw value of a fact.

        Args:
            name: Fact name (case-insensitive)

        Returns:
            The fact value, or ABSENT if the fact is unknown
        """
        pass

    @abstractmethod
    def names(self) -> Iterable[str]:
        """Return the normalized names of all facts this source knows."""
        pass

    def to_dict(self) -> dict[str, Any]:
        """Return every known fact as a plain dictionary."""
        return {name: self.value(name) for name in sorted(self.names())}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(facts={len(list(self.names()))})"
