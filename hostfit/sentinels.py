"""
Sentinel values shared across hostfit.
"""

from enum import Enum


class Sentinel(Enum):
    """Markers that are distinct from every real value, including None."""

    ABSENT = "absent"
    MISSING = "missing"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


ABSENT = Sentinel.ABSENT
"""An attribute or fact with no known value."""

MISSING = Sentinel.MISSING
"""A declared command whose binary could not be resolved."""
