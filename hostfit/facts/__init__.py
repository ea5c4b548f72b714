"""
Fact sources: named pieces of host information providers confine on.
"""

from hostfit.facts.base import FactSource, normalize, is_blank
from hostfit.facts.static import StaticFacts, YamlFacts, LayeredFacts
from hostfit.facts.host import HostFacts

__all__ = [
    "FactSource",
    "normalize",
    "is_blank",
    "StaticFacts",
    "YamlFacts",
    "LayeredFacts",
    "HostFacts",
]
