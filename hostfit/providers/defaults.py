"""
Default selection: is a provider the one this platform prefers?
"""

import logging
from typing import Any, Mapping

from hostfit.facts.base import FactSource, is_blank, normalize
from hostfit.providers.registry import as_batch

logger = logging.getLogger(__name__)


def matches_defaults(defaults: Mapping[str, Any], facts: FactSource) -> bool:
    """
    Check every default rule against live facts.

    A provider with no rules is never a default. Each fact must be set and
    match at least one of its accepted values; one mismatch disqualifies
    the provider.

    Args:
        defaults: Fact name -> accepted value or list of values
        facts: Source of live fact values

    Returns:
        True only if every declared fact matches
    """
    if not defaults:
        return False

    for fact, accepted in defaults.items():
        value = facts.value(fact)
        if is_blank(value):
            logger.debug("Not default: fact %s is not set", fact)
            return False

        value = normalize(value)
        if value not in {normalize(v) for v in as_batch(accepted)}:
            logger.debug("Not default: %s is %s, not in %s", fact, value, accepted)
            return False

    return True
