"""
Suitability evaluation: do a provider's confines hold on this host?
"""

import logging
import os
from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field

from hostfit.facts.base import FactSource, is_blank, normalize
from hostfit.providers.registry import EXISTS, FALSE, TRUE

logger = logging.getLogger(__name__)


class SuitabilityReport(BaseModel):
    """
    Every confine that failed, grouped by check kind.

    An empty report means the provider is suitable.
    """

    exists: list[Any] = Field(default_factory=list, description="Paths that do not exist")
    true: int = Field(default=0, description="Values that should have been true")
    false: int = Field(default=0, description="Values that should have been false")
    facts: dict[str, list[Any]] = Field(
        default_factory=dict, description="Fact name -> expected values that did not match"
    )

    @property
    def empty(self) -> bool:
        return not (self.exists or self.true or self.false or self.facts)

    def to_dict(self) -> dict[str, Any]:
        """Return only the buckets that recorded a failure."""
        return self.model_dump(exclude_defaults=True)


def check_suitability(
    confines: Mapping[str, list[Any]],
    facts: FactSource,
    short: bool = True,
    exists: Callable[[str], bool] = os.path.exists,
) -> "bool | SuitabilityReport":
    """
    Evaluate confines against the host.

    Args:
        confines: Check kind -> expected values
        facts: Source of live fact values
        short: Stop at the first failure and return a bool. When False,
            evaluate everything and return a SuitabilityReport.
        exists: Path existence check

    Returns:
        True/False in short mode, a SuitabilityReport otherwise
    """
    report = SuitabilityReport()

    for check, values in confines.items():
        if check == EXISTS:
            for value in values:
                if not (value and exists(str(value))):
                    logger.debug("Not suitable: missing %s", value)
                    if short:
                        return False
                    report.exists.append(value)

        elif check == TRUE:
            for value in values:
                if not value:
                    logger.debug("Not suitable: false value")
                    if short:
                        return False
                    report.true += 1

        elif check == FALSE:
            for value in values:
                if value:
                    logger.debug("Not suitable: true value")
                    if short:
                        return False
                    report.false += 1

        else:
            result = facts.value(check)
            if is_blank(result):
                logger.debug("Not suitable: fact %s is not set", check)
                if short:
                    return False
                report.facts[check] = list(values)
                continue

            result = normalize(result)
            if not any(result == normalize(value) for value in values):
                logger.debug("Not suitable: %s not in %s", check, values)
                if short:
                    return False
                report.facts[check] = list(values)

    if short:
        return True
    return report
