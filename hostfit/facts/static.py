"""
In-memory and file-backed fact sources.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from hostfit.errors import ConfigError
from hostfit.facts.base import FactSource, is_blank
from hostfit.sentinels import ABSENT

logger = logging.getLogger(__name__)


class StaticFacts(FactSource):
    """
    Facts held in a dictionary.

    Useful for tests and for pinning facts in configuration.

    Example:
        facts = StaticFacts({"osfamily": "Debian", "kernel": "Linux"})
        facts.value("OSFamily")  # "Debian"
    """

    def __init__(self, facts: Mapping[str, Any] | None = None):
        self._facts: dict[str, Any] = {}
        for name, value in (facts or {}).items():
            self[name] = value

    def __setitem__(self, name: str, value: Any) -> None:
        self._facts[str(name).lower()] = value

    def value(self, name: str) -> Any:
        return self._facts.get(str(name).lower(), ABSENT)

    def names(self) -> Iterable[str]:
        return list(self._facts)


class YamlFacts(StaticFacts):
    """
    Facts loaded from a YAML mapping file.

    Example file:
        osfamily: Debian
        operatingsystem: Ubuntu
        operatingsystemrelease: "22.04"
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except OSError as e:
            raise ConfigError(f"Cannot read facts file {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in facts file {self.path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Facts file {self.path} must contain a mapping, got {type(data).__name__}"
            )
        logger.debug("Loaded %d facts from %s", len(data), self.path)
        return data

    def __repr__(self) -> str:
        return f"YamlFacts(path='{self.path}')"


class LayeredFacts(FactSource):
    """
    Several fact sources consulted in order.

    The first source with a non-blank value wins, so pinned facts can be
    layered over detected host facts.
    """

    def __init__(self, *sources: FactSource):
        self.sources = list(sources)

    def value(self, name: str) -> Any:
        for source in self.sources:
            result = source.value(name)
            if not is_blank(result):
                return result
        return ABSENT

    def names(self) -> Iterable[str]:
        seen: dict[str, None] = {}
        for source in self.sources:
            for name in source.names():
                seen.setdefault(name, None)
        return list(seen)

    def __repr__(self) -> str:
        return f"LayeredFacts(sources={self.sources!r})"
