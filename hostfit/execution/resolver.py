"""
Binary resolution: turning a command name into an executable path.
"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from typing import Sequence

logger = logging.getLogger(__name__)


class BinaryResolver(ABC):
    """Maps a bare command name or a path to an absolute executable path."""

    @abstractmethod
    def resolve(self, name_or_path: str) -> str | None:
        """
        Resolve a command.

        Args:
            name_or_path: Bare name ("apt-get") or path ("/usr/bin/apt-get")

        Returns:
            Absolute path to an executable, or None if not found
        """
        pass


class PathResolver(BinaryResolver):
    """
    Resolve commands against a search path.

    Absolute paths are accepted as-is when they point at an executable
    file. Bare names are searched for in `search_path`, or in $PATH when
    no search path is configured.
    """

    def __init__(self, search_path: Sequence[str] | None = None):
        self.search_path = list(search_path) if search_path else None

    def resolve(self, name_or_path: str) -> str | None:
        name_or_path = str(name_or_path)
        if os.path.isabs(name_or_path):
            found = name_or_path if _is_executable(name_or_path) else None
        else:
            path = os.pathsep.join(self.search_path) if self.search_path else None
            found = shutil.which(name_or_path, path=path)
            if found:
                found = os.path.abspath(found)

        logger.debug("Resolved %s to %s", name_or_path, found)
        return found

    def __repr__(self) -> str:
        return f"PathResolver(search_path={self.search_path})"


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)
