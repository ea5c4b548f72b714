"""
Execution collaborators: binary resolution and process execution.
"""

from hostfit.execution.executor import Executor, SubprocessExecutor
from hostfit.execution.resolver import BinaryResolver, PathResolver

__all__ = [
    "Executor",
    "SubprocessExecutor",
    "BinaryResolver",
    "PathResolver",
]
