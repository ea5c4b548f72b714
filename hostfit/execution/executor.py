"""
Executor: interface for running external commands.

Providers never spawn processes themselves. Bound commands hand a fully
resolved argv to the active executor and pass its result (or its
ExecutionFailure) straight back to the caller.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Sequence

from hostfit.errors import ExecutionFailure

logger = logging.getLogger(__name__)


class Executor(ABC):
    """
    Abstract executor interface.

    The executor is responsible for:
    1. Launching the process
    2. Capturing its output
    3. Turning launch errors and non-zero exits into ExecutionFailure

    Retries and timeouts belong here (or to the caller), never to the
    command binder.
    """

    @abstractmethod
    def run(self, argv: Sequence[str]) -> str:
        """
        Run a command.

        Args:
            argv: Command line, executable first

        Returns:
            Captured output

        Raises:
            ExecutionFailure: If the command cannot start or exits non-zero
        """
        pass


class SubprocessExecutor(Executor):
    """
    Run commands with the subprocess module.

    stdout and stderr are captured together, matching what an operator
    would see in a terminal.
    """

    def __init__(self, timeout: float | None = None):
        """
        Create a subprocess executor.

        Args:
            timeout: Seconds before a command is killed (None waits forever)
        """
        self.timeout = timeout

    def run(self, argv: Sequence[str]) -> str:
        argv = [str(arg) for arg in argv]
        logger.debug("Executing %s", argv)
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except OSError as e:
            raise ExecutionFailure(
                argv, message=f"Could not execute '{' '.join(argv)}': {e}"
            ) from e
        except subprocess.TimeoutExpired as e:
            output = e.output if isinstance(e.output, str) else ""
            raise ExecutionFailure(
                argv,
                output=output,
                message=f"Execution of '{' '.join(argv)}' timed out after {self.timeout}s",
            ) from e

        if completed.returncode != 0:
            raise ExecutionFailure(argv, completed.returncode, completed.stdout or "")
        return completed.stdout or ""

    def __repr__(self) -> str:
        return f"SubprocessExecutor(timeout={self.timeout})"
