"""
Error taxonomy for hostfit.

Three families of failure exist:

- DevError: a programmer/declaration mistake (undeclared command, unknown
  parameter, provider instance with no identity). Never retried.
- MissingCommandError: a declared command whose binary could not be
  resolved was invoked.
- ExecutionFailure: the process executor reported a launch failure or a
  non-zero exit. Passed through untouched.
"""

from typing import Sequence


class HostfitError(Exception):
    """Base class for every error raised by hostfit."""


class DevError(HostfitError):
    """A provider or resource type was declared or used incorrectly."""


class NoSuchCommandError(DevError):
    """No provider in the inheritance chain declares the command."""

    def __init__(self, command: str, provider: str):
        self.command = command
        self.provider = provider
        super().__init__(f"No command {command} defined for provider {provider}")


class InvalidParameterError(DevError):
    """The resource type does not know the requested parameter."""

    def __init__(self, parameter: str, resource_type: str):
        self.parameter = parameter
        self.resource_type = resource_type
        super().__init__(
            f"'{parameter}' is not a valid parameter for {resource_type}"
        )


class NoIdentityError(DevError):
    """A provider instance has neither a resource nor a name property."""

    def __init__(self):
        super().__init__("No resource and no name in property hash")


class MissingCommandError(HostfitError):
    """A command was invoked but its binary was never found."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command {command} is missing")


class ExecutionFailure(HostfitError):
    """
    An external command could not be launched or exited non-zero.

    Attributes:
        argv: The full command line that was executed
        exitstatus: Process exit status, or None if it never started
        output: Combined stdout/stderr captured from the process
    """

    def __init__(
        self,
        argv: Sequence[str],
        exitstatus: int | None = None,
        output: str = "",
        message: str | None = None,
    ):
        self.argv = list(argv)
        self.exitstatus = exitstatus
        self.output = output
        if message is None:
            message = f"Execution of '{' '.join(self.argv)}' returned {exitstatus}: {output.strip()}"
        super().__init__(message)


class ConfigError(HostfitError):
    """Configuration or fact data could not be loaded or validated."""
