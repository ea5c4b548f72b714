"""CLI for inspecting hostfit facts and providers."""

from hostfit.cli.main import cli

__all__ = ["cli"]
