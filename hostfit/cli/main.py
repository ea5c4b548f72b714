"""
hostfit CLI - inspect facts and provider suitability on this host.
"""

import importlib.util
import logging
import sys
from pathlib import Path

import click

from hostfit.config import HostfitConfig, load_config
from hostfit.context import HostfitContext, set_context
from hostfit.errors import HostfitError
from hostfit.types import ResourceType


@click.group()
@click.version_option(version="0.1.0")
@click.option("--config", "config_file", type=click.Path(exists=True), help="YAML configuration file")
@click.option("--facts-file", type=click.Path(exists=True), help="YAML file with pinned facts")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, facts_file: str | None, debug: bool):
    """
    hostfit - choose the right provider for each resource on this host.

    Facts come from the host, optionally overridden by a facts file.
    """
    try:
        config = load_config(config_file)
        if facts_file:
            config = config.model_copy(update={"facts_file": facts_file})
    except HostfitError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if debug else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


def _activate(config: HostfitConfig) -> HostfitContext:
    try:
        context = HostfitContext.from_config(config)
    except HostfitError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    set_context(context)
    return context


@cli.command()
@click.argument("names", nargs=-1)
@click.pass_obj
def facts(config: HostfitConfig, names: tuple[str, ...]):
    """
    Print facts.

    Example:
        hostfit facts
        hostfit facts osfamily kernel
    """
    context = _activate(config)
    values = context.facts.to_dict() if not names else {n: context.facts.value(n) for n in names}

    for name, value in values.items():
        click.echo(f"{name} => {value}")


@cli.command()
@click.argument("module_file", type=click.Path(exists=True))
@click.option("--type", "-t", "type_name", help="Only check this resource type")
@click.option("--verbose", "-v", is_flag=True, help="Show why providers are not suitable")
@click.pass_obj
def check(config: HostfitConfig, module_file: str, type_name: str | None, verbose: bool):
    """
    Report which providers are usable on this host.

    MODULE_FILE is a Python file defining resource types and their
    providers.

    Example:
        hostfit check types/package.py
        hostfit check types/package.py --type package -v
    """
    _activate(config)

    try:
        resource_types = _load_types(module_file)
    except HostfitError as e:
        click.echo(f"✗ Could not load {module_file}: {e}", err=True)
        sys.exit(1)

    if type_name:
        resource_types = [t for t in resource_types if t.name == type_name]
    if not resource_types:
        click.echo("Error: Could not find any resource types in file", err=True)
        sys.exit(1)

    for resource_type in resource_types:
        click.echo(resource_type.name)
        for provider in resource_type.providers():
            report = provider.suitable(short=False)
            mark = "✓" if report.empty else "✗"
            status = "suitable" if report.empty else "not suitable"
            if report.empty and provider.is_default():
                status += ", default"
            click.echo(f"  {mark} {provider.provider_name}: {status}")

            if verbose and not report.empty:
                for kind, failed in report.to_dict().items():
                    click.echo(f"      {kind}: {failed}")

        selected = resource_type.default_provider()
        if selected is None:
            click.echo("  No suitable provider")
        else:
            click.echo(f"  Selected provider: {selected.provider_name}")


def _load_types(module_file: str) -> list[ResourceType]:
    """
    Load resource types from a Python file.

    Args:
        module_file: Path to the Python file

    Returns:
        Every ResourceType defined at module level, in definition order
    """
    path = Path(module_file)
    module_name = f"hostfit_types_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise HostfitError(f"{module_file} is not a Python module")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)

    return [obj for obj in vars(module).values() if isinstance(obj, ResourceType)]


if __name__ == "__main__":
    cli()
