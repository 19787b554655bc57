"""
graphcalc CLI utilities.

Shared helpers used across CLI modules.
"""

import platform
from pathlib import Path

import typer

from graphcalc._version import get_version
from graphcalc.core.config import GraphCalcConfig, find_config, load_config
from graphcalc.core.errors import ConfigError


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"graphcalc version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def resolve_config(config_path: Path | None) -> GraphCalcConfig:
    """Load an explicit config file, or graphcalc.toml from the working tree.

    Exits with code 1 on an invalid config.
    """
    path = config_path if config_path is not None else find_config(Path.cwd())
    if config_path is not None and not config_path.exists():
        typer.echo(f"Error: Config file not found: {config_path}", err=True)
        raise typer.Exit(code=1)
    try:
        return load_config(path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
