"""
graphcalc CLI.

- formula.py: compile, tokens, ast and functions commands
- utils.py: version display and config resolution
"""

import logging
import sys
from pathlib import Path

import typer

from graphcalc._version import get_version
from graphcalc.cli.formula import (
    ast_command,
    compile_command,
    functions_command,
    tokens_command,
)
from graphcalc.cli.utils import resolve_config, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""graphcalc – formula compiler for the surface plotter

Compiles formulas such as 'sin(x) * y ** 2' into expression text for the
plotter's evaluation function. Reads graphcalc.toml from the current
directory or its parents when present.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to graphcalc.toml (default: search from current directory)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: from config, WARNING)",
    ),
) -> None:
    """graphcalc CLI main callback for global options."""
    settings = resolve_config(config)
    level = (log_level or settings.logging.level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    ctx.obj = settings


app.command(name="compile")(compile_command)
app.command(name="tokens")(tokens_command)
app.command(name="ast")(ast_command)
app.command(name="functions")(functions_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

__all__ = ["__version__", "app", "main"]
