"""
Click-based CLI for shelfctl.

This module provides the main Click command group and serves as the
entry point for the shelfctl CLI.

Usage:
    from shelfctl.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import ShelfException
from .context import ShelfContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("shelfctl")
except Exception:
    __version__ = "0.1.0"

CONFIG_PATH_META_KEY = "shelfctl.config_path"

# Commands that do not need the service manager
_NO_CONTEXT_COMMANDS = {"config"}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="shelfctl")
@click.option("--verbose", "-v", is_flag=True, help="Echo verbose log messages to stderr.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to use instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """shelfctl - lifecycle control for Topshelf windows services

    Runs a Topshelf service executable with the install, uninstall,
    start or stop verb and waits for it to finish.

    \b
    Lifecycle:
        shelfctl install <exe>     Install the service
        shelfctl start <exe>       Start the service
        shelfctl stop <exe>        Stop the service
        shelfctl uninstall <exe>   Uninstall the service

    \b
    Configuration:
        shelfctl config            View configuration
    """
    ctx.meta[CONFIG_PATH_META_KEY] = config_path

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.invoked_subcommand not in _NO_CONTEXT_COMMANDS:
        try:
            ctx.obj = ShelfContext.create(config_path=config_path, verbose=verbose)
        except ShelfException as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "ShelfContext",
    "__version__",
    "cli",
    "register_commands",
]
