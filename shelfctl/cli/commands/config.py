"""
Native Click implementation of the config command.

Usage: shelfctl config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ...core.exceptions import ShelfException


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .shelfctl/config.toml, pyproject.toml [tool.shelfctl]
    and SHELFCTL_* environment variables.

    \b
    Examples:

        shelfctl config list                 # List all options

        shelfctl config get service.timeout_ms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    keys = config_list()
    click.echo("Available config options:")
    click.echo("")

    for key, info in keys.items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_context
def config_get_cmd(ctx: click.Context, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. service.timeout_ms)
    """
    try:
        value = config_get(key, config_path=ctx.meta.get("shelfctl.config_path"))
    except ShelfException as e:
        raise click.ClickException(str(e)) from e

    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
