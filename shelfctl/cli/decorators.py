"""
Click decorators for shelfctl CLI commands.

- lifecycle_options: executable argument plus --instance/--timeout
- translate_errors: turns shelfctl and OS errors into ClickExceptions
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import ShelfException

F = TypeVar("F", bound=Callable[..., Any])


def lifecycle_options(f: F) -> F:
    """Add the arguments shared by uninstall, start and stop.

    Usage:
        @click.command("stop")
        @lifecycle_options
        @click.pass_obj
        def stop(ctx, executable, instance, timeout):
            ...
    """
    f = click.option(
        "--timeout",
        "-t",
        type=click.IntRange(min=1),
        default=None,
        help="Milliseconds to wait for the executable (default: service.timeout_ms).",
    )(f)
    f = click.option(
        "--instance",
        "-i",
        default=None,
        help="Instance name of the service.",
    )(f)
    f = click.argument("executable", type=click.Path(dir_okay=False))(f)
    return f


def translate_errors(f: F) -> F:
    """Report shelfctl and launch failures as Click errors (exit code 1).

    The original message is kept; the exception is chained.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except click.ClickException:
            raise
        except ShelfException as e:
            raise click.ClickException(str(e)) from e
        except OSError as e:
            raise click.ClickException(f"Failed to run executable: {e}") from e

    return wrapper  # type: ignore[return-value]
