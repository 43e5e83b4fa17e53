"""
Native Click implementation of the stop command.

Usage: shelfctl stop EXECUTABLE [--instance NAME] [--timeout MS]
"""

from __future__ import annotations

import click

from ...core.models.service import ServiceOperation
from ..context import ShelfContext
from ..decorators import lifecycle_options, translate_errors
from ..output import report_outcome


@click.command("stop")
@lifecycle_options
@click.pass_obj
@translate_errors
def stop(ctx: ShelfContext, executable: str, instance: str | None, timeout: int | None) -> None:
    """Stop a running Topshelf service.

    \b
    Examples:

        shelfctl stop svc.exe

        shelfctl stop svc.exe --instance A --timeout 5000
    """
    timeout_ms = timeout or ctx.default_timeout_ms
    outcome = ctx.manager.stop_service(executable, instance_name=instance, timeout_ms=timeout_ms)
    report_outcome(ServiceOperation.STOP, executable, outcome, timeout_ms)
