"""
Native Click implementation of the start command.

Usage: shelfctl start EXECUTABLE [--instance NAME] [--timeout MS]
"""

from __future__ import annotations

import click

from ...core.models.service import ServiceOperation
from ..context import ShelfContext
from ..decorators import lifecycle_options, translate_errors
from ..output import report_outcome


@click.command("start")
@lifecycle_options
@click.pass_obj
@translate_errors
def start(ctx: ShelfContext, executable: str, instance: str | None, timeout: int | None) -> None:
    """Start an installed Topshelf service.

    \b
    Examples:

        shelfctl start svc.exe

        shelfctl start svc.exe --instance A --timeout 5000
    """
    timeout_ms = timeout or ctx.default_timeout_ms
    outcome = ctx.manager.start_service(executable, instance_name=instance, timeout_ms=timeout_ms)
    report_outcome(ServiceOperation.START, executable, outcome, timeout_ms)
