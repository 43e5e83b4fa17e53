"""
Native Click implementation of the uninstall command.

Usage: shelfctl uninstall EXECUTABLE [--instance NAME] [--timeout MS]
"""

from __future__ import annotations

import click

from ...core.models.service import ServiceOperation
from ..context import ShelfContext
from ..decorators import lifecycle_options, translate_errors
from ..output import report_outcome


@click.command("uninstall")
@lifecycle_options
@click.pass_obj
@translate_errors
def uninstall(ctx: ShelfContext, executable: str, instance: str | None, timeout: int | None) -> None:
    """Uninstall a Topshelf service.

    \b
    Examples:

        shelfctl uninstall svc.exe

        shelfctl uninstall svc.exe --instance A --timeout 5000
    """
    timeout_ms = timeout or ctx.default_timeout_ms
    outcome = ctx.manager.uninstall_service(executable, instance_name=instance, timeout_ms=timeout_ms)
    report_outcome(ServiceOperation.UNINSTALL, executable, outcome, timeout_ms)
