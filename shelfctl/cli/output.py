"""User-facing result lines for lifecycle commands."""

from __future__ import annotations

import click

from ..core.models.service import ProcessOutcome, ServiceOperation


def report_outcome(
    operation: ServiceOperation,
    executable: str,
    outcome: ProcessOutcome,
    timeout_ms: int,
) -> None:
    """Echo the result of an operation.

    A timeout is reported on stderr but is not an error.
    """
    if outcome is ProcessOutcome.TIMED_OUT:
        click.echo(
            f"Warning: {executable} did not exit within {timeout_ms} ms; it was left running.",
            err=True,
        )
    click.echo(f"Service {operation.past_tense}: {executable}")
