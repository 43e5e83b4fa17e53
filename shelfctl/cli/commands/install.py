"""
Native Click implementation of the install command.

Usage: shelfctl install EXECUTABLE [options]
"""

from __future__ import annotations

import click

from ...core.models.service import ServiceOperation, ServiceSettings
from ..context import ShelfContext
from ..decorators import translate_errors
from ..output import report_outcome

RUN_AS_FLAGS = {
    "localsystem": "run_as_local_system",
    "localservice": "run_as_local_service",
    "networkservice": "run_as_network_service",
}


@click.command("install")
@click.argument("executable", type=click.Path(dir_okay=False))
@click.option("--username", "-u", default=None, help="Account the service runs as.")
@click.option("--password", "-p", default=None, help="Password for --username.")
@click.option("--instance", "-i", default=None, help="Instance name of the service.")
@click.option(
    "--autostart/--manual",
    default=False,
    help="Start automatically at boot (default: manual).",
)
@click.option("--disabled", is_flag=True, help="Install the service disabled.")
@click.option("--delayed", is_flag=True, help="Use delayed automatic start.")
@click.option(
    "--run-as",
    type=click.Choice(sorted(RUN_AS_FLAGS)),
    default=None,
    help="Built-in account to run the service as.",
)
@click.option("--servicename", default=None, help="Name registered with the service manager.")
@click.option("--description", default=None, help="Service description.")
@click.option("--displayname", default=None, help="Display name.")
@click.option(
    "--extra-args",
    default=None,
    help="Pre-built arguments placed before the generated flags.",
)
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=None,
    help="Milliseconds to wait for the executable (default: service.timeout_ms).",
)
@click.option(
    "--legacy-servicename/--no-legacy-servicename",
    default=None,
    help="Fill --servicename from the description, as older tooling did.",
)
@click.pass_obj
@translate_errors
def install(
    ctx: ShelfContext,
    executable: str,
    username: str | None,
    password: str | None,
    instance: str | None,
    autostart: bool,
    disabled: bool,
    delayed: bool,
    run_as: str | None,
    servicename: str | None,
    description: str | None,
    displayname: str | None,
    extra_args: str | None,
    timeout: int | None,
    legacy_servicename: bool | None,
) -> None:
    """Install a Topshelf service.

    \b
    Examples:

        shelfctl install svc.exe --autostart

        shelfctl install svc.exe -i A --run-as localsystem --delayed

        shelfctl install svc.exe -u DOMAIN\\svc -p secret --timeout 120000
    """
    if legacy_servicename is None:
        legacy_servicename = ctx.settings.service.legacy_servicename_quirk

    run_as_fields = {field: run_as == name for name, field in RUN_AS_FLAGS.items()}
    settings = ServiceSettings(
        username=username,
        password=password,
        instance_name=instance,
        autostart=autostart,
        disabled=disabled,
        delayed_start=delayed,
        service_name=servicename,
        description=description,
        display_name=displayname,
        timeout_ms=timeout or ctx.default_timeout_ms,
        extra_arguments=extra_args,
        legacy_servicename_quirk=legacy_servicename,
        **run_as_fields,
    )

    outcome = ctx.manager.install_service(executable, settings)
    report_outcome(ServiceOperation.INSTALL, executable, outcome, settings.timeout_ms)
