"""
Argument rendering for Topshelf executables.

Install flags are always emitted in the same order, so a given settings
value renders to the same string every time:

    [extra] -username -password -instance --autostart|--manual --disabled
    --delayed --localsystem --localservice --networkservice --servicename
    --description --displayname

Quoted values are wrapped in double quotes verbatim; embedded quotes are
not escaped.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..core.models.service import ServiceOperation, ServiceSettings


def _is_present(value: str | None) -> bool:
    """Blank strings count as absent."""
    return value is not None and value.strip() != ""


class ProcessArgumentBuilder:
    """
    Accumulates command-line tokens and renders them space-separated.

    Usage:
        builder = ProcessArgumentBuilder()
        builder.append("install").append_switch_quoted("-instance", "A")
        str(builder)  # 'install -instance "A"'
    """

    def __init__(self, tokens: list[str] | None = None) -> None:
        self._tokens: list[str] = list(tokens or [])

    @classmethod
    def from_string(cls, text: str | None) -> ProcessArgumentBuilder:
        """Start from a pre-built fragment, kept verbatim."""
        if not _is_present(text):
            return cls()
        return cls([text])  # type: ignore[list-item]

    def append(self, token: str) -> ProcessArgumentBuilder:
        """Append a raw token. Empty tokens are ignored."""
        if token:
            self._tokens.append(token)
        return self

    def append_quoted(self, value: str) -> ProcessArgumentBuilder:
        """Append a value wrapped in double quotes."""
        return self.append(f'"{value}"')

    def append_switch_quoted(self, switch: str, value: str) -> ProcessArgumentBuilder:
        """Append a switch followed by its double-quoted value."""
        return self.append(f'{switch} "{value}"')

    def render(self) -> str:
        return " ".join(self._tokens)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)


def build_install_arguments(settings: ServiceSettings | None) -> str:
    """
    Render the install flags for settings.

    The verb itself is not included; see build_command_arguments.

    Args:
        settings: Install settings, or None for no flags at all

    Returns:
        Space-separated flags, e.g. '-instance "A" --autostart'
    """
    if settings is None:
        return ""

    builder = ProcessArgumentBuilder.from_string(settings.extra_arguments)

    if _is_present(settings.username):
        builder.append_switch_quoted("-username", settings.username)  # type: ignore[arg-type]
    if _is_present(settings.password):
        builder.append_switch_quoted("-password", settings.password)  # type: ignore[arg-type]
    if _is_present(settings.instance_name):
        builder.append_switch_quoted("-instance", settings.instance_name)  # type: ignore[arg-type]

    builder.append("--autostart" if settings.autostart else "--manual")

    if settings.disabled:
        builder.append("--disabled")
    if settings.delayed_start:
        builder.append("--delayed")
    if settings.run_as_local_system:
        builder.append("--localsystem")
    if settings.run_as_local_service:
        builder.append("--localservice")
    if settings.run_as_network_service:
        builder.append("--networkservice")

    if _is_present(settings.service_name):
        name = settings.description if settings.legacy_servicename_quirk else settings.service_name
        builder.append_switch_quoted("--servicename", name or "")
    if _is_present(settings.description):
        builder.append_switch_quoted("--description", settings.description)  # type: ignore[arg-type]
    if _is_present(settings.display_name):
        builder.append_switch_quoted("--displayname", settings.display_name)  # type: ignore[arg-type]

    return builder.render()


def build_command_arguments(
    operation: ServiceOperation,
    settings: ServiceSettings | None = None,
    instance_name: str | None = None,
) -> str:
    """
    Render the full argument string for an operation.

    Install renders settings after the verb; uninstall, start and stop
    take the instance name, stripped of surrounding whitespace, as a bare
    token after the verb.

    Examples:
        install -instance "A" --autostart
        stop A
        start
    """
    operation = ServiceOperation(operation)
    builder = ProcessArgumentBuilder().append(operation.verb)
    if operation is ServiceOperation.INSTALL:
        builder.append(build_install_arguments(settings))
    elif _is_present(instance_name):
        builder.append(instance_name.strip())  # type: ignore[union-attr]
    return builder.render()
