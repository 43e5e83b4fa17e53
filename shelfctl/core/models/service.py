"""
Service lifecycle models.

Defines the settings rendered into Topshelf install arguments, the
options accepted by uninstall/start/stop and the outcome of supervising
the spawned executable.
"""

from __future__ import annotations

from enum import Enum

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from .base import ImmutableModel

DEFAULT_TIMEOUT_MS = 60000


class ServiceOperation(str, Enum):
    """Lifecycle verbs understood by a Topshelf executable."""

    INSTALL = "install"
    UNINSTALL = "uninstall"
    START = "start"
    STOP = "stop"

    @property
    def verb(self) -> str:
        """Command-line verb for this operation."""
        return self.value

    @property
    def past_tense(self) -> str:
        """Past tense used in confirmation messages."""
        if self is ServiceOperation.STOP:
            return "stopped"
        if self is ServiceOperation.START:
            return "started"
        return f"{self.value}ed"


class ProcessOutcome(str, Enum):
    """How a supervised process finished from the caller's point of view."""

    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


class LifecycleModel(ImmutableModel):
    """Immutable model accepting both snake_case and camelCase field names.

    camelCase aliases let settings files written for other Topshelf
    tooling (``instanceName``, ``timeoutMs``) load unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
        revalidate_instances="never",
    )


class ServiceSettings(LifecycleModel):
    """Settings for installing a Topshelf service.

    String fields that are ``None``, empty or whitespace-only are treated
    as absent and produce no flag. ``autostart`` selects between
    ``--autostart`` and ``--manual``; one of the two is always rendered.
    At most one of the ``run_as_*`` flags is meaningful to Topshelf, but
    no exclusivity is enforced here.

    ``legacy_servicename_quirk`` reproduces older tooling that filled the
    ``--servicename`` value from ``description`` instead of
    ``service_name``.
    """

    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    instance_name: str | None = None
    autostart: bool = False
    disabled: bool = False
    delayed_start: bool = False
    run_as_local_system: bool = False
    run_as_local_service: bool = False
    run_as_network_service: bool = False
    service_name: str | None = None
    description: str | None = None
    display_name: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    extra_arguments: str | None = None
    legacy_servicename_quirk: bool = False


class OperationOptions(LifecycleModel):
    """Options for uninstall, start and stop.

    Attributes:
        instance_name: Instance to target; ``None`` targets the default instance
        timeout_ms: Milliseconds to wait for the executable (default 60000)
    """

    instance_name: str | None = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS
