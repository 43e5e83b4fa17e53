"""
shelfctl - lifecycle control for Topshelf windows services.

Installs, uninstalls, starts and stops services by running their
Topshelf executables with the matching command-line verb.

Usage:
    import shelfctl
    shelfctl.install_service("svc.exe", shelfctl.ServiceSettings(autostart=True))
    shelfctl.stop_service("svc.exe", instance_name="A", timeout_ms=5000)
"""

from __future__ import annotations

from pathlib import Path

from .core.bootstrap import bootstrap
from .core.exceptions import ShelfException, ShelfValidationError
from .core.models.service import (
    DEFAULT_TIMEOUT_MS,
    OperationOptions,
    ProcessOutcome,
    ServiceOperation,
    ServiceSettings,
)
from .services.manager import ServiceManager


def get_manager() -> ServiceManager:
    """Return the container's ServiceManager, bootstrapping if needed."""
    return bootstrap().resolve(ServiceManager)


def install_service(file_path: str | Path, settings: ServiceSettings | None = None) -> ProcessOutcome:
    """Install a Topshelf windows service."""
    return get_manager().install_service(file_path, settings)


def uninstall_service(
    file_path: str | Path,
    instance_name: str | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> ProcessOutcome:
    """Uninstall a Topshelf windows service."""
    return get_manager().uninstall_service(file_path, instance_name, timeout_ms)


def start_service(
    file_path: str | Path,
    instance_name: str | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> ProcessOutcome:
    """Start a Topshelf windows service."""
    return get_manager().start_service(file_path, instance_name, timeout_ms)


def stop_service(
    file_path: str | Path,
    instance_name: str | None = None,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> ProcessOutcome:
    """Stop a Topshelf windows service."""
    return get_manager().stop_service(file_path, instance_name, timeout_ms)


__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "OperationOptions",
    "ProcessOutcome",
    "ServiceManager",
    "ServiceOperation",
    "ServiceSettings",
    "ShelfException",
    "ShelfValidationError",
    "get_manager",
    "install_service",
    "start_service",
    "stop_service",
    "uninstall_service",
]
