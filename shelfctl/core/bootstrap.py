"""
Application bootstrap for shelfctl.

Initializes the DI container with the logger, the process launcher, the
path resolver and the service manager. Call once at application startup.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.process import IEnvironment, IProcessRunner
from .settings import ShelfSettings, load_settings

_initialized = False


def bootstrap(start_dir: str | None = None, config_path: Path | None = None) -> ServiceContainer:
    """
    Bootstrap the shelfctl application.

    Args:
        start_dir: Directory to start searching for configuration from
        config_path: Explicit configuration file

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    settings = load_settings(config_path=config_path, start_dir=start_dir)
    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: ShelfSettings) -> None:
    """Register core application services."""
    from ..services.logging import ShelfLogger
    from ..services.manager import ServiceManager
    from ..services.process import LocalEnvironment, SubprocessRunner

    container.register_singleton(ShelfSettings, implementation=settings)

    def create_logger() -> ILogger:
        return ShelfLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    def create_environment() -> IEnvironment:
        return LocalEnvironment(settings.service.working_directory)

    container.register_singleton(IEnvironment, factory=create_environment)  # type: ignore[type-abstract]
    container.register_class(IProcessRunner, SubprocessRunner)  # type: ignore[type-abstract]

    def create_manager() -> ServiceManager:
        return ServiceManager(
            environment=container.resolve(IEnvironment),  # type: ignore[type-abstract]
            runner=container.resolve(IProcessRunner),  # type: ignore[type-abstract]
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        )

    container.register_singleton(ServiceManager, factory=create_manager)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
