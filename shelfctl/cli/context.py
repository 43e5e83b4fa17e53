"""
Click context extension for shelfctl CLI.

Provides ShelfContext dataclass that holds shelfctl-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.interfaces.logger import ILogger
from ..core.settings import ShelfSettings
from ..services.logging import ShelfLogger
from ..services.manager import ServiceManager


@dataclass
class ShelfContext:
    """Extended context passed through Click command chain.

    Created once at CLI startup and passed to commands via Click's
    ctx.obj mechanism.

    Attributes:
        cwd: Current working directory
        settings: Merged configuration
        manager: Service manager wired from the container
        logger: Application logger
    """

    cwd: Path
    settings: ShelfSettings
    manager: ServiceManager
    logger: ILogger

    @classmethod
    def create(
        cls,
        cwd: Path | None = None,
        config_path: Path | None = None,
        verbose: bool = False,
    ) -> ShelfContext:
        """Create a ShelfContext for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            config_path: Explicit configuration file
            verbose: Echo verbose log messages to stderr

        Returns:
            Configured ShelfContext instance
        """
        if cwd is None:
            cwd = Path.cwd()

        container = bootstrap(start_dir=str(cwd), config_path=config_path)
        logger: ILogger = container.resolve(ILogger)  # type: ignore[type-abstract]
        if verbose and isinstance(logger, ShelfLogger):
            logger.enable_console("verbose")

        return cls(
            cwd=cwd,
            settings=container.resolve(ShelfSettings),
            manager=container.resolve(ServiceManager),
            logger=logger,
        )

    @property
    def default_timeout_ms(self) -> int:
        """Configured timeout for commands run without --timeout."""
        return self.settings.service.timeout_ms
