"""
Logger implementation for shelfctl.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

# Between DEBUG (10) and INFO (20)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


class ShelfLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports dual output to stderr and ~/.shelfctl/shelfctl.log.
    """

    LOG_FILE_PATH = Path.home() / ".shelfctl" / "shelfctl.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "verbose": VERBOSE,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "shelfctl",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, verbose, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable file output
            log_file: Override for the log file location
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # Let handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled:
            self._setup_file_handler(formatter, log_level, log_file or self.LOG_FILE_PATH)

    def _setup_file_handler(self, formatter: logging.Formatter, level: int, path: Path) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        self._logger.debug(message, *args, **kwargs)

    def verbose(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a verbose-level message."""
        self._logger.log(VERBOSE, message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        self._logger.warning(message, *args, **kwargs)

    def enable_console(self, level: str = "verbose") -> None:
        """Add a stderr handler if console output is not already enabled."""
        if self._console_handler is not None:
            self._console_handler.setLevel(self.LEVEL_MAP.get(level.lower(), VERBOSE))
            return
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(self.LEVEL_MAP.get(level.lower(), VERBOSE))
        console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self._logger.addHandler(console)
        self._console_handler = console


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def verbose(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass
