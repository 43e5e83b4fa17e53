"""
Process launching and path resolution interfaces.

IProcessRunner starts a child process and hands back an IProcess that
can be waited on with a deadline. IEnvironment turns possibly-relative
executable paths into absolute ones before launch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.service import ProcessOutcome


@dataclass(frozen=True)
class ProcessSettings:
    """How to launch a child process.

    Attributes:
        arguments: Rendered argument string, passed through unmodified
        working_directory: Directory to run in (None keeps the caller's cwd)
    """

    arguments: str = ""
    working_directory: Path | None = None


class IProcess(ABC):
    """Handle to a started child process."""

    @property
    @abstractmethod
    def pid(self) -> int | None:
        """Operating-system process id, if known."""
        pass

    @property
    @abstractmethod
    def exit_code(self) -> int | None:
        """Exit code once the process has exited, else None."""
        pass

    @abstractmethod
    def wait_for_exit(self, timeout_ms: int) -> ProcessOutcome:
        """
        Wait up to timeout_ms milliseconds for the process to exit.

        Returns:
            ProcessOutcome.COMPLETED if it exited, ProcessOutcome.TIMED_OUT
            otherwise. The process is left running on timeout.
        """
        pass


class IProcessRunner(ABC):
    """Starts child processes."""

    @abstractmethod
    def start(self, file_path: Path, settings: ProcessSettings) -> IProcess:
        """
        Start file_path with the given settings.

        Raises:
            OSError: If the executable cannot be started
        """
        pass


class IEnvironment(ABC):
    """Working-directory context used to resolve executable paths."""

    @property
    @abstractmethod
    def working_directory(self) -> Path:
        """Directory relative paths are resolved against."""
        pass

    @abstractmethod
    def make_absolute(self, path: str | Path) -> Path:
        """Return path made absolute against working_directory."""
        pass
