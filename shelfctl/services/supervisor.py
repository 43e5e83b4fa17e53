"""
Bounded-time supervision of a single child process.

A timeout is a soft outcome: the process is left running, a warning is
logged and the caller continues. Anything raised while launching or
waiting propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Callable

from ..core.exceptions import ShelfValidationError, require_argument
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IProcess
from ..core.models.service import ProcessOutcome

TIMEOUT_WARNING = "Process timed out!"


def validate_timeout(timeout_ms: int) -> int:
    """Return timeout_ms if it is a positive integer, else raise."""
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise ShelfValidationError(
            f"Timeout must be a positive number of milliseconds, got {timeout_ms!r}",
            argument="timeout_ms",
        )
    return timeout_ms


class ProcessSupervisor:
    """
    Launches one process and waits for it with a deadline.

    Usage:
        supervisor = ProcessSupervisor(logger)
        outcome = supervisor.execute(lambda: runner.start(path, settings), 60000)
    """

    def __init__(self, logger: ILogger) -> None:
        require_argument(logger, "logger")
        self._logger = logger

    def execute(self, launch: Callable[[], IProcess], timeout_ms: int) -> ProcessOutcome:
        """
        Launch a process and block until it exits or timeout_ms elapses.

        Args:
            launch: Starts the child process and returns its handle
            timeout_ms: Milliseconds to wait for the process to exit

        Returns:
            ProcessOutcome.COMPLETED or ProcessOutcome.TIMED_OUT. The exit
            code is not inspected.

        Raises:
            ShelfValidationError: If timeout_ms is not a positive integer
        """
        validate_timeout(timeout_ms)

        process = launch()
        outcome = ProcessOutcome(process.wait_for_exit(timeout_ms))
        if outcome is ProcessOutcome.TIMED_OUT:
            self._logger.warning(TIMEOUT_WARNING)
        return outcome
