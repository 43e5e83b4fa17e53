"""
Default process launcher and path resolver.

SubprocessRunner starts executables with subprocess.Popen. On Windows the
rendered argument string is handed to CreateProcess as-is, so quoted
values reach Topshelf exactly as rendered. Elsewhere the string is split
with shlex in POSIX mode, which keeps double-quoted values together; an
odd number of double quotes cannot be split and is rejected before launch.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from pathlib import Path

from ..core.exceptions import ShelfValidationError
from ..core.interfaces.process import IEnvironment, IProcess, IProcessRunner, ProcessSettings
from ..core.models.service import ProcessOutcome


class SubprocessHandle(IProcess):
    """IProcess backed by a subprocess.Popen object."""

    def __init__(self, popen: subprocess.Popen) -> None:
        self._popen = popen

    @property
    def pid(self) -> int | None:
        return self._popen.pid

    @property
    def exit_code(self) -> int | None:
        return self._popen.poll()

    def wait_for_exit(self, timeout_ms: int) -> ProcessOutcome:
        try:
            self._popen.wait(timeout=timeout_ms / 1000.0)
        except subprocess.TimeoutExpired:
            # Left running: timeout is not cancellation.
            return ProcessOutcome.TIMED_OUT
        return ProcessOutcome.COMPLETED


class SubprocessRunner(IProcessRunner):
    """
    Starts child processes with subprocess.Popen.

    Output is not captured; the executable writes straight to the
    caller's stdout/stderr.
    """

    def __init__(self, windows: bool | None = None) -> None:
        """
        Args:
            windows: Force Windows or POSIX command-line handling
                (defaults to the current platform)
        """
        self._windows = os.name == "nt" if windows is None else windows

    def build_command(self, file_path: Path, arguments: str) -> str | list[str]:
        """
        Command passed to Popen for file_path and arguments.

        Raises:
            ShelfValidationError: On POSIX, if arguments has unbalanced
                double quotes (e.g. a value containing a lone ")
        """
        if self._windows:
            command = subprocess.list2cmdline([str(file_path)])
            return f"{command} {arguments}" if arguments else command
        try:
            tokens = shlex.split(arguments)
        except ValueError as e:
            raise ShelfValidationError(
                f"Cannot split arguments into tokens: {e}",
                argument="arguments",
                context={"arguments": arguments},
                cause=e,
            ) from e
        return [str(file_path), *tokens]

    def start(self, file_path: Path, settings: ProcessSettings) -> IProcess:
        command = self.build_command(file_path, settings.arguments)
        popen = subprocess.Popen(
            command,
            cwd=settings.working_directory,
        )
        return SubprocessHandle(popen)


class LocalEnvironment(IEnvironment):
    """Resolves paths against a fixed working directory (default: cwd)."""

    def __init__(self, working_directory: str | Path | None = None) -> None:
        if working_directory is None:
            self._working_directory = Path.cwd()
        else:
            self._working_directory = Path(working_directory).expanduser().absolute()

    @property
    def working_directory(self) -> Path:
        return self._working_directory

    def make_absolute(self, path: str | Path) -> Path:
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return self._working_directory / candidate
