"""
Shared pytest fixtures for shelfctl tests.

- isolate_shelfctl: resets the service container and keeps logging off disk
- logger / runner / process: collaborator mocks for ServiceManager tests
- manager: ServiceManager wired to the mocks, resolving paths against tmp_path
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from shelfctl.core.bootstrap import reset
from shelfctl.core.interfaces.logger import ILogger
from shelfctl.core.interfaces.process import IProcess, IProcessRunner
from shelfctl.core.models.service import ProcessOutcome
from shelfctl.services.manager import ServiceManager
from shelfctl.services.process import LocalEnvironment


@pytest.fixture(autouse=True)
def isolate_shelfctl(monkeypatch: pytest.MonkeyPatch):
    """Reset global state and disable the log file for every test."""
    for name in (
        "SHELFCTL_LOGGING__LEVEL",
        "SHELFCTL_LOGGING__CONSOLE",
        "SHELFCTL_SERVICE__TIMEOUT_MS",
        "SHELFCTL_SERVICE__WORKING_DIRECTORY",
        "SHELFCTL_SERVICE__LEGACY_SERVICENAME_QUIRK",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHELFCTL_LOGGING__FILE", "false")
    reset()
    yield
    reset()


@pytest.fixture
def logger() -> MagicMock:
    """Logger mock recording every call."""
    return MagicMock(spec=ILogger)


@pytest.fixture
def process() -> MagicMock:
    """Process handle that exits within the timeout."""
    handle = MagicMock(spec=IProcess)
    handle.wait_for_exit.return_value = ProcessOutcome.COMPLETED
    return handle


@pytest.fixture
def runner(process: MagicMock) -> MagicMock:
    """Process runner that hands out the process fixture."""
    mock_runner = MagicMock(spec=IProcessRunner)
    mock_runner.start.return_value = process
    return mock_runner


@pytest.fixture
def manager(tmp_path: Path, runner: MagicMock, logger: MagicMock) -> ServiceManager:
    """ServiceManager resolving relative paths against tmp_path."""
    return ServiceManager(LocalEnvironment(tmp_path), runner, logger)
