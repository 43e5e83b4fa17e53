"""
Unit tests for ServiceManager.

Tests the four lifecycle entry points with a mocked process runner:
- Command lines and timeouts handed to the runner
- Path validation before launch
- Verbose confirmations and timeout handling
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from shelfctl.core.exceptions import ShelfValidationError
from shelfctl.core.interfaces.process import ProcessSettings
from shelfctl.core.models.service import (
    OperationOptions,
    ProcessOutcome,
    ServiceOperation,
    ServiceSettings,
)
from shelfctl.services.manager import ServiceManager
from shelfctl.services.process import LocalEnvironment

ENTRY_POINTS = ["install_service", "uninstall_service", "start_service", "stop_service"]


class TestInstallService:
    """Tests for install_service."""

    def test_install_with_instance_and_autostart(self, manager, runner, process, tmp_path):
        settings = ServiceSettings(autostart=True, instance_name="A")

        outcome = manager.install_service("svc.exe", settings)

        assert outcome is ProcessOutcome.COMPLETED
        runner.start.assert_called_once_with(
            tmp_path / "svc.exe",
            ProcessSettings(arguments='install -instance "A" --autostart', working_directory=tmp_path),
        )
        process.wait_for_exit.assert_called_once_with(60000)

    def test_install_flag_order(self, manager, runner):
        settings = ServiceSettings(disabled=True, delayed_start=True, run_as_local_system=True)

        manager.install_service("svc.exe", settings)

        process_settings = runner.start.call_args[0][1]
        assert process_settings.arguments == "install --manual --disabled --delayed --localsystem"

    def test_install_without_settings(self, manager, runner, process):
        manager.install_service("svc.exe")

        assert runner.start.call_args[0][1].arguments == "install"
        process.wait_for_exit.assert_called_once_with(60000)

    def test_install_honors_settings_timeout(self, manager, process):
        manager.install_service("svc.exe", ServiceSettings(timeout_ms=1234))

        process.wait_for_exit.assert_called_once_with(1234)

    def test_install_confirmation(self, manager, logger):
        manager.install_service("svc.exe")

        logger.verbose.assert_called_once_with("Topshelf service installed.")

    def test_install_invalid_settings_timeout_fails_before_launch(self, manager, runner):
        with pytest.raises(ShelfValidationError):
            manager.install_service("svc.exe", ServiceSettings(timeout_ms=0))

        runner.start.assert_not_called()


class TestInstanceOperations:
    """Tests for uninstall_service, start_service and stop_service."""

    def test_stop_with_instance_and_timeout(self, manager, runner, process, tmp_path):
        outcome = manager.stop_service("svc.exe", "A", 5000)

        assert outcome is ProcessOutcome.COMPLETED
        runner.start.assert_called_once_with(
            tmp_path / "svc.exe",
            ProcessSettings(arguments="stop A", working_directory=tmp_path),
        )
        process.wait_for_exit.assert_called_once_with(5000)

    @pytest.mark.parametrize(
        "method,verb,past_tense",
        [
            ("uninstall_service", "uninstall", "uninstalled"),
            ("start_service", "start", "started"),
            ("stop_service", "stop", "stopped"),
        ],
    )
    def test_defaults(self, manager, runner, process, logger, method, verb, past_tense):
        getattr(manager, method)("svc.exe")

        assert runner.start.call_args[0][1].arguments == verb
        process.wait_for_exit.assert_called_once_with(60000)
        logger.verbose.assert_called_once_with(f"Topshelf service {past_tense}.")

    def test_uninstall_with_instance(self, manager, runner):
        manager.uninstall_service("svc.exe", instance_name="blue")

        assert runner.start.call_args[0][1].arguments == "uninstall blue"

    def test_instance_with_trailing_space(self, manager, runner):
        manager.stop_service("svc.exe", "A ")

        assert runner.start.call_args[0][1].arguments == "stop A"

    def test_start_with_keyword_timeout(self, manager, process):
        manager.start_service("svc.exe", timeout_ms=250)

        process.wait_for_exit.assert_called_once_with(250)

    @pytest.mark.parametrize("timeout_ms", [0, -5, 2.5])
    def test_invalid_timeout_fails_before_launch(self, manager, runner, timeout_ms):
        with pytest.raises(ShelfValidationError):
            manager.stop_service("svc.exe", timeout_ms=timeout_ms)

        runner.start.assert_not_called()

    def test_perform_with_options(self, manager, runner, process):
        manager.perform(
            ServiceOperation.STOP,
            "svc.exe",
            OperationOptions(instance_name="A", timeout_ms=5000),
        )

        assert runner.start.call_args[0][1].arguments == "stop A"
        process.wait_for_exit.assert_called_once_with(5000)

    def test_perform_defaults(self, manager, runner, process):
        manager.perform(ServiceOperation.START, "svc.exe")

        assert runner.start.call_args[0][1].arguments == "start"
        process.wait_for_exit.assert_called_once_with(60000)

    def test_perform_rejects_install(self, manager, runner):
        with pytest.raises(ValueError, match="install_service"):
            manager.perform(ServiceOperation.INSTALL, "svc.exe")

        runner.start.assert_not_called()


class TestPathHandling:
    """Executable path validation and resolution."""

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    @pytest.mark.parametrize("file_path", [None, "", "   "])
    def test_missing_path_fails_before_launch(self, manager, runner, method, file_path):
        with pytest.raises(ShelfValidationError) as exc_info:
            getattr(manager, method)(file_path)

        assert exc_info.value.argument == "file_path"
        runner.start.assert_not_called()

    def test_missing_path_is_value_error(self, manager):
        with pytest.raises(ValueError):
            manager.start_service(None)

    def test_absolute_path_is_kept(self, manager, runner, tmp_path):
        exe = tmp_path / "bin" / "svc.exe"

        manager.start_service(exe)

        assert runner.start.call_args[0][0] == exe

    def test_relative_path_resolves_against_working_directory(self, runner, logger, tmp_path):
        manager = ServiceManager(LocalEnvironment(tmp_path / "deploy"), runner, logger)

        manager.stop_service(Path("bin") / "svc.exe")

        assert runner.start.call_args[0][0] == tmp_path / "deploy" / "bin" / "svc.exe"

    def test_environment_is_consulted(self, runner, logger):
        environment = MagicMock()
        environment.make_absolute.return_value = Path("/srv/svc.exe")
        environment.working_directory = Path("/srv")
        manager = ServiceManager(environment, runner, logger)

        manager.start_service("svc.exe")

        environment.make_absolute.assert_called_once_with("svc.exe")
        assert runner.start.call_args[0][0] == Path("/srv/svc.exe")


class TestOutcomes:
    """Timeouts and launch failures."""

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    def test_timeout_is_not_a_failure(self, manager, process, logger, method):
        process.wait_for_exit.return_value = ProcessOutcome.TIMED_OUT

        outcome = getattr(manager, method)("svc.exe")

        assert outcome is ProcessOutcome.TIMED_OUT
        logger.warning.assert_called_once_with("Process timed out!")
        logger.verbose.assert_called_once()

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    def test_launch_failure_propagates_unchanged(self, manager, runner, logger, method):
        error = FileNotFoundError(2, "No such file or directory", "svc.exe")
        runner.start.side_effect = error

        with pytest.raises(FileNotFoundError) as exc_info:
            getattr(manager, method)("svc.exe")

        assert exc_info.value is error
        logger.verbose.assert_not_called()
        logger.warning.assert_not_called()

    def test_exit_code_is_not_inspected(self, manager, process, logger):
        process.exit_code = 1

        outcome = manager.stop_service("svc.exe")

        assert outcome is ProcessOutcome.COMPLETED
        logger.verbose.assert_called_once_with("Topshelf service stopped.")


class TestConstruction:
    """Constructor dependency checks."""

    @pytest.mark.parametrize("missing", ["environment", "runner", "logger"])
    def test_dependencies_are_required(self, runner, logger, tmp_path, missing):
        deps = {"environment": LocalEnvironment(tmp_path), "runner": runner, "logger": logger}
        deps[missing] = None

        with pytest.raises(ShelfValidationError) as exc_info:
            ServiceManager(**deps)

        assert exc_info.value.argument == missing
