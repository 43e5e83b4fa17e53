"""
High-level lifecycle operations for Topshelf services.

ServiceManager is the public surface: install, uninstall, start and stop
a service by running its Topshelf executable with the matching verb.
Each operation validates the executable path, resolves it against the
environment's working directory, renders the arguments and hands the
launch to ProcessSupervisor.
"""

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import require_argument
from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IEnvironment, IProcessRunner, ProcessSettings
from ..core.models.service import (
    DEFAULT_TIMEOUT_MS,
    OperationOptions,
    ProcessOutcome,
    ServiceOperation,
    ServiceSettings,
)
from .arguments import build_command_arguments
from .supervisor import ProcessSupervisor, validate_timeout


class ServiceManager:
    """
    Manages Topshelf windows services through their executables.

    Usage:
        manager = ServiceManager(LocalEnvironment(), SubprocessRunner(), logger)
        manager.install_service("svc.exe", ServiceSettings(autostart=True))
        manager.stop_service("svc.exe", instance_name="A", timeout_ms=5000)
    """

    def __init__(self, environment: IEnvironment, runner: IProcessRunner, logger: ILogger) -> None:
        """
        Args:
            environment: Resolves relative executable paths
            runner: Starts the executable
            logger: Receives timeout warnings and verbose confirmations

        Raises:
            ShelfValidationError: If any dependency is None
        """
        require_argument(environment, "environment")
        require_argument(runner, "runner")
        require_argument(logger, "logger")

        self._environment = environment
        self._runner = runner
        self._logger = logger
        self._supervisor = ProcessSupervisor(logger)

    def install_service(
        self,
        file_path: str | Path,
        settings: ServiceSettings | None = None,
    ) -> ProcessOutcome:
        """
        Install a Topshelf windows service.

        Args:
            file_path: The Topshelf executable to install
            settings: Install settings; their timeout_ms bounds the wait

        Returns:
            Outcome of waiting for the executable
        """
        require_argument(file_path, "file_path")

        timeout_ms = settings.timeout_ms if settings is not None else DEFAULT_TIMEOUT_MS
        arguments = build_command_arguments(ServiceOperation.INSTALL, settings=settings)
        return self._run(ServiceOperation.INSTALL, file_path, arguments, timeout_ms)

    def uninstall_service(
        self,
        file_path: str | Path,
        instance_name: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> ProcessOutcome:
        """
        Uninstall a Topshelf windows service.

        Args:
            file_path: The Topshelf executable to uninstall
            instance_name: The instance name of the service to uninstall
            timeout_ms: Milliseconds to wait for the executable
        """
        return self.perform(
            ServiceOperation.UNINSTALL, file_path, self._options(instance_name, timeout_ms)
        )

    def start_service(
        self,
        file_path: str | Path,
        instance_name: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> ProcessOutcome:
        """
        Start a Topshelf windows service.

        Args:
            file_path: The Topshelf executable to start
            instance_name: The instance name of the service to start
            timeout_ms: Milliseconds to wait for the executable
        """
        return self.perform(
            ServiceOperation.START, file_path, self._options(instance_name, timeout_ms)
        )

    def stop_service(
        self,
        file_path: str | Path,
        instance_name: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> ProcessOutcome:
        """
        Stop a Topshelf windows service.

        Args:
            file_path: The Topshelf executable to stop
            instance_name: The instance name of the service to stop
            timeout_ms: Milliseconds to wait for the executable
        """
        return self.perform(
            ServiceOperation.STOP, file_path, self._options(instance_name, timeout_ms)
        )

    def perform(
        self,
        operation: ServiceOperation,
        file_path: str | Path,
        options: OperationOptions | None = None,
    ) -> ProcessOutcome:
        """
        Run uninstall, start or stop with explicit options.

        Raises:
            ValueError: If operation is install (use install_service)
        """
        operation = ServiceOperation(operation)
        if operation is ServiceOperation.INSTALL:
            raise ValueError("Use install_service() to install a service")
        require_argument(file_path, "file_path")

        options = options or OperationOptions()
        arguments = build_command_arguments(operation, instance_name=options.instance_name)
        return self._run(operation, file_path, arguments, options.timeout_ms)

    @staticmethod
    def _options(instance_name: str | None, timeout_ms: int) -> OperationOptions:
        validate_timeout(timeout_ms)
        return OperationOptions(instance_name=instance_name, timeout_ms=timeout_ms)

    def _run(
        self,
        operation: ServiceOperation,
        file_path: str | Path,
        arguments: str,
        timeout_ms: int,
    ) -> ProcessOutcome:
        executable = self._environment.make_absolute(file_path)
        process_settings = ProcessSettings(
            arguments=arguments,
            working_directory=self._environment.working_directory,
        )
        self._logger.debug("Executing %s %s", executable, arguments)

        outcome = self._supervisor.execute(
            lambda: self._runner.start(executable, process_settings),
            timeout_ms,
        )

        self._logger.verbose(f"Topshelf service {operation.past_tense}.")
        return outcome
