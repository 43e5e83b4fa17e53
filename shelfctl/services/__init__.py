"""
Services for shelfctl lifecycle operations.

- arguments: renders Topshelf command lines
- supervisor: waits for a launched process with a deadline
- manager: install/uninstall/start/stop entry points
- process: default subprocess launcher and path resolver
- logging: stdlib-backed ILogger implementations
"""

from .arguments import ProcessArgumentBuilder, build_command_arguments, build_install_arguments
from .manager import ServiceManager
from .process import LocalEnvironment, SubprocessHandle, SubprocessRunner
from .supervisor import ProcessSupervisor

__all__ = [
    "LocalEnvironment",
    "ProcessArgumentBuilder",
    "ProcessSupervisor",
    "ServiceManager",
    "SubprocessHandle",
    "SubprocessRunner",
    "build_command_arguments",
    "build_install_arguments",
]
