"""
Click command implementations for shelfctl CLI.

Each module corresponds to a shelfctl command (e.g., install.py implements
'shelfctl install'). Commands are registered with the main CLI group via
register_commands() in shelfctl.cli.
"""

from .config import config
from .install import install
from .start import start
from .stop import stop
from .uninstall import uninstall

COMMANDS = [
    config,
    install,
    start,
    stop,
    uninstall,
]

__all__ = [
    "COMMANDS",
    "config",
    "install",
    "start",
    "stop",
    "uninstall",
]
