"""
Interface definitions for shelfctl's collaborators.

These define the contracts that implementations must follow so the
service manager can be wired with real or stub collaborators.
"""

from .logger import ILogger
from .process import IEnvironment, IProcess, IProcessRunner, ProcessSettings

__all__ = [
    "IEnvironment",
    "ILogger",
    "IProcess",
    "IProcessRunner",
    "ProcessSettings",
]
