"""
Core infrastructure for shelfctl.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for the manager's collaborators
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    ShelfConfigError,
    ShelfException,
    ShelfValidationError,
)

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ServiceContainer",
    "ShelfConfigError",
    "ShelfException",
    "ShelfValidationError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
