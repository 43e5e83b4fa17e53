"""
Pydantic models for shelfctl.

Service lifecycle values and configuration sections.
"""

from .base import ImmutableModel, ShelfBaseModel
from .config import ConfigBaseModel, LoggingConfig, LogLevel, ServiceDefaultsConfig
from .service import (
    DEFAULT_TIMEOUT_MS,
    OperationOptions,
    ProcessOutcome,
    ServiceOperation,
    ServiceSettings,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "ConfigBaseModel",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "OperationOptions",
    "ProcessOutcome",
    "ServiceDefaultsConfig",
    "ServiceOperation",
    "ServiceSettings",
    "ShelfBaseModel",
]
