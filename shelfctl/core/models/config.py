"""
Configuration models.

Provides Pydantic models for shelfctl configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import ShelfBaseModel
from .service import DEFAULT_TIMEOUT_MS

# Type aliases
LogLevel = Literal["debug", "verbose", "info", "warning", "error"]


class ConfigBaseModel(ShelfBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ServiceDefaultsConfig(ConfigBaseModel):
    """Defaults applied to lifecycle operations."""

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    working_directory: str | None = None
    legacy_servicename_quirk: bool = False

