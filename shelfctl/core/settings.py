"""
Pydantic Settings for shelfctl configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError
from .models.config import LoggingConfig, ServiceDefaultsConfig

CONFIG_DIR_NAME = ".shelfctl"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TOOL_KEY = "shelfctl"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .shelfctl/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.shelfctl] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if PYPROJECT_TOOL_KEY in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get(PYPROJECT_TOOL_KEY, {})

            self._data = data
            self._data["_config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            _get_logger().warning("Failed to parse config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            _get_logger().warning("Failed to read config file %s: %s", path, e)
            self._data["_config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the TOML sections known to the settings model."""
        data = self._load_toml()
        return {k: v for k, v in data.items() if k in self.settings_cls.model_fields}


class ShelfSettings(BaseSettings):
    """shelfctl settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (SHELFCTL_<section>__<field>)
    3. TOML config file (.shelfctl/config.toml or pyproject.toml [tool.shelfctl])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "SHELFCTL_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    logging: LoggingConfig = LoggingConfig()
    service: ServiceDefaultsConfig = ServiceDefaultsConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading between environment variables and defaults.

        Note: sources are built by pydantic, so the config path and start
        directory are passed through module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were loaded from."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Error message if the TOML file could not be loaded."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        result: dict[str, Any] = {
            "logging": self.logging.model_dump(),
            "service": self.service.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> ShelfSettings:
    """Load shelfctl settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        ShelfSettings instance with all sources merged

    Raises:
        ConfigFileError: If an explicit config_path does not exist
    """
    global _current_config_path, _current_start_dir

    if config_path is not None and not config_path.is_file():
        raise ConfigFileError("Config file not found", file_path=str(config_path))

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = ShelfSettings()

        # Copy internal fields from TOML source
        toml_data = TomlConfigSource(ShelfSettings, config_path, start_dir)._load_toml()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]
        if "_config_error" in toml_data:
            settings._config_error = toml_data["_config_error"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
