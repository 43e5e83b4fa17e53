"""Configuration loading for shelfctl."""

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigValidationError
from .core.settings import load_settings

# Config keys shown by `shelfctl config list`
CONFIGURABLE_KEYS = {
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level: debug, verbose, info, warning or error",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Write log messages to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Write log messages to ~/.shelfctl/shelfctl.log",
    },
    "service.timeout_ms": {
        "type": int,
        "default": 60000,
        "description": "Milliseconds to wait for the service executable",
    },
    "service.working_directory": {
        "type": str,
        "default": None,
        "description": "Directory relative executable paths are resolved against",
    },
    "service.legacy_servicename_quirk": {
        "type": bool,
        "default": False,
        "description": "Fill --servicename from the description (older tooling behaviour)",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'service.timeout_ms'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    return settings.to_dict()


def config_get(key: str, start_dir: str | None = None, config_path: Path | None = None) -> Any:
    """Get a config value.

    Raises:
        ConfigValidationError: If key is not a known config key
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS.keys())}",
            key=key,
        )
    config = load_config(config_path=config_path, start_dir=start_dir)
    return _get_nested(config, key)


def config_list():
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS
