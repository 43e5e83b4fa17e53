"""
Tests for shelfctl configuration loading.

Tests verify:
- Defaults apply when no config file exists
- .shelfctl/config.toml and pyproject.toml [tool.shelfctl] are discovered
- Environment variables override TOML values
- Broken or missing config files are reported
- CONFIGURABLE_KEYS defaults match the Pydantic model defaults
"""

from pathlib import Path

import pytest

from shelfctl.cli.context import ShelfContext
from shelfctl.config import CONFIGURABLE_KEYS, config_get, config_list, load_config
from shelfctl.core.exceptions import ConfigFileError, ConfigValidationError
from shelfctl.core.models.config import LoggingConfig, ServiceDefaultsConfig
from shelfctl.core.settings import find_config_file, load_settings


def _write_config(root: Path, content: str) -> Path:
    config_dir = root / ".shelfctl"
    config_dir.mkdir(exist_ok=True)
    config_file = config_dir / "config.toml"
    config_file.write_text(content)
    return config_file


class TestLoadSettings:
    """Tests for load_settings and load_config."""

    def test_defaults_without_config_file(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))

        assert settings.service.timeout_ms == 60000
        assert settings.service.working_directory is None
        assert settings.service.legacy_servicename_quirk is False
        assert settings.logging.level == "warning"
        assert settings.config_file is None
        assert settings.config_error is None

    def test_reads_config_toml(self, tmp_path: Path) -> None:
        config_file = _write_config(
            tmp_path,
            '[service]\ntimeout_ms = 5000\nlegacy_servicename_quirk = true\n\n[logging]\nlevel = "VERBOSE"\n',
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.service.timeout_ms == 5000
        assert settings.service.legacy_servicename_quirk is True
        assert settings.logging.level == "verbose"
        assert settings.config_file == str(config_file)

    def test_searches_parent_directories(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[service]\ntimeout_ms = 2500\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert load_settings(start_dir=str(nested)).service.timeout_ms == 2500

    def test_reads_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.shelfctl.service]\ntimeout_ms = 9000\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.service.timeout_ms == 9000
        assert find_config_file(str(tmp_path)) == tmp_path / "pyproject.toml"

    def test_pyproject_without_tool_table_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        assert find_config_file(str(tmp_path)) is None

    def test_environment_overrides_toml(self, tmp_path: Path, monkeypatch) -> None:
        _write_config(tmp_path, "[service]\ntimeout_ms = 5000\n")
        monkeypatch.setenv("SHELFCTL_SERVICE__TIMEOUT_MS", "120000")

        assert load_settings(start_dir=str(tmp_path)).service.timeout_ms == 120000

    def test_invalid_toml_is_reported(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[service\ntimeout_ms = ")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.service.timeout_ms == 60000
        assert settings.config_error is not None
        assert "Failed to parse config file" in settings.config_error

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[service]\ntimeout_ms = 5000\n")
        custom = tmp_path / "custom.toml"
        custom.write_text("[service]\ntimeout_ms = 750\n")

        settings = load_settings(config_path=custom, start_dir=str(tmp_path))

        assert settings.service.timeout_ms == 750
        assert settings.config_file == str(custom)

    def test_missing_explicit_config_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileError) as exc_info:
            load_settings(config_path=tmp_path / "missing.toml")

        assert "missing.toml" in str(exc_info.value)

    def test_load_config_returns_nested_dict(self, tmp_path: Path) -> None:
        config_file = _write_config(tmp_path, "[service]\ntimeout_ms = 5000\n")

        config = load_config(start_dir=str(tmp_path))

        assert config["service"]["timeout_ms"] == 5000
        assert config["logging"]["file"] is False
        assert config["_config_file"] == str(config_file)


class TestConfigGet:
    """Tests for config_get and config_list."""

    def test_get_value(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[service]\nworking_directory = "C:/services"\n')

        assert config_get("service.working_directory", start_dir=str(tmp_path)) == "C:/services"

    def test_get_default(self, tmp_path: Path) -> None:
        assert config_get("service.timeout_ms", start_dir=str(tmp_path)) == 60000

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            config_get("service.retries")

        assert exc_info.value.context["key"] == "service.retries"

    def test_list_returns_configurable_keys(self) -> None:
        assert config_list() is CONFIGURABLE_KEYS


class TestConfigurableKeys:
    """CONFIGURABLE_KEYS stays in sync with the config models."""

    @pytest.mark.parametrize("key", sorted(CONFIGURABLE_KEYS))
    def test_default_matches_model(self, key: str) -> None:
        section, field = key.split(".")
        model = {"logging": LoggingConfig, "service": ServiceDefaultsConfig}[section]

        assert CONFIGURABLE_KEYS[key]["default"] == model.model_fields[field].default

    def test_every_model_field_is_listed(self) -> None:
        listed = set(CONFIGURABLE_KEYS)

        for field in LoggingConfig.model_fields:
            assert f"logging.{field}" in listed
        for field in ServiceDefaultsConfig.model_fields:
            assert f"service.{field}" in listed


class TestShelfContext:
    """ShelfContext picks its defaults up from configuration."""

    def test_default_timeout_from_config(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[service]\ntimeout_ms = 4321\n")

        ctx = ShelfContext.create(cwd=tmp_path)

        assert ctx.default_timeout_ms == 4321
        assert ctx.cwd == tmp_path

    def test_missing_config_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileError):
            ShelfContext.create(cwd=tmp_path, config_path=tmp_path / "missing.toml")
