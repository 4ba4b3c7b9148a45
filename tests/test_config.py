"""Tests for settings loading."""

import json

import pytest

from lockfile_scanner.config import (
    CONFIG_PATH_ENV_VAR,
    WARN_ONLY_ENV_VAR,
    ConfigError,
    Settings,
    load_settings,
)
from lockfile_scanner.discovery import SKIP_DIRS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(WARN_ONLY_ENV_VAR, raising=False)


def write_config(tmp_path, data) -> str:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_without_file(self):
        settings = load_settings()

        assert settings == Settings()
        assert settings.skip_directories == SKIP_DIRS
        assert settings.report_filename == "lock-files-report.json"
        assert settings.warn_only is False

    def test_explicit_file(self, tmp_path):
        path = write_config(
            tmp_path, {"skipDirectories": ["vendor"], "reportFilename": "locks.json", "warnOnly": True}
        )

        settings = load_settings(path)

        assert settings.skip_directories == frozenset({"vendor"})
        assert settings.report_filename == "locks.json"
        assert settings.warn_only is True

    def test_env_var_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, write_config(tmp_path, {"skipDirectories": ["tmp"]}))

        assert load_settings().skip_directories == frozenset({"tmp"})

    @pytest.mark.parametrize("value", ["1", "true", "YES", "y"])
    def test_warn_only_env_var(self, monkeypatch, value):
        monkeypatch.setenv(WARN_ONLY_ENV_VAR, value)

        assert load_settings().warn_only is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings(path)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"skipDirectories": "node_modules"},
            {"skipDirectories": [""]},
            {"reportFilename": ""},
            {"reportFilename": "out/report.json"},
            {"warnOnly": "yes"},
        ],
    )
    def test_invalid_values(self, tmp_path, data):
        with pytest.raises(ConfigError):
            load_settings(write_config(tmp_path, data))
