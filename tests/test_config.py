"""Tests for settings loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pub_validator.config import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_MAX_PACKAGE_SIZE,
    DEFAULT_SERVER_URL,
    SDK_VERSION_ENV_VAR,
    SERVER_URL_ENV_VAR,
    Settings,
    load_settings,
)
from pub_validator.errors import ConfigError
from pub_validator.parsers.semver import Version


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for var in (CONFIG_PATH_ENV_VAR, SERVER_URL_ENV_VAR, SDK_VERSION_ENV_VAR):
        monkeypatch.delenv(var, raising=False)


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings == Settings()
        assert settings.server_url == DEFAULT_SERVER_URL
        assert settings.max_package_size == DEFAULT_MAX_PACKAGE_SIZE

    def test_from_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            {"server_url": "https://pub.example/", "sdk_version": "3.6.0-1.0.dev", "max_package_size": 10},
        )
        settings = load_settings(path)
        assert settings.server_url == "https://pub.example"
        assert settings.sdk_version == Version.parse("3.6.0-1.0.dev")
        assert settings.max_package_size == 10

    def test_env_config_path(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(_write(tmp_path, {"max_package_size": 5})))
        assert load_settings().max_package_size == 5

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv(SERVER_URL_ENV_VAR, "https://mirror.example/")
        monkeypatch.setenv(SDK_VERSION_ENV_VAR, "3.1.0")
        settings = load_settings()
        assert settings.server_url == "https://mirror.example"
        assert settings.sdk_version == Version(3, 1, 0)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings(path)

    @pytest.mark.parametrize(
        "data, message",
        [
            ([], "must be a JSON object"),
            ({"colour": "blue"}, "Unknown configuration key"),
            ({"server_url": ""}, "server_url"),
            ({"sdk_version": 3}, "sdk_version"),
            ({"sdk_version": "three"}, "Invalid 'sdk_version'"),
            ({"max_package_size": 0}, "max_package_size"),
            ({"max_package_size": True}, "max_package_size"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, data, message: str) -> None:
        with pytest.raises(ConfigError, match=message):
            load_settings(_write(tmp_path, data))
