"""Configuration loader for validation runs.

Settings come from an optional JSON file (explicit path, or the file named by
``PUB_VALIDATOR_CONFIG``), then environment overrides. Every key is optional:

    {
      "server_url": "https://pub.dev",
      "sdk_version": "3.5.0",
      "max_package_size": 104857600
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .parsers.semver import Version

CONFIG_PATH_ENV_VAR = "PUB_VALIDATOR_CONFIG"
SERVER_URL_ENV_VAR = "PUB_HOSTED_URL"
SDK_VERSION_ENV_VAR = "PUB_VALIDATOR_SDK_VERSION"

DEFAULT_SERVER_URL = "https://pub.dev"
DEFAULT_SDK_VERSION = Version(3, 5, 0)
DEFAULT_MAX_PACKAGE_SIZE = 100 * 1024 * 1024

_KNOWN_KEYS = {"server_url", "sdk_version", "max_package_size"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    server_url: str = DEFAULT_SERVER_URL
    sdk_version: Version = DEFAULT_SDK_VERSION
    max_package_size: int = DEFAULT_MAX_PACKAGE_SIZE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating field types."""
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(sorted(unknown))}")

        server_url = data.get("server_url", DEFAULT_SERVER_URL)
        if not isinstance(server_url, str) or not server_url:
            raise ConfigError("'server_url' must be a non-empty string")

        sdk_version = DEFAULT_SDK_VERSION
        if "sdk_version" in data:
            sdk_version = _parse_sdk_version(data["sdk_version"])

        max_size = data.get("max_package_size", DEFAULT_MAX_PACKAGE_SIZE)
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
            raise ConfigError("'max_package_size' must be a positive integer")

        return cls(
            server_url=server_url.rstrip("/"),
            sdk_version=sdk_version,
            max_package_size=max_size,
        )


def _parse_sdk_version(value: Any) -> Version:
    if not isinstance(value, str):
        raise ConfigError("'sdk_version' must be a string")
    try:
        return Version.parse(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid 'sdk_version': {exc}") from exc


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. PUB_VALIDATOR_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return data


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings, applying environment overrides.

    Args:
        path: Optional path to a JSON config file. If not provided, uses the
            PUB_VALIDATOR_CONFIG env var or falls back to built-in defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    data = _read_config_file(config_path) if config_path is not None else {}
    settings = Settings.from_dict(data)

    server_url = os.environ.get(SERVER_URL_ENV_VAR)
    if server_url:
        settings = replace(settings, server_url=server_url.rstrip("/"))

    sdk_version = os.environ.get(SDK_VERSION_ENV_VAR)
    if sdk_version:
        settings = replace(settings, sdk_version=_parse_sdk_version(sdk_version))

    return settings
