"""Package manifest model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..errors import ManifestError
from ..parsers.semver import Version, VersionRange, parse_constraint

PUBSPEC_NAME = "pubspec.yaml"


def _section(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ManifestError(f"'{key}' in {PUBSPEC_NAME} must be a map")
    return {str(k): v for k, v in value.items()}


@dataclass(frozen=True)
class Package:
    """A package as described by its pubspec.yaml."""

    name: str
    directory: Path
    version: Version | None = None
    sdk_constraint: VersionRange = field(default_factory=VersionRange.any)
    original_sdk_constraint: str | None = None
    dependencies: Mapping[str, Any] = field(default_factory=dict)
    dev_dependencies: Mapping[str, Any] = field(default_factory=dict)
    dependency_overrides: Mapping[str, Any] = field(default_factory=dict)
    executables: Mapping[str, str | None] = field(default_factory=dict)
    pubspec: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_pubspec(cls, data: Mapping[str, Any], directory: Path) -> Package:
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ManifestError(f"{PUBSPEC_NAME} is missing required 'name' field")

        version: Version | None = None
        raw_version = data.get("version")
        if raw_version is not None:
            try:
                version = Version.parse(str(raw_version))
            except ValueError as exc:
                raise ManifestError(f"Invalid 'version' field: {exc}") from exc

        environment = _section(data, "environment")
        original_sdk = environment.get("sdk")
        sdk_constraint = VersionRange.any()
        if original_sdk is not None:
            try:
                sdk_constraint = parse_constraint(str(original_sdk))
            except ValueError as exc:
                raise ManifestError(f"Invalid SDK constraint '{original_sdk}': {exc}") from exc

        executables = _section(data, "executables")

        return cls(
            name=name,
            directory=directory,
            version=version,
            sdk_constraint=sdk_constraint,
            original_sdk_constraint=None if original_sdk is None else str(original_sdk),
            dependencies=_section(data, "dependencies"),
            dev_dependencies=_section(data, "dev_dependencies"),
            dependency_overrides=_section(data, "dependency_overrides"),
            executables={k: None if v is None else str(v) for k, v in executables.items()},
            pubspec=dict(data),
        )

    @classmethod
    def load(cls, directory: Path | str) -> Package:
        """Read ``pubspec.yaml`` from ``directory``.

        Raises:
            ManifestError: If the manifest is missing, unreadable or malformed.
        """
        directory = Path(directory).resolve()
        path = directory / PUBSPEC_NAME
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Failed to read {path}: {exc}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ManifestError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ManifestError(f"{path} must contain a map at the top level")

        return cls.from_pubspec(data, directory)
