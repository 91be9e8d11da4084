"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from pub_validator.cache import PackageCache
from pub_validator.models import Package
from pub_validator.parsers.semver import Version
from pub_validator.validator import ValidationContext


class StubCache(PackageCache):
    """PackageCache answering from a fixed name -> versions mapping."""

    def __init__(self, published: dict[str, list[str]] | None = None) -> None:
        super().__init__("https://pub.example")
        self.published = published or {}
        self.lookups: list[str] = []

    def _fetch_versions(self, name: str) -> list[Version]:
        self.lookups.append(name)
        return sorted(Version.parse(v) for v in self.published.get(name, []))


DEFAULT_PUBSPEC: dict[str, Any] = {
    "name": "my_package",
    "version": "1.0.0",
    "description": "A package that does useful things for testing the validation engine well.",
    "homepage": "https://example.com/my_package",
    "environment": {"sdk": ">=3.0.0 <4.0.0"},
}


@pytest.fixture
def write_package(tmp_path: Path) -> Callable[..., Path]:
    """Write a package directory with a pubspec and the given files."""

    def _write(pubspec: dict[str, Any] | None = None, files: dict[str, str | bytes] | None = None) -> Path:
        root = tmp_path / "pkg"
        root.mkdir(exist_ok=True)
        (root / "pubspec.yaml").write_text(
            yaml.safe_dump(DEFAULT_PUBSPEC if pubspec is None else pubspec), encoding="utf-8"
        )
        for name, content in (files or {}).items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def make_context(write_package: Callable[..., Path]) -> Callable[..., ValidationContext]:
    def _make(
        pubspec: dict[str, Any] | None = None,
        files: dict[str, str | bytes] | None = None,
        *,
        package_size: int = 1024,
        published: dict[str, list[str]] | None = None,
        sdk_version: str = "3.5.0",
    ) -> ValidationContext:
        root = write_package(pubspec, files)
        listed = ["pubspec.yaml", *sorted(files or {})]
        return ValidationContext(
            package=Package.load(root),
            cache=StubCache(published),
            package_size=package_size,
            server_url="https://pub.example",
            files=tuple(listed),
            sdk_version=Version.parse(sdk_version),
        )

    return _make
