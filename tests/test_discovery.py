"""Tests for package file discovery."""

from __future__ import annotations

import tarfile
from pathlib import Path

from pub_validator.discovery import archive_size, list_package_files


class TestListPackageFiles:
    def test_lists_relative_sorted_files(self, write_package) -> None:
        root: Path = write_package(
            files={
                "lib/b.dart": "",
                "lib/a.dart": "",
                "README.md": "",
                "pubspec.lock": "",
                ".dart_tool/package_config.json": "{}",
                "build/out.js": "",
                "example/pubspec.lock": "",
            }
        )
        assert list_package_files(root) == [
            "README.md",
            "example/pubspec.lock",
            "lib/a.dart",
            "lib/b.dart",
            "pubspec.yaml",
        ]


class TestArchiveSize:
    def test_matches_written_archive(self, write_package, tmp_path: Path) -> None:
        root: Path = write_package(files={"lib/a.dart": "void main() {}\n" * 100})
        files = list_package_files(root)
        size = archive_size(root, files)
        assert size > 0

        target = tmp_path / "out.tar.gz"
        with tarfile.open(target, "w:gz") as archive:
            for file in files:
                archive.add(root / file, arcname=file, recursive=False)
        with tarfile.open(target, "r:gz") as archive:
            assert archive.getnames() == files
