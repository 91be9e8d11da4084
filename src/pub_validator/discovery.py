"""Package file discovery and artifact sizing."""

from __future__ import annotations

import io
import tarfile
from collections.abc import Iterable
from pathlib import Path


EXCLUDES = {".git", ".dart_tool", "build"}

# Top-level files that are never shipped.
TOP_LEVEL_EXCLUDES = {"pubspec.lock"}


def list_package_files(root: Path) -> list[str]:
    """List the files that would be published, relative to ``root``.

    Paths use forward slashes and are sorted so runs are reproducible.
    """
    root = root.resolve()

    def should_skip(p: Path) -> bool:
        parts = set(p.parts)
        if any(ex in parts for ex in EXCLUDES):
            return True
        return len(p.parts) == 1 and p.name in TOP_LEVEL_EXCLUDES

    found: list[str] = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(root)
        if should_skip(relative):
            continue
        found.append(relative.as_posix())

    return sorted(found)


def archive_size(root: Path, files: Iterable[str]) -> int:
    """Return the size in bytes of the gzipped tarball holding ``files``."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for file in files:
            archive.add(root / file, arcname=file, recursive=False)
    return buffer.getbuffer().nbytes
