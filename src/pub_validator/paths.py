"""Scope a package's file list to a directory subtree."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def canonicalize(path: str | Path) -> str:
    """Return an absolute, normalised path, case-folded where the OS is case-insensitive.

    Symlinks are not resolved.
    """
    return os.path.normcase(os.path.normpath(os.path.abspath(path)))


def is_within(parent: str, child: str) -> bool:
    """Whether canonical ``child`` lies strictly inside canonical ``parent``."""
    if parent == child:
        return False
    try:
        return os.path.commonpath([parent, child]) == parent
    except ValueError:
        # Different drives on Windows.
        return False


def files_beneath(
    files: Iterable[str],
    package_dir: str | Path,
    path: str,
    *,
    recursive: bool,
) -> list[str]:
    """Return the ``files`` that are ``path`` or inside ``path``.

    ``path`` is relative to ``package_dir``; relative entries in ``files`` are
    resolved against ``package_dir`` too. In non-recursive mode only the
    immediate children of ``path`` are kept. Input order is preserved.
    """
    base = canonicalize(os.path.join(package_dir, path))
    selected: list[str] = []
    for file in files:
        absolute = os.path.join(package_dir, file)
        if recursive:
            candidate = canonicalize(absolute)
            if candidate == base or is_within(base, candidate):
                selected.append(file)
        elif canonicalize(os.path.dirname(absolute)) == base:
            selected.append(file)
    return selected
