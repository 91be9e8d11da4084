"""Data models for packages under validation."""

from __future__ import annotations

from .package import PUBSPEC_NAME, Package

__all__ = [
    "PUBSPEC_NAME",
    "Package",
]
