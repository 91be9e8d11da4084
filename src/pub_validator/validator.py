"""The contract every publish-readiness check implements.

A validator is created for one run, bound to the run's shared
:class:`ValidationContext`, and run once. It records its findings as errors
(block publishing), warnings (need confirmation) or hints (informational) and
hands them back as an immutable :class:`Diagnostics` snapshot.

Recording an error is how a check reports a problem with the package. Raising
an exception from ``validate`` is a fault in the check itself and aborts the
whole run.
"""

from __future__ import annotations

import abc
import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from .advisor import advise_sdk_constraint
from .cache import PackageCache
from .errors import ValidatorStateError
from .models import Package
from .parsers.semver import Version
from .paths import files_beneath


@dataclass(frozen=True)
class ValidationContext:
    """Inputs shared read-only by every validator in a run."""

    package: Package
    cache: PackageCache
    package_size: int
    server_url: str
    files: tuple[str, ...]
    sdk_version: Version


@dataclass(frozen=True)
class Diagnostics:
    """The findings of one validator, by severity."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    hints: tuple[str, ...] = ()


class Validator(abc.ABC):
    """Base class for checks that decide whether a package is fit for uploading."""

    name: ClassVar[str] = "validator"

    def __init__(self) -> None:
        self._context: ValidationContext | None = None
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._hints: list[str] = []
        self._ran = False

    def bind(self, context: ValidationContext) -> None:
        if self._context is not None:
            raise ValidatorStateError(f"Validator '{self.name}' is already bound")
        self._context = context

    @property
    def context(self) -> ValidationContext:
        if self._context is None:
            raise ValidatorStateError(f"Validator '{self.name}' has no context bound")
        return self._context

    @property
    def package(self) -> Package:
        return self.context.package

    @property
    def cache(self) -> PackageCache:
        return self.context.cache

    @property
    def package_size(self) -> int:
        return self.context.package_size

    @property
    def server_url(self) -> str:
        return self.context.server_url

    @property
    def files(self) -> tuple[str, ...]:
        return self.context.files

    @property
    def sdk_version(self) -> Version:
        return self.context.sdk_version

    def error(self, message: str) -> None:
        self._errors.append(message)

    def warning(self, message: str) -> None:
        self._warnings.append(message)

    def hint(self, message: str) -> None:
        self._hints.append(message)

    @abc.abstractmethod
    async def validate(self) -> None:
        """Inspect the package, recording errors, warnings and hints."""

    async def run(self) -> Diagnostics:
        """Validate the bound package once and return the findings."""
        if self._context is None:
            raise ValidatorStateError(f"Validator '{self.name}' must be bound before running")
        if self._ran:
            raise ValidatorStateError(f"Validator '{self.name}' has already run")
        self._ran = True
        await self.validate()
        return Diagnostics(
            errors=tuple(self._errors),
            warnings=tuple(self._warnings),
            hints=tuple(self._hints),
        )

    def files_beneath(self, path: str, *, recursive: bool) -> list[str]:
        """Return the files that are ``path`` or inside ``path`` (package-relative)."""
        return files_beneath(self.files, self.package.directory, path, recursive=recursive)

    async def read_text(self, path: str) -> str:
        """Read a package file as UTF-8 without blocking the event loop.

        Raises UnicodeDecodeError for files that aren't valid UTF-8.
        """
        file = Path(self.package.directory, path)
        return await asyncio.to_thread(file.read_text, encoding="utf-8")

    def validate_sdk_constraint(self, first_sdk_version: Version, message: str) -> None:
        """Add an error if the SDK constraint doesn't exclude SDKs older than ``first_sdk_version``."""
        advice = advise_sdk_constraint(
            self.package.sdk_constraint, first_sdk_version, self.sdk_version
        )
        if advice is not None:
            self.error(advice.render(message))
