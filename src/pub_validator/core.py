"""Core validation entrypoints.

This module MUST NOT print anything besides the rendered report, so it can be
used by both the CLI and other tools that decide whether to publish.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from .cache import PackageCache
from .config import Settings
from .discovery import archive_size, list_package_files
from .errors import ValidatorFault
from .models import Package
from .registry import ValidatorFactory, default_validators
from .report import render_report
from .validator import Diagnostics, ValidationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    """Merged findings of a validation run, plus the rendered report."""

    hints: tuple[str, ...]
    warnings: tuple[str, ...]
    errors: tuple[str, ...]
    report: str

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


async def run_all(
    context: ValidationContext,
    validators: Iterable[ValidatorFactory] | None = None,
    *,
    output: Callable[[str], None] | None = print,
) -> ValidationOutcome:
    """Run every validator against ``context`` and report their findings.

    Params:
        context: shared, read-only inputs for this run
        validators: factories for the checks to run, in report order; defaults
            to the registered checks
        output: receives the rendered report when there is anything to report

    All validators run concurrently and every one is awaited, even when another
    has already failed. If any validator raises, ValidatorFault is raised for
    the first one in registration order and no report is produced.
    """
    factories = list(validators) if validators is not None else default_validators()
    instances = [factory() for factory in factories]
    for validator in instances:
        validator.bind(context)

    logger.debug("Running %d validators on %s", len(instances), context.package.name)
    results = await asyncio.gather(
        *(validator.run() for validator in instances), return_exceptions=True
    )

    diagnostics: list[Diagnostics] = []
    for validator, result in zip(instances, results):
        if isinstance(result, Exception):
            logger.error("Validator %s failed: %r", validator.name, result)
            raise ValidatorFault(validator.name, result) from result
        if isinstance(result, BaseException):
            raise result
        diagnostics.append(result)

    hints = tuple(hint for d in diagnostics for hint in d.hints)
    warnings = tuple(warning for d in diagnostics for warning in d.warnings)
    errors = tuple(error for d in diagnostics for error in d.errors)

    report = render_report(errors, warnings, hints)
    if report and output is not None:
        output(report)

    return ValidationOutcome(hints=hints, warnings=warnings, errors=errors, report=report)


async def validate_package(
    root: Path,
    settings: Settings | None = None,
    *,
    package_size: int | None = None,
    output: Callable[[str], None] | None = print,
) -> ValidationOutcome:
    """Validate the package at ``root`` with the registered checks.

    Params:
        root: package directory holding pubspec.yaml
        settings: run configuration; defaults when None
        package_size: size of the uploaded archive in bytes; computed from the
            package files when None
        output: receives the rendered report
    """
    settings = settings or Settings()
    package = await asyncio.to_thread(Package.load, root)
    files = await asyncio.to_thread(list_package_files, package.directory)
    if package_size is None:
        package_size = await asyncio.to_thread(archive_size, package.directory, files)

    with PackageCache(settings.server_url) as cache:
        context = ValidationContext(
            package=package,
            cache=cache,
            package_size=package_size,
            server_url=settings.server_url,
            files=tuple(files),
            sdk_version=settings.sdk_version,
        )
        return await run_all(context, default_validators(settings), output=output)
