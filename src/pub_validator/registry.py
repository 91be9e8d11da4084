"""The ordered set of checks a validation run executes.

Report order follows registration order. Add new checks by appending their
class to ``VALIDATORS``.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeAlias

from .config import Settings
from .validator import Validator
from .validators import (
    ChangelogValidator,
    DependencyOverrideValidator,
    DependencyValidator,
    DirectoryValidator,
    ExecutableValidator,
    LicenseValidator,
    NameValidator,
    PubspecFieldValidator,
    ReadmeValidator,
    SdkConstraintValidator,
    SizeValidator,
)

ValidatorFactory: TypeAlias = Callable[[], Validator]

VALIDATORS: tuple[type[Validator], ...] = (
    NameValidator,
    PubspecFieldValidator,
    LicenseValidator,
    DirectoryValidator,
    ExecutableValidator,
    ReadmeValidator,
    ChangelogValidator,
    SdkConstraintValidator,
    DependencyValidator,
    DependencyOverrideValidator,
    SizeValidator,
)

# Checks that take run settings; every other check is built with no arguments.
_FACTORY_OVERRIDES: dict[type[Validator], Callable[[Settings], ValidatorFactory]] = {
    SizeValidator: lambda settings: functools.partial(
        SizeValidator, max_size=settings.max_package_size
    ),
}


def default_validators(settings: Settings | None = None) -> list[ValidatorFactory]:
    """Return a factory per registered check, configured from ``settings``."""
    settings = settings or Settings()
    return [
        _FACTORY_OVERRIDES[validator_cls](settings)
        if validator_cls in _FACTORY_OVERRIDES
        else validator_cls
        for validator_cls in VALIDATORS
    ]
