"""Publish-readiness checks run by the orchestrator."""

from .changelog import ChangelogValidator
from .dependency import DependencyValidator
from .dependency_override import DependencyOverrideValidator
from .directory import DirectoryValidator
from .executable import ExecutableValidator
from .license import LicenseValidator
from .name import NameValidator
from .pubspec_field import PubspecFieldValidator
from .readme import ReadmeValidator
from .sdk_constraint import SdkConstraintValidator
from .size import SizeValidator

__all__ = [
    "ChangelogValidator",
    "DependencyValidator",
    "DependencyOverrideValidator",
    "DirectoryValidator",
    "ExecutableValidator",
    "LicenseValidator",
    "NameValidator",
    "PubspecFieldValidator",
    "ReadmeValidator",
    "SdkConstraintValidator",
    "SizeValidator",
]
