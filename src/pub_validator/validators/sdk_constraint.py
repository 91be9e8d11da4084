"""Check the package's Dart SDK constraint."""

from __future__ import annotations

from ..parsers.semver import Version
from ..validator import Validator

# Pubspec fields and the first SDK release that understands them.
FEATURE_SDK_VERSIONS: dict[str, Version] = {
    "funding": Version(2, 15, 0),
    "topics": Version(2, 17, 0),
    "screenshots": Version(2, 17, 0),
    "resolution": Version(3, 5, 0),
    "workspace": Version(3, 5, 0),
}


class SdkConstraintValidator(Validator):
    name = "sdk_constraint"

    async def validate(self) -> None:
        constraint = self.package.sdk_constraint
        if self.package.original_sdk_constraint is None:
            self.error(
                "Your pubspec.yaml has no SDK constraint.\n"
                "Add an `environment: sdk:` entry restricting the supported Dart SDK versions."
            )
        elif constraint.max is None:
            self.error(
                "Published packages should have an upper bound constraint on the "
                "Dart SDK (typically this should restrict to less than the next "
                "major version to guard against breaking changes).\n"
                "See https://dart.dev/tools/pub/pubspec#sdk-constraints for "
                "instructions on setting an sdk version constraint."
            )

        for field, first_version in FEATURE_SDK_VERSIONS.items():
            if field in self.package.pubspec:
                self.validate_sdk_constraint(
                    first_version,
                    f'The "{field}" field requires Dart SDK {first_version} or later.',
                )
