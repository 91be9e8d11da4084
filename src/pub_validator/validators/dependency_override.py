"""Flag dependency overrides, which are ignored for published packages."""

from __future__ import annotations

from ..validator import Validator


class DependencyOverrideValidator(Validator):
    name = "dependency_override"

    async def validate(self) -> None:
        overridden = sorted(self.package.dependency_overrides)
        if overridden:
            self.warning(
                f"Your pubspec.yaml has dependency_overrides for {', '.join(overridden)}.\n"
                "They only apply to this package's own development and are "
                "ignored by packages depending on it."
            )
