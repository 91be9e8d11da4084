"""Check that hosted dependencies are constrained and resolvable."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..parsers.semver import VersionRange, parse_constraint
from ..validator import Validator

_UNHOSTED_SOURCES = ("path", "git")


class DependencyValidator(Validator):
    name = "dependency"

    async def validate(self) -> None:
        for dependency, spec in self.package.dependencies.items():
            await self._validate_dependency(dependency, spec)

    async def _validate_dependency(self, dependency: str, spec: Any) -> None:
        if isinstance(spec, Mapping):
            if "sdk" in spec:
                return
            for source in _UNHOSTED_SOURCES:
                if source in spec:
                    self.error(
                        f'Don\'t depend on "{dependency}" from the {source} source.\n'
                        "Published packages can only depend on hosted packages."
                    )
                    return
            spec = spec.get("version")

        if spec is None or str(spec).strip() == "any":
            self.warning(
                f'Your dependency on "{dependency}" should have a version constraint.\n'
                "Without one, future breaking releases of it may break your package."
            )
            constraint = VersionRange.any()
        else:
            try:
                constraint = parse_constraint(str(spec))
            except ValueError as exc:
                self.error(f'Your dependency on "{dependency}" has an invalid constraint: {exc}')
                return

        versions = await self.cache.versions(dependency)
        if not versions:
            self.error(f'Your dependency "{dependency}" doesn\'t exist on {self.server_url}.')
        elif not any(constraint.allows(version) for version in versions):
            self.error(
                f'No published version of "{dependency}" matches "{spec}".\n'
                f"The latest version is {versions[-1]}."
            )
