"""Check that every declared executable has a script in bin/."""

from __future__ import annotations

from pathlib import PurePosixPath

from ..validator import Validator


class ExecutableValidator(Validator):
    name = "executable"

    async def validate(self) -> None:
        scripts = {PurePosixPath(file).name for file in self.files_beneath("bin", recursive=False)}
        for executable, script in self.package.executables.items():
            script_name = f"{script or executable}.dart"
            if script_name not in scripts:
                self.warning(
                    f'Your pubspec.yaml lists an executable "{executable}" that '
                    f"isn't in bin/.\nExpected to find bin/{script_name}."
                )
