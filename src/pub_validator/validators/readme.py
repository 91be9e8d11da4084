"""Check that the package has a readable README."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..validator import Validator

_README_NAME = re.compile(r"^README(\..*)?$", re.IGNORECASE)


class ReadmeValidator(Validator):
    name = "readme"

    async def validate(self) -> None:
        readmes = sorted(
            (
                file
                for file in self.files_beneath(".", recursive=False)
                if _README_NAME.fullmatch(PurePosixPath(file).name)
            ),
            # Prefer the plainest name: README.md over README.txt.md.
            key=lambda file: PurePosixPath(file).name.count("."),
        )
        if not readmes:
            self.warning("Please add a README.md file that describes your package.")
            return

        readme = readmes[0]
        if PurePosixPath(readme).name != "README.md":
            self.hint(f"Please consider renaming {readme} to `README.md`.")

        try:
            await self.read_text(readme)
        except UnicodeDecodeError:
            self.warning(
                f"{readme} contains invalid UTF-8.\n"
                "This will cause it to be displayed incorrectly on the package page."
            )
