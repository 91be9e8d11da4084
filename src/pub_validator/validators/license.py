"""Check that the package ships a license at its root."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..validator import Validator

_LICENSE_NAME = re.compile(
    r"^(([a-zA-Z0-9]+[-_])?(LICENSE|COPYING)|UNLICENSE)(\..*)?$", re.IGNORECASE
)


class LicenseValidator(Validator):
    name = "license"

    async def validate(self) -> None:
        licenses = [
            file
            for file in self.files_beneath(".", recursive=False)
            if _LICENSE_NAME.fullmatch(PurePosixPath(file).name)
        ]
        if not licenses:
            self.error(
                "You must have a LICENSE file in the root directory.\n"
                "An open-source license helps ensure people can legally use your code."
            )
            return

        if not any(PurePosixPath(file).name == "LICENSE" for file in licenses):
            self.warning(
                f"Please consider renaming {PurePosixPath(licenses[0]).name} to `LICENSE`.\n"
                "Some tools only detect a license file with that exact name."
            )
