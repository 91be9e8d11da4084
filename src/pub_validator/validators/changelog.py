"""Check that the package has a CHANGELOG mentioning the current version."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..validator import Validator

_CHANGELOG_NAME = re.compile(r"^CHANGELOG(\..*)?$", re.IGNORECASE)


class ChangelogValidator(Validator):
    name = "changelog"

    async def validate(self) -> None:
        changelogs = [
            file
            for file in self.files_beneath(".", recursive=False)
            if _CHANGELOG_NAME.fullmatch(PurePosixPath(file).name)
        ]
        if not changelogs:
            self.warning(
                "Please add a `CHANGELOG.md` to your package. "
                "See https://dart.dev/tools/pub/publishing#important-files."
            )
            return

        changelog = changelogs[0]
        try:
            contents = await self.read_text(changelog)
        except UnicodeDecodeError:
            self.warning(
                f"{changelog} contains invalid UTF-8.\n"
                "This will cause it to be displayed incorrectly on the package page."
            )
            return

        version = self.package.version
        if version is not None and str(version) not in contents:
            self.warning(
                f"{changelog} doesn't mention current version ({version}).\n"
                "Consider updating it with notes on this version prior to publication."
            )
