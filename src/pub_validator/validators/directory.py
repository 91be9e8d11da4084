"""Check top-level directory names against the conventional layout."""

from __future__ import annotations

from ..validator import Validator

CONVENTIONAL_NAMES = {
    "benchmarks": "benchmark",
    "docs": "doc",
    "examples": "example",
    "sample": "example",
    "samples": "example",
    "tests": "test",
    "tools": "tool",
}


class DirectoryValidator(Validator):
    name = "directory"

    async def validate(self) -> None:
        seen: list[str] = []
        for file in self.files:
            if "/" not in file:
                continue
            directory = file.split("/", 1)[0]
            if directory in CONVENTIONAL_NAMES and directory not in seen:
                seen.append(directory)

        for directory in seen:
            self.warning(
                f'Rename the top-level "{directory}" directory to '
                f'"{CONVENTIONAL_NAMES[directory]}".\n'
                "The Pub layout convention is to use singular directory names.\n"
                "Plural names won't be correctly identified by Pub and other tools."
            )
