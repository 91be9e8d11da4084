"""Check that the uploaded archive isn't too big."""

from __future__ import annotations

from ..config import DEFAULT_MAX_PACKAGE_SIZE
from ..validator import Validator


def _megabytes(size: int) -> str:
    return f"{size / (1 << 20):.1f} MB"


class SizeValidator(Validator):
    name = "size"

    def __init__(self, max_size: int = DEFAULT_MAX_PACKAGE_SIZE) -> None:
        super().__init__()
        self.max_size = max_size

    async def validate(self) -> None:
        if self.package_size <= self.max_size:
            return
        message = (
            f"Your package is {_megabytes(self.package_size)}. "
            f"Hosted packages must be smaller than {_megabytes(self.max_size)}."
        )
        if ".git" in {file.split("/", 1)[0] for file in self.files}:
            message += "\nYour .git directory is included in the package; make sure it is ignored."
        self.error(message)
