"""Check the pubspec's descriptive fields."""

from __future__ import annotations

from collections.abc import Iterable

from jsonschema import Draft202012Validator

from ..validator import Validator

_URL = {"type": "string", "pattern": "^https?://"}

PUBSPEC_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "version", "description"],
    "properties": {
        "name": {"type": "string"},
        "version": {"type": "string"},
        "description": {"type": "string", "minLength": 1},
        "homepage": _URL,
        "repository": _URL,
        "issue_tracker": _URL,
        "documentation": _URL,
        "funding": {"type": "array", "items": _URL},
        "topics": {
            "type": "array",
            "maxItems": 5,
            "items": {"type": "string", "pattern": "^[a-z][a-z0-9-]*[a-z0-9]$"},
        },
    },
}

MIN_DESCRIPTION_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 180


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


class PubspecFieldValidator(Validator):
    name = "pubspec_field"

    _schema_validator = Draft202012Validator(PUBSPEC_SCHEMA)

    async def validate(self) -> None:
        pubspec = self.package.pubspec
        errors = sorted(
            self._schema_validator.iter_errors(dict(pubspec)),
            key=lambda e: ([str(p) for p in e.path], e.message),
        )
        if errors:
            self.error("Your pubspec.yaml has invalid fields:\n" + _format_errors(errors))

        if "homepage" not in pubspec and "repository" not in pubspec:
            self.warning(
                'Your pubspec.yaml is missing a "homepage" or "repository" field.\n'
                "Add one so users can find out more about your package."
            )

        description = pubspec.get("description")
        if isinstance(description, str) and description:
            length = len(description.strip())
            if length < MIN_DESCRIPTION_LENGTH:
                self.hint(
                    f"The description is {length} characters long. Consider writing "
                    f"at least {MIN_DESCRIPTION_LENGTH} characters describing what the package does."
                )
            elif length > MAX_DESCRIPTION_LENGTH:
                self.hint(
                    f"The description is {length} characters long. Search engines "
                    f"display only the first part; keep it under {MAX_DESCRIPTION_LENGTH} characters."
                )
