"""Check that the package name is a valid identifier."""

from __future__ import annotations

import re

from ..validator import Validator

_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

RESERVED_WORDS = frozenset(
    {
        "abstract", "as", "assert", "async", "await", "break", "case", "catch",
        "class", "const", "continue", "covariant", "default", "deferred", "do",
        "dynamic", "else", "enum", "export", "extends", "extension", "external",
        "factory", "false", "final", "finally", "for", "function", "get", "hide",
        "if", "implements", "import", "in", "interface", "is", "late", "library",
        "mixin", "new", "null", "of", "on", "operator", "part", "required",
        "rethrow", "return", "set", "show", "static", "super", "switch", "sync",
        "this", "throw", "true", "try", "typedef", "var", "void", "while", "with",
        "yield",
    }
)


class NameValidator(Validator):
    name = "name"

    async def validate(self) -> None:
        package_name = self.package.name
        if not _IDENTIFIER.fullmatch(package_name):
            self.error(
                f'The package name "{package_name}" isn\'t a valid Dart identifier.\n'
                "Use only letters, digits and underscores, and don't start with a digit."
            )
        elif package_name in RESERVED_WORDS:
            self.error(f'The package name "{package_name}" is a reserved word.')
        elif package_name.lower() != package_name:
            self.warning(
                f'The package name "{package_name}" should be lower-case.\n'
                "Use underscores to separate words, e.g. my_package."
            )
