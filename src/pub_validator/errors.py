"""Exception hierarchy shared by the validation engine and its collaborators."""

from __future__ import annotations


class PubValidatorError(RuntimeError):
    """Base error for failures that abort a validation run."""


class ConfigError(PubValidatorError):
    """Raised when the configuration file cannot be loaded or is invalid."""


class ManifestError(PubValidatorError):
    """Raised when a package's pubspec.yaml cannot be read or understood."""


class PackageCacheError(PubValidatorError):
    """Raised when dependency metadata cannot be fetched from the registry."""


class ValidatorStateError(PubValidatorError):
    """Raised when a validator is bound or run out of lifecycle order."""


class ValidatorFault(PubValidatorError):
    """Raised when a check crashes instead of recording a diagnostic.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, validator: str, cause: BaseException) -> None:
        super().__init__(f"Validator '{validator}' failed: {cause!r}")
        self.validator = validator
