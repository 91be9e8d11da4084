"""Tests for the validator contract."""

from __future__ import annotations

import pytest

from pub_validator.errors import ValidatorStateError
from pub_validator.parsers.semver import Version
from pub_validator.validator import Diagnostics, Validator


class RecordingValidator(Validator):
    name = "recording"

    async def validate(self) -> None:
        self.error("an error")
        self.warning("a warning")
        self.hint("a hint")
        self.hint("another hint")


class ScopedValidator(Validator):
    name = "scoped"

    async def validate(self) -> None:
        for file in self.files_beneath("bin", recursive=False):
            self.hint(file)


class FeatureValidator(Validator):
    name = "feature"

    async def validate(self) -> None:
        self.validate_sdk_constraint(Version(3, 2, 0), "Feature needs a newer SDK.")


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_run_returns_immutable_diagnostics(self, make_context) -> None:
        validator = RecordingValidator()
        validator.bind(make_context())
        result = await validator.run()
        assert result == Diagnostics(
            errors=("an error",),
            warnings=("a warning",),
            hints=("a hint", "another hint"),
        )

    @pytest.mark.asyncio
    async def test_run_requires_binding(self) -> None:
        with pytest.raises(ValidatorStateError):
            await RecordingValidator().run()

    def test_bind_only_once(self, make_context) -> None:
        context = make_context()
        validator = RecordingValidator()
        validator.bind(context)
        with pytest.raises(ValidatorStateError):
            validator.bind(context)

    @pytest.mark.asyncio
    async def test_run_only_once(self, make_context) -> None:
        validator = RecordingValidator()
        validator.bind(make_context())
        await validator.run()
        with pytest.raises(ValidatorStateError):
            await validator.run()

    def test_context_accessors(self, make_context) -> None:
        context = make_context(package_size=42)
        validator = RecordingValidator()
        validator.bind(context)
        assert validator.package is context.package
        assert validator.cache is context.cache
        assert validator.package_size == 42
        assert validator.server_url == "https://pub.example"
        assert validator.files == context.files
        assert validator.sdk_version == Version(3, 5, 0)


class TestHelpers:
    @pytest.mark.asyncio
    async def test_files_beneath_uses_package_directory(self, make_context) -> None:
        validator = ScopedValidator()
        validator.bind(make_context(files={"bin/a.dart": "", "bin/x/b.dart": "", "lib/c.dart": ""}))
        result = await validator.run()
        assert result.hints == ("bin/a.dart",)

    @pytest.mark.asyncio
    async def test_validate_sdk_constraint_records_error(self, make_context) -> None:
        validator = FeatureValidator()
        validator.bind(make_context())
        result = await validator.run()
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Feature needs a newer SDK.\n")
        assert result.errors[0].endswith('sdk: "^3.2.0"')

    @pytest.mark.asyncio
    async def test_validate_sdk_constraint_silent_when_satisfied(self, make_context) -> None:
        pubspec = {"name": "my_package", "environment": {"sdk": "^3.2.0"}}
        validator = FeatureValidator()
        validator.bind(make_context(pubspec))
        result = await validator.run()
        assert result.errors == ()
