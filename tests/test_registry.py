"""Tests for the ordered validator registry."""

from __future__ import annotations

from pub_validator.config import Settings
from pub_validator.registry import VALIDATORS, default_validators
from pub_validator.validators import NameValidator, SizeValidator


class TestDefaultValidators:
    def test_one_factory_per_check_in_registration_order(self) -> None:
        validators = [factory() for factory in default_validators(Settings())]
        assert [type(validator) for validator in validators] == list(VALIDATORS)

    def test_size_limit_comes_from_settings(self) -> None:
        factories = default_validators(Settings(max_package_size=42))
        size = factories[VALIDATORS.index(SizeValidator)]()
        assert isinstance(size, SizeValidator)
        assert size.max_size == 42

    def test_defaults_without_settings(self) -> None:
        factories = default_validators()
        size = factories[VALIDATORS.index(SizeValidator)]()
        assert size.max_size == Settings().max_package_size

    def test_plain_checks_are_their_own_factories(self) -> None:
        assert default_validators()[VALIDATORS.index(NameValidator)] is NameValidator
