"""Tests for IntlConfig validation and derived objects."""

from __future__ import annotations

import dataclasses
from zoneinfo import ZoneInfo

import pytest

from jinjaintl.config import IntlConfig
from jinjaintl.locale_utils import StaticLocaleProvider, SystemLocaleProvider


class TestIntlConfig:
    def test_defaults(self) -> None:
        config = IntlConfig()
        assert config.default_locale is None
        assert config.default_timezone == "UTC"
        assert config.tzinfo == ZoneInfo("UTC")

    def test_is_frozen(self) -> None:
        config = IntlConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_locale = "en_US"  # type: ignore[misc]

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown default_timezone 'Mars/Olympus'"):
            IntlConfig(default_timezone="Mars/Olympus")

    def test_empty_locale_rejected(self) -> None:
        with pytest.raises(ValueError, match="default_locale"):
            IntlConfig(default_locale="")

    def test_locale_provider_static_when_configured(self) -> None:
        provider = IntlConfig(default_locale="de_DE").locale_provider()
        assert isinstance(provider, StaticLocaleProvider)
        assert provider.default_locale() == "de_DE"

    def test_locale_provider_system_when_unset(self) -> None:
        assert isinstance(IntlConfig().locale_provider(), SystemLocaleProvider)

    def test_tzinfo_matches_zone_name(self) -> None:
        assert IntlConfig(default_timezone="Europe/Riga").tzinfo == ZoneInfo("Europe/Riga")
