"""Tests for the plain-function filters: localized_date, localized_number, localized_currency."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from jinjaintl.errors import DateConversionError, FormattingError, UnknownOptionError
from jinjaintl.filters import localized_currency, localized_date, localized_number
from jinjaintl.locale_utils import StaticLocaleProvider
from jinjaintl.runtime import formatters
from jinjaintl.runtime.cache import FormatterCache

MOMENT = datetime(2025, 10, 27, 14, 30, tzinfo=UTC)
EN = StaticLocaleProvider("en_US")


class TestLocalizedDate:
    """Test localized_date()."""

    def test_defaults_are_medium_medium(self) -> None:
        result = localized_date(MOMENT, locale="en_US")
        assert result.startswith("Oct 27, 2025")
        assert "2:30:00" in result

    def test_positional_arguments_follow_filter_order(self) -> None:
        assert localized_date(MOMENT, "short", "none", "en_US") == "10/27/25"

    def test_none_none(self) -> None:
        assert localized_date(MOMENT, "none", "none", "en_US") == "20251027 02:30 PM"

    def test_pattern_ignores_styles(self) -> None:
        assert localized_date(MOMENT, "full", "full", "en_US", None, "yyyy") == "2025"

    def test_styles_validated_even_with_pattern(self) -> None:
        with pytest.raises(UnknownOptionError):
            localized_date(MOMENT, "bogus", "none", "en_US", None, "yyyy")

    def test_timezone_override(self) -> None:
        result = localized_date(MOMENT, locale="en_US", timezone="Asia/Tokyo", format="HH:mm")
        assert result == "23:30"

    def test_naive_value_uses_default_timezone(self) -> None:
        result = localized_date(
            datetime(2025, 10, 27, 14, 30),
            locale="en_US",
            format="HH:mm xxx",
            default_timezone=ZoneInfo("Europe/Berlin"),
        )
        assert result == "14:30 +01:00"

    def test_aware_value_keeps_own_zone(self) -> None:
        value = datetime(2025, 10, 27, 14, 30, tzinfo=ZoneInfo("Asia/Tokyo"))
        assert localized_date(value, locale="en_US", format="HH:mm") == "14:30"

    def test_string_and_date_inputs(self) -> None:
        assert localized_date("2025-10-27T14:30:00", "short", "none", "en_US") == "10/27/25"
        assert localized_date(date(2025, 10, 27), "short", "none", "en_US") == "10/27/25"
        assert localized_date(0, "short", "none", "en_US") == "1/1/70"

    def test_locale_from_provider(self) -> None:
        result = localized_date(
            MOMENT, "long", "none", locale_provider=StaticLocaleProvider("de_DE")
        )
        assert result == "27. Oktober 2025"

    @pytest.mark.parametrize("calendar", ["buddhist", "", "Gregorian", "gregorian"])
    def test_calendar_names_all_format(self, calendar: str) -> None:
        assert localized_date(MOMENT, "short", "none", "en_US", calendar=calendar) == "10/27/25"

    def test_calendar_fallback_reaches_formatter(self) -> None:
        seen: list[Any] = []
        real = formatters.DateTimeFormatter

        def spy(*args: Any) -> formatters.DateTimeFormatter:
            seen.append(args[4])
            return real(*args)

        with patch("jinjaintl.filters.DateTimeFormatter", side_effect=spy):
            for name in ("buddhist", "japanese", "Gregorian", "gregorian"):
                localized_date(MOMENT, "short", "none", "en_US", calendar=name)
        assert [str(c) for c in seen] == ["traditional", "traditional", "traditional", "gregorian"]

    def test_new_formatter_every_call(self) -> None:
        real = formatters.DateTimeFormatter
        with patch("jinjaintl.filters.DateTimeFormatter", side_effect=real) as spy:
            localized_date(MOMENT, "short", "none", "en_US")
            localized_date(MOMENT, "short", "none", "en_US")
        assert spy.call_count == 2

    def test_unknown_date_style(self) -> None:
        with pytest.raises(UnknownOptionError, match='The date format "tiny" does not exist'):
            localized_date(MOMENT, "tiny", locale="en_US")

    def test_unknown_time_style(self) -> None:
        with pytest.raises(UnknownOptionError, match="Known time formats are"):
            localized_date(MOMENT, "short", "Short", locale="en_US")

    def test_bad_date_input(self) -> None:
        with pytest.raises(DateConversionError):
            localized_date("yesterday-ish", locale="en_US")


class TestLocalizedNumber:
    """Test localized_number()."""

    def test_decimal_en_us(self, cache: FormatterCache) -> None:
        assert localized_number(1234.5, "decimal", locale="en_US", cache=cache) == "1,234.5"

    def test_defaults_use_cache_locale(self, cache: FormatterCache) -> None:
        assert localized_number(1234.5, cache=cache) == "1,234.5"

    def test_int64_truncates(self, cache: FormatterCache) -> None:
        assert localized_number(1234.56, "decimal", "int64", "en_US", cache=cache) == "1,234"

    def test_percent(self, cache: FormatterCache) -> None:
        assert localized_number(0.256, "percent", locale="en_US", cache=cache) == "26%"

    def test_repeated_calls_share_formatter(self, cache: FormatterCache, factory: Any) -> None:
        localized_number(1, cache=cache)
        localized_number(2, cache=cache)
        localized_number(3, "decimal", "int32", cache=cache)
        assert len(factory.calls) == 1

    def test_unknown_style_builds_nothing(self, cache: FormatterCache, factory: Any) -> None:
        with pytest.raises(UnknownOptionError, match="Known styles are"):
            localized_number(1, "money", cache=cache)
        assert factory.calls == []

    def test_unknown_type_raises_even_when_cached(
        self, cache: FormatterCache, factory: Any
    ) -> None:
        localized_number(1, cache=cache)
        with pytest.raises(UnknownOptionError, match='The type "float" does not exist'):
            localized_number(1, "decimal", "float", cache=cache)
        assert len(factory.calls) == 1

    def test_currency_type_rejected(self, cache: FormatterCache) -> None:
        with pytest.raises(FormattingError):
            localized_number(1, "decimal", "currency", cache=cache)


class TestLocalizedCurrency:
    """Test localized_currency()."""

    def test_usd(self, cache: FormatterCache) -> None:
        result = localized_currency(19.99, "USD", "en_US", cache=cache)
        assert "$19.99" in result

    def test_default_currency_from_locale(self, cache: FormatterCache) -> None:
        assert localized_currency(19.99, cache=cache) == "$19.99"

    def test_language_only_locale_uses_likely_currency(self, cache: FormatterCache) -> None:
        assert localized_currency(5, None, "en", cache=cache) == "$5.00"
        assert localized_number(5, "currency", locale="en", cache=cache) == "$5.00"

    def test_shares_slot_with_number_filter(self, cache: FormatterCache, factory: Any) -> None:
        localized_number(5, "currency", cache=cache)
        localized_currency(5, "EUR", cache=cache)
        assert len(factory.calls) == 1

    def test_switching_from_decimal_rebuilds(self, cache: FormatterCache, factory: Any) -> None:
        localized_number(5, cache=cache)
        localized_currency(5, "EUR", cache=cache)
        assert [str(style) for _, style in factory.calls] == ["decimal", "currency"]

    def test_none_amount_not_rendered_as_zero(self, cache: FormatterCache) -> None:
        with pytest.raises(FormattingError):
            localized_currency(None, "USD", "en_US", cache=cache)

    def test_babel_errors_propagate(self, cache: FormatterCache) -> None:
        with pytest.raises(Exception) as exc_info:  # noqa: PT011
            localized_currency("not money", "USD", "en_US", cache=cache)
        assert not isinstance(exc_info.value, FormattingError)
