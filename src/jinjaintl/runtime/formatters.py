"""Babel-backed date and number formatters.

These classes are the internationalization collaborator the filters talk
to. Each is constructed for one configuration (locale, styles, zone) and
exposes a narrow format() surface, so the filters never call Babel directly.

Architecture:
    - DateTimeFormatter: built per call by the date filter (never cached)
    - NumberFormatter: memoized by FormatterCache, shared by the number and
      currency filters
    - Locale data comes from Babel (CLDR); no use of Python's locale module
    - Babel is imported lazily so a missing install surfaces as
      IntlUnavailableError at extension setup, not at import time

Error Policy:
    - Babel errors (UnknownLocaleError, ValueError, InvalidOperation, ...)
      propagate unchanged
    - Local contract violations raise FormattingError

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime, timedelta, tzinfo
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, TypeAlias

from jinjaintl.constants import (
    FALLBACK_CURRENCY,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    NONE_STYLE_PATTERN,
)
from jinjaintl.core.babel_compat import get_babel_core, get_babel_dates, get_babel_numbers
from jinjaintl.enums import Calendar, FormatStyle, NumberStyle, NumberType
from jinjaintl.errors import FormattingError
from jinjaintl.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateTimeFormatter", "NumberFormatter"]

logger = logging.getLogger(__name__)

NumberInput: TypeAlias = int | float | Decimal | str


@functools.cache
def _warn_traditional_calendar(locale_code: str) -> None:
    """Log once per locale that Babel renders the Gregorian calendar only."""
    logger.warning(
        "Traditional calendar requested for locale '%s'; "
        "Babel implements the Gregorian calendar only",
        locale_code,
    )


class DateTimeFormatter:
    """Format datetimes for one locale, style pair, zone, and calendar.

    Args:
        locale: Locale identifier (BCP-47 or POSIX)
        date_style: Verbosity of the date part
        time_style: Verbosity of the time part
        tzinfo: Zone the output is rendered in
        calendar: Calendar mode (default: GREGORIAN)
        pattern: CLDR date pattern overriding both styles

    Raises:
        babel.core.UnknownLocaleError: If the locale is not known to CLDR

    Examples:
        >>> from datetime import UTC, datetime
        >>> fmt = DateTimeFormatter("en_US", FormatStyle.SHORT, FormatStyle.NONE, UTC)
        >>> fmt.format(datetime(2025, 10, 27, 14, 30, tzinfo=UTC))
        '10/27/25'
        >>> fmt = DateTimeFormatter("en_US", FormatStyle.NONE, FormatStyle.NONE, UTC,
        ...                         pattern="yyyy-MM-dd")
        >>> fmt.format(datetime(2025, 10, 27, 14, 30, tzinfo=UTC))
        '2025-10-27'
    """

    __slots__ = ("_babel_locale", "calendar", "date_style", "locale", "pattern", "time_style",
                 "tzinfo")

    def __init__(
        self,
        locale: str,
        date_style: FormatStyle,
        time_style: FormatStyle,
        tzinfo: tzinfo,
        calendar: Calendar = Calendar.GREGORIAN,
        pattern: str | None = None,
    ) -> None:
        self.locale = locale
        self.date_style = date_style
        self.time_style = time_style
        self.tzinfo = tzinfo
        self.calendar = calendar
        self.pattern = pattern
        self._babel_locale: Locale = get_babel_locale(locale)
        if calendar is Calendar.TRADITIONAL:
            _warn_traditional_calendar(locale)

    def format(self, value: datetime) -> str:
        """Format an aware datetime in this formatter's zone."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=self.tzinfo)
        value = value.astimezone(self.tzinfo)
        loc = self._babel_locale
        dates = get_babel_dates()

        if self.pattern is not None:
            return str(
                dates.format_datetime(
                    value, format=self.pattern, tzinfo=self.tzinfo, locale=loc
                )
            )

        if self.date_style is FormatStyle.NONE and self.time_style is FormatStyle.NONE:
            return str(
                dates.format_datetime(
                    value, format=NONE_STYLE_PATTERN, tzinfo=self.tzinfo, locale=loc
                )
            )

        if self.time_style is FormatStyle.NONE:
            return str(dates.format_date(value, format=self.date_style.value, locale=loc))

        time_str = str(
            dates.format_time(
                value, format=self.time_style.value, tzinfo=self.tzinfo, locale=loc
            )
        )
        if self.date_style is FormatStyle.NONE:
            return time_str

        date_str = str(dates.format_date(value, format=self.date_style.value, locale=loc))
        # CLDR glue pattern: {1} is the date, {0} the time
        glue = (
            loc.datetime_formats.get(self.date_style.value)
            or loc.datetime_formats.get("medium")
            or "{1} {0}"
        )
        return str(glue).replace("'", "").replace("{0}", time_str).replace("{1}", date_str)

    def __repr__(self) -> str:
        return (
            f"DateTimeFormatter(locale={self.locale!r}, date_style={self.date_style!r}, "
            f"time_style={self.time_style!r}, tzinfo={self.tzinfo!r}, "
            f"calendar={self.calendar!r}, pattern={self.pattern!r})"
        )


class NumberFormatter:
    """Format numbers for one locale and one style.

    The locale attribute keeps the identifier exactly as given so the cache
    can compare it with the next request without normalization.

    Examples:
        >>> NumberFormatter("en_US", NumberStyle.DECIMAL).format(1234.5)
        '1,234.5'
        >>> NumberFormatter("de_DE", NumberStyle.DECIMAL).format(1234.5)
        '1.234,5'
        >>> NumberFormatter("en_US", NumberStyle.CURRENCY).format_currency(19.99, "USD")
        '$19.99'
        >>> NumberFormatter("en_US", NumberStyle.ORDINAL).format(22)
        '22nd'
    """

    __slots__ = ("_babel_locale", "locale", "style")

    def __init__(self, locale: str, style: NumberStyle) -> None:
        self.locale = locale
        self.style = style
        self._babel_locale: Locale = get_babel_locale(locale)

    @property
    def default_currency(self) -> str:
        """Primary legal-tender currency of the locale's territory.

        A locale without a territory uses its CLDR likely territory, so "en"
        resolves to USD and "ja" to JPY.
        """
        territory = self._babel_locale.territory or _likely_territory(self._babel_locale)
        if territory:
            currencies = get_babel_numbers().get_territory_currencies(territory)
            if currencies:
                return str(currencies[0])
        return FALLBACK_CURRENCY

    def format(self, value: NumberInput, type: NumberType = NumberType.DEFAULT) -> str:  # noqa: A002
        """Format a number in this formatter's style.

        Args:
            value: Number to format
            type: Numeric coercion applied before formatting

        Raises:
            FormattingError: For type "currency", or an integer type whose
                range the value exceeds
        """
        number = _coerce(value, type)
        loc = self._babel_locale
        numbers = get_babel_numbers()

        match self.style:
            case NumberStyle.DECIMAL:
                return str(numbers.format_decimal(number, locale=loc))
            case NumberStyle.CURRENCY:
                return str(
                    numbers.format_currency(number, self.default_currency, locale=loc)
                )
            case NumberStyle.PERCENT:
                return str(numbers.format_percent(number, locale=loc))
            case NumberStyle.SCIENTIFIC:
                return str(numbers.format_scientific(number, locale=loc))
            case NumberStyle.SPELLOUT:
                return self._format_spellout(number)
            case NumberStyle.ORDINAL:
                return self._format_ordinal(number)
            case NumberStyle.DURATION:
                return self._format_duration(number)

    def format_currency(self, value: NumberInput | None, currency: str | None = None) -> str:
        """Format an amount in a currency.

        Args:
            value: Amount; None is rejected rather than treated as zero
            currency: ISO 4217 code; None uses the locale's territory currency

        Raises:
            FormattingError: If value is None
        """
        if value is None:
            msg = "Cannot format a missing amount as currency"
            raise FormattingError(msg)
        code = currency if currency is not None else self.default_currency
        return str(get_babel_numbers().format_currency(value, code, locale=self._babel_locale))

    def _format_ordinal(self, number: int | float | Decimal) -> str:
        loc = self._babel_locale
        n = int(number)
        digits = str(get_babel_numbers().format_decimal(n, locale=loc))
        template = _ORDINAL_TEMPLATES.get(loc.language)
        if template is None:
            return f"{digits}." if loc.language in _ORDINAL_DOT_LANGUAGES else digits
        return template.get(loc.ordinal_form(abs(n)), template["other"]).format(digits)

    def _format_spellout(self, number: int | float | Decimal) -> str:
        if self._babel_locale.language != "en":
            logger.warning(
                "No spell-out rules for locale '%s'; falling back to decimal", self.locale
            )
            return str(get_babel_numbers().format_decimal(number, locale=self._babel_locale))
        return _spell_english(Decimal(str(number)))

    def _format_duration(self, number: int | float | Decimal) -> str:
        total = int(number)
        sign = "-" if total < 0 else ""
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        if hours:
            grouped = get_babel_numbers().format_decimal(hours, locale=self._babel_locale)
            return f"{sign}{grouped}:{minutes:02d}:{seconds:02d}"
        if minutes:
            return f"{sign}{minutes}:{seconds:02d}"
        return sign + str(
            get_babel_dates().format_timedelta(
                timedelta(seconds=seconds),
                threshold=1,
                format="short",
                locale=self._babel_locale,
            )
        )

    def __repr__(self) -> str:
        return f"NumberFormatter(locale={self.locale!r}, style={self.style!r})"


def _likely_territory(loc: Locale) -> str | None:
    """Territory of the CLDR likely-subtags expansion of a language."""
    core = get_babel_core()
    likely_subtags = core.get_global("likely_subtags")
    keys = [f"{loc.language}_{loc.script}", loc.language] if loc.script else [loc.language]
    for key in keys:
        expanded = likely_subtags.get(key)
        if expanded:
            territory: str | None = core.parse_locale(expanded)[1]
            return territory
    return None


_ORDINAL_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {"one": "{}st", "two": "{}nd", "few": "{}rd", "other": "{}th"},
    "fr": {"one": "{}er", "other": "{}e"},
    "es": {"other": "{}.º"},
    "it": {"other": "{}º"},
    "pt": {"other": "{}º"},
    "ru": {"other": "{}-й"},
    "ja": {"other": "第{}"},
    "zh": {"other": "第{}"},
    "ko": {"other": "제{}"},
}

_ORDINAL_DOT_LANGUAGES = frozenset(
    {"cs", "da", "de", "et", "fi", "hr", "hu", "is", "lv", "nb", "no", "pl", "sk", "sl", "sr"}
)


def _coerce(value: NumberInput, type: NumberType) -> int | float | Decimal:  # noqa: A002
    """Apply a NumberType to a value."""
    match type:
        case NumberType.DEFAULT:
            if isinstance(value, str):
                return Decimal(value.strip())
            return value
        case NumberType.DOUBLE:
            return float(value)
        case NumberType.INT32:
            return _truncate(value, INT32_MIN, INT32_MAX, "int32")
        case NumberType.INT64:
            return _truncate(value, INT64_MIN, INT64_MAX, "int64")
        case NumberType.CURRENCY:
            msg = "Type 'currency' is not supported by format(); use localizedcurrency"
            raise FormattingError(msg)


def _truncate(value: NumberInput, low: int, high: int, name: str) -> int:
    try:
        number = int(Decimal(value.strip()) if isinstance(value, str) else value)
    except (ValueError, OverflowError, InvalidOperation) as e:
        msg = f"Cannot convert {value!r} to {name}"
        raise FormattingError(msg) from e
    if not low <= number <= high:
        msg = f"Value {value!r} is out of {name} range"
        raise FormattingError(msg)
    return number


_ONES = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_SCALES = (
    (10**18, "quintillion"),
    (10**15, "quadrillion"),
    (10**12, "trillion"),
    (10**9, "billion"),
    (10**6, "million"),
    (1000, "thousand"),
    (100, "hundred"),
)


def _spell_english(number: Decimal) -> str:
    """Spell out a number in English words.

    >>> _spell_english(Decimal("-1234.5"))
    'minus one thousand two hundred thirty-four point five'
    """
    if number.is_nan():
        return "not a number"
    if number.is_infinite():
        return "minus infinity" if number.is_signed() else "infinity"
    if number < 0:
        return "minus " + _spell_english(-number)
    integral = int(number)
    words = _spell_integer(integral)
    fraction = number - integral
    if fraction:
        digits = format(fraction.normalize(), "f").split(".")[1]
        words += " point " + " ".join(_ONES[int(d)] for d in digits)
    return words


def _spell_integer(n: int) -> str:
    if n < 20:
        return _ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] + (f"-{_ONES[ones]}" if ones else "")
    for scale, name in _SCALES:
        if n >= scale:
            head, rest = divmod(n, scale)
            words = f"{_spell_integer(head)} {name}"
            return f"{words} {_spell_integer(rest)}" if rest else words
    raise AssertionError(n)  # unreachable: n >= 100 always matches a scale
