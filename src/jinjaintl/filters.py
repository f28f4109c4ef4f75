"""Localized formatting filters with Python-native APIs.

Implements localizeddate, localizednumber, and localizedcurrency as plain
functions. Collaborators (formatter cache, locale provider, default zone)
are keyword-only parameters; IntlExtension binds them per environment.

Architecture:
    - Option names are validated against closed tables before formatting
    - Number and currency share one FormatterCache slot
    - Date formatters are rebuilt on every call
    - Uses snake_case parameters (PEP 8); positional use from templates
      matches the historical argument order

Example:
    # Python API:
    localized_number(1234.5, "decimal", locale="en_US", cache=cache)

    # Template:
    {{ amount|localizednumber('decimal', 'default', 'en_US') }}

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

from datetime import UTC, tzinfo
from decimal import Decimal

from .constants import (
    DEFAULT_CALENDAR,
    DEFAULT_DATE_STYLE,
    DEFAULT_NUMBER_STYLE,
    DEFAULT_NUMBER_TYPE,
    DEFAULT_TIME_STYLE,
)
from .enums import FormatStyle, NumberStyle, NumberType, OptionKind
from .locale_utils import LocaleProvider, SystemLocaleProvider
from .options import require_option, resolve_calendar
from .runtime.cache import FormatterCache
from .runtime.dates import DateInput, convert_date
from .runtime.formatters import DateTimeFormatter

__all__ = ["localized_currency", "localized_date", "localized_number"]


def localized_date(  # noqa: PLR0913
    value: DateInput,
    date_format: str = DEFAULT_DATE_STYLE,
    time_format: str = DEFAULT_TIME_STYLE,
    locale: str | None = None,
    timezone: tzinfo | str | None = None,
    format: str | None = None,  # noqa: A002
    calendar: str = DEFAULT_CALENDAR,
    *,
    locale_provider: LocaleProvider | None = None,
    default_timezone: tzinfo = UTC,
) -> str:
    """Format a date-like value with locale-specific formatting.

    Args:
        value: datetime, date, timestamp, ISO 8601 string, "now", or None
        date_format: Date style: none, short, medium, long, full
        time_format: Time style: none, short, medium, long, full
        locale: Locale identifier; None uses locale_provider's default
        timezone: Zone to render in; None keeps the value's own zone
        format: CLDR pattern overriding date_format and time_format
        calendar: "gregorian", or anything else for the traditional calendar
        locale_provider: Default-locale source (default: process locale)
        default_timezone: Zone for naive input when timezone is None

    Returns:
        Formatted date string

    Raises:
        DateConversionError: If value or timezone cannot be understood
        UnknownOptionError: If date_format or time_format is unknown

    Examples:
        >>> from datetime import UTC, datetime
        >>> dt = datetime(2025, 10, 27, 14, 30, tzinfo=UTC)
        >>> localized_date(dt, "short", "none", "en_US")
        '10/27/25'
        >>> localized_date(dt, "long", "none", "de_DE")
        '27. Oktober 2025'
        >>> localized_date(dt, locale="en_US", format="yyyy-MM-dd HH:mm")
        '2025-10-27 14:30'
    """
    moment = convert_date(value, timezone, default_timezone=default_timezone)
    date_style = FormatStyle(require_option(OptionKind.DATE_STYLE, date_format))
    time_style = FormatStyle(require_option(OptionKind.TIME_STYLE, time_format))

    if locale is None:
        locale = (locale_provider or SystemLocaleProvider()).default_locale()

    formatter = DateTimeFormatter(
        locale,
        date_style,
        time_style,
        moment.tzinfo or default_timezone,
        resolve_calendar(calendar),
        format,
    )
    return formatter.format(moment)


def localized_number(
    value: int | float | Decimal | str,
    style: str = DEFAULT_NUMBER_STYLE,
    type: str = DEFAULT_NUMBER_TYPE,  # noqa: A002
    locale: str | None = None,
    *,
    cache: FormatterCache,
) -> str:
    """Format a number in a locale-specific style.

    Args:
        value: Number to format
        style: decimal, currency, percent, scientific, spellout, ordinal, duration
        type: default, int32, int64, double, currency
        locale: Locale identifier; None uses the cache's default locale
        cache: Formatter cache shared with localized_currency

    Returns:
        Formatted number string

    Raises:
        UnknownOptionError: If style or type is unknown
        FormattingError: If the value does not fit the requested type

    Examples:
        >>> from jinjaintl.runtime.cache import FormatterCache
        >>> cache = FormatterCache()
        >>> localized_number(1234.5, locale="en_US", cache=cache)
        '1,234.5'
        >>> localized_number(0.256, "percent", locale="en_US", cache=cache)
        '26%'
        >>> localized_number(1234.56, "decimal", "int64", "en_US", cache=cache)
        '1,234'
    """
    formatter = cache.get_or_create(style, locale)
    number_type = NumberType(require_option(OptionKind.NUMBER_TYPE, type))
    return formatter.format(value, number_type)


def localized_currency(
    value: int | float | Decimal | str | None,
    currency: str | None = None,
    locale: str | None = None,
    *,
    cache: FormatterCache,
) -> str:
    """Format an amount of money.

    Args:
        value: Amount; None raises instead of rendering zero
        currency: ISO 4217 code; None uses the locale's territory currency
        locale: Locale identifier; None uses the cache's default locale
        cache: Formatter cache shared with localized_number

    Returns:
        Formatted currency string

    Raises:
        FormattingError: If value is None

    Examples:
        >>> from jinjaintl.runtime.cache import FormatterCache
        >>> cache = FormatterCache()
        >>> localized_currency(19.99, "USD", "en_US", cache=cache)
        '$19.99'
        >>> localized_currency(1234.5, "EUR", "de_DE", cache=cache)
        '1.234,50\\xa0€'
    """
    formatter = cache.get_or_create(NumberStyle.CURRENCY.value, locale)
    return formatter.format_currency(value, currency)
