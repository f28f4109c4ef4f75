"""Shared constants for jinja-intl.

Centralizes filter names, option defaults, and numeric bounds so the filters,
the extension, and the tests agree on a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Filter names
    "FILTER_LOCALIZED_DATE",
    "FILTER_LOCALIZED_NUMBER",
    "FILTER_LOCALIZED_CURRENCY",
    # Option defaults
    "DEFAULT_DATE_STYLE",
    "DEFAULT_TIME_STYLE",
    "DEFAULT_CALENDAR",
    "DEFAULT_NUMBER_STYLE",
    "DEFAULT_NUMBER_TYPE",
    # Locale and timezone fallbacks
    "FALLBACK_LOCALE",
    "DEFAULT_TIMEZONE",
    "FALLBACK_CURRENCY",
    # Formatting
    "NONE_STYLE_PATTERN",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
]

# ============================================================================
# FILTER NAMES
# ============================================================================
#
# Templates reference these names directly; renaming breaks every template.

FILTER_LOCALIZED_DATE: str = "localizeddate"
FILTER_LOCALIZED_NUMBER: str = "localizednumber"
FILTER_LOCALIZED_CURRENCY: str = "localizedcurrency"

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

DEFAULT_DATE_STYLE: str = "medium"
DEFAULT_TIME_STYLE: str = "medium"
DEFAULT_CALENDAR: str = "gregorian"
DEFAULT_NUMBER_STYLE: str = "decimal"
DEFAULT_NUMBER_TYPE: str = "default"

# ============================================================================
# LOCALE AND TIMEZONE FALLBACKS
# ============================================================================

# Used when neither Babel nor the OS can name a default locale
FALLBACK_LOCALE: str = "en_US"

# Naive datetimes are interpreted in this zone unless configured otherwise
DEFAULT_TIMEZONE: str = "UTC"

# ISO 4217 "no currency" code, used when a locale has no territory currency
FALLBACK_CURRENCY: str = "XXX"

# ============================================================================
# FORMATTING
# ============================================================================

# ICU renders date style NONE + time style NONE with this skeleton
NONE_STYLE_PATTERN: str = "yyyyMMdd hh:mm a"

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
