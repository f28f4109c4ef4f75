"""jinja-intl - locale-aware date, number, and currency filters for Jinja2.

Registers three filters on a Jinja2 Environment and formats values with
Babel (CLDR locale data).

Public API:
    IntlExtension - Jinja2 extension registering the filters
    localized_date - Format a date-like value (filter: localizeddate)
    localized_number - Format a number (filter: localizednumber)
    localized_currency - Format an amount of money (filter: localizedcurrency)
    FormatterCache - Single-slot number formatter cache
    IntlConfig - Environment defaults (locale, timezone)

Exceptions:
    IntlError - Base exception class
    UnknownOptionError - Unknown style/type/format name
    FormattingError - Value cannot be formatted under the requested options
    DateConversionError - Date input or timezone cannot be understood
    IntlUnavailableError - Babel is not installed

Submodules:
    jinjaintl.enums - Closed option enumerations
    jinjaintl.options - Option table lookup
    jinjaintl.runtime - Formatters, cache, and date conversion
    jinjaintl.locale_utils - Locale normalization and default-locale providers
"""

from .config import IntlConfig
from .core.babel_compat import IntlUnavailableError
from .errors import DateConversionError, FormattingError, IntlError, UnknownOptionError
from .extension import IntlExtension
from .filters import localized_currency, localized_date, localized_number
from .runtime.cache import FormatterCache

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jinja-intl")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateConversionError",
    "FormatterCache",
    "FormattingError",
    "IntlConfig",
    "IntlError",
    "IntlExtension",
    "IntlUnavailableError",
    "UnknownOptionError",
    "__version__",
    "localized_currency",
    "localized_date",
    "localized_number",
]
