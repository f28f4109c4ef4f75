"""Formatting runtime: Babel-backed formatters, the formatter cache, and date conversion.

Python 3.13+.
"""

from .cache import FormatterCache, FormatterFactory
from .dates import convert_date, resolve_timezone
from .formatters import DateTimeFormatter, NumberFormatter

__all__ = [
    "DateTimeFormatter",
    "FormatterCache",
    "FormatterFactory",
    "NumberFormatter",
    "convert_date",
    "resolve_timezone",
]
