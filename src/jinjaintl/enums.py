"""Enumerations for jinja-intl option tables.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a member compares equal to the
option name a template author writes: NumberStyle.DECIMAL == "decimal".

Python 3.13+.
"""

from enum import StrEnum


class FormatStyle(StrEnum):
    """Verbosity level for the date part or the time part of a datetime.

    Shared by the date style and time style tables.
    """

    NONE = "none"
    """Omit this part entirely"""

    SHORT = "short"
    """Numeric, e.g. 10/27/25 or 2:30 PM"""

    MEDIUM = "medium"
    """Abbreviated, e.g. Oct 27, 2025 or 2:30:00 PM"""

    LONG = "long"
    """Spelled out, e.g. October 27, 2025"""

    FULL = "full"
    """Everything, e.g. Monday, October 27, 2025"""


class Calendar(StrEnum):
    """Calendar mode passed to the date formatter.

    Only "gregorian" selects GREGORIAN; every other name collapses to
    TRADITIONAL (the locale's own calendar).
    """

    GREGORIAN = "gregorian"
    TRADITIONAL = "traditional"


class NumberStyle(StrEnum):
    """Number formatter style.

    StrEnum provides automatic string conversion: str(NumberStyle.PERCENT) == "percent"
    """

    DECIMAL = "decimal"
    CURRENCY = "currency"
    PERCENT = "percent"
    SCIENTIFIC = "scientific"
    SPELLOUT = "spellout"
    ORDINAL = "ordinal"
    DURATION = "duration"


class NumberType(StrEnum):
    """Numeric type the value is coerced to before formatting."""

    DEFAULT = "default"
    """Format the value as given"""

    INT32 = "int32"
    """Truncate toward zero, signed 32-bit range"""

    INT64 = "int64"
    """Truncate toward zero, signed 64-bit range"""

    DOUBLE = "double"
    """Convert to float"""

    CURRENCY = "currency"
    """Rejected by format(); use the currency filter instead"""


class OptionKind(StrEnum):
    """Which option table a symbolic name is looked up in.

    The value is the noun used in error messages.
    """

    DATE_STYLE = "date format"
    TIME_STYLE = "time format"
    NUMBER_STYLE = "style"
    NUMBER_TYPE = "type"


__all__ = [
    "Calendar",
    "FormatStyle",
    "NumberStyle",
    "NumberType",
    "OptionKind",
]
