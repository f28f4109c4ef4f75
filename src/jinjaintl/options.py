"""Option tables mapping template option names to formatter enumerants.

Each table is total over a closed StrEnum. Lookup never raises: it returns a
(member, error) pair, mirroring the (result, errors) convention of the parse
APIs. Callers decide whether an error value becomes an exception.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from .enums import Calendar, FormatStyle, NumberStyle, NumberType, OptionKind
from .errors import UnknownOptionError

__all__ = [
    "OPTION_TABLES",
    "known_names",
    "parse_option",
    "require_option",
    "resolve_calendar",
]

OPTION_TABLES: Mapping[OptionKind, type[StrEnum]] = MappingProxyType(
    {
        OptionKind.DATE_STYLE: FormatStyle,
        OptionKind.TIME_STYLE: FormatStyle,
        OptionKind.NUMBER_STYLE: NumberStyle,
        OptionKind.NUMBER_TYPE: NumberType,
    }
)


def known_names(kind: OptionKind) -> tuple[str, ...]:
    """Return the valid option names for a table, in declaration order."""
    return tuple(member.value for member in OPTION_TABLES[kind])


def _lookup(kind: OptionKind, name: object) -> StrEnum | None:
    if not isinstance(name, str):
        return None
    try:
        return OPTION_TABLES[kind](name)
    except ValueError:
        return None


def parse_option(
    kind: OptionKind, name: object
) -> tuple[StrEnum | None, UnknownOptionError | None]:
    """Look up a symbolic option name in its table.

    Matching is exact: no case folding or whitespace stripping.

    Args:
        kind: Which table to consult
        name: Name supplied by the template author

    Returns:
        (member, None) on success, (None, error) for an unknown name.

    Examples:
        >>> parse_option(OptionKind.NUMBER_STYLE, "percent")
        (<NumberStyle.PERCENT: 'percent'>, None)
        >>> member, error = parse_option(OptionKind.NUMBER_TYPE, "int16")
        >>> member is None, error.value
        (True, 'int16')
    """
    member = _lookup(kind, name)
    if member is not None:
        return member, None
    return None, UnknownOptionError(str(kind), name, known_names(kind))


def require_option(kind: OptionKind, name: object) -> StrEnum:
    """Look up an option name, raising on failure.

    Raises:
        UnknownOptionError: If name is not in the table
    """
    member = _lookup(kind, name)
    if member is None:
        raise UnknownOptionError(str(kind), name, known_names(kind))
    return member


def resolve_calendar(name: object) -> Calendar:
    """Map a calendar name onto a calendar mode.

    Exactly "gregorian" selects the Gregorian calendar. Any other value,
    including "Gregorian", "" and None, selects the traditional calendar.

    Examples:
        >>> resolve_calendar("gregorian")
        <Calendar.GREGORIAN: 'gregorian'>
        >>> resolve_calendar("buddhist")
        <Calendar.TRADITIONAL: 'traditional'>
    """
    if name == Calendar.GREGORIAN.value:
        return Calendar.GREGORIAN
    return Calendar.TRADITIONAL
