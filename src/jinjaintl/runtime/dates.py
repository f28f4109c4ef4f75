"""Date conversion for the localizeddate filter.

Normalizes any date-like template value into an aware datetime so the
formatter never sees naive or textual input.

Accepted inputs:
    - datetime (aware or naive)
    - date
    - int, float, Decimal: Unix timestamp in seconds
    - str: "now", a Unix timestamp ("1700000000"), or ISO 8601
    - None: the current moment

Timezone rules:
    - An explicit timezone override always wins: aware values are converted
      into it, naive values are interpreted in it.
    - Without an override, aware values keep their own zone and naive values
      are interpreted in the default timezone.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, tzinfo
from decimal import Decimal
from typing import TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from jinjaintl.errors import DateConversionError

__all__ = ["convert_date", "resolve_timezone"]

logger = logging.getLogger(__name__)

_TIMESTAMP_RE = re.compile(r"^-?\d+(\.\d+)?$")

DateInput: TypeAlias = datetime | date | int | float | Decimal | str | None


def resolve_timezone(timezone: tzinfo | str | None) -> tzinfo | None:
    """Turn a timezone argument into a tzinfo.

    Args:
        timezone: IANA zone name, tzinfo instance, or None

    Returns:
        tzinfo, or None when no timezone was given

    Raises:
        DateConversionError: If the zone name is unknown
    """
    if timezone is None or isinstance(timezone, tzinfo):
        return timezone
    if isinstance(timezone, str) and timezone:
        try:
            return ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown timezone '{timezone}'"
            raise DateConversionError(msg, input_value=timezone) from e
    msg = f"Invalid timezone {timezone!r}: expected an IANA zone name or tzinfo"
    raise DateConversionError(msg, input_value=timezone)


def convert_date(
    value: DateInput,
    timezone: tzinfo | str | None = None,
    *,
    default_timezone: tzinfo,
) -> datetime:
    """Convert a date-like value into an aware datetime.

    Args:
        value: Date-like input (see module docstring)
        timezone: Override zone; None keeps the value's own zone
        default_timezone: Zone for naive input when no override is given

    Returns:
        Timezone-aware datetime

    Raises:
        DateConversionError: If the value or the timezone cannot be understood

    Examples:
        >>> from datetime import UTC
        >>> convert_date("2025-10-27T14:30:00", default_timezone=UTC)
        datetime.datetime(2025, 10, 27, 14, 30, tzinfo=datetime.timezone.utc)
        >>> convert_date(0, "Asia/Tokyo", default_timezone=UTC).hour
        9
    """
    override = resolve_timezone(timezone)
    zone = override if override is not None else default_timezone

    if value is None:
        return datetime.now(zone)

    if isinstance(value, str):
        value = _parse_string(value, zone)

    if isinstance(value, bool):
        msg = f"Cannot convert boolean {value!r} to a date"
        raise DateConversionError(msg, input_value=value)

    if isinstance(value, int | float | Decimal):
        try:
            return datetime.fromtimestamp(float(value), tz=zone)
        except (OverflowError, OSError, ValueError) as e:
            msg = f"Timestamp {value!r} is out of range"
            raise DateConversionError(msg, input_value=value) from e

    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return value.replace(tzinfo=zone)
        if override is not None:
            return value.astimezone(override)
        return value

    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=zone)

    msg = f"Cannot convert {type(value).__name__} {value!r} to a date"
    raise DateConversionError(msg, input_value=value)


def _parse_string(text: str, zone: tzinfo) -> datetime | float:
    """Parse the textual forms accepted by convert_date()."""
    stripped = text.strip()
    if stripped.lower() == "now":
        return datetime.now(zone)
    if _TIMESTAMP_RE.match(stripped):
        return float(stripped)
    try:
        return datetime.fromisoformat(stripped)
    except ValueError as e:
        logger.debug("Rejected date string %r: %s", text, e)
        msg = f"Invalid date string '{text}': expected ISO 8601, a timestamp, or 'now'"
        raise DateConversionError(msg, input_value=text) from e
